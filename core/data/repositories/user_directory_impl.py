"""Read-only user lookup backed by the users table."""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import async_sessionmaker

from core.domain.entities.order import UserRef
from core.domain.repositories.order_repository import UserDirectory

from ..models import UserModel

logger = logging.getLogger(__name__)


class SqlAlchemyUserDirectory(UserDirectory):
    """User lookup in its own short-lived session, like the product catalog."""

    def __init__(self, session_factory: async_sessionmaker) -> None:
        self._session_factory = session_factory

    async def get(self, user_id: str) -> Optional[UserRef]:
        async with self._session_factory() as session:
            row = (
                await session.execute(
                    select(UserModel.id, UserModel.name).where(UserModel.id == user_id)
                )
            ).one_or_none()

        if row is None:
            logger.info(f"User not found: {user_id}")
            return None

        return UserRef(id=row.id, name=row.name)
