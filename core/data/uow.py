"""Unit of Work: one session, one transaction, one ExecutionID."""

import logging
from typing import Dict, Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.domain.value_objects import ExecutionID

from .mappers import DEFAULT_CURRENCY
from .repositories.order_item_repository_impl import SqlAlchemyOrderItemRepository
from .repositories.order_repository_impl import SqlAlchemyOrderRepository

logger = logging.getLogger(__name__)


class UnitOfWork:
    """
    Groups repository calls into a single database transaction.

    Nothing is written until commit(); leaving the context with an
    exception rolls back every statement issued through the repositories.
    Order writes and order item deletes therefore succeed or fail together.

    Usage:
        async with create_uow(session_factory) as uow:
            await uow.orders.add(order)
            await uow.commit()
    """

    def __init__(self, session_factory: async_sessionmaker, currency: str = DEFAULT_CURRENCY) -> None:
        """
        Args:
            session_factory: SQLAlchemy async session factory
            currency: Currency stored prices are expressed in
        """
        self._session_factory = session_factory
        self._currency = currency
        self._session: Optional[AsyncSession] = None
        self._execution_id: Optional[ExecutionID] = None
        self._repositories: Dict[type, object] = {}

    async def __aenter__(self) -> "UnitOfWork":
        self._session = self._session_factory()
        self._execution_id = ExecutionID.generate()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        session, self._session = self._session, None
        self._repositories.clear()
        try:
            if exc_type is not None:
                logger.warning(f"[{self._execution_id}] Rolling back: {exc_type.__name__}: {exc_val}")
                await session.rollback()
        finally:
            await session.close()

    def _active_session(self) -> AsyncSession:
        if self._session is None:
            raise RuntimeError("UnitOfWork is not active. Use 'async with create_uow(...)'.")
        return self._session

    def _repository(self, repository_type):
        session = self._active_session()
        if repository_type not in self._repositories:
            self._repositories[repository_type] = repository_type(session, self._currency)
        return self._repositories[repository_type]

    @property
    def execution_id(self) -> ExecutionID:
        """Tag for the log lines of this transaction."""
        self._active_session()
        return self._execution_id

    @property
    def orders(self) -> SqlAlchemyOrderRepository:
        return self._repository(SqlAlchemyOrderRepository)

    @property
    def order_items(self) -> SqlAlchemyOrderItemRepository:
        return self._repository(SqlAlchemyOrderItemRepository)

    async def commit(self) -> None:
        await self._active_session().commit()
        logger.info(f"[{self._execution_id}] ✅ Transaction committed")


def create_uow(session_factory: async_sessionmaker, currency: str = DEFAULT_CURRENCY) -> UnitOfWork:
    """Create a new Unit of Work bound to session_factory."""
    return UnitOfWork(session_factory, currency)
