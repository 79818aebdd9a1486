"""Read-only product lookup backed by the catalog tables."""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlalchemy.orm import selectinload

from core.domain.entities.product import Product
from core.domain.repositories.order_repository import ProductCatalog

from ..mappers import DEFAULT_CURRENCY, ProductMapper
from ..models import ProductModel

logger = logging.getLogger(__name__)


class SqlAlchemyProductCatalog(ProductCatalog):
    """
    Product price lookup.

    Every lookup opens its own short-lived session, so callers can resolve
    many products concurrently with asyncio.gather (an AsyncSession must not
    be shared between concurrent tasks).
    """

    def __init__(self, session_factory: async_sessionmaker, currency: str = DEFAULT_CURRENCY) -> None:
        """Initialize catalog lookup.

        Args:
            session_factory: SQLAlchemy async session factory
            currency: Currency catalog prices are expressed in
        """
        self._session_factory = session_factory
        self._currency = currency

    async def get(self, product_id: str) -> Optional[Product]:
        async with self._session_factory() as session:
            result = await session.execute(
                select(ProductModel)
                .options(selectinload(ProductModel.category))
                .where(ProductModel.id == product_id)
            )
            model = result.scalar_one_or_none()

        if model is None:
            logger.info(f"Product not found: {product_id}")
            return None

        return ProductMapper.to_domain(model, self._currency)
