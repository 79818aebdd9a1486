"""SQLAlchemy implementation of OrderItemRepository."""

from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from core.domain.entities.order import OrderItem
from core.domain.repositories.order_repository import OrderItemRepository

from ..mappers import DEFAULT_CURRENCY, OrderItemMapper
from ..models import OrderItemModel, ProductModel


class SqlAlchemyOrderItemRepository(OrderItemRepository):
    """Concrete implementation of OrderItemRepository using SQLAlchemy."""

    def __init__(self, session: AsyncSession, currency: str = DEFAULT_CURRENCY) -> None:
        self._session = session
        self._currency = currency

    async def get_with_product(self, item_id: str) -> Optional[OrderItem]:
        """Fetch an order item joined with its product and category.

        Args:
            item_id: Order item identifier

        Returns:
            OrderItem if found, None otherwise
        """
        result = await self._session.execute(
            select(OrderItemModel)
            .options(selectinload(OrderItemModel.product).selectinload(ProductModel.category))
            .where(OrderItemModel.id == item_id)
        )
        model = result.scalar_one_or_none()

        if not model:
            return None

        return OrderItemMapper.to_domain(model, self._currency)

    async def delete_by_id(self, item_id: str) -> bool:
        result = await self._session.execute(
            delete(OrderItemModel).where(OrderItemModel.id == item_id)
        )
        return result.rowcount > 0
