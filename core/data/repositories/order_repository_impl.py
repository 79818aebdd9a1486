"""SQLAlchemy implementation of OrderRepository."""

import logging
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from core.domain.entities.order import Order
from core.domain.repositories.order_repository import OrderRepository

from ..mappers import DEFAULT_CURRENCY, OrderMapper
from ..models import OrderItemModel, OrderModel, ProductModel, utcnow

logger = logging.getLogger(__name__)


def _with_user():
    return selectinload(OrderModel.user)


def _with_items_only():
    return selectinload(OrderModel.items)


def _with_nested_items():
    # order -> items -> product -> category
    return (
        selectinload(OrderModel.items)
        .selectinload(OrderItemModel.product)
        .selectinload(ProductModel.category)
    )


class SqlAlchemyOrderRepository(OrderRepository):
    """Concrete implementation of OrderRepository using SQLAlchemy."""

    def __init__(self, session: AsyncSession, currency: str = DEFAULT_CURRENCY) -> None:
        """Initialize repository with SQLAlchemy session.

        Args:
            session: SQLAlchemy async session
            currency: Currency stored prices are expressed in
        """
        self._session = session
        self._currency = currency

    async def add(self, order: Order) -> None:
        """Insert a new order and its items.

        Args:
            order: Order domain aggregate
        """
        if order.date_ordered is None:
            order.date_ordered = utcnow()

        order_model = OrderMapper.to_persistence(order)
        self._session.add(order_model)

        await self._session.flush()  # Propagate to DB without committing
        logger.info(f"Inserted order {order.id} with {len(order.items)} item(s)")

    async def find_by_id(self, order_id: str) -> Optional[Order]:
        """Retrieve order by unique identifier with nested joins.

        Args:
            order_id: Order identifier

        Returns:
            Order if found, None otherwise
        """
        result = await self._session.execute(
            select(OrderModel)
            .options(_with_user(), _with_nested_items())
            .where(OrderModel.id == order_id)
            .execution_options(populate_existing=True)
        )
        model = result.scalar_one_or_none()

        if not model:
            return None

        return OrderMapper.to_domain(model, self._currency)

    async def find_all(self) -> List[Order]:
        """List all orders, newest first, with user name and item ids."""
        result = await self._session.execute(
            select(OrderModel)
            .options(_with_user(), _with_items_only())
            .order_by(OrderModel.date_ordered.desc())
        )
        models = result.scalars().all()

        return [
            OrderMapper.to_domain(model, self._currency, with_products=False)
            for model in models
        ]

    async def find_by_user(self, user_id: str) -> List[Order]:
        """List one user's orders, newest first, fully resolved.

        Args:
            user_id: Owning user identifier

        Returns:
            List of Order aggregates (possibly empty)
        """
        result = await self._session.execute(
            select(OrderModel)
            .options(_with_user(), _with_nested_items())
            .where(OrderModel.user_id == user_id)
            .order_by(OrderModel.date_ordered.desc())
        )
        models = result.scalars().all()

        return [OrderMapper.to_domain(model, self._currency) for model in models]

    async def find_item_ids(self, order_id: str) -> Optional[List[str]]:
        exists = await self._session.scalar(
            select(func.count()).select_from(OrderModel).where(OrderModel.id == order_id)
        )
        if not exists:
            return None

        result = await self._session.execute(
            select(OrderItemModel.id)
            .where(OrderItemModel.order_id == order_id)
            .order_by(OrderItemModel.position)
        )
        return list(result.scalars().all())

    async def update_status(self, order_id: str, status: str) -> Optional[Order]:
        """Replace the status and return the updated order.

        Args:
            order_id: Order identifier
            status: New status token

        Returns:
            Updated Order, None if no order has that identifier
        """
        result = await self._session.execute(
            update(OrderModel).where(OrderModel.id == order_id).values(status=status)
        )
        if result.rowcount == 0:
            return None

        await self._session.flush()
        return await self.find_by_id(order_id)

    async def delete(self, order_id: str) -> bool:
        result = await self._session.execute(
            delete(OrderModel).where(OrderModel.id == order_id)
        )
        return result.rowcount > 0

    async def total_sales(self) -> Decimal:
        total = await self._session.scalar(
            select(func.coalesce(func.sum(OrderModel.total_price), 0))
        )
        return Decimal(str(total))

    async def count(self) -> int:
        return int(await self._session.scalar(select(func.count()).select_from(OrderModel)))
