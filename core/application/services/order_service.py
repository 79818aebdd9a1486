"""Application service for Order operations."""

import logging
from typing import List, Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker

from core.application.dtos.order_dto import (
    CategoryDTO,
    CreateOrderRequest,
    OrderDTO,
    OrderItemDTO,
    OrderSummaryDTO,
    ProductDTO,
    UserRefDTO,
)
from core.application.services.product_lookup import resolve_products
from core.data.mappers import DEFAULT_CURRENCY
from core.data.uow import create_uow
from core.domain.entities import LineItem, Order, OrderItem, Product, ShippingInfo
from core.domain.exceptions import NotFoundError, PersistenceError
from core.domain.repositories import ProductCatalog, UserDirectory
from core.domain.value_objects import EntityID

logger = logging.getLogger(__name__)


class OrderApplicationService:
    """
    Application service for orchestrating order operations.

    Responsibilities:
    - Compose orders: resolve prices (fan-out), then persist items and
      order in one transaction (fan-in)
    - Query, update status and cascade-delete orders
    - Transform between DTOs and domain entities
    """

    def __init__(
        self,
        session_factory: async_sessionmaker,
        catalog: ProductCatalog,
        users: UserDirectory,
        currency: str = DEFAULT_CURRENCY,
    ) -> None:
        """Initialize order application service.

        Args:
            session_factory: SQLAlchemy async session factory
            catalog: Product price lookup
            users: Lookup of the users orders are placed for
            currency: Currency catalog prices are expressed in
        """
        self._session_factory = session_factory
        self._catalog = catalog
        self._users = users
        self._currency = currency.upper()

    # =========================================================================
    # COMPOSITION
    # =========================================================================

    async def create_order(self, request: CreateOrderRequest) -> OrderDTO:
        """Create a new order from a request DTO.

        Args:
            request: CreateOrderRequest DTO

        Returns:
            OrderDTO with created order details
        """
        line_items = [
            LineItem(product_id=item.product, quantity=item.quantity)
            for item in request.order_items
        ]
        shipping = ShippingInfo(
            shipping_address1=request.shipping_address1,
            shipping_address2=request.shipping_address2,
            city=request.city,
            zip=request.zip,
            country=request.country,
            phone=request.phone,
        )
        order = await self.compose_order(line_items, shipping, request.user, request.status)
        return self._order_to_dto(order)

    async def compose_order(
        self,
        line_items: Sequence[LineItem],
        shipping: ShippingInfo,
        user_id: str,
        status: Optional[str] = None,
    ) -> Order:
        """
        Turn line items into a persisted order.

        1. Check the user exists, then resolve every product concurrently
           and wait for all lookups.
        2. Snapshot unit prices into order items and compute the total.
        3. Insert items and order in one transaction.

        An unknown user or product aborts before anything is written, and a failed
        write rolls back the whole composition.

        Args:
            line_items: Validated line items (may be empty)
            shipping: Shipping fields
            user_id: Ordering user identifier
            status: Initial status (defaults to "Pending")

        Returns:
            Persisted Order with items, products and user resolved

        Raises:
            ValidationError: Invalid identifiers or status
            NotFoundError: The user or a referenced product does not exist
            PersistenceError: The order could not be stored
        """
        user_id = EntityID(user_id).value
        if status is not None:
            status = Order.normalize_status(status)

        await self._require_user(user_id)
        products: List[Product] = await resolve_products(self._catalog, line_items)

        items = [
            OrderItem.from_product(product, line_item.quantity)
            for product, line_item in zip(products, line_items)
        ]
        order = Order.create(
            items=items,
            shipping=shipping,
            user_id=user_id,
            status=status,
            currency=self._currency,
        )

        try:
            async with create_uow(self._session_factory, self._currency) as uow:
                await uow.orders.add(order)
                persisted = await uow.orders.find_by_id(order.id)
                await uow.commit()
                logger.info(
                    f"[{uow.execution_id}] Order {order.id} created: "
                    f"{len(items)} item(s), total={order.total_price}"
                )
        except SQLAlchemyError as e:
            logger.error(f"Order creation failed: {e}", exc_info=True)
            raise PersistenceError("Order could not be created") from e

        return persisted

    async def _require_user(self, user_id: str) -> None:
        try:
            user = await self._users.get(user_id)
        except SQLAlchemyError as e:
            logger.error(f"User lookup failed: {e}", exc_info=True)
            raise PersistenceError("User could not be loaded") from e

        if user is None:
            raise NotFoundError(f"Invalid user: {user_id}")

    # =========================================================================
    # QUERIES
    # =========================================================================

    async def list_orders(self) -> List[OrderSummaryDTO]:
        """List all orders, newest first, with the user's display name."""
        try:
            async with create_uow(self._session_factory, self._currency) as uow:
                orders = await uow.orders.find_all()
        except SQLAlchemyError as e:
            logger.error(f"List orders failed: {e}", exc_info=True)
            raise PersistenceError("Orders could not be loaded") from e

        return [self._order_to_summary_dto(order) for order in orders]

    async def get_order(self, order_id: str) -> OrderDTO:
        """Get order by ID with items, products and categories.

        Args:
            order_id: Order identifier

        Returns:
            OrderDTO

        Raises:
            NotFoundError: If no order has that identifier
        """
        order_id = EntityID(order_id).value
        try:
            async with create_uow(self._session_factory, self._currency) as uow:
                order = await uow.orders.find_by_id(order_id)
        except SQLAlchemyError as e:
            logger.error(f"Get order failed: {e}", exc_info=True)
            raise PersistenceError("Order could not be loaded") from e

        if not order:
            raise NotFoundError(f"Order not found: {order_id}")

        return self._order_to_dto(order)

    async def list_user_orders(self, user_id: str) -> List[OrderDTO]:
        """List one user's orders, newest first."""
        user_id = EntityID(user_id).value
        try:
            async with create_uow(self._session_factory, self._currency) as uow:
                orders = await uow.orders.find_by_user(user_id)
        except SQLAlchemyError as e:
            logger.error(f"List user orders failed: {e}", exc_info=True)
            raise PersistenceError("Orders could not be loaded") from e

        return [self._order_to_dto(order) for order in orders]

    # =========================================================================
    # UPDATE / DELETE
    # =========================================================================

    async def update_status(self, order_id: str, status: str) -> OrderDTO:
        """Replace the order status and return the updated order.

        Args:
            order_id: Order identifier
            status: New status token (any non-empty string)

        Returns:
            OrderDTO after the update

        Raises:
            NotFoundError: If no order has that identifier
        """
        order_id = EntityID(order_id).value
        status = Order.normalize_status(status)

        try:
            async with create_uow(self._session_factory, self._currency) as uow:
                order = await uow.orders.update_status(order_id, status)
                if order is None:
                    raise NotFoundError(f"Order not found: {order_id}")
                await uow.commit()
        except SQLAlchemyError as e:
            logger.error(f"Update order failed: {e}", exc_info=True)
            raise PersistenceError("Order could not be updated") from e

        logger.info(f"Order {order_id} status -> {status}")
        return self._order_to_dto(order)

    async def delete_order(self, order_id: str) -> None:
        """
        Delete an order and every item it owns, atomically.

        Items are deleted first, each result checked; the order row goes
        last. Any failure rolls everything back.

        Raises:
            NotFoundError: If no order has that identifier
            PersistenceError: If an item or the order could not be deleted
        """
        order_id = EntityID(order_id).value

        try:
            async with create_uow(self._session_factory, self._currency) as uow:
                item_ids = await uow.orders.find_item_ids(order_id)
                if item_ids is None:
                    raise NotFoundError("Order not found")

                for item_id in item_ids:
                    if not await uow.order_items.delete_by_id(item_id):
                        raise PersistenceError(f"Order item {item_id} could not be deleted")

                if not await uow.orders.delete(order_id):
                    raise PersistenceError("Order could not be deleted")

                await uow.commit()
                logger.info(f"[{uow.execution_id}] Order {order_id} deleted with {len(item_ids)} item(s)")
        except SQLAlchemyError as e:
            logger.error(f"Delete order failed: {e}", exc_info=True)
            raise PersistenceError("Order could not be deleted") from e

    # =========================================================================
    # MAPPING
    # =========================================================================

    @staticmethod
    def _product_to_dto(product: Optional[Product]) -> Optional[ProductDTO]:
        if product is None:
            return None
        category = None
        if product.category is not None:
            category = CategoryDTO(
                id=product.category.id,
                name=product.category.name,
                icon=product.category.icon,
                color=product.category.color,
            )
        return ProductDTO(
            id=product.id,
            name=product.name,
            price=float(product.price.amount),
            category=category,
        )

    @staticmethod
    def _order_fields(order: Order) -> dict:
        return dict(
            id=order.id,
            shipping_address1=order.shipping.shipping_address1,
            shipping_address2=order.shipping.shipping_address2,
            city=order.shipping.city,
            zip=order.shipping.zip,
            country=order.shipping.country,
            phone=order.shipping.phone,
            status=order.status,
            total_price=float(order.total_price.amount),
            user=UserRefDTO(id=order.user.id, name=order.user.name),
            date_ordered=order.date_ordered,
        )

    def _order_to_dto(self, order: Order) -> OrderDTO:
        """Transform Order domain entity to OrderDTO.

        Args:
            order: Order domain entity

        Returns:
            OrderDTO instance
        """
        items = [
            OrderItemDTO(
                id=item.id,
                quantity=item.quantity,
                unit_price=float(item.unit_price.amount),
                product=self._product_to_dto(item.product),
            )
            for item in order.items
        ]
        return OrderDTO(order_items=items, **self._order_fields(order))

    def _order_to_summary_dto(self, order: Order) -> OrderSummaryDTO:
        return OrderSummaryDTO(order_items=list(order.item_ids), **self._order_fields(order))
