"""Static mappers for domain entities ↔ database models."""

from decimal import Decimal
from typing import Optional

from core.domain.entities import Category, Order, OrderItem, Product, ShippingInfo, UserRef
from core.domain.value_objects import Money

from .models import CategoryModel, OrderItemModel, OrderModel, ProductModel

DEFAULT_CURRENCY = "CAD"


def _money(value, currency: str) -> Money:
    return Money(amount=Decimal(str(value if value is not None else 0)), currency=currency)


class ProductMapper:
    """Static mapper for Product/Category ORM models → domain entities."""

    @staticmethod
    def category_to_domain(model: Optional[CategoryModel]) -> Optional[Category]:
        if model is None:
            return None
        return Category(id=model.id, name=model.name, icon=model.icon, color=model.color)

    @staticmethod
    def to_domain(
        model: ProductModel,
        currency: str = DEFAULT_CURRENCY,
        with_category: bool = True,
    ) -> Product:
        """Convert ORM model to domain entity.

        Args:
            model: ProductModel instance
            currency: Currency the catalog prices are expressed in
            with_category: Whether model.category was eagerly loaded

        Returns:
            Product domain entity
        """
        return Product(
            id=model.id,
            name=model.name,
            price=_money(model.price, currency),
            category=ProductMapper.category_to_domain(model.category) if with_category else None,
        )


class OrderItemMapper:
    """Static mapper for OrderItem ↔ OrderItemModel transformation."""

    @staticmethod
    def to_domain(
        model: OrderItemModel,
        currency: str = DEFAULT_CURRENCY,
        with_product: bool = True,
    ) -> OrderItem:
        """Convert ORM model to domain entity.

        Args:
            model: OrderItemModel instance
            currency: Currency of the unit price
            with_product: Whether model.product (and its category) was eagerly loaded

        Returns:
            OrderItem domain entity
        """
        product = None
        if with_product and model.product is not None:
            product = ProductMapper.to_domain(model.product, currency)

        return OrderItem(
            id=model.id,
            product_id=model.product_id,
            quantity=model.quantity,
            unit_price=_money(model.unit_price, currency),
            product=product,
        )

    @staticmethod
    def to_persistence(entity: OrderItem, order_id: str, position: int) -> OrderItemModel:
        """Convert domain entity to ORM model.

        Args:
            entity: OrderItem domain entity
            order_id: Owning order identifier
            position: Insertion index within the order

        Returns:
            OrderItemModel instance
        """
        return OrderItemModel(
            id=entity.id,
            order_id=order_id,
            product_id=entity.product_id,
            quantity=entity.quantity,
            unit_price=entity.unit_price.amount,
            position=position,
        )


class OrderMapper:
    """Static mapper for Order ↔ OrderModel transformation with nested items."""

    @staticmethod
    def to_domain(
        model: OrderModel,
        currency: str = DEFAULT_CURRENCY,
        with_products: bool = True,
    ) -> Order:
        """Convert ORM model to domain aggregate (with nested items).

        Args:
            model: OrderModel instance with items and user loaded
            currency: Currency of prices and totals
            with_products: Whether items were loaded with product and category

        Returns:
            Order domain aggregate
        """
        items = [
            OrderItemMapper.to_domain(item_model, currency, with_product=with_products)
            for item_model in model.items
        ]

        return Order(
            id=model.id,
            items=items,
            shipping=ShippingInfo(
                shipping_address1=model.shipping_address1,
                shipping_address2=model.shipping_address2,
                city=model.city,
                zip=model.zip,
                country=model.country,
                phone=model.phone,
            ),
            user=UserRef(
                id=model.user_id,
                name=model.user.name if model.user is not None else None,
            ),
            total_price=_money(model.total_price, currency),
            status=model.status,
            date_ordered=model.date_ordered,
        )

    @staticmethod
    def to_persistence(entity: Order) -> OrderModel:
        """Convert domain aggregate to ORM model (items included).

        Args:
            entity: Order domain aggregate

        Returns:
            OrderModel instance ready to be added to a session
        """
        model = OrderModel(
            id=entity.id,
            shipping_address1=entity.shipping.shipping_address1,
            shipping_address2=entity.shipping.shipping_address2,
            city=entity.shipping.city,
            zip=entity.shipping.zip,
            country=entity.shipping.country,
            phone=entity.shipping.phone,
            status=entity.status,
            total_price=entity.total_price.amount,
            user_id=entity.user.id,
        )
        if entity.date_ordered is not None:
            model.date_ordered = entity.date_ordered
        model.items = [
            OrderItemMapper.to_persistence(item, entity.id, position)
            for position, item in enumerate(entity.items)
        ]
        return model
