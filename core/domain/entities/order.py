"""
Order aggregate root.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
- fastapi
"""
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from ..exceptions import ValidationError
from ..value_objects import EntityID, Money
from .product import Product

DEFAULT_STATUS = "Pending"

MAX_QUANTITY = 10_000
# Largest amount a NUMERIC(12, 2) price column holds
MAX_AMOUNT = Decimal("9999999999.99")


@dataclass(frozen=True)
class LineItem:
    """A (product, quantity) pair submitted by a client."""
    product_id: str
    quantity: int

    def __post_init__(self):
        object.__setattr__(self, 'product_id', EntityID(self.product_id).value)
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise ValidationError(f"Quantity must be an integer, got: {self.quantity!r}")
        if self.quantity <= 0:
            raise ValidationError(
                f"Quantity must be positive for product {self.product_id}, got: {self.quantity}"
            )
        if self.quantity > MAX_QUANTITY:
            raise ValidationError(
                f"Quantity for product {self.product_id} exceeds {MAX_QUANTITY}, got: {self.quantity}"
            )


@dataclass(frozen=True)
class ShippingInfo:
    """Shipping fields. Opaque strings, no format validation."""
    shipping_address1: str
    city: str
    zip: str
    country: str
    phone: str
    shipping_address2: Optional[str] = None


@dataclass(frozen=True)
class UserRef:
    """Non-owning reference to the ordering user."""
    id: str
    name: Optional[str] = None


@dataclass
class OrderItem:
    """
    Persisted line of an order.

    unit_price is the product price captured when the item was created, so
    the order total never drifts when the catalog price changes later.
    """
    id: str
    product_id: str
    quantity: int
    unit_price: Money
    product: Optional[Product] = None

    @classmethod
    def from_product(cls, product: Product, quantity: int) -> "OrderItem":
        return cls(
            id=EntityID.generate().value,
            product_id=product.id,
            quantity=quantity,
            unit_price=product.price,
            product=product,
        )

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity


@dataclass
class Order:
    """
    Order aggregate root.

    Owns its items (deleting the order deletes them). total_price is a
    snapshot computed once in create(); status is the only field that may
    change afterwards.
    """
    id: str
    items: List[OrderItem]
    shipping: ShippingInfo
    user: UserRef
    total_price: Money
    status: str = DEFAULT_STATUS
    date_ordered: Optional[datetime] = None
    item_ids: List[str] = field(default_factory=list)

    def __post_init__(self):
        if self.items and not self.item_ids:
            self.item_ids = [item.id for item in self.items]

    @classmethod
    def create(
        cls,
        items: List[OrderItem],
        shipping: ShippingInfo,
        user_id: str,
        status: Optional[str] = None,
        currency: str = "CAD",
    ) -> "Order":
        """
        Assemble a new order from already priced items.

        Args:
            items: Order items in insertion order
            shipping: Shipping fields
            user_id: Owning user identifier
            status: Initial status token (defaults to "Pending")
            currency: Currency of the total when there are no items

        Returns:
            New Order with total_price = sum(quantity * unit_price)

        Raises:
            ValidationError: The total does not fit the stored price precision
        """
        total = Money.zero(currency)
        for item in items:
            total = total + item.line_total
        if total.amount > MAX_AMOUNT:
            raise ValidationError(f"Order total {total} exceeds the largest storable amount")

        return cls(
            id=EntityID.generate().value,
            items=list(items),
            shipping=shipping,
            user=UserRef(id=EntityID(user_id).value),
            total_price=total,
            status=cls.normalize_status(status) if status is not None else DEFAULT_STATUS,
        )

    def change_status(self, status: str) -> None:
        """Replace the status token. Any non-empty string is accepted."""
        self.status = self.normalize_status(status)

    @staticmethod
    def normalize_status(status: str) -> str:
        if not isinstance(status, str) or not status.strip():
            raise ValidationError("Status cannot be empty")
        return status.strip()
