"""Domain entities."""

from .order import DEFAULT_STATUS, MAX_AMOUNT, MAX_QUANTITY, LineItem, Order, OrderItem, ShippingInfo, UserRef
from .product import Category, Product

__all__ = [
    "DEFAULT_STATUS",
    "MAX_AMOUNT",
    "MAX_QUANTITY",
    "Category",
    "LineItem",
    "Order",
    "OrderItem",
    "Product",
    "ShippingInfo",
    "UserRef",
]
