"""Domain layer - pure domain models and interfaces."""

from .entities import Category, LineItem, Order, OrderItem, Product, ShippingInfo, UserRef
from .exceptions import DomainError, GatewayError, NotFoundError, PersistenceError, ValidationError
from .repositories import OrderItemRepository, OrderRepository, ProductCatalog, UserDirectory
from .value_objects import EntityID, ExecutionID, Money

__all__ = [
    "Category",
    "DomainError",
    "EntityID",
    "ExecutionID",
    "GatewayError",
    "LineItem",
    "Money",
    "NotFoundError",
    "Order",
    "OrderItem",
    "OrderItemRepository",
    "OrderRepository",
    "PersistenceError",
    "Product",
    "ProductCatalog",
    "ShippingInfo",
    "UserDirectory",
    "UserRef",
    "ValidationError",
]
