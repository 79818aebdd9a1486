"""Data layer - infrastructure persistence and mapping."""

from .mappers import OrderItemMapper, OrderMapper, ProductMapper
from .models import Base, CategoryModel, OrderItemModel, OrderModel, ProductModel, UserModel
from .repositories import (
    SqlAlchemyOrderItemRepository,
    SqlAlchemyOrderRepository,
    SqlAlchemyProductCatalog,
    SqlAlchemyUserDirectory,
)
from .uow import UnitOfWork, create_uow

__all__ = [
    "Base",
    "CategoryModel",
    "create_uow",
    "OrderItemMapper",
    "OrderItemModel",
    "OrderMapper",
    "OrderModel",
    "ProductMapper",
    "ProductModel",
    "SqlAlchemyOrderItemRepository",
    "SqlAlchemyOrderRepository",
    "SqlAlchemyProductCatalog",
    "SqlAlchemyUserDirectory",
    "UnitOfWork",
    "UserModel",
]
