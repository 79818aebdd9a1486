from .order_item_repository_impl import SqlAlchemyOrderItemRepository
from .order_repository_impl import SqlAlchemyOrderRepository
from .product_catalog_impl import SqlAlchemyProductCatalog
from .user_directory_impl import SqlAlchemyUserDirectory

__all__ = [
    "SqlAlchemyOrderItemRepository",
    "SqlAlchemyOrderRepository",
    "SqlAlchemyProductCatalog",
    "SqlAlchemyUserDirectory",
]
