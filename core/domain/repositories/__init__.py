from .order_repository import OrderItemRepository, OrderRepository, ProductCatalog, UserDirectory

__all__ = ["OrderItemRepository", "OrderRepository", "ProductCatalog", "UserDirectory"]
