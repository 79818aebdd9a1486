"""Application DTOs."""

from .order_dto import (
    CategoryDTO,
    CheckoutSessionDTO,
    CreateOrderRequest,
    DeleteResultDTO,
    LineItemDTO,
    OrderCountDTO,
    OrderDTO,
    OrderItemDTO,
    OrderSummaryDTO,
    ProductDTO,
    TotalSalesDTO,
    UpdateOrderStatusRequest,
    UserRefDTO,
)

__all__ = [
    "CategoryDTO",
    "CheckoutSessionDTO",
    "CreateOrderRequest",
    "DeleteResultDTO",
    "LineItemDTO",
    "OrderCountDTO",
    "OrderDTO",
    "OrderItemDTO",
    "OrderSummaryDTO",
    "ProductDTO",
    "TotalSalesDTO",
    "UpdateOrderStatusRequest",
    "UserRefDTO",
]
