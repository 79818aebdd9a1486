"""Application layer - services, interfaces, and DTOs."""

from .dtos import CreateOrderRequest, LineItemDTO, OrderDTO, OrderItemDTO, OrderSummaryDTO
from .interfaces import CheckoutSession, GatewayLineItem, IPaymentGateway
from .services import CheckoutService, OrderApplicationService, SalesReportingService

__all__ = [
    # DTOs
    "CreateOrderRequest",
    "LineItemDTO",
    "OrderDTO",
    "OrderItemDTO",
    "OrderSummaryDTO",
    # Services
    "CheckoutService",
    "OrderApplicationService",
    "SalesReportingService",
    # Interfaces
    "CheckoutSession",
    "GatewayLineItem",
    "IPaymentGateway",
]
