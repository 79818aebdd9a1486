"""Application services."""
from .checkout_service import CheckoutService
from .order_service import OrderApplicationService
from .sales_service import SalesReportingService

__all__ = ["CheckoutService", "OrderApplicationService", "SalesReportingService"]
