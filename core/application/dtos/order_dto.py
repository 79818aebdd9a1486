"""Application DTOs for Order operations.

Field names are snake_case in Python and camelCase on the wire
(``shippingAddress1``, ``totalPrice``, ``orderItems``...).
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from core.domain.entities.order import MAX_QUANTITY

_CAMEL = {"alias_generator": to_camel, "populate_by_name": True, "frozen": True}


# =============================================================================
# REQUESTS
# =============================================================================

class LineItemDTO(BaseModel):
    """DTO for a requested (product, quantity) pair."""

    product: str = Field(..., description="Product identifier")
    quantity: int = Field(..., gt=0, le=MAX_QUANTITY, description="Quantity ordered")

    model_config = _CAMEL


class CreateOrderRequest(BaseModel):
    """Request DTO for composing an order."""

    order_items: List[LineItemDTO] = Field(default_factory=list, description="Requested line items")
    shipping_address1: str = Field(..., description="Shipping address line 1")
    shipping_address2: Optional[str] = Field(None, description="Shipping address line 2")
    city: str = Field(..., description="City")
    zip: str = Field(..., description="Postal code")
    country: str = Field(..., description="Country")
    phone: str = Field(..., description="Contact phone")
    status: str = Field(default="Pending", min_length=1, description="Initial order status")
    user: str = Field(..., description="Ordering user identifier")

    model_config = _CAMEL


class UpdateOrderStatusRequest(BaseModel):
    """Request DTO for the status update (the only mutable order field)."""

    status: str = Field(..., min_length=1, description="New order status")

    model_config = _CAMEL


# =============================================================================
# RESPONSES
# =============================================================================

class CategoryDTO(BaseModel):
    id: str
    name: str
    icon: Optional[str] = None
    color: Optional[str] = None

    model_config = _CAMEL


class ProductDTO(BaseModel):
    id: str
    name: str
    price: float
    category: Optional[CategoryDTO] = None

    model_config = _CAMEL


class OrderItemDTO(BaseModel):
    """DTO for a persisted order item with its product resolved."""

    id: str = Field(..., description="Order item identifier")
    quantity: int = Field(..., gt=0, description="Quantity ordered")
    unit_price: float = Field(..., ge=0, description="Unit price captured at order time")
    product: Optional[ProductDTO] = Field(None, description="Referenced product")

    model_config = _CAMEL


class UserRefDTO(BaseModel):
    id: str
    name: Optional[str] = None

    model_config = _CAMEL


class _OrderFieldsDTO(BaseModel):
    id: str = Field(..., description="Order identifier")
    shipping_address1: str
    shipping_address2: Optional[str] = None
    city: str
    zip: str
    country: str
    phone: str
    status: str = Field(..., description="Order status")
    total_price: float = Field(..., ge=0, description="Total captured at order time")
    user: UserRefDTO
    date_ordered: Optional[datetime] = None

    model_config = _CAMEL


class OrderSummaryDTO(_OrderFieldsDTO):
    """Order as listed: items are identifiers only."""

    order_items: List[str] = Field(default_factory=list, description="Order item identifiers")


class OrderDTO(_OrderFieldsDTO):
    """Order with items, products and categories resolved."""

    order_items: List[OrderItemDTO] = Field(default_factory=list, description="Order items")


class CheckoutSessionDTO(BaseModel):
    """Opaque hosted checkout session handle."""

    id: str = Field(..., description="Gateway session identifier")

    model_config = {"frozen": True}


class TotalSalesDTO(BaseModel):
    total_sales: float = Field(..., alias="totalsales", ge=0)

    model_config = {"populate_by_name": True, "frozen": True}


class OrderCountDTO(BaseModel):
    order_count: int = Field(..., alias="orderCount", ge=0)

    model_config = {"populate_by_name": True, "frozen": True}


class DeleteResultDTO(BaseModel):
    success: bool
    message: str

    model_config = {"frozen": True}
