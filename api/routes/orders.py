"""
Orders endpoints.

Compose, query, update and delete orders, hosted checkout sessions and
sales reporting. Failures are raised as domain errors and rendered by the
handlers registered in api.main.
"""
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, status
import logging

from api.dependencies import get_checkout_service, get_order_service, get_sales_service
from core.application.dtos import (
    CheckoutSessionDTO,
    CreateOrderRequest,
    DeleteResultDTO,
    LineItemDTO,
    OrderCountDTO,
    OrderDTO,
    OrderSummaryDTO,
    TotalSalesDTO,
    UpdateOrderStatusRequest,
)
from core.application.services import CheckoutService, OrderApplicationService, SalesReportingService


logger = logging.getLogger(__name__)
router = APIRouter()


# =============================================================================
# LIST / GET
# =============================================================================

@router.get(
    "",
    response_model=List[OrderSummaryDTO],
    summary="List all orders",
    description="All orders, newest first, with the ordering user's name",
)
async def list_orders(service: OrderApplicationService = Depends(get_order_service)):
    return await service.list_orders()


@router.get(
    "/{order_id}",
    response_model=OrderDTO,
    summary="Get order by ID",
    description="One order with items, products and categories resolved",
)
async def get_order(order_id: str, service: OrderApplicationService = Depends(get_order_service)):
    return await service.get_order(order_id)


# =============================================================================
# CHECKOUT SESSION
# =============================================================================

@router.post(
    "/create-checkout-session",
    response_model=CheckoutSessionDTO,
    summary="Create a hosted checkout session",
    description="""
    Body is a JSON array of line items: `[{"product": "<id>", "quantity": 2}]`.

    The session is not linked to any stored order.
    """,
)
async def create_checkout_session(
    line_items: Optional[List[LineItemDTO]] = Body(default=None),
    service: CheckoutService = Depends(get_checkout_service),
):
    return await service.create_checkout_session(line_items)


# =============================================================================
# CREATE / UPDATE / DELETE
# =============================================================================

@router.post(
    "",
    response_model=OrderDTO,
    status_code=status.HTTP_200_OK,
    summary="Create order",
)
async def create_order(
    request: CreateOrderRequest,
    service: OrderApplicationService = Depends(get_order_service),
):
    """
    Compose an order from line items.

    Prices are read from the catalog at call time and captured on every
    order item; the total is their sum.
    """
    return await service.create_order(request)


@router.put("/{order_id}", response_model=OrderDTO, summary="Update order status")
async def update_order(
    order_id: str,
    request: UpdateOrderStatusRequest,
    service: OrderApplicationService = Depends(get_order_service),
):
    return await service.update_status(order_id, request.status)


@router.delete("/{order_id}", response_model=DeleteResultDTO, summary="Delete order and its items")
async def delete_order(order_id: str, service: OrderApplicationService = Depends(get_order_service)):
    await service.delete_order(order_id)
    return DeleteResultDTO(success=True, message="Order deleted successfully")


# =============================================================================
# REPORTING
# =============================================================================

@router.get("/get/totalsales", response_model=TotalSalesDTO, summary="Sum of all order totals")
async def total_sales(service: SalesReportingService = Depends(get_sales_service)):
    return await service.total_sales()


@router.get("/get/count", response_model=OrderCountDTO, summary="Number of orders")
async def order_count(service: SalesReportingService = Depends(get_sales_service)):
    return await service.order_count()


@router.get(
    "/get/userorders/{user_id}",
    response_model=List[OrderDTO],
    summary="List a user's orders",
)
async def user_orders(user_id: str, service: OrderApplicationService = Depends(get_order_service)):
    return await service.list_user_orders(user_id)
