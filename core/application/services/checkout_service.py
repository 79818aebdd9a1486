"""Application service for hosted checkout sessions.

Independent of order composition: a checkout session is never linked back
to an order record. Callers decide how to sequence the two.
"""

import logging
from typing import List, Optional, Sequence

from core.application.dtos.order_dto import CheckoutSessionDTO, LineItemDTO
from core.application.interfaces import CheckoutSession, GatewayLineItem, IPaymentGateway
from core.application.services.product_lookup import resolve_products
from core.domain.entities import LineItem
from core.domain.exceptions import ValidationError
from core.domain.repositories import ProductCatalog
from core.settings.sections.payments import PaymentSettings

logger = logging.getLogger(__name__)


class CheckoutService:
    """Builds gateway line items from catalog prices and requests a hosted session."""

    def __init__(
        self,
        catalog: ProductCatalog,
        gateway: IPaymentGateway,
        settings: PaymentSettings,
    ) -> None:
        """Initialize checkout service.

        Args:
            catalog: Product price lookup
            gateway: Payment gateway adapter
            settings: Currency and redirect URLs
        """
        self._catalog = catalog
        self._gateway = gateway
        self._settings = settings

    async def create_checkout_session(
        self, request: Optional[List[LineItemDTO]]
    ) -> CheckoutSessionDTO:
        """Create a session from the request body (a list of line items)."""
        if not request:
            raise ValidationError("Order items cannot be empty")

        line_items = [LineItem(product_id=item.product, quantity=item.quantity) for item in request]
        session = await self.build_checkout_session(line_items)
        return CheckoutSessionDTO(id=session.session_id)

    async def build_checkout_session(self, line_items: Optional[Sequence[LineItem]]) -> CheckoutSession:
        """
        Resolve products and submit one hosted checkout request.

        Args:
            line_items: Requested line items (at least one)

        Returns:
            CheckoutSession minted by the gateway

        Raises:
            ValidationError: Empty or missing line items (no lookup happens)
            NotFoundError: A product does not exist (gateway is not called)
            GatewayError: The gateway rejected the request
        """
        if not line_items:
            raise ValidationError("Order items cannot be empty")

        products = await resolve_products(self._catalog, line_items)
        currency = self._settings.currency.lower()

        gateway_items = [
            GatewayLineItem(
                name=product.name,
                unit_amount=product.price.to_minor_units(),
                quantity=line_item.quantity,
                currency=currency,
            )
            for product, line_item in zip(products, line_items)
        ]

        session = await self._gateway.create_checkout_session(
            gateway_items,
            success_url=self._settings.success_url,
            cancel_url=self._settings.cancel_url,
        )
        logger.info(f"Checkout session {session.session_id} created for {len(gateway_items)} line item(s)")
        return session
