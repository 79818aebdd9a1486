"""Stripe payment gateway adapter.

Creates hosted Checkout Sessions through the stripe-python SDK. The SDK
client is synchronous, so the request runs in a worker thread to keep the
event loop free.
"""

import asyncio
from typing import Any, Dict, List, Optional

import stripe

from core.application.interfaces import CheckoutSession, GatewayLineItem, IPaymentGateway
from core.domain.exceptions import GatewayError
from core.infrastructure.logging import get_logger

logger = get_logger(__name__)


class StripeGateway(IPaymentGateway):
    """Production Stripe gateway adapter."""

    def __init__(self, api_key: Optional[str] = None, client: Optional[Any] = None) -> None:
        if client is None and not api_key:
            raise ValueError("StripeGateway requires an API key")
        self._client = client or stripe.StripeClient(api_key)

    @staticmethod
    def build_params(
        line_items: List[GatewayLineItem],
        success_url: str,
        cancel_url: str,
    ) -> Dict[str, Any]:
        """Translate gateway line items into Checkout Session create params."""
        return {
            "payment_method_types": ["card"],
            "mode": "payment",
            "line_items": [
                {
                    "price_data": {
                        "currency": item.currency,
                        "product_data": {"name": item.name},
                        "unit_amount": item.unit_amount,
                    },
                    "quantity": item.quantity,
                }
                for item in line_items
            ],
            "success_url": success_url,
            "cancel_url": cancel_url,
        }

    async def create_checkout_session(
        self,
        line_items: List[GatewayLineItem],
        success_url: str,
        cancel_url: str,
    ) -> CheckoutSession:
        params = self.build_params(line_items, success_url, cancel_url)

        try:
            session = await asyncio.to_thread(
                self._client.checkout.sessions.create, params=params
            )
        except stripe.StripeError as e:
            logger.error(f"Stripe checkout session failed: {e.user_message or e}")
            raise GatewayError(f"Payment gateway error: {e.user_message or str(e)}") from e

        logger.info(f"✅ Stripe checkout session created: {session.id}")
        return CheckoutSession(session_id=session.id, url=getattr(session, "url", None))
