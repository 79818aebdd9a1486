"""Configurable fake payment gateway for development and testing.

Simulates hosted checkout without any external calls. It can be configured
to fail, and it records every call so tests can assert on what would have
been sent to the real gateway.
"""

from typing import List
from uuid import uuid4

from core.application.interfaces import CheckoutSession, GatewayLineItem, IPaymentGateway
from core.domain.exceptions import GatewayError
from core.infrastructure.logging import get_logger

logger = get_logger(__name__)


class FakeGateway(IPaymentGateway):
    """Configurable fake payment gateway."""

    def __init__(self) -> None:
        self.should_succeed: bool = True
        self.failure_reason: str = "Gateway unavailable"
        self.calls: list[dict] = []

    def configure(self, should_succeed: bool, failure_reason: str = "Gateway unavailable") -> None:
        """Configure gateway behavior at runtime."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    async def create_checkout_session(
        self,
        line_items: List[GatewayLineItem],
        success_url: str,
        cancel_url: str,
    ) -> CheckoutSession:
        self.calls.append(
            {
                "method": "create_checkout_session",
                "line_items": list(line_items),
                "success_url": success_url,
                "cancel_url": cancel_url,
            }
        )

        if not self.should_succeed:
            logger.warning(f"FakeGateway configured to fail: {self.failure_reason}")
            raise GatewayError(self.failure_reason)

        session_id = f"cs_test_{uuid4().hex}"
        logger.info(f"FakeGateway created checkout session {session_id} ({len(line_items)} line items)")
        return CheckoutSession(
            session_id=session_id,
            url=f"https://checkout.example.test/pay/{session_id}",
        )
