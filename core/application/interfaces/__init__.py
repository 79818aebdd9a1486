"""Application layer interfaces."""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class GatewayLineItem:
    """One line of a hosted checkout, priced in minor currency units."""

    name: str
    unit_amount: int
    quantity: int
    currency: str


@dataclass(frozen=True)
class CheckoutSession:
    """Opaque handle minted by the payment gateway."""

    session_id: str
    url: Optional[str] = None


class IPaymentGateway(ABC):
    """
    Interface for payment gateway operations.

    This interface defines the contract for hosted checkout, allowing the
    application layer to request a session without depending on a specific
    provider SDK.
    """

    @abstractmethod
    async def create_checkout_session(
        self,
        line_items: List[GatewayLineItem],
        success_url: str,
        cancel_url: str,
    ) -> CheckoutSession:
        """
        Create a hosted checkout session.

        Every call mints a new session; the request is not idempotent.

        Args:
            line_items: Gateway line items (at least one)
            success_url: Redirect after a successful payment
            cancel_url: Redirect when the customer cancels

        Returns:
            CheckoutSession with the gateway's session id

        Raises:
            GatewayError: If the gateway rejects the request or is unreachable
        """
        pass


__all__ = ["CheckoutSession", "GatewayLineItem", "IPaymentGateway"]
