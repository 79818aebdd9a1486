"""Payment gateway adapters.

- FakeGateway for development and testing
- StripeGateway for production (hosted Stripe Checkout)
"""

from core.infrastructure.adapters.payments.fake_gateway import FakeGateway
from core.infrastructure.adapters.payments.stripe_gateway import StripeGateway
from core.settings.sections.payments import PaymentSettings


def build_gateway(settings: PaymentSettings):
    """Return StripeGateway when a secret key is configured, FakeGateway otherwise."""
    if settings.enabled:
        return StripeGateway(api_key=settings.secret_key)
    return FakeGateway()


__all__ = ["FakeGateway", "StripeGateway", "build_gateway"]
