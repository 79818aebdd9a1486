"""Tests for the payment gateway adapters."""

from types import SimpleNamespace

import pytest
import stripe

from core.application.interfaces import GatewayLineItem
from core.domain.exceptions import GatewayError
from core.infrastructure.adapters.payments import FakeGateway, StripeGateway, build_gateway
from core.settings.sections.payments import PaymentSettings


class RecordingSessions:
    """Stands in for StripeClient.checkout.sessions."""

    def __init__(self, error=None):
        self.error = error
        self.params = []

    def create(self, params=None, options=None):
        self.params.append(params)
        if self.error is not None:
            raise self.error
        return SimpleNamespace(id="cs_live_123", url="https://checkout.stripe.com/c/pay/cs_live_123")


def _client(sessions: RecordingSessions):
    return SimpleNamespace(checkout=SimpleNamespace(sessions=sessions))


ITEMS = [
    GatewayLineItem(name="Toy Car", unit_amount=999, quantity=2, currency="cad"),
    GatewayLineItem(name="Kite", unit_amount=500, quantity=1, currency="cad"),
]


def test_build_params_shape():
    params = StripeGateway.build_params(ITEMS, "https://s", "https://c")

    assert params["payment_method_types"] == ["card"]
    assert params["mode"] == "payment"
    assert params["success_url"] == "https://s"
    assert params["cancel_url"] == "https://c"
    assert params["line_items"][0] == {
        "price_data": {
            "currency": "cad",
            "product_data": {"name": "Toy Car"},
            "unit_amount": 999,
        },
        "quantity": 2,
    }
    assert len(params["line_items"]) == 2


@pytest.mark.asyncio
async def test_stripe_gateway_returns_session_id():
    sessions = RecordingSessions()
    gateway = StripeGateway(client=_client(sessions))

    session = await gateway.create_checkout_session(ITEMS, "https://s", "https://c")

    assert session.session_id == "cs_live_123"
    assert session.url.endswith("cs_live_123")
    assert sessions.params[0]["line_items"][1]["quantity"] == 1


@pytest.mark.asyncio
async def test_stripe_errors_become_gateway_errors():
    sessions = RecordingSessions(error=stripe.InvalidRequestError("Invalid currency: xyz", param="currency"))
    gateway = StripeGateway(client=_client(sessions))

    with pytest.raises(GatewayError) as exc_info:
        await gateway.create_checkout_session(ITEMS, "https://s", "https://c")

    assert exc_info.value.message.startswith("Payment gateway error")
    assert isinstance(exc_info.value.__cause__, stripe.StripeError)


def test_stripe_gateway_requires_key():
    with pytest.raises(ValueError):
        StripeGateway()


def test_build_gateway_picks_adapter_from_settings():
    assert isinstance(build_gateway(PaymentSettings(secret_key=None)), FakeGateway)
    assert isinstance(build_gateway(PaymentSettings(secret_key="sk_test_123")), StripeGateway)


@pytest.mark.asyncio
async def test_fake_gateway_records_and_fails_on_demand():
    gateway = FakeGateway()
    session = await gateway.create_checkout_session(ITEMS, "https://s", "https://c")
    assert session.session_id.startswith("cs_test_")

    gateway.configure(should_succeed=False)
    with pytest.raises(GatewayError):
        await gateway.create_checkout_session(ITEMS, "https://s", "https://c")

    assert len(gateway.calls) == 2
