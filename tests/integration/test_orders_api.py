"""Integration tests for the Orders API endpoints."""

from uuid import uuid4

import pytest
from httpx import AsyncClient

from core.data.models import OrderItemModel, OrderModel
from helpers import count_rows, order_payload

ORDERS = "/api/v1/orders"


async def _create(client: AsyncClient, payload: dict) -> dict:
    response = await client.post(ORDERS, json=payload)
    assert response.status_code == 200, f"Expected 200, got {response.status_code}: {response.text}"
    return response.json()


# =============================================================================
# CREATE / GET
# =============================================================================

@pytest.mark.asyncio
async def test_create_order_success(api_client: AsyncClient, seeded):
    """POST /orders composes an order priced from the catalog."""
    data = await _create(
        api_client, order_payload(seeded.alice_id, (seeded.toy_car_id, 2), (seeded.puzzle_id, 1))
    )

    assert data["totalPrice"] == pytest.approx(44.98)
    assert data["status"] == "Pending"
    assert data["shippingAddress1"] == "12 Maple Street"
    assert data["user"] == {"id": seeded.alice_id, "name": "Alice"}
    assert data["dateOrdered"] is not None
    assert len(data["orderItems"]) == 2
    first = data["orderItems"][0]
    assert first["quantity"] == 2
    assert first["unitPrice"] == pytest.approx(9.99)
    assert first["product"]["name"] == "Toy Car"
    assert first["product"]["category"]["name"] == "Toys"

    # Verify data persistence by retrieving the order
    get_response = await api_client.get(f"{ORDERS}/{data['id']}")
    assert get_response.status_code == 200
    assert get_response.json() == data


@pytest.mark.asyncio
async def test_create_order_without_items(api_client: AsyncClient, seeded):
    data = await _create(api_client, order_payload(seeded.bob_id))

    assert data["orderItems"] == []
    assert data["totalPrice"] == 0


@pytest.mark.asyncio
async def test_create_order_unknown_product(api_client: AsyncClient, seeded, test_session_factory):
    response = await api_client.post(
        ORDERS, json=order_payload(seeded.alice_id, (seeded.kite_id, 1), (str(uuid4()), 1))
    )

    assert response.status_code == 404
    body = response.json()
    assert body["success"] is False
    assert body["message"].startswith("Invalid product in line items")
    assert await count_rows(test_session_factory, OrderModel) == 0
    assert await count_rows(test_session_factory, OrderItemModel) == 0


@pytest.mark.asyncio
async def test_create_order_unknown_user(api_client: AsyncClient, seeded, test_session_factory):
    missing_user = str(uuid4())

    response = await api_client.post(ORDERS, json=order_payload(missing_user, (seeded.kite_id, 1)))

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": f"Invalid user: {missing_user}"}
    assert await count_rows(test_session_factory, OrderModel) == 0


@pytest.mark.asyncio
@pytest.mark.parametrize("quantity", [0, -3, 10_001, 10**12])
async def test_create_order_rejects_out_of_range_quantity(api_client: AsyncClient, seeded, quantity):
    response = await api_client.post(ORDERS, json=order_payload(seeded.alice_id, (seeded.kite_id, quantity)))

    assert response.status_code == 400
    assert response.json()["success"] is False


@pytest.mark.asyncio
async def test_create_order_missing_shipping_field(api_client: AsyncClient, seeded):
    payload = order_payload(seeded.alice_id, (seeded.kite_id, 1))
    del payload["city"]

    response = await api_client.post(ORDERS, json=payload)

    assert response.status_code == 400
    assert "city" in response.json()["message"]


@pytest.mark.asyncio
async def test_get_order_not_found(api_client: AsyncClient, seeded):
    response = await api_client.get(f"{ORDERS}/{uuid4()}")

    assert response.status_code == 404
    assert response.json()["success"] is False


@pytest.mark.asyncio
async def test_get_order_malformed_id(api_client: AsyncClient, seeded):
    response = await api_client.get(f"{ORDERS}/12345")

    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Invalid identifier: 12345"}


@pytest.mark.asyncio
async def test_list_orders(api_client: AsyncClient, seeded):
    first = await _create(api_client, order_payload(seeded.alice_id, (seeded.kite_id, 1)))
    second = await _create(api_client, order_payload(seeded.bob_id, (seeded.robot_id, 2), (seeded.kite_id, 1)))

    response = await api_client.get(ORDERS)

    assert response.status_code == 200
    data = response.json()
    assert [o["id"] for o in data] == [second["id"], first["id"]]
    assert data[0]["user"]["name"] == "Bob"
    assert data[0]["orderItems"] == [item["id"] for item in second["orderItems"]]


@pytest.mark.asyncio
async def test_user_orders(api_client: AsyncClient, seeded):
    await _create(api_client, order_payload(seeded.alice_id, (seeded.kite_id, 1)))
    bob_order = await _create(api_client, order_payload(seeded.bob_id, (seeded.puzzle_id, 1)))

    response = await api_client.get(f"{ORDERS}/get/userorders/{seeded.bob_id}")

    assert response.status_code == 200
    data = response.json()
    assert [o["id"] for o in data] == [bob_order["id"]]
    assert data[0]["orderItems"][0]["product"]["name"] == "Puzzle"


# =============================================================================
# UPDATE / DELETE
# =============================================================================

@pytest.mark.asyncio
async def test_update_status(api_client: AsyncClient, seeded):
    created = await _create(api_client, order_payload(seeded.alice_id, (seeded.toy_car_id, 3)))

    response = await api_client.put(f"{ORDERS}/{created['id']}", json={"status": "Shipped"})

    assert response.status_code == 200
    updated = response.json()
    assert updated["status"] == "Shipped"
    assert {k: v for k, v in updated.items() if k != "status"} == {
        k: v for k, v in created.items() if k != "status"
    }


@pytest.mark.asyncio
async def test_update_status_not_found(api_client: AsyncClient, seeded):
    response = await api_client.put(f"{ORDERS}/{uuid4()}", json={"status": "Shipped"})

    assert response.status_code == 404
    assert response.json()["success"] is False


@pytest.mark.asyncio
async def test_update_status_empty(api_client: AsyncClient, seeded):
    created = await _create(api_client, order_payload(seeded.alice_id, (seeded.kite_id, 1)))

    response = await api_client.put(f"{ORDERS}/{created['id']}", json={"status": ""})

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_delete_order(api_client: AsyncClient, seeded, test_session_factory):
    created = await _create(api_client, order_payload(seeded.alice_id, (seeded.kite_id, 1), (seeded.robot_id, 1)))

    response = await api_client.delete(f"{ORDERS}/{created['id']}")

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Order deleted successfully"}
    assert await count_rows(test_session_factory, OrderItemModel) == 0
    assert (await api_client.get(f"{ORDERS}/{created['id']}")).status_code == 404

    again = await api_client.delete(f"{ORDERS}/{created['id']}")
    assert again.status_code == 404
    assert again.json() == {"success": False, "message": "Order not found"}


# =============================================================================
# CHECKOUT
# =============================================================================

@pytest.mark.asyncio
async def test_create_checkout_session(api_client: AsyncClient, seeded, fake_gateway):
    response = await api_client.post(
        f"{ORDERS}/create-checkout-session",
        json=[{"product": seeded.toy_car_id, "quantity": 2}],
    )

    assert response.status_code == 200
    assert response.json()["id"].startswith("cs_test_")
    sent = fake_gateway.calls[0]["line_items"][0]
    assert (sent.unit_amount, sent.quantity, sent.currency) == (999, 2, "cad")


@pytest.mark.asyncio
async def test_create_checkout_session_does_not_store_orders(api_client: AsyncClient, seeded, test_session_factory):
    await api_client.post(
        f"{ORDERS}/create-checkout-session", json=[{"product": seeded.kite_id, "quantity": 1}]
    )
    assert await count_rows(test_session_factory, OrderModel) == 0


@pytest.mark.asyncio
async def test_create_checkout_session_empty(api_client: AsyncClient, seeded, fake_gateway):
    response = await api_client.post(f"{ORDERS}/create-checkout-session", json=[])

    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Order items cannot be empty"}
    assert fake_gateway.calls == []


@pytest.mark.asyncio
async def test_create_checkout_session_unknown_product(api_client: AsyncClient, seeded, fake_gateway):
    response = await api_client.post(
        f"{ORDERS}/create-checkout-session", json=[{"product": str(uuid4()), "quantity": 1}]
    )

    assert response.status_code == 404
    assert fake_gateway.calls == []


@pytest.mark.asyncio
async def test_create_checkout_session_gateway_down(api_client: AsyncClient, seeded, fake_gateway):
    fake_gateway.configure(should_succeed=False, failure_reason="Gateway unavailable")

    response = await api_client.post(
        f"{ORDERS}/create-checkout-session", json=[{"product": seeded.kite_id, "quantity": 1}]
    )

    assert response.status_code == 502
    assert response.json() == {"success": False, "message": "Gateway unavailable"}


# =============================================================================
# REPORTING
# =============================================================================

@pytest.mark.asyncio
async def test_reporting_with_no_orders(api_client: AsyncClient, seeded):
    assert (await api_client.get(f"{ORDERS}/get/totalsales")).json() == {"totalsales": 0}
    assert (await api_client.get(f"{ORDERS}/get/count")).json() == {"orderCount": 0}


@pytest.mark.asyncio
async def test_reporting(api_client: AsyncClient, seeded):
    for product_id in (seeded.robot_id, seeded.puzzle_id, seeded.kite_id):
        await _create(api_client, order_payload(seeded.alice_id, (product_id, 1)))

    sales = (await api_client.get(f"{ORDERS}/get/totalsales")).json()
    count = (await api_client.get(f"{ORDERS}/get/count")).json()

    assert sales["totalsales"] == pytest.approx(40.0)
    assert count == {"orderCount": 3}
