"""Small builders shared by the test modules."""

from typing import List, Optional, Tuple

from sqlalchemy import func, select

from core.domain.entities import LineItem


def line_items(*pairs: Tuple[str, int]) -> List[LineItem]:
    """Build LineItems from (product_id, quantity) pairs."""
    return [LineItem(product_id=product_id, quantity=quantity) for product_id, quantity in pairs]


def order_payload(user_id: str, *pairs: Tuple[str, int], **overrides) -> dict:
    """JSON body for POST /orders in the wire (camelCase) format."""
    payload = {
        "orderItems": [{"product": product_id, "quantity": quantity} for product_id, quantity in pairs],
        "shippingAddress1": "12 Maple Street",
        "shippingAddress2": "Unit 4",
        "city": "Toronto",
        "zip": "M5V 2T6",
        "country": "Canada",
        "phone": "+1 416 555 0100",
        "user": user_id,
    }
    payload.update(overrides)
    return payload


async def count_rows(session_factory, model, where: Optional[object] = None) -> int:
    """Count rows of a table, optionally filtered."""
    query = select(func.count()).select_from(model)
    if where is not None:
        query = query.where(where)
    async with session_factory() as session:
        return int(await session.scalar(query))
