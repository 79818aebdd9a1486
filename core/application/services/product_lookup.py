"""Concurrent product resolution shared by order composition and checkout."""

import asyncio
import logging
from typing import List, Sequence

from sqlalchemy.exc import SQLAlchemyError

from core.domain.entities import LineItem, Product
from core.domain.exceptions import NotFoundError, PersistenceError
from core.domain.repositories import ProductCatalog

logger = logging.getLogger(__name__)


async def resolve_products(catalog: ProductCatalog, line_items: Sequence[LineItem]) -> List[Product]:
    """
    Look up every line item's product concurrently and wait for all of them.

    Args:
        catalog: Product price lookup
        line_items: Validated line items

    Returns:
        Products in the same order as line_items

    Raises:
        NotFoundError: If any product does not exist
        PersistenceError: If the catalog could not be read
    """
    try:
        products = await asyncio.gather(*(catalog.get(item.product_id) for item in line_items))
    except SQLAlchemyError as e:
        logger.error(f"Product lookup failed: {e}", exc_info=True)
        raise PersistenceError("Products could not be loaded") from e

    missing = [item.product_id for item, product in zip(line_items, products) if product is None]
    if missing:
        raise NotFoundError(f"Invalid product in line items: {', '.join(missing)}")

    return list(products)
