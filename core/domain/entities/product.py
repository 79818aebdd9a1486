"""Catalog entities read by the ordering core.

The catalog owns these records; ordering only reads them.
"""
from dataclasses import dataclass
from typing import Optional

from ..value_objects import Money


@dataclass(frozen=True)
class Category:
    id: str
    name: str
    icon: Optional[str] = None
    color: Optional[str] = None


@dataclass(frozen=True)
class Product:
    """Product as seen by order composition: name, unit price and category."""
    id: str
    name: str
    price: Money
    category: Optional[Category] = None
