"""Repository interfaces for the Order aggregate and its collaborators."""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import List, Optional

from ..entities.order import Order, OrderItem, UserRef
from ..entities.product import Product


class OrderRepository(ABC):
    """Abstract repository for Order aggregate persistence."""

    @abstractmethod
    async def add(self, order: Order) -> None:
        """Persist a new order together with all of its items.

        Args:
            order: Order aggregate to persist
        """
        pass

    @abstractmethod
    async def find_by_id(self, order_id: str) -> Optional[Order]:
        """Retrieve one order with items, products, categories and user name.

        Args:
            order_id: Order identifier

        Returns:
            Order if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Order]:
        """List all orders, newest first.

        Only the user display name is resolved; items are identifiers.
        """
        pass

    @abstractmethod
    async def find_by_user(self, user_id: str) -> List[Order]:
        """List one user's orders, newest first, fully resolved."""
        pass

    @abstractmethod
    async def find_item_ids(self, order_id: str) -> Optional[List[str]]:
        """Return the item identifiers of an order, None if the order is missing."""
        pass

    @abstractmethod
    async def update_status(self, order_id: str, status: str) -> Optional[Order]:
        """Replace the status and return the updated order (None if missing)."""
        pass

    @abstractmethod
    async def delete(self, order_id: str) -> bool:
        """Delete the order row. Returns False if it did not exist."""
        pass

    @abstractmethod
    async def total_sales(self) -> Decimal:
        """Sum of total_price over all orders (0 when empty)."""
        pass

    @abstractmethod
    async def count(self) -> int:
        pass


class OrderItemRepository(ABC):
    """Abstract repository for individual order items."""

    @abstractmethod
    async def get_with_product(self, item_id: str) -> Optional[OrderItem]:
        """Fetch an item joined with its product."""
        pass

    @abstractmethod
    async def delete_by_id(self, item_id: str) -> bool:
        """Delete an item. Returns False if it did not exist."""
        pass


class ProductCatalog(ABC):
    """Read-only product price lookup owned by the catalog."""

    @abstractmethod
    async def get(self, product_id: str) -> Optional[Product]:
        """Return the product (name, price, category) or None."""
        pass


class UserDirectory(ABC):
    """Read-only lookup of the users orders are placed for."""

    @abstractmethod
    async def get(self, user_id: str) -> Optional[UserRef]:
        """Return the user reference (id and display name) or None."""
        pass
