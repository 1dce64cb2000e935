"""
Item Repository Interface

Abstracts data access for item entities, decoupling use cases from the
document store behind them.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities.item import Item


class IItemRepository(ABC):
    """Interface for Item repository implementations."""

    @abstractmethod
    async def find_by_id(self, item_id: UUID) -> Optional[Item]:
        """
        Find an item by its ID.

        Args:
            item_id: The unique identifier of the item

        Returns:
            The item if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self, skip: int = 0, limit: int = 100, name: Optional[str] = None
    ) -> List[Item]:
        """
        Find items with pagination, optionally filtered by exact name.

        Args:
            skip: Number of records to skip
            limit: Maximum number of records to return
            name: Filter by item name

        Returns:
            List of items matching the criteria, oldest first
        """
        pass

    @abstractmethod
    async def create(self, item: Item) -> Item:
        """Persist a new item and return it."""
        pass

    @abstractmethod
    async def delete(self, item_id: UUID) -> bool:
        """
        Delete an item by its ID.

        Returns:
            True if the item was deleted, False if it did not exist
        """
        pass
