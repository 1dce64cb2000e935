"""
Item Repository - Infrastructure Layer

Implements IItemRepository on top of a document database (MongoDB in
deployments, the in-memory store in test hosts).
"""

from typing import Any, Dict, List, Optional
from uuid import UUID

import pymongo

from src.domain.entities.errors import ItemOperationError
from src.domain.entities.item import Item
from src.domain.repositories.item_repository import IItemRepository
from src.infrastructure.database import DocumentDatabase


class ItemRepository(IItemRepository):
    """Document store implementation of the ItemRepository."""

    COLLECTION_NAME = "items"

    def __init__(self, database: DocumentDatabase):
        """
        Initialize the item repository.

        Args:
            database: Document database client
        """
        self.db = database

    def _to_document(self, item: Item) -> Dict[str, Any]:
        return {
            "id": str(item.id),
            "name": item.name,
            "description": item.description,
            "attributes": dict(item.attributes),
            "created_at": item.created_at,
            "updated_at": item.updated_at,
        }

    def _to_entity(self, document: Dict[str, Any]) -> Item:
        return Item(
            id=UUID(str(document["id"])),
            name=document.get("name", ""),
            description=document.get("description"),
            attributes=dict(document.get("attributes") or {}),
            created_at=document["created_at"],
            updated_at=document.get("updated_at", document["created_at"]),
        )

    async def find_by_id(self, item_id: UUID) -> Optional[Item]:
        document = await self.db.find_one(self.COLLECTION_NAME, {"id": str(item_id)})
        if document is None:
            return None
        return self._to_entity(document)

    async def find_all(
        self, skip: int = 0, limit: int = 100, name: Optional[str] = None
    ) -> List[Item]:
        query: Dict[str, Any] = {}
        if name is not None:
            query["name"] = name

        documents = await self.db.find_many(
            self.COLLECTION_NAME,
            query,
            sort_by="created_at",
            sort_direction=pymongo.ASCENDING,
            skip=skip,
            limit=limit,
        )
        return [self._to_entity(document) for document in documents]

    async def create(self, item: Item) -> Item:
        """
        Persist a new item.

        Raises:
            ItemOperationError: If the store rejects the insert
        """
        try:
            await self.db.insert_one(self.COLLECTION_NAME, self._to_document(item))
        except Exception as e:
            raise ItemOperationError(f"Failed to create item: {str(e)}") from e
        return item

    async def delete(self, item_id: UUID) -> bool:
        try:
            return await self.db.delete_one(
                self.COLLECTION_NAME, {"id": str(item_id)}
            )
        except Exception as e:
            raise ItemOperationError(f"Failed to delete item: {str(e)}") from e
