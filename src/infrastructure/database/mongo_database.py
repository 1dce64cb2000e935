"""
MongoDB Database - Infrastructure Layer

This module provides a MongoDB database client for interacting with MongoDB.
It handles connection, collections, and basic CRUD operations. Driver calls
are blocking, so every one runs in a worker thread via asyncio.to_thread.
"""

import asyncio
from typing import Any, Dict, List, Optional

import pymongo.errors
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

from src.shared import get_logger

logger = get_logger(__name__)

ITEMS_COLLECTION = "items"


class MongoDatabase:
    """MongoDB database client."""

    def __init__(self, mongo_uri: str, db_name: str, *, timeout_ms: int = 5000):
        """
        Initialize the MongoDB database client.

        The client connects lazily, so constructing it never blocks.

        Args:
            mongo_uri: MongoDB connection URI
            db_name: Name of the database to use
            timeout_ms: Server selection timeout in milliseconds
        """
        self.client: MongoClient = MongoClient(
            mongo_uri, serverSelectionTimeoutMS=timeout_ms
        )
        self.db: Database = self.client[db_name]
        self.name = db_name

    def get_collection(self, collection_name: str) -> Collection:
        """
        Get a collection from the database.

        Args:
            collection_name: Name of the collection

        Returns:
            MongoDB collection
        """
        return self.db[collection_name]

    async def find_one(
        self, collection_name: str, query: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        """
        Find a single document in a collection.

        Args:
            collection_name: Name of the collection
            query: Query to match documents

        Returns:
            The document if found, None otherwise
        """
        collection = self.db[collection_name]
        return await asyncio.to_thread(collection.find_one, query, {"_id": 0})

    async def find_many(
        self,
        collection_name: str,
        query: Dict[str, Any],
        sort_by: Optional[str] = None,
        sort_direction: int = 1,
        skip: int = 0,
        limit: int = 100,
    ) -> List[Dict[str, Any]]:
        """
        Find multiple documents in a collection.

        Args:
            collection_name: Name of the collection
            query: Query to match documents
            sort_by: Field to sort by
            sort_direction: Sort direction (1 for ascending, -1 for descending)
            skip: Number of documents to skip
            limit: Maximum number of documents to return

        Returns:
            List of documents
        """
        collection = self.db[collection_name]

        def fetch() -> List[Dict[str, Any]]:
            cursor = collection.find(query, {"_id": 0})
            if sort_by:
                cursor = cursor.sort(sort_by, sort_direction)
            return list(cursor.skip(skip).limit(limit))

        return await asyncio.to_thread(fetch)

    async def insert_one(
        self, collection_name: str, document: Dict[str, Any]
    ) -> Dict[str, Any]:
        """
        Insert a document into a collection.

        Args:
            collection_name: Name of the collection
            document: Document to insert

        Returns:
            The inserted document

        Raises:
            pymongo.errors.OperationFailure: If the insert is not acknowledged
        """
        payload = dict(document)
        result = await asyncio.to_thread(self.db[collection_name].insert_one, payload)
        if not result.acknowledged:
            raise pymongo.errors.OperationFailure(
                f"Failed to insert document in {collection_name}"
            )
        return document

    async def delete_one(self, collection_name: str, query: Dict[str, Any]) -> bool:
        """
        Delete a document from a collection.

        Args:
            collection_name: Name of the collection
            query: Query to match document to delete

        Returns:
            True if a document was deleted
        """
        result = await asyncio.to_thread(self.db[collection_name].delete_one, query)
        return result.deleted_count > 0

    async def ping(self) -> None:
        """Round-trip a ping command; raises on connection failure."""
        await asyncio.to_thread(self.client.admin.command, "ping")

    def close(self) -> None:
        """Close the database connection."""
        self.client.close()

    async def create_indexes(self) -> None:
        """
        Create the indexes the repositories rely on.
        Called during application startup.
        """
        collection = self.db[ITEMS_COLLECTION]

        def create() -> None:
            collection.create_index("id", name="id_idx", unique=True)
            collection.create_index("created_at", name="created_at_idx")
            collection.create_index("name", name="name_idx")

        try:
            await asyncio.to_thread(create)
        except pymongo.errors.OperationFailure as exc:
            logger.warning("mongo.indexes.failed", error=str(exc))
