"""
In-memory Database - Infrastructure Layer

A document store with the same async interface as MongoDatabase, held
entirely in process memory. Each instance owns its own collections;
documents are deep-copied on the way in and out so callers never share
mutable state with the store.
"""

from __future__ import annotations

import copy
import threading
from typing import Any, Dict, List, Optional


class InMemoryDatabase:
    """Process-local document store."""

    def __init__(self, name: str = "memory") -> None:
        self.name = name
        self._collections: Dict[str, List[Dict[str, Any]]] = {}
        self._lock = threading.Lock()
        self.closed = False

    def _collection(self, collection_name: str) -> List[Dict[str, Any]]:
        return self._collections.setdefault(collection_name, [])

    @staticmethod
    def _matches(document: Dict[str, Any], query: Dict[str, Any]) -> bool:
        return all(document.get(key) == value for key, value in query.items())

    def count(self, collection_name: str) -> int:
        return len(self._collections.get(collection_name, []))

    async def find_one(
        self, collection_name: str, query: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        with self._lock:
            for document in self._collection(collection_name):
                if self._matches(document, query):
                    return copy.deepcopy(document)
        return None

    async def find_many(
        self,
        collection_name: str,
        query: Dict[str, Any],
        sort_by: Optional[str] = None,
        sort_direction: int = 1,
        skip: int = 0,
        limit: int = 100,
    ) -> List[Dict[str, Any]]:
        with self._lock:
            documents = [
                doc
                for doc in self._collection(collection_name)
                if self._matches(doc, query)
            ]
        if sort_by:
            documents.sort(key=lambda doc: doc.get(sort_by), reverse=sort_direction < 0)
        return copy.deepcopy(documents[skip : skip + limit])

    async def insert_one(
        self, collection_name: str, document: Dict[str, Any]
    ) -> Dict[str, Any]:
        with self._lock:
            self._collection(collection_name).append(copy.deepcopy(document))
        return document

    async def delete_one(self, collection_name: str, query: Dict[str, Any]) -> bool:
        with self._lock:
            documents = self._collection(collection_name)
            for index, document in enumerate(documents):
                if self._matches(document, query):
                    del documents[index]
                    return True
        return False

    async def ping(self) -> None:
        if self.closed:
            raise ConnectionError(f"In-memory database '{self.name}' is closed")

    async def create_indexes(self) -> None:
        return None

    def close(self) -> None:
        self.closed = True
