"""Protocol shared by the document stores the repositories run on."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Protocol


class DocumentDatabase(Protocol):
    """Async document store interface used by repositories and probes."""

    name: str

    async def find_one(
        self, collection_name: str, query: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]: ...

    async def find_many(
        self,
        collection_name: str,
        query: Dict[str, Any],
        sort_by: Optional[str] = None,
        sort_direction: int = 1,
        skip: int = 0,
        limit: int = 100,
    ) -> List[Dict[str, Any]]: ...

    async def insert_one(
        self, collection_name: str, document: Dict[str, Any]
    ) -> Dict[str, Any]: ...

    async def delete_one(self, collection_name: str, query: Dict[str, Any]) -> bool: ...

    async def ping(self) -> None: ...

    async def create_indexes(self) -> None: ...

    def close(self) -> None: ...
