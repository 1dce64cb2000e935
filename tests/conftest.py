from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path
from types import SimpleNamespace
from typing import Any, Dict, Iterator, List, Sequence
from uuid import uuid4

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.domain.entities.health import ProbeOutcome  # noqa: E402
from src.domain.entities.item import Item  # noqa: E402
from src.infrastructure.database import InMemoryDatabase  # noqa: E402
from src.infrastructure.repositories.item_repository import (  # noqa: E402
    ItemRepository,
)
from src.infrastructure.services.health_aggregator import (  # noqa: E402
    HealthAggregator,
)


@pytest.fixture()
def sample_item() -> Item:
    return Item(
        id=uuid4(),
        name="widget",
        description="Unit test item",
        attributes={"color": "blue"},
    )


@pytest.fixture()
def memory_database() -> InMemoryDatabase:
    return InMemoryDatabase(name="unit")


@pytest.fixture()
def item_repository(memory_database: InMemoryDatabase) -> ItemRepository:
    return ItemRepository(memory_database)


@pytest.fixture()
def aggregator() -> HealthAggregator:
    return HealthAggregator(default_timeout=1.0)


async def healthy_probe() -> ProbeOutcome:
    return ProbeOutcome.healthy("ok")


async def failing_probe() -> ProbeOutcome:
    raise ConnectionError("connection refused")


class FakeCursor:
    def __init__(self, documents: Sequence[Dict[str, Any]]):
        self._documents = list(documents)
        self._skip = 0
        self._limit: int | None = None
        self.sorted_by: tuple[Any, ...] | None = None

    def sort(self, *args: Any, **kwargs: Any) -> "FakeCursor":
        self.sorted_by = args
        return self

    def skip(self, amount: int) -> "FakeCursor":
        self._skip = amount
        return self

    def limit(self, amount: int) -> "FakeCursor":
        self._limit = amount
        return self

    def __iter__(self) -> Iterator[Dict[str, Any]]:
        docs = self._documents[self._skip :]
        if self._limit is not None:
            docs = docs[: self._limit]
        return iter(docs)


class FakeCollection:
    def __init__(self) -> None:
        self.documents: Dict[str, Dict[str, Any]] = {}
        self.last_query: Dict[str, Any] | None = None
        self.created_indexes: List[tuple[Any, ...]] = []
        self.acknowledge = True

    def find_one(
        self, query: Dict[str, Any], projection: Any = None
    ) -> Dict[str, Any] | None:
        self.last_query = query
        key = query.get("id")
        if not isinstance(key, str):
            return None
        return self.documents.get(key)

    def find(self, query: Dict[str, Any], projection: Any = None) -> FakeCursor:
        self.last_query = query
        results = [
            doc
            for doc in self.documents.values()
            if all(doc.get(key) == value for key, value in query.items())
        ]
        return FakeCursor(results)

    def insert_one(self, document: Dict[str, Any]) -> Any:
        self.documents[document["id"]] = document
        return SimpleNamespace(
            acknowledged=self.acknowledge, inserted_id=document["id"]
        )

    def delete_one(self, query: Dict[str, Any]) -> Any:
        key = query.get("id")
        if isinstance(key, str) and key in self.documents:
            del self.documents[key]
            return SimpleNamespace(deleted_count=1, acknowledged=True)
        return SimpleNamespace(deleted_count=0, acknowledged=True)

    def create_index(self, keys: Any, name: str | None = None, **kwargs: Any) -> Any:
        self.created_indexes.append((keys, name, kwargs))
        return name or keys


@pytest.fixture()
def dummy_now() -> datetime:
    return datetime.now(timezone.utc)
