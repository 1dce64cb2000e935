from __future__ import annotations

import threading
from collections import defaultdict
from typing import Any, Dict, List

import pymongo.errors
import pytest

from src.infrastructure.database import mongo_database as mongo_module
from tests.conftest import FakeCollection


class _StubAdmin:
    def __init__(self) -> None:
        self.commands: List[str] = []
        self.fail = False

    def command(self, name: str) -> Dict[str, Any]:
        if self.fail:
            raise pymongo.errors.ServerSelectionTimeoutError("no servers")
        self.commands.append(name)
        return {"ok": 1}


class _StubMongoClient:
    def __init__(self, uri: str, **kwargs: Any) -> None:
        self.uri = uri
        self.kwargs = kwargs
        self.admin = _StubAdmin()
        self.closed = False
        self.databases: Dict[str, Dict[str, FakeCollection]] = defaultdict(
            lambda: defaultdict(FakeCollection)
        )

    def __getitem__(self, name: str) -> Dict[str, FakeCollection]:
        return self.databases[name]

    def close(self) -> None:
        self.closed = True


@pytest.fixture()
def mongo(monkeypatch: pytest.MonkeyPatch) -> mongo_module.MongoDatabase:
    monkeypatch.setattr(mongo_module, "MongoClient", _StubMongoClient)
    return mongo_module.MongoDatabase(
        "mongodb://localhost:27017", "unit", timeout_ms=1500
    )


def test_client_uses_selection_timeout(mongo: mongo_module.MongoDatabase) -> None:
    assert mongo.client.kwargs == {"serverSelectionTimeoutMS": 1500}
    assert mongo.name == "unit"


@pytest.mark.asyncio
async def test_insert_find_and_delete(mongo: mongo_module.MongoDatabase) -> None:
    await mongo.insert_one("items", {"id": "a", "name": "widget"})

    assert await mongo.find_one("items", {"id": "a"}) == {"id": "a", "name": "widget"}
    assert await mongo.find_many("items", {"name": "widget"}) == [
        {"id": "a", "name": "widget"}
    ]
    assert await mongo.delete_one("items", {"id": "a"}) is True
    assert await mongo.delete_one("items", {"id": "a"}) is False


@pytest.mark.asyncio
async def test_insert_raises_when_not_acknowledged(
    mongo: mongo_module.MongoDatabase,
) -> None:
    mongo.get_collection("items").acknowledge = False

    with pytest.raises(pymongo.errors.OperationFailure):
        await mongo.insert_one("items", {"id": "a"})


@pytest.mark.asyncio
async def test_ping_round_trips_admin_command(
    mongo: mongo_module.MongoDatabase,
) -> None:
    await mongo.ping()
    assert mongo.client.admin.commands == ["ping"]

    mongo.client.admin.fail = True
    with pytest.raises(pymongo.errors.ServerSelectionTimeoutError):
        await mongo.ping()


@pytest.mark.asyncio
async def test_create_indexes_and_close(mongo: mongo_module.MongoDatabase) -> None:
    await mongo.create_indexes()

    names = [entry[1] for entry in mongo.get_collection("items").created_indexes]
    assert names == ["id_idx", "created_at_idx", "name_idx"]

    mongo.close()
    assert mongo.client.closed is True


class _ThreadRecordingCollection(FakeCollection):
    def __init__(self) -> None:
        super().__init__()
        self.threads: Dict[str, int] = {}

    def _record(self, operation: str) -> None:
        self.threads[operation] = threading.get_ident()

    def find_one(self, query, projection=None):
        self._record("find_one")
        return super().find_one(query, projection)

    def find(self, query, projection=None):
        self._record("find")
        return super().find(query, projection)

    def insert_one(self, document):
        self._record("insert_one")
        return super().insert_one(document)

    def delete_one(self, query):
        self._record("delete_one")
        return super().delete_one(query)

    def create_index(self, keys, name=None, **kwargs):
        self._record("create_index")
        return super().create_index(keys, name=name, **kwargs)


@pytest.mark.asyncio
async def test_driver_calls_run_off_the_event_loop_thread(
    mongo: mongo_module.MongoDatabase,
) -> None:
    collection = _ThreadRecordingCollection()
    mongo.client.databases["unit"]["items"] = collection
    loop_thread = threading.get_ident()

    await mongo.insert_one("items", {"id": "a", "name": "widget"})
    await mongo.find_one("items", {"id": "a"})
    await mongo.find_many("items", {"name": "widget"}, sort_by="name")
    await mongo.delete_one("items", {"id": "a"})
    await mongo.create_indexes()

    assert set(collection.threads) == {
        "insert_one",
        "find_one",
        "find",
        "delete_one",
        "create_index",
    }
    assert loop_thread not in collection.threads.values()
