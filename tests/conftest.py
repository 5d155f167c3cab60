"""
Fixtures compartidas.

- `fake_db`: base en memoria con la misma superficie async que usan los repos
  (find/sort/to_list, find_one, insert_one, find_one_and_update,
  find_one_and_delete, delete_many, update_many, count_documents) y con
  unicidad sobre `name` en folders y tags.
- `test_client`: httpx.AsyncClient contra la app con `get_async_db` sobreescrito.
"""
import copy
import os
from types import SimpleNamespace
from typing import Any, Dict, Iterable, List

import pytest
import pytest_asyncio
from bson import ObjectId
from httpx import ASGITransport, AsyncClient
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

# Antes de importar la app: nada debe apuntar a un Mongo real
os.environ["MONGO_URI"] = "mongodb://localhost:27017"
os.environ["MONGO_DB"] = "folders_test"
os.environ["LOG_LEVEL"] = "WARNING"


def _matches(doc: Dict[str, Any], filt: Dict[str, Any]) -> bool:
    for key, cond in filt.items():
        if isinstance(cond, dict) and "$in" in cond:
            if key not in doc or doc[key] not in cond["$in"]:
                return False
        elif key not in doc or doc[key] != cond:
            return False
    return True


class FakeCursor:
    def __init__(self, docs: List[Dict[str, Any]]) -> None:
        self._docs = docs

    def sort(self, key: str, direction: int = 1) -> "FakeCursor":
        self._docs.sort(key=lambda d: d.get(key), reverse=direction == -1)
        return self

    async def to_list(self, length=None) -> List[Dict[str, Any]]:
        return list(self._docs if length is None else self._docs[:length])


class FakeCollection:
    def __init__(self, unique: Iterable[str] = ()) -> None:
        self.docs: List[Dict[str, Any]] = []
        self.unique = tuple(unique)

    def _check_unique(self, candidate: Dict[str, Any]) -> None:
        for field in self.unique:
            for d in self.docs:
                if d["_id"] != candidate["_id"] and field in d and d.get(field) == candidate.get(field):
                    raise DuplicateKeyError(f"E11000 duplicate key error dup key: {{ {field}: ... }}", code=11000)

    def _apply(self, doc: Dict[str, Any], update: Dict[str, Any]) -> Dict[str, Any]:
        new = copy.deepcopy(doc)
        new.update(update.get("$set", {}))
        for field in update.get("$unset", {}):
            new.pop(field, None)
        return new

    def _first(self, filt: Dict[str, Any]):
        return next((d for d in self.docs if _matches(d, filt)), None)

    async def insert_one(self, data: Dict[str, Any]):
        data.setdefault("_id", ObjectId())
        doc = copy.deepcopy(data)
        self._check_unique(doc)
        self.docs.append(doc)
        return SimpleNamespace(inserted_id=doc["_id"])

    async def find_one(self, filt: Dict[str, Any]):
        doc = self._first(filt)
        return copy.deepcopy(doc) if doc else None

    def find(self, filt: Dict[str, Any]) -> FakeCursor:
        return FakeCursor([copy.deepcopy(d) for d in self.docs if _matches(d, filt)])

    async def find_one_and_update(self, filt, update, return_document=ReturnDocument.BEFORE):
        doc = self._first(filt)
        if doc is None:
            return None
        new = self._apply(doc, update)
        self._check_unique(new)
        self.docs[self.docs.index(doc)] = new
        return copy.deepcopy(new if return_document == ReturnDocument.AFTER else doc)

    async def find_one_and_delete(self, filt):
        doc = self._first(filt)
        if doc is None:
            return None
        self.docs.remove(doc)
        return doc

    async def delete_many(self, filt):
        keep = [d for d in self.docs if not _matches(d, filt)]
        deleted = len(self.docs) - len(keep)
        self.docs = keep
        return SimpleNamespace(deleted_count=deleted)

    async def update_many(self, filt, update):
        count = 0
        for i, d in enumerate(self.docs):
            if _matches(d, filt):
                self.docs[i] = self._apply(d, update)
                count += 1
        return SimpleNamespace(modified_count=count)

    async def count_documents(self, filt):
        return sum(1 for d in self.docs if _matches(d, filt))


class FakeDatabase:
    def __init__(self) -> None:
        self.collections = {
            "folders": FakeCollection(unique=["name"]),
            "tags": FakeCollection(unique=["name"]),
            "notes": FakeCollection(),
        }

    def __getitem__(self, name: str) -> FakeCollection:
        return self.collections.setdefault(name, FakeCollection())

    async def command(self, cmd):
        return {"ok": 1.0}


@pytest.fixture
def fake_db() -> FakeDatabase:
    return FakeDatabase()


@pytest_asyncio.fixture
async def test_client(fake_db):
    """Cliente HTTP contra la app con la base en memoria."""
    from app.main import app
    from app.infrastructure.db.mongo_async import get_async_db

    app.dependency_overrides[get_async_db] = lambda: fake_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
