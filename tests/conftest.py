"""
Shared fixtures.

FakeDatabase is an in-memory stand-in for the handful of pymongo calls the
stores make (find/find_one/insert_one/update_one with $set, $inc and
$setOnInsert, equality, $in and $regex filters).
"""

import copy
import re
from types import SimpleNamespace

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from database import get_db
from main import app


def _matches(doc, criteria):
    for key, expected in criteria.items():
        value = doc.get(key)
        if isinstance(expected, dict):
            if "$in" in expected and value not in expected["$in"]:
                return False
            if "$regex" in expected:
                flags = re.IGNORECASE if "i" in expected.get("$options", "") else 0
                if not isinstance(value, str) or not re.search(expected["$regex"], value, flags):
                    return False
        elif value != expected:
            return False
    return True


class FakeCursor:
    def __init__(self, docs):
        self._docs = docs

    def sort(self, keys, direction=1):
        if isinstance(keys, str):
            keys = [(keys, direction)]
        for key, order in reversed(keys):
            self._docs.sort(key=lambda d: d.get(key), reverse=order < 0)
        return self

    def __iter__(self):
        return iter(copy.deepcopy(self._docs))


class FakeCollection:
    def __init__(self):
        self.docs = []

    def insert_one(self, doc):
        doc = copy.deepcopy(doc)
        doc.setdefault("_id", ObjectId())
        self.docs.append(doc)
        return SimpleNamespace(inserted_id=doc["_id"])

    def find(self, criteria=None):
        return FakeCursor([d for d in self.docs if _matches(d, criteria or {})])

    def find_one(self, criteria=None):
        for doc in self.docs:
            if _matches(doc, criteria or {}):
                return copy.deepcopy(doc)
        return None

    def update_one(self, criteria, update, upsert=False):
        for doc in self.docs:
            if _matches(doc, criteria):
                doc.update(copy.deepcopy(update.get("$set", {})))
                for key, step in update.get("$inc", {}).items():
                    doc[key] = (doc.get(key) or 0) + step
                return SimpleNamespace(matched_count=1, upserted_id=None)
        if not upsert:
            return SimpleNamespace(matched_count=0, upserted_id=None)
        doc = {k: v for k, v in criteria.items() if not isinstance(v, dict)}
        doc.update(copy.deepcopy(update.get("$setOnInsert", {})))
        doc.update(copy.deepcopy(update.get("$set", {})))
        return SimpleNamespace(matched_count=0, upserted_id=self.insert_one(doc).inserted_id)


class FakeDatabase:
    def __init__(self):
        self.collections = {}

    def __getitem__(self, name):
        return self.collections.setdefault(name, FakeCollection())

    def list_collection_names(self):
        return sorted(self.collections)


@pytest.fixture
def db():
    return FakeDatabase()


@pytest.fixture
def client(db):
    app.dependency_overrides[get_db] = lambda: db
    yield TestClient(app)
    app.dependency_overrides.clear()
