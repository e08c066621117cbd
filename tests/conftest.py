"""
Shared fixtures for the HRMS test suite.

The MongoDB collection is replaced by an in-memory fake that implements the
handful of motor calls the service makes, so no database server is needed.
"""

import os
from types import SimpleNamespace

import pytest
import pytest_asyncio
from bson import ObjectId
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("LOG_LEVEL", "WARNING")

from hrms.app import create_app  # noqa: E402
from hrms.core.config.database import get_database  # noqa: E402
from hrms.core.config.hrms_settings import HrmsSettings  # noqa: E402


class FakeCursor:
    def __init__(self, docs):
        self._docs = list(docs)

    def __aiter__(self):
        return self._iterate()

    async def _iterate(self):
        for doc in self._docs:
            yield dict(doc)


class FakeCollection:
    """In-memory stand-in for an AsyncIOMotorCollection"""

    def __init__(self):
        self.docs: list[dict] = []
        self.calls: list[str] = []
        self.error: Exception | None = None

    def _check(self, name):
        self.calls.append(name)
        if self.error is not None:
            raise self.error

    def _matches(self, doc, query):
        return all(doc.get(k) == v for k, v in query.items())

    def find(self, query):
        self._check("find")
        return FakeCursor(d for d in self.docs if self._matches(d, query))

    async def find_one(self, query):
        self._check("find_one")
        for doc in self.docs:
            if self._matches(doc, query):
                return dict(doc)
        return None

    async def insert_one(self, doc):
        self._check("insert_one")
        stored = dict(doc)
        stored["_id"] = ObjectId()
        self.docs.append(stored)
        return SimpleNamespace(inserted_id=stored["_id"])

    async def find_one_and_update(self, query, update):
        self._check("find_one_and_update")
        for doc in self.docs:
            if self._matches(doc, query):
                before = dict(doc)
                doc.update(update["$set"])
                return before
        return None

    async def delete_one(self, query):
        self._check("delete_one")
        for i, doc in enumerate(self.docs):
            if self._matches(doc, query):
                del self.docs[i]
                return SimpleNamespace(deleted_count=1)
        return SimpleNamespace(deleted_count=0)


class FakeDatabase:
    def __init__(self):
        self.collections: dict[str, FakeCollection] = {}

    def __getitem__(self, name):
        return self.collections.setdefault(name, FakeCollection())


@pytest.fixture
def fake_db():
    return FakeDatabase()


@pytest.fixture
def employees(fake_db):
    """The fake `employees` collection"""
    return fake_db["employees"]


@pytest.fixture
def settings():
    return HrmsSettings(mongodb_uri="mongodb://test:27017/hrms-test", log_level="WARNING")


@pytest.fixture
def app(settings, fake_db):
    application = create_app(settings)
    application.dependency_overrides[get_database] = lambda: fake_db
    return application


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX client talking to the app in-process.

    ASGITransport does not run the lifespan, so no MongoDB connection is opened.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
