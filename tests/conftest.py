from typing import Optional

import httpx
import pytest
from bson.objectid import ObjectId
from fastapi.testclient import TestClient
from pymongo.errors import DuplicateKeyError
from pymongo.results import InsertOneResult

from clients.employee_client import EmployeeApiClient
from config import Settings
from main import create_app
from models.submission import ImageFile, SubmissionDraft
from services.employee_store import EmployeeStore

PNG_HEADER = b"\x89PNG\r\n\x1a\n"


def make_image(size: int) -> bytes:
    return PNG_HEADER + b"\0" * (size - len(PNG_HEADER))


class FakeCursor:
    def __init__(self, documents):
        self._documents = documents

    async def to_list(self, length: Optional[int] = None):
        docs = [dict(d) for d in self._documents]
        return docs if length is None else docs[:length]


class FakeEmployeeCollection:
    """In-memory stand-in for the Motor collection used by EmployeeStore."""

    def __init__(self):
        self.documents = []
        self.unique_fields = set()

    async def create_index(self, key, unique=False):
        if unique:
            self.unique_fields.add(key)
        return f"{key}_1"

    async def insert_one(self, document):
        for field in self.unique_fields:
            if any(d.get(field) == document.get(field) for d in self.documents):
                raise DuplicateKeyError(f"E11000 duplicate key error collection: employees index: {field}_1")
        stored = dict(document)
        stored["_id"] = ObjectId()
        self.documents.append(stored)
        return InsertOneResult(stored["_id"], acknowledged=True)

    def find(self, query=None):
        return FakeCursor(self.documents)


class BrokenCollection(FakeEmployeeCollection):
    def find(self, query=None):
        raise RuntimeError("connection reset by peer")

    async def insert_one(self, document):
        raise RuntimeError("connection reset by peer")


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def collection():
    return FakeEmployeeCollection()


@pytest.fixture
def store(collection):
    return EmployeeStore(collection)


@pytest.fixture
def settings():
    return Settings(MONGODB_URI="mongodb://unused:27017", DUPLICATE_EMAIL_MODE="generic")


def build_client(settings, store):
    app = create_app(settings, store=store)
    transport = httpx.ASGITransport(app=app)
    app.state.api_client = EmployeeApiClient(httpx.AsyncClient(transport=transport, base_url="http://testserver"))
    return TestClient(app)


@pytest.fixture
def client(settings, store):
    with build_client(settings, store) as test_client:
        yield test_client


@pytest.fixture
def jane_fields():
    return {
        "name": "Jane Doe",
        "email": "jane@x.com",
        "mobile": "1234567890",
        "designation": "Engineer",
        "gender": "Female",
        "course": "CS",
    }


@pytest.fixture
def jane_draft(jane_fields):
    return SubmissionDraft(**jane_fields, image=ImageFile(filename="jane.png", content_type="image/png", data=make_image(1024)))
