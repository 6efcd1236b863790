import pytest

from conftest import BrokenCollection
from models.employee import EmployeeCreate
from services.employee_store import EmployeeStore
from utils.errors import DuplicateKeyError, StorageValidationError

pytestmark = pytest.mark.anyio


def _employee(**overrides):
    data = dict(
        name="Jane Doe",
        email="jane@x.com",
        mobile="1234567890",
        designation="Engineer",
        gender="Female",
        course="CS",
        image="iVBORw0KGgo=",
    )
    data.update(overrides)
    return EmployeeCreate(**data)


async def test_create_assigns_id_and_timestamps(store, collection):
    await store.ensure_indexes()
    employee = await store.create(_employee())

    assert employee.id == str(collection.documents[0]["_id"])
    assert employee.created_at == employee.updated_at
    assert employee.email == "jane@x.com"


async def test_list_is_empty_without_creates(store):
    assert await store.list() == []


async def test_list_returns_every_created_employee(store):
    await store.ensure_indexes()
    for i in range(3):
        await store.create(_employee(email=f"user{i}@x.com"))

    employees = await store.list()
    assert [e.email for e in employees] == ["user0@x.com", "user1@x.com", "user2@x.com"]


async def test_duplicate_email_is_rejected(store, collection):
    await store.ensure_indexes()
    await store.create(_employee())

    with pytest.raises(DuplicateKeyError) as exc_info:
        await store.create(_employee(name="Other Jane"))

    assert exc_info.value.field == "email"
    assert len(collection.documents) == 1


async def test_empty_required_field_fails_storage_validation(store, collection):
    with pytest.raises(StorageValidationError):
        await store.create(_employee(image=""))
    assert collection.documents == []


async def test_collection_errors_propagate():
    store = EmployeeStore(BrokenCollection())
    with pytest.raises(RuntimeError):
        await store.list()
