# services/employee_store.py
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List

from pymongo.errors import DuplicateKeyError as MongoDuplicateKeyError

from models.employee import Employee, EmployeeCreate, Gender
from utils.errors import DuplicateKeyError, StorageValidationError

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "email", "mobile", "designation", "gender", "course", "image")


def check_document(document: Dict[str, Any]):
    """Storage level checks: every required field present as a non-empty string."""
    for key in REQUIRED_FIELDS:
        value = document.get(key)
        if not isinstance(value, str) or not value:
            raise StorageValidationError(f"Employee validation failed: {key} is required")
    if document["gender"] not in [g.value for g in Gender]:
        raise StorageValidationError(
            f"Employee validation failed: `{document['gender']}` is not a valid gender"
        )


class EmployeeStore:
    def __init__(self, collection):
        self.collection = collection

    async def ensure_indexes(self):
        await self.collection.create_index("email", unique=True)

    async def create(self, employee: EmployeeCreate) -> Employee:
        document = employee.model_dump(mode="json")
        check_document(document)

        now = datetime.now(timezone.utc)
        document["createdAt"] = now
        document["updatedAt"] = now

        try:
            result = await self.collection.insert_one(document)
        except MongoDuplicateKeyError:
            raise DuplicateKeyError("email", employee.email)

        document["_id"] = result.inserted_id
        return Employee.from_document(document)

    async def list(self) -> List[Employee]:
        cursor = self.collection.find({})
        documents = await cursor.to_list(length=None)
        return [Employee.from_document(doc) for doc in documents]
