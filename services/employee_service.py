# services/employee_service.py
import logging
from typing import Any, Dict, List, Optional

from models.employee import Employee
from schemas.employee_schema import DEFAULT_MAX_IMAGE_SIZE, validate_employee
from services.employee_store import EmployeeStore
from utils.errors import (
    GENERIC_LIST_MESSAGE,
    EmployeeDirectoryError,
    UnexpectedError,
    ValidationError,
)

logger = logging.getLogger(__name__)


async def add_employee(
    store: EmployeeStore,
    fields: Dict[str, Any],
    image: Optional[bytes],
    max_image_size: int = DEFAULT_MAX_IMAGE_SIZE,
) -> Employee:
    """
    Validate a multipart submission and persist it.

    Args:
        store: Employee store the document is written to
        fields: Text fields taken from the form body
        image: Raw bytes of the uploaded image, None when no file was sent

    Returns:
        The stored employee with its generated id and timestamps
    """
    result = validate_employee({**fields, "image": image}, max_image_size=max_image_size)
    if not result.ok:
        raise ValidationError(result.errors)

    try:
        return await store.create(result.value)
    except EmployeeDirectoryError as e:
        logger.error("Error adding employee: %s", e, exc_info=True)
        raise
    except Exception as e:
        logger.error("Error adding employee: %s", e, exc_info=True)
        raise UnexpectedError(str(e)) from e


async def get_employees(store: EmployeeStore) -> List[Employee]:
    try:
        return await store.list()
    except Exception as e:
        logger.error("Error fetching employees: %s", e, exc_info=True)
        error = UnexpectedError(str(e))
        error.public_message = GENERIC_LIST_MESSAGE
        raise error from e
