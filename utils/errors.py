# utils/errors.py
from enum import Enum
from typing import Dict, Optional, Tuple


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    DUPLICATE_KEY = "duplicate_key"
    STORAGE_VALIDATION = "storage_validation"
    NETWORK = "network"
    UNEXPECTED = "unexpected"


class EmployeeDirectoryError(Exception):
    """Base class for every failure the directory knows how to report."""
    kind = ErrorKind.UNEXPECTED
    # Client-safe text answered instead of the generic create message
    public_message: Optional[str] = None


class ValidationError(EmployeeDirectoryError):
    """Submission failed the schema check; carries one message per field."""
    kind = ErrorKind.VALIDATION

    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        super().__init__(self.message)

    @property
    def message(self) -> str:
        return ", ".join(self.errors.values())


class DuplicateKeyError(EmployeeDirectoryError):
    kind = ErrorKind.DUPLICATE_KEY

    def __init__(self, field: str, value: str):
        self.field = field
        self.value = value
        super().__init__(f"Duplicate value for {field}: {value}")


class StorageValidationError(EmployeeDirectoryError):
    """Document rejected by the store's own required/enum checks."""
    kind = ErrorKind.STORAGE_VALIDATION


class NetworkError(EmployeeDirectoryError):
    """The request never reached the endpoint or no response came back."""
    kind = ErrorKind.NETWORK


class UnexpectedError(EmployeeDirectoryError):
    kind = ErrorKind.UNEXPECTED


GENERIC_CREATE_MESSAGE = "Error adding employee"
GENERIC_LIST_MESSAGE = "Error fetching employees"
DUPLICATE_EMAIL_MESSAGE = "Employee with this email already exists"


def error_response(
    kind: ErrorKind,
    duplicate_mode: str = "generic",
    message: Optional[str] = None,
    generic_message: str = GENERIC_CREATE_MESSAGE,
) -> Tuple[int, str]:
    """
    Map an error kind to the HTTP status and client-safe message.

    Only validation failures pass their own message through; every other kind
    answers with a fixed text so no internal detail reaches the client.
    """
    if kind is ErrorKind.VALIDATION:
        return 400, message or "Invalid employee data"
    if kind is ErrorKind.DUPLICATE_KEY:
        if duplicate_mode == "conflict":
            return 409, DUPLICATE_EMAIL_MESSAGE
        return 500, generic_message
    if kind is ErrorKind.STORAGE_VALIDATION:
        return 500, generic_message
    if kind is ErrorKind.NETWORK:
        return 502, generic_message
    if kind is ErrorKind.UNEXPECTED:
        return 500, generic_message
    raise AssertionError(f"Unhandled error kind: {kind}")
