# clients/employee_client.py
import logging
from typing import List, Optional

import httpx

from models.employee import Employee, EmployeeCreatedResponse
from models.submission import SubmissionDraft
from utils.errors import EmployeeDirectoryError, ErrorKind, NetworkError

logger = logging.getLogger(__name__)

EMPLOYEE_API_PATH = "/api/Employee"


class ApiError(EmployeeDirectoryError):
    """The endpoint answered with an error status."""

    def __init__(self, status_code: int, message: Optional[str] = None):
        self.status_code = status_code
        self.message = message
        super().__init__(message or f"HTTP {status_code}")

    @property
    def kind(self) -> ErrorKind:
        if self.status_code == 400:
            return ErrorKind.VALIDATION
        if self.status_code == 409:
            return ErrorKind.DUPLICATE_KEY
        return ErrorKind.UNEXPECTED


def _error_message(response: httpx.Response) -> Optional[str]:
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("message"), str) and body["message"]:
        return body["message"]
    return None


class EmployeeApiClient:
    """Talks to the employee endpoint on behalf of the page views."""

    def __init__(self, http: httpx.AsyncClient, path: str = EMPLOYEE_API_PATH):
        self.http = http
        self.path = path

    async def _send(self, method: str, **kwargs) -> httpx.Response:
        try:
            response = await self.http.request(method, self.path, **kwargs)
        except httpx.RequestError as e:
            logger.warning("%s %s failed: %s", method, self.path, e)
            raise NetworkError(str(e)) from e
        if response.is_error:
            raise ApiError(response.status_code, _error_message(response))
        return response

    async def create_employee(self, draft: SubmissionDraft) -> EmployeeCreatedResponse:
        files = None
        if draft.image is not None:
            files = {"image": (draft.image.filename, draft.image.data, draft.image.content_type)}
        response = await self._send("POST", data=draft.fields(), files=files)
        return EmployeeCreatedResponse.model_validate(response.json())

    async def list_employees(self) -> List[Employee]:
        response = await self._send("GET")
        body = response.json() or {}
        return [Employee.model_validate(item) for item in body.get("employees") or []]

    async def aclose(self):
        await self.http.aclose()
