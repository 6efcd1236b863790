# views/add_employee_form.py
import logging
from enum import Enum
from typing import Dict, Optional

from clients.employee_client import ApiError, EmployeeApiClient
from models.submission import SubmissionDraft
from schemas.employee_schema import DEFAULT_MAX_IMAGE_SIZE, validate_employee
from utils.errors import NetworkError
from views.notifications import Notification

logger = logging.getLogger(__name__)

LISTING_ROUTE = "/employees"
ADD_FAILED_FALLBACK = "There was a problem adding the employee. Please try again."
UNEXPECTED_FALLBACK = "An unexpected error occurred. Please try again."


class FormState(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    ERROR = "error"


class AddEmployeeFormView:
    """
    Strictly validated create flow.

    The draft is checked against the employee schema before anything is sent;
    a failing draft only produces inline field messages. A passing draft is
    posted as multipart data and the outcome is reported through
    `notification`. Either way the view settles back in IDLE, keeping the
    outcome in `last_outcome`.
    """

    def __init__(self, api_client: EmployeeApiClient, max_image_size: int = DEFAULT_MAX_IMAGE_SIZE):
        self.api_client = api_client
        self.max_image_size = max_image_size
        self.draft = SubmissionDraft()
        self.state = FormState.IDLE
        self.last_outcome: Optional[FormState] = None
        self.field_errors: Dict[str, str] = {}
        self.notification: Optional[Notification] = None
        self.redirect_to: Optional[str] = None

    @property
    def is_submitting(self) -> bool:
        return self.state is FormState.SUBMITTING

    def validate(self, draft: SubmissionDraft) -> bool:
        result = validate_employee(draft, max_image_size=self.max_image_size)
        self.field_errors = result.errors
        return result.ok

    async def submit(self, draft: SubmissionDraft) -> FormState:
        self.draft = draft
        self.notification = None
        self.redirect_to = None
        if self.is_submitting:
            return self.state
        if not self.validate(draft):
            return self.state

        self.state = FormState.SUBMITTING
        outcome = FormState.ERROR
        try:
            created = await self.api_client.create_employee(draft)
            self.notification = Notification(title="Success", description=created.message)
            self.redirect_to = LISTING_ROUTE
            self.draft = SubmissionDraft()
            outcome = FormState.SUCCESS
        except ApiError as e:
            logger.error("Error adding employee: %s", e)
            self.notification = Notification.error("Add Employee Failed", e.message or ADD_FAILED_FALLBACK)
        except NetworkError as e:
            logger.error("Error adding employee: %s", e)
            self.notification = Notification.error("Add Employee Failed", ADD_FAILED_FALLBACK)
        except Exception as e:
            logger.error("Unexpected error adding employee: %s", e, exc_info=True)
            self.notification = Notification.error("Unexpected Error", UNEXPECTED_FALLBACK)
        finally:
            self.state = FormState.IDLE

        self.last_outcome = outcome
        return outcome
