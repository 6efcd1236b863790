# views/dashboard.py
import logging
from typing import List, Optional

from clients.employee_client import ApiError, EmployeeApiClient
from models.employee import Employee
from models.submission import SubmissionDraft
from views.notifications import Notification

logger = logging.getLogger(__name__)

FETCH_FAILED_FALLBACK = "Failed to fetch employees"
ADD_FAILED_FALLBACK = "Failed to add employee"


def _message_from(error: Exception, fallback: str) -> str:
    if isinstance(error, ApiError) and error.message:
        return error.message
    return fallback


class DashboardView:
    def __init__(self, api_client: EmployeeApiClient):
        self.api_client = api_client
        self.employees: List[Employee] = []
        self.is_loading = False
        self.show_add_form = False
        self.notification: Optional[Notification] = None
        self._mounted = False

    async def mount(self):
        """Fetch the employee list; repeated calls on the same view are no-ops."""
        if self._mounted:
            return
        self._mounted = True
        await self.fetch_employees()

    async def fetch_employees(self):
        self.is_loading = True
        try:
            self.employees = await self.api_client.list_employees()
        except Exception as e:
            logger.error("Error fetching employees: %s", e)
            self.notification = Notification.error("Error", _message_from(e, FETCH_FAILED_FALLBACK))
        finally:
            self.is_loading = False

    def toggle_add_form(self):
        self.show_add_form = not self.show_add_form

    async def submit_inline(self, draft: SubmissionDraft) -> bool:
        # Only the browser's `required` hints guard this form
        try:
            created = await self.api_client.create_employee(draft)
        except Exception as e:
            logger.error("Error adding employee: %s", e)
            self.notification = Notification.error("Error", _message_from(e, ADD_FAILED_FALLBACK))
            return False

        self.employees = [*self.employees, created.employee]
        self.show_add_form = False
        self.notification = Notification(title="Success", description="Employee added successfully")
        return True
