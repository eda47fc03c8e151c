import logging
from typing import Dict, Optional, Set

from employee_directory.client.api import EmployeeAPI
from employee_directory.client.exceptions import EmployeeAPIError, FormValidationError
from employee_directory.client.responses import EmployeeRecord
from employee_directory.client.validation import sanitize_phone, validate_field, validate_form

logger = logging.getLogger(__name__)

FORM_FIELDS = ("name", "email", "position", "phone", "department")
DUPLICATE_EMAIL_MESSAGE = "This email is already registered"


def _is_duplicate_email(error: EmployeeAPIError) -> bool:
    text = f"{error.message} {error.detail or ''}".lower()
    return "email" in text and any(word in text for word in ("exists", "unique", "duplicate"))


class EmployeeForm:
    """State behind the create/edit employee page."""

    def __init__(self, api: EmployeeAPI, employee_id: Optional[int] = None) -> None:
        self.api = api
        self.employee_id = employee_id
        self.data: Dict[str, str] = {field: "" for field in FORM_FIELDS}
        self.errors: Dict[str, Optional[str]] = {}
        self.touched: Set[str] = set()
        self.is_submitting: bool = False
        self.load_error: Optional[str] = None

    @property
    def is_edit_mode(self) -> bool:
        return self.employee_id is not None

    async def load(self) -> Optional[EmployeeRecord]:
        """Populate the form from the stored record when editing"""
        if not self.is_edit_mode:
            return None
        self.load_error = None
        try:
            employee = await self.api.get_employee_by_id(self.employee_id)
        except EmployeeAPIError as e:
            self.load_error = e.message
            return None
        self.data = employee.form_data()
        return employee

    def change(self, field: str, value: Optional[str]) -> str:
        sanitized = sanitize_phone(value) if field == "phone" else (value or "")
        self.data[field] = sanitized
        if field in self.touched:
            self.errors[field] = validate_field(field, sanitized)
        return sanitized

    def blur(self, field: str) -> Optional[str]:
        self.touched.add(field)
        self.errors[field] = validate_field(field, self.data.get(field))
        return self.errors[field]

    async def submit(self) -> EmployeeRecord:
        self.touched.update(FORM_FIELDS)
        result = validate_form(self.data)
        if not result.is_valid:
            self.errors = dict(result.errors)
            raise FormValidationError(result.errors)

        self.errors = {}
        self.is_submitting = True
        try:
            if self.is_edit_mode:
                saved = await self.api.update_employee(self.employee_id, self.data)
            else:
                saved = await self.api.create_employee(self.data)
        except EmployeeAPIError as e:
            if _is_duplicate_email(e):
                self.errors["email"] = DUPLICATE_EMAIL_MESSAGE
            logger.warning(f"Saving employee failed: {e.message}")
            raise
        finally:
            self.is_submitting = False

        return saved
