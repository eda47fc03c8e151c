from typing import Dict, Optional


class EmployeeAPIError(Exception):
    """Any failed call to the employees API, HTTP or transport level.

    ``status_code`` is ``None`` when the request never got a response.
    ``detail`` carries the server's ``error`` field when it sent one.
    """

    def __init__(self, message: str, status_code: Optional[int] = None, detail: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.detail = detail

    @property
    def is_transport_error(self) -> bool:
        return self.status_code is None


class FormValidationError(Exception):
    """Raised before any network call when the form has field errors."""

    def __init__(self, errors: Dict[str, str]):
        super().__init__("Please fix the form errors before submitting")
        self.errors = errors
