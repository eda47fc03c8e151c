from typing import Optional


class EmployeeDirectoryError(Exception):
    """Base error rendered as a failed response envelope."""

    status_code = 500

    def __init__(self, message: str, error: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.error = error

    def to_envelope(self) -> dict:
        body = {"success": False, "message": self.message}
        if self.error:
            body["error"] = self.error
        return body


class BadRequest(EmployeeDirectoryError):
    status_code = 400


class NotFound(EmployeeDirectoryError):
    status_code = 404


class InternalError(EmployeeDirectoryError):
    status_code = 500
