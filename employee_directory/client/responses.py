"""Decoding of the response shapes the employees API is known to return.

List endpoints may answer with a bare array, ``{"employees": [...]}`` or
``{"data": [...]}``; single-record endpoints with ``{"employee": {...}}``,
``{"data": {...}}`` or the record itself. Anything else is an error.
"""
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from employee_directory.client.exceptions import EmployeeAPIError

DEFAULT_ERROR_MESSAGE = "An error occurred"


class EmployeeRecord(BaseModel):
    id: Optional[int] = None
    name: Optional[str] = None
    email: Optional[str] = None
    position: Optional[str] = None
    phone: Optional[str] = None
    department: Optional[str] = None

    model_config = ConfigDict(extra="ignore")

    def form_data(self) -> dict:
        """Business fields as form strings, absent values as empty strings"""
        return {
            "name": self.name or "",
            "email": self.email or "",
            "position": self.position or "",
            "phone": self.phone or "",
            "department": self.department or "",
        }


class EmployeeListEnvelope(BaseModel):
    employees: List[EmployeeRecord]


class DataListEnvelope(BaseModel):
    data: List[EmployeeRecord]


class EmployeeEnvelope(BaseModel):
    employee: EmployeeRecord


class DataEnvelope(BaseModel):
    data: EmployeeRecord


_record_list = TypeAdapter(List[EmployeeRecord])


def decode_employee_list(payload: Any) -> List[EmployeeRecord]:
    try:
        if isinstance(payload, list):
            return _record_list.validate_python(payload)
        if isinstance(payload, dict):
            if isinstance(payload.get("employees"), list):
                return EmployeeListEnvelope.model_validate(payload).employees
            if isinstance(payload.get("data"), list):
                return DataListEnvelope.model_validate(payload).data
    except ValidationError as e:
        raise EmployeeAPIError(f"Unexpected response format: {e.error_count()} invalid field(s)")
    raise EmployeeAPIError("Unexpected response format")


def decode_employee(payload: Any) -> EmployeeRecord:
    try:
        if isinstance(payload, dict):
            if isinstance(payload.get("employee"), dict):
                return EmployeeEnvelope.model_validate(payload).employee
            if isinstance(payload.get("data"), dict):
                return DataEnvelope.model_validate(payload).data
            if "id" in payload:
                return EmployeeRecord.model_validate(payload)
    except ValidationError as e:
        raise EmployeeAPIError(f"Unexpected response format: {e.error_count()} invalid field(s)")
    raise EmployeeAPIError("Unexpected response format")


def error_message(payload: Any, fallback: Optional[str] = None) -> str:
    """Prefer the server's ``message``; otherwise the transport text."""
    if isinstance(payload, dict):
        message = payload.get("message")
        if isinstance(message, str) and message:
            return message
    return fallback or DEFAULT_ERROR_MESSAGE
