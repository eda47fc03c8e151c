from pydantic import BaseModel, ConfigDict
from typing import Optional, List

BUSINESS_FIELDS = ("name", "email", "position", "phone", "department")


class EmployeeBase(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    position: Optional[str] = None
    phone: Optional[str] = None
    department: Optional[str] = None

    def missing_fields(self) -> List[str]:
        """Business fields that are absent or empty"""
        return [field for field in BUSINESS_FIELDS if not getattr(self, field)]


class EmployeeCreate(EmployeeBase):
    pass


class EmployeeUpdate(EmployeeBase):
    def changes(self) -> dict:
        """Fields supplied with a value, ready to merge into the stored record"""
        return {
            field: value
            for field, value in self.model_dump(exclude_unset=True).items()
            if value is not None
        }


class Employee(BaseModel):
    id: int
    name: str
    email: str
    position: str
    phone: Optional[str] = None
    department: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


# Response envelopes
class Envelope(BaseModel):
    success: bool
    message: str
    error: Optional[str] = None


class EmployeeResponse(Envelope):
    employee: Optional[Employee] = None


class EmployeeListResponse(Envelope):
    employees: List[Employee] = []
