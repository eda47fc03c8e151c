import logging
from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from employee_directory.core.database import get_db
from employee_directory.core.exceptions import BadRequest, InternalError, NotFound
from employee_directory.crud import employee as crud_employee
from employee_directory.schemas import employee as schema_employee

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["Employees"])


# Signed 64-bit range of the integer primary key
MIN_ID = -(2 ** 63)
MAX_ID = 2 ** 63 - 1


def _parse_id(employee_id: str) -> int:
    """Path ids that are not storable integers can never match a record"""
    try:
        record_id = int(employee_id)
    except ValueError:
        raise NotFound(f"Employee with ID {employee_id} not found")
    if not MIN_ID <= record_id <= MAX_ID:
        raise NotFound(f"Employee with ID {employee_id} not found")
    return record_id


def _db_error_text(error: SQLAlchemyError) -> str:
    return str(getattr(error, "orig", None) or error)


@router.get("", response_model=schema_employee.EmployeeListResponse)
@router.get("/", response_model=schema_employee.EmployeeListResponse, include_in_schema=False)
async def get_all_employees(db: AsyncSession = Depends(get_db)):
    """List every employee record"""
    try:
        employees = await crud_employee.get_employees(db)
    except SQLAlchemyError as e:
        logger.error(f"Fetching Employees Error: {e}")
        raise InternalError("Failed to fetch employees", _db_error_text(e))

    return {
        "success": True,
        "message": "Employees fetched successfully",
        "employees": [schema_employee.Employee.model_validate(e) for e in employees],
    }


@router.get("/{employee_id}", response_model=schema_employee.EmployeeResponse)
async def get_employee(employee_id: str, db: AsyncSession = Depends(get_db)):
    record_id = _parse_id(employee_id)
    try:
        employee = await crud_employee.get_employee_by_id(db, record_id)
    except SQLAlchemyError as e:
        logger.error(f"Fetching Employee by ID Error: {e}")
        raise InternalError("Failed to fetch employee", _db_error_text(e))

    if not employee:
        raise NotFound(f"Employee with ID {employee_id} not found")

    return {
        "success": True,
        "message": "Employee fetched successfully",
        "employee": schema_employee.Employee.model_validate(employee),
    }


@router.post("", response_model=schema_employee.EmployeeResponse)
@router.post("/", response_model=schema_employee.EmployeeResponse, include_in_schema=False)
async def create_employee(
    employee: Optional[schema_employee.EmployeeCreate] = None,
    db: AsyncSession = Depends(get_db)
):
    """Create an employee from all five business fields"""
    # Presence only; shape rules live in the client schema
    if employee is None or employee.missing_fields():
        raise BadRequest("All fields are required!")

    try:
        new_employee = await crud_employee.create_employee(db, employee)
    except SQLAlchemyError as e:
        logger.error(f"Creating Employee Error: {e}")
        raise InternalError("Failed to create employee", _db_error_text(e))

    logger.info(f"Employee {new_employee.id} created")
    return {
        "success": True,
        "message": "Employee created successfully",
        "employee": schema_employee.Employee.model_validate(new_employee),
    }


@router.put("/{employee_id}", response_model=schema_employee.EmployeeResponse)
async def update_employee(
    employee_id: str,
    employee_update: Optional[schema_employee.EmployeeUpdate] = None,
    db: AsyncSession = Depends(get_db)
):
    """Merge the supplied fields into an existing employee"""
    if employee_update is None or not any(
        getattr(employee_update, field) for field in schema_employee.BUSINESS_FIELDS
    ):
        raise BadRequest("At least one field is required to update!")

    record_id = _parse_id(employee_id)
    try:
        employee = await crud_employee.update_employee(db, record_id, employee_update)
    except SQLAlchemyError as e:
        logger.error(f"Updating Employee Error: {e}")
        raise InternalError("Failed to update employee", _db_error_text(e))

    if not employee:
        raise NotFound(f"Employee with ID {employee_id} not found")

    return {
        "success": True,
        "message": "Employee updated successfully",
        "employee": schema_employee.Employee.model_validate(employee),
    }


@router.delete("/{employee_id}", response_model=schema_employee.EmployeeResponse)
async def delete_employee(employee_id: str, db: AsyncSession = Depends(get_db)):
    """Delete an employee and return its last state"""
    record_id = _parse_id(employee_id)
    try:
        snapshot = await crud_employee.delete_employee(db, record_id)
    except SQLAlchemyError as e:
        logger.error(f"Deleting Employee Error: {e}")
        raise InternalError("Failed to delete employee", _db_error_text(e))

    if not snapshot:
        raise NotFound(f"Employee with ID {employee_id} not found")

    logger.info(f"Employee {record_id} deleted")
    return {
        "success": True,
        "message": "Employee deleted successfully",
        "employee": snapshot,
    }
