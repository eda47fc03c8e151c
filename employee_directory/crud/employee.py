from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from typing import Optional, Sequence
from employee_directory.schemas import employee as employee_schema
from employee_directory.models import employee as employee_model


async def create_employee(db: AsyncSession, employee: employee_schema.EmployeeCreate):
    db_employee = employee_model.Employee(
        name=employee.name,
        email=employee.email,
        position=employee.position,
        phone=employee.phone,
        department=employee.department,
    )
    db.add(db_employee)
    try:
        await db.commit()
    except Exception:
        await db.rollback()
        raise
    await db.refresh(db_employee)
    return db_employee


async def get_employee_by_id(db: AsyncSession, employee_id: int) -> Optional[employee_model.Employee]:
    result = await db.execute(
        select(employee_model.Employee).where(employee_model.Employee.id == employee_id)
    )
    return result.scalar_one_or_none()


async def get_employee_by_email(db: AsyncSession, email: str) -> Optional[employee_model.Employee]:
    result = await db.execute(
        select(employee_model.Employee).where(employee_model.Employee.email == email)
    )
    return result.scalar_one_or_none()


async def get_employees(db: AsyncSession) -> Sequence[employee_model.Employee]:
    # No ORDER BY: callers get rows in whatever order the database returns them
    result = await db.execute(select(employee_model.Employee))
    return result.scalars().all()


async def update_employee(db: AsyncSession, employee_id: int, employee_update: employee_schema.EmployeeUpdate):
    db_employee = await get_employee_by_id(db, employee_id)
    if not db_employee:
        return None

    for field, value in employee_update.changes().items():
        setattr(db_employee, field, value)

    try:
        await db.commit()
    except Exception:
        await db.rollback()
        raise
    await db.refresh(db_employee)
    return db_employee


async def delete_employee(db: AsyncSession, employee_id: int):
    db_employee = await get_employee_by_id(db, employee_id)
    if not db_employee:
        return None

    snapshot = employee_schema.Employee.model_validate(db_employee)
    await db.delete(db_employee)
    await db.commit()
    return snapshot
