import asyncio
import logging

from employee_directory.core.database import AsyncSessionLocal, create_tables, engine
from employee_directory.crud import employee as crud_employee
from employee_directory.schemas.employee import EmployeeCreate

logger = logging.getLogger(__name__)

# Sample employees
SAMPLE_EMPLOYEES = [
    {
        "name": "Bobur Ahmedov",
        "email": "bobur.ahmedov@workly.uz",
        "position": "Manager",
        "phone": "9012345670",
        "department": "Operations",
    },
    {
        "name": "Nilufar Karimova",
        "email": "nilufar.karimova@workly.uz",
        "position": "Developer",
        "phone": "9012345671",
        "department": "Engineering",
    },
    {
        "name": "Aziz Toshmatov",
        "email": "aziz.toshmatov@workly.uz",
        "position": "Developer",
        "phone": "9012345672",
        "department": "Engineering",
    },
    {
        "name": "Dilfuza Raxmonova",
        "email": "dilfuza.raxmonova@workly.uz",
        "position": "Designer",
        "phone": "9012345673",
        "department": "Product",
    },
    {
        "name": "Sherzod Nazarov",
        "email": "sherzod.nazarov@workly.uz",
        "position": "HR Specialist",
        "phone": "9012345674",
        "department": "Human Resources",
    },
    {
        "name": "Gulnoza Yusupova",
        "email": "gulnoza.yusupova@workly.uz",
        "position": "Accountant",
        "phone": "9012345675",
        "department": "Finance",
    },
]


async def create_sample_employees(session_factory=AsyncSessionLocal):
    """Insert the sample employees, skipping emails that already exist"""
    created = []
    async with session_factory() as session:
        for emp_data in SAMPLE_EMPLOYEES:
            if await crud_employee.get_employee_by_email(session, emp_data["email"]):
                logger.info(f"Skipping existing employee {emp_data['email']}")
                continue
            employee = await crud_employee.create_employee(session, EmployeeCreate(**emp_data))
            created.append(employee)
    return created


async def main():
    print("Creating sample data...")

    await create_tables()
    employees = await create_sample_employees()
    print(f"{len(employees)} employees added")

    await engine.dispose()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
