import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqladmin import Admin, ModelView

from employee_directory.core import config
from employee_directory.core.database import create_tables, engine
from employee_directory.core.exceptions import EmployeeDirectoryError, InternalError
from employee_directory.middlewares.logging import LoggingMiddleware
from employee_directory.models.employee import Employee
from employee_directory.routers import employees

logging.basicConfig(
    level=config.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI):
    await create_tables()
    logger.info("Database tables ready")
    yield
    await engine.dispose()
    logger.info("Database engine disposed")


app = FastAPI(
    title="Employee Directory",
    description="Employee records CRUD API",
    version="1.0.0",
    lifespan=lifespan,
)

# SQLAdmin
admin = Admin(app, engine)


class EmployeeAdmin(ModelView, model=Employee):
    column_list = [Employee.id, Employee.name, Employee.email, Employee.position, Employee.phone, Employee.department]
    column_searchable_list = [Employee.name, Employee.email, Employee.position, Employee.department]
    column_sortable_list = [Employee.id, Employee.name, Employee.email]
    column_labels = {
        Employee.id: "ID",
        Employee.name: "Name",
        Employee.email: "Email",
        Employee.position: "Position",
        Employee.phone: "Phone",
        Employee.department: "Department",
    }
    name = "Employee"
    name_plural = "Employees"
    icon = "fa-solid fa-user"


admin.add_view(EmployeeAdmin)

app.add_middleware(LoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
)


@app.exception_handler(EmployeeDirectoryError)
async def employee_directory_error_handler(request: Request, exc: EmployeeDirectoryError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_envelope())


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc!r}")
    error = InternalError("Internal server error", str(exc) or type(exc).__name__)
    return JSONResponse(status_code=error.status_code, content=error.to_envelope())


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    errors = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )
    return JSONResponse(
        status_code=400,
        content={"success": False, "message": "Invalid request data", "error": errors},
    )


# Routers
app.include_router(employees.router, prefix=config.API_PREFIX)


@app.get("/")
async def root():
    return {
        "message": "Employee data Management platform backend is up and running!!",
        "docs": "/docs",
        "version": app.version,
    }


@app.get("/health")
async def health_check():
    return {"status": "healthy", "service": "employee-directory"}


def run():
    import uvicorn

    uvicorn.run("employee_directory.main:app", host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    run()
