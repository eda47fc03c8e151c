import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Set

from employee_directory.client.api import EmployeeAPI
from employee_directory.client.exceptions import EmployeeAPIError
from employee_directory.client.filters import filter_employees
from employee_directory.client.responses import EmployeeRecord

logger = logging.getLogger(__name__)


@dataclass
class DeleteResult:
    success: bool
    error: Optional[str] = None


class EmployeeDirectory:
    """State behind the employee list page.

    Owns the employees currently on display and the search term; the
    filtered view is derived on every read and never stored.
    """

    def __init__(self, api: EmployeeAPI) -> None:
        self.api = api
        self.employees: List[EmployeeRecord] = []
        self.loading: bool = False
        self.error: Optional[str] = None
        self.search_term: str = ""
        self._deleting: Set[int] = set()

    async def load(self) -> List[EmployeeRecord]:
        self.loading = True
        self.error = None
        try:
            self.employees = await self.api.get_all_employees()
        except EmployeeAPIError as e:
            logger.warning(f"Loading employees failed: {e.message}")
            self.error = e.message
        finally:
            self.loading = False
        return self.employees

    refetch = load

    @property
    def visible(self) -> Sequence[EmployeeRecord]:
        return filter_employees(self.employees, self.search_term)

    def search(self, term: str) -> Sequence[EmployeeRecord]:
        self.search_term = term
        return self.visible

    def is_deleting(self, employee_id: int) -> bool:
        return employee_id in self._deleting

    async def delete(self, employee_id: Optional[int]) -> DeleteResult:
        if employee_id is None:
            return DeleteResult(success=False, error="Employee id is required")
        # One request per record; other records may be deleted meanwhile
        if employee_id in self._deleting:
            return DeleteResult(success=False, error="Delete already in progress")

        self._deleting.add(employee_id)
        try:
            await self.api.delete_employee(employee_id)
        except EmployeeAPIError as e:
            logger.warning(f"Deleting employee {employee_id} failed: {e.message}")
            return DeleteResult(success=False, error=e.message)
        finally:
            self._deleting.discard(employee_id)

        self.employees = [emp for emp in self.employees if emp.id != employee_id]
        return DeleteResult(success=True)
