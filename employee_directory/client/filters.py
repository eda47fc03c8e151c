from collections.abc import Mapping
from typing import Any, List, Sequence, TypeVar

SEARCH_FIELDS = ("name", "email", "position", "department")

T = TypeVar("T")


def _field_text(record: Any, field: str) -> str:
    if isinstance(record, Mapping):
        value = record.get(field)
    else:
        value = getattr(record, field, None)
    return str(value).lower() if value else ""


def filter_employees(employees: Sequence[T], search_term: str) -> Sequence[T]:
    """Keep employees whose name, email, position or department contains the term.

    A blank term returns the input sequence itself. Matching is a
    case-insensitive substring test; input order is preserved.
    """
    if not search_term or not search_term.strip():
        return employees

    term = search_term.lower()
    matches: List[T] = [
        employee
        for employee in employees
        if any(term in _field_text(employee, field) for field in SEARCH_FIELDS)
    ]
    return matches
