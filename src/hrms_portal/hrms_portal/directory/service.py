from __future__ import annotations

from typing import Optional

from ..common.validators import require_choice, require_non_empty
from ..core.enums import EmployeeStatus
from ..core.exceptions import NotFoundError
from .model import Employee
from .repository import EmployeeRepository


class EmployeeService:
    """Use case: browse the employee directory."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_rows(
        self,
        *,
        search: str = "",
        department: str = "",
        status: str = "",
    ) -> list[dict]:
        status_filter = require_choice(status, "Status", EmployeeStatus) if status else None
        employees = self._employees.list_employees(
            search=search.strip() or None,
            department=department or None,
            status=status_filter,
        )
        return [e.as_row() for e in employees]

    def get_employee(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(str(employee_id))
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def find_by_email(self, email: str) -> Optional[Employee]:
        email = require_non_empty(email, "Email")
        return self._employees.get_by_email(email.lower())

    def departments(self) -> list[str]:
        return sorted(self._employees.list_departments())
