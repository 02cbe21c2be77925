from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import EmployeeStatus, Role


@dataclass(frozen=True)
class Employee:
    """Domain entity: one person in the employee directory.

    Note: Plain data object (no API / storage access here).
    """

    employee_id: str
    emp_code: str
    name: str
    email: str
    phone: str = ""
    department: str = ""
    designation: str = ""
    manager_name: str = ""
    status: EmployeeStatus = EmployeeStatus.ACTIVE
    joined_on: Optional[date] = None
    role: Role = Role.EMPLOYEE
    address: str = ""

    def as_row(self) -> dict:
        return {
            "id": self.employee_id,
            "emp_code": self.emp_code,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "department": self.department,
            "designation": self.designation,
            "manager_name": self.manager_name,
            "status": self.status.value,
            "joined_on": self.joined_on.isoformat() if self.joined_on else "",
        }
