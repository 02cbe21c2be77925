from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User roles used for UI-level route gating."""

    EMPLOYEE = "employee"
    MANAGER = "manager"
    HR = "hr"
    ADMIN = "admin"


class SortType(str, Enum):
    """How a column's sort values are compared."""

    STRING = "string"
    NUMBER = "number"
    DATE = "date"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


class EmployeeStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    TERMINATED = "terminated"


class AttendanceStatus(str, Enum):
    PRESENT = "present"
    ABSENT = "absent"
    LEAVE = "leave"
    HOLIDAY = "holiday"
    HALF_DAY = "half-day"


class LeaveType(str, Enum):
    CASUAL = "casual"
    SICK = "sick"
    EARNED = "earned"
    MATERNITY = "maternity"
    PATERNITY = "paternity"
    UNPAID = "unpaid"


class RequestStatus(str, Enum):
    """Approval workflow status shared by leave and password-reset requests."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class HolidayType(str, Enum):
    NATIONAL = "national"
    REGIONAL = "regional"
    OPTIONAL = "optional"
