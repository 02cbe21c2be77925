from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import LeaveType, RequestStatus


@dataclass(frozen=True)
class LeaveRequest:
    request_id: str
    employee_id: str
    employee_name: str
    leave_type: LeaveType
    start_date: date
    end_date: date
    days: int
    reason: str
    status: RequestStatus
    applied_on: date
    approver_name: Optional[str] = None
    decided_on: Optional[date] = None

    def as_row(self) -> dict:
        return {
            "id": self.request_id,
            "employee_id": self.employee_id,
            "employee_name": self.employee_name,
            "leave_type": self.leave_type.value,
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
            "days": self.days,
            "reason": self.reason,
            "status": self.status.value,
            "applied_on": self.applied_on.isoformat(),
            "approver_name": self.approver_name or "",
        }


@dataclass(frozen=True)
class NewLeave:
    employee_id: str
    employee_name: str
    leave_type: LeaveType
    start_date: date
    end_date: date
    days: int
    reason: str


@dataclass(frozen=True)
class BalanceBucket:
    total: float = 0
    used: float = 0
    remaining: float = 0


@dataclass(frozen=True)
class LeaveBalance:
    """Casual, sick and earned leave for one employee over one accrual window."""

    employee_id: str
    employee_name: str = ""
    casual: BalanceBucket = BalanceBucket()
    sick: BalanceBucket = BalanceBucket()
    earned: BalanceBucket = BalanceBucket()
    window_start: Optional[date] = None
    window_end: Optional[date] = None

    def cards(self) -> list[tuple[str, BalanceBucket]]:
        return [("Casual Leave", self.casual), ("Sick Leave", self.sick), ("Earned Leave", self.earned)]
