from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    record_id: str
    employee_id: str
    employee_name: str
    work_date: date
    status: AttendanceStatus
    check_in: Optional[time] = None
    check_out: Optional[time] = None
    hours_worked: Optional[float] = None
    notes: str = ""

    def as_row(self) -> dict:
        return {
            "id": self.record_id,
            "employee_id": self.employee_id,
            "employee_name": self.employee_name,
            "date": self.work_date.isoformat(),
            "check_in": self.check_in.strftime("%H:%M") if self.check_in else "",
            "check_out": self.check_out.strftime("%H:%M") if self.check_out else "",
            "hours_worked": self.hours_worked,
            "status": self.status.value,
            "notes": self.notes,
        }


@dataclass(frozen=True)
class BulkAttendance:
    """One attendance entry applied to several employees at once."""

    work_date: date
    status: AttendanceStatus
    employees: tuple[tuple[str, str], ...]  # (employee_id, employee_name)
    check_in: Optional[time] = None
    check_out: Optional[time] = None
    hours_worked: Optional[float] = None
