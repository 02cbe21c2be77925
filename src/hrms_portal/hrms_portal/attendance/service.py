from __future__ import annotations

import logging
import re
from datetime import date, datetime, time
from typing import Optional, Sequence

from ..common.datetime_utils import parse_hhmm, parse_iso_date
from ..common.validators import require_choice
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from .model import BulkAttendance
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

_MONTH_RE = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")


def worked_hours(check_in: Optional[time], check_out: Optional[time]) -> Optional[float]:
    """Hours between check-in and check-out on the same day, to 2 decimals."""
    if not check_in or not check_out:
        return None
    today = date.today()
    delta = datetime.combine(today, check_out) - datetime.combine(today, check_in)
    return round(delta.total_seconds() / 3600, 2)


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def list_rows(
        self,
        *,
        employee_id: str = "",
        month: str = "",
        status: str = "",
    ) -> list[dict]:
        if month and not _MONTH_RE.match(month):
            raise ValidationError("Month must look like YYYY-MM")
        status_filter = require_choice(status, "Status", AttendanceStatus) if status else None
        records = self._attendance.list_records(
            employee_id=employee_id or None,
            month=month or None,
            status=status_filter,
        )
        return [r.as_row() for r in records]

    def mark_bulk(
        self,
        *,
        employees: Sequence[dict],
        work_date: str,
        check_in: str = "",
        check_out: str = "",
        status: str = AttendanceStatus.PRESENT.value,
    ) -> int:
        """Apply one attendance entry to every selected employee row."""
        if not (work_date or "").strip():
            raise ValidationError("Please select a date")
        if not employees:
            raise ValidationError("Please select at least one employee")

        try:
            day = parse_iso_date(work_date.strip())
        except ValueError:
            raise ValidationError("Date must look like YYYY-MM-DD")
        try:
            check_in_t = parse_hhmm(check_in)
            check_out_t = parse_hhmm(check_out)
        except ValueError:
            raise ValidationError("Time must look like HH:MM")
        if check_in_t and check_out_t and check_out_t < check_in_t:
            raise ValidationError("Check-out cannot be earlier than check-in")

        entry = BulkAttendance(
            work_date=day,
            status=require_choice(status, "Status", AttendanceStatus),
            employees=tuple((str(e["id"]), str(e.get("name", ""))) for e in employees),
            check_in=check_in_t,
            check_out=check_out_t,
            hours_worked=worked_hours(check_in_t, check_out_t),
        )
        created = self._attendance.create_bulk(entry)
        logger.info("Marked %s attendance for %d employee(s) on %s", entry.status.value, created, day)
        return created
