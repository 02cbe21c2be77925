from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord, BulkAttendance


class AttendanceRepository(Protocol):
    def list_records(
        self,
        *,
        employee_id: Optional[str] = None,
        month: Optional[str] = None,
        status: Optional[AttendanceStatus] = None,
    ) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def create_bulk(self, entry: BulkAttendance) -> int:
        raise NotImplementedError
