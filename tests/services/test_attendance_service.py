from __future__ import annotations

from datetime import date, time

import pytest

from src.hrms_portal.hrms_portal.attendance.model import AttendanceRecord
from src.hrms_portal.hrms_portal.attendance.service import AttendanceService, worked_hours
from src.hrms_portal.hrms_portal.core.enums import AttendanceStatus
from src.hrms_portal.hrms_portal.core.exceptions import ValidationError
from src.hrms_portal.hrms_portal.memory.repositories import InMemoryAttendanceRepository


class RecordingAttendanceRepo:
    def __init__(self):
        self.entries = []

    def list_records(self, *, employee_id=None, month=None, status=None):
        return []

    def create_bulk(self, entry):
        self.entries.append(entry)
        return len(entry.employees)


EMPLOYEES = [{"id": "1", "name": "John Doe"}, {"id": "5", "name": "Emily Chen"}]


def test_worked_hours():
    assert worked_hours(time(9, 0), time(17, 30)) == 8.5
    assert worked_hours(time(9, 0), None) is None


def test_mark_bulk_builds_one_entry_for_every_selected_employee():
    repo = RecordingAttendanceRepo()

    marked = AttendanceService(repo).mark_bulk(
        employees=EMPLOYEES, work_date="2026-02-02", check_in="09:00", check_out="18:00", status="present"
    )

    assert marked == 2
    entry = repo.entries[0]
    assert entry.employees == (("1", "John Doe"), ("5", "Emily Chen"))
    assert entry.work_date == date(2026, 2, 2)
    assert entry.status == AttendanceStatus.PRESENT
    assert entry.hours_worked == 9.0


def test_mark_bulk_times_are_optional():
    repo = RecordingAttendanceRepo()
    AttendanceService(repo).mark_bulk(employees=EMPLOYEES[:1], work_date="2026-02-02", status="absent")
    assert repo.entries[0].check_in is None
    assert repo.entries[0].hours_worked is None


@pytest.mark.parametrize(
    "kwargs",
    [
        {"employees": []},
        {"work_date": ""},
        {"work_date": "02-02-2026"},
        {"check_in": "9am"},
        {"check_in": "18:00", "check_out": "09:00"},
        {"status": "late"},
    ],
)
def test_mark_bulk_validation(kwargs):
    data = {"employees": EMPLOYEES, "work_date": "2026-02-02", "check_in": "09:00", "check_out": "18:00"}
    data.update(kwargs)
    with pytest.raises(ValidationError):
        AttendanceService(RecordingAttendanceRepo()).mark_bulk(**data)


def test_list_rows_by_month_and_employee():
    repo = InMemoryAttendanceRepository(
        [
            AttendanceRecord("1", "1", "John Doe", date(2026, 1, 15), AttendanceStatus.PRESENT),
            AttendanceRecord("2", "1", "John Doe", date(2026, 2, 3), AttendanceStatus.ABSENT),
            AttendanceRecord("3", "5", "Emily Chen", date(2026, 2, 3), AttendanceStatus.PRESENT),
        ]
    )
    svc = AttendanceService(repo)

    assert [r["id"] for r in svc.list_rows(month="2026-02")] == ["2", "3"]
    assert [r["id"] for r in svc.list_rows(employee_id="1", status="present")] == ["1"]
    with pytest.raises(ValidationError):
        svc.list_rows(month="2026-13")


def test_memory_repo_appends_marked_records():
    repo = InMemoryAttendanceRepository()
    AttendanceService(repo).mark_bulk(employees=EMPLOYEES, work_date="2026-02-02", status="half-day")
    rows = AttendanceService(repo).list_rows()
    assert [(r["id"], r["employee_id"], r["status"]) for r in rows] == [("1", "1", "half-day"), ("2", "5", "half-day")]
