from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Callable, Iterable, Optional, Sequence

from werkzeug.security import generate_password_hash

from ..attendance.model import AttendanceRecord, BulkAttendance
from ..common.datetime_utils import today_local
from ..core.enums import AttendanceStatus, EmployeeStatus, HolidayType, LeaveType, RequestStatus
from ..directory.model import Employee
from ..holidays.model import Holiday
from ..leaves.model import LeaveBalance, LeaveRequest, NewLeave
from ..password_resets.model import PasswordResetRequest
from . import seed


class _Sequence:
    def __init__(self, start: int = 0):
        self._value = start

    def next(self) -> str:
        self._value += 1
        return str(self._value)


def _max_id(items: Iterable, attr: str) -> int:
    ids = [int(getattr(i, attr)) for i in items if str(getattr(i, attr)).isdigit()]
    return max(ids, default=0)


class InMemoryEmployeeRepository:
    def __init__(self, employees: Sequence[Employee] = ()):
        self._by_id: dict[str, Employee] = {e.employee_id: e for e in employees}

    def list_employees(
        self,
        *,
        search: Optional[str] = None,
        department: Optional[str] = None,
        status: Optional[EmployeeStatus] = None,
    ) -> Sequence[Employee]:
        items = list(self._by_id.values())
        if search:
            q = search.lower()
            items = [e for e in items if q in e.name.lower() or q in e.emp_code.lower() or q in e.email.lower()]
        if department:
            items = [e for e in items if e.department == department]
        if status:
            items = [e for e in items if e.status == status]
        return items

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        return self._by_id.get(str(employee_id))

    def get_by_email(self, email: str) -> Optional[Employee]:
        for e in self._by_id.values():
            if e.email.lower() == email.lower():
                return e
        return None

    def list_departments(self) -> Sequence[str]:
        return sorted({e.department for e in self._by_id.values() if e.department})


class InMemoryAttendanceRepository:
    def __init__(self, records: Sequence[AttendanceRecord] = ()):
        self._records: list[AttendanceRecord] = list(records)
        self._ids = _Sequence(_max_id(self._records, "record_id"))

    def list_records(
        self,
        *,
        employee_id: Optional[str] = None,
        month: Optional[str] = None,
        status: Optional[AttendanceStatus] = None,
    ) -> Sequence[AttendanceRecord]:
        items = list(self._records)
        if employee_id:
            items = [r for r in items if r.employee_id == str(employee_id)]
        if month:
            items = [r for r in items if r.work_date.isoformat()[:7] == month]
        if status:
            items = [r for r in items if r.status == status]
        return items

    def create_bulk(self, entry: BulkAttendance) -> int:
        for employee_id, employee_name in entry.employees:
            self._records.append(
                AttendanceRecord(
                    record_id=self._ids.next(),
                    employee_id=employee_id,
                    employee_name=employee_name,
                    work_date=entry.work_date,
                    status=entry.status,
                    check_in=entry.check_in,
                    check_out=entry.check_out,
                    hours_worked=entry.hours_worked,
                )
            )
        return len(entry.employees)


class InMemoryLeaveRepository:
    def __init__(
        self,
        leaves: Sequence[LeaveRequest] = (),
        *,
        balances: Sequence[LeaveBalance] = (),
        today: Callable[[], date] = today_local,
    ):
        self._by_id: dict[str, LeaveRequest] = {lv.request_id: lv for lv in leaves}
        self._balances: dict[str, LeaveBalance] = {b.employee_id: b for b in balances}
        self._ids = _Sequence(_max_id(self._by_id.values(), "request_id"))
        self._today = today

    def list_leaves(
        self,
        *,
        status: Optional[RequestStatus] = None,
        leave_type: Optional[LeaveType] = None,
        employee_id: Optional[str] = None,
    ) -> Sequence[LeaveRequest]:
        items = list(self._by_id.values())
        if status:
            items = [lv for lv in items if lv.status == status]
        if leave_type:
            items = [lv for lv in items if lv.leave_type == leave_type]
        if employee_id:
            items = [lv for lv in items if lv.employee_id == str(employee_id)]
        return items

    def get(self, request_id: str) -> Optional[LeaveRequest]:
        return self._by_id.get(str(request_id))

    def create(self, leave: NewLeave) -> str:
        rid = self._ids.next()
        self._by_id[rid] = LeaveRequest(
            request_id=rid,
            employee_id=leave.employee_id,
            employee_name=leave.employee_name,
            leave_type=leave.leave_type,
            start_date=leave.start_date,
            end_date=leave.end_date,
            days=leave.days,
            reason=leave.reason,
            status=RequestStatus.PENDING,
            applied_on=self._today(),
        )
        return rid

    def decide(self, *, request_id: str, status: RequestStatus, approver_name: str) -> bool:
        leave = self._by_id.get(str(request_id))
        if not leave or leave.status != RequestStatus.PENDING:
            return False
        self._by_id[leave.request_id] = replace(
            leave, status=status, approver_name=approver_name, decided_on=self._today()
        )
        return True

    def list_balances(self) -> Sequence[LeaveBalance]:
        return list(self._balances.values())

    def balance_for(self, employee_id: str) -> Optional[LeaveBalance]:
        return self._balances.get(str(employee_id))


class InMemoryHolidayRepository:
    def __init__(self, holidays: Sequence[Holiday] = ()):
        self._holidays = list(holidays)

    def list_holidays(
        self,
        *,
        region: Optional[str] = None,
        holiday_type: Optional[HolidayType] = None,
        year: Optional[int] = None,
    ) -> Sequence[Holiday]:
        items = list(self._holidays)
        if region:
            items = [h for h in items if h.region == region]
        if holiday_type:
            items = [h for h in items if h.holiday_type == holiday_type]
        if year:
            items = [h for h in items if h.holiday_date.year == year]
        return items


class InMemoryPasswordResetRepository:
    def __init__(self, requests: Sequence[PasswordResetRequest] = ()):
        self._by_id: dict[str, PasswordResetRequest] = {r.request_id: r for r in requests}
        self.password_hashes: dict[str, str] = {}

    def list_requests(self) -> Sequence[PasswordResetRequest]:
        return list(self._by_id.values())

    def get(self, request_id: str) -> Optional[PasswordResetRequest]:
        return self._by_id.get(str(request_id))

    def reset_password(self, *, user_id: str, new_password: str) -> bool:
        self.password_hashes[str(user_id)] = generate_password_hash(new_password)
        return True

    def set_status(self, *, request_id: str, status: RequestStatus) -> bool:
        req = self._by_id.get(str(request_id))
        if not req:
            return False
        self._by_id[req.request_id] = replace(req, status=status)
        return True

    def delete(self, request_id: str) -> bool:
        return self._by_id.pop(str(request_id), None) is not None


def seeded_repositories() -> dict:
    """Fresh repositories holding the demo data set."""
    return {
        "employees_repo": InMemoryEmployeeRepository(seed.EMPLOYEES),
        "attendance_repo": InMemoryAttendanceRepository(seed.ATTENDANCE),
        "leaves_repo": InMemoryLeaveRepository(seed.LEAVES, balances=seed.BALANCES),
        "holidays_repo": InMemoryHolidayRepository(seed.HOLIDAYS),
        "password_resets_repo": InMemoryPasswordResetRepository(seed.PASSWORD_RESETS),
    }
