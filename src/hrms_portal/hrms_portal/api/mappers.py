"""Map the backend's camelCase JSON documents into domain dataclasses.

The backend is loose about shapes (ids under ``_id`` or ``id``, nested
``employeeId`` objects, ISO timestamps or plain dates), so every reader here
tolerates the variants seen in practice.
"""
from __future__ import annotations

from datetime import date, datetime, time
from typing import Any, Optional

from ..core.enums import AttendanceStatus, EmployeeStatus, HolidayType, LeaveType, RequestStatus, Role
from ..attendance.model import AttendanceRecord
from ..directory.model import Employee
from ..holidays.model import Holiday
from ..leaves.model import BalanceBucket, LeaveBalance, LeaveRequest
from ..password_resets.model import PasswordResetRequest


def unwrap_list(payload: Any, *keys: str) -> list[dict]:
    """The list inside a response envelope (``data``, ``leaves``, ...)."""
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        for key in (*keys, "data", "items", "results"):
            value = payload.get(key)
            if isinstance(value, list):
                return value
    return []


def unwrap_item(payload: Any, *keys: str) -> Optional[dict]:
    if isinstance(payload, dict):
        for key in (*keys, "data"):
            value = payload.get(key)
            if isinstance(value, dict):
                return value
        return payload or None
    return None


def _id(doc: dict, *keys: str) -> str:
    for key in (*keys, "_id", "id"):
        value = doc.get(key)
        if isinstance(value, dict):
            value = value.get("_id") or value.get("id") or value.get("employeeId")
        if value not in (None, ""):
            return str(value)
    return ""


def _date(value: Any) -> Optional[date]:
    if not value:
        return None
    text = str(value)
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        return None


def _datetime(value: Any) -> datetime:
    text = str(value or "")
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        return datetime.fromtimestamp(0)


def _time(value: Any) -> Optional[time]:
    if not value:
        return None
    text = str(value)
    if "T" in text:
        try:
            return datetime.fromisoformat(text.replace("Z", "+00:00")).time().replace(tzinfo=None)
        except ValueError:
            return None
    try:
        return datetime.strptime(text[:5], "%H:%M").time()
    except ValueError:
        return None


def _enum(enum_cls, value: Any, default):
    try:
        return enum_cls(str(value or "").lower())
    except ValueError:
        return default


def _name(value: Any) -> str:
    if isinstance(value, dict):
        return str(value.get("name") or "")
    return str(value or "")


def employee_from_doc(doc: dict) -> Employee:
    return Employee(
        employee_id=_id(doc),
        emp_code=str(doc.get("empCode") or doc.get("employeeId") or ""),
        name=str(doc.get("name") or ""),
        email=str(doc.get("email") or ""),
        phone=str(doc.get("phone") or ""),
        department=_name(doc.get("department")),
        designation=_name(doc.get("designation")),
        manager_name=str(doc.get("managerName") or ""),
        status=_enum(EmployeeStatus, doc.get("status"), EmployeeStatus.ACTIVE),
        joined_on=_date(doc.get("joiningDate") or doc.get("joinedOn")),
        role=_enum(Role, doc.get("role"), Role.EMPLOYEE),
        address=str(doc.get("address") or ""),
    )


def attendance_from_doc(doc: dict) -> AttendanceRecord:
    employee = doc.get("employeeId")
    employee_name = doc.get("employeeName") or (employee.get("name") if isinstance(employee, dict) else "")
    hours = doc.get("hoursWorked")
    return AttendanceRecord(
        record_id=_id(doc),
        employee_id=_id(doc, "employeeId"),
        employee_name=str(employee_name or ""),
        work_date=_date(doc.get("date")) or date(1970, 1, 1),
        status=_enum(AttendanceStatus, doc.get("status"), AttendanceStatus.ABSENT),
        check_in=_time(doc.get("checkIn")),
        check_out=_time(doc.get("checkOut")),
        hours_worked=float(hours) if hours not in (None, "") else None,
        notes=str(doc.get("notes") or ""),
    )


def leave_from_doc(doc: dict) -> LeaveRequest:
    start = _date(doc.get("startDate")) or date(1970, 1, 1)
    end = _date(doc.get("endDate")) or start
    return LeaveRequest(
        request_id=_id(doc),
        employee_id=_id(doc, "employeeId"),
        employee_name=str(doc.get("employeeName") or ""),
        leave_type=_enum(LeaveType, doc.get("leaveType") or doc.get("type"), LeaveType.CASUAL),
        start_date=start,
        end_date=end,
        days=int(doc.get("totalDays") or doc.get("days") or (end - start).days + 1),
        reason=str(doc.get("reason") or ""),
        status=_enum(RequestStatus, doc.get("status"), RequestStatus.PENDING),
        applied_on=_date(doc.get("appliedOn") or doc.get("createdAt")) or start,
        approver_name=doc.get("approverName") or None,
        decided_on=_date(doc.get("approvedOn")),
    )


def _number(value: Any) -> float:
    try:
        return float(value or 0)
    except (TypeError, ValueError):
        return 0.0


def balance_from_doc(doc: dict) -> LeaveBalance:
    """``accrual`` is the window's total; ``used`` and ``remaining`` come as sent."""
    user = doc.get("user") if isinstance(doc.get("user"), dict) else {}
    window = doc.get("window") if isinstance(doc.get("window"), dict) else {}

    def bucket(kind: str) -> BalanceBucket:
        def read(section: str) -> float:
            values = doc.get(section)
            return _number(values.get(kind)) if isinstance(values, dict) else 0.0

        return BalanceBucket(total=read("accrual"), used=read("used"), remaining=read("remaining"))

    return LeaveBalance(
        employee_id=_id(doc, "user", "employeeId"),
        employee_name=_name(user),
        casual=bucket("casual"),
        sick=bucket("sick"),
        earned=bucket("earned"),
        window_start=_date(window.get("start")),
        window_end=_date(window.get("end")),
    )


def holiday_from_doc(doc: dict) -> Holiday:
    return Holiday(
        holiday_id=_id(doc),
        name=str(doc.get("name") or ""),
        holiday_date=_date(doc.get("date")) or date(1970, 1, 1),
        region=str(doc.get("region") or ""),
        holiday_type=_enum(HolidayType, doc.get("type"), HolidayType.NATIONAL),
        description=str(doc.get("description") or ""),
    )


def reset_request_from_doc(doc: dict) -> PasswordResetRequest:
    return PasswordResetRequest(
        request_id=_id(doc),
        user_id=_id(doc, "userId"),
        name=str(doc.get("name") or ""),
        email=str(doc.get("email") or ""),
        role=str(doc.get("role") or ""),
        department=_name(doc.get("department")),
        designation=_name(doc.get("designation")),
        status=_enum(RequestStatus, doc.get("status"), RequestStatus.PENDING),
        created_at=_datetime(doc.get("createdAt")),
    )
