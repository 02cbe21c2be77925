from __future__ import annotations

from typing import Optional, Sequence

from ..attendance.model import AttendanceRecord, BulkAttendance
from ..core.enums import AttendanceStatus, EmployeeStatus, HolidayType, LeaveType, RequestStatus
from ..core.exceptions import ApiError
from ..directory.model import Employee
from ..holidays.model import Holiday
from ..leaves.model import LeaveBalance, LeaveRequest, NewLeave
from ..password_resets.model import PasswordResetRequest
from .client import HrApiClient
from .mappers import (
    attendance_from_doc,
    balance_from_doc,
    employee_from_doc,
    holiday_from_doc,
    leave_from_doc,
    reset_request_from_doc,
    unwrap_item,
    unwrap_list,
)

# The directory endpoint paginates; screens filter and page client-side.
_ALL_EMPLOYEES_LIMIT = 1000


def _is_missing(exc: ApiError) -> bool:
    return exc.status_code == 404


class ApiEmployeeRepository:
    def __init__(self, client: HrApiClient):
        self._client = client

    def list_employees(
        self,
        *,
        search: Optional[str] = None,
        department: Optional[str] = None,
        status: Optional[EmployeeStatus] = None,
    ) -> Sequence[Employee]:
        payload = self._client.get(
            "/hr/getEmployees",
            params={
                "limit": _ALL_EMPLOYEES_LIMIT,
                "search": search,
                "department": department,
                "status": status.value if status else None,
            },
        )
        return [employee_from_doc(d) for d in unwrap_list(payload, "employees")]

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        try:
            payload = self._client.get(f"/hr/getEmployee/{employee_id}")
        except ApiError as exc:
            if _is_missing(exc):
                return None
            raise
        doc = unwrap_item(payload, "employee")
        return employee_from_doc(doc) if doc else None

    def get_by_email(self, email: str) -> Optional[Employee]:
        for employee in self.list_employees(search=email):
            if employee.email.lower() == email.lower():
                return employee
        return None

    def list_departments(self) -> Sequence[str]:
        return sorted({e.department for e in self.list_employees() if e.department})


class ApiAttendanceRepository:
    def __init__(self, client: HrApiClient):
        self._client = client

    def list_records(
        self,
        *,
        employee_id: Optional[str] = None,
        month: Optional[str] = None,
        status: Optional[AttendanceStatus] = None,
    ) -> Sequence[AttendanceRecord]:
        payload = self._client.get(
            "/hr/getAttendance",
            params={"employeeId": employee_id, "month": month, "status": status.value if status else None},
        )
        return [attendance_from_doc(d) for d in unwrap_list(payload, "attendance", "records")]

    def create_bulk(self, entry: BulkAttendance) -> int:
        def iso(t):
            return f"{entry.work_date.isoformat()}T{t.strftime('%H:%M')}:00" if t else None

        self._client.post(
            "/hr/bulkAttendance",
            json={
                "date": entry.work_date.isoformat(),
                "checkIn": iso(entry.check_in),
                "checkOut": iso(entry.check_out),
                "status": entry.status.value,
                # Explicit selection only; never let the backend mark everyone.
                "selectAll": False,
                "selectedEmployees": [employee_id for employee_id, _ in entry.employees],
            },
        )
        return len(entry.employees)


class ApiLeaveRepository:
    def __init__(self, client: HrApiClient):
        self._client = client

    def list_leaves(
        self,
        *,
        status: Optional[RequestStatus] = None,
        leave_type: Optional[LeaveType] = None,
        employee_id: Optional[str] = None,
    ) -> Sequence[LeaveRequest]:
        payload = self._client.get(
            "/leaves",
            params={
                "status": status.value if status else None,
                "type": leave_type.value if leave_type else None,
                "employeeId": employee_id,
            },
        )
        return [leave_from_doc(d) for d in unwrap_list(payload, "leaves")]

    def get(self, request_id: str) -> Optional[LeaveRequest]:
        for leave in self.list_leaves():
            if leave.request_id == str(request_id):
                return leave
        return None

    def create(self, leave: NewLeave) -> str:
        payload = self._client.post(
            "/leaves",
            json={
                "employeeId": leave.employee_id,
                "leaveType": leave.leave_type.value,
                "startDate": leave.start_date.isoformat(),
                "endDate": leave.end_date.isoformat(),
                "totalDays": leave.days,
                "reason": leave.reason,
            },
        )
        doc = unwrap_item(payload, "leave") or {}
        return str(doc.get("_id") or doc.get("id") or "")

    def decide(self, *, request_id: str, status: RequestStatus, approver_name: str) -> bool:
        action = "approveLeave" if status == RequestStatus.APPROVED else "rejectLeave"
        try:
            self._client.put(f"/leaves/{action}/{request_id}", json={"status": status.value})
        except ApiError as exc:
            if _is_missing(exc):
                return False
            raise
        return True

    def list_balances(self) -> Sequence[LeaveBalance]:
        payload = self._client.get("/leaves/balance")
        return [balance_from_doc(d) for d in unwrap_list(payload, "balances")]

    def balance_for(self, employee_id: str) -> Optional[LeaveBalance]:
        # ``/leaves/balance/me`` answers for the service token, not the signed-in user.
        for balance in self.list_balances():
            if balance.employee_id == str(employee_id):
                return balance
        return None


class ApiHolidayRepository:
    def __init__(self, client: HrApiClient):
        self._client = client

    def list_holidays(
        self,
        *,
        region: Optional[str] = None,
        holiday_type: Optional[HolidayType] = None,
        year: Optional[int] = None,
    ) -> Sequence[Holiday]:
        payload = self._client.get(
            "/holidays",
            params={"region": region, "type": holiday_type.value if holiday_type else None, "year": year},
        )
        return [holiday_from_doc(d) for d in unwrap_list(payload, "holidays")]


class ApiPasswordResetRepository:
    def __init__(self, client: HrApiClient):
        self._client = client

    def list_requests(self) -> Sequence[PasswordResetRequest]:
        payload = self._client.get("/users/forgot-password-requests")
        return [reset_request_from_doc(d) for d in unwrap_list(payload, "requests")]

    def get(self, request_id: str) -> Optional[PasswordResetRequest]:
        for req in self.list_requests():
            if req.request_id == str(request_id):
                return req
        return None

    def reset_password(self, *, user_id: str, new_password: str) -> bool:
        payload = self._client.put(f"/users/reset-password/{user_id}", json={"password": new_password})
        if isinstance(payload, dict) and payload.get("success") is False:
            return False
        return True

    def set_status(self, *, request_id: str, status: RequestStatus) -> bool:
        self._client.put(f"/users/forgot-password-requests/{request_id}", json={"status": status.value})
        return True

    def delete(self, request_id: str) -> bool:
        try:
            self._client.delete(f"/users/forgot-password-requests/{request_id}")
        except ApiError as exc:
            if _is_missing(exc):
                return False
            raise
        return True
