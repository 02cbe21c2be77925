from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import LeaveType, RequestStatus
from .model import LeaveBalance, LeaveRequest, NewLeave


class LeaveRepository(Protocol):
    def list_leaves(
        self,
        *,
        status: Optional[RequestStatus] = None,
        leave_type: Optional[LeaveType] = None,
        employee_id: Optional[str] = None,
    ) -> Sequence[LeaveRequest]:
        raise NotImplementedError

    def get(self, request_id: str) -> Optional[LeaveRequest]:
        raise NotImplementedError

    def create(self, leave: NewLeave) -> str:
        raise NotImplementedError

    def decide(self, *, request_id: str, status: RequestStatus, approver_name: str) -> bool:
        raise NotImplementedError

    def list_balances(self) -> Sequence[LeaveBalance]:
        raise NotImplementedError

    def balance_for(self, employee_id: str) -> Optional[LeaveBalance]:
        raise NotImplementedError
