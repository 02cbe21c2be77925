from __future__ import annotations

import logging
from typing import Sequence

from ..common.datetime_utils import inclusive_days, parse_iso_date
from ..common.validators import require_choice, require_non_empty
from ..core.enums import LeaveType, RequestStatus, Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from .model import LeaveBalance, NewLeave
from .repository import LeaveRepository

logger = logging.getLogger(__name__)

APPROVER_ROLES = frozenset({Role.MANAGER, Role.HR, Role.ADMIN})


class LeaveService:
    def __init__(self, leaves: LeaveRepository):
        self._leaves = leaves

    def list_rows(self, *, status: str = "", leave_type: str = "", employee_id: str = "") -> list[dict]:
        leaves = self._leaves.list_leaves(
            status=require_choice(status, "Status", RequestStatus) if status else None,
            leave_type=require_choice(leave_type, "Leave type", LeaveType) if leave_type else None,
            employee_id=employee_id or None,
        )
        return [lv.as_row() for lv in leaves]

    def pending_count(self) -> int:
        return len(self._leaves.list_leaves(status=RequestStatus.PENDING))

    def balances(self, employee_id: str = "") -> list[LeaveBalance]:
        """Every employee's leave balance, or just ``employee_id``'s."""
        if employee_id:
            balance = self._leaves.balance_for(str(employee_id))
            return [balance] if balance else []
        return list(self._leaves.list_balances())

    def apply(
        self,
        *,
        employee_id: str,
        employee_name: str,
        leave_type: str,
        start_date: str,
        end_date: str,
        reason: str,
    ) -> str:
        kind = require_choice(leave_type, "Leave type", LeaveType)
        try:
            start = parse_iso_date(require_non_empty(start_date, "Start date"))
            end = parse_iso_date(require_non_empty(end_date, "End date"))
        except ValueError:
            raise ValidationError("Dates must look like YYYY-MM-DD")
        if end < start:
            raise ValidationError("End date must be on or after the start date")
        reason = require_non_empty(reason, "Reason")

        request_id = self._leaves.create(
            NewLeave(
                employee_id=str(employee_id),
                employee_name=employee_name,
                leave_type=kind,
                start_date=start,
                end_date=end,
                days=inclusive_days(start, end),
                reason=reason,
            )
        )
        logger.info("Leave %s applied by employee %s (%s, %s..%s)", request_id, employee_id, kind.value, start, end)
        return request_id

    def approve(self, *, current_role: Role, approver_name: str, request_id: str) -> None:
        self._decide(current_role=current_role, approver_name=approver_name, request_id=request_id, status=RequestStatus.APPROVED)

    def reject(self, *, current_role: Role, approver_name: str, request_id: str) -> None:
        self._decide(current_role=current_role, approver_name=approver_name, request_id=request_id, status=RequestStatus.REJECTED)

    def decide_many(self, *, current_role: Role, approver_name: str, rows: Sequence[dict], approve: bool) -> int:
        """Approve or reject the selected rows; rows already decided are skipped."""
        if current_role not in APPROVER_ROLES:
            raise AuthorizationError("You are not allowed to decide leave requests")
        if not rows:
            raise ValidationError("Please select at least one leave request")

        status = RequestStatus.APPROVED if approve else RequestStatus.REJECTED
        decided = 0
        for row in rows:
            if row.get("status") != RequestStatus.PENDING.value:
                continue
            if self._leaves.decide(request_id=str(row["id"]), status=status, approver_name=approver_name):
                decided += 1
        logger.info("%s %d leave request(s) by %s", status.value.capitalize(), decided, approver_name)
        return decided

    def _decide(self, *, current_role: Role, approver_name: str, request_id: str, status: RequestStatus) -> None:
        if current_role not in APPROVER_ROLES:
            raise AuthorizationError("You are not allowed to decide leave requests")

        leave = self._leaves.get(str(request_id))
        if not leave:
            raise NotFoundError("Leave request not found")
        if leave.status != RequestStatus.PENDING:
            raise ValidationError("Leave request was already processed")

        if not self._leaves.decide(request_id=str(request_id), status=status, approver_name=approver_name):
            raise ValidationError(f"Failed to {'approve' if status == RequestStatus.APPROVED else 'reject'} leave request")
        logger.info("Leave %s %s by %s", request_id, status.value, approver_name)
