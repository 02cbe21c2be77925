from __future__ import annotations

from datetime import date

import pytest

from src.hrms_portal.hrms_portal.core.enums import LeaveType, RequestStatus, Role
from src.hrms_portal.hrms_portal.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from src.hrms_portal.hrms_portal.leaves.model import BalanceBucket, LeaveBalance, LeaveRequest
from src.hrms_portal.hrms_portal.leaves.service import LeaveService
from src.hrms_portal.hrms_portal.memory.repositories import InMemoryLeaveRepository


def _leave(request_id, status=RequestStatus.PENDING, employee_id="1"):
    return LeaveRequest(
        request_id=request_id,
        employee_id=employee_id,
        employee_name="John Doe",
        leave_type=LeaveType.CASUAL,
        start_date=date(2026, 3, 2),
        end_date=date(2026, 3, 3),
        days=2,
        reason="Family trip",
        status=status,
        applied_on=date(2026, 2, 20),
    )


@pytest.fixture
def repo():
    return InMemoryLeaveRepository(
        [_leave("1"), _leave("2", RequestStatus.APPROVED), _leave("3", employee_id="5")],
        today=lambda: date(2026, 2, 25),
    )


def test_apply_counts_days_inclusively(repo):
    svc = LeaveService(repo)

    rid = svc.apply(
        employee_id="1",
        employee_name="John Doe",
        leave_type="sick",
        start_date="2026-03-09",
        end_date="2026-03-11",
        reason="Flu",
    )

    created = repo.get(rid)
    assert created.days == 3
    assert created.status == RequestStatus.PENDING
    assert created.applied_on == date(2026, 2, 25)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"leave_type": "holiday"},
        {"start_date": "03/09/2026"},
        {"end_date": "2026-03-01"},
        {"reason": "   "},
    ],
)
def test_apply_rejects_bad_input(repo, kwargs):
    data = {"leave_type": "casual", "start_date": "2026-03-09", "end_date": "2026-03-10", "reason": "x"}
    data.update(kwargs)
    with pytest.raises(ValidationError):
        LeaveService(repo).apply(employee_id="1", employee_name="John Doe", **data)


def test_manager_approves_pending_leave(repo):
    LeaveService(repo).approve(current_role=Role.MANAGER, approver_name="Sarah Johnson", request_id="1")

    leave = repo.get("1")
    assert leave.status == RequestStatus.APPROVED
    assert leave.approver_name == "Sarah Johnson"
    assert leave.decided_on == date(2026, 2, 25)


def test_employee_cannot_decide(repo):
    with pytest.raises(AuthorizationError):
        LeaveService(repo).reject(current_role=Role.EMPLOYEE, approver_name="John", request_id="1")


def test_deciding_twice_is_rejected(repo):
    with pytest.raises(ValidationError):
        LeaveService(repo).approve(current_role=Role.HR, approver_name="Mike", request_id="2")


def test_unknown_leave(repo):
    with pytest.raises(NotFoundError):
        LeaveService(repo).approve(current_role=Role.HR, approver_name="Mike", request_id="99")


def test_decide_many_skips_processed_rows(repo):
    svc = LeaveService(repo)
    rows = [lv.as_row() for lv in repo.list_leaves()]

    decided = svc.decide_many(current_role=Role.ADMIN, approver_name="Alice", rows=rows, approve=False)

    assert decided == 2
    assert repo.get("1").status == RequestStatus.REJECTED
    assert repo.get("2").status == RequestStatus.APPROVED


def test_decide_many_needs_a_selection(repo):
    with pytest.raises(ValidationError):
        LeaveService(repo).decide_many(current_role=Role.ADMIN, approver_name="Alice", rows=[], approve=True)


def test_list_rows_filters(repo):
    svc = LeaveService(repo)
    assert [r["id"] for r in svc.list_rows(status="pending")] == ["1", "3"]
    assert [r["id"] for r in svc.list_rows(employee_id="5")] == ["3"]
    assert svc.pending_count() == 2
    with pytest.raises(ValidationError):
        svc.list_rows(leave_type="bogus")


def test_balances_for_one_employee_or_everyone():
    john = LeaveBalance("1", "John Doe", BalanceBucket(12, 2, 10), BalanceBucket(7, 0, 7), BalanceBucket(18, 5, 13))
    emily = LeaveBalance("5", "Emily Chen", sick=BalanceBucket(7, 3, 4))
    svc = LeaveService(InMemoryLeaveRepository(balances=[john, emily]))

    assert svc.balances("1") == [john]
    assert svc.balances(5) == [emily]
    assert svc.balances("3") == []
    assert [b.employee_id for b in svc.balances()] == ["1", "5"]
    assert [(label, bucket.remaining) for label, bucket in john.cards()] == [
        ("Casual Leave", 10),
        ("Sick Leave", 7),
        ("Earned Leave", 13),
    ]
