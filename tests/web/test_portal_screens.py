from __future__ import annotations

from src.hrms_portal.hrms_portal.core.enums import RequestStatus


def test_sign_in_by_email(client):
    resp = client.post("/login", data={"email": "mike.wilson@company.com"})

    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/dashboard")
    with client.session_transaction() as sess:
        assert sess["role"] == "hr"
        assert sess["filters"]["employee"] == {"department": "", "status": ""}


def test_unknown_email_stays_on_login(client):
    resp = client.post("/login", data={"email": "nobody@company.com"})
    assert resp.status_code == 200
    assert b"No account found for that email" in resp.data


def test_anonymous_users_are_sent_to_login(client):
    resp = client.get("/employees")
    assert resp.status_code == 302
    assert "/login" in resp.headers["Location"]


def test_dashboard_for_staff(login_as):
    resp = login_as("3", "Mike Wilson", "hr").get("/dashboard")
    assert resp.status_code == 200
    assert b"Pending leave requests" in resp.data


def test_employees_screen_is_staff_only(login_as):
    resp = login_as("1", "John Doe", "employee").get("/employees")
    assert resp.status_code == 403


def test_employee_directory_search(login_as):
    client = login_as("3", "Mike Wilson", "hr")

    resp = client.get("/employees?q=sarah")

    assert resp.status_code == 200
    assert b"Sarah Johnson" in resp.data
    assert b"Emily Chen" not in resp.data
    assert b"1-1 of 1" in resp.data


def test_directory_filters_are_remembered(login_as):
    client = login_as("3", "Mike Wilson", "hr")
    client.get("/employees?department=Marketing")

    resp = client.get("/employees")

    assert b"Emily Chen" in resp.data
    assert b"Raj Patel" not in resp.data

    resp = client.get("/employees?department=all")
    assert b"Raj Patel" in resp.data


def test_directory_pages_and_sorts(login_as):
    client = login_as("3", "Mike Wilson", "hr")

    resp = client.get("/employees?sort=name&dir=desc&size=5&page=2")

    assert resp.status_code == 200
    # six employees sorted Z-A: page two holds only the last one
    assert b"6-6 of 6" in resp.data
    assert b"Alice Admin" in resp.data
    assert b"Sarah Johnson" not in resp.data


def test_bad_page_size_falls_back_to_default(login_as):
    resp = login_as("3", "Mike Wilson", "hr").get("/employees?size=7")
    assert b"1-6 of 6" in resp.data


def test_employee_detail_and_missing_employee(login_as):
    client = login_as("2", "Sarah Johnson", "manager")
    assert b"123 Main St" in client.get("/employees/1").data
    assert client.get("/employees/999").status_code == 404


def test_employees_only_see_their_own_attendance(login_as):
    resp = login_as("5", "Emily Chen", "employee").get("/attendance")

    assert resp.status_code == 200
    assert b"1-1 of 1" in resp.data
    assert b"John Doe" not in resp.data


def test_mark_bulk_attendance_for_checked_rows(login_as, container):
    client = login_as("3", "Mike Wilson", "hr")
    assert client.get("/attendance/mark-bulk").status_code == 200

    resp = client.post(
        "/attendance/mark-bulk",
        data={
            "selected": ["0", "4"],
            "date": "2026-02-02",
            "check_in": "09:00",
            "check_out": "17:00",
            "status": "present",
        },
    )

    assert resp.status_code == 302
    marked = container.attendance_repo.list_records(month="2026-02")
    assert sorted(r.employee_name for r in marked) == ["Emily Chen", "John Doe"]
    assert {r.hours_worked for r in marked} == {8.0}


def test_mark_bulk_uses_the_page_the_user_saw(login_as, container):
    client = login_as("3", "Mike Wilson", "hr")

    client.post(
        "/attendance/mark-bulk",
        data={"selected": ["0"], "sort": "name", "dir": "desc", "date": "2026-02-03", "status": "absent"},
    )

    [record] = container.attendance_repo.list_records(month="2026-02")
    assert record.employee_name == "Sarah Johnson"


def test_mark_bulk_without_selection(login_as):
    resp = login_as("3", "Mike Wilson", "hr").post("/attendance/mark-bulk", data={"date": "2026-02-02"})
    assert resp.status_code == 200
    assert b"Please select at least one employee" in resp.data


def test_page_size_round_trips_when_the_default_is_smaller(app, login_as):
    app.config["DEFAULT_PAGE_SIZE"] = 5
    client = login_as("3", "Mike Wilson", "hr")

    assert b"1-5 of 6" in client.get("/employees").data
    resp = client.get("/employees?size=10")

    assert b"1-6 of 6" in resp.data
    assert b"sort=name&amp;dir=asc&amp;size=10" in resp.data
    assert b'name="size" value="10"' in client.get("/attendance/mark-bulk?size=10").data


def test_mark_bulk_at_a_non_default_page_size(app, login_as, container):
    app.config["DEFAULT_PAGE_SIZE"] = 5
    client = login_as("3", "Mike Wilson", "hr")

    client.post("/attendance/mark-bulk", data={"selected": ["4"], "size": "10", "date": "2026-02-04", "status": "present"})

    [record] = container.attendance_repo.list_records(month="2026-02")
    assert record.employee_name == "Emily Chen"


def test_mark_bulk_reads_rows_past_the_default_page(app, login_as, container):
    app.config["DEFAULT_PAGE_SIZE"] = 2
    app.config["PAGE_SIZE_OPTIONS"] = (2, 10)
    client = login_as("3", "Mike Wilson", "hr")

    form = client.get("/attendance/mark-bulk?size=10").data
    assert b'name="size" value="10"' in form
    client.post("/attendance/mark-bulk", data={"selected": ["3"], "size": "10", "date": "2026-02-05", "status": "present"})

    [record] = container.attendance_repo.list_records(month="2026-02")
    assert record.employee_name == "Alice Admin"


def test_manager_approves_one_leave(login_as, container):
    client = login_as("2", "Sarah Johnson", "manager")

    resp = client.post("/leaves/2/approve")

    assert resp.status_code == 302
    leave = container.leaves_repo.get("2")
    assert leave.status == RequestStatus.APPROVED
    assert leave.approver_name == "Sarah Johnson"


def test_employee_cannot_approve(login_as):
    client = login_as("1", "John Doe", "employee")
    assert client.post("/leaves/2/approve").status_code == 403
    assert b"Approve selected" not in client.get("/leaves").data


def test_bulk_leave_decision_follows_the_sorted_page(login_as, container):
    client = login_as("4", "Alice Admin", "admin")

    # newest application first: leave 3, then 2, then 1
    client.post("/leaves/bulk", data={"selected": ["0"], "decision": "reject"})

    assert container.leaves_repo.get("3").status == RequestStatus.REJECTED
    assert container.leaves_repo.get("2").status == RequestStatus.PENDING


def test_apply_for_leave(login_as, container):
    client = login_as("5", "Emily Chen", "employee")

    resp = client.post(
        "/leaves/apply",
        data={"leave_type": "casual", "start_date": "2026-04-06", "end_date": "2026-04-07", "reason": "Wedding"},
    )

    assert resp.status_code == 302
    mine = container.leaves_repo.list_leaves(employee_id="5")
    assert [lv.reason for lv in mine] == ["Fever and doctor's advice to rest", "Wedding"]


def test_apply_page_shows_remaining_leave(login_as):
    resp = login_as("1", "John Doe", "employee").get("/leaves/apply")

    assert resp.status_code == 200
    assert b"Casual Leave" in resp.data
    assert b"10 days" in resp.data
    assert b"of 18 total" in resp.data


def test_employee_detail_shows_leave_balance(login_as):
    client = login_as("2", "Sarah Johnson", "manager")

    assert b"of 7 total" in client.get("/employees/5").data
    assert b"No leave balance on record." in client.get("/employees/3").data


def test_holidays_are_visible_to_everyone(login_as):
    resp = login_as("1", "John Doe", "employee").get("/holidays?type=optional")
    assert resp.status_code == 200
    assert b"Regional Festival" in resp.data
    assert b"Christmas Day" not in resp.data


def test_password_reset_flow(login_as, container):
    client = login_as("4", "Alice Admin", "admin")
    assert b"Emily Chen" in client.get("/admin/password-resets").data

    resp = client.post(
        "/admin/password-resets/1/reset",
        data={"new_password": "new-pass-123", "confirm_password": "other-pass-123"},
    )
    assert b"Passwords do not match" in resp.data

    resp = client.post(
        "/admin/password-resets/1/reset",
        data={"new_password": "new-pass-123", "confirm_password": "new-pass-123"},
    )
    assert resp.status_code == 302
    assert "5" in container.password_resets_repo.password_hashes
    assert container.password_resets_repo.get("1").status == RequestStatus.APPROVED


def test_delete_password_reset_request(login_as, container):
    client = login_as("3", "Mike Wilson", "hr")
    client.post("/admin/password-resets/2/delete")
    assert container.password_resets_repo.get("2") is None


def test_password_resets_are_hidden_from_managers(login_as):
    assert login_as("2", "Sarah Johnson", "manager").get("/admin/password-resets").status_code == 403


def test_bulk_attendance_is_for_hr_and_admin(login_as):
    client = login_as("2", "Sarah Johnson", "manager")
    assert client.get("/attendance/mark-bulk").status_code == 403
    assert b"Mark bulk attendance" not in client.get("/attendance").data


def test_reset_filters(login_as):
    client = login_as("3", "Mike Wilson", "hr")
    client.get("/employees?status=inactive")

    resp = client.post("/filters/reset")

    assert resp.status_code == 302
    with client.session_transaction() as sess:
        assert sess["filters"]["employee"]["status"] == ""
