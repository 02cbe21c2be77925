from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..common.access import ADMIN_ROLES, ALL_ROLES, STAFF_ROLES, current_role, roles_required
from ..common.datetime_utils import today_local
from ..common.web import load_rows, selected_indices, table_context, table_options, table_query
from ..container import Container
from ..core.enums import AttendanceStatus, EmployeeStatus
from ..core.exceptions import ApiError, ValidationError
from ..directory.columns import selectable_employee_columns
from ..filters.store import AttendanceFilters, FilterStore
from ..table import DataTable
from .columns import attendance_columns


def register(app: Flask, container: Container) -> None:
    def _bulk_table(rows, query, on_selection_change=None) -> DataTable:
        return query.apply(
            DataTable(
                rows,
                selectable_employee_columns(),
                search_placeholder="Search employees...",
                selectable=True,
                on_selection_change=on_selection_change,
                **table_options(app),
            )
        )

    @app.route("/attendance", endpoint="attendance")
    @roles_required(*ALL_ROLES)
    def attendance():
        filters = FilterStore(session).update_from_args("attendance", AttendanceFilters, request.args)
        query = table_query(app)

        # Employees only ever see their own records.
        employee_id = filters.employee if current_role() in STAFF_ROLES else str(session["user_id"])
        rows = load_rows(
            container.attendance_service.list_rows,
            employee_id=employee_id,
            month=filters.month,
            status=filters.status,
        )

        employees = []
        if current_role() in STAFF_ROLES:
            employees = load_rows(container.employee_service.list_rows)

        table = query.apply(
            DataTable(
                rows,
                attendance_columns(),
                search_placeholder="Search attendance...",
                default_sort_column="date",
                default_sort_direction="desc",
                filters=filters,
                **table_options(app),
            )
        )
        return render_template(
            "attendance/list.html",
            **table_context(table, query, "attendance"),
            employees=employees,
            statuses=[s.value for s in AttendanceStatus],
            can_mark=current_role() in ADMIN_ROLES,
            active_page="attendance",
        )

    @app.route("/attendance/mark-bulk", methods=["GET", "POST"], endpoint="mark_bulk_attendance")
    @roles_required(*ADMIN_ROLES)
    def mark_bulk_attendance():
        source = request.form if request.method == "POST" else request.args
        query = table_query(app, source)
        rows = load_rows(container.employee_service.list_rows, status=EmployeeStatus.ACTIVE.value)

        if request.method == "POST":
            picked: list[dict] = []

            def keep_selection(selected: list[dict]) -> None:
                picked[:] = selected

            # Rebuild the exact page the user saw, then replay their checkboxes.
            table = _bulk_table(rows, query, keep_selection)
            if request.form.get("select_all"):
                table.toggle_all(True)
            for index in selected_indices(request.form):
                table.toggle_one(index, True)

            try:
                marked = container.attendance_service.mark_bulk(
                    employees=picked,
                    work_date=request.form.get("date", ""),
                    check_in=request.form.get("check_in", ""),
                    check_out=request.form.get("check_out", ""),
                    status=request.form.get("status", AttendanceStatus.PRESENT.value),
                )
                flash(f"Attendance marked for {marked} employee(s)", "success")
                return redirect(url_for("attendance"))
            except ValidationError as e:
                flash(str(e), "danger")
            except ApiError as e:
                flash(f"Failed to mark attendance: {e}", "danger")
        else:
            table = _bulk_table(rows, query)

        return render_template(
            "attendance/mark_bulk.html",
            **table_context(table, query, "mark_bulk_attendance"),
            statuses=[s.value for s in AttendanceStatus],
            form=request.form,
            today=today_local().isoformat(),
            active_page="attendance",
        )
