from __future__ import annotations

from flask import Flask, abort, render_template, request, session, url_for

from ..common.access import STAFF_ROLES, roles_required
from ..common.web import load_rows, table_context, table_options, table_query
from ..container import Container
from ..core.enums import EmployeeStatus
from ..core.exceptions import ApiError, NotFoundError
from ..filters.store import EmployeeFilters, FilterStore
from ..table import DataTable
from .columns import employee_columns


def register(app: Flask, container: Container) -> None:
    @app.route("/employees", endpoint="employees")
    @roles_required(*STAFF_ROLES)
    def employees():
        filters = FilterStore(session).update_from_args("employee", EmployeeFilters, request.args)
        query = table_query(app)

        # Server-side stage: caller filters plus the search text; the table filters again client-side.
        rows = load_rows(
            container.employee_service.list_rows,
            search=query.search,
            department=filters.department,
            status=filters.status,
        )
        try:
            departments = container.employee_service.departments()
        except ApiError:
            departments = []

        table = query.apply(
            DataTable(
                rows,
                employee_columns(),
                search_placeholder="Search employees...",
                row_href=lambda row: url_for("employee_detail", employee_id=row["id"]),
                filters=filters,
                **table_options(app),
            )
        )
        return render_template(
            "employees/list.html",
            **table_context(table, query, "employees"),
            departments=departments,
            statuses=[s.value for s in EmployeeStatus],
            active_page="employees",
        )

    @app.route("/employees/<employee_id>", endpoint="employee_detail")
    @roles_required(*STAFF_ROLES)
    def employee_detail(employee_id: str):
        try:
            employee = container.employee_service.get_employee(employee_id)
        except NotFoundError:
            abort(404)
        balances = load_rows(container.leave_service.balances, employee_id=employee.employee_id)
        return render_template(
            "employees/detail.html",
            employee=employee,
            balance=balances[0] if balances else None,
            active_page="employees",
        )
