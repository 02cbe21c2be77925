from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..common.access import ALL_ROLES, STAFF_ROLES, current_role, roles_required
from ..common.web import load_rows, selected_indices, table_context, table_options, table_query
from ..container import Container
from ..core.enums import LeaveType, RequestStatus
from ..core.exceptions import ApiError, AuthorizationError, NotFoundError, ValidationError
from ..filters.store import FilterStore, LeaveFilters
from ..table import DataTable, RowAction
from .columns import leave_columns


def register(app: Flask, container: Container) -> None:
    def _row_actions(row: dict) -> list[RowAction]:
        if row.get("status") != RequestStatus.PENDING.value:
            return []
        return [
            RowAction("Approve", url_for("approve_leave", request_id=row["id"]), style="outline-success"),
            RowAction("Reject", url_for("reject_leave", request_id=row["id"]), style="outline-danger"),
        ]

    def _leave_table(rows, query, *, can_decide: bool, on_selection_change=None) -> DataTable:
        return query.apply(
            DataTable(
                rows,
                leave_columns(),
                search_placeholder="Search leaves...",
                default_sort_column="applied_on",
                default_sort_direction="desc",
                actions=_row_actions if can_decide else None,
                selectable=can_decide,
                on_selection_change=on_selection_change,
                **table_options(app),
            )
        )

    def _rows_for(filters: LeaveFilters) -> list[dict]:
        employee_id = filters.employee if current_role() in STAFF_ROLES else str(session["user_id"])
        return load_rows(
            container.leave_service.list_rows,
            status=filters.status,
            leave_type=filters.type,
            employee_id=employee_id,
        )

    @app.route("/leaves", endpoint="leaves")
    @roles_required(*ALL_ROLES)
    def leaves():
        filters = FilterStore(session).update_from_args("leave", LeaveFilters, request.args)
        query = table_query(app)
        can_decide = current_role() in STAFF_ROLES

        table = _leave_table(_rows_for(filters), query, can_decide=can_decide)
        return render_template(
            "leaves/list.html",
            **table_context(table, query, "leaves"),
            filters=filters,
            statuses=[s.value for s in RequestStatus],
            leave_types=[t.value for t in LeaveType],
            can_decide=can_decide,
            active_page="leaves",
        )

    @app.route("/leaves/apply", methods=["GET", "POST"], endpoint="apply_leave")
    @roles_required(*ALL_ROLES)
    def apply_leave():
        if request.method == "POST":
            try:
                container.leave_service.apply(
                    employee_id=str(session["user_id"]),
                    employee_name=session.get("name", ""),
                    leave_type=request.form.get("leave_type", ""),
                    start_date=request.form.get("start_date", ""),
                    end_date=request.form.get("end_date", ""),
                    reason=request.form.get("reason", ""),
                )
                flash("Leave request submitted", "success")
                return redirect(url_for("leaves"))
            except ValidationError as e:
                flash(str(e), "danger")
            except ApiError as e:
                flash(f"Failed to submit leave request: {e}", "danger")

        balances = load_rows(container.leave_service.balances, employee_id=str(session["user_id"]))
        return render_template(
            "leaves/apply.html",
            balance=balances[0] if balances else None,
            leave_types=[t.value for t in LeaveType],
            form=request.form,
            active_page="leaves",
        )

    def _decide(request_id: str, approve: bool):
        service = container.leave_service
        decide = service.approve if approve else service.reject
        try:
            decide(current_role=current_role(), approver_name=session.get("name", ""), request_id=request_id)
            flash(f"Leave request {'approved' if approve else 'rejected'}", "success")
        except (ValidationError, AuthorizationError, NotFoundError) as e:
            flash(str(e), "danger")
        except ApiError as e:
            flash(f"Failed to update leave request: {e}", "danger")
        return redirect(request.referrer or url_for("leaves"))

    @app.route("/leaves/<request_id>/approve", methods=["POST"], endpoint="approve_leave")
    @roles_required(*STAFF_ROLES)
    def approve_leave(request_id: str):
        return _decide(request_id, approve=True)

    @app.route("/leaves/<request_id>/reject", methods=["POST"], endpoint="reject_leave")
    @roles_required(*STAFF_ROLES)
    def reject_leave(request_id: str):
        return _decide(request_id, approve=False)

    @app.route("/leaves/bulk", methods=["POST"], endpoint="bulk_leaves")
    @roles_required(*STAFF_ROLES)
    def bulk_leaves():
        query = table_query(app, request.form)
        picked: list[dict] = []

        def keep_selection(selected: list[dict]) -> None:
            picked[:] = selected

        filters = FilterStore(session).leave_filters()
        table = _leave_table(_rows_for(filters), query, can_decide=True, on_selection_change=keep_selection)
        if request.form.get("select_all"):
            table.toggle_all(True)
        for index in selected_indices(request.form):
            table.toggle_one(index, True)

        try:
            decided = container.leave_service.decide_many(
                current_role=current_role(),
                approver_name=session.get("name", ""),
                rows=picked,
                approve=request.form.get("decision") == "approve",
            )
            flash(f"{decided} leave request(s) updated", "success" if decided else "info")
        except (ValidationError, AuthorizationError) as e:
            flash(str(e), "warning")
        except ApiError as e:
            flash(f"Failed to update leave requests: {e}", "danger")
        return redirect(url_for("leaves", **query.to_args()))
