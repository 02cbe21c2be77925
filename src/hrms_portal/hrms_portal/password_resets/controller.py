from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, url_for

from ..common.access import ADMIN_ROLES, current_role, roles_required
from ..common.web import load_rows, table_context, table_options, table_query
from ..container import Container
from ..core.enums import RequestStatus
from ..core.exceptions import ApiError, AuthorizationError, NotFoundError, ValidationError
from ..table import DataTable, RowAction
from .columns import password_reset_columns


def register(app: Flask, container: Container) -> None:
    def _row_actions(row: dict) -> list[RowAction]:
        actions = []
        if row.get("status") == RequestStatus.PENDING.value:
            actions.append(
                RowAction("Reset", url_for("reset_password", request_id=row["id"]), method="get", style="outline-primary")
            )
        actions.append(
            RowAction(
                "Delete",
                url_for("delete_password_reset", request_id=row["id"]),
                style="outline-danger",
                confirm="Are you sure you want to delete this request?",
            )
        )
        return actions

    @app.route("/admin/password-resets", endpoint="password_resets")
    @roles_required(*ADMIN_ROLES)
    def password_resets():
        query = table_query(app)
        rows = load_rows(container.password_reset_service.list_rows)

        table = query.apply(
            DataTable(
                rows,
                password_reset_columns(),
                search_placeholder="Search requests...",
                default_sort_column="created_at",
                default_sort_direction="desc",
                actions=_row_actions,
                **table_options(app),
            )
        )
        return render_template(
            "password_resets/list.html",
            **table_context(table, query, "password_resets"),
            active_page="password_resets",
        )

    @app.route("/admin/password-resets/<request_id>/reset", methods=["GET", "POST"], endpoint="reset_password")
    @roles_required(*ADMIN_ROLES)
    def reset_password(request_id: str):
        if request.method == "POST":
            password = request.form.get("new_password", "")
            if password != request.form.get("confirm_password", ""):
                flash("Passwords do not match", "danger")
            else:
                try:
                    container.password_reset_service.reset_password(
                        current_role=current_role(),
                        request_id=request_id,
                        new_password=password,
                    )
                    flash("Password has been reset", "success")
                    return redirect(url_for("password_resets"))
                except (ValidationError, AuthorizationError, NotFoundError) as e:
                    flash(str(e), "danger")
                except ApiError as e:
                    flash(f"Failed to reset password: {e}", "danger")

        return render_template(
            "password_resets/reset.html",
            request_id=request_id,
            active_page="password_resets",
        )

    @app.route("/admin/password-resets/<request_id>/delete", methods=["POST"], endpoint="delete_password_reset")
    @roles_required(*ADMIN_ROLES)
    def delete_password_reset(request_id: str):
        try:
            container.password_reset_service.delete_request(current_role=current_role(), request_id=request_id)
            flash("Request deleted", "success")
        except (AuthorizationError, NotFoundError) as e:
            flash(str(e), "danger")
        except ApiError as e:
            flash(f"Failed to delete request: {e}", "danger")
        return redirect(url_for("password_resets"))
