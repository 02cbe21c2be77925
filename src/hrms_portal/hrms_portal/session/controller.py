from __future__ import annotations

import logging

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..common.access import STAFF_ROLES, current_role, login_required, nav_items_for
from ..common.datetime_utils import today_local
from ..container import Container
from ..core.exceptions import ApiError, ValidationError
from ..filters.store import FilterStore

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.context_processor
    def inject_navigation():
        return {"nav_items": nav_items_for(current_role()), "session_name": session.get("name")}

    @app.route("/", endpoint="index")
    def index():
        return redirect(url_for("dashboard" if "user_id" in session else "login"))

    @app.route("/login", methods=["GET", "POST"], endpoint="login")
    def login():
        # Stand-in for the external session provider: no passwords are checked here.
        if "user_id" in session:
            return redirect(url_for("dashboard"))

        if request.method == "POST":
            try:
                employee = container.employee_service.find_by_email(request.form.get("email", ""))
                if not employee:
                    raise ValidationError("No account found for that email")

                session.clear()
                session["user_id"] = employee.employee_id
                session["name"] = employee.name
                session["role"] = employee.role.value
                FilterStore(session).reset()

                logger.info("Signed in %s as %s", employee.email, employee.role.value)
                flash("Signed in successfully!", "success")
                return redirect(url_for("dashboard"))
            except ValidationError as e:
                flash(str(e), "danger")
            except ApiError:
                flash("The HR service is unavailable right now. Please try again.", "danger")

        return render_template("login.html")

    @app.route("/logout", endpoint="logout")
    def logout():
        session.clear()
        flash("You have been signed out.", "info")
        return redirect(url_for("login"))

    @app.route("/filters/reset", methods=["POST"], endpoint="reset_filters")
    @login_required
    def reset_filters():
        FilterStore(session).reset()
        return redirect(request.referrer or url_for("dashboard"))

    @app.route("/dashboard", endpoint="dashboard")
    @login_required
    def dashboard():
        role = current_role()
        today = today_local()
        stats = {}
        upcoming = []
        try:
            if role in STAFF_ROLES:
                stats["employees"] = len(container.employee_service.list_rows())
                stats["pending_leaves"] = container.leave_service.pending_count()
                month_rows = container.attendance_service.list_rows(month=today.strftime("%Y-%m"))
            else:
                month_rows = container.attendance_service.list_rows(
                    employee_id=str(session["user_id"]), month=today.strftime("%Y-%m")
                )
            stats["present_today"] = sum(1 for r in month_rows if r["date"] == today.isoformat())
            upcoming = container.holiday_service.upcoming(today=today)
        except ApiError:
            flash("Some dashboard data could not be loaded.", "warning")

        return render_template(
            "dashboard.html",
            name=session.get("name"),
            stats=stats,
            upcoming=upcoming,
            active_page="dashboard",
        )
