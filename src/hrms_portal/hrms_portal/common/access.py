"""UI-level route gating by the role stored in the session.

This only decides which screens a role sees; the HR backend enforces the
real permissions.
"""
from __future__ import annotations

from dataclasses import dataclass
from functools import wraps
from typing import Optional

from flask import flash, redirect, render_template, session, url_for

from ..core.enums import Role

ALL_ROLES = frozenset(Role)
STAFF_ROLES = frozenset({Role.MANAGER, Role.HR, Role.ADMIN})
ADMIN_ROLES = frozenset({Role.HR, Role.ADMIN})


@dataclass(frozen=True)
class NavItem:
    name: str
    endpoint: str
    roles: frozenset


NAV_ITEMS = (
    NavItem("Dashboard", "dashboard", ALL_ROLES),
    NavItem("Employees", "employees", STAFF_ROLES),
    NavItem("Attendance", "attendance", ALL_ROLES),
    NavItem("Holidays", "holidays", ALL_ROLES),
    NavItem("Leaves", "leaves", ALL_ROLES),
    NavItem("Admin", "password_resets", ADMIN_ROLES),
)


def nav_items_for(role: Optional[Role]) -> list[NavItem]:
    if role is None:
        return []
    return [item for item in NAV_ITEMS if role in item.roles]


def current_role() -> Optional[Role]:
    try:
        return Role(session.get("role"))
    except ValueError:
        return None


def current_user() -> dict:
    return {
        "id": session.get("user_id"),
        "name": session.get("name"),
        "role": session.get("role"),
    }


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            flash("Please sign in to continue.", "warning")
            return redirect(url_for("login"))
        return view(*args, **kwargs)

    return wrapper


def roles_required(*roles: Role):
    allowed = frozenset(roles)

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "user_id" not in session:
                return redirect(url_for("login"))
            if current_role() not in allowed:
                return render_template("403.html", current_user=current_user()), 403
            return view(*args, **kwargs)

        return wrapper

    return decorator
