from __future__ import annotations

from ..common.datetime_utils import format_display_date
from ..core.enums import SortType
from ..table import Badge, Column, Stacked

_STATUS_VARIANTS = {"active": "success", "inactive": "secondary", "terminated": "danger"}


def employee_columns() -> list[Column]:
    return [
        Column(key="emp_code", label="Employee ID", sortable=True, sort_type=SortType.STRING.value),
        Column(
            key="name",
            label="Employee",
            sortable=True,
            render=lambda _value, row: Stacked(row["name"], row.get("email", "")),
        ),
        Column(key="department", label="Department", sortable=True),
        Column(key="designation", label="Designation", sortable=True),
        Column(
            key="status",
            label="Status",
            render=lambda value, _row: Badge(value, _STATUS_VARIANTS.get(value, "secondary")),
        ),
        Column(
            key="joined_on",
            label="Joined",
            sortable=True,
            sort_type=SortType.DATE.value,
            render=lambda value, _row: format_display_date(value) if value else "-",
        ),
    ]


def selectable_employee_columns() -> list[Column]:
    """Compact directory columns for pick-lists (bulk attendance)."""
    return [
        Column(key="emp_code", label="Employee ID", sortable=True),
        Column(key="name", label="Name", sortable=True),
        Column(key="department", label="Department", sortable=True),
    ]
