from __future__ import annotations

from ..common.datetime_utils import format_display_date
from ..core.enums import SortType
from ..table import Badge, Column

_STATUS_VARIANTS = {
    "present": "success",
    "absent": "danger",
    "leave": "warning",
    "holiday": "info",
    "half-day": "secondary",
}


def _hours(value, _row) -> str:
    if value is None or value == "":
        return "-"
    return f"{float(value):.2f}"


def attendance_columns() -> list[Column]:
    return [
        Column(key="employee_id", label="Employee ID", sortable=True, sort_type=SortType.STRING.value),
        Column(key="employee_name", label="Employee Name", sortable=True, sort_type=SortType.STRING.value),
        Column(
            key="date",
            label="Date",
            sortable=True,
            sort_type=SortType.DATE.value,
            render=lambda value, _row: format_display_date(value, "%d %b %Y"),
        ),
        Column(key="check_in", label="Check In", render=lambda value, _row: value or "-"),
        Column(key="check_out", label="Check Out", render=lambda value, _row: value or "-"),
        Column(key="hours_worked", label="Hours", sortable=True, sort_type=SortType.NUMBER.value, render=_hours),
        Column(
            key="status",
            label="Status",
            sortable=True,
            sort_accessor=lambda row: str(row.get("status") or ""),
            render=lambda value, _row: Badge(value, _STATUS_VARIANTS.get(value, "secondary")),
        ),
    ]
