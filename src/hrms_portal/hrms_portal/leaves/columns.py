from __future__ import annotations

from ..common.datetime_utils import format_display_date
from ..core.enums import SortType
from ..table import Badge, Column, Stacked

_STATUS_VARIANTS = {"approved": "success", "rejected": "danger", "pending": "secondary"}


def _reason(value, _row) -> str:
    if isinstance(value, str) and len(value) > 30:
        return f"{value[:30]}..."
    return value or ""


def leave_columns() -> list[Column]:
    return [
        Column(
            key="employee_name",
            label="Employee",
            sortable=True,
            render=lambda _value, row: Stacked(row["employee_name"], f"{row['leave_type']} leave"),
        ),
        Column(
            key="start_date",
            label="Duration",
            sortable=True,
            sort_type=SortType.DATE.value,
            render=lambda _value, row: Stacked(
                f"{format_display_date(row['start_date'], '%b %d')} - {format_display_date(row['end_date'], '%b %d')}",
                f"{row['days']} days",
            ),
        ),
        Column(
            key="applied_on",
            label="Applied On",
            sortable=True,
            sort_type=SortType.DATE.value,
            render=lambda value, _row: format_display_date(value, "%b %d, %Y"),
        ),
        Column(
            key="status",
            label="Status",
            sortable=True,
            render=lambda value, _row: Badge(value, _STATUS_VARIANTS.get(value, "secondary")),
        ),
        Column(key="reason", label="Reason", render=_reason),
    ]
