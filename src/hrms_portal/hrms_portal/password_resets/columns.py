from __future__ import annotations

from ..common.datetime_utils import format_display_date
from ..core.enums import SortType
from ..table import Badge, Column

_STATUS_VARIANTS = {"pending": "primary", "approved": "secondary", "rejected": "danger"}


def password_reset_columns() -> list[Column]:
    return [
        Column(key="name", label="Name", sortable=True),
        Column(key="email", label="Email", sortable=True),
        Column(key="role", label="Role", sortable=True, render=lambda value, _row: Badge(value)),
        Column(key="department", label="Department", sortable=True),
        Column(key="designation", label="Designation", sortable=True),
        Column(
            key="status",
            label="Status",
            sortable=True,
            render=lambda value, _row: Badge(value, _STATUS_VARIANTS.get(value, "secondary")),
        ),
        Column(
            key="created_at",
            label="Requested Date",
            sortable=True,
            sort_type=SortType.DATE.value,
            render=lambda value, _row: format_display_date(value, "%d/%m/%Y"),
        ),
    ]
