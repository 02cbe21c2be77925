from __future__ import annotations

from ..common.datetime_utils import format_display_date
from ..core.enums import SortType
from ..table import Badge, Column

_TYPE_VARIANTS = {"national": "primary", "regional": "info", "optional": "secondary"}


def holiday_columns() -> list[Column]:
    return [
        Column(key="name", label="Holiday", sortable=True),
        Column(
            key="date",
            label="Date",
            sortable=True,
            sort_type=SortType.DATE.value,
            render=lambda value, _row: format_display_date(value, "%d %b %Y"),
        ),
        Column(key="weekday", label="Day"),
        Column(key="region", label="Region", sortable=True),
        Column(key="type", label="Type", sortable=True, render=lambda value, _row: Badge(value, _TYPE_VARIANTS.get(value, "secondary"))),
        Column(key="description", label="Description"),
    ]
