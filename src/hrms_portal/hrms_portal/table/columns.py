from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable, Optional

from ..core.enums import SortType

Row = Any
RenderFn = Callable[[Any, Row], Any]
AccessorFn = Callable[[Row], Any]


@dataclass(frozen=True)
class Column:
    """How one field of a row is labeled, sorted and rendered.

    ``key`` names the row field. ``render`` receives ``(value, row)`` and
    returns what goes into the cell; without it the raw value is shown as
    text. ``sort_accessor`` derives the sort value from the whole row when the
    raw field is not what should be compared.
    """

    key: str
    label: str
    sortable: bool = False
    render: Optional[RenderFn] = None
    sort_accessor: Optional[AccessorFn] = None
    sort_type: Optional[str] = None
    class_name: str = ""

    @property
    def resolved_sort_type(self) -> SortType:
        # Unrecognised values compare as strings.
        try:
            return SortType(self.sort_type) if self.sort_type else SortType.STRING
        except ValueError:
            return SortType.STRING

    def sort_value(self, row: Row) -> Any:
        if self.sort_accessor is not None:
            return self.sort_accessor(row)
        return field_value(row, self.key)

    def cell(self, row: Row) -> Any:
        value = field_value(row, self.key)
        if self.render is not None:
            return self.render(value, row)
        return stringify(value)


def field_value(row: Row, key: str) -> Any:
    """Value of ``key`` on a mapping or attribute row; None when absent."""
    if isinstance(row, Mapping):
        return row.get(key)
    return getattr(row, key, None)


def row_values(row: Row) -> Iterable[Any]:
    """The row's own field values, in field order."""
    if isinstance(row, Mapping):
        return row.values()
    if dataclasses.is_dataclass(row) and not isinstance(row, type):
        return [getattr(row, f.name) for f in dataclasses.fields(row)]
    return vars(row).values()


def stringify(value: Any) -> str:
    """Text form of a cell value as a browser would print it.

    None is empty, booleans are lowercase, whole floats drop their ``.0``,
    sequences are comma-joined and nested mappings have no searchable text.
    """
    if isinstance(value, Enum):
        value = value.value
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, Mapping):
        return ""
    if isinstance(value, (list, tuple)):
        return ",".join(stringify(v) for v in value)
    return str(value)


def find_column(columns: Iterable[Column], key: Optional[str]) -> Optional[Column]:
    if key is None:
        return None
    for column in columns:
        if column.key == key:
            return column
    return None
