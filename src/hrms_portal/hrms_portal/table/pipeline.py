"""The row pipeline behind every table: filter -> sort -> paginate.

Each stage is a plain function over a sequence of rows and returns a new
list; the caller's rows are never mutated.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence

from ..common.datetime_utils import to_timestamp
from ..core.enums import SortDirection, SortType
from .columns import Column, Row, row_values, stringify


def matches_query(row: Row, query: str) -> bool:
    q = query.lower()
    return any(q in stringify(v).lower() for v in row_values(row))


def filter_rows(rows: Sequence[Row], query: str) -> list[Row]:
    """Keep rows where any field contains ``query`` (case-insensitive)."""
    if not query:
        return list(rows)
    return [row for row in rows if matches_query(row, query)]


def number_key(value: Any) -> float:
    if value is None or value == "":
        return 0.0
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, str):
        text = value.strip()
        word = text.lstrip("+-")
        # float() also takes "1_000", "inf" and "nan"; only "Infinity" is a number here.
        if "_" in text or (word[:1].isalpha() and word != "Infinity"):
            return 0.0
    try:
        n = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(n):
        return 0.0
    return n


def date_key(value: Any) -> float:
    return to_timestamp(value)


def string_key(value: Any) -> str:
    return stringify(value).lower()


_KEY_FUNCS: dict[SortType, Callable[[Any], Any]] = {
    SortType.NUMBER: number_key,
    SortType.DATE: date_key,
    SortType.STRING: string_key,
}


def sort_rows(
    rows: Sequence[Row],
    column: Optional[Column],
    direction: SortDirection = SortDirection.ASC,
) -> list[Row]:
    """Stable sort by ``column``; equal keys keep input order either way."""
    if column is None:
        return list(rows)
    key_func = _KEY_FUNCS[column.resolved_sort_type]
    # sorted(reverse=True) keeps equal elements in input order.
    return sorted(
        rows,
        key=lambda row: key_func(column.sort_value(row)),
        reverse=direction is SortDirection.DESC,
    )


def total_pages(total: int, page_size: int) -> int:
    return max(1, math.ceil(total / page_size))


def clamp_page(page: int, pages: int) -> int:
    return min(max(1, page), pages)


@dataclass(frozen=True)
class PageSlice:
    rows: list[Row]
    page: int
    page_size: int
    total: int
    total_pages: int

    @property
    def start_index(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def range_label(self) -> str:
        if self.total == 0:
            return "0-0 of 0"
        end = min(self.start_index + len(self.rows), self.total)
        return f"{self.start_index + 1}-{end} of {self.total}"


def paginate(rows: Sequence[Row], page: int, page_size: int) -> PageSlice:
    if page_size < 1:
        raise ValueError("page_size must be >= 1")
    total = len(rows)
    pages = total_pages(total, page_size)
    current = clamp_page(page, pages)
    start = (current - 1) * page_size
    return PageSlice(
        rows=list(rows[start:start + page_size]),
        page=current,
        page_size=page_size,
        total=total,
        total_pages=pages,
    )
