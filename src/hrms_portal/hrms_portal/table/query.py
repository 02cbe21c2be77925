from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Mapping, Optional, Sequence

from ..core.constants import DEFAULT_PAGE_SIZE, PAGE_SIZE_OPTIONS
from ..core.enums import SortDirection
from .presenter import DataTable
from .state import coerce_direction

SEARCH_ARG = "q"
SORT_ARG = "sort"
DIRECTION_ARG = "dir"
PAGE_ARG = "page"
SIZE_ARG = "size"


def _int_arg(args: Mapping, name: str, default: int) -> int:
    try:
        return int(args.get(name) or default)
    except (TypeError, ValueError):
        return default


@dataclass(frozen=True)
class TableQuery:
    """Table state carried in request arguments.

    Every list screen rebuilds its :class:`DataTable` per request; this is the
    part of the state that survives between requests (search, sort, page and
    page size) plus the screen's own filter arguments, which are echoed back
    into every generated link.
    """

    search: str = ""
    sort: Optional[str] = None
    direction: SortDirection = SortDirection.ASC
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    extra: tuple[tuple[str, str], ...] = ()
    # The size a request without ``size`` gets; links omit ``size`` only for it.
    default_page_size: int = DEFAULT_PAGE_SIZE

    @classmethod
    def from_args(
        cls,
        args: Mapping,
        *,
        default_page_size: int = DEFAULT_PAGE_SIZE,
        page_size_options: Sequence[int] = PAGE_SIZE_OPTIONS,
        keep: Sequence[str] = (),
    ) -> "TableQuery":
        size = _int_arg(args, SIZE_ARG, default_page_size)
        if size not in page_size_options:
            size = default_page_size
        extra = tuple((name, str(args.get(name))) for name in keep if args.get(name))
        return cls(
            search=str(args.get(SEARCH_ARG) or ""),
            sort=args.get(SORT_ARG) or None,
            direction=coerce_direction(args.get(DIRECTION_ARG)),
            page=max(1, _int_arg(args, PAGE_ARG, 1)),
            page_size=size,
            extra=extra,
            default_page_size=default_page_size,
        )

    def apply(self, table: DataTable) -> DataTable:
        table.restore(
            search=self.search,
            sort_column=self.sort,
            sort_direction=self.direction,
            page=self.page,
            page_size=self.page_size,
        )
        return table

    def to_args(self, **changes) -> dict:
        q = replace(self, **changes) if changes else self
        args: dict = dict(q.extra)
        if q.search:
            args[SEARCH_ARG] = q.search
        if q.sort:
            args[SORT_ARG] = q.sort
            args[DIRECTION_ARG] = q.direction.value
        if q.page > 1:
            args[PAGE_ARG] = q.page
        if q.page_size != q.default_page_size:
            args[SIZE_ARG] = q.page_size
        return args

    def sort_args(self, key: str) -> dict:
        if self.sort == key:
            return self.to_args(direction=self.direction.flipped())
        return self.to_args(sort=key, direction=SortDirection.ASC)

    def page_args(self, page: int) -> dict:
        return self.to_args(page=page)

    def size_args(self, size: int) -> dict:
        return self.to_args(page_size=size, page=1)

    def hidden_fields(self, *, exclude: Sequence[str] = (SEARCH_ARG, PAGE_ARG)) -> dict:
        """Arguments a GET form must re-submit to keep the rest of the state."""
        return {k: v for k, v in self.to_args().items() if k not in exclude}
