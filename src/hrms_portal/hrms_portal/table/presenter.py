from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Hashable, Optional, Sequence, Union

from ..core.constants import (
    DEFAULT_PAGE_SIZE,
    DEFAULT_SEARCH_PLACEHOLDER,
    EMPTY_TABLE_MESSAGE,
    PAGE_SIZE_OPTIONS,
)
from ..core.enums import SortDirection
from .columns import Column, Row, find_column
from .pipeline import PageSlice, clamp_page, filter_rows, paginate, sort_rows, total_pages
from .state import PaginationState, SelectionState, SortState, coerce_direction


@dataclass(frozen=True)
class HeaderCell:
    key: str
    label: str
    sortable: bool
    direction: Optional[SortDirection] = None
    class_name: str = ""


@dataclass(frozen=True)
class CellView:
    key: str
    content: Any
    class_name: str = ""


@dataclass(frozen=True)
class RowView:
    index: int
    row: Row
    cells: list[CellView]
    selected: bool = False
    actions: Any = None
    href: Optional[str] = None
    clickable: bool = False


@dataclass(frozen=True)
class TableView:
    """Everything a template needs to draw one table render."""

    headers: list[HeaderCell]
    rows: list[RowView]
    colspan: int
    search_query: str
    search_placeholder: str
    page: int
    total_pages: int
    page_size: int
    page_size_options: tuple[int, ...]
    total_rows: int
    range_label: str
    has_previous: bool
    has_next: bool
    selectable: bool
    all_selected: bool
    has_actions: bool
    pagination_enabled: bool
    filters: Any = None
    empty_message: str = EMPTY_TABLE_MESSAGE
    sort_column: Optional[str] = None
    sort_direction: SortDirection = SortDirection.ASC
    selected_count: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.rows


class DataTable:
    """Searchable, sortable, paginated, optionally selectable view over rows.

    The table never fetches or owns data. On every :meth:`render` the
    caller's rows go through the same fixed pipeline: substring filter over
    every field, stable sort by the active column, then the page slice.

    Selection is kept as page-relative indices and is dropped whenever the
    visible slice changes (page, page size, search or sort). Passing
    ``row_key`` switches to identity-keyed selection that survives those
    changes.

    With ``manual_pagination`` (plus ``current_page`` and ``on_page_change``)
    the rows are taken to be the current page already: the caller owns the
    page number and ``total_rows``, and page changes are only reported.
    """

    def __init__(
        self,
        rows: Sequence[Row],
        columns: Sequence[Column],
        *,
        search_placeholder: str = DEFAULT_SEARCH_PLACEHOLDER,
        default_search_value: str = "",
        on_search: Optional[Callable[[str], None]] = None,
        on_row_click: Optional[Callable[[Row], None]] = None,
        row_href: Optional[Callable[[Row], str]] = None,
        actions: Optional[Callable[[Row], Any]] = None,
        filters: Any = None,
        initial_page_size: int = DEFAULT_PAGE_SIZE,
        page_size_options: Sequence[int] = PAGE_SIZE_OPTIONS,
        selectable: bool = False,
        on_selection_change: Optional[Callable[[list[Row]], None]] = None,
        row_key: Optional[Callable[[Row], Hashable]] = None,
        default_sort_column: Optional[str] = None,
        default_sort_direction: Union[SortDirection, str] = SortDirection.ASC,
        pagination_enabled: bool = True,
        manual_pagination: bool = False,
        current_page: Optional[int] = None,
        total_rows: Optional[int] = None,
        on_page_change: Optional[Callable[[int], None]] = None,
        on_page_size_change: Optional[Callable[[int], None]] = None,
    ):
        self._rows = list(rows) if rows is not None else []
        self._columns = list(columns)
        self._search_placeholder = search_placeholder
        self._on_search = on_search
        self._on_row_click = on_row_click
        self._row_href = row_href
        self._actions = actions
        self._filters = filters
        self._selectable = selectable
        self._on_selection_change = on_selection_change
        self._row_key = row_key
        self._pagination_enabled = pagination_enabled
        self._manual_pagination = manual_pagination
        self._current_page = current_page
        self._total_rows = total_rows
        self._on_page_change = on_page_change
        self._on_page_size_change = on_page_size_change

        self.query = default_search_value or ""
        self.sort = SortState(default_sort_column, coerce_direction(default_sort_direction))
        self.pagination = PaginationState(page=1, page_size=initial_page_size, options=tuple(page_size_options))
        self.selection = SelectionState()

    # -- derived data ---------------------------------------------------

    @property
    def columns(self) -> list[Column]:
        return list(self._columns)

    @property
    def manual_mode_active(self) -> bool:
        return bool(
            self._pagination_enabled
            and self._manual_pagination
            and self._on_page_change is not None
            and isinstance(self._current_page, int)
        )

    def processed_rows(self) -> list[Row]:
        """Filtered and sorted rows, before pagination."""
        filtered = filter_rows(self._rows, self.query)
        column = find_column(self._columns, self.sort.column)
        if self.sort.column is not None and column is None:
            # Sorting by a field no column describes compares its raw value as text.
            column = Column(key=self.sort.column, label=self.sort.column)
        return sort_rows(filtered, column, self.sort.direction)

    def page_slice(self) -> PageSlice:
        rows = self.processed_rows()
        size = self.pagination.page_size
        if not self._pagination_enabled:
            return PageSlice(rows=rows, page=1, page_size=size, total=len(rows), total_pages=1)
        if self.manual_mode_active:
            total = self._total_rows if self._total_rows is not None else len(rows)
            pages = total_pages(total, size)
            return PageSlice(
                rows=rows,
                page=clamp_page(int(self._current_page), pages),
                page_size=size,
                total=total,
                total_pages=pages,
            )
        return paginate(rows, self.pagination.page, size)

    @property
    def visible_rows(self) -> list[Row]:
        return self.page_slice().rows

    @property
    def current_page(self) -> int:
        return self.page_slice().page

    @property
    def selected_rows(self) -> list[Row]:
        if self._row_key is not None:
            return [row for row in self.processed_rows() if self._row_key(row) in self.selection.keys]
        visible = self.visible_rows
        return [visible[i] for i in sorted(self.selection.indices) if 0 <= i < len(visible)]

    # -- events -----------------------------------------------------------

    def search(self, query: str) -> None:
        self.query = query or ""
        if self._on_search is not None:
            self._on_search(self.query)
        if self.manual_mode_active:
            self._on_page_change(1)
        else:
            self.pagination.page = 1
        self._invalidate_selection()

    def sort_by(self, key: str) -> None:
        column = find_column(self._columns, key)
        if column is None or not column.sortable:
            return
        self.sort.toggle(key)
        self._invalidate_selection()

    def clear_sort(self) -> None:
        self.sort.clear()
        self._invalidate_selection()

    def go_to_page(self, page: int) -> None:
        current = self.page_slice()
        target = clamp_page(int(page), current.total_pages)
        if target == current.page:
            return
        if self.manual_mode_active:
            self._on_page_change(target)
        else:
            self.pagination.page = target
        self._invalidate_selection()

    def next_page(self) -> None:
        self.go_to_page(self.current_page + 1)

    def previous_page(self) -> None:
        self.go_to_page(self.current_page - 1)

    def set_page_size(self, size: int) -> None:
        self.pagination.set_page_size(int(size))
        if self.manual_mode_active:
            if self._on_page_size_change is not None:
                self._on_page_size_change(int(size))
            self._on_page_change(1)
        self._invalidate_selection()

    def toggle_all(self, checked: bool) -> None:
        visible = self.visible_rows
        if self._row_key is not None:
            keys = {self._row_key(row) for row in visible}
            if checked:
                self.selection.keys |= keys
            else:
                self.selection.keys -= keys
        elif checked:
            self.selection.select_indices(range(len(visible)))
        else:
            self.selection.clear_indices()
        self._emit_selection()

    def toggle_one(self, index: int, checked: bool) -> None:
        if self._row_key is not None:
            visible = self.visible_rows
            if not 0 <= index < len(visible):
                return
            key = self._row_key(visible[index])
            if checked:
                self.selection.keys.add(key)
            else:
                self.selection.keys.discard(key)
        elif checked:
            self.selection.indices.add(index)
        else:
            self.selection.indices.discard(index)
        self._emit_selection()

    def is_selected(self, index: int) -> bool:
        return self._is_selected(index, self.visible_rows if self._row_key is not None else ())

    def _is_selected(self, index: int, visible: Sequence[Row]) -> bool:
        if self._row_key is not None:
            return 0 <= index < len(visible) and self._row_key(visible[index]) in self.selection.keys
        return index in self.selection.indices

    def click_row(self, index: int) -> None:
        if self._on_row_click is None:
            return
        visible = self.visible_rows
        if 0 <= index < len(visible):
            self._on_row_click(visible[index])

    def restore(
        self,
        *,
        search: Optional[str] = None,
        sort_column: Optional[str] = None,
        sort_direction: Union[SortDirection, str, None] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> None:
        """Put the table back into a previously rendered state.

        Used when state arrives from outside (e.g. request arguments); no
        callback fires and nothing is reset.
        """
        if search is not None:
            self.query = search
        if sort_column is not None:
            column = find_column(self._columns, sort_column)
            if column is not None and column.sortable:
                self.sort.set(sort_column, sort_direction)
        if page_size is not None:
            self.pagination.set_page_size(int(page_size))
        if page is not None:
            self.pagination.page = max(1, int(page))

    def _invalidate_selection(self) -> None:
        self.selection.clear_indices()

    def _emit_selection(self) -> None:
        if self._on_selection_change is not None:
            self._on_selection_change(self.selected_rows)

    # -- rendering ----------------------------------------------------------

    def render(self) -> TableView:
        current = self.page_slice()
        # Keep the stored page inside range once the row count is known.
        if self._pagination_enabled and not self.manual_mode_active:
            self.pagination.page = current.page

        headers = [
            HeaderCell(
                key=c.key,
                label=c.label,
                sortable=c.sortable,
                direction=self.sort.direction if self.sort.column == c.key else None,
                class_name=c.class_name,
            )
            for c in self._columns
        ]

        body: list[RowView] = []
        for index, row in enumerate(current.rows):
            body.append(
                RowView(
                    index=index,
                    row=row,
                    cells=[CellView(key=c.key, content=c.cell(row), class_name=c.class_name) for c in self._columns],
                    selected=self._selectable and self._is_selected(index, current.rows),
                    actions=self._actions(row) if self._actions is not None else None,
                    href=self._row_href(row) if self._row_href is not None else None,
                    clickable=self._on_row_click is not None or self._row_href is not None,
                )
            )

        colspan = len(self._columns) + (1 if self._actions is not None else 0) + (1 if self._selectable else 0)
        all_selected = bool(body) and all(r.selected for r in body)

        return TableView(
            headers=headers,
            rows=body,
            colspan=colspan,
            search_query=self.query,
            search_placeholder=self._search_placeholder,
            page=current.page,
            total_pages=current.total_pages,
            page_size=self.pagination.page_size,
            page_size_options=self.pagination.options,
            total_rows=current.total,
            range_label=current.range_label,
            has_previous=current.page > 1,
            has_next=current.page < current.total_pages,
            selectable=self._selectable,
            all_selected=all_selected,
            has_actions=self._actions is not None,
            pagination_enabled=self._pagination_enabled,
            filters=self._filters,
            sort_column=self.sort.column,
            sort_direction=self.sort.direction,
            selected_count=sum(1 for r in body if r.selected),
        )
