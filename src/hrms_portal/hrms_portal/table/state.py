from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable, Optional, Sequence, Union

from ..core.enums import SortDirection
from ..core.exceptions import ValidationError


@dataclass
class SortState:
    column: Optional[str] = None
    direction: SortDirection = SortDirection.ASC

    def toggle(self, key: str) -> None:
        if self.column == key:
            self.direction = self.direction.flipped()
        else:
            self.column = key
            self.direction = SortDirection.ASC

    def clear(self) -> None:
        self.column = None
        self.direction = SortDirection.ASC

    def set(self, column: Optional[str], direction: Union[SortDirection, str, None]) -> None:
        self.column = column
        self.direction = coerce_direction(direction)


def coerce_direction(value: Union[SortDirection, str, None]) -> SortDirection:
    if isinstance(value, SortDirection):
        return value
    try:
        return SortDirection((value or "asc").lower())
    except ValueError:
        return SortDirection.ASC


@dataclass
class PaginationState:
    page: int = 1
    page_size: int = 10
    options: tuple[int, ...] = (5, 10, 20, 50)

    def __post_init__(self) -> None:
        if self.page_size < 1:
            raise ValidationError("Page size must be at least 1")
        if self.page_size not in self.options:
            self.options = tuple(sorted({*self.options, self.page_size}))

    def set_page_size(self, size: int) -> None:
        if size not in self.options:
            raise ValidationError(f"Page size {size} is not one of {list(self.options)}")
        self.page_size = size
        self.page = 1


@dataclass
class SelectionState:
    """Selected rows of the current page.

    ``indices`` holds page-relative positions; ``keys`` is used instead when
    the table was given a ``row_key`` and selection follows row identity.
    """

    indices: set[int] = field(default_factory=set)
    keys: set[Hashable] = field(default_factory=set)

    def select_indices(self, indices: Sequence[int]) -> None:
        self.indices = set(indices)

    def clear_indices(self) -> None:
        self.indices = set()
