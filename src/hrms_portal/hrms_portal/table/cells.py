"""Small renderables that column ``render`` and ``actions`` callbacks return.

The shared ``_data_table.html`` macro knows how to draw each of them; any
other value is printed as text.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Badge:
    kind = "badge"

    text: str
    variant: str = "secondary"


@dataclass(frozen=True)
class Stacked:
    """Primary text with a muted second line."""

    kind = "stacked"

    primary: str
    secondary: str = ""


@dataclass(frozen=True)
class RowAction:
    """A button in the trailing actions column.

    GET actions render as links; anything else renders as a one-button form
    posting to ``href``.
    """

    kind = "action"

    label: str
    href: str
    method: str = "post"
    style: str = "outline-secondary"
    confirm: Optional[str] = None

    @property
    def is_link(self) -> bool:
        return self.method.lower() == "get"
