from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from typing import MutableMapping, Type, TypeVar

from ..core.exceptions import ValidationError

# Select boxes submit this for "no filter".
ALL = "all"


@dataclass(frozen=True)
class EmployeeFilters:
    department: str = ""
    status: str = ""


@dataclass(frozen=True)
class AttendanceFilters:
    employee: str = ""
    month: str = ""
    status: str = ""


@dataclass(frozen=True)
class LeaveFilters:
    status: str = ""
    type: str = ""
    employee: str = ""


@dataclass(frozen=True)
class HolidayFilters:
    region: str = ""
    type: str = ""
    year: str = ""


F = TypeVar("F")

_SCREENS: dict[str, type] = {
    "employee": EmployeeFilters,
    "attendance": AttendanceFilters,
    "leave": LeaveFilters,
    "holiday": HolidayFilters,
}


class FilterStore:
    """Caller-owned filter state for every list screen.

    Kept in a mutable mapping (the Flask session in the app) under one key per
    screen, so a screen shows the same filters when the user comes back to it.
    Updates are partial merges; ``"all"`` clears a field.
    """

    SESSION_KEY = "filters"

    def __init__(self, storage: MutableMapping):
        self._storage = storage

    def get(self, screen: str, cls: Type[F]) -> F:
        raw = self._all().get(screen) or {}
        known = {f.name for f in fields(cls)}
        return cls(**{k: str(v) for k, v in raw.items() if k in known})

    def update(self, screen: str, cls: Type[F], **changes) -> F:
        known = {f.name for f in fields(cls)}
        unknown = set(changes) - known
        if unknown:
            raise ValidationError(f"Unknown filter(s): {', '.join(sorted(unknown))}")
        cleaned = {k: "" if (v is None or v == ALL) else str(v).strip() for k, v in changes.items()}
        current = replace(self.get(screen, cls), **cleaned)
        data = self._all()
        data[screen] = asdict(current)
        self._storage[self.SESSION_KEY] = data
        return current

    def update_from_args(self, screen: str, cls: Type[F], args) -> F:
        """Merge the filter fields present in ``args`` (request arguments)."""
        present = {f.name: args.get(f.name) for f in fields(cls) if f.name in args}
        if not present:
            return self.get(screen, cls)
        return self.update(screen, cls, **present)

    def reset(self) -> None:
        self._storage[self.SESSION_KEY] = {name: asdict(cls()) for name, cls in _SCREENS.items()}

    def leave_filters(self) -> LeaveFilters:
        return self.get("leave", LeaveFilters)

    def _all(self) -> dict:
        return dict(self._storage.get(self.SESSION_KEY) or {})
