from __future__ import annotations

from datetime import date, datetime, time, timezone
from typing import Any, Optional

# Tried in order after ``datetime.fromisoformat``.
_FALLBACK_FORMATS = (
    "%Y/%m/%d",
    "%d-%m-%Y",
    "%d/%m/%Y",
    "%b %d, %Y",
    "%d %b %Y",
    "%d %b %Y, %I:%M %p",
    "%a, %d %b %Y %H:%M:%S GMT",
)


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_hhmm(value: str) -> Optional[time]:
    """Parse HH:MM into time; blank input means "not given"."""
    v = (value or "").strip()
    if not v:
        return None
    return datetime.strptime(v, "%H:%M").time()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def today_local() -> date:
    return now_local().date()


def to_timestamp(value: Any) -> float:
    """Best-effort conversion of a date-like value into a POSIX timestamp.

    Accepts ``date``/``datetime`` objects, numbers (milliseconds since epoch)
    and strings in ISO 8601 or a handful of display formats. Naive values are
    read as UTC. Anything unparseable is 0.0 (the epoch).
    """
    if value is None or value == "" or isinstance(value, bool):
        return 0.0
    if isinstance(value, datetime):
        return _aware(value).timestamp()
    if isinstance(value, date):
        return _aware(datetime.combine(value, time.min)).timestamp()
    if isinstance(value, (int, float)):
        if value != value:  # NaN
            return 0.0
        return float(value) / 1000.0
    text = str(value).strip()
    if not text:
        return 0.0
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return _aware(datetime.fromisoformat(text)).timestamp()
    except ValueError:
        pass
    for fmt in _FALLBACK_FORMATS:
        try:
            return _aware(datetime.strptime(text, fmt)).timestamp()
        except ValueError:
            continue
    return 0.0


def _aware(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def format_display_date(value: Any, fmt: str = "%d-%m-%Y") -> str:
    """Format a date-like value for table cells; "-" when it cannot be read."""
    if isinstance(value, datetime):
        return value.strftime(fmt)
    if isinstance(value, date):
        return value.strftime(fmt)
    ts = to_timestamp(value)
    if not ts:
        return "-"
    return datetime.fromtimestamp(ts, tz=timezone.utc).strftime(fmt)


def inclusive_days(start: date, end: date) -> int:
    return (end - start).days + 1
