from __future__ import annotations

from datetime import date

from ..common.validators import require_choice
from ..core.constants import DEFAULT_UPCOMING_HOLIDAYS
from ..core.enums import HolidayType
from ..core.exceptions import ValidationError
from .model import Holiday
from .repository import HolidayRepository


class HolidayService:
    def __init__(self, holidays: HolidayRepository):
        self._holidays = holidays

    def list_rows(self, *, region: str = "", holiday_type: str = "", year: str = "") -> list[dict]:
        year_filter = None
        if year:
            try:
                year_filter = int(year)
            except ValueError:
                raise ValidationError("Year is not valid")
        holidays = self._holidays.list_holidays(
            region=region or None,
            holiday_type=require_choice(holiday_type, "Holiday type", HolidayType) if holiday_type else None,
            year=year_filter,
        )
        return [h.as_row() for h in holidays]

    def regions(self) -> list[str]:
        return sorted({h.region for h in self._holidays.list_holidays() if h.region})

    def upcoming(self, *, today: date, limit: int = DEFAULT_UPCOMING_HOLIDAYS) -> list[Holiday]:
        items = [h for h in self._holidays.list_holidays() if h.holiday_date >= today]
        items.sort(key=lambda h: h.holiday_date)
        return items[:limit]
