from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import HolidayType


@dataclass(frozen=True)
class Holiday:
    holiday_id: str
    name: str
    holiday_date: date
    region: str
    holiday_type: HolidayType
    description: str = ""

    def as_row(self) -> dict:
        return {
            "id": self.holiday_id,
            "name": self.name,
            "date": self.holiday_date.isoformat(),
            "weekday": self.holiday_date.strftime("%A"),
            "region": self.region,
            "type": self.holiday_type.value,
            "description": self.description,
        }
