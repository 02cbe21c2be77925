from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import HolidayType
from .model import Holiday


class HolidayRepository(Protocol):
    def list_holidays(
        self,
        *,
        region: Optional[str] = None,
        holiday_type: Optional[HolidayType] = None,
        year: Optional[int] = None,
    ) -> Sequence[Holiday]:
        raise NotImplementedError
