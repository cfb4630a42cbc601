"""
calperiods.calendars.civil
--------------------------
Arithmetic calendars backed by ``convertdate``. Each wrapped module exposes
``to_jd(year, month, day)`` returning the astronomical JD of the day's
starting midnight (an ``x.5`` value) and ``from_jd(jd)`` as its inverse.
Month lengths are the distance between consecutive month starts.

``year_offset`` relabels the years of a wrapped module: the Ethiopic
calendar is the Coptic one with years numbered 276 higher.
"""

from __future__ import annotations

import math
from types import ModuleType
from typing import Mapping, Optional, Tuple

from convertdate import coptic, islamic, julian, persian

from ..core.calendar import Calendar
from ..core.types import CalendarLocale


class ConvertdateCalendar(Calendar):
    def __init__(
        self,
        id: str,
        module: ModuleType,
        *,
        months: int = 12,
        year_offset: int = 0,
        era: Optional[str] = None,
        localisations: Optional[Mapping[str, CalendarLocale]] = None,
    ):
        super().__init__(id, era=era, localisations=localisations)
        self.module = module
        self.months = months
        self.year_offset = year_offset

    def _to_jdn(self, year: int, month: int, day: int) -> int:
        return math.floor(self.module.to_jd(year - self.year_offset, month, day) + 0.5)

    def _from_jdn(self, jdn: int) -> Tuple[int, int, int]:
        y, m, d = self.module.from_jd(jdn - 0.5)
        return int(y) + self.year_offset, int(m), int(d)

    def months_in_year(self, year: int) -> int:
        return self.months

    def days_in_month(self, year: int, month: int) -> int:
        self.check_month(year, month)
        ny, nm = self.shift_month(year, month, 1)
        return self._to_jdn(ny, nm, 1) - self._to_jdn(year, month, 1)

    def days_in_year(self, year: int) -> int:
        return self._to_jdn(year + 1, 1, 1) - self._to_jdn(year, 1, 1)


MODULES = {
    "julian": julian,
    "coptic": coptic,
    "islamic": islamic,
    "persian": persian,
}
