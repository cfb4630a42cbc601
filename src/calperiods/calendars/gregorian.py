"""
calperiods.calendars.gregorian
------------------------------
Proleptic Gregorian calendar on plain integer JDN arithmetic, so it is
total for every year rather than only ``datetime.date``'s 1..9999.
"""

from __future__ import annotations

from typing import Mapping, Optional, Tuple

from ..core.calendar import Calendar
from ..core.time import gregorian_to_jdn, jdn_to_gregorian
from ..core.types import CalendarLocale
from .localisation import GREGORIAN

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


class GregorianCalendar(Calendar):
    def __init__(
        self,
        id: str = "iso8601",
        *,
        era: Optional[str] = "ce",
        localisations: Optional[Mapping[str, CalendarLocale]] = None,
    ):
        super().__init__(id, era=era, localisations=localisations or GREGORIAN)

    def _to_jdn(self, year: int, month: int, day: int) -> int:
        return gregorian_to_jdn(year, month, day)

    def _from_jdn(self, jdn: int) -> Tuple[int, int, int]:
        return jdn_to_gregorian(jdn)

    def months_in_year(self, year: int) -> int:
        return 12

    def days_in_month(self, year: int, month: int) -> int:
        self.check_month(year, month)
        if month == 2 and is_leap(year):
            return 29
        return _MONTH_DAYS[month - 1]

    def days_in_year(self, year: int) -> int:
        return 366 if is_leap(year) else 365
