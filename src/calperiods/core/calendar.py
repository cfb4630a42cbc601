"""
calperiods.core.calendar
------------------------
The calendar contract. Every calendar, arithmetic or table-driven, maps
(year, month, day) labels to Julian Day Numbers (the absolute day) and back.
Period arithmetic only ever talks to this interface.

Subclasses implement four primitives (``_to_jdn``, ``_from_jdn``,
``months_in_year``, ``days_in_month``); validation, month stepping, date
arithmetic, comparison and parsing live in the base class.
"""

from __future__ import annotations

import re
from datetime import date as _date
from typing import Any, Dict, Mapping, Optional, Protocol, Tuple, Union

from .errors import InvalidCalendarDate
from .time import from_jdn, iso_weekday, to_jdn
from .types import CalendarDate, CalendarLocale

DateLike = Union[CalendarDate, _date, str]

_DATE_RE = re.compile(r"^\s*(-?\d{1,6})-(\d{1,2})-(\d{1,2})\s*$")


class CalendarProtocol(Protocol):
    id: str
    era: Optional[str]

    def to_absolute_day(self, d: CalendarDate) -> int: ...
    def from_absolute_day(self, jdn: int) -> CalendarDate: ...
    def days_in_month(self, year: int, month: int) -> int: ...
    def days_in_year(self, year: int) -> int: ...
    def months_in_year(self, year: int) -> int: ...
    def add(self, d: CalendarDate, *, days: int = 0, months: int = 0, years: int = 0) -> CalendarDate: ...
    def compare(self, a: CalendarDate, b: CalendarDate) -> int: ...
    def month_name(self, month: int, locale: Optional[str] = None) -> str: ...


class Calendar(CalendarProtocol):
    """Shared implementation of the calendar contract."""

    custom: bool = False

    def __init__(
        self,
        id: str,
        *,
        era: Optional[str] = None,
        localisations: Optional[Mapping[str, CalendarLocale]] = None,
    ):
        self.id = id
        self.era = era
        self._localisations: Dict[str, CalendarLocale] = dict(localisations or {})
        if "en" not in self._localisations:
            raise ValueError(f"Calendar '{id}' needs at least English ('en') labels")

    # ---------------------------------------------------------
    # Primitives
    # ---------------------------------------------------------

    def _to_jdn(self, year: int, month: int, day: int) -> int:
        raise NotImplementedError

    def _from_jdn(self, jdn: int) -> Tuple[int, int, int]:
        raise NotImplementedError

    def months_in_year(self, year: int) -> int:
        raise NotImplementedError

    def days_in_month(self, year: int, month: int) -> int:
        raise NotImplementedError

    # ---------------------------------------------------------
    # Contract
    # ---------------------------------------------------------

    def info(self) -> Dict[str, Any]:
        return {"id": self.id, "era": self.era, "custom": self.custom, "locales": sorted(self._localisations)}

    def check_month(self, year: int, month: int) -> None:
        moy = self.months_in_year(year)
        if not (1 <= month <= moy):
            raise InvalidCalendarDate(f"Month {month} out of range 1..{moy} for {self.id} year {year}")

    def check(self, year: int, month: int, day: int) -> None:
        self.check_month(year, month)
        dim = self.days_in_month(year, month)
        if not (1 <= day <= dim):
            raise InvalidCalendarDate(f"Day {day} out of range 1..{dim} for {self.id} {year}-{month:02d}")

    def date(self, year: int, month: int, day: int) -> CalendarDate:
        self.check(year, month, day)
        return CalendarDate(year, month, day, self.id, self.era)

    def to_absolute_day(self, d: CalendarDate) -> int:
        if d.calendar != self.id:
            raise InvalidCalendarDate(f"Date {d} belongs to calendar '{d.calendar}', not '{self.id}'")
        self.check(d.year, d.month, d.day)
        return self._to_jdn(d.year, d.month, d.day)

    def from_absolute_day(self, jdn: int) -> CalendarDate:
        y, m, d = self._from_jdn(jdn)
        return CalendarDate(y, m, d, self.id, self.era)

    def days_in_year(self, year: int) -> int:
        return sum(self.days_in_month(year, m) for m in range(1, self.months_in_year(year) + 1))

    def weekday(self, d: CalendarDate) -> int:
        """ISO weekday, 1=Mon..7=Sun."""
        return iso_weekday(self.to_absolute_day(d))

    def shift_month(self, year: int, month: int, n: int) -> Tuple[int, int]:
        """Move a (year, month) label by n months, honouring per-year month counts."""
        while n > 0:
            moy = self.months_in_year(year)
            if month + n <= moy:
                return year, month + n
            n -= moy - month + 1
            year, month = year + 1, 1
        while n < 0:
            if month + n >= 1:
                return year, month + n
            n += month
            year -= 1
            month = self.months_in_year(year)
        return year, month

    def last_day(self, year: int, month: int) -> CalendarDate:
        return self.date(year, month, self.days_in_month(year, month))

    def add(self, d: CalendarDate, *, days: int = 0, months: int = 0, years: int = 0) -> CalendarDate:
        """Add years, then months (clamping the day to the target month), then days."""
        self.to_absolute_day(d)
        year, month = d.year + years, d.month
        if years:
            month = min(month, self.months_in_year(year))
        year, month = self.shift_month(year, month, months)
        day = min(d.day, self.days_in_month(year, month))
        return self.from_absolute_day(self._to_jdn(year, month, day) + days)

    def compare(self, a: CalendarDate, b: CalendarDate) -> int:
        ja, jb = self.to_absolute_day(a), self.to_absolute_day(b)
        return (ja > jb) - (ja < jb)

    # ---------------------------------------------------------
    # Conversions
    # ---------------------------------------------------------

    def parse(self, s: str) -> CalendarDate:
        m = _DATE_RE.match(s)
        if m is None:
            raise InvalidCalendarDate(f"Cannot parse '{s}' as YYYY-MM-DD")
        return self.date(int(m.group(1)), int(m.group(2)), int(m.group(3)))

    def from_gregorian(self, d: _date) -> CalendarDate:
        return self.from_absolute_day(to_jdn(d))

    def to_gregorian(self, d: CalendarDate) -> _date:
        return from_jdn(self.to_absolute_day(d))

    def coerce(self, value: DateLike) -> CalendarDate:
        """Accept a CalendarDate of this calendar, a Gregorian ``date``, or a string in this calendar."""
        if isinstance(value, CalendarDate):
            self.to_absolute_day(value)
            return value
        if isinstance(value, _date):
            return self.from_gregorian(value)
        if isinstance(value, str):
            return self.parse(value)
        raise TypeError(f"Cannot interpret {value!r} as a date")

    # ---------------------------------------------------------
    # Labels
    # ---------------------------------------------------------

    @property
    def locales(self) -> frozenset:
        return frozenset(self._localisations)

    def localisation(self, locale: Optional[str] = None) -> CalendarLocale:
        if locale in self._localisations:
            return self._localisations[locale]
        if locale:
            lang = locale.split("-")[0]
            if lang in self._localisations:
                return self._localisations[lang]
        return self._localisations["en"]

    def month_name(self, month: int, locale: Optional[str] = None) -> str:
        return self.localisation(locale).month_names[month - 1]

    def weekday_name(self, d: CalendarDate, locale: Optional[str] = None) -> str:
        return self.localisation(locale).day_names_short[self.weekday(d) - 1]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.id!r})"
