from __future__ import annotations

from ..core.calendar import Calendar
from ..core.types import CalendarDate


def _ymd(cal: Calendar, d: CalendarDate, locale: str) -> str:
    loc = cal.localisation(locale)
    return f"{loc.number(d.year, 4)}-{loc.number(d.month, 2)}-{loc.number(d.day, 2)}"


def day_name(cal: Calendar, d: CalendarDate, locale: str) -> str:
    # "January 1, 2024"
    loc = cal.localisation(locale)
    return f"{cal.month_name(d.month, locale)} {loc.number(d.day)}, {loc.number(d.year)}"


def week_name(cal: Calendar, week: int, start: CalendarDate, end: CalendarDate, locale: str) -> str:
    # "Week 1 - 2024-01-01 - 2024-01-07"
    loc = cal.localisation(locale)
    return f"{loc.week_label} {loc.number(week)} - {_ymd(cal, start, locale)} - {_ymd(cal, end, locale)}"


def month_span_name(cal: Calendar, start: CalendarDate, end: CalendarDate, locale: str) -> str:
    # "January 2024", "January - March 2024" or "October 2024 - March 2025"
    loc = cal.localisation(locale)
    first = cal.month_name(start.month, locale)
    last = cal.month_name(end.month, locale)
    if start.year != end.year:
        return f"{first} {loc.number(start.year)} - {last} {loc.number(end.year)}"
    if start.month == end.month:
        return f"{first} {loc.number(start.year)}"
    return f"{first} - {last} {loc.number(start.year)}"


def year_name(cal: Calendar, year: int, locale: str) -> str:
    return cal.localisation(locale).number(year)
