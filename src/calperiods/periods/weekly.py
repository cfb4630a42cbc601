"""
calperiods.periods.weekly
-------------------------
Weeks follow the ISO 8601 rule generalised to any start weekday: week 1 of
a year is the week that contains the year's 4th day, i.e. the first week
with most of its days inside the year. A year's weeks run up to the day
before the next year's week 1, so consecutive years tile without gaps and
the first and last weeks may reach into the neighbouring years.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from ..core.calendar import Calendar
from ..core.time import iso_weekday
from .naming import week_name
from .types import FixedPeriod, PeriodType

WEEKLY_START_DAYS: Dict[PeriodType, int] = {
    PeriodType.WEEKLYWED: 3,
    PeriodType.WEEKLYTHU: 4,
    PeriodType.WEEKLYSAT: 6,
    PeriodType.WEEKLYSUN: 7,
}

WEEKLY_ID_PREFIXES: Dict[PeriodType, str] = {
    PeriodType.WEEKLY: "",
    PeriodType.WEEKLYWED: "Wed",
    PeriodType.WEEKLYTHU: "Thu",
    PeriodType.WEEKLYSAT: "Sat",
    PeriodType.WEEKLYSUN: "Sun",
}


def week_start_day(period_type: PeriodType, starting_day: int = 1) -> int:
    """Start weekday (1=Mon..7=Sun); only plain WEEKLY honours ``starting_day``."""
    return WEEKLY_START_DAYS.get(period_type, starting_day)


def first_week_start(cal: Calendar, year: int, starting_day: int) -> int:
    """JDN of the first day of week 1 of ``year``."""
    anchor = cal.to_absolute_day(cal.date(year, 1, 4))
    return anchor - (iso_weekday(anchor) - starting_day) % 7


def generate_fixed_periods_weekly(
    year: int,
    period_type: PeriodType,
    cal: Calendar,
    locale: str,
    *,
    starting_day: int = 1,
    ends_before: Optional[int] = None,
) -> List[FixedPeriod]:
    day = week_start_day(period_type, starting_day)
    prefix = WEEKLY_ID_PREFIXES[period_type]
    start = first_week_start(cal, year, day)
    stop = first_week_start(cal, year + 1, day)

    periods: List[FixedPeriod] = []
    week = 1
    while start < stop:
        end = start + 6
        if ends_before is not None and end >= ends_before:
            break
        start_date = cal.from_absolute_day(start)
        end_date = cal.from_absolute_day(end)
        periods.append(FixedPeriod(
            period_type=period_type,
            id=f"{year}{prefix}W{week:02d}",
            start_date=start_date,
            end_date=end_date,
            display_name=week_name(cal, week, start_date, end_date, locale),
            year=year,
        ))
        start += 7
        week += 1
    return periods
