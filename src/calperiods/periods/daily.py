from __future__ import annotations

from typing import List, Optional

from ..core.calendar import Calendar
from .naming import day_name
from .types import FixedPeriod, PeriodType


def generate_fixed_periods_daily(
    year: int,
    cal: Calendar,
    locale: str,
    *,
    ends_before: Optional[int] = None,
) -> List[FixedPeriod]:
    periods: List[FixedPeriod] = []
    jdn = cal.to_absolute_day(cal.date(year, 1, 1))
    for month in range(1, cal.months_in_year(year) + 1):
        for day in range(1, cal.days_in_month(year, month) + 1):
            if ends_before is not None and jdn >= ends_before:
                return periods
            d = cal.date(year, month, day)
            periods.append(FixedPeriod(
                period_type=PeriodType.DAILY,
                id=d.compact(),
                start_date=d,
                end_date=d,
                display_name=day_name(cal, d, locale),
                year=year,
            ))
            jdn += 1
    return periods
