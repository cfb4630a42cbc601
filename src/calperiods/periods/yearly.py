from __future__ import annotations

from typing import Dict, List, Optional

from ..core.calendar import Calendar
from .naming import month_span_name, year_name
from .types import FixedPeriod, PeriodType

# Financial years run from the 1st of this month to the day before it a year later.
YEAR_START_MONTHS: Dict[PeriodType, int] = {
    PeriodType.YEARLY: 1,
    PeriodType.FYAPR: 4,
    PeriodType.FYJUL: 7,
    PeriodType.FYOCT: 10,
    PeriodType.FYNOV: 11,
}

YEARLY_ID_SUFFIXES: Dict[PeriodType, str] = {
    PeriodType.YEARLY: "",
    PeriodType.FYAPR: "April",
    PeriodType.FYJUL: "July",
    PeriodType.FYOCT: "Oct",
    PeriodType.FYNOV: "Nov",
}


def yearly_period(year: int, period_type: PeriodType, cal: Calendar, locale: str) -> FixedPeriod:
    month = YEAR_START_MONTHS[period_type]
    start_date = cal.date(year, month, 1)
    ey, em = cal.shift_month(year + 1, month, -1)
    end_date = cal.last_day(ey, em)
    if period_type is PeriodType.YEARLY:
        name = year_name(cal, year, locale)
    else:
        name = month_span_name(cal, start_date, end_date, locale)
    return FixedPeriod(
        period_type=period_type,
        id=f"{year}{YEARLY_ID_SUFFIXES[period_type]}",
        start_date=start_date,
        end_date=end_date,
        display_name=name,
        year=year,
    )


def generate_fixed_periods_yearly(
    year: int,
    period_type: PeriodType,
    cal: Calendar,
    locale: str,
    *,
    ends_before: Optional[int] = None,
    years_count: Optional[int] = None,
) -> List[FixedPeriod]:
    """One period for ``year``, or ``years_count`` periods ending with it, oldest first."""
    count = 1 if years_count is None else years_count
    if count < 1:
        raise ValueError(f"years_count must be >= 1, got {years_count}")

    periods: List[FixedPeriod] = []
    for y in range(year - count + 1, year + 1):
        period = yearly_period(y, period_type, cal, locale)
        if ends_before is not None and cal.to_absolute_day(period.end_date) >= ends_before:
            break
        periods.append(period)
    return periods
