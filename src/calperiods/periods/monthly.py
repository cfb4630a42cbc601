"""
calperiods.periods.monthly
--------------------------
Monthly-family periods are buckets of consecutive months. A bucket runs
from the first day of its first month to the last day of the month before
the next bucket starts, so calendars with a 13th month fold it into the
year's last bucket instead of leaving it uncovered.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from ..core.calendar import Calendar
from .naming import month_span_name
from .types import FixedPeriod, PeriodType

# period type -> (months per bucket, first month of the year's first bucket)
BUCKETS: Dict[PeriodType, Tuple[int, int]] = {
    PeriodType.MONTHLY: (1, 1),
    PeriodType.BIMONTHLY: (2, 1),
    PeriodType.QUARTERLY: (3, 1),
    PeriodType.SIXMONTHLY: (6, 1),
    PeriodType.SIXMONTHLYAPR: (6, 4),
    PeriodType.SIXMONTHLYNOV: (6, 11),
}


def bucket_starts(cal: Calendar, year: int, size: int, start_month: int) -> List[Tuple[int, int]]:
    """(year, month) labels of each bucket's first month."""
    if start_month == 1:
        n = max(1, cal.months_in_year(year) // size)
    else:
        n = 12 // size
    return [cal.shift_month(year, start_month, k * size) for k in range(n)]


def monthly_period_id(period_type: PeriodType, year: int, index: int, month: int) -> str:
    if period_type is PeriodType.MONTHLY:
        return f"{year}{month:02d}"
    if period_type is PeriodType.BIMONTHLY:
        return f"{year}{index:02d}B"
    if period_type is PeriodType.QUARTERLY:
        return f"{year}Q{index}"
    if period_type is PeriodType.SIXMONTHLY:
        return f"{year}S{index}"
    if period_type is PeriodType.SIXMONTHLYAPR:
        return f"{year}AprilS{index}"
    return f"{year}NovS{index}"


def generate_fixed_periods_monthly(
    year: int,
    period_type: PeriodType,
    cal: Calendar,
    locale: str,
    *,
    ends_before: Optional[int] = None,
) -> List[FixedPeriod]:
    size, start_month = BUCKETS[period_type]
    starts = bucket_starts(cal, year, size, start_month)
    starts.append((year + 1, start_month))

    periods: List[FixedPeriod] = []
    for index, ((sy, sm), (ny, nm)) in enumerate(zip(starts, starts[1:]), start=1):
        ey, em = cal.shift_month(ny, nm, -1)
        start_date = cal.date(sy, sm, 1)
        end_date = cal.last_day(ey, em)
        if ends_before is not None and cal.to_absolute_day(end_date) >= ends_before:
            break
        periods.append(FixedPeriod(
            period_type=period_type,
            id=monthly_period_id(period_type, year, index, sm),
            start_date=start_date,
            end_date=end_date,
            display_name=month_span_name(cal, start_date, end_date, locale),
            year=year,
        ))
    return periods
