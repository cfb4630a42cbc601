from __future__ import annotations

from typing import TYPE_CHECKING, Union

from ..core.calendar import DateLike
from ..core.errors import PeriodNotFound
from .generate import generate_fixed_periods
from .types import FixedPeriod, PeriodType

if TYPE_CHECKING:
    from ..resolver import ResolvedCalendar


def locate_fixed_period(
    date: DateLike,
    period_type: Union[str, PeriodType],
    calendar: "ResolvedCalendar",
    *,
    starting_day: int = 1,
) -> FixedPeriod:
    """Return the fixed period of ``period_type`` that contains ``date``.

    The date's own calendar year is searched first. Weeks, offset
    six-monthly periods and financial years can belong to the previous
    (or, for weeks, the next) year's batch, so those are tried next.
    """
    pt = PeriodType.parse(period_type)
    cal = calendar.calendar
    target = cal.coerce(date)
    jdn = cal.to_absolute_day(target)

    for year in (target.year, target.year - 1, target.year + 1):
        for period in generate_fixed_periods(year, pt, calendar, starting_day=starting_day):
            if cal.to_absolute_day(period.start_date) <= jdn <= cal.to_absolute_day(period.end_date):
                return period

    raise PeriodNotFound(f"No {pt.value} period contains {target} in calendar '{cal.id}'")
