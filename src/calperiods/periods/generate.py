"""
calperiods.periods.generate
---------------------------
Dispatches fixed-period generation to the family of the requested period
type. All families return periods in ascending order and honour
``ends_before``: any period ending on or after the cutoff is dropped, and
generation stops there.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, List, Optional, Union

from ..core.calendar import DateLike
from ..core.errors import InvalidYear
from ..logging import get_logger
from .daily import generate_fixed_periods_daily
from .monthly import generate_fixed_periods_monthly
from .types import FixedPeriod, PeriodType
from .weekly import generate_fixed_periods_weekly
from .yearly import generate_fixed_periods_yearly

if TYPE_CHECKING:
    from ..resolver import ResolvedCalendar

log = get_logger(__name__)

_YEAR_RE = re.compile(r"^-?\d+$")


def parse_year(year: Union[int, str]) -> int:
    if isinstance(year, bool):
        raise InvalidYear(f"year must be a number, got {year!r}")
    if isinstance(year, int):
        return year
    if isinstance(year, str) and _YEAR_RE.match(year.strip()):
        return int(year.strip())
    raise InvalidYear(f"year must be a number, got {year!r}")


def check_starting_day(starting_day: int) -> int:
    if isinstance(starting_day, bool) or not isinstance(starting_day, int) or not (1 <= starting_day <= 7):
        raise ValueError(f"starting_day must be an integer in 1..7 (1 is Monday), got {starting_day!r}")
    return starting_day


def generate_fixed_periods(
    year: Union[int, str],
    period_type: Union[str, PeriodType],
    calendar: "ResolvedCalendar",
    *,
    starting_day: int = 1,
    ends_before: Optional[DateLike] = None,
    years_count: Optional[int] = None,
) -> List[FixedPeriod]:
    y = parse_year(year)
    pt = PeriodType.parse(period_type)
    check_starting_day(starting_day)
    cal, locale = calendar.calendar, calendar.locale

    cutoff = None
    if ends_before is not None:
        cutoff = cal.to_absolute_day(cal.coerce(ends_before))

    family = pt.family
    if family == "weekly":
        periods = generate_fixed_periods_weekly(y, pt, cal, locale, starting_day=starting_day, ends_before=cutoff)
    elif family == "yearly":
        periods = generate_fixed_periods_yearly(y, pt, cal, locale, ends_before=cutoff, years_count=years_count)
    elif family == "monthly":
        periods = generate_fixed_periods_monthly(y, pt, cal, locale, ends_before=cutoff)
    else:
        periods = generate_fixed_periods_daily(y, cal, locale, ends_before=cutoff)

    log.debug("periods_generated", calendar=cal.id, period_type=pt.value, year=y, count=len(periods))
    return periods
