from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional, Union

from .config import get_config
from .core.calendar import DateLike
from .core.time import civil_today
from .core.types import CalendarDate
from .periods.generate import generate_fixed_periods
from .periods.locate import locate_fixed_period
from .periods.previous import previous_fixed_periods
from .periods.types import FixedPeriod, PeriodType
from .resolver import CalendarResolver, ResolvedCalendar

CalendarArg = Union[str, ResolvedCalendar, None]

_resolver: Optional[CalendarResolver] = None

def set_resolver(resolver: CalendarResolver) -> None:
    global _resolver
    _resolver = resolver

def _res(resolver: Optional[CalendarResolver] = None) -> CalendarResolver:
    if resolver is not None:
        return resolver
    if _resolver is None:
        raise RuntimeError("Calendar resolver not initialized")
    return _resolver

def _resolve(calendar: CalendarArg, locale: Optional[str], resolver: Optional[CalendarResolver]) -> ResolvedCalendar:
    if isinstance(calendar, ResolvedCalendar):
        return calendar
    cfg = get_config()
    return _res(resolver).resolve(calendar or cfg.default_calendar, locale or cfg.default_locale)

# ============================================================
# Calendars
# ============================================================

def list_calendars(*, resolver: Optional[CalendarResolver] = None) -> List[str]:
    return _res(resolver).registry.list()

def calendar_info(identifier: str, *, resolver: Optional[CalendarResolver] = None) -> Dict[str, Any]:
    r = _res(resolver)
    return r.registry.get(r.canonical_id(identifier)).info()

def resolve_calendar(
    identifier: Optional[str] = None,
    locale: Optional[str] = None,
    *,
    resolver: Optional[CalendarResolver] = None,
) -> ResolvedCalendar:
    return _resolve(identifier, locale, resolver)

def today(
    calendar: CalendarArg = None,
    *,
    timezone: Optional[str] = None,
    locale: Optional[str] = None,
    resolver: Optional[CalendarResolver] = None,
) -> CalendarDate:
    """Current civil date in ``timezone`` (configured default when omitted), as a date of ``calendar``."""
    rc = _resolve(calendar, locale, resolver)
    return rc.calendar.from_gregorian(civil_today(timezone or get_config().default_timezone))

def convert_date(
    d: date,
    calendar: CalendarArg = None,
    *,
    locale: Optional[str] = None,
    resolver: Optional[CalendarResolver] = None,
) -> CalendarDate:
    """Gregorian ``date`` -> date label in ``calendar``."""
    return _resolve(calendar, locale, resolver).calendar.from_gregorian(d)

# ============================================================
# Periods
# ============================================================

def generate_periods(
    year: Union[int, str],
    period_type: Union[str, PeriodType],
    *,
    calendar: CalendarArg = None,
    locale: Optional[str] = None,
    starting_day: Optional[int] = None,
    ends_before: Optional[DateLike] = None,
    years_count: Optional[int] = None,
    resolver: Optional[CalendarResolver] = None,
) -> List[FixedPeriod]:
    rc = _resolve(calendar, locale, resolver)
    if starting_day is None:
        starting_day = get_config().default_starting_day
    return generate_fixed_periods(
        year, period_type, rc,
        starting_day=starting_day,
        ends_before=ends_before,
        years_count=years_count,
    )

def locate_period(
    date: DateLike,
    period_type: Union[str, PeriodType],
    *,
    calendar: CalendarArg = None,
    locale: Optional[str] = None,
    starting_day: Optional[int] = None,
    resolver: Optional[CalendarResolver] = None,
) -> FixedPeriod:
    rc = _resolve(calendar, locale, resolver)
    if starting_day is None:
        starting_day = get_config().default_starting_day
    return locate_fixed_period(date, period_type, rc, starting_day=starting_day)

def previous_periods(
    period: FixedPeriod,
    count: int,
    *,
    calendar: CalendarArg = None,
    locale: Optional[str] = None,
    resolver: Optional[CalendarResolver] = None,
) -> List[FixedPeriod]:
    # The period's own dates name the calendar it was generated in.
    rc = _resolve(calendar or period.start_date.calendar, locale, resolver)
    return previous_fixed_periods(period, count, rc)
