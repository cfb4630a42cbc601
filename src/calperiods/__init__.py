"""calperiods public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize the default resolver on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    resolve_calendar,
    list_calendars,
    calendar_info,
    today,
    convert_date,
    generate_periods,
    locate_period,
    previous_periods,
)
from .bootstrap import build_registry
from .config import configure, get_config, reset_config
from .core.errors import (
    CalperiodsError,
    InvalidCalendarDate,
    UnsupportedCalendarYear,
    UnknownCalendar,
    UnsupportedLocaleForCalendar,
    UnrecognizedPeriodType,
    InvalidYear,
    PeriodNotFound,
)
from .core.types import CalendarDate
from .periods.previous import iter_previous_fixed_periods
from .periods.types import FixedPeriod, PeriodType
from .resolver import CalendarResolver, ResolvedCalendar

__all__ = [
    "resolve_calendar",
    "list_calendars",
    "calendar_info",
    "today",
    "convert_date",
    "generate_periods",
    "locate_period",
    "previous_periods",
    "iter_previous_fixed_periods",
    "build_registry",
    "configure",
    "get_config",
    "reset_config",
    "CalendarDate",
    "FixedPeriod",
    "PeriodType",
    "CalendarResolver",
    "ResolvedCalendar",
    "CalperiodsError",
    "InvalidCalendarDate",
    "UnsupportedCalendarYear",
    "UnknownCalendar",
    "UnsupportedLocaleForCalendar",
    "UnrecognizedPeriodType",
    "InvalidYear",
    "PeriodNotFound",
]
