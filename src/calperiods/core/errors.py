class CalperiodsError(Exception):
    """Base error."""

class InvalidCalendarDate(CalperiodsError, ValueError):
    """Raised when a month or day is out of range for its calendar year."""

class UnsupportedCalendarYear(CalperiodsError):
    """Raised when a table-driven calendar has no data for the requested year."""

    def __init__(self, calendar: str, year: int, supported: tuple[int, int]):
        self.calendar = calendar
        self.year = year
        self.supported = supported
        lo, hi = supported
        super().__init__(f"Calendar '{calendar}' has no data for year {year} (supported: {lo}..{hi})")

class UnknownCalendar(CalperiodsError, KeyError):
    """Raised when a calendar identifier is not registered."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""

class UnsupportedLocaleForCalendar(CalperiodsError):
    """Raised when a custom calendar is requested with a locale it has no curated data for."""

class UnrecognizedPeriodType(CalperiodsError, ValueError):
    """Raised for a period type outside the supported enumeration."""

class InvalidYear(CalperiodsError, ValueError):
    """Raised when a year is not an integer or a numeric string."""

class PeriodNotFound(CalperiodsError):
    """Raised when no generated period contains a date (or matches a period id)."""
