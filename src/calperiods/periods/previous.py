"""
calperiods.periods.previous
---------------------------
Backward iteration over fixed periods. Rather than stepping one period at
a time, whole calendar-year batches are regenerated and sliced, so the cost
is one generation per year walked back.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, List

from ..core.errors import PeriodNotFound
from ..logging import get_logger, timed_block
from .generate import generate_fixed_periods
from .types import FixedPeriod, PeriodType

if TYPE_CHECKING:
    from ..resolver import ResolvedCalendar

log = get_logger(__name__)


def _starting_day(period: FixedPeriod, calendar: "ResolvedCalendar") -> int:
    # A plain WEEKLY period remembers its start weekday only through its start date.
    if period.period_type is PeriodType.WEEKLY:
        return calendar.calendar.weekday(period.start_date)
    return 1


def _batch(year: int, period: FixedPeriod, calendar: "ResolvedCalendar", starting_day: int) -> List[FixedPeriod]:
    return generate_fixed_periods(year, period.period_type, calendar, starting_day=starting_day)


def _index_of(batch: List[FixedPeriod], period: FixedPeriod) -> int:
    for i, candidate in enumerate(batch):
        if candidate.id == period.id:
            return i
    raise PeriodNotFound(f"Period '{period.id}' is not part of the {period.period_type.value} periods for {period.year}")


def previous_fixed_periods(period: FixedPeriod, count: int, calendar: "ResolvedCalendar") -> List[FixedPeriod]:
    """The ``count`` periods immediately before ``period``, oldest first."""
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    if count == 0:
        return []

    starting_day = _starting_day(period, calendar)
    year = period.year
    with timed_block(log, "previous_periods", period=period.id, count=count):
        batch = _batch(year, period, calendar, starting_day)
        index = _index_of(batch, period)
        collected = batch[max(0, index - count):index]

        while len(collected) < count:
            year -= 1
            batch = _batch(year, period, calendar, starting_day)
            needed = count - len(collected)
            collected = batch[max(0, len(batch) - needed):] + collected
            log.debug("previous_periods_year", year=year, collected=len(collected))

    return collected


def iter_previous_fixed_periods(period: FixedPeriod, calendar: "ResolvedCalendar") -> Iterator[FixedPeriod]:
    """Lazily yield the periods before ``period``, newest first, without end."""
    starting_day = _starting_day(period, calendar)
    year = period.year
    batch = _batch(year, period, calendar, starting_day)
    yield from reversed(batch[:_index_of(batch, period)])
    while True:
        year -= 1
        yield from reversed(_batch(year, period, calendar, starting_day))
