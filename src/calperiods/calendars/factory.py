"""
calperiods.calendars.factory
----------------------------
Turns the pure-data CalendarSpec entries into live calendar objects.
"""

from __future__ import annotations

from ..core.calendar import Calendar
from .civil import MODULES, ConvertdateCalendar
from .gregorian import GregorianCalendar
from .localisation import LOCALISATIONS
from .nepali import NepaliCalendar
from .specs import CalendarSpec


def make_calendar(spec: CalendarSpec) -> Calendar:
    """Build the live calendar a spec describes."""
    labels = LOCALISATIONS[spec.labels]
    if spec.kind == "gregorian":
        return GregorianCalendar(spec.id, era=spec.era, localisations=labels)
    if spec.kind == "convertdate":
        if spec.module not in MODULES:
            raise ValueError(f"No convertdate module '{spec.module}' for calendar '{spec.id}'")
        return ConvertdateCalendar(
            spec.id, MODULES[spec.module],
            months=spec.months, year_offset=spec.year_offset, era=spec.era, localisations=labels,
        )
    if spec.kind == "table":
        return NepaliCalendar(spec.id, era=spec.era, localisations=labels)
    raise TypeError(f"Unknown calendar kind: {spec.kind!r}")
