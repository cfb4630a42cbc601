from __future__ import annotations
from calperiods.core.registry import CalendarRegistry
from calperiods.calendars.specs import ALL_SPECS
from calperiods.calendars.factory import make_calendar

def build_registry() -> CalendarRegistry:
    calendars = {}
    for name, spec in ALL_SPECS.items():
        calendars[name] = make_calendar(spec)
    return CalendarRegistry(calendars)
