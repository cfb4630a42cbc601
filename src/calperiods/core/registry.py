from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List

from .calendar import Calendar
from .errors import UnknownCalendar

@dataclass
class CalendarRegistry:
    """Calendars available to one resolver, keyed by canonical id."""
    _calendars: Dict[str, Calendar] = field(default_factory=dict)

    def get(self, name: str) -> Calendar:
        if name not in self._calendars:
            raise UnknownCalendar(f"Unknown calendar '{name}'. Available: {sorted(self._calendars)}")
        return self._calendars[name]

    def __contains__(self, name: object) -> bool:
        return name in self._calendars

    def list(self) -> List[str]:
        return sorted(self._calendars.keys())

    def custom(self) -> List[str]:
        return sorted(k for k, cal in self._calendars.items() if cal.custom)

    def register(self, name: str, calendar: Calendar, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._calendars):
            raise KeyError(f"Calendar '{name}' already exists. Use overwrite=True to replace.")
        self._calendars[name] = calendar

    def copy(self) -> "CalendarRegistry":
        return CalendarRegistry(dict(self._calendars))
