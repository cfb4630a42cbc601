from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

@dataclass(frozen=True)
class CalendarDate:
    """A (year, month, day) label in one calendar system.

    Build these through ``Calendar.date`` so the components are validated
    against the calendar's month lengths.
    """
    year: int
    month: int
    day: int
    calendar: str = "iso8601"
    era: Optional[str] = None

    def ymd(self) -> Tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def isoformat(self) -> str:
        sign = "-" if self.year < 0 else ""
        return f"{sign}{abs(self.year):04d}-{self.month:02d}-{self.day:02d}"

    def compact(self) -> str:
        sign = "-" if self.year < 0 else ""
        return f"{sign}{abs(self.year):04d}{self.month:02d}{self.day:02d}"

    def __str__(self) -> str:
        return self.isoformat()

@dataclass(frozen=True)
class CalendarLocale:
    """Curated labels for one calendar in one locale."""
    month_names: Tuple[str, ...]
    day_names_short: Tuple[str, ...] = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
    week_label: str = "Week"
    numerals: Optional[str] = None  # ten glyphs for 0..9

    def number(self, n: int, width: int = 0) -> str:
        s = str(n).zfill(width) if n >= 0 else "-" + str(-n).zfill(width)
        if self.numerals is None:
            return s
        return s.translate(str.maketrans("0123456789", self.numerals))
