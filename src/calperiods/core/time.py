from __future__ import annotations
from datetime import date, datetime
from typing import Optional, Tuple
from zoneinfo import ZoneInfo


def gregorian_to_jdn(y: int, m: int, day: int) -> int:
    """Convert a proleptic Gregorian (year, month, day) to Julian Day Number (JDN)."""
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    jdn = day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045
    return jdn

def jdn_to_gregorian(jdn: int) -> Tuple[int, int, int]:
    """Fliegel-Van Flandern inverse of gregorian_to_jdn."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day

def to_jdn(d: date) -> int:
    return gregorian_to_jdn(d.year, d.month, d.day)

def from_jdn(jdn: int) -> date:
    return date(*jdn_to_gregorian(jdn))

def iso_weekday(jdn: int) -> int:
    """ISO weekday of a JDN: 1=Mon..7=Sun (JDN 0 was a Monday)."""
    return jdn % 7 + 1

def civil_today(timezone: Optional[str] = None) -> date:
    """Current civil date in an IANA timezone (UTC when omitted)."""
    tz = ZoneInfo(timezone or "UTC")
    return datetime.now(tz).date()
