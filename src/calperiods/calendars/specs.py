"""
calperiods.calendars.specs
--------------------------
Pure data describing every built-in calendar. ``factory.make_calendar``
turns a spec into a live calendar object.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Literal, Optional

CalendarKind = Literal["gregorian", "convertdate", "table"]


@dataclass(frozen=True)
class CalendarSpec:
    id: str
    kind: CalendarKind
    labels: str                    # key into localisation.LOCALISATIONS
    era: Optional[str] = None
    months: int = 12
    module: Optional[str] = None   # convertdate module for kind="convertdate"
    year_offset: int = 0           # calendar year minus the module's year

    def tweak(self, **kwargs) -> "CalendarSpec":
        return replace(self, **kwargs)


# ============================================================
# STANDARD CALENDARS
# ============================================================

STANDARD_SPECS: Dict[str, CalendarSpec] = {
    "iso8601": CalendarSpec(id="iso8601", kind="gregorian", labels="gregorian", era="ce"),
    "gregory": CalendarSpec(id="gregory", kind="gregorian", labels="gregorian", era="ce"),
    "julian": CalendarSpec(id="julian", kind="convertdate", labels="julian", era="ce", module="julian"),
    "ethiopic": CalendarSpec(id="ethiopic", kind="convertdate", labels="ethiopic", era="am", months=13, module="coptic", year_offset=276),
    "coptic": CalendarSpec(id="coptic", kind="convertdate", labels="coptic", era="am", months=13, module="coptic"),
    "islamic": CalendarSpec(id="islamic", kind="convertdate", labels="islamic", era="ah", module="islamic"),
    "persian": CalendarSpec(id="persian", kind="convertdate", labels="persian", era="ap", module="persian"),
}

# ============================================================
# CUSTOM (TABLE-DRIVEN) CALENDARS
# ============================================================

CUSTOM_SPECS: Dict[str, CalendarSpec] = {
    "nepali": CalendarSpec(id="nepali", kind="table", labels="nepali", era="bs"),
}

ALL_SPECS: Dict[str, CalendarSpec] = {**STANDARD_SPECS, **CUSTOM_SPECS}

# Legacy and alternative identifiers, resolved before registry lookup.
CALENDAR_ALIASES: Dict[str, str] = {
    "iso": "iso8601",
    "gregorian": "gregory",
    "ethiopian": "ethiopic",
    "jalali": "persian",
    "islamic-civil": "islamic",
}
