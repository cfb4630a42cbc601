"""
calperiods.resolver
-------------------
Maps a requested calendar identifier (legacy aliases included) to a live
calendar and a usable locale. Custom calendars label dates from curated
tables, so their locale is validated here, before any arithmetic runs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union

from .calendars.specs import CALENDAR_ALIASES
from .config import get_config
from .core.calendar import Calendar
from .core.errors import UnsupportedLocaleForCalendar
from .core.registry import CalendarRegistry
from .locales import valid_locale
from .logging import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class ResolvedCalendar:
    id: str
    requested_id: str
    calendar: Calendar
    locale: str
    is_custom: bool

    def info(self) -> Dict[str, Any]:
        out = self.calendar.info()
        out.update({"requested_id": self.requested_id, "locale": self.locale})
        return out


class CalendarResolver:
    def __init__(self, registry: CalendarRegistry, aliases: Optional[Mapping[str, str]] = None):
        self.registry = registry
        self.aliases = dict(CALENDAR_ALIASES if aliases is None else aliases)

    def canonical_id(self, calendar_id: str) -> str:
        return self.aliases.get(calendar_id, calendar_id)

    def resolve(
        self,
        calendar_id: Union[str, ResolvedCalendar],
        locale: Optional[str] = None,
    ) -> ResolvedCalendar:
        if isinstance(calendar_id, ResolvedCalendar):
            return calendar_id

        cid = self.canonical_id(calendar_id)
        cal = self.registry.get(cid)

        if cal.custom:
            allowed = sorted(cal.locales)
            if locale not in cal.locales:
                raise UnsupportedLocaleForCalendar(
                    f'For the custom calendar "{cid}", only specific locales are allowed: {", ".join(allowed)}'
                    f" (got {locale!r})"
                )
            resolved_locale = locale
        else:
            resolved_locale = valid_locale(locale)
            if resolved_locale is None:
                resolved_locale = get_config().default_locale
                if locale is not None:
                    log.debug("locale_fallback", calendar=cid, requested=locale, locale=resolved_locale)

        log.debug("calendar_resolved", requested=calendar_id, calendar=cid, locale=resolved_locale)
        return ResolvedCalendar(
            id=cid,
            requested_id=calendar_id,
            calendar=cal,
            locale=resolved_locale,
            is_custom=cal.custom,
        )
