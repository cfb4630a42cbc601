"""Locale identifier validation (BCP-47 shaped tags only, no CLDR lookup)."""

from __future__ import annotations

import re
from typing import Optional

_TAG_RE = re.compile(r"^([A-Za-z]{2,3})(?:[-_]([A-Za-z]{4}))?(?:[-_]([A-Za-z]{2}|\d{3}))?$")


def valid_locale(locale: Optional[str]) -> Optional[str]:
    """Normalise a locale tag (``en_us`` -> ``en-US``, ``ne`` -> ``ne``), or None if malformed."""
    if not locale or not isinstance(locale, str):
        return None
    m = _TAG_RE.match(locale.strip())
    if m is None:
        return None
    lang, script, region = m.groups()
    parts = [lang.lower()]
    if script:
        parts.append(script.title())
    if region:
        parts.append(region.upper())
    return "-".join(parts)
