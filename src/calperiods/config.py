"""Module-level configuration for calperiods defaults."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Optional


@dataclass
class PeriodsConfig:
    """Defaults applied when API callers leave an option as None."""

    default_calendar: str = "iso8601"
    default_locale: str = "en"
    default_starting_day: int = 1  # 1 = Monday
    default_timezone: str = "UTC"


# Module-level singleton
_config: Optional[PeriodsConfig] = None
_config_lock = threading.Lock()


def get_config() -> PeriodsConfig:
    """Get the global configuration singleton."""
    global _config
    if _config is None:
        with _config_lock:
            if _config is None:
                _config = PeriodsConfig()
    return _config


def configure(
    default_calendar: Optional[str] = None,
    default_locale: Optional[str] = None,
    default_starting_day: Optional[int] = None,
    default_timezone: Optional[str] = None,
) -> None:
    """Configure package defaults.

    Args:
        default_calendar: Calendar identifier used when none is passed.
        default_locale: Locale used for labels when none is passed.
        default_starting_day: Weekday weekly periods start on (1=Mon..7=Sun).
        default_timezone: IANA timezone used to compute "today".

    Example:
        from calperiods import configure

        configure(default_calendar="nepali", default_locale="ne")
    """
    if default_starting_day is not None and not (1 <= default_starting_day <= 7):
        raise ValueError("default_starting_day must be in 1..7")
    config = get_config()
    with _config_lock:
        if default_calendar is not None:
            config.default_calendar = default_calendar
        if default_locale is not None:
            config.default_locale = default_locale
        if default_starting_day is not None:
            config.default_starting_day = default_starting_day
        if default_timezone is not None:
            config.default_timezone = default_timezone


def reset_config() -> None:
    """Reset configuration to defaults. Useful for testing."""
    global _config
    with _config_lock:
        _config = PeriodsConfig()
