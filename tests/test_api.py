# tests/test_api.py

import io

import pytest
from datetime import date, timedelta

import calperiods
from calperiods import (
    UnsupportedLocaleForCalendar,
    configure,
    get_config,
    reset_config,
)
from calperiods.logging import configure_logging


def test_defaults_use_iso_calendar():
    periods = calperiods.generate_periods(2024, "QUARTERLY")
    assert [p.id for p in periods] == ["2024Q1", "2024Q2", "2024Q3", "2024Q4"]
    assert periods[0].start_date.calendar == "iso8601"


def test_calendar_by_alias():
    (period,) = calperiods.generate_periods(2016, "YEARLY", calendar="ethiopian")
    assert period.start_date.calendar == "ethiopic"
    assert calperiods.convert_date(date(2024, 1, 14), "julian").ymd() == (2024, 1, 1)


def test_configured_defaults():
    configure(default_calendar="nepali", default_locale="ne")
    periods = calperiods.generate_periods(2080, "MONTHLY")
    assert periods[0].display_name == "बैशाख २०८०"
    assert calperiods.resolve_calendar().id == "nepali"


def test_configured_starting_day():
    configure(default_starting_day=7)
    assert calperiods.locate_period("2023-12-31", "WEEKLY").id == "2024W01"
    # An explicit argument wins over the configured default
    assert calperiods.locate_period("2023-12-31", "WEEKLY", starting_day=1).id == "2023W52"


def test_custom_calendar_locale_error():
    with pytest.raises(UnsupportedLocaleForCalendar):
        calperiods.generate_periods(2080, "MONTHLY", calendar="nepali", locale="fr")


def test_previous_periods_infers_calendar():
    period = calperiods.locate_period("2080-01-15", "MONTHLY", calendar="nepali")
    result = calperiods.previous_periods(period, 2)
    assert [p.id for p in result] == ["207911", "207912"]
    assert result[0].start_date.calendar == "nepali"


def test_resolved_calendar_argument(resolver):
    rc = resolver.resolve("nepali", "ne")
    period = calperiods.locate_period(date(2023, 4, 14), "YEARLY", calendar=rc)
    assert period.id == "2080"
    assert period.display_name == "२०८०"


def test_explicit_resolver(resolver):
    assert calperiods.list_calendars(resolver=resolver) == resolver.registry.list()
    assert calperiods.calendar_info("gregorian", resolver=resolver)["id"] == "gregory"


def test_list_calendars_and_info():
    names = calperiods.list_calendars()
    assert "nepali" in names and "iso8601" in names
    info = calperiods.calendar_info("nepali")
    assert info["custom"] is True
    assert info["locales"] == ["en", "ne"]
    assert info["era"] == "bs"


def test_today():
    d = calperiods.today(timezone="UTC")
    assert d.calendar == "iso8601"
    # UTC and local dates differ by at most a day
    assert abs(date.fromisoformat(d.isoformat()) - date.today()) <= timedelta(days=1)

    bs = calperiods.today("nepali")
    assert bs.calendar == "nepali"
    assert bs.era == "bs"


def test_config_singleton():
    cfg = get_config()
    assert cfg is get_config()
    assert cfg.default_calendar == "iso8601"
    assert cfg.default_locale == "en"
    assert cfg.default_starting_day == 1
    assert cfg.default_timezone == "UTC"
    configure(default_timezone="Asia/Kathmandu")
    assert get_config().default_timezone == "Asia/Kathmandu"
    reset_config()
    assert get_config().default_timezone == "UTC"


@pytest.mark.parametrize("day", [0, 8])
def test_configure_rejects_bad_starting_day(day):
    with pytest.raises(ValueError):
        configure(default_starting_day=day)


def test_debug_logging(capsys):
    configure_logging(level="DEBUG")
    calperiods.generate_periods(2024, "MONTHLY", locale="xx_not_valid")
    err = capsys.readouterr().err
    assert "calendar_resolved" in err
    assert "locale_fallback" in err
    assert "periods_generated" in err


def test_json_logging(capsys):
    configure_logging(level="DEBUG", json_output=True)
    period = calperiods.locate_period("2024-01-01", "WEEKLY")
    calperiods.previous_periods(period, 2)
    err = capsys.readouterr().err
    assert '"event": "previous_periods"' in err
    assert '"elapsed_ms"' in err


def test_warning_level_is_quiet(capsys):
    configure_logging(level="WARNING")
    calperiods.generate_periods(2024, "MONTHLY")
    assert capsys.readouterr().err == ""


def test_logging_stream_and_level_validation():
    buf = io.StringIO()
    configure_logging(level="info", stream=buf)
    calperiods.generate_periods(2024, "MONTHLY")
    assert buf.getvalue() == ""
    configure_logging(level="debug", stream=buf)
    calperiods.generate_periods(2024, "MONTHLY")
    assert "periods_generated" in buf.getvalue()
    with pytest.raises(ValueError):
        configure_logging(level="verbose")
