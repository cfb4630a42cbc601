# tests/test_resolver.py

import pytest

from calperiods import (
    CalendarResolver,
    UnknownCalendar,
    UnsupportedLocaleForCalendar,
    build_registry,
    configure,
)
from calperiods.locales import valid_locale


@pytest.mark.parametrize("alias, canonical", [
    ("iso", "iso8601"),
    ("gregorian", "gregory"),
    ("ethiopian", "ethiopic"),
    ("jalali", "persian"),
    ("islamic-civil", "islamic"),
    ("nepali", "nepali"),
])
def test_aliases(resolver, alias, canonical):
    locale = "en" if canonical == "nepali" else None
    rc = resolver.resolve(alias, locale)
    assert rc.id == canonical
    assert rc.requested_id == alias
    assert rc.calendar.id == canonical


def test_unknown_calendar(resolver):
    with pytest.raises(UnknownCalendar) as excinfo:
        resolver.resolve("martian")
    assert "martian" in str(excinfo.value)
    # Stays catchable as a lookup failure
    assert isinstance(excinfo.value, KeyError)


@pytest.mark.parametrize("locale", [None, "fr", "en-US", "NE"])
def test_custom_calendar_needs_curated_locale(resolver, locale):
    with pytest.raises(UnsupportedLocaleForCalendar) as excinfo:
        resolver.resolve("nepali", locale)
    assert "en, ne" in str(excinfo.value)


def test_custom_calendar_accepts_curated_locales(resolver):
    for locale in ("en", "ne"):
        rc = resolver.resolve("nepali", locale)
        assert rc.is_custom is True
        assert rc.locale == locale


def test_standard_calendar_locale_normalised(resolver):
    assert resolver.resolve("gregory", "en_us").locale == "en-US"
    assert resolver.resolve("gregory", "am-ET").locale == "am-ET"
    assert resolver.resolve("iso8601", "fr").locale == "fr"


@pytest.mark.parametrize("locale", [None, "", "not a locale", "e"])
def test_standard_calendar_locale_fallback(resolver, locale):
    rc = resolver.resolve("ethiopic", locale)
    assert rc.locale == "en"
    assert rc.is_custom is False


def test_locale_fallback_follows_config(resolver):
    configure(default_locale="am")
    assert resolver.resolve("ethiopic", None).locale == "am"


def test_resolved_calendar_passthrough(resolver, iso):
    assert resolver.resolve(iso) is iso


def test_registries_are_independent():
    a = CalendarResolver(build_registry())
    b = CalendarResolver(build_registry())
    assert a.registry.get("iso8601") is not b.registry.get("iso8601")
    assert a.registry.list() == b.registry.list()


def test_registry_listing(resolver):
    names = resolver.registry.list()
    assert names == sorted(names)
    assert {"iso8601", "gregory", "julian", "ethiopic", "coptic", "islamic", "persian", "nepali"} <= set(names)
    assert resolver.registry.custom() == ["nepali"]
    assert "gregorian" not in resolver.registry


def test_registry_register_overwrite(resolver):
    registry = resolver.registry.copy()
    cal = registry.get("iso8601")
    with pytest.raises(KeyError):
        registry.register("iso8601", cal)
    registry.register("iso8601", cal, overwrite=True)
    registry.register("civil", cal)
    assert "civil" in registry
    assert "civil" not in resolver.registry


def test_custom_aliases():
    r = CalendarResolver(build_registry(), aliases={"bs": "nepali"})
    assert r.resolve("bs", "ne").id == "nepali"
    with pytest.raises(UnknownCalendar):
        r.resolve("gregorian")


def test_info(resolver):
    info = resolver.resolve("ethiopian", "am").info()
    assert info["id"] == "ethiopic"
    assert info["requested_id"] == "ethiopian"
    assert info["locale"] == "am"


@pytest.mark.parametrize("tag, expected", [
    ("en", "en"),
    ("EN_gb", "en-GB"),
    ("zh-hant-TW", "zh-Hant-TW"),
    ("es-419", "es-419"),
    ("english", None),
    ("", None),
    (None, None),
])
def test_valid_locale(tag, expected):
    assert valid_locale(tag) == expected


def test_registry_with_spec_variant():
    from calperiods.calendars.factory import make_calendar
    from calperiods.calendars.specs import STANDARD_SPECS

    registry = build_registry()
    registry.register("julian-os", make_calendar(STANDARD_SPECS["julian"].tweak(id="julian-os", era="os")))
    rc = CalendarResolver(registry).resolve("julian-os", "en")
    d = rc.calendar.date(2024, 1, 1)
    assert d.calendar == "julian-os"
    assert d.era == "os"
    assert rc.calendar.to_gregorian(d) == registry.get("julian").to_gregorian(registry.get("julian").date(2024, 1, 1))
