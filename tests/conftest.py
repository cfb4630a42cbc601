"""Pytest configuration and shared fixtures."""

import pytest
import structlog

from calperiods import CalendarResolver, build_registry, reset_config


@pytest.fixture(autouse=True)
def isolated_defaults():
    """Each test starts from default configuration and unconfigured logging."""
    reset_config()
    structlog.reset_defaults()
    yield
    reset_config()
    structlog.reset_defaults()


@pytest.fixture
def resolver():
    return CalendarResolver(build_registry())


@pytest.fixture
def iso(resolver):
    return resolver.resolve("iso8601", "en")


@pytest.fixture
def nepali(resolver):
    return resolver.resolve("nepali", "en")
