"""Logging for calperiods.

Library modules log at debug through ``get_logger(__name__)``. Applications
(and the ``calperiods`` CLI) pick the level and format with
``configure_logging``, which writes to stderr so that period listings on
stdout stay machine-readable.
"""

import logging
import sys
import time
from contextlib import contextmanager
from typing import Generator, Optional, TextIO

import structlog
from structlog._config import BoundLoggerLazyProxy

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a structlog logger tagged with the emitting module."""
    if name is None:
        return structlog.get_logger()
    # Initial values keep the proxy lazy, so later configure_logging calls apply.
    # Same proxy structlog.get_logger builds; ``logger`` collides with wrap_logger's parameter.
    return BoundLoggerLazyProxy(None, initial_values={"logger": name})


def _level(level: str) -> int:
    name = level.upper()
    if name not in LEVELS:
        raise ValueError(f"Unknown log level {level!r}; expected one of {', '.join(LEVELS)}")
    return getattr(logging, name)


def configure_logging(
    level: str = "WARNING",
    json_output: bool = False,
    stream: Optional[TextIO] = None,
) -> None:
    """Route calperiods events to ``stream`` (stderr by default).

    Args:
        level: Log level ("DEBUG", "INFO", "WARNING", "ERROR")
        json_output: True for one JSON object per line, False for console rendering
        stream: File-like object to write to
    """
    numeric = _level(level)
    processors = [
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer(colors=False),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream or sys.stderr),
        # Tests and the CLI reconfigure per run; module-level loggers must follow.
        cache_logger_on_first_use=False,
    )


@contextmanager
def timed_block(
    logger: structlog.BoundLogger,
    event: str,
    level: str = "debug",
    **fields,
) -> Generator[None, None, None]:
    """Log ``event`` with its wall time once the block exits."""
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000
        getattr(logger, level)(event, elapsed_ms=round(elapsed_ms, 2), **fields)
