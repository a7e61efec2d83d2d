"""Logging setup for pair.

Diagnostics go to stderr so they never mix with notices or tables on stdout.
Quiet by default; ``--debug`` (or ``PAIR_DEBUG``) turns on the debug stream.
"""
from __future__ import annotations

import logging
import sys

import structlog


def configure_logging(debug: bool = False, colors: bool = True) -> None:
    """Call once at process startup to initialise structlog + stdlib logging."""
    level = logging.DEBUG if debug else logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    root_logger.addHandler(handler)

    is_tty = hasattr(sys.stderr, "isatty") and sys.stderr.isatty()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(colors=colors and is_tty),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str = __name__) -> structlog.BoundLogger:
    """Return a bound structlog logger for *name*."""
    return structlog.get_logger(name)


# Stay quiet until main() configures logging (library use, tests)
if not structlog.is_configured():
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )
