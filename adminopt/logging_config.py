"""Structured logging for the administration tool.

User-facing output is plain ``print`` to stdout; diagnostics go through
structlog, rendered onto stdlib logging which writes to stderr. structlog is
configured at import so no event can fall back to structlog's stdout printer.
"""

import logging
import sys

import structlog

__all__ = ["configure_logging", "get_logger"]


def _configure_structlog(json: bool = False) -> None:
    renderer = (
        structlog.processors.JSONRenderer()
        if json
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def configure_logging(level: str = "WARNING", json: bool = False) -> None:
    """Configure stdlib logging and structlog.

    Args:
        level: stdlib level name, e.g. ``"INFO"``.
        json: render events as JSON lines instead of the console format.
    """
    logging.basicConfig(
        stream=sys.stderr,
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(message)s",
        force=True,
    )
    _configure_structlog(json)


def get_logger(name: str):
    return structlog.get_logger(name)


_configure_structlog()
