"""
Structured logging for reducer-store.

Library modules log through structlog onto stdlib loggers under
``reducer_store``. That logger carries a NullHandler, so nothing is printed
until the application calls ``configure_logging`` (or installs its own
handlers).

Environment Variables:
    REDUCER_STORE_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR (default: INFO)
    REDUCER_STORE_LOG_FORMAT: json, console (default: console)

Usage:
    from reducer_store.log import configure_logging, get_logger

    configure_logging()
    log = get_logger(__name__)
    log.info("store_created", store="cart")
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog

LEVEL_ENV = "REDUCER_STORE_LOG_LEVEL"
FORMAT_ENV = "REDUCER_STORE_LOG_FORMAT"

ROOT_LOGGER = "reducer_store"

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

logging.getLogger(ROOT_LOGGER).addHandler(logging.NullHandler())


def configure_logging(level: str | None = None, fmt: str | None = None) -> None:
    """
    Configure structlog and the root stdlib logger for the process.

    Events are rendered by structlog and written to stdout by a single
    root handler. Existing root handlers are replaced.

    Args:
        level: Log level name. Falls back to REDUCER_STORE_LOG_LEVEL, then INFO.
        fmt: ``"json"`` or ``"console"``. Falls back to REDUCER_STORE_LOG_FORMAT.
    """
    level_name = (level or os.getenv(LEVEL_ENV, "INFO")).upper()
    fmt_name = (fmt or os.getenv(FORMAT_ENV, "console")).lower()
    log_level = _LEVELS.get(level_name, logging.INFO)

    renderer: Any
    if fmt_name == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))

    root_logger = logging.getLogger()
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)


def get_logger(name: str = ROOT_LOGGER) -> Any:
    """
    Get a structlog logger writing to the stdlib logger ``name``.

    The returned proxy resolves structlog's configuration on every call, so
    loggers created at import time follow a later ``configure_logging``.
    """
    return structlog.wrap_logger(logging.getLogger(name))
