"""structlog configuration for fieldcheck.

Module loggers wrap stdlib loggers under the ``fieldcheck`` namespace, which
carries a NullHandler: nothing is written anywhere until the host application
configures logging or calls ``configure_logging``.

Console renderer in debug mode, JSON lines otherwise, both to stderr.
"""

import logging
import sys
from typing import Optional

import structlog

from fieldcheck.config import get_settings

ROOT_LOGGER_NAME = "fieldcheck"


def get_logger(name: str = ROOT_LOGGER_NAME):
    """structlog logger bound to the stdlib logger ``name``."""
    return structlog.wrap_logger(logging.getLogger(name))


def configure_logging(debug: Optional[bool] = None, level: Optional[str] = None) -> None:
    """Install the structlog processor chain and a stderr handler.

    Args:
        debug: Use the console renderer. Defaults to settings.DEBUG.
        level: Minimum level name ("debug", "info", ...). Defaults to settings.LOG_LEVEL.
    """
    settings = get_settings()
    debug = settings.DEBUG if debug is None else debug
    level_name = (level or settings.LOG_LEVEL).upper()
    min_level = logging.getLevelNamesMapping().get(level_name, logging.INFO)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()) if debug
            else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(min_level),
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))

    fc_logger = logging.getLogger(ROOT_LOGGER_NAME)
    fc_logger.handlers.clear()
    fc_logger.addHandler(handler)
    fc_logger.setLevel(min_level)
    fc_logger.propagate = False
