"""Logging setup for the API and the CLI scripts. Structured fields go through `extra=`."""

import logging
import sys
from typing import Any

from textchunker.config.settings import get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

# Chatty at INFO; only their warnings are worth seeing
QUIET_LOGGERS = ("urllib3", "httpx", "botocore", "boto3")


def configure_logging(level_name: str | None = None) -> None:
    """
    Send all records to stdout in one line format. The level comes from
    level_name, else settings.log_level; unknown names mean INFO.
    """
    name = (level_name or get_settings().log_level).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        level = logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    for quiet in QUIET_LOGGERS:
        logging.getLogger(quiet).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_extra(extra: dict[str, Any]) -> dict[str, Any]:
    """Keyword arguments for logger calls carrying structured fields: logger.debug(msg, **log_extra({...}))."""
    return {"extra": extra}
