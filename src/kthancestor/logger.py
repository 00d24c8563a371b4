"""Logging configuration for kthancestor."""

import logging
import os
import sys
from logging.config import dictConfig
from typing import Union

_FORMAT = "%(levelname)s %(asctime)s [%(name)s] %(message)s"
_DATE_FORMAT = "%m-%d %H:%M:%S"
_ROOT_LOGGER = "kthancestor"


def _get_default_logging_level() -> str:
    return os.getenv("KTHANCESTOR_LOGGING_LEVEL", "WARNING").upper()


def _should_use_color() -> bool:
    if os.getenv("NO_COLOR"):
        return False

    color_setting = os.getenv("KTHANCESTOR_LOGGING_COLOR", "auto")
    if color_setting == "0" or color_setting.lower() == "false":
        return False
    if color_setting == "1" or color_setting.lower() == "true":
        return True

    return hasattr(sys.stderr, "isatty") and sys.stderr.isatty()


class ColoredFormatter(logging.Formatter):
    """Level-coloured formatter for terminals."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[1;31m",
    }
    RESET = "\033[0m"

    def format(self, record):
        # Colour a copy so other handlers see the plain level name
        record = logging.makeLogRecord(record.__dict__)
        log_color = self.COLORS.get(record.levelname, self.RESET)
        record.levelname = f"{log_color}{record.levelname}{self.RESET}"
        return super().format(record)


DEFAULT_LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": _FORMAT,
            "datefmt": _DATE_FORMAT,
        },
        "colored": {
            "()": ColoredFormatter,
            "format": _FORMAT,
            "datefmt": _DATE_FORMAT,
        },
    },
    "handlers": {
        "default": {
            "class": "logging.StreamHandler",
            "formatter": "colored" if _should_use_color() else "default",
            "level": _get_default_logging_level(),
            "stream": "ext://sys.stderr",
        },
    },
    "loggers": {
        _ROOT_LOGGER: {
            "handlers": ["default"],
            "level": _get_default_logging_level(),
            "propagate": False,
        },
    },
}


def _configure_root_logger() -> None:
    dictConfig(DEFAULT_LOGGING_CONFIG)


def init_logger(name: str) -> logging.Logger:
    """Return the logger for `name` (typically `__name__`)."""
    return logging.getLogger(name)


def set_logging_level(level: Union[str, int]) -> None:
    """Set the level of the kthancestor logger and its handlers.

    Args:
        level: Level name ("debug", "INFO", ...) or numeric level.
    """
    if isinstance(level, str):
        level = level.upper()
    logger = logging.getLogger(_ROOT_LOGGER)
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)


def disable_logging() -> None:
    logging.getLogger(_ROOT_LOGGER).disabled = True


def enable_logging() -> None:
    logging.getLogger(_ROOT_LOGGER).disabled = False


_configure_root_logger()
