"""Logging configuration for linkinspect using loguru.

Replaces loguru's default handler with a stderr handler whose level is read from the environment and routes records
emitted through the standard ``logging`` module into loguru.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING

from loguru import logger

from linkinspect.config import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from loguru import Logger

LOG_FORMAT = "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <cyan>{extra[name]}</cyan> | {message}"


class InterceptHandler(logging.Handler):
    """Forward standard library log records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find the caller outside the logging module so loguru reports the right location
        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def get_log_level() -> str:
    """Return the log level configured through the environment.

    Returns
    -------
    str
        The upper-cased value of ``LINKINSPECT_LOG_LEVEL``, or ``WARNING`` when unset.

    """
    return os.getenv(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).upper()


def configure_logging() -> None:
    """Install the linkinspect handler on loguru and intercept standard ``logging``."""
    logger.remove()
    logger.configure(extra={"name": "linkinspect"})
    logger.add(sys.stderr, level=get_log_level(), format=LOG_FORMAT, colorize=None)
    logging.basicConfig(handlers=[InterceptHandler()], level=0)


def get_logger(name: str) -> Logger:
    """Return a loguru logger bound to ``name``.

    Parameters
    ----------
    name : str
        Usually the ``__name__`` of the calling module.

    Returns
    -------
    Logger
        The bound logger.

    """
    return logger.bind(name=name)


configure_logging()
