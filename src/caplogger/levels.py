"""Severity levels understood by the capture facility."""

from __future__ import annotations

import logging
import sys
from enum import IntEnum
from typing import Any, Mapping

__all__ = ["Level", "TRACE", "trace"]

TRACE = 5

logging.addLevelName(TRACE, "TRACE")


class Level(IntEnum):
    """Ordered severity of a captured event, valued as stdlib level numbers."""

    TRACE = TRACE
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    WARNING = logging.WARNING
    ERROR = logging.ERROR

    @classmethod
    def from_levelno(cls, levelno: int) -> "Level":
        """Return the smallest level at or above ``levelno``.

        Anything more severe than ``ERROR`` (``CRITICAL`` included) is reported
        as ``ERROR``.
        """

        for level in cls:
            if levelno <= level:
                return level
        return cls.ERROR


def trace(
    logger: logging.Logger,
    msg: Any,
    *args: Any,
    exc_info: Any = None,
    extra: Mapping[str, Any] | None = None,
) -> None:
    """Emit ``msg`` on ``logger`` at ``TRACE``, attributed to the caller.

    The caller's frame is resolved here rather than by ``Logger.findCaller``,
    which some logger classes (structlog's stdlib factory installs one)
    implement without honouring ``stacklevel``.
    """

    if not logger.isEnabledFor(TRACE):
        return
    if isinstance(exc_info, BaseException):
        exc_info = (type(exc_info), exc_info, exc_info.__traceback__)
    elif exc_info and not isinstance(exc_info, tuple):
        exc_info = sys.exc_info()

    frame = sys._getframe(1)
    record = logger.makeRecord(
        logger.name,
        TRACE,
        frame.f_code.co_filename,
        frame.f_lineno,
        msg,
        args,
        exc_info,
        frame.f_code.co_name,
        extra,
    )
    logger.handle(record)
