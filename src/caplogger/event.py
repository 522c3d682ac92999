"""Immutable snapshot of a single captured log emission."""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field

from caplogger.levels import Level

__all__ = ["CapturedEvent", "UNKNOWN_FILE"]

# What ``logging.Logger.findCaller`` reports when no caller frame is found.
UNKNOWN_FILE = "(unknown file)"


class CapturedEvent(BaseModel):
    """One log emission as seen by the capturing sink.

    Equality is structural over all six fields.
    """

    model_config = ConfigDict(frozen=True)

    level: Level
    target: str
    message: str
    module_path: str | None = None
    file: str | None = None
    line: int | None = Field(default=None, ge=0)

    @classmethod
    def from_record(cls, record: logging.LogRecord) -> "CapturedEvent":
        """
        Build an owned event from a transient ``logging.LogRecord``.

        The message is interpolated with the record's arguments. Source-location
        fields are ``None`` when the facade could not resolve the caller, which
        it signals with ``UNKNOWN_FILE`` and a zero line number.

        Raises:
            Exception: Whatever interpolating the record's message raises, e.g.
                ``TypeError`` or ``KeyError`` for mismatched arguments, or an
                error from an argument's ``__str__``.
        """

        located = bool(record.pathname) and record.pathname != UNKNOWN_FILE
        return cls(
            level=Level.from_levelno(record.levelno),
            target=record.name,
            message=record.getMessage(),
            module_path=record.module if located else None,
            file=record.pathname if located else None,
            line=record.lineno if located and record.lineno else None,
        )
