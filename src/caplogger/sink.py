"""The logging handler that feeds captured events into per-thread buffers."""

from __future__ import annotations

import logging

from caplogger import buffer
from caplogger.event import CapturedEvent

__all__ = ["CapturingHandler", "SINK"]


class CapturingHandler(logging.Handler):
    """Handler that records every record it receives for the emitting thread.

    It reports interest in every record regardless of level or attached
    filters, so tests can assert on emissions a production configuration would
    drop. Nothing is written to any real destination.
    """

    #: Marks a capture sink; two of them on one logger is a conflict.
    exclusive = True

    def __init__(self) -> None:
        super().__init__(level=logging.NOTSET)

    def is_interested(self, record: logging.LogRecord) -> bool:
        return True

    def handle(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        # The handler lock is skipped: emit only touches the calling thread's buffer.
        if not self.is_interested(record):
            return False
        self.emit(record)
        return True

    def emit(self, record: logging.LogRecord) -> None:
        """Convert ``record`` and append it to the calling thread's buffer.

        Any failure building the event, from a bad format string to an
        argument whose ``__str__`` raises, goes through ``handleError`` like any
        stdlib handler. Failures reaching the buffer itself propagate to the
        emitting call.
        """

        try:
            event = CapturedEvent.from_record(record)
        except Exception:
            self.handleError(record)
            return
        buffer.append(event)

    def flush(self) -> None:
        """Nothing to flush; events never leave the process."""


SINK = CapturingHandler()
