"""Scoped capture handles used by tests to inspect emitted log events."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from types import TracebackType
from typing import Callable, List, Optional, Type

from caplogger import buffer
from caplogger.event import CapturedEvent
from caplogger.registration import ensure_registered

__all__ = ["CapLog", "capture_logs", "start"]


class CapLog:
    """Handle onto the calling thread's captured events.

    Creating a handle installs the capturing sink for the process if that has
    not happened yet. Closing it, which leaving a ``with`` block always does,
    clears the thread's buffer so nothing leaks into the next test run on the
    same thread::

        with CapLog() as caplog:
            logging.getLogger("app").error("boom")
            assert caplog.find(lambda e: e.level == Level.ERROR)

    Every live handle on a thread sees the same buffer; clearing through one
    clears it for all of them.

    The root logger and the global ``logging.disable`` threshold are opened
    fully, but a logger the code under test gives its own level still drops
    records below that level before they reach the sink. Reset such levels
    (e.g. ``logger.setLevel(logging.NOTSET)``) to capture everything.
    """

    def __init__(self) -> None:
        ensure_registered()

    def get_all(self) -> List[CapturedEvent]:
        """Return every event captured on this thread, oldest first."""

        return buffer.snapshot()

    def find(self, predicate: Callable[[CapturedEvent], bool]) -> List[CapturedEvent]:
        """Return the captured events for which ``predicate`` holds, oldest first."""

        return buffer.select(predicate)

    def clear(self) -> None:
        """Discard every event captured on this thread."""

        buffer.clear()

    def close(self) -> None:
        self.clear()

    def __enter__(self) -> "CapLog":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        self.close()

    def __copy__(self) -> "CapLog":
        raise TypeError("CapLog handles cannot be copied")

    def __deepcopy__(self, memo: dict) -> "CapLog":
        raise TypeError("CapLog handles cannot be copied")

    def __repr__(self) -> str:
        return f"<CapLog events={buffer.size()}>"


def start() -> CapLog:
    """Begin capturing on the calling thread and return the handle."""

    return CapLog()


@contextmanager
def capture_logs() -> Iterator[CapLog]:
    """Yield a :class:`CapLog` that is closed when the block exits."""

    handle = CapLog()
    try:
        yield handle
    finally:
        handle.close()
