"""Per-thread storage for captured events.

Every thread owns an independent, insertion-ordered list that is created on
first access. Isolation comes from ``threading.local`` rather than from
locking, so nothing here ever reads or writes another thread's events.
"""

from __future__ import annotations

import threading
from typing import Callable, List

from caplogger.event import CapturedEvent

__all__ = ["append", "clear", "select", "size", "snapshot"]

_thread_local = threading.local()


def _events() -> List[CapturedEvent]:
    events = getattr(_thread_local, "events", None)
    if events is None:
        events = []
        _thread_local.events = events
    return events


def append(event: CapturedEvent) -> None:
    """Record ``event`` for the active thread."""

    _events().append(event)


def snapshot() -> List[CapturedEvent]:
    """Return a copy of the active thread's events in emission order."""

    return list(_events())


def select(predicate: Callable[[CapturedEvent], bool]) -> List[CapturedEvent]:
    """Return the active thread's events matching ``predicate``, order preserved."""

    return [event for event in _events() if predicate(event)]


def clear() -> None:
    _events().clear()


def size() -> int:
    return len(_events())
