"""Per-thread capture of log events for use in tests.

Typical use::

    from caplogger import CapLog, Level

    def test_warns_on_retry():
        with CapLog() as caplog:
            run_with_retry()
            warnings = caplog.find(lambda event: event.level == Level.WARN)
            assert [event.message for event in warnings] == ["retrying"]

See :class:`caplogger.capture.CapLog` for the query interface.
"""

from __future__ import annotations

from .capture import CapLog, capture_logs, start
from .errors import CaptureError, RegistrationError
from .event import CapturedEvent
from .levels import TRACE, Level, trace
from .registration import ensure_registered, is_registered

__all__ = [
    "CapLog",
    "CaptureError",
    "CapturedEvent",
    "Level",
    "RegistrationError",
    "TRACE",
    "capture_logs",
    "ensure_registered",
    "is_registered",
    "start",
    "trace",
]
