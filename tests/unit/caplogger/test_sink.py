"""Tests for the capturing logging handler."""

from __future__ import annotations

import logging

import pytest

from caplogger import buffer
from caplogger.levels import TRACE, Level
from caplogger.sink import SINK, CapturingHandler


def _record(level: int = logging.INFO, msg: str = "payload", args: tuple = ()) -> logging.LogRecord:
    return logging.LogRecord(
        name="tests.sink",
        level=level,
        pathname=__file__,
        lineno=10,
        msg=msg,
        args=args,
        exc_info=None,
    )


def test_sink_is_interested_in_every_level() -> None:
    handler = CapturingHandler()

    for level in (TRACE, logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR):
        assert handler.is_interested(_record(level=level))


def test_handle_appends_to_the_calling_threads_buffer() -> None:
    handler = CapturingHandler()

    assert handler.handle(_record(msg="%s=%d", args=("retries", 3)))

    (event,) = buffer.snapshot()
    assert event.message == "retries=3"
    assert event.level is Level.INFO
    assert event.target == "tests.sink"


def test_handle_ignores_attached_filters() -> None:
    handler = CapturingHandler()
    handler.addFilter(lambda record: False)

    handler.handle(_record())

    assert buffer.size() == 1


def test_interpolation_failure_is_reported_not_raised(monkeypatch) -> None:
    handler = CapturingHandler()
    reported: list[logging.LogRecord] = []
    monkeypatch.setattr(handler, "handleError", reported.append)

    record = _record(msg="%d widgets", args=("some",))
    handler.handle(record)

    assert reported == [record]
    assert buffer.size() == 0


def test_flush_is_a_noop() -> None:
    handler = CapturingHandler()
    handler.handle(_record())

    handler.flush()

    assert buffer.size() == 1


def test_logger_with_sink_captures_below_default_threshold() -> None:
    isolated = logging.Logger("tests.sink.isolated")
    isolated.addHandler(CapturingHandler())

    isolated.log(TRACE, "lowest")
    isolated.debug("low")

    assert [event.level for event in buffer.snapshot()] == [Level.TRACE, Level.DEBUG]


def test_process_sink_is_exclusive() -> None:
    assert isinstance(SINK, CapturingHandler)
    assert SINK.exclusive is True


class _Unprintable:
    def __str__(self) -> str:
        raise RuntimeError("no string form")


def test_mapping_and_str_failures_are_reported_not_raised(monkeypatch) -> None:
    handler = CapturingHandler()
    reported: list[logging.LogRecord] = []
    monkeypatch.setattr(handler, "handleError", reported.append)
    missing_key = _record(msg="%(user)s logged in", args=({"other": 1},))
    broken_str = _record(msg="value is %s", args=(_Unprintable(),))

    handler.handle(missing_key)
    handler.handle(broken_str)

    assert reported == [missing_key, broken_str]
    assert buffer.size() == 0


def test_storage_failure_propagates(monkeypatch) -> None:
    handler = CapturingHandler()

    def _unreachable(event) -> None:
        raise RuntimeError("thread storage gone")

    monkeypatch.setattr(buffer, "append", _unreachable)

    with pytest.raises(RuntimeError, match="thread storage gone"):
        handler.handle(_record())


def test_logger_with_its_own_level_still_filters_before_the_sink(caplog_handle) -> None:
    noisy = logging.getLogger("caplogger.tests.sink.own_level")
    noisy.setLevel(logging.WARNING)
    try:
        noisy.debug("dropped by the logger")
        noisy.warning("kept")
    finally:
        noisy.setLevel(logging.NOTSET)

    assert [event.message for event in caplog_handle.get_all()] == ["kept"]
