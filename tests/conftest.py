from __future__ import annotations

import sys
from pathlib import Path

import pytest
import structlog


ROOT_DIR = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT_DIR / "src"


def _ensure_path(path: Path) -> None:
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))


_ensure_path(SRC_DIR)

from caplogger import CapLog, buffer  # noqa: E402


@pytest.fixture(autouse=True)
def _clear_thread_buffer():
    """Ensure events captured outside a handle do not leak between tests."""

    buffer.clear()
    yield
    buffer.clear()


@pytest.fixture
def caplog_handle():
    with CapLog() as handle:
        yield handle


@pytest.fixture
def restore_structlog():
    """Put the structlog configuration back the way the test found it."""

    was_configured = structlog.is_configured()
    saved = structlog.get_config()
    yield
    if was_configured:
        structlog.configure(**saved)
    else:
        structlog.reset_defaults()
