"""Process-wide, exactly-once installation of the capturing sink."""

from __future__ import annotations

import logging
import threading

import structlog

from caplogger.bridge import configure_structlog, structlog_conflict
from caplogger.errors import RegistrationError
from caplogger.sink import SINK, CapturingHandler

__all__ = ["Registration", "ensure_registered", "is_registered"]

logger = structlog.get_logger(__name__)


class Registration:
    """Installs a capturing sink on a logger at most once.

    ``ensure`` may be called from any number of threads concurrently; exactly
    one of them performs the installation and every caller returns only after
    it has completed. A failed installation, whatever the cause, is reported as
    ``RegistrationError``, remembered and re-raised on every later call without
    being attempted again.
    """

    def __init__(
        self,
        root: logging.Logger | None = None,
        sink: CapturingHandler | None = None,
    ) -> None:
        self._root = root if root is not None else logging.getLogger()
        self._sink = sink if sink is not None else SINK
        self._lock = threading.Lock()
        self._done = False
        self._failure: str | None = None

    @property
    def is_registered(self) -> bool:
        return self._done

    def ensure(self) -> None:
        if self._done:
            return
        with self._lock:
            # Re-check inside the lock in case another thread won the race.
            if self._done:
                return
            if self._failure is not None:
                raise RegistrationError(self._failure)
            try:
                self._install()
            except RegistrationError as error:
                self._failure = str(error)
                raise
            except Exception as error:
                self._failure = f"installing the capture sink failed: {error!r}"
                raise RegistrationError(self._failure) from error
            self._done = True

    def _conflict(self) -> str | None:
        for handler in self._root.handlers:
            if handler is not self._sink and getattr(handler, "exclusive", False):
                return (
                    f"logger {self._root.name!r} already has a capture sink "
                    f"({type(handler).__module__}.{type(handler).__qualname__}); "
                    "is caplogger imported under two different paths?"
                )
        return structlog_conflict()

    def _install(self) -> None:
        reason = self._conflict()
        if reason is not None:
            logger.error("caplogger.registration.conflict", logger_name=self._root.name, reason=reason)
            raise RegistrationError(reason)

        if not structlog.is_configured():
            configure_structlog()

        # Logged before the sink is attached so it never lands in a test's buffer.
        logger.debug("caplogger.registration.installed", logger_name=self._root.name)

        logging.disable(logging.NOTSET)
        self._root.setLevel(logging.NOTSET)
        if self._sink not in self._root.handlers:
            self._root.addHandler(self._sink)


_REGISTRATION = Registration()


def ensure_registered() -> None:
    """Install the capturing sink on the root logger unless already done.

    Raises:
        RegistrationError: Another capture sink or an incompatible structlog
            configuration is already installed for this process.
    """

    _REGISTRATION.ensure()


def is_registered() -> bool:
    return _REGISTRATION.is_registered
