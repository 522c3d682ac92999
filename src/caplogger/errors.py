"""Exception hierarchy for the capture facility."""

from __future__ import annotations

__all__ = ["CaptureError", "RegistrationError"]


class CaptureError(RuntimeError):
    """Base class for errors raised by caplogger."""


class RegistrationError(CaptureError):
    """The capturing sink could not be installed as the process-wide sink.

    Raised from handle construction. The conflicting installation is permanent
    for the life of the process, so the failure is never retried.
    """
