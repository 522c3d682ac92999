"""Route structlog events through stdlib logging so the capturing sink sees them."""

from __future__ import annotations

from typing import Any, Mapping, MutableMapping

import structlog

__all__ = [
    "CONTEXT_ATTRIBUTE",
    "configure_structlog",
    "render_to_record_kwargs",
    "routes_to_stdlib",
    "structlog_conflict",
]

# LogRecord attribute holding the structlog key/value context.
CONTEXT_ATTRIBUTE = "structlog_context"

_LOG_CALL_KEYWORDS = ("exc_info", "stack_info", "stacklevel")


def render_to_record_kwargs(
    _logger: Any, _method_name: str, event_dict: MutableMapping[str, Any]
) -> dict[str, Any]:
    """
    Turn a structlog event into keyword arguments for a stdlib log call.

    The event becomes the record message. The remaining context is nested under
    a single ``extra`` key so keys such as ``name`` or ``module`` never collide
    with ``LogRecord`` attributes. ``exc_info``, ``stack_info`` and
    ``stacklevel`` are handed to the log call unchanged.
    """

    call_kwargs = {key: event_dict.pop(key) for key in _LOG_CALL_KEYWORDS if key in event_dict}
    message = event_dict.pop("event", "")
    return {"msg": message, "extra": {CONTEXT_ATTRIBUTE: dict(event_dict)}, **call_kwargs}


def _bridge_processors() -> list[Any]:
    return [
        structlog.stdlib.PositionalArgumentsFormatter(),
        render_to_record_kwargs,
    ]


def routes_to_stdlib(config: Mapping[str, Any]) -> bool:
    """Return True when ``config`` hands structlog events to stdlib loggers."""

    return isinstance(config.get("logger_factory"), structlog.stdlib.LoggerFactory)


def structlog_conflict() -> str | None:
    """
    Describe why the active structlog configuration would bypass stdlib logging.

    Returns:
        A human-readable reason, or ``None`` when structlog is unconfigured or
        already routes through stdlib logging.
    """

    if not structlog.is_configured():
        return None
    config = structlog.get_config()
    if routes_to_stdlib(config):
        return None
    factory = type(config.get("logger_factory")).__name__
    return (
        f"structlog is already configured with logger factory {factory}; "
        "its events would bypass stdlib logging and never be captured. "
        "Configure structlog with structlog.stdlib.LoggerFactory() instead."
    )


def configure_structlog() -> None:
    """Configure structlog to emit through stdlib loggers, preserving call sites.

    ``structlog.stdlib.LoggerFactory`` makes stdlib loggers skip structlog
    frames when locating the caller, so captured events carry the
    application's module, file and line.
    """

    structlog.configure(
        processors=_bridge_processors(),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
