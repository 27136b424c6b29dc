"""Structured logging."""

import logging
from typing import Any

from pythonjsonlogger import jsonlogger

from route_planner.config import get_settings


def _parse_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def get_logger(name: str = "route_planner") -> logging.Logger:
    """Return the JSON logger, configuring it on first use."""
    logger = logging.getLogger(name)

    # Prevent duplicate handlers (common with reloaders)
    if getattr(logger, "_configured", False):
        return logger

    logger.setLevel(_parse_level(get_settings().log_level))
    logger.propagate = False

    handler = logging.StreamHandler()
    handler.setFormatter(jsonlogger.JsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    logger.addHandler(handler)

    logger._configured = True  # type: ignore[attr-defined]
    return logger


# LogRecord attributes; ``extra`` may not overwrite them
_RESERVED_FIELDS = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}


def _safe_fields(fields: dict[str, Any]) -> dict[str, Any]:
    return {
        (f"field_{key}" if key in _RESERVED_FIELDS else key): value
        for key, value in fields.items()
    }


def log_event(event: str, level: int = logging.INFO, **fields: Any) -> None:
    """Write one structured record with ``event`` as message and key.

    Fields named like a LogRecord attribute (``name``, ``created``, ...) are
    written with a ``field_`` prefix.
    """
    get_logger().log(level, event, extra={"event": event, **_safe_fields(fields)})
