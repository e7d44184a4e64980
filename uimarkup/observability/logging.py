"""Centralised logging helpers for uimarkup."""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

_LOGGER_CACHE: Dict[str, logging.Logger] = {}

_LEVELS: Dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def get_logger(name: str = "uimarkup") -> logging.Logger:
    """Return a cached :class:`logging.Logger` instance."""

    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = logging.getLogger(name)
    return _LOGGER_CACHE[name]


def configure_logging(level: Optional[str] = None) -> int:
    """Configure root logging from an explicit level or ``UIMARKUP_LOG_LEVEL``."""

    name = (level or os.getenv("UIMARKUP_LOG_LEVEL", "warning")).lower()
    resolved = _LEVELS.get(name, logging.WARNING)
    logging.basicConfig(
        level=resolved,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    get_logger().setLevel(resolved)
    return resolved


def log_repair_event(
    *,
    event: str,
    attempt: int,
    max_attempts: int,
    message: Optional[str] = None,
    cost: Optional[float] = None,
    level: int = logging.INFO,
    logger: Optional[logging.Logger] = None,
    extras: Optional[Dict[str, Any]] = None,
) -> None:
    """Emit a structured log entry for one step of the repair loop."""

    payload: Dict[str, Any] = {
        "attempt": attempt,
        "max_attempts": max_attempts,
    }
    if message:
        payload["error"] = message
    if cost is not None:
        payload["cost"] = round(cost, 6)
    if extras:
        payload.update(extras)
    target_logger = logger or get_logger("uimarkup.repair")
    summary = f"Markup repair {event} (attempt {attempt}/{max_attempts})"
    if message:
        summary = f"{summary}: {message}"
    target_logger.log(
        level,
        summary,
        extra={"uimarkup_event": f"repair_{event}", "uimarkup_data": payload},
    )
