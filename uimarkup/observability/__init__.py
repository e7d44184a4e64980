"""Lightweight observability helpers for logging and metrics instrumentation."""

from __future__ import annotations

from .logging import configure_logging, get_logger, log_repair_event
from .metrics import (
    REPAIR_ATTEMPT,
    REPAIR_COST,
    REPAIR_EXHAUSTED,
    REPAIR_SUCCESS,
    emit_metric,
    record_metric,
    record_repair_outcome,
    register_metric_listener,
    unregister_metric_listener,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "log_repair_event",
    "REPAIR_ATTEMPT",
    "REPAIR_COST",
    "REPAIR_EXHAUSTED",
    "REPAIR_SUCCESS",
    "emit_metric",
    "record_metric",
    "record_repair_outcome",
    "register_metric_listener",
    "unregister_metric_listener",
]
