"""Metric emission for the repair loop.

Listeners receive ``(name, values, labels)`` for every repair step. The
names are fixed so dashboards can rely on them:

* ``markup.repair.attempt`` – one repair request was started.
* ``markup.repair.cost`` – estimated USD cost of one answered request.
* ``markup.repair.success`` – the markup parsed after a repair.
* ``markup.repair.exhausted`` – every allowed attempt failed.
"""

from __future__ import annotations

from threading import RLock
from typing import Callable, Dict, List, Optional

REPAIR_ATTEMPT = "markup.repair.attempt"
REPAIR_COST = "markup.repair.cost"
REPAIR_SUCCESS = "markup.repair.success"
REPAIR_EXHAUSTED = "markup.repair.exhausted"

MetricListener = Callable[[str, Dict[str, float], Dict[str, str]], None]

_LISTENERS: List[MetricListener] = []
_LOCK = RLock()


def register_metric_listener(callback: MetricListener) -> None:
    with _LOCK:
        if callback not in _LISTENERS:
            _LISTENERS.append(callback)


def unregister_metric_listener(callback: MetricListener) -> None:
    with _LOCK:
        if callback in _LISTENERS:
            _LISTENERS.remove(callback)


def emit_metric(name: str, values: Optional[Dict[str, float]] = None, labels: Optional[Dict[str, str]] = None) -> None:
    """Deliver a metric payload to every registered listener."""

    payload = dict(values or {})
    tags = {str(key): str(value) for key, value in (labels or {}).items()}
    with _LOCK:
        listeners = list(_LISTENERS)
    for callback in listeners:
        try:
            callback(name, payload, tags)
        except Exception:
            # A failing listener must not abort a repair run.
            continue


def record_metric(name: str, value: float, tags: Optional[Dict[str, str]] = None) -> None:
    emit_metric(name, values={"value": value}, labels=tags)


def record_repair_outcome(succeeded: bool, attempts: int, cost: float) -> None:
    """Emit the terminal success/exhausted metric of one repair run."""
    name = REPAIR_SUCCESS if succeeded else REPAIR_EXHAUSTED
    emit_metric(name, values={"value": 1.0, "cost": cost}, labels={"attempts": str(attempts)})


__all__ = [
    "REPAIR_ATTEMPT",
    "REPAIR_COST",
    "REPAIR_SUCCESS",
    "REPAIR_EXHAUSTED",
    "register_metric_listener",
    "unregister_metric_listener",
    "emit_metric",
    "record_metric",
    "record_repair_outcome",
]
