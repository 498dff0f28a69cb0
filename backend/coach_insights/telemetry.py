"""Structured telemetry for the insights HTTP boundary.

Core functions never emit events; only the request layer does, so the
engine itself stays free of side effects.
"""

from __future__ import annotations

import json
import logging
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from threading import RLock
from time import perf_counter
from typing import Any, Callable, Dict, Iterator, List

logger = logging.getLogger("coach_insights.telemetry")


@dataclass(frozen=True)
class TelemetryEvent:
    name: str
    payload: Dict[str, Any]


_listeners: List[Callable[[TelemetryEvent], None]] = []
_lock = RLock()


def register_listener(listener: Callable[[TelemetryEvent], None]) -> None:
    """Register an in-process listener (used in tests)."""
    with _lock:
        _listeners.append(listener)


def clear_listeners() -> None:
    with _lock:
        _listeners.clear()


def emit_event(name: str, **fields: Any) -> None:
    """Emit a structured event, fan it out to listeners and log it."""
    payload = {key: _plain(value) for key, value in fields.items()}
    event = TelemetryEvent(name=name, payload=payload)

    with _lock:
        listeners = list(_listeners)

    for listener in listeners:
        try:
            listener(event)
        except Exception:  # noqa: BLE001
            logger.exception("Telemetry listener failed for %s", name)

    logger.info(
        "TELEMETRY %s",
        json.dumps({"event": name, **payload}, default=str),
        extra={"telemetry_event": name, "telemetry_payload": payload},
    )


@contextmanager
def timed_event(name: str, **fields: Any) -> Iterator[Dict[str, Any]]:
    """Emit ``name`` once the block finishes, with ``latency_ms`` attached.

    The yielded dict can be filled with result fields (counts, risk level)
    inside the block. Nothing is emitted when the block raises.
    """
    details: Dict[str, Any] = dict(fields)
    started = perf_counter()
    yield details
    details["latency_ms"] = round((perf_counter() - started) * 1000, 3)
    emit_event(name, **details)


def _plain(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    if isinstance(value, dict):
        return {key: _plain(item) for key, item in value.items()}
    return value


__all__ = [
    "TelemetryEvent",
    "clear_listeners",
    "emit_event",
    "register_listener",
    "timed_event",
]
