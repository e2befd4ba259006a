"""GUI-side public API.

Small, stable surface for view bindings and tests: the chart event bus and
the ``charting`` namespace. Importing this package has no side effects
beyond registering the built-in curve kinds.
"""

from __future__ import annotations

from .services.event_bus import (  # noqa: F401
    ChartEvent,
    Event,
    EventBus,
)

# Namespaced; do not flatten the chart helpers here
from . import charting  # noqa: F401

__all__ = [
    "ChartEvent",
    "Event",
    "EventBus",
    "charting",
]
