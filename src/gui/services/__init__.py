"""Service layer exports.

Only the chart event bus lives here; chart computations are in
``gui.charting`` and never import a rendering toolkit.
"""

from .event_bus import ChartEvent, Event, EventBus, Subscription  # noqa: F401

__all__ = [
    "ChartEvent",
    "Event",
    "EventBus",
    "Subscription",
]
