"""Chart event bus.

Synchronous publish/subscribe used by ``ChartInteraction`` to report hover,
selection and click changes to whatever view binding hosts the chart.

Behaviour:
 - handlers run in subscription order, on the publishing call stack
 - a failing handler is recorded in ``errors`` and logged; later handlers
   still run
 - ``once`` subscriptions are dropped after their first successful call
 - optional tracing keeps a short ring buffer of recent events

The bus is owned by a single UI thread; it does no locking.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from enum import Enum
from time import perf_counter
from typing import Any, Deque, Dict, List, Protocol, Tuple

__all__ = [
    "ChartEvent",
    "Event",
    "EventBus",
    "EventHandler",
    "Subscription",
]

_logger = logging.getLogger(__name__)


class ChartEvent(str, Enum):
    HOVER_CHANGED = "hover_changed"
    SELECTION_CHANGED = "selection_changed"
    ITEM_CLICKED = "item_clicked"
    POINT_HOVERED = "point_hovered"
    POINT_CLICKED = "point_clicked"


@dataclass(frozen=True)
class Event:
    name: str  # ChartEvent value or custom string
    payload: Any
    timestamp: float


class EventHandler(Protocol):  # noqa: D401 - protocol signature docs implicit
    def __call__(self, event: Event) -> None: ...  # pragma: no cover - structural


@dataclass
class Subscription:
    event: str
    handler: EventHandler
    once: bool
    active: bool = True

    def cancel(self) -> None:
        self.active = False


def _key(name: str | ChartEvent) -> str:
    return name.value if isinstance(name, ChartEvent) else name


class EventBus:
    DEFAULT_TRACE_CAPACITY = 50

    def __init__(self) -> None:
        self._subs: Dict[str, List[Subscription]] = {}
        self._errors: List[Tuple[Event, Exception]] = []
        self._tracing_enabled = False
        self._traces: Deque[Tuple[str, str]] = deque(maxlen=self.DEFAULT_TRACE_CAPACITY)

    # ---------------- Subscriptions -------------------------------------
    def subscribe(
        self, name: str | ChartEvent, handler: EventHandler, *, once: bool = False
    ) -> Subscription:
        sub = Subscription(event=_key(name), handler=handler, once=once)
        self._subs.setdefault(sub.event, []).append(sub)
        return sub

    def unsubscribe(self, sub: Subscription) -> None:
        bucket = self._subs.get(sub.event, [])
        remaining = [s for s in bucket if s is not sub]
        if remaining:
            self._subs[sub.event] = remaining
        else:
            self._subs.pop(sub.event, None)
        sub.active = False

    def clear(self) -> None:
        self._subs.clear()
        self._errors.clear()

    # ---------------- Publishing ----------------------------------------
    def publish(self, name: str | ChartEvent, payload: Any = None) -> Event:
        evt = Event(name=_key(name), payload=payload, timestamp=perf_counter())
        if self._tracing_enabled:
            text = "-" if payload is None else str(payload)
            self._traces.append((evt.name, text if len(text) <= 40 else text[:37] + "..."))

        finished: List[Subscription] = []
        # Snapshot so handlers may (un)subscribe while we dispatch
        for sub in list(self._subs.get(evt.name, ())):
            if not sub.active:
                continue
            try:
                sub.handler(evt)
            except Exception as exc:  # noqa: BLE001 - isolate subscriber failures
                _logger.warning("Handler for %s failed: %s", evt.name, exc, exc_info=exc)
                self._errors.append((evt, exc))
            else:
                if sub.once:
                    finished.append(sub)
        for sub in finished:
            self.unsubscribe(sub)
        return evt

    # ---------------- Introspection -------------------------------------
    def subscriber_count(self, name: str | ChartEvent) -> int:
        return len(self._subs.get(_key(name), ()))

    def list_events(self) -> List[str]:
        return list(self._subs.keys())

    @property
    def errors(self) -> List[Tuple[Event, Exception]]:
        return list(self._errors)

    # ---------------- Tracing -------------------------------------------
    def enable_tracing(self, enabled: bool = True, *, capacity: int | None = None) -> None:
        self._tracing_enabled = enabled
        if capacity is not None and capacity != self._traces.maxlen:
            self._traces = deque(self._traces, maxlen=capacity)

    def recent_traces(self) -> List[Tuple[str, str]]:
        return list(self._traces)

    @property
    def tracing_enabled(self) -> bool:
        return self._tracing_enabled
