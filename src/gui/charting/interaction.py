"""Hover / selection interaction state shared by every chart type.

Each chart instance owns one ``ChartInteraction``. Hover and selection are
two independent axes; each is either *controlled* (the owning component
supplies the index, ``None`` included) or *uncontrolled* (the index is held
locally here). A single rule resolves both::

    resolved = prop if prop is not UNSET else local

``active_index`` is derived on every read and never stored: selection wins,
hover only counts while the chart is hoverable.

Notifications go to optional direct callbacks and, when a bus is attached,
are published as ``ChartEvent`` values with a payload dict. Selection
changes and clicks are always reported as separate events.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence

from config.settings import DEFAULT_ACTIVE_OPACITY, DEFAULT_INACTIVE_OPACITY
from gui.services.event_bus import ChartEvent, EventBus

from .types import HoveredPoint, series_points

__all__ = [
    "UNSET",
    "ACTIVATION_KEYS",
    "InteractionState",
    "ChartInteraction",
    "resolve_controlled",
    "get_active_index",
    "get_chart_element_opacity",
]

_logger = logging.getLogger(__name__)


class _Unset:
    """Marker for "prop not supplied" (distinct from an explicit ``None``)."""

    _instance: Optional["_Unset"] = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()

# "argument omitted" for set_controlled, where UNSET itself is a meaningful value
_KEEP: Any = object()

ACTIVATION_KEYS = frozenset({"Enter", " ", "Space", "Spacebar"})

IndexCallback = Callable[[Optional[int], Any], None]
PointCallback = Callable[[Optional[int], Optional[int], Any], None]


@dataclass(frozen=True)
class InteractionState:
    hovered_index: Optional[int]
    selected_index: Optional[int]


def resolve_controlled(prop: Any, local: Optional[int]) -> Optional[int]:
    return local if prop is UNSET else prop


def get_active_index(
    hovered_index: Optional[int], selected_index: Optional[int], *, hoverable: bool = True
) -> Optional[int]:
    """Selection first, then hover (only when ``hoverable``), else ``None``."""
    if selected_index is not None:
        return selected_index
    if hoverable and hovered_index is not None:
        return hovered_index
    return None


def get_chart_element_opacity(
    index: int,
    active_index: Optional[int],
    *,
    active_opacity: float = DEFAULT_ACTIVE_OPACITY,
    inactive_opacity: float = DEFAULT_INACTIVE_OPACITY,
    default_opacity: Optional[float] = None,
) -> Optional[float]:
    """Opacity override for element ``index``.

    Returns ``default_opacity`` (``None`` unless given) when nothing is
    active, so the renderer keeps its own default.
    """
    if active_index is None:
        return default_opacity
    return active_opacity if index == active_index else inactive_opacity


class ChartInteraction:
    """Controlled/uncontrolled hover and selection resolver for one chart.

    Parameters
    ----------
    hoverable / selectable : bool
        Enable hover emphasis and click selection.
    hovered_index / selected_index : int | None | UNSET
        Controlled values. Leave as ``UNSET`` to let this object own the state.
        The owner may reassign ``hovered_index_prop`` / ``selected_index_prop``
        at any time (``UNSET`` hands ownership back).
    data : sequence | None
        Items addressed by index (bars, slices, series); used to attach the
        datum to notifications. Series items may be a plain list of points or
        expose a ``data`` list for point-level lookups.
    on_hover_change / on_select_change / on_item_click : callable | None
        ``callback(index, datum)``.
    on_point_hover / on_point_click : callable | None
        ``callback(series_index, point_index, datum)``.
    bus : EventBus | None
        Receives the same notifications as ``ChartEvent`` publications.
    """

    def __init__(
        self,
        *,
        hoverable: bool = False,
        selectable: bool = False,
        hovered_index: Any = UNSET,
        selected_index: Any = UNSET,
        active_opacity: float = DEFAULT_ACTIVE_OPACITY,
        inactive_opacity: float = DEFAULT_INACTIVE_OPACITY,
        data: Optional[Sequence[Any]] = None,
        on_hover_change: Optional[IndexCallback] = None,
        on_select_change: Optional[IndexCallback] = None,
        on_item_click: Optional[IndexCallback] = None,
        on_point_hover: Optional[PointCallback] = None,
        on_point_click: Optional[PointCallback] = None,
        bus: Optional[EventBus] = None,
    ) -> None:
        self.hoverable = hoverable
        self.selectable = selectable
        self.hovered_index_prop = hovered_index
        self.selected_index_prop = selected_index
        self.active_opacity = active_opacity
        self.inactive_opacity = inactive_opacity
        self.data: Sequence[Any] = data if data is not None else ()
        self.on_hover_change = on_hover_change
        self.on_select_change = on_select_change
        self.on_item_click = on_item_click
        self.on_point_hover = on_point_hover
        self.on_point_click = on_point_click
        self.bus = bus
        self._local_hovered: Optional[int] = None
        self._local_selected: Optional[int] = None
        self._hovered_point: Optional[HoveredPoint] = None

    def set_controlled(self, *, hovered_index: Any = _KEEP, selected_index: Any = _KEEP) -> None:
        """Update the owner's props; ``UNSET`` hands an axis back to local state."""
        if hovered_index is not _KEEP:
            self.hovered_index_prop = hovered_index
        if selected_index is not _KEEP:
            self.selected_index_prop = selected_index

    # ---------------- Resolution ----------------------------------------
    @property
    def hover_controlled(self) -> bool:
        return self.hovered_index_prop is not UNSET

    @property
    def selection_controlled(self) -> bool:
        return self.selected_index_prop is not UNSET

    @property
    def local_hovered_index(self) -> Optional[int]:
        return self._local_hovered

    @property
    def local_selected_index(self) -> Optional[int]:
        return self._local_selected

    @property
    def resolved_hovered_index(self) -> Optional[int]:
        return resolve_controlled(self.hovered_index_prop, self._local_hovered)

    @property
    def resolved_selected_index(self) -> Optional[int]:
        return resolve_controlled(self.selected_index_prop, self._local_selected)

    @property
    def active_index(self) -> Optional[int]:
        return get_active_index(
            self.resolved_hovered_index, self.resolved_selected_index, hoverable=self.hoverable
        )

    @property
    def hovered_point(self) -> Optional[HoveredPoint]:
        return self._hovered_point

    @property
    def state(self) -> InteractionState:
        return InteractionState(self.resolved_hovered_index, self.resolved_selected_index)

    def get_element_opacity(self, index: int) -> Optional[float]:
        return get_chart_element_opacity(
            index,
            self.active_index,
            active_opacity=self.active_opacity,
            inactive_opacity=self.inactive_opacity,
        )

    # ---------------- Hover ---------------------------------------------
    def handle_hover_enter(self, index: int) -> None:
        if not self.hoverable:
            return
        if not self.hover_controlled:
            self._local_hovered = index
        self._notify(ChartEvent.HOVER_CHANGED, self.on_hover_change, index, self._datum(index))

    def handle_hover_leave(self) -> None:
        if not self.hoverable:
            return
        if not self.hover_controlled:
            self._local_hovered = None
        self._notify(ChartEvent.HOVER_CHANGED, self.on_hover_change, None, None)

    # ---------------- Selection -----------------------------------------
    def handle_click(self, index: int) -> None:
        """Toggle selection (when selectable) and report the click.

        Clicking the selected index clears the selection; any other index
        becomes selected. A non-selectable chart only reports the click.
        """
        if self.selectable:
            next_index = None if self.resolved_selected_index == index else index
            if not self.selection_controlled:
                self._local_selected = next_index
            _logger.debug("Selection -> %s", next_index)
            datum = self._datum(next_index) if next_index is not None else None
            self._notify(ChartEvent.SELECTION_CHANGED, self.on_select_change, next_index, datum)
        self._notify(ChartEvent.ITEM_CLICKED, self.on_item_click, index, self._datum(index))

    def handle_key(self, key: str, index: int) -> bool:
        """Run the click path for Enter/Space; return True if the key was consumed."""
        if not self.selectable or key not in ACTIVATION_KEYS:
            return False
        self.handle_click(index)
        return True

    # ---------------- Legend --------------------------------------------
    def handle_legend_click(self, index: int) -> None:
        self.handle_click(index)

    def handle_legend_hover(self, index: int) -> None:
        self.handle_hover_enter(index)

    def handle_legend_leave(self) -> None:
        self.handle_hover_leave()

    # ---------------- Points (multi-series) -----------------------------
    def handle_point_enter(self, series_index: int, point_index: int) -> None:
        self._hovered_point = HoveredPoint(series_index, point_index)
        datum = self._point_datum(series_index, point_index)
        if self.on_point_hover is not None:
            self.on_point_hover(series_index, point_index, datum)
        self._publish(
            ChartEvent.POINT_HOVERED,
            {"series_index": series_index, "point_index": point_index, "datum": datum},
        )

    def handle_point_leave(self) -> None:
        self._hovered_point = None
        if self.on_point_hover is not None:
            self.on_point_hover(None, None, None)
        self._publish(
            ChartEvent.POINT_HOVERED, {"series_index": None, "point_index": None, "datum": None}
        )

    def handle_point_click(self, series_index: int, point_index: int) -> None:
        """Report the point, then treat it as a click on its series."""
        datum = self._point_datum(series_index, point_index)
        if self.on_point_click is not None:
            self.on_point_click(series_index, point_index, datum)
        self._publish(
            ChartEvent.POINT_CLICKED,
            {"series_index": series_index, "point_index": point_index, "datum": datum},
        )
        self.handle_click(series_index)

    def reset(self) -> None:
        self._local_hovered = None
        self._local_selected = None
        self._hovered_point = None

    # ---------------- Internal ------------------------------------------
    def _datum(self, index: Optional[int]) -> Any:
        if index is None or not 0 <= index < len(self.data):
            return None
        return self.data[index]

    def _point_datum(self, series_index: int, point_index: int) -> Any:
        points = series_points(self._datum(series_index))
        if not 0 <= point_index < len(points):
            return None
        return points[point_index]

    def _notify(
        self, event: ChartEvent, callback: Optional[IndexCallback], index: Optional[int], datum: Any
    ) -> None:
        if callback is not None:
            callback(index, datum)
        self._publish(event, {"index": index, "datum": datum})

    def _publish(self, event: ChartEvent, payload: dict) -> None:
        if self.bus is not None:
            self.bus.publish(event, payload)
