"""Legend items, tooltip text and series normalisation.

Everything here is derived from caller data plus the resolved interaction
state (``active_index`` / ``hovered_point``) and never cached.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from .palette import palette_color
from .ticks import format_tick_value
from .types import ChartLegendItem, HoveredPoint, read_field, series_points

__all__ = [
    "build_chart_legend_items",
    "resolve_chart_tooltip_content",
    "resolve_multi_series_tooltip_content",
    "resolve_series_data",
    "default_xy_tooltip_formatter",
    "default_series_xy_tooltip_formatter",
    "default_radar_tooltip_formatter",
    "default_tooltip_formatter",
]

SERIES_SEPARATOR = " · "

DatumFormatter = Callable[[Any, int], str]
SeriesFormatter = Callable[[Any, int, int, Any], str]


def _display(value: Any) -> str:
    return "" if value is None else format_tick_value(value)


def build_chart_legend_items(
    data: Sequence[Any],
    palette: Sequence[str],
    active_index: Optional[int],
    get_label: Callable[[Any, int], str],
    get_color: Optional[Callable[[Any, int], Optional[str]]] = None,
) -> List[ChartLegendItem]:
    """One legend entry per datum (or series).

    Every entry is active while nothing is focused; otherwise only the entry
    at ``active_index`` is.
    """
    items: List[ChartLegendItem] = []
    for index, datum in enumerate(data):
        color = get_color(datum, index) if get_color is not None else None
        items.append(
            ChartLegendItem(
                index=index,
                label=get_label(datum, index),
                color=color or palette_color(palette, index),
                active=active_index is None or active_index == index,
            )
        )
    return items


def resolve_chart_tooltip_content(
    hovered_index: Optional[int],
    data: Sequence[Any],
    formatter: Optional[DatumFormatter],
    default_formatter: DatumFormatter,
) -> str:
    """Tooltip text for single-series charts (bar, scatter, pie)."""
    if hovered_index is None or not 0 <= hovered_index < len(data):
        return ""
    datum = data[hovered_index]
    if datum is None:
        return ""
    fmt = formatter or default_formatter
    return fmt(datum, hovered_index)


def resolve_multi_series_tooltip_content(
    hovered_point: Optional[HoveredPoint],
    series: Sequence[Any],
    formatter: Optional[SeriesFormatter],
    default_formatter: SeriesFormatter,
) -> str:
    """Tooltip text for multi-series charts (line, area, radar)."""
    if hovered_point is None:
        return ""
    s_idx, p_idx = hovered_point.series_index, hovered_point.point_index
    if not 0 <= s_idx < len(series):
        return ""
    current = series[s_idx]
    points = series_points(current)
    if not 0 <= p_idx < len(points) or points[p_idx] is None:
        return ""
    fmt = formatter or default_formatter
    return fmt(points[p_idx], s_idx, p_idx, current)


def resolve_series_data(
    series: Optional[Sequence[Any]],
    data: Optional[Sequence[Any]],
    default_series: Optional[Mapping[str, Any]] = None,
) -> List[Any]:
    """Normalise ``series``/``data`` inputs of multi-series charts.

    A non-empty ``series`` wins. Otherwise non-empty ``data`` is wrapped into
    a single series dict (``default_series`` supplies name, color, ...).
    """
    if series:
        return list(series)
    if data:
        wrapped: Dict[str, Any] = dict(default_series or {})
        wrapped["data"] = list(data)
        return [wrapped]
    return []


def default_xy_tooltip_formatter(datum: Any, index: int) -> str:
    """``"{label}: {y}"`` where label falls back to ``x`` then ``#n``."""
    label = read_field(datum, "label")
    if label is None:
        x = read_field(datum, "x")
        label = str(x) if x is not None else f"#{index + 1}"
    return f"{label}: {_display(read_field(datum, 'y'))}"


def _series_name(series: Any, series_index: int) -> str:
    return read_field(series, "name") or f"Series {series_index + 1}"


def default_series_xy_tooltip_formatter(
    datum: Any, series_index: int, point_index: int, series: Any = None
) -> str:
    label = read_field(datum, "label")
    if label is None:
        x = read_field(datum, "x")
        label = str(x) if x is not None else ""
    name = _series_name(series, series_index)
    return f"{name}{SERIES_SEPARATOR}{label}: {_display(read_field(datum, 'y'))}"


def default_radar_tooltip_formatter(
    datum: Any, series_index: int, point_index: int, series: Any = None
) -> str:
    label = read_field(datum, "label") or f"#{point_index + 1}"
    name = _series_name(series, series_index)
    return f"{name}{SERIES_SEPARATOR}{label}: {_display(read_field(datum, 'value'))}"


def default_tooltip_formatter(
    label: Optional[str],
    value: Any,
    series_name: Optional[str] = None,
    index: Optional[int] = None,
) -> str:
    """Generic ``"[series · ]label: value"`` text."""
    if label is None:
        label = f"#{index + 1}" if index is not None else ""
    prefix = f"{series_name}{SERIES_SEPARATOR}" if series_name else ""
    return f"{prefix}{label}: {_display(value)}"
