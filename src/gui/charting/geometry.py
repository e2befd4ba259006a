"""Polar and shape geometry for area, pie/donut and radar charts.

All builders are pure. Angles are radians with 0 along +x and positive
angles turning clockwise in SVG screen space (y grows downward).

Edge policy:
 - empty or non-positive pie totals produce no arcs
 - a full 360° sweep is shortened by ``FULL_CIRCLE_EPSILON`` so the SVG arc
   command still draws a ring
 - radar values below 0 clamp to the center; a non-positive max resolves to 1
"""

from __future__ import annotations

import logging
import math
from typing import Any, Callable, Iterable, List, Optional, Sequence, Union

from config.settings import DEFAULT_RADAR_START_ANGLE, FULL_CIRCLE, FULL_CIRCLE_EPSILON

from .curves import create_line_path, format_path_number, format_path_point
from .types import (
    AxisLine,
    CurveType,
    PieArc,
    PieLabelLine,
    Point,
    PointLike,
    RadarLabel,
    RadarPoint,
    read_field,
    to_point,
)

__all__ = [
    "polar_to_cartesian",
    "create_area_path",
    "create_polygon_path",
    "get_pie_arcs",
    "create_pie_arc_path",
    "compute_pie_hover_offset",
    "compute_pie_label_line",
    "resolve_donut_inner_radius",
    "get_radar_angles",
    "get_radar_points",
    "resolve_radar_max_value",
    "get_radar_grid_paths",
    "get_radar_axis_lines",
    "get_radar_axis_labels",
    "get_radar_level_labels",
]

_logger = logging.getLogger(__name__)


def polar_to_cartesian(cx: float, cy: float, radius: float, angle: float) -> Point:
    return Point(cx + radius * math.cos(angle), cy + radius * math.sin(angle))


# ---------------- Area -----------------------------------------------------


def create_area_path(
    points: Sequence[PointLike],
    baseline: Union[float, Sequence[PointLike]] = 0.0,
    curve: str | CurveType = CurveType.LINEAR,
) -> str:
    """Closed area under ``points``.

    ``baseline`` is either a y pixel (plain area) or the bottom edge points
    of a stacked area, given left to right in the same x order as ``points``;
    the bottom edge is then traced right to left with the same curve.
    """
    top = create_line_path(points, curve)
    if not top:
        return ""
    resolved = [to_point(p) for p in points]

    if isinstance(baseline, (int, float)):
        y = format_path_number(baseline)
        last_x = format_path_number(resolved[-1].x)
        first_x = format_path_number(resolved[0].x)
        return f"{top} L {last_x},{y} L {first_x},{y} Z"

    bottom = [to_point(p) for p in baseline]
    if not bottom:
        return create_area_path(points, 0.0, curve)
    bottom_path = create_line_path(list(reversed(bottom)), curve)
    return f"{top} L{bottom_path[1:]} Z"


def create_polygon_path(points: Iterable[PointLike]) -> str:
    resolved = [to_point(p) for p in points]
    if not resolved:
        return ""
    first, *rest = resolved
    parts = [f"M {format_path_point(first.x, first.y)}"]
    parts.extend(f"L {format_path_point(p.x, p.y)}" for p in rest)
    parts.append("Z")
    return " ".join(parts)


# ---------------- Pie / donut ------------------------------------------------


def _datum_value(datum: Any) -> float:
    value = read_field(datum, "value", 0.0)
    try:
        numeric = float(value)
    except (TypeError, ValueError):
        return 0.0
    return numeric if math.isfinite(numeric) else 0.0


def get_pie_arcs(
    data: Sequence[Any],
    *,
    start_angle: float = 0.0,
    end_angle: float = FULL_CIRCLE,
    pad_angle: float = 0.0,
) -> List[PieArc]:
    """Partition ``[start_angle, end_angle]`` proportionally to each ``value``.

    Arcs keep input order and are separated only by ``pad_angle``. Negative
    values count as zero-width slices.
    """
    pad_angle = max(0.0, pad_angle)
    values = [max(0.0, _datum_value(d)) for d in data]
    total = sum(values)
    if total <= 0:
        _logger.debug("Pie total %r is not positive; no arcs produced", total)
        return []
    available = max(0.0, (end_angle - start_angle) - pad_angle * len(values))

    arcs: List[PieArc] = []
    current = start_angle
    for index, (datum, value) in enumerate(zip(data, values)):
        slice_start = current
        slice_end = slice_start + available * (value / total)
        current = slice_end + pad_angle
        arcs.append(
            PieArc(
                index=index,
                data=datum,
                value=value,
                start_angle=slice_start,
                end_angle=slice_end,
                pad_angle=pad_angle,
            )
        )
    return arcs


def create_pie_arc_path(
    *,
    cx: float,
    cy: float,
    outer_radius: float,
    start_angle: float,
    end_angle: float,
    inner_radius: float = 0.0,
) -> str:
    """SVG path for one pie slice (``inner_radius == 0``) or donut segment."""
    inner_radius = max(0.0, inner_radius)
    if end_angle - start_angle >= FULL_CIRCLE:
        end_angle = start_angle + FULL_CIRCLE - FULL_CIRCLE_EPSILON
    if end_angle <= start_angle:
        return ""

    start_outer = polar_to_cartesian(cx, cy, outer_radius, start_angle)
    end_outer = polar_to_cartesian(cx, cy, outer_radius, end_angle)
    large_arc = 1 if end_angle - start_angle > math.pi else 0
    r_outer = format_path_number(outer_radius)

    if inner_radius <= 0:
        return " ".join(
            (
                f"M {format_path_point(cx, cy)}",
                f"L {format_path_point(start_outer.x, start_outer.y)}",
                f"A {r_outer},{r_outer} 0 {large_arc} 1 "
                f"{format_path_point(end_outer.x, end_outer.y)}",
                "Z",
            )
        )

    start_inner = polar_to_cartesian(cx, cy, inner_radius, start_angle)
    end_inner = polar_to_cartesian(cx, cy, inner_radius, end_angle)
    r_inner = format_path_number(inner_radius)
    return " ".join(
        (
            f"M {format_path_point(start_outer.x, start_outer.y)}",
            f"A {r_outer},{r_outer} 0 {large_arc} 1 "
            f"{format_path_point(end_outer.x, end_outer.y)}",
            f"L {format_path_point(end_inner.x, end_inner.y)}",
            f"A {r_inner},{r_inner} 0 {large_arc} 0 "
            f"{format_path_point(start_inner.x, start_inner.y)}",
            "Z",
        )
    )


def compute_pie_hover_offset(start_angle: float, end_angle: float, offset: float) -> Point:
    """Translation (dx, dy) pushing a slice outward along its bisector."""
    mid = (start_angle + end_angle) / 2
    return Point(offset * math.cos(mid), offset * math.sin(mid))


def compute_pie_label_line(
    cx: float,
    cy: float,
    outer_radius: float,
    start_angle: float,
    end_angle: float,
    offset: Optional[float] = None,
) -> PieLabelLine:
    """Leader line geometry for a label drawn outside the slice."""
    mid = (start_angle + end_angle) / 2
    gap = offset if offset is not None else max(12.0, outer_radius * 0.15)
    anchor = polar_to_cartesian(cx, cy, outer_radius, mid)
    elbow = polar_to_cartesian(cx, cy, outer_radius + gap * 0.6, mid)
    is_right = math.cos(mid) >= 0
    label_x = elbow.x + (gap * 0.8 if is_right else -gap * 0.8)
    return PieLabelLine(
        anchor=anchor,
        elbow=elbow,
        label=Point(label_x, elbow.y),
        text_anchor="start" if is_right else "end",
    )


def resolve_donut_inner_radius(
    outer_radius: float, inner_radius: Optional[float] = None, ratio: float = 0.62
) -> float:
    """Explicit ``inner_radius`` wins; otherwise ``outer_radius * ratio``.

    The result is clamped into ``[0, outer_radius]``.
    """
    outer_radius = max(0.0, outer_radius)
    if inner_radius is not None:
        return min(max(0.0, inner_radius), outer_radius)
    return outer_radius * min(max(ratio, 0.0), 1.0)


# ---------------- Radar ------------------------------------------------------


def get_radar_angles(count: int, start_angle: float = DEFAULT_RADAR_START_ANGLE) -> List[float]:
    if count <= 0:
        return []
    step = FULL_CIRCLE / count
    return [start_angle + step * i for i in range(count)]


def resolve_radar_max_value(series: Sequence[Sequence[Any]], max_value: Optional[float] = None) -> float:
    """Shared radial maximum across all radar series (never below 1 when unset)."""
    if max_value is not None:
        return max(0.0, max_value)
    values = [_datum_value(d) for data in series for d in data]
    computed = max(values) if values else 0.0
    return computed if computed > 0 else 1.0


def get_radar_points(
    data: Sequence[Any],
    *,
    cx: float,
    cy: float,
    radius: float,
    start_angle: float = DEFAULT_RADAR_START_ANGLE,
    max_value: Optional[float] = None,
) -> List[RadarPoint]:
    """Vertex per datum at ``radius * value / max_value`` on its axis angle."""
    if not data:
        return []
    if max_value is None:
        max_value = max(_datum_value(d) for d in data)
    resolved_max = max(0.0, max_value) or 1.0
    angles = get_radar_angles(len(data), start_angle)

    points: List[RadarPoint] = []
    for index, (datum, angle) in enumerate(zip(data, angles)):
        value = max(0.0, _datum_value(datum))
        r = radius * (value / resolved_max)
        vertex = polar_to_cartesian(cx, cy, r, angle)
        points.append(
            RadarPoint(index=index, data=datum, value=value, angle=angle, radius=r, x=vertex.x, y=vertex.y)
        )
    return points


def get_radar_grid_paths(
    count: int,
    *,
    cx: float,
    cy: float,
    radius: float,
    levels: int = 5,
    start_angle: float = DEFAULT_RADAR_START_ANGLE,
) -> List[str]:
    """Concentric polygon rings, innermost first."""
    angles = get_radar_angles(count, start_angle)
    if not angles:
        return []
    resolved_levels = max(1, int(levels))
    paths: List[str] = []
    for level in range(1, resolved_levels + 1):
        ring_radius = radius * (level / resolved_levels)
        paths.append(create_polygon_path(polar_to_cartesian(cx, cy, ring_radius, a) for a in angles))
    return paths


def get_radar_axis_lines(
    count: int,
    *,
    cx: float,
    cy: float,
    radius: float,
    start_angle: float = DEFAULT_RADAR_START_ANGLE,
) -> List[AxisLine]:
    lines: List[AxisLine] = []
    for angle in get_radar_angles(count, start_angle):
        end = polar_to_cartesian(cx, cy, radius, angle)
        lines.append(AxisLine(x1=cx, y1=cy, x2=end.x, y2=end.y))
    return lines


def _default_axis_label(datum: Any, index: int) -> str:
    label = read_field(datum, "label")
    if label is not None:
        return str(label)
    return str(read_field(datum, "value", ""))


def get_radar_axis_labels(
    data: Sequence[Any],
    *,
    cx: float,
    cy: float,
    radius: float,
    label_offset: float = 12.0,
    start_angle: float = DEFAULT_RADAR_START_ANGLE,
    label_formatter: Optional[Callable[[Any, int], str]] = None,
) -> List[RadarLabel]:
    fmt = label_formatter or _default_axis_label
    labels: List[RadarLabel] = []
    for index, angle in enumerate(get_radar_angles(len(data), start_angle)):
        position = polar_to_cartesian(cx, cy, radius + label_offset, angle)
        labels.append(RadarLabel(x=position.x, y=position.y, text=fmt(data[index], index)))
    return labels


def get_radar_level_labels(
    *,
    cx: float,
    cy: float,
    radius: float,
    max_value: float,
    levels: int = 5,
    level_label_offset: float = 8.0,
    start_angle: float = DEFAULT_RADAR_START_ANGLE,
    level_formatter: Optional[Callable[[float, int], str]] = None,
) -> List[RadarLabel]:
    """Value labels along the first axis, one per grid ring."""
    resolved_levels = max(1, int(levels))
    fmt = level_formatter or (lambda value, _level: format_path_number(value))
    labels: List[RadarLabel] = []
    for level in range(resolved_levels):
        ratio = (level + 1) / resolved_levels
        position = polar_to_cartesian(cx, cy, radius * ratio + level_label_offset, start_angle)
        labels.append(RadarLabel(x=position.x, y=position.y, text=fmt(max_value * ratio, level)))
    return labels
