"""Core charting types.

Plain dataclasses shared by the scale, geometry, stacking and interaction
modules. Nothing here knows about a rendering toolkit; the chart components
of each view binding consume these values to place SVG elements.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Mapping, Optional, Sequence, Tuple, Union

__all__ = [
    "ChartScaleType",
    "CurveType",
    "ScaleValue",
    "ChartPadding",
    "Point",
    "ChartRect",
    "ChartPaddingBox",
    "ChartScale",
    "ChartAxisTick",
    "ChartSeriesPoint",
    "StackedPoint",
    "PieArc",
    "PieLabelLine",
    "RadarPoint",
    "RadarLabel",
    "AxisLine",
    "HoveredPoint",
    "ChartLegendItem",
    "PointLike",
    "read_field",
    "series_points",
    "to_point",
]

ScaleValue = Union[float, int, str]
ChartPadding = Union[float, int, Mapping[str, float], None]


class ChartScaleType(str, Enum):
    LINEAR = "linear"
    BAND = "band"
    POINT = "point"


class CurveType(str, Enum):
    """Interpolation kinds understood by ``create_line_path``."""

    LINEAR = "linear"
    MONOTONE = "monotone"
    STEP = "step"
    STEP_BEFORE = "stepBefore"
    STEP_AFTER = "stepAfter"
    NATURAL = "natural"


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class ChartRect:
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class ChartPaddingBox:
    top: float = 0
    right: float = 0
    bottom: float = 0
    left: float = 0


@dataclass(frozen=True)
class ChartScale:
    """A pure mapping from a data domain to a pixel range.

    Attributes
    ----------
    type : ChartScaleType
        ``linear`` (affine map) or ``band`` / ``point`` (lookup by domain index).
    domain : tuple
        ``(d0, d1)`` for linear scales, the ordered category keys otherwise.
    range : tuple[float, float]
        Output pixel range; ``range[0] > range[1]`` denotes an inverted axis.
    map : callable
        Deterministic value -> pixel function.
    bandwidth / step : float | None
        Category width and spacing (categorical scales only).
    """

    type: ChartScaleType
    domain: Tuple[Any, ...]
    range: Tuple[float, float]
    map: Callable[[Any], float]
    bandwidth: Optional[float] = None
    step: Optional[float] = None

    def __call__(self, value: Any) -> float:
        return self.map(value)


@dataclass(frozen=True)
class ChartAxisTick:
    value: Any
    position: float
    label: str


@dataclass(frozen=True)
class ChartSeriesPoint:
    """Raw caller datum. Every field is optional; dicts work equally well."""

    x: Any = None
    y: Optional[float] = None
    value: Optional[float] = None
    label: Optional[str] = None
    color: Optional[str] = None
    size: Optional[float] = None


@dataclass(frozen=True)
class StackedPoint:
    original: Any
    y0: float
    y1: float


@dataclass(frozen=True)
class PieArc:
    index: int
    data: Any
    value: float
    start_angle: float
    end_angle: float
    pad_angle: float = 0.0


@dataclass(frozen=True)
class PieLabelLine:
    anchor: Point
    elbow: Point
    label: Point
    text_anchor: str  # 'start' | 'end'


@dataclass(frozen=True)
class RadarPoint:
    index: int
    data: Any
    value: float
    angle: float
    radius: float
    x: float
    y: float


@dataclass(frozen=True)
class RadarLabel:
    x: float
    y: float
    text: str


@dataclass(frozen=True)
class AxisLine:
    x1: float
    y1: float
    x2: float
    y2: float


@dataclass(frozen=True)
class HoveredPoint:
    series_index: int
    point_index: int


@dataclass(frozen=True)
class ChartLegendItem:
    index: int
    label: str
    color: str
    active: bool


_MISSING = object()


def read_field(datum: Any, name: str, default: Any = None) -> Any:
    """Read ``name`` from a mapping or attribute-style datum.

    Caller data may be dicts, dataclasses or any object; ``None`` values are
    treated as absent so ``default`` applies.
    """
    if datum is None:
        return default
    if isinstance(datum, Mapping):
        value = datum.get(name, _MISSING)
    else:
        value = getattr(datum, name, _MISSING)
    if value is _MISSING or value is None:
        return default
    return value


PointLike = Union[Point, Mapping[str, float], Sequence[float]]


def to_point(value: PointLike) -> Point:
    """Coerce a ``Point``, ``{"x", "y"}`` mapping or ``(x, y)`` pair."""
    if isinstance(value, Point):
        return value
    if isinstance(value, Mapping):
        return Point(float(value.get("x", 0.0)), float(value.get("y", 0.0)))
    if isinstance(value, Sequence) and len(value) >= 2:
        return Point(float(value[0]), float(value[1]))
    return Point(float(read_field(value, "x", 0.0)), float(read_field(value, "y", 0.0)))


def series_points(series: Any) -> Sequence[Any]:
    """Points of a series given either as a plain list or as ``{"data": [...]}``."""
    if isinstance(series, Sequence) and not isinstance(series, str):
        return series
    return read_field(series, "data", ())
