"""Curve registry and line path builders.

Curve kinds are registered by name so view bindings can request them with a
plain string (``"monotone"``) and plugins can contribute new interpolators.
Every builder receives at least two points and returns an SVG path string
that starts with ``M``. Unknown curve names fall back to straight segments.

Path numbers are rounded to ``PATH_PRECISION`` decimals; integral values are
emitted without a decimal point and coordinates are written as ``x,y``.

Monotone curve formula
----------------------
For samples ``p_k`` with ``h_k = x_{k+1} - x_k`` and secants
``d_k = (y_{k+1} - y_k) / h_k``:

 - end tangents are the adjacent secants (``m_0 = d_0``, ``m_n = d_{n-1}``)
 - interior tangents are 0 when ``d_{k-1} * d_k <= 0`` (local extremum) or when
   ``h_{k-1} * h_k <= 0`` (x doubles back),
   otherwise the weighted harmonic mean
   ``3 (h_{k-1} + h_k) / ((2 h_k + h_{k-1}) / d_{k-1} + (h_k + 2 h_{k-1}) / d_k)``
 - Fritsch-Carlson: for each segment with ``a = m_k / d_k`` and
   ``b = m_{k+1} / d_k``, if ``a^2 + b^2 > 9`` both are scaled by ``3 / sqrt(a^2 + b^2)``;
   flat segments force both tangents to 0
 - each segment becomes ``C (x_k + h/3, y_k + m_k h/3) (x_{k+1} - h/3, y_{k+1} - m_{k+1} h/3) p_{k+1}``

With these tangents every Bezier control point stays inside the y-range of
its own segment, so the curve never overshoots an adjacent sample.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence

from config.settings import PATH_PRECISION

from .types import CurveType, Point, PointLike, to_point

__all__ = [
    "CurveBuilder",
    "CurveDefinition",
    "CurveRegistry",
    "curve_registry",
    "register_curve",
    "get_curve_builder",
    "list_curves",
    "format_path_number",
    "format_path_point",
    "create_line_path",
]

_logger = logging.getLogger(__name__)

CurveBuilder = Callable[[Sequence[Point]], str]


def format_path_number(value: float) -> str:
    if not math.isfinite(value):
        _logger.debug("Non-finite path coordinate %r replaced with 0", value)
        return "0"
    rounded = round(value, PATH_PRECISION)
    if rounded.is_integer():
        return str(int(rounded))
    return repr(rounded)


def format_path_point(x: float, y: float) -> str:
    return f"{format_path_number(x)},{format_path_number(y)}"


@dataclass(frozen=True)
class CurveDefinition:
    """Metadata for a registered curve kind."""

    name: str
    builder: CurveBuilder
    description: str


class CurveRegistry:
    def __init__(self) -> None:
        self._curves: Dict[str, CurveDefinition] = {}

    def register(
        self, name: str | CurveType, builder: CurveBuilder, description: str, *, replace: bool = False
    ) -> None:
        key = name.value if isinstance(name, CurveType) else name
        if key in self._curves and not replace:
            raise ValueError(f"Curve already registered: {key}")
        self._curves[key] = CurveDefinition(key, builder, description)

    def get(self, name: str | CurveType | None) -> Optional[CurveBuilder]:
        key = name.value if isinstance(name, CurveType) else name
        definition = self._curves.get(key) if key is not None else None
        return definition.builder if definition else None

    def list_curves(self) -> Dict[str, str]:
        return {k: v.description for k, v in self._curves.items()}


curve_registry = CurveRegistry()


def register_curve(
    name: str | CurveType, builder: CurveBuilder, description: str, *, replace: bool = False
) -> None:
    curve_registry.register(name, builder, description, replace=replace)


def get_curve_builder(name: str | CurveType | None) -> CurveBuilder:
    builder = curve_registry.get(name)
    if builder is None:
        if name not in (None, CurveType.LINEAR.value):
            _logger.debug("Unknown curve %r; using linear segments", name)
        return _linear_path
    return builder


def list_curves() -> Dict[str, str]:
    return curve_registry.list_curves()


def create_line_path(points: Sequence[PointLike], curve: str | CurveType = CurveType.LINEAR) -> str:
    """Build an SVG path through ``points`` using the named curve kind.

    Empty input yields ``""`` and a single point yields a bare ``M`` command.
    """
    resolved = [to_point(p) for p in points]
    if not resolved:
        return ""
    if len(resolved) == 1:
        return f"M {format_path_point(resolved[0].x, resolved[0].y)}"
    return get_curve_builder(curve)(resolved)


# ---------------- Built-in curve builders ---------------------------------


def _linear_path(points: Sequence[Point]) -> str:
    first, *rest = points
    parts = [f"M {format_path_point(first.x, first.y)}"]
    parts.extend(f"L {format_path_point(p.x, p.y)}" for p in rest)
    return " ".join(parts)


def _step_path(points: Sequence[Point], t: float) -> str:
    first, *rest = points
    parts = [f"M {format_path_point(first.x, first.y)}"]
    prev = first
    for point in rest:
        x = format_path_number(point.x)
        y = format_path_number(point.y)
        if t <= 0:
            parts.extend((f"V {y}", f"H {x}"))
        elif t >= 1:
            parts.extend((f"H {x}", f"V {y}"))
        else:
            mid_x = format_path_number(prev.x + (point.x - prev.x) * t)
            parts.extend((f"H {mid_x}", f"V {y}", f"H {x}"))
        prev = point
    return " ".join(parts)


def _cubic_segment(p0: Point, p1: Point, m0: float, m1: float) -> str:
    h = p1.x - p0.x
    cp1 = format_path_point(p0.x + h / 3, p0.y + m0 * h / 3)
    cp2 = format_path_point(p1.x - h / 3, p1.y - m1 * h / 3)
    return f"C {cp1} {cp2} {format_path_point(p1.x, p1.y)}"


def _secants(points: Sequence[Point]) -> List[float]:
    out: List[float] = []
    for p0, p1 in zip(points, points[1:]):
        h = p1.x - p0.x
        out.append((p1.y - p0.y) / h if h != 0 else 0.0)
    return out


def _monotone_path(points: Sequence[Point]) -> str:
    n = len(points)
    secants = _secants(points)
    widths = [p1.x - p0.x for p0, p1 in zip(points, points[1:])]

    tangents = [0.0] * n
    tangents[0] = secants[0]
    tangents[-1] = secants[-1]
    for k in range(1, n - 1):
        d0, d1 = secants[k - 1], secants[k]
        h0, h1 = widths[k - 1], widths[k]
        # x doubling back (h0, h1 of opposite sign) gets a flat tangent too
        if d0 * d1 <= 0 or h0 * h1 <= 0:
            tangents[k] = 0.0
            continue
        denom = (2 * h1 + h0) / d0 + (h1 + 2 * h0) / d1
        tangents[k] = 3 * (h0 + h1) / denom if denom != 0 else 0.0

    for k, d in enumerate(secants):
        if abs(d) < 1e-12:
            tangents[k] = 0.0
            tangents[k + 1] = 0.0
            continue
        alpha = tangents[k] / d
        beta = tangents[k + 1] / d
        if alpha < 0:
            tangents[k] = 0.0
            alpha = 0.0
        if beta < 0:
            tangents[k + 1] = 0.0
            beta = 0.0
        s = alpha * alpha + beta * beta
        if s > 9:
            tau = 3 / math.sqrt(s)
            tangents[k] = tau * alpha * d
            tangents[k + 1] = tau * beta * d

    parts = [f"M {format_path_point(points[0].x, points[0].y)}"]
    for k in range(n - 1):
        parts.append(_cubic_segment(points[k], points[k + 1], tangents[k], tangents[k + 1]))
    return " ".join(parts)


def _natural_path(points: Sequence[Point]) -> str:
    if len(points) == 2:
        return _linear_path(points)
    widths = [p1.x - p0.x for p0, p1 in zip(points, points[1:])]
    if any(h * widths[0] <= 0 for h in widths):
        _logger.debug("Natural spline needs strictly ordered x values; using linear segments")
        return _linear_path(points)

    n = len(points) - 1
    # Tridiagonal system for second derivatives, zero at both ends.
    sub = [0.0] * (n + 1)
    diag = [1.0] * (n + 1)
    sup = [0.0] * (n + 1)
    rhs = [0.0] * (n + 1)
    for i in range(1, n):
        h0, h1 = widths[i - 1], widths[i]
        sub[i] = h0
        diag[i] = 2 * (h0 + h1)
        sup[i] = h1
        rhs[i] = 6 * (
            (points[i + 1].y - points[i].y) / h1 - (points[i].y - points[i - 1].y) / h0
        )

    # Thomas algorithm
    c_prime = [0.0] * (n + 1)
    d_prime = [0.0] * (n + 1)
    for i in range(1, n + 1):
        denom = diag[i] - sub[i] * c_prime[i - 1]
        c_prime[i] = sup[i] / denom
        d_prime[i] = (rhs[i] - sub[i] * d_prime[i - 1]) / denom
    second = [0.0] * (n + 1)
    for i in range(n - 1, 0, -1):
        second[i] = d_prime[i] - c_prime[i] * second[i + 1]

    parts = [f"M {format_path_point(points[0].x, points[0].y)}"]
    for i in range(n):
        p0, p1 = points[i], points[i + 1]
        h = widths[i]
        slope = (p1.y - p0.y) / h
        m0 = slope - h * (2 * second[i] + second[i + 1]) / 6
        m1 = slope + h * (second[i] + 2 * second[i + 1]) / 6
        parts.append(_cubic_segment(p0, p1, m0, m1))
    return " ".join(parts)


register_curve(CurveType.LINEAR, _linear_path, "Straight segments between samples")
register_curve(CurveType.STEP, lambda pts: _step_path(pts, 0.5), "Step at the midpoint")
register_curve(CurveType.STEP_BEFORE, lambda pts: _step_path(pts, 0.0), "Vertical then horizontal")
register_curve(CurveType.STEP_AFTER, lambda pts: _step_path(pts, 1.0), "Horizontal then vertical")
register_curve(CurveType.MONOTONE, _monotone_path, "Monotone cubic interpolation")
register_curve(CurveType.NATURAL, _natural_path, "Natural cubic spline")
