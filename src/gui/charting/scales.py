"""Scale engine: linear, point and band scales.

Each builder returns an immutable ``ChartScale`` whose ``map`` is a pure
function of its input. Degenerate inputs never raise:

 - a zero-span linear domain maps everything to the range midpoint
 - padding / align values are clamped into ``[0, 1]``
 - unknown categorical keys resolve to the first category
 - an inverted range (``r0 > r1``) is honoured through ``direction``
"""

from __future__ import annotations

import logging
import math
from typing import Any, Iterable, List, Sequence, Tuple

from config.settings import (
    DEFAULT_BAND_ALIGN,
    DEFAULT_BAND_PADDING_INNER,
    DEFAULT_BAND_PADDING_OUTER,
    DEFAULT_POINT_PADDING,
)

from .types import ChartScale, ChartScaleType

__all__ = [
    "create_linear_scale",
    "create_point_scale",
    "create_band_scale",
    "get_number_extent",
]

_logger = logging.getLogger(__name__)


def _clamp_unit(value: float, name: str) -> float:
    clamped = min(1.0, max(0.0, float(value)))
    if clamped != value:
        _logger.debug("Clamped %s=%r into [0, 1]", name, value)
    return clamped


def _to_number(value: Any) -> float | None:
    try:
        numeric = float(value)
    except (TypeError, ValueError):
        return None
    return numeric if math.isfinite(numeric) else None


def create_linear_scale(domain: Sequence[float], range: Sequence[float]) -> ChartScale:
    """Affine map from ``domain=(d0, d1)`` onto ``range=(r0, r1)``.

    ``map(d0) == r0`` and ``map(d1) == r1``. When ``d0 == d1`` every input
    maps to ``(r0 + r1) / 2``.
    """
    d0, d1 = float(domain[0]), float(domain[1])
    r0, r1 = float(range[0]), float(range[1])
    span = d1 - d0
    if span == 0:
        _logger.debug("Zero-span linear domain %r; mapping to range midpoint", (d0, d1))

    def _map(value: Any) -> float:
        if span == 0:
            return (r0 + r1) / 2
        numeric = _to_number(value)
        if numeric is None:
            return r0
        if numeric == d1:
            return r1
        return r0 + ((numeric - d0) / span) * (r1 - r0)

    return ChartScale(type=ChartScaleType.LINEAR, domain=(d0, d1), range=(r0, r1), map=_map)


def _categorical_layout(range: Sequence[float]) -> Tuple[float, float, float]:
    start, end = float(range[0]), float(range[1])
    span = end - start
    direction = 1.0 if span >= 0 else -1.0
    return start, abs(span), direction


def _index_lookup(domain: Iterable[Any]) -> dict[str, int]:
    return {str(value): index for index, value in enumerate(domain)}


def create_point_scale(
    domain: Sequence[Any],
    range: Sequence[float],
    *,
    padding: float = DEFAULT_POINT_PADDING,
) -> ChartScale:
    """Evenly spaced category positions with no band width.

    ``padding`` is expressed in steps and insets the first and last point
    from the range edges. A single category sits at the range midpoint.
    """
    padding = _clamp_unit(padding, "padding")
    start, length, direction = _categorical_layout(range)
    keys: List[Any] = list(domain)
    n = len(keys)
    step = length / (n - 1 + padding * 2) if n > 1 else length
    offset = length / 2 if n <= 1 else step * padding
    lookup = _index_lookup(keys)

    def _map(value: Any) -> float:
        index = lookup.get(str(value), 0)
        return start + direction * (offset + step * index)

    return ChartScale(
        type=ChartScaleType.POINT,
        domain=tuple(keys),
        range=(start, float(range[1])),
        map=_map,
        step=step,
    )


def create_band_scale(
    domain: Sequence[Any],
    range: Sequence[float],
    *,
    padding_inner: float = DEFAULT_BAND_PADDING_INNER,
    padding_outer: float = DEFAULT_BAND_PADDING_OUTER,
    align: float = DEFAULT_BAND_ALIGN,
) -> ChartScale:
    """Categorical scale producing a band start and ``bandwidth`` per key.

    Example: ``create_band_scale(['a', 'b', 'c'], (0, 90), padding_inner=0.2,
    padding_outer=0.1)`` has ``step == 30``, ``bandwidth == 24`` and maps
    ``a -> 3``, ``b -> 33``, ``c -> 63``.
    """
    padding_inner = _clamp_unit(padding_inner, "padding_inner")
    padding_outer = _clamp_unit(padding_outer, "padding_outer")
    align = _clamp_unit(align, "align")
    start, length, direction = _categorical_layout(range)
    keys: List[Any] = list(domain)
    n = len(keys)
    step = length / max(1.0, n - padding_inner + padding_outer * 2) if n > 0 else 0.0
    bandwidth = step * (1 - padding_inner)
    offset = (length - step * (n - padding_inner)) * align
    lookup = _index_lookup(keys)

    def _map(value: Any) -> float:
        index = lookup.get(str(value), 0)
        return start + direction * (offset + step * index)

    return ChartScale(
        type=ChartScaleType.BAND,
        domain=tuple(keys),
        range=(start, float(range[1])),
        map=_map,
        step=step,
        bandwidth=bandwidth,
    )


def get_number_extent(
    values: Iterable[Any],
    *,
    include_zero: bool = False,
    fallback: Tuple[float, float] = (0.0, 1.0),
    padding: float = 0.0,
) -> Tuple[float, float]:
    """Return ``(min, max)`` of the finite numeric ``values``.

    Parameters
    ----------
    include_zero : bool
        Widen the extent so it contains 0 (bar/area baselines).
    fallback : tuple
        Returned when no finite value is present.
    padding : float
        Relative widening applied to both ends (``0.1`` adds 10% of the span).

    A zero-width extent is widened by 10% of its magnitude (or by 1 around
    zero) so scales built from it never collapse.
    """
    numbers = [n for n in (_to_number(v) for v in values) if n is not None]
    if not numbers:
        return (fallback[0], fallback[1])
    lo = min(numbers)
    hi = max(numbers)
    if include_zero:
        lo = min(lo, 0.0)
        hi = max(hi, 0.0)
    if lo == hi:
        pad = abs(lo) * 0.1 or 1.0
        return (lo - pad, hi + pad)
    if padding > 0:
        span = hi - lo
        lo -= span * padding
        hi += span * padding
    return (lo, hi)
