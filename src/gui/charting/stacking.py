"""Series stacking for stacked area / bar charts.

Categories are aligned by position: point ``k`` of every series belongs to
category ``k`` regardless of its ``x`` or label. Stacking is purely additive
in series order, so negative values pull the running total down instead of
forming a separate negative stack.
"""

from __future__ import annotations

import math
from typing import Any, List, Sequence

from .types import StackedPoint, read_field

__all__ = ["stack_series_data", "get_stacked_extent_values"]


def _point_value(datum: Any) -> float:
    raw = read_field(datum, "y")
    if raw is None:
        raw = read_field(datum, "value", 0.0)
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return 0.0
    return value if math.isfinite(value) else 0.0


def stack_series_data(
    series_list: Sequence[Sequence[Any]], *, baseline: float = 0.0
) -> List[List[StackedPoint]]:
    """Convert parallel series into cumulative ``(y0, y1)`` bands.

    For series ``i`` at category ``k``: ``y0 = baseline + sum(values of
    series 0..i-1 at k)`` and ``y1 = y0 + value``. The last series' ``y1``
    therefore equals the category total (plus ``baseline``).

    Each datum's ``y`` is used, falling back to ``value``.
    """
    totals: List[float] = []
    stacked: List[List[StackedPoint]] = []
    for series in series_list:
        band: List[StackedPoint] = []
        for k, datum in enumerate(series):
            if k == len(totals):
                totals.append(baseline)
            y0 = totals[k]
            y1 = y0 + _point_value(datum)
            totals[k] = y1
            band.append(StackedPoint(original=datum, y0=y0, y1=y1))
        stacked.append(band)
    return stacked


def get_stacked_extent_values(stacked: Sequence[Sequence[StackedPoint]]) -> List[float]:
    """Every band edge (``y0`` and ``y1``), for feeding ``get_number_extent``."""
    values: List[float] = []
    for band in stacked:
        for point in band:
            values.extend((point.y0, point.y1))
    return values
