"""Axis tick generation.

Linear axes get "nice" ticks: the step is always ``{1, 2, 5} x 10^k`` so
labels stay human friendly. The resulting tick count only approximates the
requested ``tick_count``; readable numbers win over an exact count.

Categorical axes (band / point) tick every domain value; band ticks are
shifted by half a bandwidth so labels center under their bar.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Callable, List, Optional, Sequence

from config.settings import DEFAULT_TICK_COUNT

from .types import ChartAxisTick, ChartScale, ChartScaleType

__all__ = [
    "get_nice_step",
    "get_linear_ticks",
    "get_chart_axis_ticks",
    "get_chart_grid_line_dasharray",
    "format_tick_value",
]

_logger = logging.getLogger(__name__)


def get_nice_step(step: float) -> float:
    """Snap a raw step down to the nearest ``{1, 2, 5} x 10^k``.

    Non-finite or non-positive input returns 1.
    """
    try:
        step = float(step)
    except (TypeError, ValueError):
        return 1.0
    if not math.isfinite(step) or step <= 0:
        return 1.0
    exponent = math.floor(math.log10(step))
    magnitude = 10.0**exponent
    fraction = step / magnitude
    # log10 rounding can leave fraction a hair outside [1, 10)
    if fraction >= 10:
        magnitude *= 10
        fraction /= 10
    elif fraction < 1:
        magnitude /= 10
        fraction *= 10
    if fraction >= 5:
        nice = 5
    elif fraction >= 2:
        nice = 2
    else:
        nice = 1
    return nice * magnitude


def _round_tick(value: float, step: float) -> float:
    precision = max(0, -math.floor(math.log10(step)) + 1)
    if precision == 0:
        return float(round(value))
    return round(value, precision)


def get_linear_ticks(domain: Sequence[float], count: int = DEFAULT_TICK_COUNT) -> List[float]:
    """Nice tick values covering ``domain`` (inclusive of nice endpoints)."""
    lo = min(float(domain[0]), float(domain[1]))
    hi = max(float(domain[0]), float(domain[1]))
    if lo == hi or not math.isfinite(lo) or not math.isfinite(hi):
        _logger.debug("Degenerate tick domain %r; emitting a single tick", tuple(domain))
        return [lo]
    step = get_nice_step((hi - lo) / max(1, count))
    start = math.ceil(lo / step)
    end = math.floor(hi / step)
    return [_round_tick(i * step, step) for i in range(start, end + 1)]


def format_tick_value(value: Any) -> str:
    """Default tick label: integral floats render without ``.0``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def get_chart_axis_ticks(
    scale: ChartScale,
    *,
    tick_count: int = DEFAULT_TICK_COUNT,
    tick_values: Optional[Sequence[Any]] = None,
    tick_format: Optional[Callable[[Any], str]] = None,
) -> List[ChartAxisTick]:
    """Derive positioned, labelled ticks for ``scale``.

    Parameters
    ----------
    scale : ChartScale
        Scale used to position each tick.
    tick_count : int, default 5
        Approximate tick count for linear scales.
    tick_values : sequence | None
        Caller-controlled ticks, used verbatim when given.
    tick_format : callable | None
        Label formatter; defaults to ``format_tick_value``.
    """
    fmt = tick_format or format_tick_value
    if tick_values is not None:
        values = list(tick_values)
    elif scale.type == ChartScaleType.LINEAR:
        values = get_linear_ticks(scale.domain, tick_count)
    else:
        values = list(scale.domain)

    half_band = 0.0
    if scale.type == ChartScaleType.BAND and scale.bandwidth is not None:
        half_band = scale.bandwidth / 2

    return [
        ChartAxisTick(value=value, position=scale.map(value) + half_band, label=fmt(value))
        for value in values
    ]


def get_chart_grid_line_dasharray(line_style: str) -> Optional[str]:
    if line_style == "dashed":
        return "4 4"
    if line_style == "dotted":
        return "1 4"
    return None
