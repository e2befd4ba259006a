"""Responsive layout rules for narrow charts.

Rules:
    - Hide the legend if the chart width (px) < MIN_LEGEND_WIDTH.
    - Keep every second tick if there are more than MAX_DENSE_TICKS ticks
      and the chart is narrow.
"""

from __future__ import annotations

import logging
from typing import List, Sequence, TypeVar

from config.settings import MAX_DENSE_TICKS, MIN_LEGEND_WIDTH

__all__ = ["should_show_legend", "thin_ticks"]

_logger = logging.getLogger(__name__)

T = TypeVar("T")


def should_show_legend(width: float) -> bool:
    return width >= MIN_LEGEND_WIDTH


def thin_ticks(ticks: Sequence[T], width: float) -> List[T]:
    if len(ticks) > MAX_DENSE_TICKS and width < MIN_LEGEND_WIDTH:
        _logger.debug("Thinning %d ticks for width %s", len(ticks), width)
        return list(ticks[::2])
    return list(ticks)
