"""Bar geometry helpers."""

from __future__ import annotations

from typing import Optional, Tuple

__all__ = ["clamp_bar_width", "ensure_bar_min_height", "get_bar_value_label_y"]


def clamp_bar_width(width: float, max_width: Optional[float] = None) -> float:
    if max_width is None or max_width <= 0:
        return width
    return min(width, max_width)


def ensure_bar_min_height(
    bar_y: float, bar_height: float, baseline: float, min_height: float
) -> Tuple[float, float]:
    """Return ``(y, height)`` so near-zero bars stay visible.

    The bar stays anchored at ``baseline``: bars above it grow upward,
    bars hanging below it (negative values) grow downward. Zero-height bars
    are left alone.
    """
    if min_height <= 0 or bar_height == 0 or bar_height >= min_height:
        return bar_y, bar_height
    if bar_y < baseline:
        return baseline - min_height, min_height
    return baseline, min_height


def get_bar_value_label_y(bar_y: float, bar_height: float, position: str = "top", offset: float = 8) -> float:
    if position == "inside":
        return bar_y + bar_height / 2
    return bar_y - offset
