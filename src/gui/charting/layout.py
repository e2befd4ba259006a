"""Plot area layout helpers."""

from __future__ import annotations

from typing import Mapping

from .types import ChartPadding, ChartPaddingBox, ChartRect

__all__ = ["normalize_chart_padding", "get_chart_inner_rect"]


def normalize_chart_padding(padding: ChartPadding = None) -> ChartPaddingBox:
    """Expand a number or partial mapping into an explicit padding box."""
    if isinstance(padding, (int, float)) and not isinstance(padding, bool):
        return ChartPaddingBox(top=padding, right=padding, bottom=padding, left=padding)
    if isinstance(padding, Mapping):
        return ChartPaddingBox(
            top=padding.get("top") or 0,
            right=padding.get("right") or 0,
            bottom=padding.get("bottom") or 0,
            left=padding.get("left") or 0,
        )
    return ChartPaddingBox()


def get_chart_inner_rect(width: float, height: float, padding: ChartPadding = None) -> ChartRect:
    """Return the plotting rectangle left after subtracting ``padding``.

    Width and height never go negative; oversized padding collapses the
    rectangle to zero instead.
    """
    box = normalize_chart_padding(padding)
    return ChartRect(
        x=box.left,
        y=box.top,
        width=max(0, width - box.left - box.right),
        height=max(0, height - box.top - box.bottom),
    )
