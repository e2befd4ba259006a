"""Chart series palette helpers.

The default palette uses CSS custom properties with hex fallbacks so a host
theme can override each slot (``var(--tiger-chart-1,#2563eb)``). Colors are
passed through untouched; only ``extend_palette`` does color math, and only
on colors whose hex value it can read (plain ``#rrggbb`` / ``#rgb`` or the
hex fallback inside ``var(...)``).
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, List, Optional, Sequence

__all__ = [
    "DEFAULT_CHART_COLORS",
    "resolve_chart_palette",
    "palette_color",
    "extend_palette",
]

_logger = logging.getLogger(__name__)

DEFAULT_CHART_COLORS: tuple[str, ...] = (
    "var(--tiger-chart-1,#2563eb)",
    "var(--tiger-chart-2,#22c55e)",
    "var(--tiger-chart-3,#f97316)",
    "var(--tiger-chart-4,#a855f7)",
    "var(--tiger-chart-5,#0ea5e9)",
    "var(--tiger-chart-6,#ef4444)",
)

_HEX_RE = re.compile(r"#([0-9a-fA-F]{6}|[0-9a-fA-F]{3})\b")


def resolve_chart_palette(
    colors: Optional[Sequence[str]] = None, fallback_color: Optional[str] = None
) -> List[str]:
    """``colors`` if non-empty, else ``[fallback_color]``, else the defaults."""
    if colors:
        return list(colors)
    if fallback_color:
        return [fallback_color]
    return list(DEFAULT_CHART_COLORS)


def palette_color(palette: Sequence[str], index: int) -> str:
    """Color for ``index``, cycling when the palette is shorter than the data."""
    if not palette:
        palette = DEFAULT_CHART_COLORS
    return palette[max(index, 0) % len(palette)]


def _hex_of(color: str) -> Optional[str]:
    match = _HEX_RE.search(color)
    if match is None:
        return None
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return "#" + digits.lower()


def _hex_to_rgb(h: str) -> tuple[int, int, int]:
    h = h.lstrip("#")
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def _rgb_to_hex(rgb: tuple[int, int, int]) -> str:
    return "#" + "".join(f"{c:02x}" for c in rgb)


def _blend(src: str, dst: str, t: float) -> str:
    """Move ``src`` a fraction ``t`` toward ``dst``; unreadable colors pass through."""
    src_hex, dst_hex = _hex_of(src), _hex_of(dst)
    if src_hex is None or dst_hex is None:
        return src
    sr, sg, sb = _hex_to_rgb(src_hex)
    dr, dg, db = _hex_to_rgb(dst_hex)
    return _rgb_to_hex(
        (
            int(sr + (dr - sr) * t + 0.5),
            int(sg + (dg - sg) * t + 0.5),
            int(sb + (db - sb) * t + 0.5),
        )
    )


def extend_palette(seeds: Iterable[str], count: int) -> List[str]:
    """Return ``count`` colors built from ``seeds``.

    The first pass returns the seeds unchanged. Each further pass blends
    every seed 15% more toward the first seed (capped at 60%), giving a
    tonal family instead of exact repeats.
    """
    base = list(seeds) or list(DEFAULT_CHART_COLORS)
    if count <= len(base):
        return base[: max(count, 0)]
    _logger.debug("Extending %d-color palette to %d colors", len(base), count)
    primary = base[0]
    out: List[str] = []
    for i in range(count):
        round_idx, slot = divmod(i, len(base))
        color = base[slot]
        if round_idx > 0:
            color = _blend(color, primary, min(0.15 * round_idx, 0.6))
        out.append(color)
    return out
