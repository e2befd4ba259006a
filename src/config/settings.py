"""Global defaults for the chart primitive engine."""

from __future__ import annotations

import math
import os
from typing import Final


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


# Axis ticks
DEFAULT_TICK_COUNT: Final = 5

# Interaction emphasis
DEFAULT_ACTIVE_OPACITY: Final = 1.0
DEFAULT_INACTIVE_OPACITY: Final = 0.25

# Categorical scales
DEFAULT_POINT_PADDING: Final = 0.5
DEFAULT_BAND_PADDING_INNER: Final = 0.1
DEFAULT_BAND_PADDING_OUTER: Final = 0.1
DEFAULT_BAND_ALIGN: Final = 0.5

# Polar geometry
DEFAULT_RADAR_START_ANGLE: Final = -math.pi / 2
FULL_CIRCLE: Final = math.pi * 2
FULL_CIRCLE_EPSILON: Final = 0.0001  # keeps a 360° arc renderable as an SVG arc

# Decimal places kept for coordinates in emitted SVG path strings
PATH_PRECISION: Final = _env_int("CHART_PATH_PRECISION", 3)

# Responsive rules (px)
MIN_LEGEND_WIDTH: Final = 450
MAX_DENSE_TICKS: Final = 14
