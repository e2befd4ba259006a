"""Charting primitive engine.

Framework-agnostic computations shared by the bar, line, area, scatter,
pie/donut and radar chart components of every view binding: scales, ticks,
SVG path strings, stacking, interaction state, legend and tooltip content.

Nothing in this package renders; view layers feed its outputs into their own
SVG elements. Importing it registers the built-in curve kinds.
"""

from .types import (  # noqa: F401
    AxisLine,
    ChartAxisTick,
    ChartLegendItem,
    ChartPaddingBox,
    ChartRect,
    ChartScale,
    ChartScaleType,
    ChartSeriesPoint,
    CurveType,
    HoveredPoint,
    PieArc,
    PieLabelLine,
    Point,
    RadarLabel,
    RadarPoint,
    StackedPoint,
    read_field,
    series_points,
)
from .layout import get_chart_inner_rect, normalize_chart_padding  # noqa: F401
from .scales import (  # noqa: F401
    create_band_scale,
    create_linear_scale,
    create_point_scale,
    get_number_extent,
)
from .ticks import (  # noqa: F401
    format_tick_value,
    get_chart_axis_ticks,
    get_chart_grid_line_dasharray,
    get_linear_ticks,
    get_nice_step,
)
from .curves import (  # noqa: F401
    create_line_path,
    curve_registry,
    get_curve_builder,
    list_curves,
    register_curve,
)
from .geometry import (  # noqa: F401
    compute_pie_hover_offset,
    compute_pie_label_line,
    create_area_path,
    create_pie_arc_path,
    create_polygon_path,
    get_pie_arcs,
    get_radar_angles,
    get_radar_axis_labels,
    get_radar_axis_lines,
    get_radar_grid_paths,
    get_radar_level_labels,
    get_radar_points,
    polar_to_cartesian,
    resolve_donut_inner_radius,
    resolve_radar_max_value,
)
from .stacking import get_stacked_extent_values, stack_series_data  # noqa: F401
from .bars import clamp_bar_width, ensure_bar_min_height, get_bar_value_label_y  # noqa: F401
from .interaction import (  # noqa: F401
    UNSET,
    ChartInteraction,
    InteractionState,
    get_active_index,
    get_chart_element_opacity,
)
from .palette import DEFAULT_CHART_COLORS, extend_palette, palette_color, resolve_chart_palette  # noqa: F401
from .legend import (  # noqa: F401
    build_chart_legend_items,
    default_radar_tooltip_formatter,
    default_series_xy_tooltip_formatter,
    default_tooltip_formatter,
    default_xy_tooltip_formatter,
    resolve_chart_tooltip_content,
    resolve_multi_series_tooltip_content,
    resolve_series_data,
)
from .responsive import should_show_legend, thin_ticks  # noqa: F401
