from gui.charting.legend import (
    build_chart_legend_items,
    default_radar_tooltip_formatter,
    default_series_xy_tooltip_formatter,
    default_tooltip_formatter,
    default_xy_tooltip_formatter,
    resolve_chart_tooltip_content,
    resolve_multi_series_tooltip_content,
    resolve_series_data,
)
from gui.charting.types import ChartSeriesPoint, HoveredPoint

PALETTE = ["#111111", "#222222"]


def _label(datum, index):
    return datum["name"]


def test_legend_all_active_without_focus():
    data = [{"name": "A"}, {"name": "B"}, {"name": "C"}]
    items = build_chart_legend_items(data, PALETTE, None, _label)
    assert [i.active for i in items] == [True, True, True]
    assert [i.color for i in items] == ["#111111", "#222222", "#111111"]
    assert [i.label for i in items] == ["A", "B", "C"]


def test_legend_only_focused_entry_active():
    data = [{"name": "A"}, {"name": "B"}]
    items = build_chart_legend_items(data, PALETTE, 1, _label)
    assert [i.active for i in items] == [False, True]
    assert [i.index for i in items] == [0, 1]


def test_legend_custom_color_with_palette_fallback():
    data = [{"name": "A", "color": "red"}, {"name": "B"}]
    items = build_chart_legend_items(data, PALETTE, None, _label, lambda d, i: d.get("color"))
    assert [i.color for i in items] == ["red", "#222222"]


def test_tooltip_content_single_series():
    data = [{"x": "Mon", "y": 4.0}, {"label": "Peak", "y": 9.5}, {"y": 2}]
    fmt = default_xy_tooltip_formatter
    assert resolve_chart_tooltip_content(None, data, None, fmt) == ""
    assert resolve_chart_tooltip_content(7, data, None, fmt) == ""
    assert resolve_chart_tooltip_content(0, data, None, fmt) == "Mon: 4"
    assert resolve_chart_tooltip_content(1, data, None, fmt) == "Peak: 9.5"
    assert resolve_chart_tooltip_content(2, data, None, fmt) == "#3: 2"
    custom = resolve_chart_tooltip_content(0, data, lambda d, i: f"{i}!", fmt)
    assert custom == "0!"


def test_tooltip_content_multi_series(three_series):
    fmt = default_series_xy_tooltip_formatter
    assert resolve_multi_series_tooltip_content(None, three_series, None, fmt) == ""
    assert resolve_multi_series_tooltip_content(HoveredPoint(5, 0), three_series, None, fmt) == ""
    assert resolve_multi_series_tooltip_content(HoveredPoint(0, 9), three_series, None, fmt) == ""
    text = resolve_multi_series_tooltip_content(HoveredPoint(1, 1), three_series, None, fmt)
    assert text == "South · Q2: 5"
    unnamed = resolve_multi_series_tooltip_content(HoveredPoint(2, 0), three_series, None, fmt)
    assert unnamed == "Series 3 · Q1: 2"


def test_radar_and_generic_formatters():
    assert default_radar_tooltip_formatter({"value": 7}, 0, 2, None) == "Series 1 · #3: 7"
    assert default_radar_tooltip_formatter({"label": "Speed", "value": 7}, 0, 0, {"name": "Car"}) == (
        "Car · Speed: 7"
    )
    assert default_tooltip_formatter("Mon", 3) == "Mon: 3"
    assert default_tooltip_formatter(None, 3.0, "Sales", 0) == "Sales · #1: 3"
    assert default_tooltip_formatter(None, 3) == ": 3"


def test_xy_formatter_accepts_objects():
    assert default_xy_tooltip_formatter(ChartSeriesPoint(x=2021, y=12), 0) == "2021: 12"
    assert default_xy_tooltip_formatter({"x": "a"}, 0) == "a: "


def test_resolve_series_data():
    series = [{"name": "S", "data": [1]}]
    assert resolve_series_data(series, [{"y": 1}]) == series
    wrapped = resolve_series_data(None, [{"y": 1}], {"name": "Default"})
    assert wrapped == [{"name": "Default", "data": [{"y": 1}]}]
    assert resolve_series_data([], []) == []
    assert resolve_series_data(None, None) == []


def test_tooltip_content_plain_list_series_matches_point_hover():
    from gui.charting.interaction import ChartInteraction

    series = [[{"x": "Q1", "y": 1}], [{"x": "Q1", "y": 4}]]
    seen = []
    ia = ChartInteraction(data=series, on_point_hover=lambda s, p, d: seen.append(d))
    ia.handle_point_enter(1, 0)
    assert seen == [{"x": "Q1", "y": 4}]
    text = resolve_multi_series_tooltip_content(
        ia.hovered_point, series, None, default_series_xy_tooltip_formatter
    )
    assert text == "Series 2 · Q1: 4"
