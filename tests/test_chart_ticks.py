import math

import pytest

from gui.charting.scales import create_band_scale, create_linear_scale, create_point_scale
from gui.charting.ticks import (
    format_tick_value,
    get_chart_axis_ticks,
    get_chart_grid_line_dasharray,
    get_linear_ticks,
    get_nice_step,
)


@pytest.mark.parametrize(
    "raw,expected",
    [(19.4, 10), (0.37, 0.2), (3, 2), (7.5, 5), (1, 1), (250, 200), (0.06, 0.05)],
)
def test_nice_step_values(raw, expected):
    assert get_nice_step(raw) == pytest.approx(expected)


def test_nice_step_is_one_two_or_five_times_power_of_ten():
    for raw in (0.0013, 0.9, 4.2, 17, 333, 98765):
        step = get_nice_step(raw)
        mantissa = step / 10 ** math.floor(math.log10(step))
        assert round(mantissa, 9) in (1, 2, 5)


def test_nice_step_degenerate_inputs():
    assert get_nice_step(0) == 1
    assert get_nice_step(-3) == 1
    assert get_nice_step(float("nan")) == 1
    assert get_nice_step(float("inf")) == 1


def test_linear_ticks_zero_to_97():
    assert get_linear_ticks((0, 97), 5) == [0, 10, 20, 30, 40, 50, 60, 70, 80, 90]


def test_linear_ticks_fractional_are_clean():
    ticks = get_linear_ticks((0, 1), 5)
    assert ticks == [0, 0.2, 0.4, 0.6, 0.8, 1.0]


def test_linear_ticks_reversed_and_degenerate_domain():
    assert get_linear_ticks((100, 0), 5) == get_linear_ticks((0, 100), 5)
    assert get_linear_ticks((3, 3)) == [3]


def test_linear_ticks_negative_domain():
    assert get_linear_ticks((-10, 10), 4) == [-10, -5, 0, 5, 10]


def test_axis_ticks_linear_positions_and_labels():
    scale = create_linear_scale((0, 100), (0, 200))
    ticks = get_chart_axis_ticks(scale, tick_count=5)
    assert [t.label for t in ticks] == ["0", "20", "40", "60", "80", "100"]
    assert ticks[-1].position == 200


def test_axis_ticks_band_are_centered():
    scale = create_band_scale(["a", "b", "c"], (0, 90), padding_inner=0.2, padding_outer=0.1)
    ticks = get_chart_axis_ticks(scale)
    assert [t.value for t in ticks] == ["a", "b", "c"]
    assert [t.position for t in ticks] == pytest.approx([15, 45, 75])


def test_axis_ticks_point_scale_and_custom_values_and_format():
    scale = create_point_scale(["x", "y"], (0, 10), padding=0)
    assert [t.position for t in get_chart_axis_ticks(scale)] == [0, 10]

    linear = create_linear_scale((0, 1), (0, 100))
    ticks = get_chart_axis_ticks(linear, tick_values=[0.5], tick_format=lambda v: f"{v:.0%}")
    assert len(ticks) == 1
    assert ticks[0].label == "50%"
    assert ticks[0].position == pytest.approx(50)


def test_format_tick_value():
    assert format_tick_value(10.0) == "10"
    assert format_tick_value(2.5) == "2.5"
    assert format_tick_value("Q1") == "Q1"


def test_grid_line_dasharray():
    assert get_chart_grid_line_dasharray("dashed") == "4 4"
    assert get_chart_grid_line_dasharray("dotted") == "1 4"
    assert get_chart_grid_line_dasharray("solid") is None


def test_nice_step_converts_numeric_types():
    from decimal import Decimal
    from fractions import Fraction

    assert get_nice_step(Decimal("19.4")) == pytest.approx(10)
    assert get_nice_step(Fraction(37, 100)) == pytest.approx(0.2)
    assert get_nice_step("abc") == 1
    assert get_nice_step(None) == 1
