import pytest

from gui.charting.interaction import (
    UNSET,
    ChartInteraction,
    InteractionState,
    get_active_index,
    get_chart_element_opacity,
)
from gui.charting.types import HoveredPoint
from gui.services.event_bus import ChartEvent


BARS = [{"x": "a", "y": 1}, {"x": "b", "y": 2}, {"x": "c", "y": 3}]


def test_unset_sentinel_is_distinct_from_none():
    assert UNSET is not None
    assert repr(UNSET) == "UNSET"
    assert not UNSET


def test_get_active_index_precedence():
    assert get_active_index(1, 2) == 2
    assert get_active_index(1, None) == 1
    assert get_active_index(1, None, hoverable=False) is None
    assert get_active_index(None, None) is None


def test_element_opacity_rules():
    assert get_chart_element_opacity(0, None) is None
    assert get_chart_element_opacity(0, None, default_opacity=0.9) == 0.9
    assert get_chart_element_opacity(1, 1) == 1.0
    assert get_chart_element_opacity(0, 1) == 0.25
    assert get_chart_element_opacity(0, 1, active_opacity=0.8, inactive_opacity=0.1) == 0.1


def test_uncontrolled_hover_updates_local_state(recorder):
    ia = ChartInteraction(hoverable=True, data=BARS, on_hover_change=recorder.cb("hover"))
    ia.handle_hover_enter(1)
    assert ia.resolved_hovered_index == 1
    assert ia.active_index == 1
    ia.handle_hover_leave()
    assert ia.resolved_hovered_index is None
    assert recorder.calls == [("hover", (1, BARS[1])), ("hover", (None, None))]


def test_hover_ignored_when_not_hoverable(recorder):
    ia = ChartInteraction(hoverable=False, on_hover_change=recorder.cb("hover"))
    ia.handle_hover_enter(2)
    ia.handle_hover_leave()
    assert ia.local_hovered_index is None
    assert recorder.calls == []


def test_controlled_hover_notifies_but_keeps_prop(recorder):
    ia = ChartInteraction(hoverable=True, hovered_index=None, on_hover_change=recorder.cb("hover"))
    ia.handle_hover_enter(2)
    assert ia.hover_controlled
    assert ia.resolved_hovered_index is None
    assert ia.local_hovered_index is None
    assert recorder.calls == [("hover", (2, None))]


def test_click_toggles_uncontrolled_selection(recorder):
    ia = ChartInteraction(
        selectable=True,
        data=BARS,
        on_select_change=recorder.cb("select"),
        on_item_click=recorder.cb("click"),
    )
    ia.handle_click(0)
    assert ia.resolved_selected_index == 0
    ia.handle_click(0)
    assert ia.resolved_selected_index is None
    ia.handle_click(2)
    assert ia.resolved_selected_index == 2
    assert recorder.calls == [
        ("select", (0, BARS[0])),
        ("click", (0, BARS[0])),
        ("select", (None, None)),
        ("click", (0, BARS[0])),
        ("select", (2, BARS[2])),
        ("click", (2, BARS[2])),
    ]


def test_click_when_not_selectable_only_reports_click(recorder):
    ia = ChartInteraction(
        selectable=False, on_select_change=recorder.cb("select"), on_item_click=recorder.cb("click")
    )
    ia.handle_click(1)
    assert ia.resolved_selected_index is None
    assert recorder.names() == ["click"]


def test_controlled_selection_toggles_against_prop(recorder):
    ia = ChartInteraction(selectable=True, selected_index=1, on_select_change=recorder.cb("select"))
    ia.handle_click(1)
    # owner has not updated the prop yet
    assert ia.resolved_selected_index == 1
    assert recorder.calls[0] == ("select", (None, None))

    ia.selected_index_prop = None
    ia.handle_click(1)
    assert recorder.calls[-1] == ("select", (1, None))


def test_selection_beats_hover_for_active_index_and_opacity():
    ia = ChartInteraction(hoverable=True, selectable=True, hovered_index=1, selected_index=2)
    assert ia.active_index == 2
    assert ia.get_element_opacity(2) == 1.0
    assert ia.get_element_opacity(1) == 0.25
    assert ia.state == InteractionState(hovered_index=1, selected_index=2)


def test_click_while_hovering_makes_selection_active():
    ia = ChartInteraction(hoverable=True, selectable=True, data=BARS)
    ia.handle_hover_enter(1)
    ia.handle_click(2)
    assert ia.resolved_hovered_index == 1
    assert ia.active_index == 2
    assert ia.get_element_opacity(2) == 1.0
    assert ia.get_element_opacity(1) == 0.25
    assert ia.get_element_opacity(0) == 0.25


def test_active_index_ignores_hover_when_not_hoverable():
    ia = ChartInteraction(hoverable=False, hovered_index=1)
    assert ia.active_index is None
    assert ia.get_element_opacity(1) is None


def test_returning_prop_to_unset_restores_local_state():
    ia = ChartInteraction(hoverable=True)
    ia.handle_hover_enter(0)
    ia.hovered_index_prop = 3
    assert ia.resolved_hovered_index == 3
    ia.hovered_index_prop = UNSET
    assert ia.resolved_hovered_index == 0


def test_set_controlled_updates_only_given_axes():
    ia = ChartInteraction(hoverable=True, selectable=True, hovered_index=1)
    ia.set_controlled(selected_index=None)
    assert ia.hover_controlled and ia.selection_controlled
    assert ia.resolved_hovered_index == 1

    ia.handle_click(2)
    assert ia.resolved_selected_index is None

    ia.set_controlled(hovered_index=UNSET, selected_index=UNSET)
    assert not ia.hover_controlled
    # clicks made while controlled never touched local state
    assert ia.resolved_selected_index is None


@pytest.mark.parametrize("key", ["Enter", " ", "Space", "Spacebar"])
def test_activation_keys_select(key):
    ia = ChartInteraction(selectable=True)
    assert ia.handle_key(key, 1) is True
    assert ia.resolved_selected_index == 1


def test_other_keys_and_non_selectable_are_ignored():
    ia = ChartInteraction(selectable=True)
    assert ia.handle_key("Escape", 1) is False
    assert ia.resolved_selected_index is None
    assert ChartInteraction(selectable=False).handle_key("Enter", 1) is False


def test_legend_forwarding():
    ia = ChartInteraction(hoverable=True, selectable=True)
    ia.handle_legend_hover(2)
    assert ia.resolved_hovered_index == 2
    ia.handle_legend_leave()
    assert ia.resolved_hovered_index is None
    ia.handle_legend_click(1)
    assert ia.resolved_selected_index == 1


def test_point_hover_and_click(three_series, recorder):
    ia = ChartInteraction(
        selectable=True,
        data=three_series,
        on_point_hover=recorder.cb("point_hover"),
        on_point_click=recorder.cb("point_click"),
        on_select_change=recorder.cb("select"),
    )
    ia.handle_point_enter(1, 2)
    assert ia.hovered_point == HoveredPoint(1, 2)
    assert recorder.calls[-1] == ("point_hover", (1, 2, {"x": "Q3", "y": 6}))

    ia.handle_point_leave()
    assert ia.hovered_point is None
    assert recorder.calls[-1] == ("point_hover", (None, None, None))

    ia.handle_point_click(0, 0)
    assert ia.resolved_selected_index == 0
    assert recorder.names()[-2:] == ["point_click", "select"]


def test_events_published_on_bus(bus):
    seen = []
    for event in ChartEvent:
        bus.subscribe(event, lambda evt: seen.append((evt.name, evt.payload)))

    ia = ChartInteraction(hoverable=True, selectable=True, data=BARS, bus=bus)
    ia.handle_hover_enter(0)
    ia.handle_click(1)

    assert seen == [
        ("hover_changed", {"index": 0, "datum": BARS[0]}),
        ("selection_changed", {"index": 1, "datum": BARS[1]}),
        ("item_clicked", {"index": 1, "datum": BARS[1]}),
    ]


def test_reset_clears_local_state():
    ia = ChartInteraction(hoverable=True, selectable=True)
    ia.handle_hover_enter(1)
    ia.handle_click(1)
    ia.handle_point_enter(0, 0)
    ia.reset()
    assert ia.state == InteractionState(None, None)
    assert ia.hovered_point is None
