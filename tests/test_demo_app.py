import random

import pytest

from tuigallery.demo_app import App, Signal, StatefulList, TabsState
from tuigallery.signals import SinSignal


def make_app():
    return App("Demo", True, random.Random(7))


def test_tabs_wrap_forward_and_back():
    tabs = TabsState(["a", "b", "c"])
    tabs.previous()
    assert tabs.index == 2
    tabs.next()
    assert tabs.index == 0
    tabs.next()
    assert tabs.index == 1


def test_stateful_list_starts_unselected():
    items = StatefulList(["x", "y", "z"])
    assert items.selected is None
    items.previous()
    assert items.selected == 0


def test_stateful_list_next_wraps():
    items = StatefulList(["x", "y", "z"])
    for _ in range(3):
        items.next()
    assert items.selected == 2
    items.next()
    assert items.selected == 0


def test_stateful_list_previous_wraps():
    items = StatefulList(["x", "y", "z"], selected=0)
    items.previous()
    assert items.selected == 2
    items.previous()
    assert items.selected == 1


def test_signal_slides_window():
    source = SinSignal(1.0, 2.0, 3.0)
    points = source.take(5)
    old = list(points)
    signal = Signal(source, points, 2)
    signal.on_tick()
    assert len(signal.points) == 5
    assert signal.points[:3] == old[2:]
    assert [x for x, _ in signal.points[3:]] == [5.0, 6.0]


def test_app_initial_state():
    app = make_app()
    assert app.title == "Demo"
    assert app.tabs.titles == ["Tab0", "Tab1", "Tab2"]
    assert len(app.sparkline.points) == 300
    assert len(app.signals.sin1.points) == 100
    assert len(app.signals.sin2.points) == 200
    assert app.signals.window == [0.0, 20.0]
    assert len(app.tasks.items) == 24
    assert len(app.logs.items) == 26
    assert len(app.barchart) == 24
    assert [s.name for s in app.servers] == [
        "NorthAmerica-1",
        "Europe-1",
        "SouthAmerica-1",
        "Asia-1",
    ]
    assert app.show_chart is True
    assert app.should_quit is False


def test_on_key_quit_and_toggle():
    app = make_app()
    app.on_key("t")
    assert app.show_chart is False
    app.on_key("t")
    assert app.show_chart is True
    app.on_key("x")
    assert app.should_quit is False
    app.on_key("q")
    assert app.should_quit is True


def test_navigation_moves_tabs_and_tasks():
    app = make_app()
    app.on_right()
    assert app.tabs.index == 1
    app.on_left()
    app.on_left()
    assert app.tabs.index == 2
    app.on_down()
    assert app.tasks.selected == 0
    app.on_up()
    assert app.tasks.selected == 23


def test_on_tick_rotates_and_advances():
    app = make_app()
    last_log = app.logs.items[-1]
    last_event = app.barchart[-1]
    sparkline_len = len(app.sparkline.points)
    app.on_tick()
    assert app.logs.items[0] == last_log == ("Event26", "INFO")
    assert app.barchart[0] == last_event == ("B24", 5)
    assert app.progress == pytest.approx(0.001)
    assert app.signals.window == [1.0, 21.0]
    assert len(app.sparkline.points) == sparkline_len
    assert len(app.signals.sin2.points) == 200


def test_progress_wraps_after_one():
    app = make_app()
    app.progress = 1.0
    app.on_tick()
    assert app.progress == 0.0