import random

import pytest
from rich.style import Style

from tuigallery.demo_app import App
from tuigallery.demo_ui import draw, log_style, progress_label, server_style


def make_app(title="Crossterm Demo", enhanced=True):
    return App(title, enhanced, random.Random(7))


def lines_of(app, width=120, height=40):
    return draw(app, width, height).plain.split("\n")


@pytest.mark.parametrize(
    "level, color",
    [("ERROR", "magenta"), ("CRITICAL", "red"), ("WARNING", "yellow"), ("INFO", "blue")],
)
def test_log_style(level, color):
    assert log_style(level) == Style(color=color)


def test_unknown_log_level_is_info():
    assert log_style("DEBUG") == log_style("INFO")


def test_server_style_up_is_green():
    assert server_style("Up") == Style(color="green")


def test_server_style_failure():
    style = server_style("Failure")
    assert style.color.name == "red"
    assert style.strike is True
    assert style.blink2 is True


def test_progress_label_format():
    assert progress_label(0.0) == "0.00%"
    assert progress_label(1.0) == "100.00%"


@pytest.mark.parametrize("index", [0, 1, 2])
@pytest.mark.parametrize("width, height", [(120, 40), (50, 12), (7, 3)])
def test_draw_fills_area(index, width, height):
    app = make_app()
    app.tabs.index = index
    lines = draw(app, width, height).plain.split("\n")
    assert len(lines) == height
    assert all(len(line) == width for line in lines)


def test_draw_empty_area():
    assert draw(make_app(), 0, 10).plain == ""
    assert draw(make_app(), 10, 0).plain == ""


def test_title_and_tabs_in_header():
    lines = lines_of(make_app("Demo Title"))
    assert "Demo Title" in lines[0]
    assert " Tab0 │ Tab1 │ Tab2 " in lines[1]


def test_first_tab_contents():
    app = make_app()
    app.progress = 0.5
    text = "\n".join(lines_of(app))
    for part in ("Graphs", "Gauge:", "Sparkline:", "LineGauge:", "Footer", "Bar chart"):
        assert part in text
    assert progress_label(0.5) in text
    assert "CRITICAL Event3" in text


def test_selected_task_gets_marker():
    app = make_app()
    assert "> Item1" not in "\n".join(lines_of(app))
    app.on_down()
    assert "> Item1" in "\n".join(lines_of(app))


def test_chart_can_be_hidden():
    app = make_app()
    assert "X Axis" in "\n".join(lines_of(app))
    app.on_key("t")
    assert "X Axis" not in "\n".join(lines_of(app))


def test_second_tab_shows_servers():
    app = make_app()
    app.on_right()
    text = "\n".join(lines_of(app))
    assert "Servers" in text
    assert "World" in text
    for server in app.servers:
        assert server.name in text


def test_third_tab_shows_colors():
    app = make_app()
    app.on_left()
    text = "\n".join(lines_of(app))
    assert "Colors" in text
    assert "LightMagenta: " in text
    assert "Foreground" in text
    assert "Background" in text