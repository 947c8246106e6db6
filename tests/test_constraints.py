import pytest

from tuigallery.constraints import (
    AppState,
    ConstraintsApp,
    SelectedTab,
    axis_bar,
)
from tuigallery.explorer import Constraint

TAB_NAMES = ["Min", "Max", "Length", "Percentage", "Ratio", "Fill"]


def _lines(app, width, height):
    return app.render(width, height).plain.split("\n")


def test_tab_order_and_next():
    assert [tab.value for tab in SelectedTab] == TAB_NAMES
    assert SelectedTab.MIN.next() is SelectedTab.MAX
    assert SelectedTab.FILL.next() is SelectedTab.FILL


def test_previous_stops_at_first():
    assert SelectedTab.MIN.previous() is SelectedTab.MIN
    assert SelectedTab.FILL.previous() is SelectedTab.RATIO


@pytest.mark.parametrize("name", TAB_NAMES[:-1])
def test_previous_undoes_next(name):
    tab = SelectedTab(name)
    assert tab.next().previous() is tab
    assert tab.next() is SelectedTab(TAB_NAMES[TAB_NAMES.index(name) + 1])


def test_title_pads_name():
    assert SelectedTab.MIN.title() == "  Min  "
    assert SelectedTab.PERCENTAGE.title().strip() == "Percentage"


@pytest.mark.parametrize("name", TAB_NAMES)
def test_examples_fit_example_count(name):
    tab = SelectedTab(name)
    examples = tab.examples()
    assert 0 < len(examples) <= tab.example_count()
    assert all(isinstance(c, Constraint) for row in examples for c in row)


def test_scroll_is_bounded():
    app = ConstraintsApp()
    app.update_max_scroll_offset()
    app.handle_key("k")
    assert app.scroll_offset == 0
    for _ in range(200):
        app.handle_key("j")
    assert app.scroll_offset == app.max_scroll_offset
    assert app.max_scroll_offset > 0
    app.handle_key("g")
    assert app.scroll_offset == 0
    app.handle_key("G")
    assert app.scroll_offset == app.max_scroll_offset


def test_changing_tab_resets_scroll():
    app = ConstraintsApp()
    app.update_max_scroll_offset()
    app.bottom()
    app.handle_key("l")
    assert app.selected_tab is SelectedTab.MAX
    assert app.scroll_offset == 0
    app.handle_key("left")
    assert app.selected_tab is SelectedTab.MIN


def test_fill_tab_has_smaller_scroll_range():
    app = ConstraintsApp()
    app.update_max_scroll_offset()
    min_range = app.max_scroll_offset
    for _ in range(5):
        app.next()
    assert app.selected_tab is SelectedTab.FILL
    assert app.max_scroll_offset < min_range


@pytest.mark.parametrize("key", ["q", "escape"])
def test_quit_keys(key):
    app = ConstraintsApp()
    app.handle_key(key)
    assert app.state is AppState.QUIT
    assert not app.is_running()


def test_axis_bar_shape():
    bar = axis_bar(80)
    assert bar.startswith("<-")
    assert bar.endswith("->")
    assert "80 px" in bar
    left, right = bar[1:-1].split("80 px")
    assert set(left) == {"-"} and set(right) == {"-"}


def test_render_dimensions_and_header():
    app = ConstraintsApp()
    app.update_max_scroll_offset()
    lines = _lines(app, 80, 30)
    assert len(lines) == 30
    assert all(len(line) == 80 for line in lines)
    assert lines[0].startswith("Constraints")
    assert "Min" in lines[1]


def test_render_shows_examples_of_selected_tab():
    app = ConstraintsApp()
    app.update_max_scroll_offset()
    assert "Percentage(100)" in app.render(80, 30).plain
    for _ in range(5):
        app.next()
    text = app.render(80, 30).plain
    assert "Fill(1)" in text
    assert "Percentage(100)" not in text


def test_scrollbar_appears_when_content_overflows():
    app = ConstraintsApp()
    app.update_max_scroll_offset()
    lines = _lines(app, 80, 20)
    assert lines[6][-1] == "▲"
    assert lines[-1][-1] == "▼"


def test_scrolling_moves_content():
    app = ConstraintsApp()
    app.update_max_scroll_offset()
    before = _lines(app, 80, 20)
    app.down()
    after = _lines(app, 80, 20)
    assert after[6][:-1] == before[7][:-1]