from tuigallery.button import (
    BLUE,
    GREEN,
    RED,
    Button,
    ButtonBar,
    MouseEvent,
    MouseEventKind,
    State,
)
from tuigallery.terminal import render_to_text


def test_colors_per_state():
    assert Button("x", RED, State.NORMAL).colors() == (
        RED.background,
        RED.text,
        RED.shadow,
        RED.highlight,
    )
    assert Button("x", RED, State.SELECTED).colors() == (
        RED.highlight,
        RED.text,
        RED.shadow,
        RED.highlight,
    )
    assert Button("x", RED, State.ACTIVE).colors() == (
        RED.background,
        RED.text,
        RED.highlight,
        RED.shadow,
    )


def test_theme_values_from_palette():
    assert Button("x", BLUE, State.NORMAL).colors()[0] == (48, 72, 144)
    assert Button("x", GREEN, State.SELECTED).colors()[0] == (64, 192, 64)


def test_button_render_three_rows():
    lines = render_to_text(Button("Red").render(15, 3), 15, 3).split("\n")
    assert lines[0] == "▔" * 15
    assert lines[2] == "▁" * 15
    assert lines[1].strip() == "Red"


def test_button_label_is_centered():
    line = render_to_text(Button("Green").render(15, 1), 15, 1)
    left = len(line) - len(line.lstrip())
    right = len(line) - len(line.rstrip())
    assert line.strip() == "Green"
    assert abs(left - right) <= 1


def test_button_label_cropped_when_narrow():
    text = render_to_text(Button("Blue").render(2, 1), 2, 1)
    assert text == "Bl"


def test_key_right_moves_selection_and_clamps():
    bar = ButtonBar()
    for _ in range(4):
        assert bar.handle_key("right") is True
    assert bar.selected == 2
    assert bar.states == [State.NORMAL, State.NORMAL, State.SELECTED]


def test_key_left_stays_at_first():
    bar = ButtonBar()
    bar.handle_key("h")
    assert bar.selected == 0
    assert bar.states[0] is State.SELECTED


def test_space_toggles_active():
    bar = ButtonBar()
    bar.handle_key(" ")
    assert bar.states[0] is State.ACTIVE
    bar.handle_key(" ")
    assert bar.states[0] is State.NORMAL


def test_quit_key_stops():
    assert ButtonBar().handle_key("q") is False


def test_mouse_move_selects_by_column():
    bar = ButtonBar()
    bar.handle_mouse(MouseEvent(MouseEventKind.MOVED, 20))
    assert bar.selected == 1
    assert bar.states == [State.NORMAL, State.SELECTED, State.NORMAL]
    bar.handle_mouse(MouseEvent(MouseEventKind.MOVED, 40))
    assert bar.selected == 2


def test_mouse_move_keeps_active_buttons():
    bar = ButtonBar()
    bar.handle_mouse(MouseEvent(MouseEventKind.LEFT_DOWN, 0))
    assert bar.states[0] is State.ACTIVE
    bar.handle_mouse(MouseEvent(MouseEventKind.MOVED, 16))
    assert bar.states[0] is State.ACTIVE
    assert bar.states[1] is State.SELECTED


def test_other_mouse_events_ignored():
    bar = ButtonBar()
    bar.handle_mouse(MouseEvent(MouseEventKind.RIGHT_DOWN, 0))
    assert bar.states == [State.SELECTED, State.NORMAL, State.NORMAL]


def test_bar_render_layout():
    lines = render_to_text(ButtonBar().render(60, 6), 60, 6).split("\n")
    assert lines[0].startswith("Custom Widget Example (mouse enabled)")
    label_row = lines[2]
    assert label_row.index("Red") < label_row.index("Green") < label_row.index("Blue")
    assert lines[4].startswith("←/→: select, Space: toggle, q: quit")