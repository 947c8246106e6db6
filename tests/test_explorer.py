import pytest

from tuigallery.explorer import (
    AppMode,
    Constraint,
    ConstraintName,
    ExplorerApp,
    constraint_block_label,
    spacer_label,
)


def length(value):
    return Constraint(ConstraintName.LENGTH, value)


@pytest.fixture
def app():
    explorer = ExplorerApp()
    explorer.insert_test_defaults()
    return explorer


def test_constraint_display():
    assert str(length(20)) == "Length(20)"
    assert str(Constraint(ConstraintName.PERCENTAGE, 50)) == "Percentage(50)"
    assert str(Constraint(ConstraintName.RATIO, 1, 4)) == "Ratio(1, 4)"
    assert str(Constraint(ConstraintName.FILL, 1)) == "Fill(1)"


def test_constraint_name_of():
    assert ConstraintName.of(Constraint(ConstraintName.MAX, 3)) is ConstraintName.MAX
    assert ConstraintName.of(length(3)) is ConstraintName.LENGTH
    assert str(ConstraintName.PERCENTAGE) == "Percentage"


def test_colors_are_distinct():
    names = ConstraintName.__members__.values()
    mains = {ConstraintName.of(Constraint(name, 1)).color() for name in names}
    lighters = {ConstraintName.of(Constraint(name, 1)).lighter_color() for name in names}
    assert len(mains) == len(names)
    assert len(lighters) == len(names)
    assert mains.isdisjoint(lighters)


def test_defaults(app):
    assert app.constraints == [length(20)] * 3
    assert app.value == 20
    assert app.is_running()


def test_quit_keys():
    for key in ("q", "escape"):
        explorer = ExplorerApp()
        explorer.handle_key(key)
        assert explorer.mode is AppMode.QUIT
        assert not explorer.is_running()


def test_increment_and_decrement_value(app):
    app.handle_key("k")
    assert app.constraints[0] == length(21)
    app.handle_key("down")
    app.handle_key("j")
    assert app.constraints[0] == length(19)
    assert app.constraints[1] == length(20)


def test_decrement_saturates_at_zero():
    explorer = ExplorerApp(constraints=[length(0)])
    explorer.decrement_value()
    assert explorer.constraints == [length(0)]


def test_ratio_edits_denominator():
    explorer = ExplorerApp(constraints=[Constraint(ConstraintName.RATIO, 1, 3)])
    explorer.increment_value()
    assert explorer.constraints[0] == Constraint(ConstraintName.RATIO, 1, 4)
    explorer.decrement_value()
    explorer.decrement_value()
    assert explorer.constraints[0] == Constraint(ConstraintName.RATIO, 1, 2)


def test_value_change_without_constraints_is_ignored():
    explorer = ExplorerApp()
    explorer.increment_value()
    assert explorer.constraints == []


def test_block_selection_wraps(app):
    app.handle_key("h")
    assert app.selected_index == 2
    app.handle_key("right")
    assert app.selected_index == 0
    app.next_block()
    app.next_block()
    app.next_block()
    assert app.selected_index == 0


def test_selection_on_empty_list_stays():
    explorer = ExplorerApp()
    explorer.next_block()
    explorer.prev_block()
    assert explorer.selected_index == 0


def test_delete_block(app):
    app.selected_index = 1
    app.handle_key("x")
    assert len(app.constraints) == 2
    assert app.selected_index == 0
    app.delete_block()
    app.delete_block()
    assert app.constraints == []
    app.delete_block()
    assert app.selected_index == 0


def test_insert_block_after_selected(app):
    app.value = 7
    app.selected_index = 0
    app.handle_key("a")
    assert app.selected_index == 1
    assert app.constraints[1] == length(7)
    assert len(app.constraints) == 4


def test_insert_into_empty_list():
    explorer = ExplorerApp(value=5)
    explorer.insert_block()
    assert explorer.constraints == [length(5)]
    assert explorer.selected_index == 0


def test_spacing_saturates():
    explorer = ExplorerApp()
    explorer.handle_key("-")
    assert explorer.spacing == 0
    explorer.handle_key("+")
    explorer.handle_key("+")
    assert explorer.spacing == 2


@pytest.mark.parametrize(
    "key, name",
    [
        ("1", ConstraintName.MIN),
        ("2", ConstraintName.MAX),
        ("3", ConstraintName.LENGTH),
        ("4", ConstraintName.PERCENTAGE),
        ("6", ConstraintName.FILL),
    ],
)
def test_swap_keys(app, key, name):
    app.selected_index = 2
    app.handle_key(key)
    assert app.constraints[2] == Constraint(name, 20)


def test_swap_to_ratio_uses_quarter_value(app):
    app.handle_key("5")
    assert app.constraints[0] == Constraint(ConstraintName.RATIO, 1, 5)


def test_swap_on_empty_list_is_ignored():
    explorer = ExplorerApp(value=3)
    explorer.swap_constraint(ConstraintName.MIN)
    assert explorer.constraints == []


def test_axis_label_without_gap():
    explorer = ExplorerApp()
    bar = explorer.axis_label(80)
    assert len(bar) == 80
    assert bar.startswith("<-") and bar.endswith("->")
    assert bar.strip("<>-") == "80 px"


def test_axis_label_with_gap():
    explorer = ExplorerApp(spacing=2)
    bar = explorer.axis_label(60)
    assert len(bar) == 60
    assert bar.strip("<>-") == "60 px (gap: 2 px)"


def test_constraint_block_label_variants():
    assert constraint_block_label(length(20), 20) == "Length(20)\n20 px"
    assert constraint_block_label(length(20), 4) == "Length(20)\n4"
    assert constraint_block_label(length(20), 2) == "Length(20)\n"


def test_spacer_label():
    assert spacer_label(6) == "Spacer"
    assert spacer_label(5) == ""


def test_render_dimensions(app):
    lines = app.render(80, 50).plain.split("\n")
    assert len(lines) == 50
    assert all(len(line) == 80 for line in lines)


def test_render_content(app):
    text = app.render(80, 50).plain
    assert "Constraint Explorer" in text
    assert "Flex::Start" in text
    assert "Flex::SpaceBetween" in text
    assert "Length(20)" in text


def test_render_small_area(app):
    lines = app.render(10, 3).plain.split("\n")
    assert len(lines) == 3
    assert all(len(line) == 10 for line in lines)


def test_render_without_constraints():
    lines = ExplorerApp().render(40, 30).plain.split("\n")
    assert len(lines) == 30
    assert "Length(" not in "\n".join(lines)