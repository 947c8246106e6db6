import pytest

from tuigallery.colors import (
    indexed_cube_order,
    indexed_label,
    named_colors,
    render_grayscale,
    render_indexed_colors,
    render_named_colors,
)


def test_named_colors_order():
    names = [name for name, _ in named_colors()]
    assert len(names) == 16
    assert names[0] == "Black"
    assert names[-1] == "White"
    assert "DarkGray" in names and "LightMagenta" in names


def test_named_colors_distinct():
    colors = [color for _, color in named_colors()]
    assert len(set(colors)) == len(colors)


def test_indexed_label_padding():
    assert indexed_label(0) == "00"
    assert indexed_label(16) == "016"
    assert indexed_label(255) == str(255)


@pytest.mark.parametrize("index", [-1, 256])
def test_indexed_label_out_of_range(index):
    with pytest.raises(ValueError):
        indexed_label(index)


def test_cube_order_covers_all_indexes_once():
    rows = indexed_cube_order()
    assert len(rows) == 12
    assert all(len(row) == 18 for row in rows)
    flat = sorted(index for row in rows for index in row)
    assert flat == list(range(16, 232))


def test_cube_order_first_row():
    first = indexed_cube_order()[0]
    assert first == (
        list(range(16, 22)) + list(range(52, 58)) + list(range(88, 94))
    )


def test_cube_order_second_band_starts_at_124():
    assert indexed_cube_order()[6][0] == 124


def test_named_colors_render():
    lines = render_named_colors().plain.split("\n")
    assert len(lines) == 30
    assert "Foreground colors on Reset background" in lines[0]
    assert "Background colors with White foreground" in lines[27]
    assert "LightMagenta" in lines[2]


def test_indexed_colors_render():
    lines = render_indexed_colors().plain.split("\n")
    assert len(lines) == 17
    assert "Indexed colors" in lines[0]
    assert lines[1].startswith(indexed_label(0))
    assert lines[3].startswith(indexed_label(16) + ".")
    assert indexed_label(231) in lines[15]


def test_grayscale_render():
    lines = render_grayscale().plain.split("\n")
    assert len(lines) == 2
    assert lines[0].startswith(indexed_label(232))
    assert lines[1].startswith(indexed_label(244))
    assert indexed_label(255) in lines[1]