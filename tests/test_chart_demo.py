import pytest

from tuigallery.chart_demo import ChartApp, plot_points


def test_initial_data():
    app = ChartApp()
    assert len(app.data1) == 200
    assert len(app.data2) == 200
    assert app.window == [0.0, 20.0]
    assert app.data1[0] == (0.0, 0.0)


def test_on_tick_slides_window():
    app = ChartApp()
    old1 = list(app.data1)
    old2 = list(app.data2)
    app.on_tick()
    assert len(app.data1) == 200
    assert len(app.data2) == 200
    assert app.data1[0] == old1[5]
    assert app.data2[0] == old2[10]
    assert app.data1[-1][0] > old1[-1][0]
    assert app.window == [1.0, 21.0]


def test_x_labels_follow_window():
    app = ChartApp()
    assert app.x_labels() == ["0", "10", "20"]
    app.on_tick()
    labels = app.x_labels()
    assert labels[0] == "1"
    assert labels[2] == "21"


def test_plot_points_corners():
    rows = plot_points([(0.0, 0.0), (10.0, 10.0)], (0.0, 10.0), (0.0, 10.0), 5, 3)
    assert len(rows) == 3
    assert all(len(row) == 5 for row in rows)
    assert rows[2][0] == "•"
    assert rows[0][4] == "•"
    assert sum(row.count("•") for row in rows) == 2


def test_plot_points_drops_out_of_bounds():
    rows = plot_points([(20.0, 5.0), (-1.0, 5.0)], (0.0, 10.0), (0.0, 10.0), 4, 4)
    assert rows == ["    "] * 4


def test_plot_points_degenerate_bounds():
    rows = plot_points([(1.0, 1.0)], (1.0, 1.0), (0.0, 10.0), 3, 2)
    assert rows == ["   ", "   "]


@pytest.mark.parametrize("width,height", [(120, 40), (80, 24)])
def test_render_dimensions_and_titles(width, height):
    text = ChartApp().render(width, height).plain
    lines = text.split("\n")
    assert len(lines) == height
    assert all(len(line) == width for line in lines)
    for title in ("Bar chart", "Line chart", "Scatter chart"):
        assert title in text


def test_render_shows_plotted_points():
    text = ChartApp().render(120, 40).plain
    assert "•" in text


def test_render_empty():
    assert ChartApp().render(0, 5).plain == ""