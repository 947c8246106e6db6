"""Chart gallery: an animated sine chart, a bar graph, a line and a scatter plot."""

from __future__ import annotations

import argparse
import time
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Set, Tuple

from rich.style import Style
from rich.text import Text

from .explorer import _Grid
from .signals import SinSignal
from .terminal import Terminal

Point = Tuple[float, float]

TICK_RATE = 0.25
BAR_CHART_WIDTH = 29

_PLAIN = {
    "top_left": "┌",
    "top_right": "┐",
    "bottom_left": "└",
    "bottom_right": "┘",
    "vertical_left": "│",
    "vertical_right": "│",
    "horizontal_top": "─",
    "horizontal_bottom": "─",
}

_AXIS_STYLE = Style(color="white")
_TITLE_STYLE = Style(color="cyan", bold=True)

BELL_CURVE: List[Point] = [
    (0.0, 0.4),
    (10.0, 2.9),
    (20.0, 13.5),
    (30.0, 41.1),
    (40.0, 80.1),
    (50.0, 100.0),
    (60.0, 80.1),
    (70.0, 41.1),
    (80.0, 13.5),
    (90.0, 2.9),
    (100.0, 0.4),
]

HEAVY_PAYLOAD_DATA: List[Point] = [
    (1965.0, 8200.0),
    (1967.0, 5400.0),
    (1981.0, 65400.0),
    (1989.0, 30800.0),
    (1997.0, 10200.0),
    (2004.0, 11600.0),
    (2014.0, 4500.0),
    (2016.0, 7900.0),
    (2018.0, 1500.0),
]

MEDIUM_PAYLOAD_DATA: List[Point] = [
    (1963.0, 29500.0),
    (1964.0, 30600.0),
    (1965.0, 177_900.0),
    (1965.0, 21000.0),
    (1966.0, 17900.0),
    (1966.0, 8400.0),
    (1975.0, 17500.0),
    (1982.0, 8300.0),
    (1985.0, 5100.0),
    (1988.0, 18300.0),
    (1990.0, 38800.0),
    (1990.0, 9900.0),
    (1991.0, 18700.0),
    (1992.0, 9100.0),
    (1994.0, 10500.0),
    (1994.0, 8500.0),
    (1994.0, 8700.0),
    (1997.0, 6200.0),
    (1999.0, 18000.0),
    (1999.0, 7600.0),
    (1999.0, 8900.0),
    (1999.0, 9600.0),
    (2000.0, 16000.0),
    (2001.0, 10000.0),
    (2002.0, 10400.0),
    (2002.0, 8100.0),
    (2010.0, 2600.0),
    (2013.0, 13600.0),
    (2017.0, 8000.0),
]

SMALL_PAYLOAD_DATA: List[Point] = [
    (1961.0, 118_500.0),
    (1962.0, 14900.0),
    (1975.0, 21400.0),
    (1980.0, 32800.0),
    (1988.0, 31100.0),
    (1990.0, 41100.0),
    (1993.0, 23600.0),
    (1994.0, 20600.0),
    (1994.0, 34600.0),
    (1996.0, 50600.0),
    (1997.0, 19200.0),
    (1997.0, 45800.0),
    (1998.0, 19100.0),
    (2000.0, 73100.0),
    (2003.0, 11200.0),
    (2008.0, 12600.0),
    (2010.0, 30500.0),
    (2012.0, 20000.0),
    (2013.0, 10600.0),
    (2013.0, 34500.0),
    (2015.0, 10600.0),
    (2018.0, 23100.0),
    (2019.0, 17300.0),
]


def _format_number(value: float) -> str:
    """Shortest decimal form, without a trailing ``.0`` on whole numbers."""
    if value == int(value):
        return str(int(value))
    return repr(value)


def _cells(
    points: Sequence[Point],
    x_bounds: Tuple[float, float],
    y_bounds: Tuple[float, float],
    width: int,
    height: int,
    kind: str = "scatter",
) -> Set[Tuple[int, int]]:
    x0, x1 = x_bounds
    y0, y1 = y_bounds
    if width <= 0 or height <= 0 or x1 <= x0 or y1 <= y0:
        return set()
    cells: Set[Tuple[int, int]] = set()

    def mark(x: float, y: float) -> None:
        if x0 <= x <= x1 and y0 <= y <= y1:
            cells.add(
                (
                    int((x - x0) / (x1 - x0) * (width - 1)),
                    int((y1 - y) / (y1 - y0) * (height - 1)),
                )
            )

    def segment(start: Point, end: Point) -> None:
        (ax, ay), (bx, by) = start, end
        steps = int(
            max(
                abs(bx - ax) / (x1 - x0) * (width - 1),
                abs(by - ay) / (y1 - y0) * (height - 1),
            )
        ) + 1
        for k in range(steps + 1):
            t = k / steps
            mark(ax + (bx - ax) * t, ay + (by - ay) * t)

    if kind == "line":
        for start, end in zip(points, points[1:]):
            segment(start, end)
    elif kind == "bar":
        for x, y in points:
            segment((x, y0), (x, y))
    else:
        for x, y in points:
            mark(x, y)
    return cells


def plot_points(
    points: Sequence[Point],
    x_bounds: Tuple[float, float],
    y_bounds: Tuple[float, float],
    width: int,
    height: int,
) -> List[str]:
    """Scatter ``points`` onto ``height`` rows of ``width`` cells; out-of-bounds points are dropped."""
    rows = [[" "] * max(width, 0) for _ in range(max(height, 0))]
    for col, row in _cells(points, x_bounds, y_bounds, width, height):
        rows[row][col] = "•"
    return ["".join(row) for row in rows]


@dataclass
class _Dataset:
    points: Sequence[Point]
    color: str
    name: str = ""
    kind: str = "scatter"


@dataclass
class _Axis:
    bounds: Tuple[float, float]
    labels: List[str]
    title: str = ""


def _panel(
    grid: _Grid, area: Tuple[int, int, int, int], title: str
) -> Tuple[int, int, int, int]:
    x, y, width, height = area
    if width <= 0 or height <= 0:
        return x, y, 0, 0
    grid.border(x, y, width, height, _PLAIN, Style())
    if title:
        grid.centered(x + 1, y, width - 2, title, _TITLE_STYLE)
    return x + 1, y + 1, max(width - 2, 0), max(height - 2, 0)


def _draw_chart(
    grid: _Grid,
    area: Tuple[int, int, int, int],
    title: str,
    datasets: Iterable[_Dataset],
    x_axis: _Axis,
    y_axis: _Axis,
    legend_left: bool = False,
    legend_ratio: int = 2,
) -> None:
    datasets = list(datasets)
    ix, iy, iw, ih = _panel(grid, area, title)
    if iw < 3 or ih < 3:
        return
    label_width = max((len(label) for label in y_axis.labels), default=0)
    axis_row = iy + ih - 2
    label_row = iy + ih - 1
    axis_col = ix + label_width
    top = iy + (1 if y_axis.title else 0)
    left = axis_col + 1
    plot_width = ix + iw - left
    plot_height = axis_row - top

    if y_axis.title:
        grid.put(ix, iy, y_axis.title, _AXIS_STYLE, limit=iw)
    for row in range(top, axis_row):
        grid.put(axis_col, row, "│", _AXIS_STYLE)
    grid.put(axis_col, axis_row, "└", _AXIS_STYLE)
    if plot_width > 0:
        grid.put(left, axis_row, "─" * plot_width, _AXIS_STYLE)

    count = len(y_axis.labels)
    for index, label in enumerate(y_axis.labels):
        offset = index * (axis_row - top) // (count - 1) if count > 1 else 0
        grid.put(ix + label_width - len(label), axis_row - offset, label, _AXIS_STYLE)

    count = len(x_axis.labels)
    span = max(plot_width - 1, 0)
    for index, label in enumerate(x_axis.labels):
        col = left + (index * span // (count - 1) if count > 1 else 0)
        if index == 0:
            start = col
        elif index == count - 1:
            start = col - len(label) + 1
        else:
            start = col - len(label) // 2
        grid.put(max(start, ix), label_row, label, _AXIS_STYLE, limit=ix + iw - max(start, ix))

    if plot_width <= 0 or plot_height <= 0:
        return
    if x_axis.title:
        grid.put(max(ix + iw - len(x_axis.title), left), axis_row - 1, x_axis.title, _AXIS_STYLE)
    for dataset in datasets:
        cells = _cells(
            dataset.points, x_axis.bounds, y_axis.bounds, plot_width, plot_height, dataset.kind
        )
        for col, row in sorted(cells):
            grid.put(left + col, top + row, "•", Style(color=dataset.color))

    named = [dataset for dataset in datasets if dataset.name]
    if not named:
        return
    legend_width = max(len(dataset.name) for dataset in named) + 2
    legend_height = len(named) + 2
    if legend_width > iw // legend_ratio or legend_height > ih // legend_ratio:
        return
    lx = ix if legend_left else ix + iw - legend_width
    for row in range(legend_height):
        grid.put(lx, iy + row, " " * legend_width)
    grid.border(lx, iy, legend_width, legend_height, _PLAIN, Style())
    for index, dataset in enumerate(named):
        grid.put(lx + 1, iy + 1 + index, dataset.name, Style(color=dataset.color))


class ChartApp:
    """Two scrolling sine signals plus three static charts."""

    def __init__(self) -> None:
        self.signal1 = SinSignal(0.2, 3.0, 18.0)
        self.data1 = self.signal1.take(200)
        self.signal2 = SinSignal(0.1, 2.0, 10.0)
        self.data2 = self.signal2.take(200)
        self.window = [0.0, 20.0]

    def on_tick(self) -> None:
        del self.data1[:5]
        self.data1.extend(self.signal1.take(5))
        del self.data2[:10]
        self.data2.extend(self.signal2.take(10))
        self.window = [self.window[0] + 1.0, self.window[1] + 1.0]

    def x_labels(self) -> List[str]:
        """Labels for the start, middle and end of the visible window."""
        start, end = self.window
        return [
            _format_number(start),
            _format_number((start + end) / 2.0),
            _format_number(end),
        ]

    def render(self, width: int, height: int) -> Text:
        """Render all four charts into a ``width`` by ``height`` area."""
        grid = _Grid(width, height)
        w, h = grid.width, grid.height
        if w == 0 or h == 0:
            return grid.to_text()
        top_height = h // 2
        bottom_height = h - top_height
        bar_width = min(BAR_CHART_WIDTH, w)
        animated_width = w - bar_width
        half = w // 2

        self._render_animated(grid, (0, 0, animated_width, top_height))
        _render_barchart(grid, (animated_width, 0, bar_width, top_height))
        _render_line_chart(grid, (0, top_height, half, bottom_height))
        _render_scatter(grid, (half, top_height, w - half, bottom_height))
        return grid.to_text()

    def _render_animated(self, grid: _Grid, area: Tuple[int, int, int, int]) -> None:
        _draw_chart(
            grid,
            area,
            "",
            [
                _Dataset(self.data1, "cyan", "data2"),
                _Dataset(self.data2, "yellow", "data3"),
            ],
            _Axis((self.window[0], self.window[1]), self.x_labels(), "X Axis"),
            _Axis((-20.0, 20.0), ["-20", "0", "20"], "Y Axis"),
            legend_ratio=4,
        )


def _render_barchart(grid: _Grid, area: Tuple[int, int, int, int]) -> None:
    _draw_chart(
        grid,
        area,
        "Bar chart",
        [_Dataset(BELL_CURVE, "blue", kind="bar")],
        _Axis((0.0, 100.0), ["0", "50", "100.0"]),
        _Axis((0.0, 100.0), ["0", "50", "100.0"]),
    )


def _render_line_chart(grid: _Grid, area: Tuple[int, int, int, int]) -> None:
    _draw_chart(
        grid,
        area,
        "Line chart",
        [_Dataset([(1.0, 1.0), (4.0, 4.0)], "yellow", "Line from only 2 points", "line")],
        _Axis((0.0, 5.0), ["0", "2.5", "5.0"], "X Axis"),
        _Axis((0.0, 5.0), ["0", "2.5", "5.0"], "Y Axis"),
        legend_left=True,
    )


def _render_scatter(grid: _Grid, area: Tuple[int, int, int, int]) -> None:
    _draw_chart(
        grid,
        area,
        "Scatter chart",
        [
            _Dataset(HEAVY_PAYLOAD_DATA, "yellow", "Heavy"),
            _Dataset(MEDIUM_PAYLOAD_DATA, "magenta", "Medium"),
            _Dataset(SMALL_PAYLOAD_DATA, "cyan", "Small"),
        ],
        _Axis((1960.0, 2020.0), ["1960", "1990", "2020"], "Year"),
        _Axis((0.0, 75000.0), ["0", "37 500", "75 000"], "Cost"),
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="tuigallery-chart",
        description="Animated and static charts; q quits.",
    )
    parser.parse_args(argv)
    app = ChartApp()
    last_tick = time.monotonic()
    with Terminal() as terminal:
        while True:
            terminal.draw(app.render(*terminal.size()))
            timeout = max(TICK_RATE - (time.monotonic() - last_tick), 0.0)
            if terminal.read_key(timeout) == "q":
                break
            if time.monotonic() - last_tick >= TICK_RATE:
                app.on_tick()
                last_tick = time.monotonic()
    return 0