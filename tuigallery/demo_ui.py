"""Drawing of the demo application: tabs, gauges, lists, charts, tables and a map."""

from __future__ import annotations

from itertools import groupby
from typing import Dict, List, Optional, Sequence, Tuple

from rich.style import Style
from rich.text import Text

from .canvas_demo import Circle, Marker, _Canvas
from .chart_demo import _PLAIN, _Axis, _Dataset, _draw_chart, _format_number
from .demo_app import App, StatefulList

Rect = Tuple[int, int, int, int]
Cell = Tuple[str, Optional[Style]]

_NINE_LEVELS = " ▁▂▃▄▅▆▇█"
_THREE_LEVELS = "  ▄▄▄▄▄██"
_HORIZONTAL_EIGHTHS = " ▏▎▍▌▋▊▉"

BAR_WIDTH = 3
BAR_GAP = 2
LEVEL_WIDTH = 9

_LOG_STYLES: Dict[str, Style] = {
    "ERROR": Style(color="magenta"),
    "CRITICAL": Style(color="red"),
    "WARNING": Style(color="yellow"),
}
_INFO_STYLE = Style(color="blue")

_UP_STYLE = Style(color="green")
_FAILURE_STYLE = Style(color="red", blink2=True, strike=True)

_GAUGE_STYLE = Style(color="magenta", bgcolor="black", italic=True, bold=True)

_COLORS: List[Tuple[str, str]] = [
    ("Reset", "default"),
    ("Black", "black"),
    ("Red", "red"),
    ("Green", "green"),
    ("Yellow", "yellow"),
    ("Blue", "blue"),
    ("Magenta", "magenta"),
    ("Cyan", "cyan"),
    ("Gray", "white"),
    ("DarkGray", "bright_black"),
    ("LightRed", "bright_red"),
    ("LightGreen", "bright_green"),
    ("LightYellow", "bright_yellow"),
    ("LightBlue", "bright_blue"),
    ("LightMagenta", "bright_magenta"),
    ("LightCyan", "bright_cyan"),
    ("White", "bright_white"),
]

_FOOTER: List[List[Cell]] = [
    [
        (
            "This is a paragraph with several lines. You can change style your "
            "text the way you want",
            None,
        )
    ],
    [],
    [
        ("For example: ", None),
        ("under", Style(color="red")),
        (" ", None),
        ("the", Style(color="green")),
        (" ", None),
        ("rainbow", Style(color="blue")),
        (".", None),
    ],
    [
        ("Oh and if you didn't ", None),
        ("notice", Style(italic=True)),
        (" you can ", None),
        ("automatically", Style(bold=True)),
        (" ", None),
        ("wrap", Style(reverse=True)),
        (" your ", None),
        ("text", Style(underline=True)),
        (".", None),
    ],
    [("One more thing is that it should display unicode characters: 10€", None)],
]


def log_style(level: str) -> Style:
    """Colour of a log level; anything unknown is shown as info."""
    return _LOG_STYLES.get(level, _INFO_STYLE)


def server_style(status: str) -> Style:
    """Green for servers that are up, blinking struck-out red otherwise."""
    return _UP_STYLE if status == "Up" else _FAILURE_STYLE


def progress_label(progress: float) -> str:
    """The gauge label: progress as a percentage with two decimals."""
    return f"{progress * 100.0:.2f}%"


class _Grid:
    """A fixed-size cell buffer of characters and styles."""

    def __init__(self, width: int, height: int) -> None:
        self.width = max(width, 0)
        self.height = max(height, 0)
        self._chars = [[" "] * self.width for _ in range(self.height)]
        self._styles = [[Style.null()] * self.width for _ in range(self.height)]

    def put(
        self,
        x: int,
        y: int,
        text: str,
        style: Optional[Style] = None,
        limit: Optional[int] = None,
    ) -> None:
        if not 0 <= y < self.height:
            return
        end = self.width if limit is None else min(self.width, x + max(limit, 0))
        for offset, char in enumerate(text):
            col = x + offset
            if col >= end:
                break
            if col < 0:
                continue
            self._chars[y][col] = char
            if style is not None:
                self._styles[y][col] = self._styles[y][col] + style

    def border(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        chars: Dict[str, str],
        style: Optional[Style],
    ) -> None:
        if width <= 0 or height <= 0:
            return
        right = x + width - 1
        bottom = y + height - 1
        top = chars["top_left"] + chars["horizontal_top"] * (width - 2)
        if width > 1:
            top += chars["top_right"]
        self.put(x, y, top, style, limit=width)
        if height > 1:
            low = chars["bottom_left"] + chars["horizontal_bottom"] * (width - 2)
            if width > 1:
                low += chars["bottom_right"]
            self.put(x, bottom, low, style, limit=width)
        for row in range(y + 1, bottom):
            self.put(x, row, chars["vertical_left"], style)
            if width > 1:
                self.put(right, row, chars["vertical_right"], style)

    def centered(
        self, x: int, y: int, width: int, text: str, style: Optional[Style] = None
    ) -> None:
        if width <= 0:
            return
        text = text[:width]
        self.put(x + (width - len(text)) // 2, y, text, style)

    def panel(self, rect: Rect, title: str, title_style: Optional[Style] = None) -> Rect:
        """Draw a bordered block with a title; return the inner area."""
        x, y, width, height = rect
        if width <= 0 or height <= 0:
            return x, y, 0, 0
        self.border(x, y, width, height, _PLAIN, None)
        if title:
            self.put(x + 1, y, title, title_style, limit=max(width - 2, 0))
        return x + 1, y + 1, max(width - 2, 0), max(height - 2, 0)

    def to_text(self) -> Text:
        out = Text(no_wrap=True, overflow="crop")
        for index, (chars, styles) in enumerate(zip(self._chars, self._styles)):
            if index:
                out.append("\n")
            for style, run in groupby(zip(chars, styles), key=lambda cell: cell[1]):
                out.append("".join(char for char, _ in run), style)
        return out


def _stack(rect: Rect, heights: Sequence[int]) -> List[Rect]:
    x, y, width, height = rect
    top, bottom = y, y + height
    areas = []
    for wanted in heights:
        size = max(min(wanted, bottom - top), 0)
        areas.append((x, top, width, size))
        top += size
    return areas


def _columns(x: int, width: int, widths: Sequence[int], spacing: int = 1) -> List[Tuple[int, int]]:
    end = x + width
    col = x
    columns = []
    for wanted in widths:
        size = max(min(wanted, end - col), 0)
        columns.append((col, size))
        col += size + spacing
    return columns


def _rstrip(cells: List[Cell]) -> List[Cell]:
    while cells and cells[-1][0] == " ":
        cells = cells[:-1]
    return cells


def _wrap(cells: List[Cell], width: int) -> List[List[Cell]]:
    """Greedy word wrap; whitespace at the start of a wrapped line is dropped."""
    if not cells:
        return [[]]
    lines: List[List[Cell]] = []
    current: List[Cell] = []
    for is_space, group in groupby(cells, key=lambda cell: cell[0] == " "):
        token = list(group)
        if is_space:
            if current:
                current.extend(token)
            continue
        if current and len(current) + len(token) > width:
            lines.append(_rstrip(current))
            current = []
        while len(token) > width:
            if current:
                lines.append(_rstrip(current))
                current = []
            lines.append(token[:width])
            token = token[width:]
        current.extend(token)
    if current:
        lines.append(_rstrip(current))
    return lines


def _bar_symbol(symbols: str, eighths: int, level: int) -> str:
    return symbols[min(max(eighths - level * 8, 0), 8)]


def _draw_tabs(grid: _Grid, app: App, area: Rect) -> None:
    ix, iy, iw, ih = grid.panel(area, app.title)
    if ih <= 0:
        return
    end = ix + iw
    col = ix
    green = Style(color="green")
    for index, title in enumerate(app.tabs.titles):
        if index:
            grid.put(col, iy, "│", limit=end - col)
            col += 1
        grid.put(col, iy, " ", limit=end - col)
        col += 1
        style = green + Style(color="yellow") if index == app.tabs.index else green
        grid.put(col, iy, title, style, limit=end - col)
        col += len(title)
        grid.put(col, iy, " ", limit=end - col)
        col += 1


def _draw_gauge(grid: _Grid, rect: Rect, ratio: float, unicode: bool) -> None:
    x, y, width, height = rect
    if width <= 0 or height <= 0:
        return
    grid.put(x, y, "Gauge:", limit=width)
    if height < 2:
        return
    filled = width * min(max(ratio, 0.0), 1.0)
    full = int(filled)
    row = "█" * full
    if unicode and full < width:
        row += _HORIZONTAL_EIGHTHS[int((filled - full) * 8)]
    row = row.ljust(width)[:width]
    for line in range(y + 1, y + height):
        grid.put(x, line, row, _GAUGE_STYLE)
    label = progress_label(ratio)
    label_row = y + 1 + (height - 2) // 2
    grid.put(x + max(width - len(label), 0) // 2, label_row, label, limit=width)


def _draw_sparkline(grid: _Grid, rect: Rect, data: Sequence[int], enhanced: bool) -> None:
    x, y, width, height = rect
    if width <= 0 or height <= 0:
        return
    grid.put(x, y, "Sparkline:", limit=width)
    rows = height - 1
    if rows <= 0:
        return
    values = list(data[:width])
    peak = max(values, default=0)
    symbols = _NINE_LEVELS if enhanced else _THREE_LEVELS
    style = Style(color="green")
    for col, value in enumerate(values):
        eighths = value * rows * 8 // peak if peak else 0
        for row in range(rows):
            grid.put(x + col, y + 1 + row, _bar_symbol(symbols, eighths, rows - 1 - row), style)


def _draw_line_gauge(grid: _Grid, rect: Rect, ratio: float, enhanced: bool) -> None:
    x, y, width, height = rect
    if width <= 0 or height <= 0:
        return
    grid.put(x, y, "LineGauge:", limit=width)
    if height < 2:
        return
    label = f"{ratio * 100.0:.0f}%"
    grid.put(x, y + 1, label, limit=width)
    start = x + len(label) + 1
    line_width = x + width - start
    if line_width <= 0:
        return
    filled = int(line_width * min(max(ratio, 0.0), 1.0))
    char = "━" if enhanced else "─"
    grid.put(start, y + 1, char * filled, Style(color="magenta"))
    grid.put(start + filled, y + 1, char * (line_width - filled))


def _draw_gauges(grid: _Grid, app: App, area: Rect) -> None:
    grid.panel(area, "Graphs")
    x, y, width, height = area
    inner = (x + 1, y + 1, max(width - 2, 0), max(height - 2, 0))
    gauge, sparkline, line = _stack(inner, [2, 3, 2])
    _draw_gauge(grid, gauge, app.progress, app.enhanced_graphics)
    _draw_sparkline(grid, sparkline, app.sparkline.points, app.enhanced_graphics)
    _draw_line_gauge(grid, line, app.progress, app.enhanced_graphics)


def _draw_tasks(grid: _Grid, tasks: StatefulList[str], area: Rect) -> None:
    ix, iy, iw, ih = grid.panel(area, "List")
    if ih <= 0 or iw <= 0:
        return
    selected = tasks.selected
    offset = max(0, selected - ih + 1) if selected is not None else 0
    for row, index in enumerate(range(offset, min(len(tasks.items), offset + ih))):
        if selected is None:
            prefix = ""
        elif index == selected:
            prefix = "> "
        else:
            prefix = "  "
        style = Style(bold=True) if index == selected else None
        grid.put(ix, iy + row, prefix + tasks.items[index], style, limit=iw)


def _draw_logs(grid: _Grid, logs: StatefulList[Tuple[str, str]], area: Rect) -> None:
    ix, iy, iw, ih = grid.panel(area, "List")
    if ih <= 0 or iw <= 0:
        return
    for row, (event, level) in enumerate(logs.items[:ih]):
        grid.put(ix, iy + row, f"{level:<{LEVEL_WIDTH}}", log_style(level), limit=iw)
        grid.put(ix + LEVEL_WIDTH, iy + row, event, limit=iw - LEVEL_WIDTH)


def _draw_barchart(grid: _Grid, app: App, area: Rect) -> None:
    ix, iy, iw, ih = grid.panel(area, "Bar chart")
    if iw <= 0 or ih < 2:
        return
    bar_rows = ih - 1
    count = (iw + BAR_GAP) // (BAR_WIDTH + BAR_GAP)
    shown = app.barchart[:count]
    peak = max((value for _, value in shown), default=0)
    symbols = _NINE_LEVELS if app.enhanced_graphics else _THREE_LEVELS
    bar_style = Style(color="green")
    value_style = Style(color="black", bgcolor="green", italic=True)
    label_style = Style(color="yellow")
    for index, (label, value) in enumerate(shown):
        bx = ix + index * (BAR_WIDTH + BAR_GAP)
        eighths = value * bar_rows * 8 // peak if peak else 0
        for row in range(bar_rows):
            symbol = _bar_symbol(symbols, eighths, bar_rows - 1 - row)
            grid.put(bx, iy + row, symbol * BAR_WIDTH, bar_style)
        text = str(value)
        if value > 0 and len(text) <= BAR_WIDTH:
            grid.put(bx + (BAR_WIDTH - len(text)) // 2, iy + bar_rows - 1, text, value_style)
        grid.put(
            bx + max(BAR_WIDTH - len(label), 0) // 2,
            iy + bar_rows,
            label,
            label_style,
            limit=BAR_WIDTH,
        )


def _draw_signal_chart(grid: _Grid, app: App, area: Rect) -> None:
    start, end = app.signals.window
    labels = [
        _format_number(start),
        _format_number((start + end) / 2.0),
        _format_number(end),
    ]
    _draw_chart(
        grid,
        area,
        "Chart",
        [
            _Dataset(app.signals.sin1.points, "cyan", "data2"),
            _Dataset(app.signals.sin2.points, "yellow", "data3"),
        ],
        _Axis((start, end), labels, "X Axis"),
        _Axis((-20.0, 20.0), ["-20", "0", "20"], "Y Axis"),
        legend_ratio=4,
    )


def _draw_charts(grid: _Grid, app: App, area: Rect) -> None:
    x, y, width, height = area
    left_width = width // 2 if app.show_chart else width
    top_height = height // 2
    list_width = left_width // 2
    _draw_tasks(grid, app.tasks, (x, y, list_width, top_height))
    _draw_logs(grid, app.logs, (x + list_width, y, left_width - list_width, top_height))
    _draw_barchart(grid, app, (x, y + top_height, left_width, height - top_height))
    if app.show_chart:
        _draw_signal_chart(grid, app, (x + left_width, y, width - left_width, height))


def _draw_text(grid: _Grid, area: Rect) -> None:
    ix, iy, iw, ih = grid.panel(area, "Footer", Style(color="magenta", bold=True))
    if iw <= 0 or ih <= 0:
        return
    rows: List[List[Cell]] = []
    for spans in _FOOTER:
        cells = [(char, style) for text, style in spans for char in text]
        rows.extend(_wrap(cells, iw))
    for row, cells in enumerate(rows[:ih]):
        for col, (char, style) in enumerate(cells):
            grid.put(ix + col, iy + row, char, style)


def _draw_first_tab(grid: _Grid, app: App, area: Rect) -> None:
    x, y, width, height = area
    gauges_height = min(9, height)
    rest = height - gauges_height
    text_height = min(7, max(rest - 8, 0))
    charts_height = rest - text_height
    _draw_gauges(grid, app, (x, y, width, gauges_height))
    _draw_charts(grid, app, (x, y + gauges_height, width, charts_height))
    _draw_text(grid, (x, y + gauges_height + charts_height, width, text_height))


def _draw_servers(grid: _Grid, app: App, area: Rect) -> None:
    ix, iy, iw, ih = grid.panel(area, "Servers")
    if iw <= 0 or ih <= 0:
        return
    columns = _columns(ix, iw, [15, 15, 10])
    header_style = Style(color="yellow")
    for (col, size), title in zip(columns, ["Server", "Location", "Status"]):
        grid.put(col, iy, title, header_style, limit=size)
    for row, server in enumerate(app.servers):
        line = iy + 2 + row
        if line >= iy + ih:
            break
        style = server_style(server.status)
        cells = [server.name, server.location, server.status]
        for (col, size), cell in zip(columns, cells):
            grid.put(col, line, cell, style, limit=size)


def _draw_world(grid: _Grid, app: App, area: Rect) -> None:
    ix, iy, iw, ih = grid.panel(area, "World")
    marker = Marker.BRAILLE if app.enhanced_graphics else Marker.DOT
    canvas = _Canvas(iw, ih, (-180.0, 180.0), (-90.0, 90.0), marker)
    canvas.rectangle(0.0, 30.0, 10.0, 10.0, "yellow")
    lat, lon = app.servers[2].coords
    canvas.circle(Circle(lon, lat, 10.0, "green"))
    for index, first in enumerate(app.servers):
        for second in app.servers[index + 1:]:
            canvas.line(
                first.coords[1], first.coords[0], second.coords[1], second.coords[0], "yellow"
            )
    for server in app.servers:
        color = "green" if server.status == "Up" else "red"
        canvas.print(server.coords[1], server.coords[0], "X", color)
    canvas.paint(grid, ix, iy)


def _draw_second_tab(grid: _Grid, app: App, area: Rect) -> None:
    x, y, width, height = area
    table_width = width * 30 // 100
    _draw_servers(grid, app, (x, y, table_width, height))
    _draw_world(grid, app, (x + table_width, y, width - table_width, height))


def _draw_third_tab(grid: _Grid, app: App, area: Rect) -> None:
    x, y, width, height = area
    ix, iy, iw, ih = grid.panel((x, y, width // 2, height), "Colors")
    if iw <= 0 or ih <= 0:
        return
    column_width = max((iw - 2) // 3, 0)
    columns = _columns(ix, iw, [column_width] * 3)
    for row, (name, color) in enumerate(_COLORS[:ih]):
        cells = [
            (f"{name}: ", None),
            ("Foreground", Style(color=color)),
            ("Background", Style(bgcolor=color)),
        ]
        for (col, size), (text, style) in zip(columns, cells):
            grid.put(col, iy + row, text, style, limit=size)


_TABS = {0: _draw_first_tab, 1: _draw_second_tab, 2: _draw_third_tab}


def draw(app: App, width: int, height: int) -> Text:
    """Render the whole demo into ``height`` lines of ``width`` cells."""
    grid = _Grid(width, height)
    if grid.width == 0 or grid.height == 0:
        return grid.to_text()
    tabs_height = min(3, grid.height)
    _draw_tabs(grid, app, (0, 0, grid.width, tabs_height))
    body = (0, tabs_height, grid.width, grid.height - tabs_height)
    tab = _TABS.get(app.tabs.index)
    if tab is not None:
        tab(grid, app, body)
    return grid.to_text()