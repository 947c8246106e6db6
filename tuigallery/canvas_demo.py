"""Canvas gallery: a position marker, free-hand drawing, a bouncing ball and boxes."""

from __future__ import annotations

import argparse
import enum
import math
import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from rich.style import Style
from rich.text import Text

from .explorer import _Grid
from .terminal import Terminal

TICK_RATE = 0.016
MARKER_PERIOD = 180

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

_BRAILLE_BITS = ((0x01, 0x08), (0x02, 0x10), (0x04, 0x20), (0x40, 0x80))


class Marker(enum.Enum):
    DOT = "dot"
    BRAILLE = "braille"
    BLOCK = "block"
    HALF_BLOCK = "half_block"
    BAR = "bar"

    def next(self) -> "Marker":
        """The marker that follows this one in the display cycle."""
        return _MARKER_CYCLE[self]


_MARKER_CYCLE: Dict[Marker, Marker] = {
    Marker.DOT: Marker.BRAILLE,
    Marker.BRAILLE: Marker.BLOCK,
    Marker.BLOCK: Marker.HALF_BLOCK,
    Marker.HALF_BLOCK: Marker.BAR,
    Marker.BAR: Marker.DOT,
}

_RESOLUTION: Dict[Marker, Tuple[int, int]] = {
    Marker.DOT: (1, 1),
    Marker.BLOCK: (1, 1),
    Marker.BAR: (1, 1),
    Marker.HALF_BLOCK: (1, 2),
    Marker.BRAILLE: (2, 4),
}

_SYMBOLS = {Marker.DOT: "•", Marker.BLOCK: "█", Marker.BAR: "▄"}


@dataclass
class Circle:
    x: float
    y: float
    radius: float
    color: str


@dataclass(frozen=True)
class Playground:
    x: int
    y: int
    width: int
    height: int

    @property
    def left(self) -> int:
        return self.x

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def top(self) -> int:
        return self.y

    @property
    def bottom(self) -> int:
        return self.y + self.height


class _Canvas:
    """Maps world coordinates onto a cell area at the marker's resolution."""

    def __init__(
        self,
        width: int,
        height: int,
        x_bounds: Tuple[float, float],
        y_bounds: Tuple[float, float],
        marker: Marker,
    ) -> None:
        self.width = max(width, 0)
        self.height = max(height, 0)
        self.x_bounds = x_bounds
        self.y_bounds = y_bounds
        self.marker = marker
        self.res_x, self.res_y = _RESOLUTION[marker]
        self._dots: Dict[Tuple[int, int], Optional[str]] = {}
        self._labels: List[Tuple[float, float, str, Optional[str]]] = []

    def _valid(self) -> bool:
        x0, x1 = self.x_bounds
        y0, y1 = self.y_bounds
        return x1 > x0 and y1 > y0 and self.width > 0 and self.height > 0

    def _pixel(self, x: float, y: float) -> Optional[Tuple[int, int]]:
        if not self._valid():
            return None
        x0, x1 = self.x_bounds
        y0, y1 = self.y_bounds
        if not (x0 <= x <= x1 and y0 <= y <= y1):
            return None
        pw = self.width * self.res_x
        ph = self.height * self.res_y
        return int((x - x0) / (x1 - x0) * (pw - 1)), int((y1 - y) / (y1 - y0) * (ph - 1))

    def point(self, x: float, y: float, color: Optional[str]) -> None:
        pixel = self._pixel(x, y)
        if pixel is not None:
            self._dots[pixel] = color

    def line(
        self, x1: float, y1: float, x2: float, y2: float, color: Optional[str]
    ) -> None:
        if not self._valid():
            return
        sx = (self.width * self.res_x - 1) / (self.x_bounds[1] - self.x_bounds[0])
        sy = (self.height * self.res_y - 1) / (self.y_bounds[1] - self.y_bounds[0])
        steps = int(max(abs(x2 - x1) * sx, abs(y2 - y1) * sy)) + 1
        for k in range(steps + 1):
            t = k / steps
            self.point(x1 + (x2 - x1) * t, y1 + (y2 - y1) * t, color)

    def circle(self, circle: Circle) -> None:
        for degree in range(360):
            angle = math.radians(degree)
            self.point(
                circle.x + circle.radius * math.cos(angle),
                circle.y + circle.radius * math.sin(angle),
                circle.color,
            )

    def rectangle(
        self, x: float, y: float, width: float, height: float, color: Optional[str]
    ) -> None:
        self.line(x, y, x + width, y, color)
        self.line(x, y + height, x + width, y + height, color)
        self.line(x, y, x, y + height, color)
        self.line(x + width, y, x + width, y + height, color)

    def print(self, x: float, y: float, text: str, color: Optional[str] = None) -> None:
        self._labels.append((x, y, text, color))

    def _bit(self, sub_x: int, sub_y: int) -> int:
        if self.marker is Marker.BRAILLE:
            return _BRAILLE_BITS[sub_y][sub_x]
        if self.marker is Marker.HALF_BLOCK:
            return 1 << sub_y
        return 1

    def _symbol(self, bits: int) -> str:
        if self.marker is Marker.BRAILLE:
            return chr(0x2800 + bits)
        if self.marker is Marker.HALF_BLOCK:
            return {1: "▀", 2: "▄"}.get(bits, "█")
        return _SYMBOLS[self.marker]

    def paint(self, grid: _Grid, left: int, top: int) -> None:
        cells: Dict[Tuple[int, int], Tuple[int, Optional[str]]] = {}
        for (px, py), color in self._dots.items():
            col, sub_x = divmod(px, self.res_x)
            row, sub_y = divmod(py, self.res_y)
            bits, _ = cells.get((col, row), (0, None))
            cells[(col, row)] = (bits | self._bit(sub_x, sub_y), color)
        for (col, row), (bits, color) in sorted(cells.items()):
            style = Style(color=color) if color else None
            grid.put(left + col, top + row, self._symbol(bits), style)

        if not self._valid():
            return
        x0, x1 = self.x_bounds
        y0, y1 = self.y_bounds
        for x, y, text, color in self._labels:
            if not (x0 <= x <= x1 and y0 <= y <= y1):
                continue
            col = int((x - x0) / (x1 - x0) * (self.width - 1))
            row = int((y1 - y) / (y1 - y0) * (self.height - 1))
            style = Style(color=color) if color else None
            grid.put(left + col, top + row, text, style, limit=self.width - col)


def _panel(
    grid: _Grid, area: Tuple[int, int, int, int], title: str
) -> Tuple[int, int, int, int]:
    x, y, width, height = area
    if width <= 0 or height <= 0:
        return x, y, 0, 0
    grid.border(x, y, width, height, _PLAIN, Style())
    grid.put(x + 1, y, title, limit=max(width - 2, 0))
    return x + 1, y + 1, max(width - 2, 0), max(height - 2, 0)


def box_rectangles() -> List[Tuple[float, float, float, float, str]]:
    """The growing boxes: ``(x, y, width, height, color)`` in drawing order."""
    boxes = []
    for i in range(12):
        x = (i * i + 3 * i) / 2.0 + 2.0
        boxes.append((x, 2.0, float(i), float(i), "red"))
        boxes.append((x, 21.0, float(i), float(i), "blue"))
    return boxes


@dataclass
class CanvasApp:
    should_exit: bool = False
    x: float = 0.0
    y: float = 0.0
    ball: Circle = field(default_factory=lambda: Circle(20.0, 40.0, 10.0, "yellow"))
    playground: Playground = field(default_factory=lambda: Playground(10, 10, 200, 100))
    vx: float = 1.0
    vy: float = 1.0
    tick_count: int = 0
    marker: Marker = Marker.DOT
    points: List[Tuple[int, int]] = field(default_factory=list)
    is_drawing: bool = False

    def handle_key(self, key: str) -> None:
        if key == "q":
            self.should_exit = True
        elif key in ("down", "j"):
            self.y += 1.0
        elif key in ("up", "k"):
            self.y -= 1.0
        elif key in ("right", "l"):
            self.x += 1.0
        elif key in ("left", "h"):
            self.x -= 1.0

    def add_point(self, column: int, row: int) -> None:
        """Record a dragged-over screen position for the drawing panel."""
        self.points.append((column, row))

    def on_tick(self) -> None:
        self.tick_count += 1
        # change marker only every few seconds to avoid a stroboscopic effect
        if self.tick_count % MARKER_PERIOD == 0:
            self.marker = self.marker.next()
        ball = self.ball
        playground = self.playground
        if (
            ball.x - ball.radius < playground.left
            or ball.x + ball.radius > playground.right
        ):
            self.vx = -self.vx
        if (
            ball.y - ball.radius < playground.top
            or ball.y + ball.radius > playground.bottom
        ):
            self.vy = -self.vy
        ball.x += self.vx
        ball.y += self.vy

    def render(self, width: int, height: int) -> Text:
        """Render the four canvas panels into a ``width`` by ``height`` area."""
        grid = _Grid(width, height)
        w, h = grid.width, grid.height
        if w == 0 or h == 0:
            return grid.to_text()
        left_width = w // 2
        right_width = w - left_width
        top_height = h // 2
        bottom_height = h - top_height
        self._render_draw(grid, (0, 0, left_width, top_height))
        self._render_map(grid, (0, top_height, left_width, bottom_height))
        self._render_pong(grid, (left_width, 0, right_width, top_height))
        self._render_boxes(grid, (left_width, top_height, right_width, bottom_height))
        return grid.to_text()

    def _render_map(self, grid: _Grid, area: Tuple[int, int, int, int]) -> None:
        ix, iy, iw, ih = _panel(grid, area, "World")
        canvas = _Canvas(iw, ih, (-180.0, 180.0), (-90.0, 90.0), self.marker)
        canvas.print(self.x, -self.y, "You are here", "yellow")
        canvas.paint(grid, ix, iy)

    def _render_draw(self, grid: _Grid, area: Tuple[int, int, int, int]) -> None:
        x, y, width, height = area
        ix, iy, iw, ih = _panel(grid, area, "Draw here")
        canvas = _Canvas(iw, ih, (0.0, float(width)), (0.0, float(height)), self.marker)
        bottom = y + height
        for column, row in self.points:
            canvas.point(float(column - x), float(bottom - row), "white")
        canvas.paint(grid, ix, iy)

    def _render_pong(self, grid: _Grid, area: Tuple[int, int, int, int]) -> None:
        ix, iy, iw, ih = _panel(grid, area, "Pong")
        canvas = _Canvas(iw, ih, (10.0, 210.0), (10.0, 110.0), self.marker)
        canvas.circle(self.ball)
        canvas.paint(grid, ix, iy)

    def _render_boxes(self, grid: _Grid, area: Tuple[int, int, int, int]) -> None:
        _, _, width, height = area
        ix, iy, iw, ih = _panel(grid, area, "Rects")
        top = float(height) * 2.0 - 4.0
        canvas = _Canvas(iw, ih, (0.0, float(width)), (0.0, top), self.marker)
        for bx, by, bw, bh, color in box_rectangles():
            canvas.rectangle(bx, by, bw, bh, color)
        for i in range(100):
            if i % 10 != 0:
                canvas.print(float(i) + 1.0, 0.0, str(i % 10))
            if i % 2 == 0 and i % 10 != 0:
                canvas.print(0.0, float(i), str(i % 10))
        canvas.paint(grid, ix, iy)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="tuigallery-canvas",
        description="Canvas shapes; h/j/k/l move the marker, q quits.",
    )
    parser.parse_args(argv)
    app = CanvasApp()
    last_tick = time.monotonic()
    with Terminal() as terminal:
        while not app.should_exit:
            terminal.draw(app.render(*terminal.size()))
            timeout = max(TICK_RATE - (time.monotonic() - last_tick), 0.0)
            key = terminal.read_key(timeout)
            if key is not None:
                app.handle_key(key)
            if time.monotonic() - last_tick >= TICK_RATE:
                app.on_tick()
                last_tick = time.monotonic()
    return 0