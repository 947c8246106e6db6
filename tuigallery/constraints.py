"""Tabbed gallery of layout constraint examples with a scrollable demo area."""

from __future__ import annotations

import argparse
import enum
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from rich.style import Style
from rich.text import Text

from .explorer import (
    _QUADRANT_OUTSIDE,
    Constraint,
    ConstraintName,
    _Flex,
    _Grid,
    _split,
)
from .terminal import Terminal

SPACER_HEIGHT = 0
ILLUSTRATION_HEIGHT = 4
EXAMPLE_HEIGHT = ILLUSTRATION_HEIGHT + SPACER_HEIGHT

# Tailwind shades: priority 2
MIN_COLOR = "#1e3a8a"  # blue 900
MAX_COLOR = "#1e40af"  # blue 800
# priority 3
LENGTH_COLOR = "#334155"  # slate 700
PERCENTAGE_COLOR = "#1e293b"  # slate 800
RATIO_COLOR = "#0f172a"  # slate 900
# priority 4
FILL_COLOR = "#020617"  # slate 950

TAB_TEXT_COLOR = "#e2e8f0"  # slate 200
ILLUSTRATION_FG = "bright_white"
AXIS_COLOR = "bright_black"

HEADER_TITLE = "Constraints "
HEADER_HINT = " Use h l or ◄ ► to change tab and j k or ▲ ▼  to scroll"

_COLORS: Dict[ConstraintName, str] = {
    ConstraintName.LENGTH: LENGTH_COLOR,
    ConstraintName.PERCENTAGE: PERCENTAGE_COLOR,
    ConstraintName.RATIO: RATIO_COLOR,
    ConstraintName.FILL: FILL_COLOR,
    ConstraintName.MIN: MIN_COLOR,
    ConstraintName.MAX: MAX_COLOR,
}


def _length(value: int) -> Constraint:
    return Constraint(ConstraintName.LENGTH, value)


def _min(value: int) -> Constraint:
    return Constraint(ConstraintName.MIN, value)


def _max(value: int) -> Constraint:
    return Constraint(ConstraintName.MAX, value)


def _percentage(value: int) -> Constraint:
    return Constraint(ConstraintName.PERCENTAGE, value)


def _ratio(numerator: int, denominator: int) -> Constraint:
    return Constraint(ConstraintName.RATIO, numerator, denominator)


def _fill(value: int) -> Constraint:
    return Constraint(ConstraintName.FILL, value)


class SelectedTab(enum.Enum):
    """The tabs, in the order they are displayed."""

    MIN = "Min"
    MAX = "Max"
    LENGTH = "Length"
    PERCENTAGE = "Percentage"
    RATIO = "Ratio"
    FILL = "Fill"

    def __str__(self) -> str:
        return self.value

    def _position(self) -> int:
        return list(SelectedTab).index(self)

    def next(self) -> "SelectedTab":
        """The next tab, or this one when it is the last."""
        members = list(SelectedTab)
        position = self._position() + 1
        return members[position] if position < len(members) else self

    def previous(self) -> "SelectedTab":
        """The previous tab, or this one when it is the first."""
        return list(SelectedTab)[max(self._position() - 1, 0)]

    def example_count(self) -> int:
        return _EXAMPLE_COUNTS[self]

    def title(self) -> str:
        return f"  {self.value}  "

    def color(self) -> str:
        return _COLORS[ConstraintName(self.value)]

    def examples(self) -> List[List[Constraint]]:
        """The constraint rows shown on this tab."""
        return [list(row) for row in _EXAMPLES[self]]


_EXAMPLE_COUNTS: Dict[SelectedTab, int] = {
    SelectedTab.LENGTH: 4,
    SelectedTab.PERCENTAGE: 5,
    SelectedTab.RATIO: 4,
    SelectedTab.FILL: 2,
    SelectedTab.MIN: 5,
    SelectedTab.MAX: 5,
}

_EXAMPLES: Dict[SelectedTab, List[List[Constraint]]] = {
    SelectedTab.LENGTH: [
        [_length(20), _length(20)],
        [_length(20), _min(20)],
        [_length(20), _max(20)],
    ],
    SelectedTab.PERCENTAGE: [
        [_percentage(75), _fill(0)],
        [_percentage(25), _fill(0)],
        [_percentage(50), _min(20)],
        [_percentage(0), _max(0)],
        [_percentage(0), _fill(0)],
    ],
    SelectedTab.RATIO: [
        [_ratio(1, 2), _ratio(1, 2)],
        [_ratio(1, 4) for _ in range(4)],
        [_ratio(1, 2), _ratio(1, 3), _ratio(1, 4)],
        [_ratio(1, 2), _percentage(25), _length(10)],
    ],
    SelectedTab.FILL: [
        [_fill(1), _fill(2), _fill(3)],
        [_fill(1), _percentage(50), _fill(1)],
    ],
    SelectedTab.MIN: [[_percentage(100), _min(n)] for n in (0, 20, 40, 60, 80)],
    SelectedTab.MAX: [[_percentage(0), _max(n)] for n in (0, 20, 40, 60, 80)],
}


class AppState(enum.Enum):
    RUNNING = "running"
    QUIT = "quit"


def axis_bar(width: int) -> str:
    """A bar like ``<----- 80 px ----->``."""
    width_label = f"{width} px"
    bar_width = max(width - len(width_label) // 2, 0)
    return f"<{width_label:-^{bar_width}}>"


def _render_illustration(
    grid: _Grid, area: Tuple[int, int, int, int], constraint: Constraint
) -> None:
    x, y, width, height = area
    if width <= 0 or height <= 0:
        return
    color = _COLORS[constraint.name]
    body = Style(color=ILLUSTRATION_FG, bgcolor=color)
    grid.patch(x, y, width, height, body)
    grid.border(
        x, y, width, height, _QUADRANT_OUTSIDE,
        Style(color=color, bgcolor="default", reverse=True),
    )
    lines = [str(constraint), f"{width} px"]
    for offset, line in enumerate(lines[: max(height - 2, 0)]):
        grid.centered(x + 1, y + 1 + offset, width - 2, line, body)


def _render_example(
    grid: _Grid, y: int, width: int, constraints: Sequence[Constraint]
) -> None:
    segments, _ = _split(constraints, width, _Flex.START, 0)
    for (x, segment_width), constraint in zip(segments, constraints):
        _render_illustration(grid, (x, y, segment_width, ILLUSTRATION_HEIGHT), constraint)


def _render_scrollbar(
    grid: _Grid, top: int, height: int, content_length: int, position: int
) -> None:
    if grid.width <= 0 or height < 2:
        return
    x = grid.width - 1
    grid.put(x, top, "▲")
    grid.put(x, top + height - 1, "▼")
    track = height - 2
    for row in range(track):
        grid.put(x, top + 1 + row, "║")
    if track <= 0:
        return
    fraction = position / (content_length - 1) if content_length > 1 else 0.0
    thumb = round(min(max(fraction, 0.0), 1.0) * (track - 1))
    grid.put(x, top + 1 + thumb, "█")


@dataclass
class ConstraintsApp:
    selected_tab: SelectedTab = SelectedTab.MIN
    scroll_offset: int = 0
    max_scroll_offset: int = 0
    state: AppState = AppState.RUNNING

    def update_max_scroll_offset(self) -> None:
        self.max_scroll_offset = (self.selected_tab.example_count() - 1) * EXAMPLE_HEIGHT

    def is_running(self) -> bool:
        return self.state is AppState.RUNNING

    def handle_key(self, key: str) -> None:
        if key in ("q", "escape"):
            self.quit()
        elif key in ("l", "right"):
            self.next()
        elif key in ("h", "left"):
            self.previous()
        elif key in ("j", "down"):
            self.down()
        elif key in ("k", "up"):
            self.up()
        elif key in ("g", "home"):
            self.top()
        elif key in ("G", "end"):
            self.bottom()

    def quit(self) -> None:
        self.state = AppState.QUIT

    def next(self) -> None:
        self.selected_tab = self.selected_tab.next()
        self.update_max_scroll_offset()
        self.scroll_offset = 0

    def previous(self) -> None:
        self.selected_tab = self.selected_tab.previous()
        self.update_max_scroll_offset()
        self.scroll_offset = 0

    def up(self) -> None:
        self.scroll_offset = max(self.scroll_offset - 1, 0)

    def down(self) -> None:
        self.scroll_offset = min(self.scroll_offset + 1, self.max_scroll_offset)

    def top(self) -> None:
        self.scroll_offset = 0

    def bottom(self) -> None:
        self.scroll_offset = self.max_scroll_offset

    def render(self, width: int, height: int) -> Text:
        """Render tabs, axis and the scrolled demo area."""
        grid = _Grid(width, height)
        if grid.width == 0 or grid.height == 0:
            return grid.to_text()
        self._render_tabs(grid)
        if grid.height > 4:
            grid.centered(0, 4, grid.width, axis_bar(grid.width), Style(color=AXIS_COLOR))
        self._render_demo(grid, 6, max(grid.height - 6, 0))
        return grid.to_text()

    def _render_tabs(self, grid: _Grid) -> None:
        grid.put(0, 0, HEADER_TITLE, Style(bold=True))
        grid.put(len(HEADER_TITLE) + 1, 0, HEADER_HINT)
        x = 0
        for index, tab in enumerate(SelectedTab):
            if index:
                grid.put(x, 1, " ")
                x += 1
            style = Style(color=TAB_TEXT_COLOR, bgcolor=tab.color())
            if tab is self.selected_tab:
                style += Style(reverse=True)
            title = tab.title()
            grid.put(x, 1, title, style)
            x += len(title)

    def _render_demo(self, grid: _Grid, top: int, area_height: int) -> None:
        if area_height <= 0:
            return
        width = grid.width
        content_height = self.selected_tab.example_count() * EXAMPLE_HEIGHT
        demo = _Grid(width, content_height + area_height)
        scrollbar_needed = self.scroll_offset != 0 or content_height > area_height
        content_width = max(width - 1, 0) if scrollbar_needed else width
        for index, constraints in enumerate(self.selected_tab.examples()):
            _render_example(demo, index * EXAMPLE_HEIGHT, content_width, constraints)

        for row in range(area_height):
            source = self.scroll_offset + row
            if source < demo.height and top + row < grid.height:
                grid.cells[top + row] = list(demo.cells[source])

        if scrollbar_needed:
            _render_scrollbar(
                grid, top, area_height, self.max_scroll_offset, self.scroll_offset
            )


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="tuigallery-constraints",
        description="Browse layout constraint examples by tab.",
    )
    parser.parse_args(argv)
    app = ConstraintsApp()
    app.update_max_scroll_offset()
    with Terminal() as terminal:
        while app.is_running():
            terminal.draw(app.render(*terminal.size()))
            key = terminal.read_key(None)
            if key is not None:
                app.handle_key(key)
    return 0