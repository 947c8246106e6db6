"""Interactive explorer for one-dimensional layout constraints and flex modes."""

from __future__ import annotations

import argparse
import enum
import textwrap
from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional, Sequence, Tuple

from rich.style import Style
from rich.text import Text

from .terminal import Terminal

_U16_MAX = 0xFFFF
_U32_MAX = 0xFFFFFFFF

# Tailwind palette shades used by the explorer.
_SLATE = {
    200: "#e2e8f0",
    400: "#94a3b8",
    500: "#64748b",
    600: "#475569",
    700: "#334155",
    800: "#1e293b",
    900: "#0f172a",
    950: "#020617",
}
_BLUE = {800: "#1e40af", 900: "#1e3a8a"}
_STONE = {500: "#78716c", 600: "#57534e", 700: "#44403c", 800: "#292524"}
_SKY = {600: "#0284c7", 700: "#0369a1"}

HEADER_COLOR = _SLATE[200]
TEXT_COLOR = _SLATE[400]
AXIS_COLOR = _SLATE[500]
BLOCK_TEXT_COLOR = _SLATE[200]
SPACER_TEXT_COLOR = _SLATE[500]
SPACER_BORDER_COLOR = _SLATE[600]

HEADER = "Constraint Explorer"
INSTRUCTIONS = (
    "◄ ►: select, ▲ ▼: edit, 1-6: swap, a: add, x: delete, q: quit, + -: spacing"
)

_QUADRANT_OUTSIDE = {
    "top_left": "▛",
    "top_right": "▜",
    "bottom_left": "▙",
    "bottom_right": "▟",
    "vertical_left": "▌",
    "vertical_right": "▐",
    "horizontal_top": "▀",
    "horizontal_bottom": "▄",
}

_CORNERS_ONLY = {
    "top_left": "┌",
    "top_right": "┐",
    "bottom_left": "└",
    "bottom_right": "┘",
    "vertical_left": " ",
    "vertical_right": " ",
    "horizontal_top": " ",
    "horizontal_bottom": " ",
}


class ConstraintName(enum.Enum):
    LENGTH = "Length"
    PERCENTAGE = "Percentage"
    RATIO = "Ratio"
    MIN = "Min"
    MAX = "Max"
    FILL = "Fill"

    def __str__(self) -> str:
        return self.value

    @staticmethod
    def of(constraint: "Constraint") -> "ConstraintName":
        """Return the kind of ``constraint``."""
        return constraint.name

    def color(self) -> str:
        return _MAIN_COLORS[self]

    def lighter_color(self) -> str:
        return _LIGHTER_COLORS[self]


_MAIN_COLORS: Dict[ConstraintName, str] = {
    ConstraintName.LENGTH: _SLATE[700],
    ConstraintName.PERCENTAGE: _SLATE[800],
    ConstraintName.RATIO: _SLATE[900],
    ConstraintName.FILL: _SLATE[950],
    ConstraintName.MIN: _BLUE[800],
    ConstraintName.MAX: _BLUE[900],
}

_LIGHTER_COLORS: Dict[ConstraintName, str] = {
    ConstraintName.LENGTH: _STONE[500],
    ConstraintName.PERCENTAGE: _STONE[600],
    ConstraintName.RATIO: _STONE[700],
    ConstraintName.FILL: _STONE[800],
    ConstraintName.MIN: _SKY[600],
    ConstraintName.MAX: _SKY[700],
}

SWAP_ORDER = [
    ConstraintName.MIN,
    ConstraintName.MAX,
    ConstraintName.LENGTH,
    ConstraintName.PERCENTAGE,
    ConstraintName.RATIO,
    ConstraintName.FILL,
]


@dataclass(frozen=True)
class Constraint:
    """A layout constraint; for ``RATIO`` the value is the numerator."""

    name: ConstraintName
    value: int
    denominator: int = 1

    def __str__(self) -> str:
        if self.name is ConstraintName.RATIO:
            return f"Ratio({self.value}, {self.denominator})"
        return f"{self.name.value}({self.value})"


class AppMode(enum.Enum):
    RUNNING = "running"
    QUIT = "quit"


class _Flex(enum.Enum):
    START = "Start"
    CENTER = "Center"
    END = "End"
    SPACE_AROUND = "SpaceAround"
    SPACE_BETWEEN = "SpaceBetween"


# --- layout ---------------------------------------------------------------


def _distribute(total: int, weights: Sequence[int]) -> List[int]:
    """Split ``total`` into integer parts proportional to ``weights``."""
    weight_sum = sum(weights)
    if total <= 0 or weight_sum <= 0:
        return [0] * len(weights)
    parts = []
    cumulative = 0
    previous = 0
    for weight in weights:
        cumulative += weight
        edge = total * cumulative // weight_sum
        parts.append(edge - previous)
        previous = edge
    return parts


def _base_size(constraint: Constraint, total: int) -> int:
    name = constraint.name
    if name in (ConstraintName.LENGTH, ConstraintName.MIN, ConstraintName.MAX):
        return constraint.value
    if name is ConstraintName.PERCENTAGE:
        return total * constraint.value // 100
    if name is ConstraintName.RATIO:
        if constraint.denominator == 0:
            return 0
        return total * constraint.value // constraint.denominator
    return 0


_SHRINK_ORDER = [
    (ConstraintName.FILL,),
    (ConstraintName.PERCENTAGE, ConstraintName.RATIO),
    (ConstraintName.LENGTH,),
    (ConstraintName.MAX,),
    (ConstraintName.MIN,),
]


def _split(
    constraints: Sequence[Constraint], total: int, flex: _Flex, spacing: int
) -> Tuple[List[Tuple[int, int]], List[Tuple[int, int]]]:
    """Lay constraints out along ``total`` cells; return segments and spacers."""
    count = len(constraints)
    if count == 0 or total <= 0:
        return [(0, 0)] * count, []
    available = max(total - spacing * (count - 1), 0)
    sizes = [_base_size(c, total) for c in constraints]

    overflow = sum(sizes) - available
    for group in _SHRINK_ORDER:
        if overflow <= 0:
            break
        for index in reversed(range(count)):
            if overflow <= 0:
                break
            if constraints[index].name in group:
                cut = min(sizes[index], overflow)
                sizes[index] -= cut
                overflow -= cut

    excess = max(available - sum(sizes), 0)
    fills = [i for i, c in enumerate(constraints) if c.name is ConstraintName.FILL]
    mins = [i for i, c in enumerate(constraints) if c.name is ConstraintName.MIN]
    if excess and fills:
        weights = [constraints[i].value for i in fills]
        if sum(weights) == 0:
            weights = [1] * len(fills)
        for index, extra in zip(fills, _distribute(excess, weights)):
            sizes[index] += extra
        excess = 0
    elif excess and mins:
        for index, extra in zip(mins, _distribute(excess, [1] * len(mins))):
            sizes[index] += extra
        excess = 0

    gaps = [0] + [spacing] * (count - 1) + [0]
    if excess:
        if flex is _Flex.START:
            gaps[-1] += excess
        elif flex is _Flex.END:
            gaps[0] += excess
        elif flex is _Flex.CENTER:
            gaps[0] += excess // 2
            gaps[-1] += excess - excess // 2
        elif flex is _Flex.SPACE_BETWEEN:
            if count > 1:
                shares = _distribute(excess, [1] * (count - 1))
                for offset, share in enumerate(shares, start=1):
                    gaps[offset] += share
            else:
                gaps[-1] += excess
        else:
            shares = _distribute(excess, [1] + [2] * (count - 1) + [1])
            gaps = [gap + share for gap, share in zip(gaps, shares)]

    def clip(x: int, width: int) -> Tuple[int, int]:
        start = min(max(x, 0), total)
        end = min(max(x + width, 0), total)
        return start, end - start

    segments: List[Tuple[int, int]] = []
    spacers: List[Tuple[int, int]] = []
    x = 0
    for index, size in enumerate(sizes):
        spacers.append(clip(x, gaps[index]))
        x += gaps[index]
        segments.append(clip(x, size))
        x += size
    spacers.append(clip(x, gaps[-1]))
    return segments, spacers


# --- cell grid ------------------------------------------------------------


class _Grid:
    def __init__(self, width: int, height: int) -> None:
        self.width = max(width, 0)
        self.height = max(height, 0)
        self.cells = [
            [(" ", Style()) for _ in range(self.width)] for _ in range(self.height)
        ]

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put(
        self, x: int, y: int, text: str, style: Optional[Style] = None, limit: int = -1
    ) -> None:
        if limit >= 0:
            text = text[:limit]
        for offset, char in enumerate(text):
            if self._inside(x + offset, y):
                old = self.cells[y][x + offset][1]
                self.cells[y][x + offset] = (char, old + style if style else old)

    def patch(self, x: int, y: int, width: int, height: int, style: Style) -> None:
        for row in range(y, y + height):
            for col in range(x, x + width):
                if self._inside(col, row):
                    char, old = self.cells[row][col]
                    self.cells[row][col] = (char, old + style)

    def centered(
        self, x: int, y: int, width: int, text: str, style: Optional[Style] = None
    ) -> None:
        if width <= 0:
            return
        shown = text[:width]
        self.put(x + (width - len(shown)) // 2, y, shown, style)

    def border(
        self, x: int, y: int, width: int, height: int, chars: Dict[str, str], style: Style
    ) -> None:
        if width <= 0 or height <= 0:
            return
        right, bottom = x + width - 1, y + height - 1
        for row in range(y, y + height):
            self.put(x, row, chars["vertical_left"], style)
        self.put(x, y, chars["horizontal_top"] * width, style)
        for row in range(y, y + height):
            self.put(right, row, chars["vertical_right"], style)
        self.put(x, bottom, chars["horizontal_bottom"] * width, style)
        self.put(x, y, chars["top_left"], style)
        self.put(right, y, chars["top_right"], style)
        self.put(x, bottom, chars["bottom_left"], style)
        self.put(right, bottom, chars["bottom_right"], style)

    def to_text(self) -> Text:
        out = Text(no_wrap=True, overflow="crop")
        for index, row in enumerate(self.cells):
            if index:
                out.append("\n")
            for char, style in row:
                out.append(char, style)
        return out


# --- labels ---------------------------------------------------------------


def constraint_block_label(constraint: Constraint, width: int) -> str:
    """Label of a constraint block: its constraint and, if it fits, its width."""
    long_width = f"{width} px"
    short_width = f"{width}"
    available = max(width - 2, 0)
    if len(long_width) < available:
        width_label = long_width
    elif len(short_width) < available:
        width_label = short_width
    else:
        width_label = ""
    return f"{constraint}\n{width_label}"


def spacer_label(width: int) -> str:
    """The word shown inside a spacer, when it is wide enough."""
    return "Spacer" if width >= 6 else ""


def _spacer_width_label(width: int) -> str:
    long_label = f"{width} px"
    short_label = f"{width}"
    if len(long_label) < width:
        return long_label
    if len(short_label) < width:
        return short_label
    return ""


# --- widgets --------------------------------------------------------------


def _render_constraint_block(
    grid: _Grid,
    area: Tuple[int, int, int, int],
    constraint: Constraint,
    selected: bool,
    legend: bool,
) -> None:
    x, y, width, height = area
    if width <= 0 or height <= 0:
        return
    kind = ConstraintName.of(constraint)
    main_color = kind.color()
    lighter_color = kind.lighter_color()
    selected_color = lighter_color if selected else main_color

    if height == 1:
        grid.patch(x, y, width, height, Style(color=BLOCK_TEXT_COLOR, bgcolor=selected_color))
        return
    if height == 2:
        grid.border(
            x, y, width, height, _QUADRANT_OUTSIDE,
            Style(color=selected_color, bgcolor="default", reverse=True),
        )
        return

    color = selected_color if legend else main_color
    body = Style(color=BLOCK_TEXT_COLOR, bgcolor=color)
    grid.patch(x, y, width, height, body)
    grid.border(
        x, y, width, height, _QUADRANT_OUTSIDE,
        Style(color=color, bgcolor="default", reverse=True),
    )
    lines = constraint_block_label(constraint, width).split("\n")
    for offset, line in enumerate(lines[: max(height - 2, 0)]):
        grid.centered(x + 1, y + 1 + offset, width - 2, line, body)

    if not legend:
        grid.patch(x, y + height - 1, width, 1, Style(color=selected_color))


def _render_spacer(grid: _Grid, area: Tuple[int, int, int, int]) -> None:
    x, y, width, height = area
    if width <= 0 or height <= 1:
        return
    if width > 1:
        grid.border(x, y, width, height, _CORNERS_ONLY, Style(color=SPACER_BORDER_COLOR))
    else:
        for row in (1, 2):
            if row < height:
                grid.put(x, y + row, "│", Style(color=SPACER_BORDER_COLOR))
    if height >= 3:
        grid.centered(x, y + 1, width, spacer_label(width), Style(color=SPACER_TEXT_COLOR))
    if height >= 4:
        grid.centered(
            x, y + 2, width, _spacer_width_label(width), Style(color=SPACER_TEXT_COLOR)
        )


# --- application ----------------------------------------------------------


@dataclass
class ExplorerApp:
    mode: AppMode = AppMode.RUNNING
    spacing: int = 0
    constraints: List[Constraint] = field(default_factory=list)
    selected_index: int = 0
    value: int = 0

    def insert_test_defaults(self) -> None:
        self.constraints = [Constraint(ConstraintName.LENGTH, 20) for _ in range(3)]
        self.value = 20

    def is_running(self) -> bool:
        return self.mode is AppMode.RUNNING

    def handle_key(self, key: str) -> None:
        if key in ("q", "escape"):
            self.exit()
        elif key in ("1", "2", "3", "4", "5", "6"):
            swap_keys = {
                "1": ConstraintName.MIN,
                "2": ConstraintName.MAX,
                "3": ConstraintName.LENGTH,
                "4": ConstraintName.PERCENTAGE,
                "5": ConstraintName.RATIO,
                "6": ConstraintName.FILL,
            }
            self.swap_constraint(swap_keys[key])
        elif key == "+":
            self.increment_spacing()
        elif key == "-":
            self.decrement_spacing()
        elif key == "x":
            self.delete_block()
        elif key == "a":
            self.insert_block()
        elif key in ("k", "up"):
            self.increment_value()
        elif key in ("j", "down"):
            self.decrement_value()
        elif key in ("h", "left"):
            self.prev_block()
        elif key in ("l", "right"):
            self.next_block()

    def _selected(self) -> Optional[Constraint]:
        if 0 <= self.selected_index < len(self.constraints):
            return self.constraints[self.selected_index]
        return None

    def _adjust_value(self, delta: int) -> None:
        constraint = self._selected()
        if constraint is None:
            return
        if constraint.name is ConstraintName.RATIO:
            denominator = min(max(constraint.denominator + delta, 0), _U32_MAX)
            updated = replace(constraint, denominator=denominator)
        else:
            updated = replace(
                constraint, value=min(max(constraint.value + delta, 0), _U16_MAX)
            )
        self.constraints[self.selected_index] = updated

    def increment_value(self) -> None:
        self._adjust_value(1)

    def decrement_value(self) -> None:
        self._adjust_value(-1)

    def next_block(self) -> None:
        """Select the next block, wrapping around."""
        if self.constraints:
            self.selected_index = (self.selected_index + 1) % len(self.constraints)

    def prev_block(self) -> None:
        """Select the previous block, wrapping around."""
        if self.constraints:
            length = len(self.constraints)
            self.selected_index = (self.selected_index + length - 1) % length

    def delete_block(self) -> None:
        if not self.constraints:
            return
        del self.constraints[self.selected_index]
        self.selected_index = max(self.selected_index - 1, 0)

    def insert_block(self) -> None:
        """Insert a ``Length(value)`` block after the selected one."""
        index = min(self.selected_index + 1, len(self.constraints))
        self.constraints.insert(index, Constraint(ConstraintName.LENGTH, self.value))
        self.selected_index = index

    def increment_spacing(self) -> None:
        self.spacing = min(self.spacing + 1, _U16_MAX)

    def decrement_spacing(self) -> None:
        self.spacing = max(self.spacing - 1, 0)

    def exit(self) -> None:
        self.mode = AppMode.QUIT

    def swap_constraint(self, name: ConstraintName) -> None:
        if not self.constraints:
            return
        if name is ConstraintName.RATIO:
            constraint = Constraint(ConstraintName.RATIO, 1, self.value // 4)
        else:
            constraint = Constraint(name, self.value)
        self.constraints[self.selected_index] = constraint

    def axis_label(self, width: int) -> str:
        """A bar like ``<----- 80 px (gap: 2 px) ----->``."""
        if self.spacing != 0:
            label = f"{width} px (gap: {self.spacing} px)"
        else:
            label = f"{width} px"
        bar_width = max(width - 2, 0)
        return f"<{label:-^{bar_width}}>"

    # rendering

    def render(self, width: int, height: int) -> Text:
        """Render the whole explorer screen."""
        grid = _Grid(width, height)
        width, height = grid.width, grid.height
        if width == 0 or height == 0:
            return grid.to_text()

        grid.centered(0, 0, width, HEADER, Style(color=HEADER_COLOR, bold=True))

        for offset, line in enumerate(textwrap.wrap(INSTRUCTIONS, width)[:2]):
            grid.centered(0, 2 + offset, width, line, Style(color=TEXT_COLOR))

        self._render_swap_legend(grid, 4)
        self._render_layout_blocks(grid, 6, max(height - 6, 0))
        return grid.to_text()

    def _render_swap_legend(self, grid: _Grid, y: int) -> None:
        spans: List[Tuple[str, Style]] = []
        for number, name in enumerate(SWAP_ORDER, start=1):
            if spans:
                spans.append((" ", Style()))
            spans.append(
                (f"  {number}: {name}  ", Style(color=_SLATE[200], bgcolor=name.color()))
            )
        total = sum(len(text) for text, _ in spans)
        x = max((grid.width - total) // 2, 0)
        for text, style in spans:
            grid.put(x, y, text, style)
            x += len(text)

    def _render_layout_blocks(self, grid: _Grid, y: int, height: int) -> None:
        if height <= 0:
            return
        legend_height = min(3, height)
        self._render_user_constraints_legend(grid, y, legend_height)
        y += legend_height + 1
        remaining = max(height - legend_height - 1, 0)
        for flex in _Flex:
            block_height = min(7, remaining)
            if block_height <= 0:
                break
            self._render_layout_block(grid, flex, y, block_height)
            y += block_height
            remaining -= block_height

    def _render_user_constraints_legend(self, grid: _Grid, y: int, height: int) -> None:
        fills = [Constraint(ConstraintName.FILL, 1) for _ in self.constraints]
        segments, _ = _split(fills, grid.width, _Flex.START, 0)
        for index, ((x, width), constraint) in enumerate(zip(segments, self.constraints)):
            _render_constraint_block(
                grid, (x, y, width, height), constraint,
                self.selected_index == index, True,
            )

    def _render_layout_block(self, grid: _Grid, flex: _Flex, y: int, height: int) -> None:
        grid.put(0, y, f"Flex::{flex.value}", Style(bold=True))
        if height < 2:
            return
        grid.centered(0, y + 1, grid.width, self.axis_label(grid.width), Style(color=AXIS_COLOR))
        blocks_height = min(4, height - 2)
        if blocks_height <= 0:
            return
        blocks_y = y + 2
        segments, spacers = _split(self.constraints, grid.width, flex, self.spacing)
        for index, ((x, width), constraint) in enumerate(zip(segments, self.constraints)):
            _render_constraint_block(
                grid, (x, blocks_y, width, blocks_height), constraint,
                self.selected_index == index, False,
            )
        for x, width in spacers:
            _render_spacer(grid, (x, blocks_y, width, blocks_height))


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="tuigallery-explorer",
        description="Explore layout constraints and flex modes interactively.",
    )
    parser.parse_args(argv)
    app = ExplorerApp()
    app.insert_test_defaults()
    with Terminal() as terminal:
        while app.is_running():
            terminal.draw(app.render(*terminal.size()))
            key = terminal.read_key(None)
            if key is not None:
                app.handle_key(key)
    return 0