"""Display of the named, indexed and grayscale terminal colours."""

from __future__ import annotations

import argparse
from typing import Dict, List, Optional, Sequence, Tuple

from rich.console import Group
from rich.style import Style
from rich.text import Text

from .terminal import Terminal

_NAMED: List[Tuple[str, str]] = [
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

_LOOKUP: Dict[str, str] = dict(_NAMED, Reset="default")
_BASES = ["Reset", "Black", "DarkGray", "Gray", "White"]

NAMED_CELL_WIDTH = 13
NAMED_WIDTH = NAMED_CELL_WIDTH * 8
INDEXED_CELL_WIDTH = 5
CUBE_ENTRY_WIDTH = 4
CUBE_BLOCK_WIDTH = 27
INDEXED_WIDTH = 3 * CUBE_BLOCK_WIDTH
GRAYSCALE_CELL_WIDTH = 6

_BORDER_STYLE = Style(color="bright_black")


def named_colors() -> List[Tuple[str, str]]:
    """The sixteen named colours as ``(display name, colour)`` pairs."""
    return list(_NAMED)


def indexed_label(index: int) -> str:
    """Zero padded index: two digits below 16, three digits otherwise."""
    if not 0 <= index <= 255:
        raise ValueError(f"colour index out of range: {index}")
    return f"{index:0>2}" if index < 16 else f"{index:0>3}"


def indexed_cube_order() -> List[List[int]]:
    """Indexes 16-231 as displayed: 12 rows of three blocks of six columns."""
    rows = []
    for line in range(12):
        band, inner = divmod(line, 6)
        rows.append(
            [
                16 + (band * 3 + block) * 36 + inner * 6 + column
                for block in range(3)
                for column in range(6)
            ]
        )
    return rows


def _indexed(index: int) -> str:
    return f"color({index})"


def _title_line(title: str, width: int) -> Text:
    pad = max(width - len(title), 0)
    left = pad // 2
    line = Text(no_wrap=True, overflow="crop")
    line.append("─" * left, _BORDER_STYLE)
    line.append(title)
    line.append("─" * (pad - left), _BORDER_STYLE)
    return line


def _named_section(title: str, cells: List[Tuple[str, Style]]) -> List[Text]:
    lines = [_title_line(title, NAMED_WIDTH)]
    for start in (0, 8):
        row = Text(no_wrap=True, overflow="crop")
        for name, style in cells[start:start + 8]:
            row.append(name.ljust(NAMED_CELL_WIDTH)[:NAMED_CELL_WIDTH], style)
        lines.append(row)
    return lines


def render_named_colors() -> Text:
    """Foreground colours on five backgrounds, then background colours with five foregrounds."""
    lines: List[Text] = []
    for base in _BASES:
        cells = [
            (name, Style(color=color, bgcolor=_LOOKUP[base])) for name, color in _NAMED
        ]
        lines.extend(_named_section(f"Foreground colors on {base} background", cells))
    for base in _BASES:
        cells = [
            (name, Style(color=_LOOKUP[base], bgcolor=color)) for name, color in _NAMED
        ]
        lines.extend(_named_section(f"Background colors with {base} foreground", cells))
    return Text("\n").join(lines)


def render_indexed_colors() -> Text:
    """The 16 system colours followed by the 6x6x6 colour cube."""
    lines = [_title_line("Indexed colors", INDEXED_WIDTH)]
    system = Text(no_wrap=True, overflow="crop")
    for index in range(16):
        color = _indexed(index)
        background = "bright_black" if index < 1 else "black"
        label = indexed_label(index)
        system.append(label, Style(color=color, bgcolor=background))
        system.append("██", Style(color=color, bgcolor=color))
        system.append(" " * (INDEXED_CELL_WIDTH - len(label) - 2))
    lines.append(system)
    lines.append(Text(""))
    for number, indexes in enumerate(indexed_cube_order()):
        row = Text(no_wrap=True, overflow="crop")
        for position, index in enumerate(indexes):
            color = _indexed(index)
            row.append(indexed_label(index), Style(color=color, bgcolor="default"))
            row.append(".", Style(color=color, bgcolor=color))
            if position % 6 == 5:
                row.append(" " * (CUBE_BLOCK_WIDTH - 6 * CUBE_ENTRY_WIDTH))
        lines.append(row)
        if number % 6 == 5:
            lines.append(Text(""))
    return Text("\n").join(lines)


def render_grayscale() -> Text:
    """The 24 grayscale colours in two rows of twelve."""
    lines = []
    for start in (232, 244):
        row = Text(no_wrap=True, overflow="crop")
        for index in range(start, start + 12):
            color = _indexed(index)
            # make the dark colours easier to read
            background = "white" if index < 244 else "black"
            row.append(indexed_label(index), Style(color=color, bgcolor=background))
            row.append("██", Style(color=color, bgcolor=color))
            row.append(" " * (GRAYSCALE_CELL_WIDTH - 5))
        lines.append(row)
    return Text("\n").join(lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="tuigallery-colors",
        description="Show the terminal colours; q quits.",
    )
    parser.parse_args(argv)
    screen = Group(render_named_colors(), render_indexed_colors(), render_grayscale())
    with Terminal() as terminal:
        while True:
            terminal.draw(screen)
            if terminal.read_key(None) == "q":
                break
    return 0