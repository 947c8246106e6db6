"""Themed push buttons driven by keyboard and mouse."""

from __future__ import annotations

import argparse
import enum
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from rich.cells import cell_len
from rich.color import Color
from rich.style import Style
from rich.text import Text

from .terminal import Terminal

RGB = Tuple[int, int, int]

BUTTON_WIDTH = 15
TITLE = "Custom Widget Example (mouse enabled)"
HELP = "←/→: select, Space: toggle, q: quit"


class State(enum.Enum):
    NORMAL = "normal"
    SELECTED = "selected"
    ACTIVE = "active"


@dataclass(frozen=True)
class Theme:
    text: RGB
    background: RGB
    highlight: RGB
    shadow: RGB


BLUE = Theme(
    text=(16, 24, 48),
    background=(48, 72, 144),
    highlight=(64, 96, 192),
    shadow=(32, 48, 96),
)

RED = Theme(
    text=(48, 16, 16),
    background=(144, 48, 48),
    highlight=(192, 64, 64),
    shadow=(96, 32, 32),
)

GREEN = Theme(
    text=(16, 48, 16),
    background=(48, 144, 48),
    highlight=(64, 192, 64),
    shadow=(32, 96, 32),
)


def _style(fg: RGB, bg: RGB) -> Style:
    return Style(color=Color.from_rgb(*fg), bgcolor=Color.from_rgb(*bg))


def _join_rows(rows: List[Text]) -> Text:
    out = Text(no_wrap=True, overflow="crop")
    for index, row in enumerate(rows):
        if index:
            out.append("\n")
        out.append_text(row)
    return out


@dataclass
class Button:
    label: str
    theme: Theme = BLUE
    state: State = State.NORMAL

    def colors(self) -> Tuple[RGB, RGB, RGB, RGB]:
        """Return ``(background, text, shadow, highlight)`` for the current state."""
        theme = self.theme
        if self.state is State.SELECTED:
            return theme.highlight, theme.text, theme.shadow, theme.highlight
        if self.state is State.ACTIVE:
            return theme.background, theme.text, theme.highlight, theme.shadow
        return theme.background, theme.text, theme.shadow, theme.highlight

    def _rows(self, width: int, height: int) -> List[Text]:
        if width <= 0 or height <= 0:
            return [Text() for _ in range(max(height, 0))]
        background, text, shadow, highlight = self.colors()
        base = _style(text, background)
        rows = [Text(" " * width, style=base) for _ in range(height)]
        if height > 2:
            rows[0] = Text("▔" * width, style=_style(highlight, background))
        if height > 1:
            rows[-1] = Text("▁" * width, style=_style(shadow, background))

        x = max(width - cell_len(self.label), 0) // 2
        y = (height - 1) // 2
        label = Text(self.label)
        label.truncate(width - x)
        padding = width - x - cell_len(label.plain)
        rows[y] = Text(" " * x + label.plain + " " * padding, style=base)
        return rows

    def render(self, width: int, height: int) -> Text:
        """Render the button into a ``width`` by ``height`` block."""
        return _join_rows(self._rows(width, height))


class MouseEventKind(enum.Enum):
    MOVED = "moved"
    LEFT_DOWN = "left_down"
    RIGHT_DOWN = "right_down"
    LEFT_UP = "left_up"


@dataclass(frozen=True)
class MouseEvent:
    kind: MouseEventKind
    column: int
    row: int = 0


@dataclass
class ButtonBar:
    """Three buttons; one is selected, any may be toggled active."""

    states: List[State] = field(
        default_factory=lambda: [State.SELECTED, State.NORMAL, State.NORMAL]
    )
    selected: int = 0

    def _toggle(self) -> None:
        current = self.states[self.selected]
        self.states[self.selected] = (
            State.NORMAL if current is State.ACTIVE else State.ACTIVE
        )

    def _select(self, index: int) -> None:
        self.states[self.selected] = State.NORMAL
        self.selected = index
        self.states[self.selected] = State.SELECTED

    def handle_key(self, key: str) -> bool:
        """Apply a key press. Return ``False`` when the user asked to quit."""
        if key == "q":
            return False
        if key in ("left", "h"):
            self._select(max(self.selected - 1, 0))
        elif key in ("right", "l"):
            self._select(min(self.selected + 1, len(self.states) - 1))
        elif key == " ":
            self._toggle()
        return True

    def handle_mouse(self, event: MouseEvent) -> None:
        if event.kind is MouseEventKind.MOVED:
            old = self.selected
            if event.column < BUTTON_WIDTH:
                self.selected = 0
            elif event.column < 2 * BUTTON_WIDTH:
                self.selected = 1
            else:
                self.selected = 2
            if old != self.selected:
                if self.states[old] is not State.ACTIVE:
                    self.states[old] = State.NORMAL
                if self.states[self.selected] is not State.ACTIVE:
                    self.states[self.selected] = State.SELECTED
        elif event.kind is MouseEventKind.LEFT_DOWN:
            self._toggle()

    def _buttons(self) -> List[Button]:
        return [
            Button("Red", RED, self.states[0]),
            Button("Green", GREEN, self.states[1]),
            Button("Blue", BLUE, self.states[2]),
        ]

    def render(self, width: int, height: int) -> Text:
        """Render title, buttons and help line into the given area."""
        rows: List[Text] = []
        if height <= 0:
            return _join_rows(rows)
        rows.append(Text(TITLE))
        button_height = min(3, max(height - 2, 0))
        widths = [
            max(0, min(BUTTON_WIDTH, width - BUTTON_WIDTH * i)) for i in range(3)
        ]
        rendered = [
            button._rows(w, button_height)
            for button, w in zip(self._buttons(), widths)
        ]
        for r in range(button_height):
            line = Text(no_wrap=True, overflow="crop")
            for button_rows in rendered:
                if button_rows:
                    line.append_text(button_rows[r])
            rows.append(line)
        if height - 1 - button_height >= 1:
            rows.append(Text(HELP))
        return _join_rows(rows)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="tuigallery-buttons",
        description="Themed buttons: left/right select, space toggles, q quits.",
    )
    parser.parse_args(argv)
    bar = ButtonBar()
    with Terminal() as terminal:
        while True:
            terminal.draw(bar.render(*terminal.size()))
            key = terminal.read_key(0.1)
            if key is None:
                continue
            if not bar.handle_key(key):
                break
    return 0