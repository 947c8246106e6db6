"""Hourly temperatures drawn as vertical and horizontal bar charts."""

from __future__ import annotations

import argparse
import random
from typing import Iterable, List, Optional, Sequence, Tuple

from rich.color import Color
from rich.style import Style
from rich.text import Text

from .terminal import Terminal

HOURS = 24
LOWEST = 50
HIGHEST = 90

TITLE = "Barchart"
VERTICAL_TITLE = "Weather (Vertical)"
HORIZONTAL_TITLE = "Weather (Horizontal)"

VERTICAL_BAR_WIDTH = 5
VERTICAL_BAR_GAP = 1

_VERTICAL_SYMBOLS = " ▁▂▃▄▅▆▇█"
_HORIZONTAL_SYMBOLS = " ▏▎▍▌▋▊▉█"


def random_temperatures(rng: Optional[random.Random] = None) -> List[int]:
    """One random temperature in ``[50, 90)`` for each hour of the day."""
    rng = rng if rng is not None else random.Random()
    return [rng.randrange(LOWEST, HIGHEST) for _ in range(HOURS)]


def temperature_color(value: int) -> Tuple[int, int, int]:
    """Yellow to red as ``value`` goes from 50 to 90."""
    if value < LOWEST:
        raise ValueError(f"temperature {value} is below {LOWEST}")
    green = int(255.0 * (1.0 - (value - LOWEST) / 40.0))
    return 255, min(max(green, 0), 255), 0


def hour_label(hour: int) -> str:
    return f"{hour:02d}:00"


def value_label(temperature: int) -> str:
    return f"{temperature:>3}°"


def _style(value: int) -> Style:
    return Style(color=Color.from_rgb(*temperature_color(value)))


def _centered(title: str, width: int, style: Optional[Style] = None) -> Text:
    pad = max((width - len(title)) // 2, 0)
    return Text(" " * pad + title, style=style or "", no_wrap=True, overflow="crop")


def _join(lines: Iterable[Text]) -> Text:
    out = Text(no_wrap=True, overflow="crop")
    for index, line in enumerate(lines):
        if index:
            out.append("\n")
        out.append_text(line)
    return out


def _overlay(cells: List[Tuple[str, Style]], text: str, offset: int, style: Style) -> None:
    for index, char in enumerate(text):
        cells[offset + index] = (char, style)


def _line(cells: Iterable[Tuple[str, Style]]) -> Text:
    line = Text(no_wrap=True, overflow="crop")
    for char, style in cells:
        line.append(char, style)
    return line


def vertical_barchart(temperatures: Sequence[int], height: int) -> Text:
    """Title, bars of width 5 with their values, and hour labels: ``height`` rows."""
    temps = list(temperatures)
    if height <= 0:
        return Text()
    step = VERTICAL_BAR_WIDTH + VERTICAL_BAR_GAP
    width = max(len(temps) * step - VERTICAL_BAR_GAP, 0)
    bar_rows = max(height - 2, 0)
    peak = max(temps, default=0)
    gap = (" ", Style())

    lines = [_centered(VERTICAL_TITLE, width)]
    for row in range(bar_rows):
        level = bar_rows - 1 - row
        cells: List[Tuple[str, Style]] = []
        for index, value in enumerate(temps):
            if index:
                cells.extend([gap] * VERTICAL_BAR_GAP)
            style = _style(value)
            eighths = value * bar_rows * 8 // peak if peak else 0
            symbol = _VERTICAL_SYMBOLS[min(max(eighths - level * 8, 0), 8)]
            bar = [(symbol, style)] * VERTICAL_BAR_WIDTH
            text = value_label(value)
            if level == 0 and value > 0 and len(text) <= VERTICAL_BAR_WIDTH:
                offset = (VERTICAL_BAR_WIDTH - len(text)) // 2
                _overlay(bar, text, offset, style + Style(reverse=True))
            cells.extend(bar)
        lines.append(_line(cells))

    if height >= 2:
        labels = Text(no_wrap=True, overflow="crop")
        for index in range(len(temps)):
            if index:
                labels.append(" " * VERTICAL_BAR_GAP)
            labels.append(f"{hour_label(index):^{VERTICAL_BAR_WIDTH}}")
        lines.append(labels)
    return _join(lines)


def horizontal_barchart(temperatures: Sequence[int], width: int) -> Text:
    """Title and one labelled bar per hour, each row ``width`` cells wide."""
    temps = list(temperatures)
    label_width = max((len(hour_label(h)) for h in range(len(temps))), default=0)
    bars_width = max(width - label_width - 1, 0)
    peak = max(temps, default=0)

    lines = [_centered(HORIZONTAL_TITLE, width)]
    for hour, value in enumerate(temps):
        style = _style(value)
        eighths = value * bars_width * 8 // peak if peak else 0
        full, rest = divmod(eighths, 8)
        bar = "█" * full + (_HORIZONTAL_SYMBOLS[rest] if rest else "")
        bar = bar[:bars_width].ljust(bars_width)
        cells = [(char, style) for char in bar]
        text = value_label(value)
        if value > 0 and len(text) <= bars_width:
            _overlay(cells, text, 0, style + Style(reverse=True))
        line = Text(hour_label(hour).ljust(label_width) + " ", no_wrap=True, overflow="crop")
        line.append_text(_line(cells))
        lines.append(line)
    return _join(lines)


def _render(temperatures: Sequence[int], width: int, height: int) -> Text:
    usable = max(height - 3, 0)
    top = usable - usable // 2
    bottom = usable // 2
    lines: List[Text] = [_centered(TITLE, width, Style(bold=True)), Text()]
    if top:
        lines.extend(vertical_barchart(temperatures, top).split("\n"))
    lines.append(Text())
    if bottom:
        lines.extend(horizontal_barchart(temperatures, width).split("\n")[:bottom])
    return _join(lines[: max(height, 0)])


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="tuigallery-barchart",
        description="Hourly temperatures as bar charts; q quits.",
    )
    parser.parse_args(argv)
    temperatures = random_temperatures()
    with Terminal() as terminal:
        while True:
            terminal.draw(_render(temperatures, *terminal.size()))
            if terminal.read_key(None) == "q":
                break
    return 0