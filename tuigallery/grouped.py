"""Grouped bar charts of quarterly company revenues, vertical and horizontal."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from rich.style import Style
from rich.text import Text

from .demo_ui import _HORIZONTAL_EIGHTHS, _NINE_LEVELS, _bar_symbol, _Grid
from .terminal import Terminal

COMPANY_COUNT = 3
PERIOD_COUNT = 4

TITLE = "Grouped Barchart"
VERTICAL_TITLE = "Company revenues (Vertical)"
HORIZONTAL_TITLE = "Company Revenues (Horizontal)"

VERTICAL_BAR_WIDTH = 6
GROUP_GAP = 2
HORIZONTAL_MIN_HEIGHT = 20


@dataclass(frozen=True)
class _Bar:
    value: int
    text: str
    color: str
    label: str = ""

    @property
    def value_style(self) -> Style:
        return Style(color="black", bgcolor=self.color)


@dataclass(frozen=True)
class Company:
    short_name: str
    name: str
    color: str

    def vertical_bar_text(self, revenue: int) -> str:
        """Revenue in millions, shown on a vertical bar."""
        return f"{revenue / 1000:.1f}M"

    def horizontal_bar_text(self, revenue: int) -> str:
        """Long company name with the revenue, shown on a horizontal bar."""
        return f"{self.name} ({revenue / 1000:.1f} M)"


@dataclass(frozen=True)
class Revenues:
    period: str
    revenues: Tuple[int, ...]

    def __post_init__(self) -> None:
        revenues = tuple(self.revenues)
        if len(revenues) != COMPANY_COUNT:
            raise ValueError(
                f"expected {COMPANY_COUNT} revenues, got {len(revenues)}"
            )
        if any(revenue < 0 for revenue in revenues):
            raise ValueError("revenues must not be negative")
        object.__setattr__(self, "revenues", revenues)

    def vertical_bars(self, companies: Sequence[Company]) -> List[_Bar]:
        """One bar per company, labelled with the company's short name."""
        return [
            _Bar(revenue, company.vertical_bar_text(revenue), company.color, company.short_name)
            for company, revenue in zip(companies, self.revenues)
        ]

    def horizontal_bars(self, companies: Sequence[Company]) -> List[_Bar]:
        """One bar per company, carrying the long name and revenue as its text."""
        return [
            _Bar(revenue, company.horizontal_bar_text(revenue), company.color)
            for company, revenue in zip(companies, self.revenues)
        ]


def fake_companies() -> List[Company]:
    return [
        Company("BAKE", "Bake my day", "bright_red"),
        Company("BITE", "Bits and Bites", "blue"),
        Company("TART", "Tart of the Table", "bright_white"),
    ]


def fake_revenues() -> List[Revenues]:
    return [
        Revenues("Jan", (8500, 6500, 7000)),
        Revenues("Feb", (9000, 7500, 8500)),
        Revenues("Mar", (9500, 4500, 8200)),
        Revenues("Apr", (6300, 4000, 5000)),
    ]


def _peak(groups: Sequence[Sequence[_Bar]]) -> int:
    return max((bar.value for bars in groups for bar in bars), default=0)


def _draw_vertical(
    grid: _Grid,
    area: Tuple[int, int, int, int],
    groups: Sequence[Sequence[_Bar]],
    periods: Sequence[str],
) -> None:
    x, y, width, height = area
    if width <= 0 or height <= 0:
        return
    grid.centered(x, y, width, VERTICAL_TITLE)
    label_rows = min(2, height - 1)
    bar_rows = height - 1 - label_rows
    base = y + 1 + bar_rows
    peak = _peak(groups)
    end = x + width
    col = x
    for bars, period in zip(groups, periods):
        group_width = len(bars) * VERTICAL_BAR_WIDTH
        for index, bar in enumerate(bars):
            bx = col + index * VERTICAL_BAR_WIDTH
            if bx >= end:
                break
            limit = end - bx
            eighths = bar.value * bar_rows * 8 // peak if peak else 0
            for row in range(bar_rows):
                symbol = _bar_symbol(_NINE_LEVELS, eighths, bar_rows - 1 - row)
                grid.put(
                    bx, y + 1 + row, symbol * VERTICAL_BAR_WIDTH,
                    Style(color=bar.color), limit=limit,
                )
            if bar_rows > 0 and eighths >= 8 and len(bar.text) <= VERTICAL_BAR_WIDTH:
                tx = bx + (VERTICAL_BAR_WIDTH - len(bar.text)) // 2
                grid.put(tx, base - 1, bar.text, bar.value_style, limit=end - tx)
            if label_rows >= 1:
                lx = bx + max(VERTICAL_BAR_WIDTH - len(bar.label), 0) // 2
                grid.put(lx, base, bar.label, limit=min(VERTICAL_BAR_WIDTH, end - lx))
        if label_rows >= 2 and col < end:
            grid.centered(col, base + 1, min(group_width, end - col), period)
        col += group_width + GROUP_GAP


def _draw_horizontal(
    grid: _Grid,
    area: Tuple[int, int, int, int],
    groups: Sequence[Sequence[_Bar]],
    periods: Sequence[str],
) -> None:
    x, y, width, height = area
    if width <= 0 or height <= 0:
        return
    grid.centered(x, y, width, HORIZONTAL_TITLE)
    peak = _peak(groups)
    row = y + 1
    end = y + height
    for bars, period in zip(groups, periods):
        for bar in bars:
            if row >= end:
                return
            eighths = bar.value * width * 8 // peak if peak else 0
            full, rest = divmod(eighths, 8)
            line = "█" * full + (_HORIZONTAL_EIGHTHS[rest] if rest else "")
            grid.put(x, row, line, Style(color=bar.color), limit=width)
            grid.put(x, row, bar.text, bar.value_style, limit=width)
            row += 1
        if row >= end:
            return
        grid.put(x, row, period, limit=width)
        row += 1 + GROUP_GAP


def render(width: int, height: int) -> Text:
    """Render the title and both charts into ``height`` lines of ``width`` cells."""
    grid = _Grid(width, height)
    if grid.width == 0 or grid.height == 0:
        return grid.to_text()
    companies = fake_companies()
    revenues = fake_revenues()
    periods = [revenue.period for revenue in revenues]
    grid.centered(0, 0, grid.width, TITLE, Style(bold=True))
    remaining = max(grid.height - 3, 0)
    top_height = max(remaining - HORIZONTAL_MIN_HEIGHT, 0)
    bottom_height = remaining - top_height
    _draw_vertical(
        grid, (0, 2, grid.width, top_height),
        [revenue.vertical_bars(companies) for revenue in revenues], periods,
    )
    _draw_horizontal(
        grid, (0, 3 + top_height, grid.width, bottom_height),
        [revenue.horizontal_bars(companies) for revenue in revenues], periods,
    )
    return grid.to_text()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="tuigallery-grouped",
        description="Grouped bar charts of company revenues; q quits.",
    )
    parser.parse_args(argv)
    with Terminal() as terminal:
        while True:
            terminal.draw(render(*terminal.size()))
            if terminal.read_key(None) == "q":
                break
    return 0