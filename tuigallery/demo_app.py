"""State of the demo application: tabs, lists, signals and servers."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from itertools import islice
from typing import Any, Generic, Iterator, List, Optional, Tuple, TypeVar

from .signals import RandomSignal, SinSignal

T = TypeVar("T")

TASKS = [f"Item{n}" for n in range(1, 25)]

_LOG_LEVELS = {
    3: "CRITICAL",
    4: "ERROR",
    7: "WARNING",
    11: "CRITICAL",
    17: "ERROR",
    18: "ERROR",
    21: "WARNING",
    24: "WARNING",
}

LOGS = [(f"Event{n}", _LOG_LEVELS.get(n, "INFO")) for n in range(1, 27)]

_EVENT_VALUES = (9, 12, 5, 8, 2, 4, 5, 9, 14, 15, 1, 0, 4, 6, 4, 6, 4, 7, 13, 8, 11, 9, 3, 5)

EVENTS = [(f"B{n}", value) for n, value in enumerate(_EVENT_VALUES, start=1)]


@dataclass
class TabsState:
    titles: List[str]
    index: int = 0

    def next(self) -> None:
        self.index = (self.index + 1) % len(self.titles)

    def previous(self) -> None:
        if self.index > 0:
            self.index -= 1
        else:
            self.index = len(self.titles) - 1


@dataclass
class StatefulList(Generic[T]):
    items: List[T]
    selected: Optional[int] = None

    def next(self) -> None:
        if self.selected is None or self.selected >= len(self.items) - 1:
            self.selected = 0
        else:
            self.selected += 1

    def previous(self) -> None:
        if self.selected is None:
            self.selected = 0
        elif self.selected == 0:
            self.selected = len(self.items) - 1
        else:
            self.selected -= 1


@dataclass
class Signal(Generic[T]):
    """A sliding window of points drawn from an endless source."""

    source: Iterator[T]
    points: List[T]
    tick_rate: int

    def on_tick(self) -> None:
        del self.points[: self.tick_rate]
        self.points.extend(islice(self.source, self.tick_rate))


@dataclass
class Signals:
    sin1: Signal[Tuple[float, float]]
    sin2: Signal[Tuple[float, float]]
    window: List[float] = field(default_factory=lambda: [0.0, 20.0])

    def on_tick(self) -> None:
        self.sin1.on_tick()
        self.sin2.on_tick()
        self.window = [bound + 1.0 for bound in self.window]


@dataclass(frozen=True)
class Server:
    name: str
    location: str
    coords: Tuple[float, float]
    status: str


_SERVERS = (
    Server("NorthAmerica-1", "New York City", (40.71, -74.00), "Up"),
    Server("Europe-1", "Paris", (48.85, 2.35), "Failure"),
    Server("SouthAmerica-1", "São Paulo", (-23.54, -46.62), "Up"),
    Server("Asia-1", "Singapore", (1.35, 103.86), "Up"),
)


class App:
    """Everything the demo shows, updated by key presses and ticks."""

    def __init__(
        self,
        title: str,
        enhanced_graphics: bool,
        rng: Optional[random.Random] = None,
    ) -> None:
        rand_signal = RandomSignal(0, 100, rng)
        first_sin = SinSignal(0.2, 3.0, 18.0)
        second_sin = SinSignal(0.1, 2.0, 10.0)

        self.title = title
        self.should_quit = False
        self.tabs = TabsState(["Tab0", "Tab1", "Tab2"])
        self.show_chart = True
        self.progress = 0.0
        self.sparkline: Signal[Any] = Signal(rand_signal, list(islice(rand_signal, 300)), 1)
        self.tasks: StatefulList[str] = StatefulList(list(TASKS))
        self.logs: StatefulList[Tuple[str, str]] = StatefulList(list(LOGS))
        self.signals = Signals(
            sin1=Signal(first_sin, first_sin.take(100), 5),
            sin2=Signal(second_sin, second_sin.take(200), 10),
        )
        self.barchart: List[Tuple[str, int]] = list(EVENTS)
        self.servers = list(_SERVERS)
        self.enhanced_graphics = enhanced_graphics

    def on_up(self) -> None:
        self.tasks.previous()

    def on_down(self) -> None:
        self.tasks.next()

    def on_right(self) -> None:
        self.tabs.next()

    def on_left(self) -> None:
        self.tabs.previous()

    def on_key(self, c: str) -> None:
        if c == "q":
            self.should_quit = True
        elif c == "t":
            self.show_chart = not self.show_chart

    def on_tick(self) -> None:
        self.progress += 0.001
        if self.progress > 1.0:
            self.progress = 0.0

        self.sparkline.on_tick()
        self.signals.on_tick()

        # Rotate the newest log and bar to the front.
        self.logs.items.insert(0, self.logs.items.pop())
        self.barchart.insert(0, self.barchart.pop())