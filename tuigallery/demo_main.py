"""Command line entry point of the demo: argument parsing and the event loop."""

from __future__ import annotations

import argparse
import time
from typing import Optional, Sequence

from .demo_app import App
from .demo_ui import draw
from .terminal import Terminal

TITLE = "Crossterm Demo"
DEFAULT_TICK_RATE = 250


def _parse_bool(value: str) -> bool:
    if value == "true":
        return True
    if value == "false":
        return False
    raise argparse.ArgumentTypeError(f"expected true or false, got {value!r}")


def _parse_tick_rate(value: str) -> int:
    try:
        rate = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}") from None
    if rate < 0:
        raise argparse.ArgumentTypeError(f"tick rate must not be negative: {rate}")
    return rate


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="tuigallery-demo", description="Demo")
    parser.add_argument(
        "--tick-rate",
        type=_parse_tick_rate,
        default=DEFAULT_TICK_RATE,
        help="time in ms between two ticks.",
    )
    parser.add_argument(
        "--enhanced-graphics",
        type=_parse_bool,
        default=True,
        help="whether unicode symbols are used to improve the overall look of the app",
    )
    return parser.parse_args(argv)


def dispatch_key(app: App, key: str) -> None:
    """Route a key press to the matching application action."""
    if key in ("left", "h"):
        app.on_left()
    elif key in ("up", "k"):
        app.on_up()
    elif key in ("right", "l"):
        app.on_right()
    elif key in ("down", "j"):
        app.on_down()
    elif len(key) == 1:
        app.on_key(key)


def run(tick_rate: float, enhanced_graphics: bool) -> None:
    """Run the demo until the user quits; ``tick_rate`` is in seconds."""
    app = App(TITLE, enhanced_graphics)
    last_tick = time.monotonic()
    with Terminal() as terminal:
        while True:
            terminal.draw(draw(app, *terminal.size()))
            timeout = max(tick_rate - (time.monotonic() - last_tick), 0.0)
            key = terminal.read_key(timeout)
            if key is not None:
                dispatch_key(app, key)
            if time.monotonic() - last_tick >= tick_rate:
                app.on_tick()
                last_tick = time.monotonic()
            if app.should_quit:
                return


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    run(args.tick_rate / 1000.0, args.enhanced_graphics)
    return 0