"""A counter application built on the model / update / view pattern."""

from __future__ import annotations

import argparse
import enum
from dataclasses import dataclass
from typing import Optional, Sequence

from rich.text import Text

from .terminal import Terminal


class RunningState(enum.Enum):
    RUNNING = "running"
    DONE = "done"


class Message(enum.Enum):
    INCREMENT = "increment"
    DECREMENT = "decrement"
    RESET = "reset"
    QUIT = "quit"


@dataclass
class Model:
    counter: int = 0
    running_state: RunningState = RunningState.RUNNING


_KEY_MESSAGES = {
    "j": Message.INCREMENT,
    "k": Message.DECREMENT,
    "q": Message.QUIT,
}


def handle_key(key: str) -> Optional[Message]:
    """Map a key to a message, or ``None`` for keys with no meaning."""
    return _KEY_MESSAGES.get(key)


def update(model: Model, msg: Message) -> Optional[Message]:
    """Apply ``msg`` to ``model``; return a follow-up message if one is due."""
    if msg is Message.INCREMENT:
        model.counter += 1
        if model.counter > 50:
            return Message.RESET
    elif msg is Message.DECREMENT:
        model.counter -= 1
        if model.counter < -50:
            return Message.RESET
    elif msg is Message.RESET:
        model.counter = 0
    elif msg is Message.QUIT:
        model.running_state = RunningState.DONE
    return None


def process(model: Model, msg: Optional[Message]) -> Model:
    """Run ``update`` until no follow-up message remains."""
    while msg is not None:
        msg = update(model, msg)
    return model


def view(model: Model) -> Text:
    """Render the model."""
    return Text(f"Counter: {model.counter}", no_wrap=True, overflow="crop")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="tuigallery-elm",
        description="Counter: j increments, k decrements, q quits.",
    )
    parser.parse_args(argv)
    model = Model()
    with Terminal() as terminal:
        while model.running_state is not RunningState.DONE:
            terminal.draw(view(model))
            key = terminal.read_key(0.25)
            process(model, handle_key(key) if key else None)
    return 0