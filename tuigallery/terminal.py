"""A small full-screen terminal wrapper that draws rich renderables."""

from __future__ import annotations

import io
from contextlib import ExitStack
from typing import Any, List, Optional, Tuple

import blessed
from rich.color import ColorSystem
from rich.console import Console, RenderableType
from rich.segment import Segment
from rich.text import Text

_KEY_NAMES = {
    "KEY_LEFT": "left",
    "KEY_RIGHT": "right",
    "KEY_UP": "up",
    "KEY_DOWN": "down",
    "KEY_ESCAPE": "escape",
    "KEY_ENTER": "enter",
    "KEY_HOME": "home",
    "KEY_END": "end",
    "KEY_BACKSPACE": "backspace",
    "KEY_DELETE": "delete",
    "KEY_TAB": "tab",
}


def _as_renderable(renderable: RenderableType) -> RenderableType:
    if isinstance(renderable, str):
        return Text(renderable, no_wrap=True, overflow="crop")
    return renderable


def _render_lines(
    renderable: RenderableType, width: int, height: int
) -> List[List[Segment]]:
    if width <= 0 or height <= 0:
        return []
    console = Console(
        file=io.StringIO(),
        width=width,
        height=height,
        color_system="truecolor",
        force_terminal=True,
        legacy_windows=False,
    )
    options = console.options.update_dimensions(width, height)
    return console.render_lines(_as_renderable(renderable), options, pad=True)


def _ansi(segment: Segment) -> str:
    if segment.control:
        return ""
    if segment.style is None:
        return segment.text
    return segment.style.render(segment.text, color_system=ColorSystem.TRUECOLOR)


def render_to_text(renderable: RenderableType, width: int, height: int) -> str:
    """Render to plain text: exactly ``height`` lines of ``width`` cells."""
    lines = _render_lines(renderable, width, height)
    return "\n".join(
        "".join(segment.text for segment in line if not segment.control)
        for line in lines
    )


class Terminal:
    """Full-screen session: alternate screen, cbreak input, hidden cursor.

    Used as a context manager; the terminal is restored on exit, also when
    an exception escapes the block.
    """

    def __init__(self, term: Optional[Any] = None) -> None:
        self._term = term if term is not None else blessed.Terminal()
        self._stack: Optional[ExitStack] = None

    def __enter__(self) -> "Terminal":
        stack = ExitStack()
        try:
            stack.enter_context(self._term.fullscreen())
            stack.enter_context(self._term.cbreak())
            stack.enter_context(self._term.hidden_cursor())
        except BaseException:
            stack.close()
            raise
        self._stack = stack
        return self

    def __exit__(self, *args: Any) -> bool:
        if self._stack is not None:
            stack, self._stack = self._stack, None
            stack.close()
        return False

    def size(self) -> Tuple[int, int]:
        """Return the terminal size as ``(width, height)``."""
        return self._term.width, self._term.height

    def draw(self, renderable: RenderableType) -> None:
        """Render a full frame filling the whole screen."""
        width, height = self.size()
        frame = "".join(
            self._term.move_xy(0, y) + "".join(_ansi(segment) for segment in line)
            for y, line in enumerate(_render_lines(renderable, width, height))
        )
        stream = self._term.stream
        stream.write(frame)
        stream.flush()

    def read_key(self, timeout: Optional[float]) -> Optional[str]:
        """Wait up to ``timeout`` seconds for a key.

        Printable keys come back as the character itself, special keys as a
        lower-case name such as ``"left"`` or ``"escape"``; ``None`` on timeout.
        """
        key = self._term.inkey(timeout=timeout)
        if not key:
            return None
        if key.is_sequence and key.name:
            name = key.name
            if name in _KEY_NAMES:
                return _KEY_NAMES[name]
            return name[4:].lower() if name.startswith("KEY_") else name.lower()
        return str(key)