import io
from contextlib import contextmanager

from blessed.keyboard import Keystroke
from rich.text import Text

from tuigallery.terminal import Terminal, render_to_text


class FakeTerm:
    def __init__(self, width=5, height=2, keys=()):
        self.width = width
        self.height = height
        self.stream = io.StringIO()
        self.events = []
        self._keys = list(keys)

    def _mode(self, name):
        @contextmanager
        def manager():
            self.events.append(f"enter {name}")
            try:
                yield
            finally:
                self.events.append(f"exit {name}")

        return manager()

    def fullscreen(self):
        return self._mode("fullscreen")

    def cbreak(self):
        return self._mode("cbreak")

    def hidden_cursor(self):
        return self._mode("hidden_cursor")

    def move_xy(self, x, y):
        return f"@{x},{y}|"

    def inkey(self, timeout=None):
        if self._keys:
            return self._keys.pop(0)
        return Keystroke("")


def test_render_pads_to_size():
    assert render_to_text("abc", 5, 2) == "abc  \n     "


def test_render_crops_long_lines():
    assert render_to_text("abcdefgh", 4, 1) == "abcd"


def test_render_does_not_interpret_markup():
    assert render_to_text("[b]", 4, 1) == "[b] "


def test_render_every_line_has_full_width():
    lines = render_to_text(Text("one\ntwo\nthree"), 7, 4).split("\n")
    assert len(lines) == 4
    assert all(len(line) == 7 for line in lines)
    assert lines[2].rstrip() == "three"


def test_context_manager_enters_and_restores():
    term = FakeTerm()
    with Terminal(term):
        assert term.events == [
            "enter fullscreen",
            "enter cbreak",
            "enter hidden_cursor",
        ]
    assert term.events[-1] == "exit fullscreen"
    assert term.events.count("exit cbreak") == 1


def test_context_manager_restores_on_error():
    term = FakeTerm()
    try:
        with Terminal(term):
            raise RuntimeError("boom")
    except RuntimeError:
        pass
    assert "exit hidden_cursor" in term.events
    assert term.events[-1] == "exit fullscreen"


def test_size_reports_width_and_height():
    assert Terminal(FakeTerm(width=12, height=7)).size() == (12, 7)


def test_draw_writes_each_line():
    term = FakeTerm(width=5, height=2)
    Terminal(term).draw("hi")
    output = term.stream.getvalue()
    assert "@0,0|hi   " in output
    assert "@0,1|     " in output


def test_read_key_plain_character():
    term = FakeTerm(keys=[Keystroke("j")])
    assert Terminal(term).read_key(0.1) == "j"


def test_read_key_special_key():
    term = FakeTerm(keys=[Keystroke("\x1b[D", code=260, name="KEY_LEFT")])
    assert Terminal(term).read_key(0.1) == "left"


def test_read_key_timeout_returns_none():
    assert Terminal(FakeTerm()).read_key(0.0) is None