import contextlib
import io
from collections import deque

from blessed.keyboard import Keystroke


KEY_CODES = {
    'KEY_UP': 259,
    'KEY_DOWN': 258,
    'KEY_LEFT': 260,
    'KEY_RIGHT': 261,
    'KEY_F1': 265,
}

KEY_SEQUENCES = {
    'KEY_UP': '\x1b[A',
    'KEY_DOWN': '\x1b[B',
    'KEY_RIGHT': '\x1b[C',
    'KEY_LEFT': '\x1b[D',
    'KEY_F1': '\x1bOP',
}


def arrow(name: str) -> Keystroke:
    return Keystroke(KEY_SEQUENCES[name], KEY_CODES[name], name)


def char(ucs: str) -> Keystroke:
    return Keystroke(ucs)


class FakeTerminal:
    """Stand-in for blessed.Terminal with readable sequences and scripted keys."""

    normal = '<normal>'
    home = '<home>'
    clear = '<clear>'
    hide_cursor = '<hide>'

    def __init__(self, width: int = 10, height: int = 10, keys=()):
        self.width = width
        self.height = height
        self.stream = io.StringIO()
        self.keys = deque(keys)
        self.inkey_timeouts = []
        self.context_events = []

    def move_xy(self, x: int, y: int) -> str:
        return f'<{x},{y}>'

    def color(self, n: int) -> str:
        return f'<c{n}>'

    def inkey(self, timeout=None):
        self.inkey_timeouts.append(timeout)
        if self.keys:
            return self.keys.popleft()
        return Keystroke('')

    @contextlib.contextmanager
    def _recording(self, name: str):
        self.context_events.append(name + '+')
        try:
            yield
        finally:
            self.context_events.append(name + '-')

    def cbreak(self):
        return self._recording('cbreak')

    def hidden_cursor(self):
        return self._recording('hidden')


class FakeClock:
    def __init__(self) -> None:
        self.value = 0.0

    def advance(self, amount: float) -> None:
        self.value += amount

    def __call__(self) -> float:
        return self.value
