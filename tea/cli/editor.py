from __future__ import annotations
from typing import List

from .console import ShellConsole
from .history import History
from .keys import Key, KeyEvent, KeySource


class LineEditor:
    """
    Single-line editor with history recall.

    State is the edit buffer plus the shared history cursor. Each key is
    applied by feed(); read_line() pulls keys from the source until Enter.
    Keys are only appended or removed at the end of the buffer.
    """

    def __init__(self, keys: KeySource, console: ShellConsole, history: History) -> None:
        self.keys = keys
        self.console = console
        self.history = history
        self.buffer: List[str] = []

    @property
    def text(self) -> str:
        return "".join(self.buffer)

    def read_line(self) -> str:
        self.buffer = []
        with self.keys:
            while not self.feed(self.keys.read_key()):
                pass
        return self.text

    def feed(self, event: KeyEvent) -> bool:
        """Apply one key. Returns True when the line is confirmed."""
        if event.kind is Key.ENTER:
            self.console.newline()
            return True
        if event.kind is Key.CHAR:
            self.buffer.append(event.char)
            self.console.write(event.char)
        elif event.kind is Key.BACKSPACE:
            if self.buffer:
                self.buffer.pop()
                self.console.erase(1)
        elif event.kind is Key.UP:
            entry = self.history.older()
            if entry is not None:
                self._replace(entry)
        elif event.kind is Key.DOWN:
            entry = self.history.newer()
            if entry is not None:
                self._replace(entry)
        return False

    def _replace(self, text: str) -> None:
        self.console.erase(len(self.buffer))
        self.buffer = list(text)
        if text:
            self.console.write(text)
