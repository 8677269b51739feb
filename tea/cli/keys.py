# tea/cli/keys.py
"""
Key events and the sources that produce them.

- RawKeySource:      a POSIX terminal in cbreak mode, one key at a time
- LineKeySource:     a non-tty stream (piped stdin), one line at a time
- ScriptedKeySource: a fixed sequence of events (tests, replays)

Every source raises EOFError once its input is exhausted.
"""

from __future__ import annotations
import codecs
import logging
import os
import select
import sys
from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Deque, Iterable, Iterator, List, Optional, TextIO

logger = logging.getLogger(__name__)

ESC = "\x1b"
# seconds to wait for the rest of an escape sequence after a bare ESC
_ESC_TIMEOUT = 0.05


class Key(str, Enum):
    CHAR      = "char"
    BACKSPACE = "backspace"
    ENTER     = "enter"
    UP        = "up"
    DOWN      = "down"
    OTHER     = "other"     # any other control key; ignored by the editor


@dataclass(frozen=True)
class KeyEvent:
    kind: Key
    char: str = ""

    @classmethod
    def from_char(cls, ch: str) -> "KeyEvent":
        if ch in ("\r", "\n"):
            return cls(Key.ENTER)
        if ch in ("\x7f", "\b"):
            return cls(Key.BACKSPACE)
        if ch.isprintable():
            return cls(Key.CHAR, ch)
        return cls(Key.OTHER, ch)


def read_event(first: str, more: Callable[[], str]) -> KeyEvent:
    """
    Decode one key starting at `first`. `more()` returns the next pending
    character, or '' if none is pending (a lone ESC then decodes as OTHER).
    """
    if first != ESC:
        return KeyEvent.from_char(first)
    intro = more()
    if intro not in ("[", "O"):
        return KeyEvent(Key.OTHER, ESC + intro)
    seq = ESC + intro
    while True:
        ch = more()
        if not ch:
            return KeyEvent(Key.OTHER, seq)
        seq += ch
        # CSI/SS3 sequences end with a byte in 0x40..0x7E
        if "@" <= ch <= "~":
            break
    if ch == "A":
        return KeyEvent(Key.UP)
    if ch == "B":
        return KeyEvent(Key.DOWN)
    return KeyEvent(Key.OTHER, seq)


def events_from_text(text: str) -> List[KeyEvent]:
    """Decode a string (escape sequences included) into key events."""
    chars: Iterator[str] = iter(text)
    more = lambda: next(chars, "")
    events = []
    for ch in chars:
        events.append(read_event(ch, more))
    return events


class KeySource(ABC):
    """Abstract producer of key events. Used as a context manager around one line read."""

    def __enter__(self) -> "KeySource":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        return None

    @abstractmethod
    def read_key(self) -> KeyEvent: ...


class ScriptedKeySource(KeySource):
    def __init__(self, events: Iterable[KeyEvent]) -> None:
        self._events: Deque[KeyEvent] = deque(events)

    @classmethod
    def from_text(cls, text: str) -> "ScriptedKeySource":
        return cls(events_from_text(text))

    def read_key(self) -> KeyEvent:
        if not self._events:
            raise EOFError("no more scripted keys")
        return self._events.popleft()


class LineKeySource(KeySource):
    """Turns each line of a text stream into char events followed by Enter."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream or sys.stdin
        self._pending: Deque[KeyEvent] = deque()

    def read_key(self) -> KeyEvent:
        if not self._pending:
            line = self._stream.readline()
            if not line:
                raise EOFError("end of input")
            self._pending.extend(events_from_text(line.rstrip("\r\n")))
            self._pending.append(KeyEvent(Key.ENTER))
        return self._pending.popleft()


class RawKeySource(KeySource):
    """Reads single keys from a terminal with canonical mode and echo switched off."""

    def __init__(self, fd: Optional[int] = None) -> None:
        self._fd = sys.stdin.fileno() if fd is None else fd
        self._old: Optional[list] = None
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    def __enter__(self) -> "RawKeySource":
        import termios
        self._old = termios.tcgetattr(self._fd)
        new = termios.tcgetattr(self._fd)
        new[3] = new[3] & ~(termios.ICANON | termios.ECHO)
        new[3] = new[3] | termios.ISIG
        new[6][termios.VMIN] = 1
        new[6][termios.VTIME] = 0
        termios.tcsetattr(self._fd, termios.TCSADRAIN, new)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        import termios
        if self._old is not None:
            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._old)
            self._old = None

    def _read_char(self, timeout: Optional[float] = None) -> str:
        while True:
            if timeout is not None and not select.select([self._fd], [], [], timeout)[0]:
                return ""
            data = os.read(self._fd, 1)
            if not data:
                raise EOFError("terminal closed")
            ch = self._decoder.decode(data)
            if ch:
                return ch

    def read_key(self) -> KeyEvent:
        event = read_event(self._read_char(), lambda: self._read_char(_ESC_TIMEOUT))
        logger.debug("key %s %r", event.kind.value, event.char)
        return event


def default_key_source() -> KeySource:
    if sys.stdin.isatty() and os.name == "posix":
        return RawKeySource()
    return LineKeySource()
