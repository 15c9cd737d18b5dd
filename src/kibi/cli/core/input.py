"""Keyboard input: raw bytes to key events."""

from __future__ import annotations

import codecs
import os
import select
import sys
import time
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class Key(Enum):
    """Named keys the editor reacts to."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    ENTER = auto()
    ESCAPE = auto()
    TAB = auto()
    BACKSPACE = auto()
    HOME = auto()
    END = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    DELETE = auto()


ARROW_KEYS = frozenset({Key.UP, Key.DOWN, Key.LEFT, Key.RIGHT})

ESC = '\x1b'

# Seconds to wait for the rest of a sequence after a lone ESC
ESCAPE_TIMEOUT = 0.1

# Sequences after the ESC byte: CSI ("[...") and SS3 ("O.")
ESCAPE_SEQUENCES: dict[str, Key] = {
    '[A': Key.UP,
    '[B': Key.DOWN,
    '[C': Key.RIGHT,
    '[D': Key.LEFT,
    'OA': Key.UP,
    'OB': Key.DOWN,
    'OC': Key.RIGHT,
    'OD': Key.LEFT,
    '[H': Key.HOME,
    'OH': Key.HOME,
    '[1~': Key.HOME,
    '[7~': Key.HOME,
    '[F': Key.END,
    'OF': Key.END,
    '[4~': Key.END,
    '[8~': Key.END,
    '[5~': Key.PAGE_UP,
    '[6~': Key.PAGE_DOWN,
    '[3~': Key.DELETE,
}

# Single bytes with a key of their own; checked before Ctrl chords
CONTROL_KEYS: dict[str, Key] = {
    '\r': Key.ENTER,
    '\n': Key.ENTER,
    '\t': Key.TAB,
    '\x7f': Key.BACKSPACE,
    '\x08': Key.BACKSPACE,
}


def ctrl_key(letter: str) -> str:
    """Return the control character produced by Ctrl+``letter``."""
    return chr(ord(letter.lower()) & 0x1f)


@dataclass(frozen=True)
class KeyEvent:
    """One key press."""
    key: Optional[Key] = None  # Named key if recognized
    char: Optional[str] = None  # Typed character, or the letter of a Ctrl chord
    ctrl: bool = False  # True for Ctrl+letter chords
    raw: str = ""  # Input that produced the event

    @property
    def is_char(self) -> bool:
        """Check if this is a printable character."""
        return self.char is not None and self.key is None and not self.ctrl

    def is_ctrl(self, letter: str) -> bool:
        """Check if this is the Ctrl+``letter`` chord."""
        return self.ctrl and self.char == letter.lower()

    @classmethod
    def of_char(cls, ch: str) -> KeyEvent:
        return cls(char=ch, raw=ch)

    @classmethod
    def of_key(cls, key: Key) -> KeyEvent:
        return cls(key=key)

    @classmethod
    def of_ctrl(cls, letter: str) -> KeyEvent:
        return cls(char=letter.lower(), ctrl=True, raw=ctrl_key(letter))


def _sequence_length(text: str) -> int | None:
    """Length of the escape sequence starting ``text``, ESC included.

    None means the sequence is not complete yet; 1 is a bare ESC.
    """
    if len(text) < 2:
        return None
    intro = text[1]
    if intro == 'O':
        return 3 if len(text) >= 3 else None
    if intro != '[':
        return 1
    # CSI: numeric parameters, then one final character
    for i in range(2, len(text)):
        if not (text[i].isdigit() or text[i] == ';'):
            return i + 1
    return None


def decode(text: str, final: bool = False) -> tuple[Optional[KeyEvent], int]:
    """
    Decode the first key in ``text``.

    Returns the event and the number of characters it took. The event is
    None for bytes that are skipped (unknown control characters). A count of
    0 means more input is needed; with ``final`` set, an incomplete escape
    sequence is read as a plain Escape instead.
    """
    if not text:
        return None, 0

    first = text[0]
    if first == ESC:
        length = _sequence_length(text)
        if length is None:
            if not final:
                return None, 0
            length = 1
        if length == 1:
            return KeyEvent(key=Key.ESCAPE, raw=ESC), 1
        # Unknown sequences still come through, with no key
        return KeyEvent(key=ESCAPE_SEQUENCES.get(text[1:length]), raw=text[:length]), length

    if first in CONTROL_KEYS:
        return KeyEvent(key=CONTROL_KEYS[first], raw=first), 1

    if first.isprintable():
        return KeyEvent.of_char(first), 1

    code = ord(first)
    if 1 <= code <= 26:
        return KeyEvent(char=chr(code + ord('a') - 1), ctrl=True, raw=first), 1

    return None, 1


class InputReader:
    """
    Key events from a raw-mode file descriptor.

    Bytes are taken with os.read() so nothing waits in Python's buffers.
    Everything available is read at once and handed out one key at a time;
    an escape sequence split across reads is completed by waiting up to
    ``escape_timeout`` for the rest of it.
    """

    def __init__(self, fd: int | None = None, escape_timeout: float = ESCAPE_TIMEOUT) -> None:
        self._fd = sys.stdin.fileno() if fd is None else fd
        self._pending = ""
        # Keeps a partial multi-byte character until the rest of it is read
        self._decoder = codecs.getincrementaldecoder('utf-8')(errors='replace')
        self.escape_timeout = escape_timeout

    def read(self, timeout: float = 0.1) -> Optional[KeyEvent]:
        """
        Read a single key event.

        Returns None if no input arrives within ``timeout`` or the next
        byte is one that is ignored.
        """
        if not self._pending:
            if not self._wait(timeout) or not self._fill():
                return None
            if not self._pending:
                # Only part of a multi-byte character so far
                return None

        event, used = decode(self._pending)
        if used == 0:
            self._complete_sequence()
            event, used = decode(self._pending, final=True)

        self._pending = self._pending[used:]
        return event

    def read_blocking(self) -> KeyEvent:
        """Read a key event, blocking until input is available."""
        while True:
            event = self.read(timeout=1.0)
            if event is not None:
                return event

    def _fill(self) -> bool:
        """Append whatever input is available; False on EOF or error."""
        try:
            data = os.read(self._fd, 1024)
        except OSError:
            return False
        self._pending += self._decoder.decode(data)
        return bool(data)

    def _complete_sequence(self) -> None:
        deadline = time.monotonic() + self.escape_timeout
        while decode(self._pending)[1] == 0:
            remaining = deadline - time.monotonic()
            if remaining <= 0 or not self._wait(remaining):
                return
            if not self._fill():
                return

    def _wait(self, timeout: float) -> bool:
        """Check if input is available within timeout."""
        try:
            ready, _, _ = select.select([self._fd], [], [], timeout)
            return bool(ready)
        except (ValueError, OSError):
            return False
