"""Low-level terminal operations."""

from __future__ import annotations

import os
import sys
import termios
import tty
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator


class TerminalError(RuntimeError):
    """Raised when the terminal cannot be put into the mode the editor needs."""


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions."""
    rows: int
    cols: int


class Terminal:
    """Terminal I/O for the editor: raw mode, size and frame output."""

    @staticmethod
    def size() -> TerminalSize:
        """Get current terminal dimensions."""
        try:
            size = os.get_terminal_size()
            return TerminalSize(size.lines, size.columns)
        except OSError:
            return TerminalSize(24, 80)

    @staticmethod
    def clear() -> None:
        """Clear screen and move cursor to home."""
        Terminal.write('\x1b[2J\x1b[H')

    @staticmethod
    def write(text: str) -> None:
        """Write text to the terminal and flush it in one go."""
        sys.stdout.write(text)
        sys.stdout.flush()

    @staticmethod
    @contextmanager
    def raw_mode(fd: int | None = None) -> Iterator[None]:
        """Context manager for raw terminal mode; the saved mode is always restored."""
        try:
            if fd is None:
                fd = sys.stdin.fileno()
            old_settings = termios.tcgetattr(fd)
            tty.setraw(fd)
        except (termios.error, OSError, ValueError) as exc:
            raise TerminalError(f"Cannot enable raw mode: {exc}") from exc
        try:
            yield
        finally:
            termios.tcsetattr(fd, termios.TCSAFLUSH, old_settings)

    @staticmethod
    @contextmanager
    def alternate_screen() -> Iterator[None]:
        """Use alternate screen buffer (preserves scrollback)."""
        Terminal.write('\x1b[?1049h')
        try:
            yield
        finally:
            Terminal.write('\x1b[?1049l')

    @staticmethod
    @contextmanager
    def managed_mode() -> Iterator[None]:
        """Full editor mode: raw input on the alternate screen."""
        with Terminal.raw_mode():
            with Terminal.alternate_screen():
                try:
                    yield
                finally:
                    Terminal.clear()
                    Terminal.write('\x1b[0m\x1b[?25h')
