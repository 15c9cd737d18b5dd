"""Core TUI infrastructure - terminal I/O and input handling."""

from kibi.cli.core.terminal import Terminal, TerminalError, TerminalSize
from kibi.cli.core.input import ARROW_KEYS, InputReader, KeyEvent, Key, ctrl_key, decode

__all__ = [
    "Terminal",
    "TerminalError",
    "TerminalSize",
    "ARROW_KEYS",
    "InputReader",
    "KeyEvent",
    "Key",
    "ctrl_key",
    "decode",
]
