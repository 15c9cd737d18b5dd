"""Single-line prompt shown in the message bar."""

from __future__ import annotations

from enum import Enum, auto

from kibi.cli.core.input import Key, KeyEvent


class PromptResult(Enum):
    """Outcome of feeding one key to a prompt."""
    EDITING = auto()    # Text changed or key ignored, prompt stays open
    ACCEPTED = auto()   # Enter on a non-empty answer
    CANCELLED = auto()  # Escape


class Prompt:
    """
    Collects a line of text, e.g. a filename or a search query.

    Enter only accepts a non-empty answer; Escape cancels. Backspace,
    Delete and Ctrl-H remove the last character.
    """

    def __init__(self, label: str) -> None:
        self.label = label
        self.text = ""

    @property
    def message(self) -> str:
        """Text to show in the message bar."""
        return f"{self.label}{self.text}"

    def feed(self, event: KeyEvent) -> PromptResult:
        if event.key == Key.ENTER:
            if self.text:
                return PromptResult.ACCEPTED
            return PromptResult.EDITING

        if event.key == Key.ESCAPE:
            return PromptResult.CANCELLED

        if event.key in (Key.BACKSPACE, Key.DELETE) or event.is_ctrl('h'):
            self.text = self.text[:-1]
            return PromptResult.EDITING

        if event.is_char and event.char.isprintable():
            self.text += event.char

        return PromptResult.EDITING
