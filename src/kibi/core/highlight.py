"""Highlight classes and their terminal colors."""

from enum import IntEnum


class Highlight(IntEnum):
    """Per-character syntax class of a rendered row."""
    NORMAL = 0
    NUMBER = 1
    MATCH = 2
    STRING = 3
    COMMENT = 4
    MLCOMMENT = 5
    KEYWORD1 = 6
    KEYWORD2 = 7

    @property
    def color(self) -> int:
        """Return the SGR foreground code for this class."""
        return _COLORS.get(self, DEFAULT_FG)

    def to_sgr(self) -> str:
        """Return the escape sequence selecting this class's color."""
        return f"\x1b[{self.color}m"


DEFAULT_FG = 39

_COLORS: dict[Highlight, int] = {
    Highlight.NUMBER: 31,      # red
    Highlight.MATCH: 34,       # blue
    Highlight.STRING: 35,      # magenta
    Highlight.COMMENT: 36,     # cyan
    Highlight.MLCOMMENT: 36,
    Highlight.KEYWORD1: 33,    # yellow
    Highlight.KEYWORD2: 32,    # green
}
