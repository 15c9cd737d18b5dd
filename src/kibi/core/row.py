"""Row - one logical line of the document."""

from __future__ import annotations

from dataclasses import dataclass, field

from kibi.core.highlight import Highlight

DEFAULT_TAB_STOP = 8


def expand_tabs(raw: str, tab_stop: int = DEFAULT_TAB_STOP) -> str:
    """Expand tabs to the next multiple of ``tab_stop`` (at least one space)."""
    out: list[str] = []
    col = 0
    for ch in raw:
        if ch == '\t':
            out.append(' ')
            col += 1
            while col % tab_stop != 0:
                out.append(' ')
                col += 1
        else:
            out.append(ch)
            col += 1
    return ''.join(out)


@dataclass
class Row:
    """
    A single line of text with its display form.

    ``raw`` is the text as typed or loaded. ``render`` is what goes on
    screen, and ``highlight`` holds one class per rendered character.
    ``open_comment`` records whether the row ends inside an unterminated
    multi-line comment, which is the carry-in for the next row.
    """
    raw: str = ""
    tab_stop: int = DEFAULT_TAB_STOP
    render: str = field(default="", init=False)
    highlight: list[Highlight] = field(default_factory=list, init=False)
    open_comment: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        self.update()

    def __len__(self) -> int:
        return len(self.raw)

    def update(self) -> None:
        """Rebuild ``render`` from ``raw`` and reset the highlight to normal."""
        self.render = expand_tabs(self.raw, self.tab_stop)
        self.highlight = [Highlight.NORMAL] * len(self.render)

    def insert_char(self, at: int, ch: str) -> None:
        at = max(0, min(at, len(self.raw)))
        self.raw = self.raw[:at] + ch + self.raw[at:]
        self.update()

    def delete_char(self, at: int) -> bool:
        """Remove the character at ``at``; False when out of range."""
        if at < 0 or at >= len(self.raw):
            return False
        self.raw = self.raw[:at] + self.raw[at + 1:]
        self.update()
        return True

    def append(self, text: str) -> None:
        self.raw += text
        self.update()

    def truncate(self, at: int) -> str:
        """Cut the row at ``at`` and return the removed tail."""
        at = max(0, min(at, len(self.raw)))
        tail = self.raw[at:]
        self.raw = self.raw[:at]
        self.update()
        return tail

    def cx_to_rx(self, cx: int) -> int:
        """Convert a raw column to a render column."""
        rx = 0
        for ch in self.raw[:cx]:
            if ch == '\t':
                rx += (self.tab_stop - 1) - (rx % self.tab_stop)
            rx += 1
        return rx

    def rx_to_cx(self, rx: int) -> int:
        """Convert a render column back to the raw column that produced it."""
        cur_rx = 0
        for cx, ch in enumerate(self.raw):
            if ch == '\t':
                cur_rx += (self.tab_stop - 1) - (cur_rx % self.tab_stop)
            cur_rx += 1
            if cur_rx > rx:
                return cx
        return len(self.raw)
