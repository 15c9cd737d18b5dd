"""Cursor and scroll state of the editor window."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kibi.core.document import Document


@dataclass(frozen=True)
class ViewportSnapshot:
    """Saved cursor and scroll position, restored when a search is cancelled."""
    cx: int
    cy: int
    row_offset: int
    col_offset: int


@dataclass
class Viewport:
    """
    Cursor position in document coordinates plus the visible window.

    ``cx``/``cy`` index the raw text; ``rx`` is the screen column of ``cx``
    after tab expansion and is recomputed by ``scroll``.
    """
    screen_rows: int = 22
    screen_cols: int = 80
    cx: int = 0
    cy: int = 0
    rx: int = 0
    row_offset: int = 0
    col_offset: int = 0

    def snapshot(self) -> ViewportSnapshot:
        return ViewportSnapshot(self.cx, self.cy, self.row_offset, self.col_offset)

    def restore(self, snap: ViewportSnapshot) -> None:
        self.cx = snap.cx
        self.cy = snap.cy
        self.row_offset = snap.row_offset
        self.col_offset = snap.col_offset

    def resize(self, rows: int, cols: int) -> None:
        """Set the text area size (screen rows already exclude the two bars)."""
        self.screen_rows = max(1, rows)
        self.screen_cols = max(1, cols)

    def clamp(self, document: Document) -> None:
        """Pull the cursor back inside the document."""
        self.cy = max(0, min(self.cy, len(document)))
        if self.cy < len(document):
            self.cx = max(0, min(self.cx, len(document[self.cy])))
        else:
            self.cx = 0

    def scroll(self, document: Document) -> None:
        """Adjust the offsets by the least amount that keeps the cursor visible."""
        self.clamp(document)
        self.rx = 0
        if self.cy < len(document):
            self.rx = document[self.cy].cx_to_rx(self.cx)

        if self.cy < self.row_offset:
            self.row_offset = self.cy
        if self.cy >= self.row_offset + self.screen_rows:
            self.row_offset = self.cy - self.screen_rows + 1

        if self.rx < self.col_offset:
            self.col_offset = self.rx
        if self.rx >= self.col_offset + self.screen_cols:
            self.col_offset = self.rx - self.screen_cols + 1
