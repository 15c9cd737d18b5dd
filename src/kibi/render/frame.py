"""Compose a complete terminal frame from editor state."""

from __future__ import annotations

from typing import TYPE_CHECKING

from kibi.core.highlight import Highlight
from kibi.render.status_bar import MessageBar, StatusBar, StatusMessage

if TYPE_CHECKING:
    from kibi.core.document import Document
    from kibi.core.row import Row
    from kibi.core.viewport import Viewport

HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
CURSOR_HOME = "\x1b[H"
CLEAR_LINE = "\x1b[K"
DEFAULT_COLOR = "\x1b[39m"
INVERSE = "\x1b[7m"
RESET = "\x1b[m"


class FrameRenderer:
    """
    Render the editor screen as one string of escape sequences.

    The whole frame (text rows, status bar, message bar and cursor
    placement) is built in memory so the terminal receives it in a single
    write. Color codes are only emitted when the color changes.
    """

    def __init__(self, version: str = "", message_timeout: float = 5.0) -> None:
        self.version = version
        self.status_bar = StatusBar()
        self.message_bar = MessageBar(message_timeout)

    def render(
        self,
        document: Document,
        viewport: Viewport,
        message: StatusMessage | None = None,
        now: float | None = None,
    ) -> str:
        """Scroll the viewport to the cursor and build the frame."""
        viewport.scroll(document)

        parts: list[str] = [HIDE_CURSOR, CURSOR_HOME]
        for y in range(viewport.screen_rows):
            parts.append(self._render_line(y, document, viewport))
            parts.append(CLEAR_LINE)
            parts.append("\r\n")

        parts.append(self.status_bar.render(viewport.screen_cols, document, viewport))
        parts.append("\r\n")
        parts.append(self.message_bar.render(viewport.screen_cols, message, now))

        row = viewport.cy - viewport.row_offset + 1
        col = viewport.rx - viewport.col_offset + 1
        parts.append(f"\x1b[{row};{col}H")
        parts.append(SHOW_CURSOR)
        return ''.join(parts)

    def _render_line(self, y: int, document: Document, viewport: Viewport) -> str:
        file_row = y + viewport.row_offset
        if file_row < len(document):
            return self.render_row(document[file_row], viewport.col_offset, viewport.screen_cols)
        if document.is_empty and not document.dirty and y == viewport.screen_rows // 3:
            return self._welcome(viewport.screen_cols)
        return "~"

    def _welcome(self, width: int) -> str:
        welcome = f"Kibi editor -- version {self.version}"[:width]
        padding = (width - len(welcome)) // 2
        if padding:
            return "~" + " " * (padding - 1) + welcome
        return welcome

    @staticmethod
    def render_row(row: Row, col_offset: int, width: int) -> str:
        """Render the visible slice of one row with color escapes."""
        start = min(col_offset, len(row.render))
        end = min(len(row.render), start + width)

        parts: list[str] = []
        current_color: int | None = None

        for i in range(start, end):
            ch = row.render[i]
            hl = row.highlight[i] if i < len(row.highlight) else Highlight.NORMAL

            if ord(ch) < 32 or ord(ch) == 127 or '\udc80' <= ch <= '\udcff':
                # Control characters show as inverse @-letters, undecodable bytes as '?'
                sym = chr(ord('@') + ord(ch)) if ord(ch) <= 26 else '?'
                parts.append(f"{INVERSE}{sym}{RESET}")
                if current_color is not None:
                    parts.append(f"\x1b[{current_color}m")
            elif hl == Highlight.NORMAL:
                if current_color is not None:
                    parts.append(DEFAULT_COLOR)
                    current_color = None
                parts.append(ch)
            else:
                color = hl.color
                if color != current_color:
                    parts.append(hl.to_sgr())
                    current_color = color
                parts.append(ch)

        if current_color is not None:
            parts.append(DEFAULT_COLOR)

        return ''.join(parts)
