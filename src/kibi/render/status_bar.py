"""Status bar and message bar rendering."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kibi.core.document import Document
    from kibi.core.viewport import Viewport

NO_NAME = "[No Name]"
FILENAME_WIDTH = 20


@dataclass
class StatusMessage:
    """A transient message shown under the status bar until it expires."""
    text: str = ""
    created: float = field(default_factory=time.monotonic)

    def visible(self, timeout: float, now: float | None = None) -> bool:
        """Check whether the message should still be drawn."""
        if not self.text:
            return False
        now = time.monotonic() if now is None else now
        return now - self.created < timeout


class StatusBar:
    """Inverse-video line with file info on the left and position on the right."""

    def render(self, width: int, document: Document, viewport: Viewport) -> str:
        """Render the status bar padded to exactly ``width`` columns."""
        name = (document.filename or NO_NAME)[:FILENAME_WIDTH]
        modified = " (modified)" if document.dirty else ""
        left = f"{name} - {len(document)} lines{modified}"
        right = f"{document.filetype} | {viewport.cy + 1}/{len(document)}"

        left = left[:width]
        if len(left) + len(right) <= width:
            line = left + " " * (width - len(left) - len(right)) + right
        else:
            line = left.ljust(width)

        return f"\x1b[7m{line}\x1b[m"


class MessageBar:
    """Bottom line showing the current message while it is fresh."""

    def __init__(self, timeout: float = 5.0) -> None:
        self.timeout = timeout

    def render(self, width: int, message: StatusMessage | None, now: float | None = None) -> str:
        line = "\x1b[K"
        if message is not None and message.visible(self.timeout, now):
            line += message.text[:width]
        return line
