"""Incremental, wraparound search over the document."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from kibi.cli.core.input import Key, KeyEvent
from kibi.core.highlight import Highlight

if TYPE_CHECKING:
    from kibi.core.document import Document
    from kibi.core.viewport import Viewport, ViewportSnapshot

logger = logging.getLogger(__name__)


class Direction(Enum):
    """Scan direction through the rows."""
    FORWARD = 1
    BACKWARD = -1


@dataclass(frozen=True)
class SearchMatch:
    """A hit: row index, render column and length of the matched text."""
    row: int
    col: int
    length: int


class SearchEngine:
    """
    Find-as-you-type search with match highlighting and cancel-restore.

    ``start`` snapshots the viewport. Each query change scans again from
    the cursor row; ``next``/``previous`` continue from the last match in
    the given direction. The scan wraps around the document and gives up
    after one full pass. ``cancel`` puts the cursor and scroll back exactly
    as they were; ``confirm`` leaves the cursor on the match.

    With no previous match, a forward scan begins at the cursor row itself
    and a backward scan at the row above it, so a match before the cursor is
    reached by wrapping past the last (or first) row.
    """

    def __init__(self) -> None:
        self.last_match: int | None = None
        self.direction = Direction.FORWARD
        self._snapshot: ViewportSnapshot | None = None
        self._saved_highlight: list[Highlight] | None = None
        self._saved_row: int | None = None

    @property
    def active(self) -> bool:
        return self._snapshot is not None

    @property
    def snapshot(self) -> ViewportSnapshot | None:
        return self._snapshot

    def start(self, viewport: Viewport) -> None:
        """Begin a search session from the current cursor position."""
        self._snapshot = viewport.snapshot()
        self.last_match = None
        self.direction = Direction.FORWARD

    def update(
        self, document: Document, viewport: Viewport, query: str, event: KeyEvent
    ) -> SearchMatch | None:
        """React to one prompt key: arrows step between matches, Enter and
        Escape drop the match marker, any other key scans for the new query."""
        if event.key in (Key.ENTER, Key.ESCAPE):
            self.restore_highlight(document)
            return None
        if event.key in (Key.RIGHT, Key.DOWN):
            return self.next(document, viewport, query)
        if event.key in (Key.LEFT, Key.UP):
            return self.previous(document, viewport, query)
        return self.search(document, viewport, query)

    def search(self, document: Document, viewport: Viewport, query: str) -> SearchMatch | None:
        """Query text changed: scan again from the starting cursor row."""
        self.restore_highlight(document)
        self.last_match = None
        self.direction = Direction.FORWARD
        return self._scan(document, viewport, query)

    def next(self, document: Document, viewport: Viewport, query: str) -> SearchMatch | None:
        """Move to the next match after the current one."""
        self.direction = Direction.FORWARD
        return self._scan(document, viewport, query)

    def previous(self, document: Document, viewport: Viewport, query: str) -> SearchMatch | None:
        """Move to the previous match before the current one."""
        self.direction = Direction.BACKWARD
        return self._scan(document, viewport, query)

    def confirm(self, document: Document) -> None:
        """Finish the search, keeping the cursor on the match."""
        self.restore_highlight(document)
        self._end()

    def cancel(self, document: Document, viewport: Viewport) -> None:
        """Abort the search and restore the cursor and scroll position."""
        self.restore_highlight(document)
        if self._snapshot is not None:
            viewport.restore(self._snapshot)
        self._end()

    def restore_highlight(self, document: Document) -> None:
        """Put back the classes that the match marker replaced."""
        if self._saved_highlight is not None and self._saved_row is not None:
            if self._saved_row < len(document):
                row = document[self._saved_row]
                if len(row.highlight) == len(self._saved_highlight):
                    row.highlight = self._saved_highlight
        self._saved_highlight = None
        self._saved_row = None

    def _end(self) -> None:
        self._snapshot = None
        self.last_match = None
        self.direction = Direction.FORWARD

    def _start_row(self, document: Document) -> int:
        """Row index one step before the first row to examine."""
        if self.last_match is not None:
            return self.last_match
        origin = self._snapshot.cy if self._snapshot is not None else 0
        if self.direction is Direction.FORWARD:
            return origin - 1
        return origin

    def _scan(self, document: Document, viewport: Viewport, query: str) -> SearchMatch | None:
        if not query or document.is_empty:
            return None

        count = len(document)
        current = self._start_row(document)
        step = self.direction.value

        for _ in range(count):
            current = (current + step) % count
            row = document[current]
            col = row.render.find(query)
            if col == -1:
                continue

            self.last_match = current
            viewport.cy = current
            viewport.cx = row.rx_to_cx(col)
            # Scroll past the end so the next render puts the match on top
            viewport.row_offset = count

            self.restore_highlight(document)
            self._saved_row = current
            self._saved_highlight = list(row.highlight)
            end = min(col + len(query), len(row.highlight))
            row.highlight[col:end] = [Highlight.MATCH] * (end - col)

            logger.debug("Match for %r at row %d col %d", query, current, col)
            return SearchMatch(current, col, len(query))

        return None
