"""Document - the row store behind the editor."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Iterator

from kibi.core.highlight import Highlight
from kibi.core.row import DEFAULT_TAB_STOP, Row

if TYPE_CHECKING:
    from kibi.syntax.highlighter import Highlighter
    from kibi.syntax.languages import SyntaxDefinition

logger = logging.getLogger(__name__)


@dataclass
class Document:
    """
    Ordered rows of text plus modification state.

    Every mutation bumps ``dirty`` by one and re-highlights only the rows it
    touched; a change in a row's open-comment state is pushed down to the
    rows below until the state settles.

    Example:
        doc = Document.from_lines(["fn main() {", "}"], filename="main.rs")
        doc.insert_char(0, 11, " ")
        text = doc.rows_to_text()
    """
    rows: list[Row] = field(default_factory=list)
    filename: str | None = None
    dirty: int = 0
    tab_stop: int = DEFAULT_TAB_STOP
    syntax: SyntaxDefinition | None = None
    _highlighter: Highlighter | None = field(default=None, init=False, repr=False)

    @classmethod
    def from_lines(
        cls,
        lines: list[str],
        filename: str | None = None,
        tab_stop: int = DEFAULT_TAB_STOP,
    ) -> Document:
        """Build a clean document from loaded lines, picking syntax by filename."""
        doc = cls(filename=filename, tab_stop=tab_stop)
        for line in lines:
            doc.insert_row(len(doc.rows), line)
        doc.dirty = 0
        doc.select_syntax()
        return doc

    @classmethod
    def load(cls, path: str | Path, tab_stop: int = DEFAULT_TAB_STOP) -> Document:
        """Load a document from disk."""
        from kibi.io.reader import load
        return cls.from_lines(load(path), filename=str(path), tab_stop=tab_stop)

    def save(self, path: str | Path | None = None) -> int:
        """Write the document out and mark it clean. Returns bytes written."""
        from kibi.io.writer import save
        target = path or self.filename
        if not target:
            raise ValueError("No path specified and document has no filename")
        written = save(target, self.rows_to_text())
        self.filename = str(target)
        self.dirty = 0
        return written

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows)

    def __getitem__(self, index: int) -> Row:
        return self.rows[index]

    @property
    def is_empty(self) -> bool:
        return not self.rows

    @property
    def filetype(self) -> str:
        return self.syntax.filetype if self.syntax else "no ft"

    # -------------------------------------------------------------------------
    # Syntax
    # -------------------------------------------------------------------------

    def set_syntax(self, syntax: SyntaxDefinition | None) -> None:
        """Switch language and re-highlight every row."""
        from kibi.syntax.highlighter import Highlighter

        self.syntax = syntax
        self._highlighter = Highlighter(syntax) if syntax else None
        open_comment = False
        for row in self.rows:
            open_comment = self._highlight_row(row, open_comment)

    def select_syntax(self) -> SyntaxDefinition | None:
        """Pick the language matching the current filename."""
        from kibi.syntax.languages import detect_language

        syntax = detect_language(self.filename)
        logger.debug("Selected syntax %s for %s", syntax.filetype if syntax else None, self.filename)
        self.set_syntax(syntax)
        return syntax

    def update_syntax(self, index: int) -> int:
        """
        Re-highlight row ``index`` and any rows whose carry-in changed.

        Returns the index of the last row recomputed.
        """
        last = index
        while 0 <= index < len(self.rows):
            last = index
            row = self.rows[index]
            previous = row.open_comment
            carry = self.rows[index - 1].open_comment if index > 0 else False
            if self._highlight_row(row, carry) == previous:
                break
            index += 1
        return last

    def _highlight_row(self, row: Row, open_comment: bool) -> bool:
        if self._highlighter is None:
            row.highlight = [Highlight.NORMAL] * len(row.render)
            row.open_comment = False
            return False
        return self._highlighter.apply(row, open_comment)

    # -------------------------------------------------------------------------
    # Row operations
    # -------------------------------------------------------------------------

    def insert_row(self, index: int, text: str) -> None:
        """Insert a row at ``index`` (clamped to the valid range)."""
        index = max(0, min(index, len(self.rows)))
        self.rows.insert(index, Row(text, tab_stop=self.tab_stop))
        self._refresh_from(index)
        self.dirty += 1

    def delete_row(self, index: int) -> bool:
        """Remove the row at ``index``; False when out of bounds."""
        if index < 0 or index >= len(self.rows):
            return False
        del self.rows[index]
        self._refresh_from(index)
        self.dirty += 1
        return True

    def clear(self) -> None:
        """Remove every row."""
        if self.rows:
            self.rows.clear()
            self.dirty += 1

    def insert_char(self, row: int, col: int, ch: str) -> None:
        """Insert ``ch`` at ``col``; on the end-of-document row a new row is added first."""
        row = max(0, min(row, len(self.rows)))
        if row == len(self.rows):
            self.insert_row(row, "")
        self.rows[row].insert_char(col, ch)
        self.update_syntax(row)
        self.dirty += 1

    def delete_char(self, row: int, col: int) -> tuple[int, int]:
        """
        Backspace at ``(row, col)``.

        Removes the character before ``col``, or joins the row onto the
        previous one when ``col`` is 0. Returns the cursor position after the
        edit, which is the join point for a join.
        """
        if row < 0 or row >= len(self.rows):
            return row, col
        if col <= 0 and row == 0:
            return row, 0

        current = self.rows[row]
        if col > 0:
            col = min(col, len(current))
            current.delete_char(col - 1)
            self.update_syntax(row)
            self.dirty += 1
            return row, col - 1

        previous = self.rows[row - 1]
        join_at = len(previous)
        previous.append(current.raw)
        del self.rows[row]
        self._refresh_from(row - 1)
        self.dirty += 1
        return row - 1, join_at

    def delete_forward(self, row: int, col: int) -> bool:
        """Delete the character under the cursor, joining the next row at row end."""
        if row < 0 or row >= len(self.rows):
            return False
        current = self.rows[row]
        if col < len(current):
            current.delete_char(max(col, 0))
            self.update_syntax(row)
            self.dirty += 1
            return True
        if row + 1 < len(self.rows):
            current.append(self.rows[row + 1].raw)
            del self.rows[row + 1]
            self._refresh_from(row)
            self.dirty += 1
            return True
        return False

    def split_row(self, row: int, col: int) -> None:
        """Break ``row`` at ``col``, moving the tail onto a new row below."""
        if row >= len(self.rows) or col <= 0:
            self.insert_row(row, "")
            return
        current = self.rows[row]
        tail = current.truncate(col)
        self.update_syntax(row)
        self.insert_row(row + 1, tail)

    def rows_to_text(self) -> str:
        """Join all rows into file content, each terminated by a newline."""
        return ''.join(f"{row.raw}\n" for row in self.rows)

    def _refresh_from(self, index: int) -> None:
        """Re-highlight after a structural change at ``index``."""
        if index < len(self.rows) and self.update_syntax(index) == index:
            # The row below has a new neighbour above it, so it is
            # recomputed even though ``index`` kept its comment state.
            if index + 1 < len(self.rows):
                self.update_syntax(index + 1)
