"""Stateful per-row syntax highlighter."""

from __future__ import annotations

from typing import TYPE_CHECKING

from kibi.core.highlight import Highlight

if TYPE_CHECKING:
    from kibi.core.row import Row
    from kibi.syntax.languages import SyntaxDefinition

SEPARATORS = frozenset(",.()+-/*=~%<>[];")


def is_separator(ch: str) -> bool:
    """Check whether ``ch`` ends a word for keyword and number detection."""
    return ch.isspace() or ch == '\0' or ch in SEPARATORS


class Highlighter:
    """
    Classify the characters of rendered rows for one language.

    The only state carried between rows is whether a multi-line comment is
    still open, so each row can be recomputed on its own given the flag left
    by the row above it.
    """

    def __init__(self, syntax: SyntaxDefinition) -> None:
        self.syntax = syntax

    def highlight(self, render: str, open_comment: bool = False) -> tuple[list[Highlight], bool]:
        """
        Classify ``render`` starting in ``open_comment`` state.

        Returns the classes (one per character) and whether the row ends
        inside an unterminated multi-line comment.
        """
        syntax = self.syntax
        hl = [Highlight.NORMAL] * len(render)

        scs = syntax.single_line_comment
        mcs = syntax.multiline_comment_start
        mce = syntax.multiline_comment_end

        prev_sep = True
        in_string = ""
        in_comment = open_comment
        seen_dot = False

        i = 0
        n = len(render)
        while i < n:
            c = render[i]
            prev_hl = hl[i - 1] if i > 0 else Highlight.NORMAL

            if scs and not in_string and not in_comment and render.startswith(scs, i):
                hl[i:] = [Highlight.COMMENT] * (n - i)
                break

            if mcs and mce and not in_string:
                if in_comment:
                    if render.startswith(mce, i):
                        end = min(i + len(mce), n)
                        hl[i:end] = [Highlight.MLCOMMENT] * (end - i)
                        i = end
                        in_comment = False
                        prev_sep = True
                        continue
                    hl[i] = Highlight.MLCOMMENT
                    i += 1
                    continue
                if render.startswith(mcs, i):
                    end = min(i + len(mcs), n)
                    hl[i:end] = [Highlight.MLCOMMENT] * (end - i)
                    i = end
                    in_comment = True
                    continue

            if syntax.highlight_strings:
                if in_string:
                    hl[i] = Highlight.STRING
                    if c == '\\' and i + 1 < n:
                        hl[i + 1] = Highlight.STRING
                        i += 2
                        continue
                    if c == in_string:
                        in_string = ""
                    i += 1
                    prev_sep = True
                    continue
                if c in ('"', "'"):
                    in_string = c
                    hl[i] = Highlight.STRING
                    i += 1
                    continue

            if syntax.highlight_numbers:
                if prev_hl != Highlight.NUMBER:
                    seen_dot = False
                is_digit = '0' <= c <= '9'
                if (is_digit and (prev_sep or prev_hl == Highlight.NUMBER)) or (
                    c == '.' and prev_hl == Highlight.NUMBER and not seen_dot
                ):
                    if c == '.':
                        seen_dot = True
                    hl[i] = Highlight.NUMBER
                    i += 1
                    prev_sep = False
                    continue

            if prev_sep:
                length, cls = self._keyword_at(render, i)
                if length:
                    hl[i:i + length] = [cls] * length
                    i += length
                    prev_sep = False
                    continue

            prev_sep = is_separator(c)
            i += 1

        return hl, in_comment

    def apply(self, row: Row, open_comment: bool = False) -> bool:
        """Recompute ``row.highlight`` and return the row's new comment state."""
        row.highlight, row.open_comment = self.highlight(row.render, open_comment)
        return row.open_comment

    def _keyword_at(self, render: str, i: int) -> tuple[int, Highlight]:
        """Find a keyword starting at ``i`` that is followed by a separator."""
        for words, cls in (
            (self.syntax.keywords, Highlight.KEYWORD1),
            (self.syntax.types, Highlight.KEYWORD2),
        ):
            for word in words:
                if not render.startswith(word, i):
                    continue
                end = i + len(word)
                if end >= len(render) or is_separator(render[end]):
                    return len(word), cls
        return 0, Highlight.NORMAL
