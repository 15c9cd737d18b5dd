"""Tests for incremental search."""

from kibi.cli.core.input import Key, KeyEvent
from kibi.core.document import Document
from kibi.core.highlight import Highlight
from kibi.core.viewport import Viewport
from kibi.edit.search import Direction, SearchEngine, SearchMatch


def started(viewport: Viewport) -> SearchEngine:
    engine = SearchEngine()
    engine.start(viewport)
    return engine


class TestSearch:
    """Tests for find-as-you-type search."""

    def test_finds_match_below_cursor(self, rust_doc: Document) -> None:
        viewport = Viewport()
        engine = started(viewport)
        match = engine.search(rust_doc, viewport, "hi")
        assert match == SearchMatch(1, 7, 2)
        assert (viewport.cy, viewport.cx) == (1, 7)
        assert viewport.row_offset == len(rust_doc)

    def test_match_is_highlighted(self, rust_doc: Document) -> None:
        viewport = Viewport()
        engine = started(viewport)
        engine.search(rust_doc, viewport, "hi")
        assert rust_doc[1].highlight[7:9] == [Highlight.MATCH] * 2
        assert rust_doc[1].highlight[4:7] == [Highlight.COMMENT] * 3

    def test_cursor_row_searched_first(self) -> None:
        doc = Document.from_lines(["a", "xa", "a"])
        viewport = Viewport(cy=1)
        engine = started(viewport)
        assert engine.search(doc, viewport, "a").row == 1

    def test_wraps_to_top(self) -> None:
        doc = Document.from_lines(["foo", "bar", "baz"])
        viewport = Viewport(cy=2)
        engine = started(viewport)
        assert engine.search(doc, viewport, "foo").row == 0
        assert viewport.cy == 0

    def test_no_match_leaves_cursor(self, rust_doc: Document) -> None:
        viewport = Viewport(cx=2, cy=0)
        engine = started(viewport)
        assert engine.search(rust_doc, viewport, "zzz") is None
        assert (viewport.cy, viewport.cx, viewport.row_offset) == (0, 2, 0)
        assert Highlight.MATCH not in rust_doc[1].highlight

    def test_empty_query(self, rust_doc: Document) -> None:
        viewport = Viewport()
        engine = started(viewport)
        assert engine.search(rust_doc, viewport, "") is None

    def test_empty_document(self) -> None:
        viewport = Viewport()
        engine = started(viewport)
        assert engine.search(Document(), viewport, "a") is None

    def test_match_after_tab_maps_to_raw_column(self) -> None:
        doc = Document.from_lines(["\tfoo"])
        viewport = Viewport()
        engine = started(viewport)
        match = engine.search(doc, viewport, "foo")
        assert match.col == 8
        assert viewport.cx == 1

    def test_new_query_restores_previous_highlight(self, rust_doc: Document) -> None:
        viewport = Viewport()
        engine = started(viewport)
        engine.search(rust_doc, viewport, "hi")
        engine.search(rust_doc, viewport, "main")
        assert rust_doc[1].highlight[4:] == [Highlight.COMMENT] * 5
        assert rust_doc[0].highlight[3:7] == [Highlight.MATCH] * 4


class TestSearchNavigation:
    """Tests for next/previous."""

    def test_next_and_previous(self) -> None:
        doc = Document.from_lines(["x a", "a", "b", "a"])
        viewport = Viewport()
        engine = started(viewport)
        assert engine.search(doc, viewport, "a") == SearchMatch(0, 2, 1)
        assert engine.next(doc, viewport, "a").row == 1
        assert engine.next(doc, viewport, "a").row == 3
        assert engine.next(doc, viewport, "a").row == 0
        assert engine.direction is Direction.FORWARD
        assert engine.previous(doc, viewport, "a").row == 3
        assert engine.direction is Direction.BACKWARD

    def test_previous_without_match_starts_above_cursor(self) -> None:
        doc = Document.from_lines(["a", "b", "a", "b"])
        viewport = Viewport(cy=2)
        engine = started(viewport)
        assert engine.previous(doc, viewport, "a").row == 0

    def test_previous_wraps_to_bottom(self) -> None:
        doc = Document.from_lines(["a", "b", "a"])
        viewport = Viewport(cy=0)
        engine = started(viewport)
        assert engine.previous(doc, viewport, "a").row == 2

    def test_only_one_row_highlighted(self) -> None:
        doc = Document.from_lines(["a", "a"])
        viewport = Viewport()
        engine = started(viewport)
        engine.search(doc, viewport, "a")
        engine.next(doc, viewport, "a")
        assert doc[0].highlight == [Highlight.NORMAL]
        assert doc[1].highlight == [Highlight.MATCH]

    def test_single_match_found_again(self) -> None:
        doc = Document.from_lines(["a", "b"])
        viewport = Viewport()
        engine = started(viewport)
        engine.search(doc, viewport, "a")
        assert engine.next(doc, viewport, "a").row == 0


class TestSearchSession:
    """Tests for confirm and cancel."""

    def test_cancel_restores_viewport(self) -> None:
        doc = Document.from_lines([f"line {i}" for i in range(10)])
        viewport = Viewport(cx=1, cy=5, row_offset=3, col_offset=2)
        before = viewport.snapshot()
        engine = started(viewport)
        engine.search(doc, viewport, "line 8")
        assert viewport.cy == 8
        engine.cancel(doc, viewport)
        assert viewport.snapshot() == before
        assert not engine.active

    def test_cancel_restores_highlight(self, rust_doc: Document) -> None:
        viewport = Viewport()
        engine = started(viewport)
        engine.search(rust_doc, viewport, "hi")
        engine.cancel(rust_doc, viewport)
        assert (viewport.cy, viewport.cx, viewport.row_offset) == (0, 0, 0)
        assert rust_doc[1].highlight[4:] == [Highlight.COMMENT] * 5

    def test_confirm_keeps_cursor(self, rust_doc: Document) -> None:
        viewport = Viewport()
        engine = started(viewport)
        engine.search(rust_doc, viewport, "hi")
        engine.confirm(rust_doc)
        assert (viewport.cy, viewport.cx) == (1, 7)
        assert Highlight.MATCH not in rust_doc[1].highlight
        assert not engine.active
        assert engine.last_match is None

    def test_start_takes_snapshot(self) -> None:
        viewport = Viewport(cx=3, cy=4)
        engine = started(viewport)
        assert engine.active
        assert engine.snapshot == viewport.snapshot()


class TestSearchUpdate:
    """Tests for update() dispatch on prompt keys."""

    def test_typed_key_rescans(self, rust_doc: Document) -> None:
        viewport = Viewport()
        engine = started(viewport)
        assert engine.update(rust_doc, viewport, "hi", KeyEvent.of_char("i")).row == 1

    def test_arrows_change_direction(self) -> None:
        doc = Document.from_lines(["a", "b", "a", "a"])
        viewport = Viewport()
        engine = started(viewport)
        engine.update(doc, viewport, "a", KeyEvent.of_char("a"))
        assert engine.update(doc, viewport, "a", KeyEvent.of_key(Key.DOWN)).row == 2
        assert engine.update(doc, viewport, "a", KeyEvent.of_key(Key.RIGHT)).row == 3
        assert engine.update(doc, viewport, "a", KeyEvent.of_key(Key.UP)).row == 2
        assert engine.direction is Direction.BACKWARD
        assert engine.update(doc, viewport, "a", KeyEvent.of_key(Key.LEFT)).row == 0

    def test_other_key_resets_direction(self) -> None:
        doc = Document.from_lines(["a", "a"])
        viewport = Viewport()
        engine = started(viewport)
        engine.update(doc, viewport, "a", KeyEvent.of_char("a"))
        engine.update(doc, viewport, "a", KeyEvent.of_key(Key.UP))
        engine.update(doc, viewport, "a", KeyEvent.of_char("a"))
        assert engine.direction is Direction.FORWARD
        assert engine.last_match == 0

    def test_enter_drops_marker(self, rust_doc: Document) -> None:
        viewport = Viewport()
        engine = started(viewport)
        engine.update(rust_doc, viewport, "hi", KeyEvent.of_char("i"))
        assert engine.update(rust_doc, viewport, "hi", KeyEvent.of_key(Key.ENTER)) is None
        assert Highlight.MATCH not in rust_doc[1].highlight
        assert (viewport.cy, viewport.cx) == (1, 7)
