"""Interactive text editor application.

This module provides the EditorApp that ties together:
- Document: the row store being edited
- Viewport: cursor and scroll position
- SearchEngine: incremental search with cancel-restore
- FrameRenderer: one batched frame per key press
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from kibi import __version__
from kibi.cli.core.input import ARROW_KEYS, InputReader, Key, KeyEvent
from kibi.cli.core.terminal import Terminal, TerminalSize
from kibi.config import EditorConfig
from kibi.core.document import Document
from kibi.core.viewport import Viewport
from kibi.edit.prompt import Prompt, PromptResult
from kibi.edit.search import SearchEngine
from kibi.render.frame import FrameRenderer
from kibi.render.status_bar import StatusMessage

logger = logging.getLogger(__name__)

HELP_MESSAGE = "HELP: Ctrl-S = save | Ctrl-Q = quit | Ctrl-F = find"

# Status bar and message bar
BAR_ROWS = 2


class EditorApp:
    """Terminal text editor for a single file.

    Layout:
        +------------------------------------------+
        |  text rows (viewport)                    |
        |  ~                                       |
        +------------------------------------------+
        | Status bar (file, lines, position)       |
        | Message bar (help, prompts, results)     |
        +------------------------------------------+

    Keyboard Controls:
        Arrows, Home/End, PgUp/PgDn: Move cursor
        Enter: Split line
        Backspace / Ctrl-H: Delete before cursor (joins lines at column 0)
        Delete: Delete under cursor (joins lines at line end)
        Ctrl-S: Save (asks for a name the first time)
        Ctrl-F: Search (arrows jump between matches, Enter keeps, Esc restores)
        Ctrl-Q: Quit (repeat to confirm when there are unsaved changes)

    Each key event is handled completely and followed by exactly one render.
    """

    def __init__(
        self,
        path: Optional[Path] = None,
        config: Optional[EditorConfig] = None,
        input_reader: Optional[InputReader] = None,
        size: Optional[TerminalSize] = None,
    ) -> None:
        """Initialize the editor.

        Args:
            path: Optional file to open when ``run`` starts
            config: Runtime settings
            input_reader: Key source; created on ``run`` when omitted
            size: Fixed terminal size; queried every frame when omitted
        """
        self.config = config or EditorConfig()
        self.path = path
        self.running = False
        self.input = input_reader
        self._fixed_size = size

        self.document = Document(tab_stop=self.config.tab_stop)
        self.viewport = Viewport()
        self.search = SearchEngine()
        self.renderer = FrameRenderer(
            version=__version__,
            message_timeout=self.config.message_timeout,
        )
        self.message = StatusMessage(HELP_MESSAGE)

        # Prompt state
        self._save_prompt: Prompt | None = None
        self._search_prompt: Prompt | None = None

        # Quit confirmation state
        self._quit_times = self.config.quit_times

        self._apply_size(size or Terminal.size())

    # -------------------------------------------------------------------------
    # Document Management
    # -------------------------------------------------------------------------

    def open(self, path: Path) -> None:
        """Load a file for editing; on failure start an empty buffer with its name."""
        try:
            self.document = Document.load(path, tab_stop=self.config.tab_stop)
        except FileNotFoundError:
            self.document = Document(filename=str(path), tab_stop=self.config.tab_stop)
            self.document.select_syntax()
            self.set_message(f"New file: {path}")
        except OSError as e:
            logger.warning("Cannot open %s: %s", path, e)
            self.document = Document(filename=str(path), tab_stop=self.config.tab_stop)
            self.document.select_syntax()
            self.set_message(f"Can't open {path}: {e}")
        self.path = path
        self.viewport.cx = self.viewport.cy = 0
        self.viewport.row_offset = self.viewport.col_offset = 0

    def save(self) -> None:
        """Save to the current filename, asking for one if the buffer is unnamed."""
        if not self.document.filename:
            self._save_prompt = Prompt("Save as (ESC to cancel): ")
            self.set_message(self._save_prompt.message)
            return
        self._write()

    def _write(self) -> None:
        try:
            written = self.document.save()
        except OSError as e:
            logger.error("Save to %s failed: %s", self.document.filename, e)
            self.set_message(f"Can't save! I/O error: {e}")
            return
        self.set_message(f"{written} bytes written to disk")

    def set_message(self, text: str) -> None:
        self.message = StatusMessage(text)

    # -------------------------------------------------------------------------
    # Main Loop
    # -------------------------------------------------------------------------

    def run(self) -> None:
        """Run the editor main loop."""
        with Terminal.managed_mode():
            if self.input is None:
                self.input = InputReader()
            if self.path is not None:
                self.open(self.path)

            self.running = True
            try:
                while self.running:
                    self.refresh()
                    self.process_key(self.input.read_blocking())
            except Exception:
                logger.exception("Editor loop failed")
                raise

    def refresh(self) -> None:
        """Render one frame and write it to the terminal."""
        if self._fixed_size is None:
            self._apply_size(Terminal.size())
        Terminal.write(self.render_frame())

    def render_frame(self) -> str:
        return self.renderer.render(self.document, self.viewport, self.message)

    def _apply_size(self, size: TerminalSize) -> None:
        self.viewport.resize(size.rows - BAR_ROWS, size.cols)

    # -------------------------------------------------------------------------
    # Input Handling
    # -------------------------------------------------------------------------

    def process_key(self, event: KeyEvent) -> None:
        """Apply one key event to the editor state."""
        if not event.is_ctrl('q'):
            self._quit_times = self.config.quit_times

        # Prompts take all input while open
        if self._save_prompt is not None:
            self._handle_save_prompt(event)
            return
        if self._search_prompt is not None:
            self._handle_search_prompt(event)
            return

        if event.is_ctrl('q'):
            self._confirm_quit()
            return
        if event.is_ctrl('s'):
            self.save()
            return
        if event.is_ctrl('f'):
            self._start_search()
            return

        self._handle_edit_key(event)
        self.viewport.clamp(self.document)

    def _confirm_quit(self) -> None:
        """Quit, or count down the confirmation streak if there are unsaved changes."""
        if self.document.dirty and self._quit_times > 0:
            self.set_message(
                f"WARNING!!! File has unsaved changes. "
                f"Press Ctrl-Q {self._quit_times} more times to quit."
            )
            self._quit_times -= 1
            return
        self.running = False

    def _handle_edit_key(self, event: KeyEvent) -> None:
        doc = self.document
        view = self.viewport

        if event.key == Key.ENTER:
            doc.split_row(view.cy, view.cx)
            view.cy += 1
            view.cx = 0
        elif event.key == Key.BACKSPACE or event.is_ctrl('h'):
            view.cy, view.cx = doc.delete_char(view.cy, view.cx)
        elif event.key == Key.DELETE:
            doc.delete_forward(view.cy, view.cx)
        elif event.key == Key.TAB:
            self._insert('\t')
        elif event.key in ARROW_KEYS:
            self.move_cursor(event.key)
        elif event.key == Key.HOME:
            view.cx = 0
        elif event.key == Key.END:
            if view.cy < len(doc):
                view.cx = len(doc[view.cy])
        elif event.key in (Key.PAGE_UP, Key.PAGE_DOWN):
            self._page(event.key)
        elif event.is_char and event.char:
            self._insert(event.char)
        # Ctrl-L, Escape and unknown sequences do nothing

    def _insert(self, ch: str) -> None:
        self.document.insert_char(self.viewport.cy, self.viewport.cx, ch)
        self.viewport.cx += 1

    def move_cursor(self, key: Key) -> None:
        """Move the cursor one step, then snap it to the row length."""
        doc = self.document
        view = self.viewport
        row = doc[view.cy] if view.cy < len(doc) else None

        if key == Key.LEFT:
            if view.cx > 0:
                view.cx -= 1
            elif view.cy > 0:
                view.cy -= 1
                view.cx = len(doc[view.cy])
        elif key == Key.RIGHT:
            if row is not None and view.cx < len(row):
                view.cx += 1
        elif key == Key.UP:
            if view.cy > 0:
                view.cy -= 1
        elif key == Key.DOWN:
            if view.cy < len(doc):
                view.cy += 1

        view.clamp(doc)

    def _page(self, key: Key) -> None:
        view = self.viewport
        if key == Key.PAGE_UP:
            view.cy = view.row_offset
            step = Key.UP
        else:
            view.cy = min(view.row_offset + view.screen_rows - 1, len(self.document))
            step = Key.DOWN
        for _ in range(view.screen_rows):
            self.move_cursor(step)

    # -------------------------------------------------------------------------
    # Prompts
    # -------------------------------------------------------------------------

    def _handle_save_prompt(self, event: KeyEvent) -> None:
        prompt = self._save_prompt
        assert prompt is not None
        result = prompt.feed(event)

        if result is PromptResult.CANCELLED:
            self._save_prompt = None
            self.set_message("Save aborted")
        elif result is PromptResult.ACCEPTED:
            self._save_prompt = None
            self.document.filename = prompt.text
            self.document.select_syntax()
            self._write()
        else:
            self.set_message(prompt.message)

    def _start_search(self) -> None:
        self.search.start(self.viewport)
        self._search_prompt = Prompt("Search (Use ESC/Arrows/Enter): ")
        self.set_message(self._search_prompt.message)

    def _handle_search_prompt(self, event: KeyEvent) -> None:
        prompt = self._search_prompt
        assert prompt is not None

        if event.key in ARROW_KEYS:
            self.search.update(self.document, self.viewport, prompt.text, event)
            return

        before = prompt.text
        result = prompt.feed(event)

        if result is PromptResult.CANCELLED:
            self._search_prompt = None
            self.search.cancel(self.document, self.viewport)
            self.set_message("")
        elif result is PromptResult.ACCEPTED:
            self._search_prompt = None
            self.search.confirm(self.document)
            self.set_message("")
        else:
            if prompt.text != before:
                self.search.update(self.document, self.viewport, prompt.text, event)
            self.set_message(prompt.message)


def run_editor(path: Optional[Path] = None, config: Optional[EditorConfig] = None) -> None:
    """Run the editor.

    Args:
        path: Optional file to open
        config: Runtime settings
    """
    app = EditorApp(path, config)
    app.run()
