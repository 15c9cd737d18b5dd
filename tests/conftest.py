"""Shared pytest fixtures."""

from pathlib import Path

import pytest

from kibi.cli.core.terminal import TerminalSize
from kibi.cli.editor import EditorApp
from kibi.config import EditorConfig
from kibi.core.document import Document


RUST_SAMPLE = ["fn main() {", "    // hi", "}"]


@pytest.fixture
def rust_doc() -> Document:
    """Small highlighted Rust document."""
    return Document.from_lines(list(RUST_SAMPLE), filename="main.rs")


@pytest.fixture
def app() -> EditorApp:
    """Editor with a fixed 12x40 terminal and an empty buffer."""
    editor = EditorApp(config=EditorConfig(), size=TerminalSize(12, 40))
    editor.running = True
    return editor


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    """A Rust source file on disk."""
    path = tmp_path / "main.rs"
    path.write_text("\n".join(RUST_SAMPLE) + "\n", encoding="utf-8")
    return path
