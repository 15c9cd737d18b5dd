"""
kibi: a small terminal text editor

Open, edit, search and save one text file in the terminal, with syntax
highlighting and unsaved-change tracking.

Quick Start:
    $ kibi hello.rs

Library use:
    >>> import kibi
    >>> doc = kibi.Document.from_lines(["fn main() {", "}"], filename="main.rs")
    >>> doc.insert_char(1, 0, " ")
    >>> doc.rows_to_text()
    'fn main() {\\n }\\n'
"""

__version__ = "0.1.0"

# Core types
from kibi.core.highlight import Highlight
from kibi.core.row import Row
from kibi.core.document import Document
from kibi.core.viewport import Viewport

# Syntax
from kibi.syntax.languages import SyntaxDefinition, detect_language

# Convenience functions
from kibi.io.reader import load
from kibi.io.writer import save

__all__ = [
    # Version
    "__version__",
    # Core types
    "Highlight",
    "Row",
    "Document",
    "Viewport",
    # Syntax
    "SyntaxDefinition",
    "detect_language",
    # I/O
    "load",
    "save",
]
