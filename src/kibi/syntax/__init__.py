"""Syntax highlighting: language definitions and the row highlighter."""

from kibi.syntax.languages import (
    LANGUAGES,
    SyntaxDefinition,
    detect_language,
    get_language,
    list_languages,
)
from kibi.syntax.highlighter import Highlighter, is_separator

__all__ = [
    "LANGUAGES",
    "SyntaxDefinition",
    "detect_language",
    "get_language",
    "list_languages",
    "Highlighter",
    "is_separator",
]
