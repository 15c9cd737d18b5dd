"""Built-in language definitions for syntax highlighting."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class SyntaxDefinition:
    """
    Highlighting rules for one language.

    ``keywords`` get the primary keyword class (control flow), ``types`` the
    secondary one (declarations and built-in type names). An empty comment
    delimiter disables that kind of comment.
    """
    filetype: str
    filematch: tuple[str, ...]
    keywords: frozenset[str]
    types: frozenset[str]
    single_line_comment: str = ""
    multiline_comment_start: str = ""
    multiline_comment_end: str = ""
    highlight_numbers: bool = True
    highlight_strings: bool = True

    def matches(self, filename: str) -> bool:
        """Check a filename against this language's patterns.

        Patterns starting with ``.`` are compared to the extension, any
        other pattern matches as a substring of the name.
        """
        name = os.path.basename(filename)
        dot = name.rfind('.')
        ext = name[dot:] if dot != -1 else None
        for pattern in self.filematch:
            if pattern.startswith('.'):
                if ext == pattern:
                    return True
            elif pattern in name:
                return True
        return False


RUST = SyntaxDefinition(
    filetype="Rust",
    filematch=(".rs", ".toml"),
    keywords=frozenset({
        "if", "else", "while", "for", "loop", "break", "continue", "return",
        "match", "in", "as", "where", "unsafe", "async", "await",
    }),
    types=frozenset({
        "struct", "enum", "impl", "trait", "fn", "let", "mut", "const",
        "static", "pub", "mod", "use", "crate", "super", "self", "Self",
        "i8", "i16", "i32", "i64", "i128", "isize",
        "u8", "u16", "u32", "u64", "u128", "usize",
        "f32", "f64", "bool", "char", "str", "String",
        "Vec", "Option", "Result",
    }),
    single_line_comment="//",
    multiline_comment_start="/*",
    multiline_comment_end="*/",
)

C = SyntaxDefinition(
    filetype="c",
    filematch=(".c", ".h", ".cpp", ".hpp", ".cc"),
    keywords=frozenset({
        "switch", "if", "while", "for", "break", "continue", "return",
        "else", "struct", "union", "typedef", "static", "enum", "class",
        "case", "default", "goto", "sizeof",
    }),
    types=frozenset({
        "int", "long", "double", "float", "char", "unsigned", "signed",
        "void", "short", "const", "size_t", "bool",
    }),
    single_line_comment="//",
    multiline_comment_start="/*",
    multiline_comment_end="*/",
)

PYTHON = SyntaxDefinition(
    filetype="Python",
    filematch=(".py", ".pyi"),
    keywords=frozenset({
        "if", "elif", "else", "while", "for", "break", "continue", "return",
        "try", "except", "finally", "raise", "with", "yield", "pass",
        "import", "from", "as", "in", "is", "not", "and", "or", "lambda",
        "async", "await", "global", "nonlocal", "del", "assert",
    }),
    types=frozenset({
        "def", "class", "None", "True", "False", "self",
        "int", "float", "str", "bytes", "bool", "list", "dict", "set",
        "tuple", "object",
    }),
    single_line_comment="#",
)


# Registry of built-in languages, checked in order
LANGUAGES: dict[str, SyntaxDefinition] = {
    "rust": RUST,
    "c": C,
    "python": PYTHON,
}


def get_language(name: str) -> SyntaxDefinition | None:
    """Get a language definition by registry name (case-insensitive)."""
    return LANGUAGES.get(name.lower())


def list_languages() -> list[str]:
    """Get list of available language names."""
    return list(LANGUAGES.keys())


def detect_language(filename: str | None) -> SyntaxDefinition | None:
    """Pick the first language whose file patterns match ``filename``."""
    if not filename:
        return None
    for definition in LANGUAGES.values():
        if definition.matches(filename):
            return definition
    return None
