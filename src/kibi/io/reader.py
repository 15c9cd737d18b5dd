"""Load text files."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def load(path: str | Path, encoding: str = "utf-8") -> list[str]:
    """
    Read a text file and return its lines without line terminators.

    Both ``\\n`` and ``\\r\\n`` endings are stripped. Bytes that are not
    valid in ``encoding`` are kept as surrogate escapes so ``save`` writes
    them back unchanged. Raises ``OSError`` (including ``FileNotFoundError``)
    when the file cannot be read.
    """
    path = Path(path)

    with open(path, 'r', encoding=encoding, errors='surrogateescape', newline='') as f:
        data = f.read()

    lines = [line.rstrip('\r') for line in data.split('\n')]
    # A final newline terminates the last line rather than starting a new one
    if lines and lines[-1] == "":
        lines.pop()

    logger.info("Loaded %d lines from %s", len(lines), path)
    return lines
