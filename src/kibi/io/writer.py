"""Save text files."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def save(path: str | Path, text: str, encoding: str = "utf-8") -> int:
    """
    Write ``text`` to ``path`` in one call, replacing any existing content.

    Surrogate escapes from ``load`` go back out as the original bytes.
    Returns the number of bytes written. Raises ``OSError`` on failure.
    """
    path = Path(path)
    data = text.encode(encoding, 'surrogateescape')

    with open(path, 'wb') as f:
        f.write(data)

    logger.info("Wrote %d bytes to %s", len(data), path)
    return len(data)
