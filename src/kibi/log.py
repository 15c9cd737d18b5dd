"""Logging setup.

The editor owns the terminal while it runs, so log records go to a file
when one is configured and are dropped otherwise.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kibi.config import EditorConfig

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(config: EditorConfig) -> logging.Logger:
    """Configure the ``kibi`` logger from ``config`` and return it."""
    logger = logging.getLogger("kibi")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if config.log_file is not None:
        handler: logging.Handler = logging.FileHandler(config.log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.setLevel(getattr(logging, config.log_level.upper(), logging.WARNING))
    else:
        handler = logging.NullHandler()

    logger.addHandler(handler)
    logger.propagate = False
    return logger
