"""File I/O - load and save plain text."""

from kibi.io.reader import load
from kibi.io.writer import save

__all__ = ["load", "save"]
