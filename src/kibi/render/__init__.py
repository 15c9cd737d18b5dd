"""Rendering - turn editor state into a terminal frame."""

from kibi.render.frame import FrameRenderer
from kibi.render.status_bar import MessageBar, StatusBar, StatusMessage

__all__ = ["FrameRenderer", "MessageBar", "StatusBar", "StatusMessage"]
