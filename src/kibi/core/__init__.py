"""Core data structures: rows, the document row store and the viewport."""

from kibi.core.highlight import Highlight
from kibi.core.row import Row, expand_tabs
from kibi.core.document import Document
from kibi.core.viewport import Viewport, ViewportSnapshot

__all__ = ["Highlight", "Row", "expand_tabs", "Document", "Viewport", "ViewportSnapshot"]
