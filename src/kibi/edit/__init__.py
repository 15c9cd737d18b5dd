"""Editing helpers - search engine and line prompt."""

from kibi.edit.search import Direction, SearchEngine, SearchMatch
from kibi.edit.prompt import Prompt, PromptResult

__all__ = ["Direction", "SearchEngine", "SearchMatch", "Prompt", "PromptResult"]
