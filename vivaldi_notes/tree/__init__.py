"""Notes tree search and summary."""

from .matcher import find_content
from .renderer import render_json
from .summary import summarize, truncate

__all__ = [
    "find_content",
    "render_json",
    "summarize",
    "truncate",
]
