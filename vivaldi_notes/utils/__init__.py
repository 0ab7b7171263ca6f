"""Utility modules for the notes parser."""

from .file_utils import get_file_content, join_lines, load_notes, parse_notes, read_source
from .node_utils import child_nodes, field_kind, string_field, value_kind

__all__ = [
    "get_file_content",
    "join_lines",
    "load_notes",
    "parse_notes",
    "read_source",
    "child_nodes",
    "field_kind",
    "string_field",
    "value_kind",
]
