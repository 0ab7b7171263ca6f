"""Depth-first search for the first matching leaf note."""

from __future__ import annotations

from typing import Any

from ..models import CONTENT_FIELD, Criterion, ExactValue, Substring
from ..utils.node_utils import child_nodes, string_field


def find_content(root: Any, key: str, criterion: Criterion | None) -> str | None:
    """Return the content of the first leaf whose ``key`` field matches.

    Nodes are visited parent first, children in listed order. Only leaves
    are tested; a node with children is always descended into instead.
    """
    if not isinstance(criterion, (ExactValue, Substring)):
        return None

    stack = [root]
    while stack:
        node = stack.pop()
        children = child_nodes(node)
        if children:
            stack.extend(reversed(children))
            continue
        content = _leaf_content(node, key, criterion)
        if content is not None:
            return content
    return None


def _leaf_content(node: Any, key: str, criterion: ExactValue | Substring) -> str | None:
    """Content of a leaf if it satisfies the criterion."""
    field_value = string_field(node, key)
    if field_value is None or not criterion.matches(field_value):
        return None
    return string_field(node, CONTENT_FIELD)
