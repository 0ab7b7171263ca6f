"""Safe accessors for loosely typed note fields."""

from __future__ import annotations

from typing import Any

from ..models import CHILDREN_FIELD, ValueKind


def value_kind(value: Any) -> ValueKind:
    """Classify a decoded JSON value."""
    if value is None:
        return ValueKind.NULL
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, list):
        return ValueKind.ARRAY
    if isinstance(value, dict):
        return ValueKind.OBJECT
    return ValueKind.OTHER


def field_kind(node: Any, name: str) -> ValueKind:
    """Kind of the field ``name`` on ``node``; absent fields read as null."""
    if value_kind(node) is not ValueKind.OBJECT:
        return ValueKind.NULL
    return value_kind(node.get(name))


def string_field(node: Any, name: str) -> str | None:
    """Return the field as a string, or None if absent or not a string."""
    if field_kind(node, name) is ValueKind.STRING:
        return node[name]
    return None


def child_nodes(node: Any) -> list:
    """Return the node's children, or an empty list for a leaf."""
    if field_kind(node, CHILDREN_FIELD) is ValueKind.ARRAY:
        return node[CHILDREN_FIELD]
    return []
