"""Truncated, structure-preserving summary of a notes tree."""

from __future__ import annotations

from typing import Any

from ..models import CHILDREN_FIELD, SUMMARY_FIELDS, SUMMARY_MAX_LENGTH, TRUNCATED_FIELDS
from ..utils.node_utils import child_nodes, string_field


def summarize(root: Any) -> dict | None:
    """Build the summary tree, or None when the root is not an object.

    Each summary node keeps ``id`` verbatim and ``subject``/``content``
    cut to ``SUMMARY_MAX_LENGTH`` characters, all only when present as
    strings. ``children`` appears only for a non-empty children list.
    """
    if not isinstance(root, dict):
        return None

    summary: dict = {}
    stack = [(root, summary)]
    while stack:
        node, target = stack.pop()
        _copy_fields(node, target)
        children = child_nodes(node)
        if children:
            target[CHILDREN_FIELD] = [{} for _ in children]
            stack.extend(zip(children, target[CHILDREN_FIELD]))
    return summary


def _copy_fields(node: Any, target: dict) -> None:
    for name in SUMMARY_FIELDS:
        text = string_field(node, name)
        if text is None:
            continue
        if name in TRUNCATED_FIELDS:
            text = truncate(text)
        target[name] = text


def truncate(text: str, limit: int = SUMMARY_MAX_LENGTH) -> str:
    """First ``limit`` characters of ``text``."""
    return text[:limit]
