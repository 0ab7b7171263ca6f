"""JSON rendering for note summaries."""

from __future__ import annotations

import json
from typing import Any

INDENT = "  "


def render_json(summary: Any) -> str:
    """Render a summary tree as pretty-printed JSON.

    Produces the same text as ``json.dumps(summary, indent=2,
    ensure_ascii=False)`` but walks containers with an explicit stack, so
    trees nested past the interpreter recursion limit still render.
    """
    parts: list[str] = []
    # Items are either literal text (str) or a (value, level) pair to encode
    stack: list = [(summary, 0)]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
            continue
        value, level = item
        if isinstance(value, dict) and value:
            parts.append("{")
            stack.append(_closing("}", level))
            entries = list(value.items())
            for i in range(len(entries) - 1, -1, -1):
                key, child = entries[i]
                stack.append((child, level + 1))
                stack.append(_item_prefix(i, level) + _scalar(str(key)) + ": ")
        elif isinstance(value, list) and value:
            parts.append("[")
            stack.append(_closing("]", level))
            for i in range(len(value) - 1, -1, -1):
                stack.append((value[i], level + 1))
                stack.append(_item_prefix(i, level))
        else:
            parts.append(_scalar(value))
    return "".join(parts)


def _item_prefix(index: int, level: int) -> str:
    separator = "," if index else ""
    return separator + "\n" + INDENT * (level + 1)


def _closing(bracket: str, level: int) -> str:
    return "\n" + INDENT * level + bracket


def _scalar(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False)
