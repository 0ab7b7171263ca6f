#!/usr/bin/env python3
"""
File utility functions for the notes parser.

Handles reading the notes export from a file or standard input and
decoding it into a tree of plain dicts and lists.
"""

import json
import sys
from typing import Any, Iterable, Optional, TextIO

from ..models import InputSource, NamedFile, NotesInputError


def get_file_content(path: str) -> str:
    """Read a whole notes file as UTF-8 text."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise NotesInputError(f"file '{path}' is not valid UTF-8: {e}") from e
    except OSError as e:
        raise NotesInputError(f"cannot read '{path}': {e.strerror or e}") from e


def join_lines(lines: Iterable[str]) -> str:
    """Join lines with their line endings removed."""
    return "".join(_strip_line_ending(line) for line in lines)


def _strip_line_ending(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def read_source(source: InputSource, stdin: Optional[TextIO] = None) -> str:
    """Read the full notes text from the selected input source."""
    if isinstance(source, NamedFile):
        return get_file_content(source.path)

    stream = stdin if stdin is not None else sys.stdin
    try:
        return join_lines(stream)
    except UnicodeDecodeError as e:
        raise NotesInputError(f"standard input is not valid UTF-8: {e}") from e
    except OSError as e:
        raise NotesInputError(f"cannot read standard input: {e}") from e


def parse_notes(text: str) -> Any:
    """Decode notes JSON text."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise NotesInputError(f"malformed notes JSON: {e}") from e
    except RecursionError as e:
        raise NotesInputError("malformed notes JSON: document is nested too deeply") from e


def load_notes(source: InputSource, stdin: Optional[TextIO] = None) -> Any:
    """Read and decode the notes document from ``source``."""
    return parse_notes(read_source(source, stdin))
