#!/usr/bin/env python3
"""
Data models for the notes parser.

Contains the command descriptors produced from the command line, the
value kinds used to inspect loosely typed note fields, and the field
constants shared by search and summary.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


PROGRAM_NAME = "vivaldi_notes_parser"

CONTENT_FIELD = "content"
CHILDREN_FIELD = "children"

# Fields copied into a summary node, in output order
SUMMARY_FIELDS = ("id", "subject", "content")
TRUNCATED_FIELDS = frozenset({"subject", "content"})
SUMMARY_MAX_LENGTH = 30


class ValueKind(Enum):
    """Kinds of JSON value a note field can hold."""
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"
    NULL = "null"
    OTHER = "other"


class NotesInputError(Exception):
    """Raised when the notes document cannot be read or parsed."""


@dataclass(frozen=True)
class ExactValue:
    """Match a field whose value equals ``value`` exactly."""
    value: str

    def matches(self, text: str) -> bool:
        return text == self.value


@dataclass(frozen=True)
class Substring:
    """Match a field whose value contains ``text`` (case-sensitive)."""
    text: str

    def matches(self, text: str) -> bool:
        return self.text in text


@dataclass(frozen=True)
class Summary:
    """No search key: summarize the whole tree instead."""


Criterion = Union[ExactValue, Substring, Summary]


@dataclass(frozen=True)
class NamedFile:
    """Read the notes document from a file path."""
    path: str


@dataclass(frozen=True)
class StandardInput:
    """Read the notes document from standard input."""


InputSource = Union[NamedFile, StandardInput]


@dataclass(frozen=True)
class Help:
    """Print the usage text."""


@dataclass(frozen=True)
class Search:
    """Search the notes tree, or summarize it when no key was given.

    ``criterion`` is ``None`` when a key was supplied without ``-v`` or
    ``-c``; such a search never matches.
    """
    key: Optional[str]
    criterion: Optional[Criterion]
    source: InputSource

    @property
    def is_summary(self) -> bool:
        return isinstance(self.criterion, Summary)


Command = Union[Help, Search]
