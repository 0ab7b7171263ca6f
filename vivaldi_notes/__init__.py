"""Search and summarize Vivaldi notes exports."""

from .models import (
    ExactValue,
    Help,
    NamedFile,
    NotesInputError,
    Search,
    StandardInput,
    Substring,
    Summary,
    ValueKind,
)

__all__ = [
    "ExactValue",
    "Help",
    "NamedFile",
    "NotesInputError",
    "Search",
    "StandardInput",
    "Substring",
    "Summary",
    "ValueKind",
]
