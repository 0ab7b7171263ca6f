"""Command-line interpretation for the notes parser."""

from __future__ import annotations

from typing import Sequence

from .models import (
    PROGRAM_NAME,
    SUMMARY_MAX_LENGTH,
    Command,
    ExactValue,
    Help,
    InputSource,
    NamedFile,
    Search,
    StandardInput,
    Substring,
    Summary,
)

HELP_FLAGS = ("-h", "--help")
KEY_FLAGS = ("-k", "--key")
VALUE_FLAGS = ("-v", "--value")
CONTAINS_FLAGS = ("-c", "--contains")


def usage() -> str:
    """Return the usage text."""
    return "\n".join([
        f"Usage of {PROGRAM_NAME}:",
        f"{PROGRAM_NAME} [-h/--help] [options] [file]",
        "",
        "\t--help/-h\t\tShow this usage message",
        "\t--key/-k key\t\tSelect the note with this key, e.g.: -k id",
        "\t--value/-v value\tSelect the note with this chosen key and this value, e.g.: -k id -v 456",
        "\t--contains/-c contents\tSelect the note with this chosen key and contains the given contents,"
        " e.g.: -k content -c \"Some content\"",
        "",
        "\tIf no options are selected, the parser will print a summary by traversing the notes tree"
        f" with these fields: {{id, subject[:{SUMMARY_MAX_LENGTH}], content[:{SUMMARY_MAX_LENGTH}], children}}",
        "",
        "Examples:",
        f"\t{PROGRAM_NAME} -k id -v 456 Notes",
        f"\tcat 2022.01.07_21.00.01_Notes.bak | {PROGRAM_NAME} -k subject -v \"Todo Queue\"",
    ])


def parse_args(argv: Sequence[str]) -> Command:
    """Interpret the full argument list, program name included.

    Flags are scanned left to right. A flag missing its operand, or a
    contradictory combination, yields ``Help`` rather than an error. The
    last token, when it is not consumed by a flag, names the input file.
    """
    key: str | None = None
    value: str | None = None
    contains: str | None = None
    source: InputSource = StandardInput()

    last_index = len(argv) - 1
    index = 1
    while index <= last_index:
        token = argv[index]
        if token in HELP_FLAGS:
            return Help()
        if token in KEY_FLAGS or token in VALUE_FLAGS or token in CONTAINS_FLAGS:
            if index == last_index:
                return Help()
            operand = argv[index + 1]
            if token in KEY_FLAGS:
                key = operand
            elif token in VALUE_FLAGS:
                value = operand
            else:
                contains = operand
            index += 2
            continue
        if index == last_index:
            source = NamedFile(token)
        index += 1

    if value is not None and contains is not None:
        return Help()
    if key is None:
        if value is not None or contains is not None:
            return Help()
        return Search(key=None, criterion=Summary(), source=source)

    if value is not None:
        return Search(key=key, criterion=ExactValue(value), source=source)
    if contains is not None:
        return Search(key=key, criterion=Substring(contains), source=source)
    return Search(key=key, criterion=None, source=source)
