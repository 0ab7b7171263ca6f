#!/usr/bin/env python3
"""
Main entry point for the notes parser.

Usage:
    vivaldi_notes_parser [-h/--help] [-k key] [-v value | -c contents] [file]
    python3 -m vivaldi_notes [-h/--help] [-k key] [-v value | -c contents] [file]
"""

import sys
from typing import List, Optional

from .arguments import parse_args, usage
from .models import Help, NotesInputError, Search
from .tree import find_content, render_json, summarize
from .utils.file_utils import load_notes


def run_search(command: Search, notes) -> Optional[str]:
    """Return the text to print for a search command, if any."""
    if command.is_summary:
        summary = summarize(notes)
        return render_json(summary) if summary is not None else None
    return find_content(notes, command.key, command.criterion)


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the notes parser."""
    command = parse_args(sys.argv if argv is None else argv)
    if isinstance(command, Help):
        print(usage())
        return

    try:
        notes = load_notes(command.source)
    except NotesInputError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    output = run_search(command, notes)
    if output is not None:
        print(output)


if __name__ == "__main__":
    main()
