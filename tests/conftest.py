"""Shared fixtures for notes parser tests."""

import json

import pytest


@pytest.fixture
def notes_tree():
    """A small notes export with folders, leaves and irregular fields."""
    return {
        "id": "root",
        "subject": "Notes",
        "children": [
            {
                "id": "10",
                "subject": "Todo Queue",
                "content": "folder content is never returned",
                "children": [
                    {"id": "11", "subject": "Groceries", "content": "milk, eggs"},
                    {"id": "12", "subject": "Todo Queue", "content": "write report"},
                ],
            },
            {"id": "20", "subject": "Empty folder", "content": "leaf by emptiness", "children": []},
            {"id": "30", "subject": None, "content": 42},
            {"id": "40", "subject": "Todo Queue", "content": "second match"},
        ],
    }


@pytest.fixture
def write_notes(tmp_path):
    """Write a document to a temporary notes file and return its path."""
    def _write(document, name="Notes"):
        path = tmp_path / name
        text = document if isinstance(document, str) else json.dumps(document)
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _write
