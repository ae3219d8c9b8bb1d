"""Pytest fixtures for eradicate tests."""

from pathlib import Path

import pytest


@pytest.fixture
def make_tree(tmp_path, monkeypatch):
    """Create files and directories under tmp_path and chdir into it.

    Paths ending in "/" become directories; everything else becomes a file
    (parent directories are created as needed).
    """
    monkeypatch.chdir(tmp_path)

    def _make(*paths: str) -> Path:
        for rel in paths:
            target = tmp_path / rel
            if rel.endswith("/"):
                target.mkdir(parents=True, exist_ok=True)
            else:
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_text(f"contents of {rel}\n")
        return tmp_path

    return _make


@pytest.fixture
def txt_tree(make_tree):
    """Directory with a.txt, b.txt and notes.md."""
    return make_tree("a.txt", "b.txt", "notes.md")
