"""
Pytest configuration and fixtures for Polyglot Reader tests.
"""

from pathlib import Path

import pytest


@pytest.fixture
def reader_home(tmp_path, monkeypatch) -> Path:
    """Point the reader's config directory at a temporary folder."""
    home = tmp_path / "home"
    monkeypatch.setenv("POLYGLOT_READER_HOME", str(home))
    return home


@pytest.fixture
def write_file(tmp_path):
    """Factory writing bytes to a file under tmp_path and returning its path."""

    def _write(name: str, data: bytes) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        return path

    return _write


@pytest.fixture
def numbered_text():
    """Factory for text made of `n` distinct lines."""

    def _text(n: int) -> str:
        return "\n".join(f"line {i}" for i in range(n))

    return _text
