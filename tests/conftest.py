"""
Pytest configuration and fixtures for csvlex tests.

Provides fixtures for:
- Sample CSV files on disk (for CLI tests)
- Non-seekable text streams
"""

from __future__ import annotations

from pathlib import Path

import pytest

# =============================================================================
# Stream Helpers
# =============================================================================


class PipeStream:
    """Text stream that cannot seek, like a pipe or socket."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self.reads = 0

    def read(self, size: int = -1) -> str:
        self.reads += 1
        if size < 0:
            size = len(self._text) - self._pos
        chunk = self._text[self._pos : self._pos + size]
        self._pos += len(chunk)
        return chunk

    def seekable(self) -> bool:
        return False


@pytest.fixture
def pipe_stream() -> type[PipeStream]:
    """Return the non-seekable stream class."""
    return PipeStream


# =============================================================================
# File Fixtures
# =============================================================================


@pytest.fixture
def valid_csv(tmp_path: Path) -> Path:
    """Well-formed CSV with a quoted cell and a trailing empty cell."""
    path = tmp_path / "valid.csv"
    path.write_bytes(b'name,comment\r\nalice,"says ""hi"""\r\nbob,\r\n')
    return path


@pytest.fixture
def broken_quotes_csv(tmp_path: Path) -> Path:
    """CSV with an unclosed quote on the second line."""
    path = tmp_path / "broken_quotes.csv"
    path.write_bytes(b'a,b\n"open,c\n')
    return path


@pytest.fixture
def utf8_bom_csv(tmp_path: Path) -> Path:
    """UTF-8 CSV with BOM and non-ASCII content."""
    path = tmp_path / "bom.csv"
    path.write_bytes("Straße,München\n".encode("utf-8-sig"))
    return path
