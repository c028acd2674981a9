# ABOUTME: Shared pytest fixtures for Flipbook tests.
# ABOUTME: Provides sample manuscripts on disk and compiled books for CLI and export tests.

from pathlib import Path

import pytest

from flipbook.compiler import Book, compile_book
from tests.fixtures.documents import MINIMAL_MANUSCRIPT, SAMPLE_MANUSCRIPT


@pytest.fixture
def fixtures_dir() -> Path:
    """Path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_manuscript(tmp_path: Path) -> Path:
    """Write the full sample manuscript (header, ToC, chapters, page break) to disk."""
    filepath = tmp_path / "the_long_road.md"
    filepath.write_text(SAMPLE_MANUSCRIPT, encoding="utf-8")
    return filepath


@pytest.fixture
def minimal_manuscript(tmp_path: Path) -> Path:
    """Write a manuscript with a two-key header and a single chapter."""
    filepath = tmp_path / "alpha.md"
    filepath.write_text(MINIMAL_MANUSCRIPT, encoding="utf-8")
    return filepath


@pytest.fixture
def binary_file(tmp_path: Path) -> Path:
    """A file that is not valid UTF-8 text."""
    filepath = tmp_path / "garbage.md"
    filepath.write_bytes(b"\xff\xfe\x00\x81 not text")
    return filepath


@pytest.fixture
def sample_book() -> Book:
    """The sample manuscript, compiled with default settings."""
    return compile_book(SAMPLE_MANUSCRIPT)
