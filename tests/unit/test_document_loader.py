# ABOUTME: Unit tests for loading documents from paths and URLs.
# ABOUTME: Uses a fake HttpClient so no network access is needed.

from pathlib import Path

import pytest

from flipbook.sources.http import DocumentFetchError
from flipbook.sources.loader import DocumentLoadError, is_url, load_document


class FakeHttpClient:
    """In-memory HttpClient returning canned documents per URL."""

    def __init__(self, documents: dict[str, str]) -> None:
        self.documents = documents
        self.requested: list[str] = []

    def get_text(self, url: str) -> str:
        self.requested.append(url)
        if url not in self.documents:
            raise DocumentFetchError(f"HTTP 404 from {url}")
        return self.documents[url]


class TestIsUrl:
    """Tests for is_url."""

    @pytest.mark.parametrize("source", ["http://x/a.md", "https://x/a.md", "HTTPS://X/A.md"])
    def test_urls(self, source: str) -> None:
        assert is_url(source) is True

    @pytest.mark.parametrize("source", ["book.md", "/tmp/book.md", "ftp://x/a.md"])
    def test_paths(self, source: str) -> None:
        assert is_url(source) is False


class TestLoadDocument:
    """Tests for load_document."""

    def test_reads_local_file(self, minimal_manuscript: Path) -> None:
        assert load_document(str(minimal_manuscript)).startswith("---\ntitle: Alpha")

    def test_accepts_path_object(self, minimal_manuscript: Path) -> None:
        assert "## Intro" in load_document(minimal_manuscript)

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(DocumentLoadError, match="File not found"):
            load_document(str(tmp_path / "nope.md"))

    def test_directory_raises(self, tmp_path: Path) -> None:
        with pytest.raises(DocumentLoadError):
            load_document(str(tmp_path))

    def test_non_utf8_file_raises(self, binary_file: Path) -> None:
        with pytest.raises(DocumentLoadError, match="Failed to read"):
            load_document(str(binary_file))

    def test_fetches_url_with_client(self) -> None:
        client = FakeHttpClient({"https://example.com/book.md": "## Remote\n"})
        text = load_document("https://example.com/book.md", http_client=client)
        assert text == "## Remote\n"
        assert client.requested == ["https://example.com/book.md"]

    def test_fetch_failure_raises_load_error(self) -> None:
        client = FakeHttpClient({})
        with pytest.raises(DocumentLoadError, match="404"):
            load_document("https://example.com/missing.md", http_client=client)
