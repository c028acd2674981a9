# ABOUTME: Integration tests for exporting compiled books as EPUB files.
# ABOUTME: Writes real EPUBs with ebooklib and reads them back to verify content.

from pathlib import Path

import pytest
from ebooklib import epub

from flipbook.compiler import Book, compile_book
from flipbook.formats.epub import EpubWriteError, build_epub, write_book_epub
from tests.fixtures.documents import MINIMAL_MANUSCRIPT


class TestEpubExport:
    """Integration tests writing and re-reading EPUB files."""

    def test_metadata_round_trip(self, sample_book: Book, tmp_path: Path) -> None:
        """Title and author survive a write and re-read."""
        path = write_book_epub(sample_book, tmp_path / "road.epub")

        result = epub.read_epub(str(path))
        assert result.get_metadata("DC", "title")[0][0] == "The Long Road"
        assert result.get_metadata("DC", "creator")[0][0] == "Jo Writer"
        assert result.get_metadata("DC", "language")[0][0] == "en"

    def test_one_document_per_page(self, sample_book: Book, tmp_path: Path) -> None:
        path = write_book_epub(sample_book, tmp_path / "road.epub")

        result = epub.read_epub(str(path))
        for page in sample_book.pages:
            item = result.get_item_with_href(f"page_{page.id:04d}.xhtml")
            assert item is not None
            assert f'id="page-{page.id}"'.encode() in item.get_content()

    def test_chapter_text_in_documents(self, sample_book: Book, tmp_path: Path) -> None:
        path = write_book_epub(sample_book, tmp_path / "road.epub")

        result = epub.read_epub(str(path))
        item = result.get_item_with_href("page_0003.xhtml")
        assert b"First Steps" in item.get_content()

    def test_language_option(self, tmp_path: Path) -> None:
        book = compile_book(MINIMAL_MANUSCRIPT)
        path = write_book_epub(book, tmp_path / "alpha.epub", language="fr")

        result = epub.read_epub(str(path))
        assert result.get_metadata("DC", "language")[0][0] == "fr"

    def test_creates_parent_directories(self, tmp_path: Path) -> None:
        book = compile_book(MINIMAL_MANUSCRIPT)
        path = write_book_epub(book, tmp_path / "out" / "nested" / "alpha.epub")
        assert path.is_file()

    def test_unwritable_destination_raises(self, tmp_path: Path) -> None:
        """A destination under a regular file cannot be written."""
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        book = compile_book(MINIMAL_MANUSCRIPT)

        with pytest.raises(EpubWriteError):
            write_book_epub(book, blocker / "alpha.epub")


class TestEpubNavigation:
    """The EPUB table of contents mirrors the chapter forest."""

    def test_nested_toc(self, sample_book: Book) -> None:
        ebook = build_epub(sample_book)

        first, second = ebook.toc
        section, children = first
        assert section.title == "Chapter One"
        assert section.href == "page_0002.xhtml"
        assert [link.title for link in children] == ["First Steps"]
        assert second.title == "Chapter Two"
        assert second.href == "page_0004.xhtml"

    def test_identifier_is_stable(self, sample_book: Book) -> None:
        assert build_epub(sample_book).uid == build_epub(sample_book).uid
