# ABOUTME: EPUB export of a compiled Book using ebooklib.
# ABOUTME: One XHTML document per page, with navigation built from the chapter forest.

import hashlib
import logging
from pathlib import Path

from ebooklib import epub

from flipbook.compiler.types import Book, Chapter

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"


class EpubWriteError(Exception):
    """Raised when a Book cannot be written as an EPUB file."""


def _book_identifier(book: Book) -> str:
    """Stable identifier derived from title, author, and page count."""
    meta = book.metadata
    digest = hashlib.sha256(
        f"{meta.title}\x00{meta.author}\x00{book.total_pages}".encode()
    ).hexdigest()
    return f"flipbook-{digest[:16]}"


def _page_file_name(page_id: int) -> str:
    return f"page_{page_id:04d}.xhtml"


def _page_document(page_id: int, content: str) -> str:
    return (
        "<html><head></head><body>"
        f'<section id="page-{page_id}">{content}</section>'
        "</body></html>"
    )


def _toc_entries(book: Book, chapters: list[Chapter]) -> list:
    """Build ebooklib TOC entries for a list of sibling chapters, recursing into children."""
    entries: list = []
    for chapter in chapters:
        href = _page_file_name(chapter.page_number)
        children = book.children_of(chapter.id)
        if children:
            entries.append(
                (epub.Section(chapter.title, href), _toc_entries(book, children))
            )
        else:
            entries.append(epub.Link(href, chapter.title, f"chapter-{chapter.id}"))
    return entries


def build_epub(book: Book, *, language: str = DEFAULT_LANGUAGE) -> epub.EpubBook:
    """Assemble an in-memory EpubBook from a compiled Book."""
    meta = book.metadata
    ebook = epub.EpubBook()
    ebook.set_identifier(_book_identifier(book))
    ebook.set_title(meta.title)
    ebook.set_language(language)
    ebook.add_author(meta.author)
    if meta.subtitle:
        ebook.add_metadata("DC", "description", meta.subtitle)

    items = []
    for page in book.pages:
        item = epub.EpubHtml(
            title=page.chapter or f"Page {page.id}",
            file_name=_page_file_name(page.id),
            lang=language,
        )
        item.content = _page_document(page.id, page.content)
        ebook.add_item(item)
        items.append(item)

    ebook.toc = _toc_entries(book, book.root_chapters())
    ebook.add_item(epub.EpubNcx())
    ebook.add_item(epub.EpubNav())
    ebook.spine = ["nav", *items]
    return ebook


def write_book_epub(book: Book, path: Path, *, language: str = DEFAULT_LANGUAGE) -> Path:
    """Write a compiled Book to an EPUB file.

    Args:
        book: The compiled book.
        path: Destination file. Parent directories are created as needed.
        language: Language code recorded in the EPUB metadata.

    Returns:
        The path written.

    Raises:
        EpubWriteError: If the EPUB cannot be assembled or written.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        epub.write_epub(str(path), build_epub(book, language=language))
    except Exception as exc:
        raise EpubWriteError(f"Failed to write EPUB: {path}: {exc}") from exc
    logger.debug("Wrote %d pages to %s", book.total_pages, path)
    return path
