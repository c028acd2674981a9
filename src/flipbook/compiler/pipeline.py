# ABOUTME: The document-to-book compilation pipeline.
# ABOUTME: Runs extraction, cleaning, splitting, pagination, formatting, and chapter indexing.

import logging
from dataclasses import dataclass, field

from flipbook.compiler.cleaner import clean_document
from flipbook.compiler.config import CompilerSettings
from flipbook.compiler.formatter import format_content, render_title_page
from flipbook.compiler.indexer import index_chapters
from flipbook.compiler.lexer import heading_titles
from flipbook.compiler.metadata import extract_metadata
from flipbook.compiler.paginator import paginate_section
from flipbook.compiler.splitter import split_sections
from flipbook.compiler.types import Book, Page

logger = logging.getLogger(__name__)


class CompilationError(Exception):
    """Raised when a document cannot be compiled into a book."""


@dataclass
class PageBuilder:
    """Sequential page accumulator that hands out page ids in reading order."""

    pages: list[Page] = field(default_factory=list)

    @property
    def next_id(self) -> int:
        return len(self.pages) + 1

    def add(
        self,
        content: str,
        *,
        chapter: str = "",
        is_chapter_start: bool = False,
        headings: tuple[str, ...] = (),
    ) -> Page:
        page = Page(
            id=self.next_id,
            content=content,
            chapter=chapter,
            is_chapter_start=is_chapter_start,
            headings=headings,
        )
        self.pages.append(page)
        return page


def normalize_text(text: str | bytes) -> str:
    """Decode bytes as UTF-8, drop a byte-order mark, and normalise line endings."""
    if isinstance(text, bytes):
        text = text.decode("utf-8")
    if not isinstance(text, str):
        raise TypeError(f"Expected document text, got {type(text).__name__}")
    return text.removeprefix("\ufeff").replace("\r\n", "\n").replace("\r", "\n")


def _compile(text: str, settings: CompilerSettings) -> Book:
    metadata = extract_metadata(text)
    cleaned = clean_document(text)

    builder = PageBuilder()
    if metadata.has_cover:
        builder.add(
            render_title_page(metadata),
            chapter=settings.title_page_chapter,
            is_chapter_start=True,
        )

    current_chapter = ""
    for section in split_sections(cleaned):
        if section.is_chapter_start:
            current_chapter = section.title or ""
        fragments = paginate_section(section, settings)
        for index, fragment in enumerate(fragments):
            builder.add(
                format_content(fragment),
                chapter=current_chapter,
                is_chapter_start=section.is_chapter_start and index == 0,
                headings=heading_titles(fragment),
            )

    pages = tuple(builder.pages)
    chapters = tuple(index_chapters(cleaned, pages))
    logger.debug("Compiled %r: %d pages, %d chapters", metadata.title, len(pages), len(chapters))
    return Book(metadata=metadata, pages=pages, chapters=chapters)


def compile_book(text: str | bytes, settings: CompilerSettings | None = None) -> Book:
    """Compile a structured-text document into a paginated book.

    The transformation is pure and deterministic: the same text and settings
    always produce an equal Book. Recoverable oddities (malformed header,
    unresolvable heading pages, empty sections) are absorbed; anything else
    aborts the whole compilation.

    Args:
        text: The document, as text or UTF-8 bytes.
        settings: Compiler settings; defaults apply when omitted.

    Returns:
        The compiled Book.

    Raises:
        CompilationError: If compilation fails for any reason. No partial
            result is returned.
    """
    settings = settings or CompilerSettings()
    try:
        return _compile(normalize_text(text), settings)
    except Exception as exc:
        raise CompilationError(f"Failed to compile document: {exc}") from exc
