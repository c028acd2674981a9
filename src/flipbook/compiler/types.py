# ABOUTME: Core data structures produced by the document-to-book compiler.
# ABOUTME: BookMetadata, Page, Chapter, and the read-only Book aggregate handed to viewers.

from dataclasses import dataclass

DEFAULT_TITLE = "Untitled Book"
DEFAULT_AUTHOR = "Unknown Author"


class PageOutOfRangeError(LookupError):
    """Raised when a page is requested outside the range [1, total_pages]."""


@dataclass(frozen=True)
class PurchaseInfo:
    """Call-to-action block shown to the reader (usually at the end of the book)."""

    link: str
    text: str
    price: str | None = None


@dataclass(frozen=True)
class BookMetadata:
    """Metadata pulled from the document header block and body fallbacks.

    Produced once by the metadata extractor and never mutated afterwards.
    Title and author always carry a value so viewers have something to show.
    """

    title: str = DEFAULT_TITLE
    subtitle: str | None = None
    author: str = DEFAULT_AUTHOR
    cover_image: str | None = None
    purchase_info: PurchaseInfo | None = None

    @property
    def has_cover(self) -> bool:
        """Whether a cover image reference was resolved."""
        return bool(self.cover_image)


@dataclass
class Section:
    """A contiguous run of body text between heading/page-break boundaries."""

    content: str = ""
    is_chapter_start: bool = False
    title: str | None = None


@dataclass(frozen=True)
class Page:
    """One physical page of the book.

    `headings` holds the plain titles of the headings rendered on this page,
    in order, so the chapter indexer can resolve page numbers without
    parsing markup back out of `content`.
    """

    id: int
    content: str
    chapter: str = ""
    is_chapter_start: bool = False
    headings: tuple[str, ...] = ()


@dataclass(frozen=True)
class Chapter:
    """An outline entry derived from a level 2-6 heading."""

    id: str
    title: str
    page_number: int
    level: int
    parent_id: str | None = None


@dataclass(frozen=True)
class Book:
    """The compiled book: metadata, pages in reading order, and the chapter forest."""

    metadata: BookMetadata
    pages: tuple[Page, ...] = ()
    chapters: tuple[Chapter, ...] = ()

    @property
    def total_pages(self) -> int:
        return len(self.pages)

    def get_page(self, page_id: int) -> Page:
        """Look up a page by id.

        Raises:
            PageOutOfRangeError: If page_id is outside [1, total_pages].
        """
        if not 1 <= page_id <= self.total_pages:
            raise PageOutOfRangeError(
                f"Page {page_id} out of range (book has {self.total_pages} pages)"
            )
        return self.pages[page_id - 1]

    def clamp_page(self, page_number: int) -> int:
        """Clamp a requested page number into the valid range."""
        return max(1, min(page_number, self.total_pages))

    def chapter_at(self, page_number: int) -> Chapter | None:
        """Return the chapter being read on the given page, if any.

        A chapter is current from its own page up to (not including) the page
        of the next chapter in outline order.
        """
        for index, chapter in enumerate(self.chapters):
            following = self.chapters[index + 1] if index + 1 < len(self.chapters) else None
            if page_number >= chapter.page_number and (
                following is None or page_number < following.page_number
            ):
                return chapter
        return None

    def root_chapters(self) -> list[Chapter]:
        """Chapters with no parent, in document order."""
        return [c for c in self.chapters if c.parent_id is None]

    def children_of(self, chapter_id: str) -> list[Chapter]:
        """Direct children of a chapter, in document order."""
        return [c for c in self.chapters if c.parent_id == chapter_id]
