# ABOUTME: Builds the chapter outline: stable ids, heading levels, resolved pages, and parents.
# ABOUTME: Re-scans the cleaned text for headings and resolves each against the compiled pages.

import logging
import re
from collections.abc import Iterable

from flipbook.compiler.lexer import Heading, tokenize
from flipbook.compiler.types import Chapter, Page

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
FALLBACK_SLUG = "section"

_WHITESPACE_RE = re.compile(r"\s+")
_NON_SLUG_RE = re.compile(r"[^a-z0-9-]")


def slugify(title: str) -> str:
    """Lowercase, turn whitespace runs into hyphens, drop anything else non-alphanumeric."""
    slug = _NON_SLUG_RE.sub("", _WHITESPACE_RE.sub("-", title.lower()))
    return slug or FALLBACK_SLUG


def build_heading_map(pages: Iterable[Page]) -> dict[str, int]:
    """Map each heading title to the first page it is rendered on."""
    heading_map: dict[str, int] = {}
    for page in pages:
        for title in page.headings:
            heading_map.setdefault(title, page.id)
    return heading_map


def resolve_page(title: str, heading_map: dict[str, int]) -> int:
    """Find the page a heading lives on.

    Exact title lookup first. Failing that, a heuristic: the first mapped
    title (in page order) that contains, or is contained in, the title.
    Failing both, page 1.
    """
    if title in heading_map:
        return heading_map[title]
    for mapped_title, page_id in heading_map.items():
        if title in mapped_title or mapped_title in title:
            logger.debug("Resolved %r to page %d via partial match %r", title, page_id, mapped_title)
            return page_id
    logger.debug("No page found for heading %r, defaulting to page %d", title, DEFAULT_PAGE)
    return DEFAULT_PAGE


def _unique_id(candidate: str, seen: dict[str, int]) -> str:
    count = seen.get(candidate, 0) + 1
    seen[candidate] = count
    if count == 1:
        return candidate
    unique = f"{candidate}-{count}"
    while unique in seen:
        count += 1
        unique = f"{candidate}-{count}"
    seen[candidate] = count
    seen[unique] = 1
    return unique


def index_chapters(cleaned_text: str, pages: Iterable[Page]) -> list[Chapter]:
    """Derive the chapter forest from the cleaned document.

    Every level 2-6 heading (except "Table of Contents") becomes a chapter.
    Its id is the explicit `{#id}` anchor or a slug of the title, made unique
    with a numeric suffix when repeated. Parents come from an ancestor stack:
    entries at the same or a deeper level are popped before the new chapter
    takes the remaining top as its parent.

    Args:
        cleaned_text: Output of the document cleaner.
        pages: The compiled pages, used for page number resolution.

    Returns:
        Chapters in document order.
    """
    heading_map = build_heading_map(pages)
    chapters: list[Chapter] = []
    ancestors: list[Chapter] = []
    seen_ids: dict[str, int] = {}

    for _, token in tokenize(cleaned_text):
        if not isinstance(token, Heading) or not token.is_section_start:
            continue

        while ancestors and ancestors[-1].level >= token.level:
            ancestors.pop()

        chapter = Chapter(
            id=_unique_id(token.anchor or slugify(token.title), seen_ids),
            title=token.title,
            page_number=resolve_page(token.title, heading_map),
            level=token.level,
            parent_id=ancestors[-1].id if ancestors else None,
        )
        chapters.append(chapter)
        ancestors.append(chapter)

    return chapters
