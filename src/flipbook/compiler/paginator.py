# ABOUTME: Greedy word-budget pagination of a section's paragraphs.
# ABOUTME: Paragraphs are never split; an oversized paragraph occupies a page alone.

import re

from flipbook.compiler.config import CompilerSettings
from flipbook.compiler.types import Section

_BLANK_LINE_RE = re.compile(r"\n[ \t]*\n")
_WHITESPACE_RE = re.compile(r"\s+")


def count_words(text: str) -> int:
    """Count whitespace-separated, non-empty tokens."""
    return len([word for word in _WHITESPACE_RE.split(text) if word])


def split_paragraphs(content: str) -> list[str]:
    """Split text on blank lines, dropping paragraphs that are only whitespace."""
    return [p.strip("\n") for p in _BLANK_LINE_RE.split(content) if p.strip()]


def paginate_section(section: Section, settings: CompilerSettings | None = None) -> list[str]:
    """Pack a section's paragraphs into pages under its word budget.

    Chapter-opening sections get the reduced opening budget, everything else
    gets the full per-page budget. A paragraph joins the current page when
    the running word count stays within budget or the page is still empty;
    otherwise the page is closed and the paragraph starts the next one.

    Args:
        section: The section to paginate.
        settings: Compiler settings; defaults apply when omitted.

    Returns:
        Raw page fragments (paragraphs joined by blank lines, trimmed). A
        section without paragraphs yields a single empty page.
    """
    settings = settings or CompilerSettings()
    max_words = settings.budget_for(section.is_chapter_start)

    pages: list[str] = []
    current: list[str] = []
    current_words = 0

    for paragraph in split_paragraphs(section.content):
        words = count_words(paragraph)
        if current and current_words + words > max_words:
            pages.append("\n\n".join(current).strip())
            current = []
            current_words = 0
        current.append(paragraph)
        current_words += words

    if current:
        pages.append("\n\n".join(current).strip())

    return pages or [""]
