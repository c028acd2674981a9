# ABOUTME: Partitions the cleaned body into ordered sections at heading and page-break boundaries.
# ABOUTME: Section-opening headings stay in the section content so they render on its first page.

import logging

from flipbook.compiler.lexer import Heading, PageBreak, tokenize
from flipbook.compiler.types import Section

logger = logging.getLogger(__name__)


def split_sections(text: str) -> list[Section]:
    """Split cleaned text into sections.

    A level 2-6 heading (other than "Table of Contents") emits the section
    in progress and opens a chapter-start section titled with the heading
    text. A standalone `---` line emits the section in progress and opens a
    plain section. Sections whose content is blank are never emitted.

    Args:
        text: Cleaned document body.

    Returns:
        Sections in document order.
    """
    sections: list[Section] = []
    current = Section()

    def flush() -> None:
        if current.content.strip():
            sections.append(current)

    for line, token in tokenize(text):
        if isinstance(token, Heading) and token.is_section_start:
            flush()
            current = Section(content=line + "\n", is_chapter_start=True, title=token.title)
        elif isinstance(token, PageBreak):
            flush()
            current = Section()
        else:
            current.content += line + "\n"

    flush()
    logger.debug("Split document into %d sections", len(sections))
    return sections
