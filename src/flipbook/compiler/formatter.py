# ABOUTME: Converts a page's structured-text fragment into the markup the viewer renders verbatim.
# ABOUTME: Also renders the synthetic title page shown when the book has a cover image.

import html
import re

from flipbook.compiler.lexer import Heading, tokenize
from flipbook.compiler.paginator import split_paragraphs
from flipbook.compiler.types import BookMetadata

HEADING_CLASSES = {
    1: "text-lg sm:text-xl md:text-2xl font-bold mb-4 sm:mb-6 text-amber-900 break-words",
    2: "text-base sm:text-lg md:text-xl font-bold mb-3 sm:mb-4 text-amber-900 break-words",
    3: "text-sm sm:text-base md:text-lg font-semibold mb-2 sm:mb-3 text-amber-800 break-words",
    4: "text-sm sm:text-base font-semibold mb-2 sm:mb-3 text-amber-800 break-words",
    5: "text-xs sm:text-sm font-semibold mb-1 sm:mb-2 text-amber-700 break-words",
    6: "text-xs sm:text-sm font-semibold mb-1 sm:mb-2 text-amber-700 break-words",
}
PARAGRAPH_CLASS = "mb-2 sm:mb-3 md:mb-4 leading-relaxed break-words"
STRONG_CLASS = "font-semibold"
EM_CLASS = "italic"

_BOLD_RE = re.compile(r"\*\*(.*?)\*\*")
_ITALIC_RE = re.compile(r"\*(.*?)\*")
# A block that is already one rendered element (or a run of them) is left alone.
_FORMATTED_BLOCK_RE = re.compile(r"^<(h[1-6]|p|div)\b[^>]*>.*</\1>$", re.DOTALL)


def render_heading(heading: Heading) -> str:
    level = heading.level
    return f'<h{level} class="{HEADING_CLASSES[level]}">{heading.title}</h{level}>'


def render_emphasis(text: str) -> str:
    """Rewrite `**bold**` and `*italic*` into styled inline markup."""
    text = _BOLD_RE.sub(rf'<strong class="{STRONG_CLASS}">\1</strong>', text)
    return _ITALIC_RE.sub(rf'<em class="{EM_CLASS}">\1</em>', text)


def render_paragraph(text: str) -> str | None:
    """Wrap text in a styled paragraph, or return None if there is nothing to show."""
    text = text.strip()
    if not text:
        return None
    return f'<p class="{PARAGRAPH_CLASS}">{render_emphasis(text)}</p>'


def _format_block(block: str) -> list[str]:
    elements: list[str] = []
    lines: list[str] = []

    def flush() -> None:
        paragraph = render_paragraph("\n".join(lines))
        if paragraph is not None:
            elements.append(paragraph)
        lines.clear()

    for line, token in tokenize(block):
        if isinstance(token, Heading):
            flush()
            elements.append(render_heading(token))
        else:
            lines.append(line)
    flush()
    return elements


def format_content(fragment: str) -> str:
    """Render one page fragment as viewer markup.

    Heading lines become styled heading elements carrying the heading title
    exactly (anchors removed, no inline rewriting). Each blank-line separated
    block becomes its own paragraph, with heading lines inside a block
    splitting it. Empty paragraphs are dropped. Blocks that are already
    rendered elements pass through, so formatting twice changes nothing.

    Args:
        fragment: Raw page text produced by the paginator.

    Returns:
        Markup with one element per block, separated by blank lines.
    """
    elements: list[str] = []
    for block in split_paragraphs(fragment):
        if _FORMATTED_BLOCK_RE.match(block.strip()):
            elements.append(block.strip())
        else:
            elements.extend(_format_block(block))
    return "\n\n".join(elements)


def render_title_page(metadata: BookMetadata) -> str:
    """Render the centred title page: title, optional subtitle, divider, author."""
    parts = [
        '<div class="h-full flex flex-col justify-center items-center text-center space-y-8">',
        '<div class="space-y-6">',
        '<h1 class="text-2xl sm:text-3xl md:text-4xl lg:text-5xl font-bold text-amber-900 '
        f'leading-tight font-serif">{html.escape(metadata.title)}</h1>',
    ]
    if metadata.subtitle:
        parts.append(
            '<p class="text-base sm:text-lg md:text-xl lg:text-2xl font-light italic '
            f'text-amber-700 leading-relaxed">{html.escape(metadata.subtitle)}</p>'
        )
    parts.append('<div class="w-32 h-px bg-amber-600 mx-auto"></div>')
    parts.append(
        '<p class="text-lg sm:text-xl md:text-2xl font-light text-amber-800">'
        f"{html.escape(metadata.author)}</p>"
    )
    parts.append("</div>")
    parts.append("</div>")
    return "\n".join(parts)
