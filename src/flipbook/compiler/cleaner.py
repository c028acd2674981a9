# ABOUTME: Strips the header block and redundant leading elements from a raw document.
# ABOUTME: Output is plain structured text ready for section splitting and chapter indexing.

import re

from flipbook.compiler.lexer import Heading, PageBreak, classify_line, is_emphasis_line, tokenize
from flipbook.compiler.metadata import split_header

_INLINE_IMAGE_RE = re.compile(r"!\[.*?\]\([^)]+\)\n?")
_IMAGE_TAG_RE = re.compile(r"<img[^>]*>\n?")


def _remove_first_image(body: str) -> str:
    """Drop the image the cover was taken from: first inline image, else first image tag."""
    if _INLINE_IMAGE_RE.search(body):
        return _INLINE_IMAGE_RE.sub("", body, count=1)
    return _IMAGE_TAG_RE.sub("", body, count=1)


def _remove_toc_sections(body: str) -> str:
    """Drop every "Table of Contents" heading and the lines up to the next heading or `---`."""
    kept: list[str] = []
    in_toc = False
    for line, token in tokenize(body):
        if isinstance(token, Heading) and token.is_toc:
            in_toc = True
            continue
        if in_toc and isinstance(token, (Heading, PageBreak)):
            in_toc = False
        if not in_toc:
            kept.append(line)
    return "\n".join(kept)


def _remove_leading_title(body: str) -> str:
    """Drop the first top-level heading and emphasis-only line before the first section heading."""
    kept: list[str] = []
    title_seen = False
    subtitle_seen = False
    in_preamble = True
    for line, token in tokenize(body):
        if isinstance(token, Heading) and token.is_section_start:
            in_preamble = False
        if in_preamble:
            if not title_seen and isinstance(token, Heading) and token.level == 1:
                title_seen = True
                continue
            if not subtitle_seen and is_emphasis_line(line):
                subtitle_seen = True
                continue
        kept.append(line)
    return "\n".join(kept)


def _drop_leading_breaks(body: str) -> str:
    """Drop blank and `---` lines at the start, which would read as a header next time."""
    lines = body.split("\n")
    start = 0
    while start < len(lines) - 1 and (
        not lines[start].strip() or isinstance(classify_line(lines[start]), PageBreak)
    ):
        start += 1
    return "\n".join(lines[start:])


def clean_document(text: str) -> str:
    """Remove metadata-bearing and redundant elements from a raw document.

    Removes, in order: the header block, the first image (consumed by the
    cover), every table-of-contents section, and the duplicate title and
    subtitle lines in the preamble before the first section heading. Blank and
    `---` lines left at the start are dropped as well, so the result never
    opens with something that would read as a header block.

    Args:
        text: The raw document text.

    Returns:
        The cleaned body text.
    """
    _, body = split_header(text)
    body = _remove_first_image(body)
    body = _remove_toc_sections(body)
    body = _remove_leading_title(body)
    return _drop_leading_breaks(body)
