# ABOUTME: Metadata extraction from the document header block with body fallbacks.
# ABOUTME: Never raises on malformed headers; missing values fall back to documented defaults.

import logging
import re

from flipbook.compiler.lexer import PAGE_BREAK_MARKER, is_emphasis_line, parse_heading
from flipbook.compiler.types import DEFAULT_AUTHOR, DEFAULT_TITLE, BookMetadata, PurchaseInfo

logger = logging.getLogger(__name__)

HEADER_KEYS = frozenset(
    {"title", "subtitle", "author", "cover_image", "purchase_link", "purchase_text", "price"}
)

_INLINE_IMAGE_RE = re.compile(r"!\[.*?\]\((.*?)\)")
_IMAGE_TAG_RE = re.compile(r"""<img[^>]+src=['"](.*?)['"][^>]*>""")
_HEADER_LINE_RE = re.compile(r"^([A-Za-z_]+)\s*:(.*)$")


def split_header(text: str) -> tuple[str | None, str]:
    """Split a document into its header block and body.

    The header block starts with a `---` line at the very start of the
    document and ends at the next `---` line. Without a closing delimiter
    there is no header and the whole text is body.

    Returns:
        (header, body) where header is the text between the delimiters, or
        None if the document has no header block.
    """
    lines = text.split("\n")
    if not lines or lines[0].rstrip() != PAGE_BREAK_MARKER:
        return None, text
    for index in range(1, len(lines)):
        if lines[index].rstrip() == PAGE_BREAK_MARKER:
            header = "\n".join(lines[1:index])
            body = "\n".join(lines[index + 1 :])
            return header, body
    return None, text


def _clean_value(raw: str) -> str:
    """Trim a header value and remove one pair of matching surrounding quotes."""
    value = raw.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "'\"":
        value = value[1:-1].strip()
    return value


def parse_header(header: str) -> dict[str, str]:
    """Parse `key: value` lines into a dict of recognised keys.

    Unknown keys, lines without a colon, and empty values are skipped. The
    first occurrence of a key wins.
    """
    values: dict[str, str] = {}
    for line in header.split("\n"):
        match = _HEADER_LINE_RE.match(line.strip())
        if match is None:
            continue
        key = match.group(1).lower()
        value = _clean_value(match.group(2))
        if key in HEADER_KEYS and value and key not in values:
            values[key] = value
    return values


def find_cover_image(body: str) -> str | None:
    """Find the first inline image, else the first image tag, in the body."""
    match = _INLINE_IMAGE_RE.search(body)
    if match and match.group(1):
        return match.group(1)
    match = _IMAGE_TAG_RE.search(body)
    if match and match.group(1):
        return match.group(1)
    return None


def _first_title_heading(body: str) -> str | None:
    for line in body.split("\n"):
        heading = parse_heading(line)
        if heading is not None and heading.level == 1:
            return heading.title
    return None


def _first_emphasis_line(body: str) -> str | None:
    for line in body.split("\n"):
        if is_emphasis_line(line):
            return line.replace("*", "").strip()
    return None


def extract_metadata(text: str) -> BookMetadata:
    """Extract book metadata from a raw document.

    Header values take precedence. The title falls back to the first
    top-level heading in the body; the subtitle falls back to the first
    emphasis-only line, but only when the header supplied neither title nor
    subtitle. The cover image falls back to the first image in the body.

    Args:
        text: The raw document text.

    Returns:
        BookMetadata with defaults applied for anything missing.
    """
    header, body = split_header(text)
    values = parse_header(header) if header is not None else {}
    if header is not None and not values:
        logger.debug("Header block present but no recognised keys found")

    title = values.get("title")
    subtitle = values.get("subtitle")
    if subtitle is None and title is None:
        subtitle = _first_emphasis_line(body)
    if title is None:
        title = _first_title_heading(body) or DEFAULT_TITLE

    purchase_info = None
    if "purchase_link" in values and "purchase_text" in values:
        purchase_info = PurchaseInfo(
            link=values["purchase_link"],
            text=values["purchase_text"],
            price=values.get("price"),
        )

    return BookMetadata(
        title=title,
        subtitle=subtitle,
        author=values.get("author", DEFAULT_AUTHOR),
        cover_image=values.get("cover_image") or find_cover_image(body),
        purchase_info=purchase_info,
    )
