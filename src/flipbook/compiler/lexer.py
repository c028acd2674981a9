# ABOUTME: Line classifier for the structured-text body format.
# ABOUTME: Turns raw lines into Heading, PageBreak, or Text tokens that drive every later stage.

import re
from dataclasses import dataclass

PAGE_BREAK_MARKER = "---"
TOC_TITLE = "Table of Contents"

# Levels at which a heading opens a section and becomes a chapter.
SECTION_LEVELS = range(2, 7)

_HEADING_RE = re.compile(r"^(#{1,6})\s+(.+)$")
_ANCHOR_RE = re.compile(r"\{#([^}]+)\}")
_ANCHOR_STRIP_RE = re.compile(r"\s*\{#[^}]+\}")


@dataclass(frozen=True)
class Heading:
    """A `#`-prefixed heading line.

    `title` is the heading text with the first `{#id}` anchor removed and
    surrounding whitespace trimmed; `anchor` is that id, if present.
    """

    level: int
    title: str
    anchor: str | None = None

    @property
    def is_section_start(self) -> bool:
        """Whether this heading opens a new section (levels 2-6, not a ToC heading)."""
        return self.level in SECTION_LEVELS and not self.is_toc

    @property
    def is_toc(self) -> bool:
        return self.title == TOC_TITLE


@dataclass(frozen=True)
class PageBreak:
    """A standalone `---` line."""


@dataclass(frozen=True)
class Text:
    """Any other line, kept verbatim."""

    line: str


Token = Heading | PageBreak | Text


def parse_heading(line: str) -> Heading | None:
    """Parse a heading line, or return None if the line is not a heading."""
    match = _HEADING_RE.match(line)
    if match is None:
        return None
    text = match.group(2)
    anchor_match = _ANCHOR_RE.search(text)
    anchor = anchor_match.group(1) if anchor_match else None
    title = _ANCHOR_STRIP_RE.sub("", text, count=1).strip()
    if not title:
        return None
    return Heading(level=len(match.group(1)), title=title, anchor=anchor)


def classify_line(line: str) -> Token:
    """Classify a single line of body text."""
    if line.rstrip() == PAGE_BREAK_MARKER:
        return PageBreak()
    heading = parse_heading(line)
    if heading is not None:
        return heading
    return Text(line)


def tokenize(text: str) -> list[tuple[str, Token]]:
    """Split text into lines and pair each raw line with its token."""
    return [(line, classify_line(line)) for line in text.split("\n")]


def is_emphasis_line(line: str) -> bool:
    """Whether a line consists solely of emphasised text, like `*A Subtitle*`."""
    stripped = line.strip()
    return (
        len(stripped) >= 2
        and stripped.startswith("*")
        and stripped.endswith("*")
        and bool(stripped.strip("*").strip())
    )


def heading_titles(text: str) -> tuple[str, ...]:
    """Titles of every heading line in the text, in order."""
    return tuple(token.title for _, token in tokenize(text) if isinstance(token, Heading))
