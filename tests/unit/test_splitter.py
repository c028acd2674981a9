# ABOUTME: Unit tests for the section splitter.
# ABOUTME: Validates heading and page-break boundaries, titles, and empty-section handling.

from flipbook.compiler.splitter import split_sections
from flipbook.compiler.types import Section


class TestSplitSections:
    """Tests for split_sections."""

    def test_heading_starts_chapter_section(self) -> None:
        """A level 2 heading opens a chapter-start section containing the heading line."""
        sections = split_sections("## Intro\nHello world.\n")
        assert sections == [
            Section(content="## Intro\nHello world.\n\n", is_chapter_start=True, title="Intro")
        ]

    def test_preamble_before_first_heading(self) -> None:
        """Text before the first heading is its own non-chapter section."""
        sections = split_sections("Foreword text.\n## One\nBody\n")
        assert len(sections) == 2
        assert sections[0].is_chapter_start is False
        assert sections[0].title is None
        assert sections[0].content.strip() == "Foreword text."
        assert sections[1].title == "One"

    def test_blank_preamble_not_emitted(self) -> None:
        sections = split_sections("\n\n\n## One\nBody\n")
        assert [s.title for s in sections] == ["One"]

    def test_anchor_removed_from_title(self) -> None:
        sections = split_sections("## Getting Started {#start}\nBody\n")
        assert sections[0].title == "Getting Started"
        assert sections[0].content.startswith("## Getting Started {#start}\n")

    def test_every_level_two_to_six_splits(self) -> None:
        text = "## A\na\n### B\nb\n#### C\nc\n##### D\nd\n###### E\ne\n"
        assert [s.title for s in split_sections(text)] == ["A", "B", "C", "D", "E"]

    def test_level_one_heading_does_not_split(self) -> None:
        sections = split_sections("## A\na\n# Big\nmore\n")
        assert len(sections) == 1
        assert "# Big" in sections[0].content

    def test_table_of_contents_heading_does_not_split(self) -> None:
        sections = split_sections("## A\na\n## Table of Contents\nb\n")
        assert len(sections) == 1

    def test_page_break_starts_plain_section(self) -> None:
        """'---' closes the current section; what follows is not a chapter start."""
        sections = split_sections("## A\nfirst\n---\nsecond\n")
        assert len(sections) == 2
        assert sections[0].is_chapter_start is True
        assert "---" not in sections[0].content
        assert sections[1].is_chapter_start is False
        assert sections[1].content.strip() == "second"

    def test_consecutive_page_breaks_do_not_emit_empty_sections(self) -> None:
        sections = split_sections("one\n---\n---\n\n---\ntwo\n")
        assert [s.content.strip() for s in sections] == ["one", "two"]

    def test_blank_lines_inside_section_preserved(self) -> None:
        sections = split_sections("## A\n\npara one\n\npara two\n")
        assert "para one\n\npara two" in sections[0].content

    def test_order_preserved(self) -> None:
        text = "## Z\nz\n## A\na\n## M\nm\n"
        assert [s.title for s in split_sections(text)] == ["Z", "A", "M"]

    def test_empty_text(self) -> None:
        assert split_sections("") == []
