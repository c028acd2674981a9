# ABOUTME: Compiler settings controlling pagination and the synthetic title page.
# ABOUTME: CompilerSettings is passed explicitly through the pipeline; there is no global state.

from dataclasses import dataclass

DEFAULT_WORDS_PER_PAGE = 280
DEFAULT_CHAPTER_OPENING_RATIO = 0.6
TITLE_PAGE_CHAPTER = "Title Page"


@dataclass(frozen=True)
class CompilerSettings:
    """Tunable knobs for a compilation run.

    Attributes:
        words_per_page: Base word budget for a page.
        chapter_opening_ratio: Fraction of the base budget allowed on pages of a
            section that opens a chapter.
        title_page_chapter: Chapter name given to the synthetic title page.
    """

    words_per_page: int = DEFAULT_WORDS_PER_PAGE
    chapter_opening_ratio: float = DEFAULT_CHAPTER_OPENING_RATIO
    title_page_chapter: str = TITLE_PAGE_CHAPTER

    def __post_init__(self) -> None:
        if self.words_per_page <= 0:
            raise ValueError(f"words_per_page must be positive, got {self.words_per_page}")
        if not 0 < self.chapter_opening_ratio <= 1:
            raise ValueError(
                f"chapter_opening_ratio must be in (0, 1], got {self.chapter_opening_ratio}"
            )

    @property
    def chapter_opening_budget(self) -> float:
        """Word budget for sections that start a chapter."""
        return self.words_per_page * self.chapter_opening_ratio

    def budget_for(self, is_chapter_start: bool) -> float:
        """Word budget for a section, depending on whether it opens a chapter."""
        return self.chapter_opening_budget if is_chapter_start else self.words_per_page
