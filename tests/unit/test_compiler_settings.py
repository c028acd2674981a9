# ABOUTME: Unit tests for CompilerSettings.
# ABOUTME: Validates defaults, budget derivation, and rejection of invalid values.

import pytest

from flipbook.compiler.config import CompilerSettings


class TestCompilerSettings:
    """Tests for CompilerSettings."""

    def test_defaults(self) -> None:
        settings = CompilerSettings()
        assert settings.words_per_page == 280
        assert settings.chapter_opening_ratio == 0.6
        assert settings.title_page_chapter == "Title Page"

    def test_chapter_opening_budget(self) -> None:
        assert CompilerSettings().chapter_opening_budget == pytest.approx(168)

    def test_budget_for(self) -> None:
        settings = CompilerSettings(words_per_page=100, chapter_opening_ratio=0.5)
        assert settings.budget_for(is_chapter_start=True) == 50
        assert settings.budget_for(is_chapter_start=False) == 100

    @pytest.mark.parametrize("words", [0, -10])
    def test_non_positive_budget_rejected(self, words: int) -> None:
        with pytest.raises(ValueError, match="words_per_page"):
            CompilerSettings(words_per_page=words)

    @pytest.mark.parametrize("ratio", [0.0, -0.5, 1.5])
    def test_ratio_out_of_range_rejected(self, ratio: float) -> None:
        with pytest.raises(ValueError, match="chapter_opening_ratio"):
            CompilerSettings(chapter_opening_ratio=ratio)

    def test_full_ratio_allowed(self) -> None:
        assert CompilerSettings(chapter_opening_ratio=1.0).chapter_opening_budget == 280
