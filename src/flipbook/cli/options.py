# ABOUTME: Shared Click arguments and options for Flipbook CLI commands.
# ABOUTME: Provides the document source argument and the pagination tuning flags.

import click

from flipbook.compiler.config import DEFAULT_CHAPTER_OPENING_RATIO, DEFAULT_WORDS_PER_PAGE

source_argument = click.argument("source", metavar="SOURCE")

words_per_page_option = click.option(
    "--words-per-page",
    type=click.IntRange(min=1),
    default=DEFAULT_WORDS_PER_PAGE,
    show_default=True,
    envvar="FLIPBOOK_WORDS_PER_PAGE",
    help="Base word budget per page.",
)

chapter_ratio_option = click.option(
    "--chapter-ratio",
    type=click.FloatRange(min=0.0, max=1.0, min_open=True),
    default=DEFAULT_CHAPTER_OPENING_RATIO,
    show_default=True,
    envvar="FLIPBOOK_CHAPTER_RATIO",
    help="Fraction of the budget used on a chapter's opening pages.",
)


def pagination_options(func):
    """Attach --words-per-page and --chapter-ratio to a command."""
    return words_per_page_option(chapter_ratio_option(func))
