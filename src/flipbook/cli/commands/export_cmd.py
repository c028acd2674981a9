# ABOUTME: The `flipbook export` command for writing a compiled book as EPUB.
# ABOUTME: Compiles a document and hands the result to the EPUB writer.

from pathlib import Path

import click
from rich.console import Console

from flipbook.cli.loading import load_book
from flipbook.cli.options import pagination_options, source_argument
from flipbook.formats.epub import DEFAULT_LANGUAGE, EpubWriteError, write_book_epub

console = Console()


@click.command("export")
@source_argument
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    required=True,
    help="Destination .epub file.",
)
@click.option(
    "--language",
    default=DEFAULT_LANGUAGE,
    show_default=True,
    help="Language code recorded in the EPUB.",
)
@pagination_options
def export(
    source: str,
    output: Path,
    language: str,
    words_per_page: int,
    chapter_ratio: float,
) -> None:
    """Export a document as an EPUB book."""
    book = load_book(
        console, source, words_per_page=words_per_page, chapter_ratio=chapter_ratio
    )

    try:
        write_book_epub(book, output, language=language)
    except EpubWriteError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(1) from exc

    console.print(
        f"[green]Exported[/green] {book.total_pages} pages, "
        f"{len(book.chapters)} chapters to {output}"
    )
