# ABOUTME: The `flipbook compile` command for producing the viewer's JSON book.
# ABOUTME: Writes the compiled book to stdout or to a file.

from pathlib import Path

import click
from rich.console import Console

from flipbook.cli.loading import load_book
from flipbook.cli.options import pagination_options, source_argument
from flipbook.formats.json_export import dump_book

console = Console(stderr=True)


@click.command("compile")
@source_argument
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write JSON to this file instead of stdout.",
)
@click.option("--compact", is_flag=True, default=False, help="Emit JSON without indentation.")
@pagination_options
def compile_document(
    source: str,
    output: Path | None,
    compact: bool,
    words_per_page: int,
    chapter_ratio: float,
) -> None:
    """Compile a document into the viewer's JSON book format."""
    book = load_book(
        console, source, words_per_page=words_per_page, chapter_ratio=chapter_ratio
    )
    payload = dump_book(book, indent=None if compact else 2)

    if output is None:
        click.echo(payload)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(payload + "\n", encoding="utf-8")
    console.print(f"[green]Wrote[/green] {book.total_pages} pages to {output}")
