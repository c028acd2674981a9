# ABOUTME: The `flipbook page` command for viewing a single compiled page.
# ABOUTME: Prints the page's chapter and the markup the viewer would render.

import click
from rich.console import Console
from rich.markup import escape

from flipbook.cli.loading import load_book
from flipbook.cli.options import pagination_options, source_argument
from flipbook.compiler import PageOutOfRangeError

console = Console()


@click.command("page")
@source_argument
@click.argument("page_id", type=int)
@pagination_options
def page(source: str, page_id: int, words_per_page: int, chapter_ratio: float) -> None:
    """Show one page of a document by page number."""
    book = load_book(
        console, source, words_per_page=words_per_page, chapter_ratio=chapter_ratio
    )

    try:
        selected = book.get_page(page_id)
    except PageOutOfRangeError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(1) from exc

    chapter = escape(selected.chapter) if selected.chapter else "[dim]no chapter[/dim]"
    marker = " [green](chapter start)[/green]" if selected.is_chapter_start else ""
    console.print(f"[bold]Page {selected.id}/{book.total_pages}[/bold] - {chapter}{marker}")
    console.print(selected.content, markup=False, highlight=False)
