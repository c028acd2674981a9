# ABOUTME: The `flipbook inspect` command for viewing a document's book metadata.
# ABOUTME: Shows extracted metadata plus page and chapter counts for one document.

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from flipbook.cli.loading import load_book
from flipbook.cli.options import pagination_options, source_argument

console = Console()


@click.command()
@source_argument
@pagination_options
def inspect(source: str, words_per_page: int, chapter_ratio: float) -> None:
    """Show metadata and page counts for a document (path or URL)."""
    book = load_book(
        console, source, words_per_page=words_per_page, chapter_ratio=chapter_ratio
    )
    meta = book.metadata

    table = Table(title=escape(meta.title), show_header=False, pad_edge=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")

    table.add_row("Title", escape(meta.title))
    table.add_row("Subtitle", escape(meta.subtitle) if meta.subtitle else "[dim]none[/dim]")
    table.add_row("Author", escape(meta.author))
    table.add_row("Cover", escape(meta.cover_image) if meta.cover_image else "[dim]none[/dim]")
    if meta.purchase_info is not None:
        purchase = meta.purchase_info
        price = f" ({purchase.price})" if purchase.price else ""
        table.add_row("Purchase", escape(f"{purchase.text}{price}"))
        table.add_row("Link", escape(purchase.link))
    table.add_row("Pages", str(book.total_pages))
    table.add_row("Chapters", str(len(book.chapters)))

    console.print(table)
