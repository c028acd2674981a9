# ABOUTME: The `flipbook toc` command for printing a document's chapter outline.
# ABOUTME: Renders the chapter forest as a Rich tree with resolved page numbers.

import click
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from flipbook.cli.loading import load_book
from flipbook.cli.options import pagination_options, source_argument
from flipbook.compiler import Book, Chapter

console = Console()


def _add_chapters(node: Tree, book: Book, chapters: list[Chapter]) -> None:
    for chapter in chapters:
        branch = node.add(f"{escape(chapter.title)} [dim]p. {chapter.page_number}[/dim]")
        _add_chapters(branch, book, book.children_of(chapter.id))


@click.command("toc")
@source_argument
@pagination_options
def toc(source: str, words_per_page: int, chapter_ratio: float) -> None:
    """Show the table of contents of a document."""
    book = load_book(
        console, source, words_per_page=words_per_page, chapter_ratio=chapter_ratio
    )

    if not book.chapters:
        console.print("[yellow]No chapters found.[/yellow]")
        return

    tree = Tree(f"[bold]{escape(book.metadata.title)}[/bold]")
    _add_chapters(tree, book, book.root_chapters())
    console.print(tree)
