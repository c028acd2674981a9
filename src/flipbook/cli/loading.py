# ABOUTME: Loads and compiles a document for CLI commands.
# ABOUTME: Reports load and compile failures on the console and exits with status 1.

from rich.console import Console

from flipbook.compiler import Book, CompilationError, CompilerSettings, compile_book
from flipbook.sources.loader import DocumentLoadError, load_document


def load_book(
    console: Console,
    source: str,
    *,
    words_per_page: int,
    chapter_ratio: float,
) -> Book:
    """Load a document from a path or URL and compile it, or exit on failure."""
    try:
        text = load_document(source)
    except DocumentLoadError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(1) from exc

    settings = CompilerSettings(
        words_per_page=words_per_page, chapter_opening_ratio=chapter_ratio
    )
    try:
        return compile_book(text, settings)
    except CompilationError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(1) from exc
