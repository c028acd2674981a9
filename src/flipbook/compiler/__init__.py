# ABOUTME: Document-to-book compiler package.
# ABOUTME: Exports compile_book and the Book data structures consumed by viewers and exporters.

from flipbook.compiler.config import CompilerSettings
from flipbook.compiler.pipeline import CompilationError, compile_book
from flipbook.compiler.types import (
    Book,
    BookMetadata,
    Chapter,
    Page,
    PageOutOfRangeError,
    PurchaseInfo,
)

__all__ = [
    "Book",
    "BookMetadata",
    "Chapter",
    "CompilationError",
    "CompilerSettings",
    "Page",
    "PageOutOfRangeError",
    "PurchaseInfo",
    "compile_book",
]
