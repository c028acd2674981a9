# ABOUTME: Serializes a compiled Book into the JSON shape the viewer consumes.
# ABOUTME: Keys are camelCase to match the viewer's page and chapter records.

import json
from typing import Any

from flipbook.compiler.types import Book, BookMetadata, Chapter, Page


def _drop_none(record: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in record.items() if value is not None}


def metadata_to_dict(metadata: BookMetadata) -> dict[str, Any]:
    purchase = None
    if metadata.purchase_info is not None:
        purchase = _drop_none(
            {
                "link": metadata.purchase_info.link,
                "text": metadata.purchase_info.text,
                "price": metadata.purchase_info.price,
            }
        )
    return _drop_none(
        {
            "title": metadata.title,
            "subtitle": metadata.subtitle,
            "author": metadata.author,
            "coverImage": metadata.cover_image,
            "purchaseInfo": purchase,
        }
    )


def page_to_dict(page: Page) -> dict[str, Any]:
    return {
        "id": page.id,
        "content": page.content,
        "chapter": page.chapter,
        "isChapterStart": page.is_chapter_start,
    }


def chapter_to_dict(chapter: Chapter) -> dict[str, Any]:
    return _drop_none(
        {
            "id": chapter.id,
            "title": chapter.title,
            "pageNumber": chapter.page_number,
            "level": chapter.level,
            "parentId": chapter.parent_id,
        }
    )


def book_to_dict(book: Book) -> dict[str, Any]:
    """Flatten a Book into the viewer's record: metadata fields at the top level."""
    record = metadata_to_dict(book.metadata)
    record["pages"] = [page_to_dict(page) for page in book.pages]
    record["chapters"] = [chapter_to_dict(chapter) for chapter in book.chapters]
    record["totalPages"] = book.total_pages
    return record


def dump_book(book: Book, *, indent: int | None = 2) -> str:
    """Render a Book as a JSON document."""
    return json.dumps(book_to_dict(book), indent=indent, ensure_ascii=False)
