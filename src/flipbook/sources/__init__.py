# ABOUTME: Document acquisition for Flipbook: local files and remote URLs.
# ABOUTME: Exports load_document and the errors it raises.

from flipbook.sources.http import DocumentFetchError, FlipbookHttpClient, HttpClient
from flipbook.sources.loader import DocumentLoadError, load_document

__all__ = [
    "DocumentFetchError",
    "DocumentLoadError",
    "FlipbookHttpClient",
    "HttpClient",
    "load_document",
]
