# ABOUTME: Loads a manuscript from a local file or an http(s) URL.
# ABOUTME: Keeps all I/O outside the pure compiler; errors surface as DocumentLoadError.

import logging
from pathlib import Path

from flipbook.sources.http import DocumentFetchError, FlipbookHttpClient, HttpClient

logger = logging.getLogger(__name__)

_URL_SCHEMES = ("http://", "https://")


class DocumentLoadError(Exception):
    """Raised when a document source cannot be read."""


def is_url(source: str) -> bool:
    """Whether a source string names a remote document."""
    return source.lower().startswith(_URL_SCHEMES)


def read_document_file(path: Path) -> str:
    """Read a local document as UTF-8 text.

    Raises:
        DocumentLoadError: If the file is missing, unreadable, or not UTF-8.
    """
    if not path.is_file():
        raise DocumentLoadError(f"File not found: {path}")
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentLoadError(f"Failed to read document: {path}: {exc}") from exc


def load_document(source: str | Path, *, http_client: HttpClient | None = None) -> str:
    """Load document text from a path or URL.

    Args:
        source: A filesystem path or an http(s) URL.
        http_client: Client used for URLs; a FlipbookHttpClient is created
            when omitted.

    Returns:
        The document text.

    Raises:
        DocumentLoadError: If the document cannot be read or fetched.
    """
    if isinstance(source, Path) or not is_url(source):
        return read_document_file(Path(source))

    logger.debug("Fetching document from %s", source)
    try:
        if http_client is not None:
            return http_client.get_text(source)
        with FlipbookHttpClient() as client:
            return client.get_text(source)
    except DocumentFetchError as exc:
        raise DocumentLoadError(str(exc)) from exc
