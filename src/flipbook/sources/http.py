# ABOUTME: HTTP client for fetching manuscript documents from remote URLs.
# ABOUTME: Retries transient failures with backoff and accepts an injectable transport for tests.

import logging
import time
from typing import Any, Protocol, runtime_checkable

import httpx

logger = logging.getLogger(__name__)

USER_AGENT = "flipbook/0.1.0"
_RETRYABLE_STATUS_CODES = frozenset({429, 500, 502, 503, 504})


class DocumentFetchError(Exception):
    """Raised when an HTTP request for a document fails."""


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for fetching a text document over HTTP."""

    def get_text(self, url: str) -> str: ...


def _decode(response: httpx.Response) -> str:
    """Response body as text, assuming UTF-8 when the server names no charset."""
    if response.charset_encoding is None:
        response.encoding = "utf-8"
    return response.text


class FlipbookHttpClient:
    """Document downloader over httpx.Client.

    Follows redirects and retries 429 and 5xx responses, doubling the wait
    after each attempt. Usable as a context manager so the connection pool
    is closed when the download is done.
    """

    def __init__(
        self,
        *,
        max_retries: int = 3,
        retry_delay: float = 1.0,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        client_kwargs: dict[str, Any] = {
            "headers": {"User-Agent": USER_AGENT},
            "timeout": timeout,
            "follow_redirects": True,
        }
        if transport is not None:
            client_kwargs["transport"] = transport
        self._client = httpx.Client(**client_kwargs)
        self._max_retries = max_retries
        self._retry_delay = retry_delay

    def __enter__(self) -> "FlipbookHttpClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def get_text(self, url: str) -> str:
        """Download a document and return its body decoded as text.

        Raises:
            DocumentFetchError: On transport errors, non-retryable statuses,
                or when every retry came back with a retryable status.
        """
        response = self._request(url)
        for retry in range(1, self._max_retries + 1):
            if response.status_code not in _RETRYABLE_STATUS_CODES:
                break
            delay = self._retry_delay * 2 ** (retry - 1)
            logger.warning(
                "HTTP %d from %s, retry %d/%d in %.1fs",
                response.status_code,
                url,
                retry,
                self._max_retries,
                delay,
            )
            time.sleep(delay)
            response = self._request(url)

        if response.status_code == 200:
            return _decode(response)
        if response.status_code in _RETRYABLE_STATUS_CODES:
            raise DocumentFetchError(
                f"HTTP {response.status_code} from {url} after {self._max_retries} retries"
            )
        raise DocumentFetchError(f"HTTP {response.status_code} from {url}")

    def close(self) -> None:
        self._client.close()

    def _request(self, url: str) -> httpx.Response:
        try:
            return self._client.get(url)
        except httpx.HTTPError as exc:
            raise DocumentFetchError(f"Request failed: {url}: {exc}") from exc
