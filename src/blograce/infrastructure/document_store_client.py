"""HTTP client for the document store content endpoints."""

import logging
from typing import Any

import aiohttp
from aiohttp import ClientTimeout

from blograce.config import get_settings

logger = logging.getLogger(__name__)
settings = get_settings()

SAVE_CONTENT_PATH = "/api/save-content"
DELETE_CONTENT_PATH = "/api/delete-content"


class DocumentStoreError(Exception):
    """Raised when a document store call fails or returns a non-2xx status."""

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class DocumentStoreClient:
    """Async client for the document store.

    Calls are made once: there is no retry, and no timeout unless one is
    configured.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout_seconds: float | None = None,
        api_key: str | None = None,
    ) -> None:
        """Initialize document store client.

        Args:
            base_url: Document store base URL (defaults to config)
            timeout_seconds: Total request timeout, None for no timeout
            api_key: Value sent as X-API-Key (defaults to config)
        """
        self.base_url = (base_url or settings.document_store_url).rstrip("/")
        if timeout_seconds is None:
            timeout_seconds = settings.document_store_timeout_seconds
        self.timeout = ClientTimeout(total=timeout_seconds)
        self.api_key = api_key if api_key is not None else settings.api_key
        self._session: aiohttp.ClientSession | None = None

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._session is None or self._session.closed:
            headers = {"X-API-Key": self.api_key} if self.api_key else None
            self._session = aiohttp.ClientSession(timeout=self.timeout, headers=headers)
        return self._session

    async def close(self) -> None:
        """Close the aiohttp session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def _send(self, method: str, path: str, payload: dict[str, Any]) -> int:
        """Send a JSON request and return the status, raising on failure."""
        url = f"{self.base_url}{path}"
        session = await self._get_session()

        try:
            async with session.request(method, url, json=payload) as response:
                status = response.status
        except TimeoutError as e:
            raise DocumentStoreError(f"Timeout on {method} {url}") from e
        except aiohttp.ClientError as e:
            raise DocumentStoreError(f"{method} {url} failed: {e}") from e

        if not 200 <= status < 300:
            raise DocumentStoreError(f"HTTP {status} for {method} {url}", status=status)
        return status

    async def save_content(self, url: str, content: str) -> None:
        """Mirror a summary into the document store."""
        await self._send("POST", SAVE_CONTENT_PATH, {"url": url, "content": content})
        logger.info(f"Saved content for {url} to document store")

    async def delete_content(self, url: str) -> None:
        """Delete every document stored for a URL."""
        await self._send("DELETE", DELETE_CONTENT_PATH, {"url": url})
        logger.info(f"Deleted content for {url} from document store")


# Shared client instance, closed on application shutdown
_document_store: DocumentStoreClient | None = None


def get_document_store() -> DocumentStoreClient:
    """Get or create the shared document store client."""
    global _document_store
    if _document_store is None:
        _document_store = DocumentStoreClient()
    return _document_store
