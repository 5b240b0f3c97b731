"""Load catalog source from a file or URL, with retries for HTTP sources."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Final

import httpx

from catalogtree.config import (
    CATALOGTREE_FETCH_BACKOFF_S,
    CATALOGTREE_FETCH_MAX_RETRIES,
    CATALOGTREE_FETCH_TIMEOUT_S,
    CATALOGTREE_USER_AGENT,
)
from catalogtree.exceptions import CatalogNotFoundError, FetchError
from catalogtree.parser import DiagnosticSink, parse_catalog
from catalogtree.schemas import CatalogNode
from catalogtree.utils.logging_config import get_logger

logger = get_logger(__name__)

RETRY_STATUS_CODES: Final[frozenset[int]] = frozenset({429, 500, 502, 503, 504})

_MAX_REDIRECTS: Final[int] = 5
_REQUEST_HEADERS: Final[dict[str, str]] = {"Cache-Control": "no-cache"}


class _TransientFetchError(FetchError):
    """A failure worth another attempt."""


async def _get_catalog(client: httpx.AsyncClient, url: str) -> str:
    """Make one GET request and classify its outcome."""
    try:
        response = await client.get(url, headers=_REQUEST_HEADERS)
    except httpx.RequestError as exc:
        raise _TransientFetchError(str(exc) or type(exc).__name__) from exc

    status = response.status_code
    if status == 404:
        raise CatalogNotFoundError(f"Catalog not found at {url}")
    if status in RETRY_STATUS_CODES:
        raise _TransientFetchError(f"HTTP {status}")
    if status >= 400:
        raise FetchError(f"HTTP {status} from {url}")
    return response.text


async def fetch_with_retries(url: str, *, client: httpx.AsyncClient | None = None) -> str:
    """Fetch catalog text from a URL, retrying transient failures.

    Connection errors, 429 and 5xx answers are retried with exponential
    backoff. Every request asks intermediaries not to serve a cached copy.

    Args:
        url: The URL to fetch.
        client: Optional httpx.AsyncClient for connection pooling. If not
            provided, a new client is created for this request.

    Raises:
        CatalogNotFoundError: If the server answers 404.
        FetchError: On any other client error, or when retries run out.
    """
    if client is None:
        async with httpx.AsyncClient(
            timeout=httpx.Timeout(CATALOGTREE_FETCH_TIMEOUT_S),
            headers={"User-Agent": CATALOGTREE_USER_AGENT},
            follow_redirects=True,
            max_redirects=_MAX_REDIRECTS,
        ) as new_client:
            return await fetch_with_retries(url, client=new_client)

    attempts = CATALOGTREE_FETCH_MAX_RETRIES + 1
    for attempt in range(attempts):
        try:
            return await _get_catalog(client, url)
        except _TransientFetchError as exc:
            if attempt + 1 == attempts:
                raise FetchError(f"Failed to fetch {url}: {exc}") from exc
            backoff = CATALOGTREE_FETCH_BACKOFF_S * (2**attempt)
            logger.debug("Retrying %s in %.2fs after %s", url, backoff, exc)
            await asyncio.sleep(backoff)
    raise FetchError(f"Failed to fetch {url}")


def is_url(location: str) -> bool:
    """Return True for ``http://`` and ``https://`` locations."""
    return location.lower().startswith(("http://", "https://"))


async def load_catalog_text(location: str | Path) -> str:
    """Read catalog source from a URL or a local UTF-8 file.

    Raises:
        CatalogNotFoundError: If the file or URL does not exist.
        FetchError: If the source cannot be read.
    """
    if isinstance(location, str) and is_url(location):
        return await fetch_with_retries(location)

    path = Path(location)
    try:
        return await asyncio.to_thread(path.read_text, encoding="utf-8")
    except FileNotFoundError as exc:
        raise CatalogNotFoundError(f"Catalog file not found: {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise FetchError(f"Failed to read {path}: {exc}") from exc


async def load_catalog(
    location: str | Path,
    *,
    diagnostics: DiagnosticSink | None = None,
) -> list[CatalogNode]:
    """Load catalog source from ``location`` and parse it."""
    text = await load_catalog_text(location)
    logger.info("Loaded catalog", extra={"location": str(location), "chars": len(text)})
    return parse_catalog(text, diagnostics=diagnostics)
