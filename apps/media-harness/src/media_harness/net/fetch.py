"""
HTTP fetch for test fixtures.

GETs a resource and returns its body. Anything other than a 2xx response
with a body is an error carrying the status code.
"""

from __future__ import annotations

import logging

import httpx

from media_harness.config import HarnessConfig

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """Raised when a fetch fails.

    Attributes:
        status_code: HTTP status, or None for transport failures.
    """

    def __init__(self, status_code: int | None, message: str) -> None:
        self.status_code = status_code
        super().__init__(message)


async def fetch(
    uri: str,
    client: httpx.AsyncClient | None = None,
    config: HarnessConfig | None = None,
) -> bytes:
    """Fetch the resource at ``uri``.

    Args:
        uri: Absolute URI to GET.
        client: Client to use; one is created (and closed) when omitted.
        config: Harness configuration for the request timeout.

    Returns:
        Response body.

    Raises:
        FetchError: On a non-2xx status, an empty body or a transport error
    """
    owns_client = client is None
    if client is None:
        config = config or HarnessConfig()
        client = httpx.AsyncClient(timeout=config.fetch_timeout_s)

    try:
        response = await client.get(uri)
    except httpx.HTTPError as e:
        logger.error(f"Fetch failed: {uri}: {e}")
        raise FetchError(None, f"fetch failed: {uri}") from e
    finally:
        if owns_client:
            await client.aclose()

    if 200 <= response.status_code <= 299 and response.content:
        return response.content

    logger.warning(f"Fetch rejected: {uri} status={response.status_code}")
    raise FetchError(response.status_code, f"fetch rejected with status {response.status_code}: {uri}")
