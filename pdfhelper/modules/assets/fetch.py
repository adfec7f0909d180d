"""
Source resolution and byte fetching shared by assets and raster modules.
"""

import httpx

from pdfhelper.shared.logging import get_logger

logger = get_logger(__name__)

ABSOLUTE_PREFIX = "https"


def resolve_source(source: str, base_url: str) -> str:
    """
    Turn a caller-supplied source into a fetchable URL.

    Sources starting with https are used as-is; anything else is
    appended to the configured base URL.
    """
    if source.startswith(ABSOLUTE_PREFIX):
        return source
    return f"{base_url}{source}"


async def fetch_source(
    url: str,
    timeout: float = 30.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> bytes:
    """GET a URL and return the raw body. Raises httpx errors unchanged."""
    async with httpx.AsyncClient(
        timeout=timeout, transport=transport, follow_redirects=True
    ) as client:
        response = await client.get(url)
        response.raise_for_status()

    logger.debug(f"Fetched {len(response.content)} bytes from {url}")
    return response.content
