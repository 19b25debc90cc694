"""
Origin fetcher: builds the CDN URL and downloads emoji source bytes.
"""

import logging

import httpx

from .config import Settings
from .errors import FetchError, NotFoundUpstream, UpstreamStatusError

logger = logging.getLogger(__name__)

ACCEPT_HEADER = "image/webp,image/*"


def source_url(identifier: str, settings: Settings) -> str:
    """CDN URL for an emoji, always requesting the animated variant if any."""
    size = settings.transform.box_width
    return f"{settings.cdn_base_url}/emojis/{identifier}?size={size}&animated=true"


def build_http_client(settings: Settings) -> httpx.AsyncClient:
    """Shared HTTP client for origin fetches."""
    return httpx.AsyncClient(
        timeout=httpx.Timeout(
            settings.fetch_timeout_seconds,
            connect=settings.fetch_connect_timeout_seconds,
        ),
        limits=httpx.Limits(
            max_keepalive_connections=settings.max_keepalive_connections,
            keepalive_expiry=settings.keepalive_expiry_seconds,
        ),
        headers={"User-Agent": settings.user_agent},
    )


async def fetch_source(client: httpx.AsyncClient, identifier: str, url: str) -> bytes:
    """
    Download the source asset.

    Raises:
        FetchError: transport failure or timeout
        NotFoundUpstream: origin returned 404
        UpstreamStatusError: origin returned any other non-2xx status
    """
    try:
        response = await client.get(url, headers={"Accept": ACCEPT_HEADER})
    except httpx.HTTPError as e:
        logger.error(f"[EmojiFetcher] Fetch error for emoji {identifier}: {e!r}")
        raise FetchError() from e

    if response.status_code == 404:
        logger.warning(f"[EmojiFetcher] Emoji not found: {identifier}")
        raise NotFoundUpstream()
    if not response.is_success:
        logger.error(f"[EmojiFetcher] Upstream error for emoji {identifier}: status {response.status_code}")
        raise UpstreamStatusError(response.status_code)

    return response.content
