"""
Emoji Resize Pipeline

Coordinates a single request:
1. Extract the emoji identifier from the path segment
2. Serve from cache if present (with If-None-Match revalidation)
3. Otherwise fetch from the CDN, classify, transform and cache
4. Build the response with caching headers

Errors raised by the fetch/transform steps are ResizerError subclasses
and propagate to the router untouched; nothing is cached on failure.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional

import httpx

from .cache_manager import ResultCache
from .config import Settings
from .errors import ResizerError
from .etag import if_none_match_matches, make_etag
from .fetcher import fetch_source, source_url
from .sniffer import classify
from .transform import transform_async

logger = logging.getLogger(__name__)

CONTENT_TYPE = "image/webp"
CACHE_CONTROL = "public, max-age=86400, stale-while-revalidate=600"
NO_SOURCE_URL = "-"


@dataclass
class ResizerContext:
    """Process-wide shared state, built once at startup."""
    http_client: httpx.AsyncClient
    cache: ResultCache
    settings: Settings


@dataclass
class ResizeResult:
    """Outcome of the pipeline, independent of the web framework."""
    status_code: int
    headers: Dict[str, str] = field(default_factory=dict)
    body: bytes = b""


def extract_identifier(name: str) -> str:
    """Strip a trailing format suffix: '123.webp' -> '123'."""
    identifier, dot, _suffix = name.rpartition(".")
    return identifier if dot else name


def common_headers(etag: str, src: Optional[str]) -> Dict[str, str]:
    return {
        "Content-Type": CONTENT_TYPE,
        "Cache-Control": CACHE_CONTROL,
        "ETag": etag,
        "X-Source-Url": src or NO_SOURCE_URL,
    }


def _respond(data: bytes, if_none_match: Optional[str], src: str) -> ResizeResult:
    etag = make_etag(data)
    if if_none_match_matches(if_none_match, etag):
        return ResizeResult(status_code=304, headers=common_headers(etag, None))
    return ResizeResult(status_code=200, headers=common_headers(etag, src), body=data)


async def resize_emoji(
    context: ResizerContext,
    name: str,
    if_none_match: Optional[str] = None,
) -> ResizeResult:
    """
    Run the fetch -> classify -> transform -> cache -> respond pipeline.

    Args:
        context: Shared HTTP client, cache and settings
        name: Raw path segment, possibly with a suffix ("123.webp")
        if_none_match: Inbound If-None-Match header value, if any

    Returns:
        ResizeResult with status 200 or 304.

    Raises:
        ResizerError: fetch, upstream, decode or encode failure
    """
    logger.info(f"[EmojiResizer] Request received - emoji: {name}")
    identifier = extract_identifier(name)
    src = source_url(identifier, context.settings)

    cached = context.cache.get(identifier)
    if cached is not None:
        logger.info(f"[EmojiResizer] Cache hit: {identifier}")
        return _respond(cached, if_none_match, src)

    logger.info(f"[EmojiResizer] Cache miss - fetching: {identifier}")
    body = await fetch_source(context.http_client, identifier, src)

    classification = classify(body)
    logger.info(f"[EmojiResizer] Processing {classification.value} emoji: {identifier}")

    try:
        output = await transform_async(body, classification, context.settings.transform)
    except ResizerError as e:
        logger.error(f"[EmojiResizer] Transform failed for emoji {identifier}: {e}")
        raise

    context.cache.put(identifier, output)
    logger.info(
        f"[EmojiResizer] Processed {classification.value} emoji: {identifier}, "
        f"{len(body)} -> {len(output)} bytes"
    )
    return _respond(output, if_none_match, src)
