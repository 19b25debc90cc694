"""
Emoji Resizer Module

On-demand resize proxy for CDN-hosted emojis.

Features:
- Animated WebP detection from the RIFF chunk list
- Static images box-fit to 160x160 and re-encoded as WebP
- In-memory result cache with LRU eviction and TTL
- Weak ETag / If-None-Match revalidation
"""

from .routes_fastapi import router
from .app import create_app
from .cache_manager import ResultCache
from .sniffer import Classification, classify

__all__ = ["router", "create_app", "ResultCache", "Classification", "classify"]
