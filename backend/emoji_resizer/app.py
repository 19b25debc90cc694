"""
Emoji Resizer Application

Builds the FastAPI app and owns the lifecycle of the shared HTTP client
and result cache.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from .cache_manager import ResultCache
from .config import Settings, load_settings
from .fetcher import build_http_client
from .pipeline import ResizerContext
from .routes_fastapi import router

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once at process start."""
    logging.basicConfig(level=level, format=LOG_FORMAT)


def build_context(settings: Settings) -> ResizerContext:
    return ResizerContext(
        http_client=build_http_client(settings),
        cache=ResultCache(
            max_entries=settings.cache_max_entries,
            ttl_seconds=settings.cache_ttl_seconds,
        ),
        settings=settings,
    )


def create_app(
    settings: Optional[Settings] = None,
    context: Optional[ResizerContext] = None,
) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        settings: Settings to use (defaults to the environment)
        context: Pre-built shared context; when given, the lifespan
            neither creates nor closes it
    """
    settings = settings or (context.settings if context else load_settings())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = app.state.resizer is None
        if owned:
            app.state.resizer = build_context(settings)
        logger.info(f"[EmojiResizer] Started, listening on http://{settings.host}:{settings.port}")
        try:
            yield
        finally:
            ctx: ResizerContext = app.state.resizer
            logger.info(f"[EmojiResizer] Shutting down, cache stats: {ctx.cache.stats()}")
            if owned:
                await ctx.http_client.aclose()
            logger.info("[EmojiResizer] Shutdown complete")

    app = FastAPI(title="Emoji Resizer", lifespan=lifespan)
    app.state.resizer = context
    app.include_router(router)
    return app
