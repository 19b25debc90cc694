"""
Emoji Resizer API Routes

Provides endpoints for:
- Health check
- Serving resized emojis (with ETag revalidation)
"""

from typing import Optional

from fastapi import APIRouter, Header, HTTPException, Request
from fastapi.responses import PlainTextResponse, Response

from .errors import ResizerError
from .pipeline import ResizerContext, resize_emoji

# ============================================
# Router
# ============================================

router = APIRouter(tags=["Emoji Resizer"])


def get_context(request: Request) -> ResizerContext:
    return request.app.state.resizer


# ============================================
# Endpoints
# ============================================

@router.get("/healthz", response_class=PlainTextResponse)
async def health_check():
    """Health check endpoint."""
    return "ok"


@router.get("/e/{name}")
async def get_emoji(
    name: str,
    request: Request,
    if_none_match: Optional[str] = Header(None),
):
    """
    Serve an emoji resized to fit the bounding box.

    Static WebP/PNG/etc. are resized and re-encoded as WebP; animated WebP
    is passed through unchanged.

    Example:
        GET /e/123456789012345678.webp
    """
    try:
        result = await resize_emoji(get_context(request), name, if_none_match)
    except ResizerError as e:
        raise HTTPException(status_code=e.status_code, detail=e.detail)

    return Response(
        content=result.body,
        status_code=result.status_code,
        headers=result.headers,
    )
