"""
Emoji Resizer test configuration.

Fixtures:
- settings / cache: fresh per test
- origin: fake CDN built on httpx.MockTransport, records every request
- client: httpx.AsyncClient talking to the app in-process
"""

import struct
import sys
from io import BytesIO
from pathlib import Path
from typing import Dict, List

import httpx
import pytest
import pytest_asyncio
from PIL import Image

# Add the backend directory to the Python path
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

from emoji_resizer.app import create_app
from emoji_resizer.cache_manager import ResultCache
from emoji_resizer.config import Settings
from emoji_resizer.pipeline import ResizerContext


# ============================================
# Byte builders
# ============================================

def riff_chunk(fourcc: bytes, payload: bytes) -> bytes:
    """One RIFF chunk, padded to an even length."""
    pad = b"\x00" if len(payload) % 2 else b""
    return fourcc + struct.pack("<I", len(payload)) + payload + pad


def webp_container(*chunks: bytes) -> bytes:
    body = b"WEBP" + b"".join(chunks)
    return b"RIFF" + struct.pack("<I", len(body)) + body


def vp8x_chunk(flags: int) -> bytes:
    # flags byte, 3 reserved bytes, 24-bit canvas width-1 and height-1
    return riff_chunk(b"VP8X", bytes([flags, 0, 0, 0]) + b"\x9f\x00\x00\x9f\x00\x00")


def image_bytes(width: int, height: int, fmt: str = "PNG", mode: str = "RGB") -> bytes:
    img = Image.new(mode, (width, height))
    output = BytesIO()
    img.save(output, format=fmt)
    return output.getvalue()


def animated_webp_bytes(width: int = 64, height: int = 64) -> bytes:
    frames = [Image.new("RGBA", (width, height), color) for color in ((255, 0, 0, 255), (0, 0, 255, 255))]
    output = BytesIO()
    frames[0].save(output, format="WEBP", save_all=True, append_images=frames[1:], duration=100, loop=0)
    return output.getvalue()


# ============================================
# Fake origin
# ============================================

class FakeOrigin:
    """
    Fake CDN. Register a response per emoji id; unknown ids answer 404.

    A registered value may be bytes (200), an int status, or an exception
    instance to raise as a transport failure.
    """

    def __init__(self):
        self.responses: Dict[str, object] = {}
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        identifier = request.url.path.rsplit("/", 1)[-1]
        value = self.responses.get(identifier, 404)
        if isinstance(value, Exception):
            raise value
        if isinstance(value, int):
            return httpx.Response(value, content=b"")
        return httpx.Response(200, content=value, headers={"Content-Type": "image/webp"})


# ============================================
# Fixtures
# ============================================

@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def cache():
    return ResultCache(max_entries=100, ttl_seconds=3600)


@pytest.fixture
def origin():
    return FakeOrigin()


@pytest_asyncio.fixture
async def context(settings, cache, origin):
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(origin))
    yield ResizerContext(http_client=http_client, cache=cache, settings=settings)
    await http_client.aclose()


@pytest_asyncio.fixture
async def client(context):
    app = create_app(context=context)
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://testserver",
    ) as http:
        yield http


class FakeTimer:
    """Manually advanced clock for TTL tests."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def timer():
    return FakeTimer()
