"""
Emoji Resizer Configuration

All settings come from environment variables with sensible defaults,
read once at startup.
"""

import os
from dataclasses import dataclass


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.lower() in ("true", "1", "yes")


@dataclass
class TransformConfig:
    """Configuration for the static image resize/encode step."""
    box_width: int = 160            # Bounding box width in pixels
    box_height: int = 160           # Bounding box height in pixels
    lossless: bool = True           # Lossless WebP output
    quality: int = 80               # WebP quality (1-100), lossy only
    method: int = 4                 # Encoder effort (0-6)


@dataclass
class Settings:
    """Process-wide settings for the emoji resizer service."""
    host: str = "0.0.0.0"
    port: int = 53292

    # Origin
    cdn_base_url: str = "https://cdn.discordapp.com"
    user_agent: str = "emoji-resizer/0.1 (+https://example.local) httpx"
    fetch_timeout_seconds: float = 10.0
    fetch_connect_timeout_seconds: float = 5.0
    max_keepalive_connections: int = 32
    keepalive_expiry_seconds: float = 30.0

    # Result cache
    cache_max_entries: int = 50_000
    cache_ttl_seconds: int = 24 * 60 * 60  # 24 hours

    transform: TransformConfig = None

    shutdown_timeout_seconds: int = 30
    log_level: str = "INFO"

    def __post_init__(self):
        if self.transform is None:
            self.transform = TransformConfig()


def load_settings() -> Settings:
    """Build Settings from the environment."""
    box_size = int(os.getenv("EMOJI_BOX_SIZE", "160"))
    return Settings(
        host=os.getenv("EMOJI_RESIZER_HOST", "0.0.0.0"),
        port=int(os.getenv("EMOJI_RESIZER_PORT", "53292")),
        cdn_base_url=os.getenv("EMOJI_CDN_BASE_URL", "https://cdn.discordapp.com").rstrip("/"),
        fetch_timeout_seconds=float(os.getenv("EMOJI_FETCH_TIMEOUT_SECONDS", "10")),
        fetch_connect_timeout_seconds=float(os.getenv("EMOJI_FETCH_CONNECT_TIMEOUT_SECONDS", "5")),
        cache_max_entries=int(os.getenv("EMOJI_CACHE_MAX_ENTRIES", "50000")),
        cache_ttl_seconds=int(os.getenv("EMOJI_CACHE_TTL_HOURS", "24")) * 3600,
        transform=TransformConfig(
            box_width=box_size,
            box_height=box_size,
            lossless=_env_bool("EMOJI_WEBP_LOSSLESS", True),
            quality=int(os.getenv("EMOJI_WEBP_QUALITY", "80")),
        ),
        shutdown_timeout_seconds=int(os.getenv("EMOJI_SHUTDOWN_TIMEOUT_SECONDS", "30")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
