"""
Run the emoji resizer:

    python -m emoji_resizer

uvicorn handles SIGINT/SIGTERM and drains in-flight requests before exit.
"""

import uvicorn

from .app import configure_logging, create_app
from .config import load_settings


def main() -> None:
    settings = load_settings()
    configure_logging(settings.log_level)
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        timeout_graceful_shutdown=settings.shutdown_timeout_seconds,
    )


if __name__ == "__main__":
    main()
