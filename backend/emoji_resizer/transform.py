"""
Emoji Transform Engine

Static images are decoded, box-fit into the configured bounding box and
re-encoded as WebP. Animated images pass through untouched.
"""

import asyncio
import logging
import math
from io import BytesIO
from typing import Optional, Tuple

from PIL import Image

from .config import TransformConfig
from .errors import DecodeError, EncodeError
from .sniffer import Classification

logger = logging.getLogger(__name__)


def fit_dimensions(width: int, height: int, box_width: int, box_height: int) -> Tuple[int, int]:
    """
    Largest size that fits inside the box while keeping the aspect ratio.

    Images smaller than the box are scaled up, never left at their
    original size.
    """
    ratio = min(box_width / width, box_height / height)
    new_width = max(1, math.floor(width * ratio + 0.5))
    new_height = max(1, math.floor(height * ratio + 0.5))
    return min(new_width, box_width), min(new_height, box_height)


def _decode(data: bytes) -> Image.Image:
    try:
        img = Image.open(BytesIO(data))
        img.load()
    except (OSError, ValueError, SyntaxError, Image.DecompressionBombError) as e:
        raise DecodeError(f"decode failed: {e}") from e

    if img.mode not in ("RGB", "RGBA"):
        img = img.convert("RGBA" if img.has_transparency_data else "RGB")
    return img


def _encode(img: Image.Image, config: TransformConfig) -> bytes:
    save_kwargs = {"format": "WEBP", "method": config.method}
    if config.lossless:
        save_kwargs["lossless"] = True
    else:
        save_kwargs["quality"] = config.quality

    output = BytesIO()
    try:
        img.save(output, **save_kwargs)
    except (OSError, ValueError, KeyError) as e:
        raise EncodeError(f"encode failed: {e}") from e
    return output.getvalue()


def transform(
    data: bytes,
    classification: Classification,
    config: Optional[TransformConfig] = None,
) -> bytes:
    """
    Produce the output asset for a source asset.

    Raises:
        DecodeError: source bytes are not a decodable image
        EncodeError: the resized image could not be re-encoded
    """
    if classification is Classification.ANIMATED:
        return data

    config = config or TransformConfig()
    img = _decode(data)

    original_size = img.size
    target_size = fit_dimensions(*original_size, config.box_width, config.box_height)
    resized = img.resize(target_size, Image.Resampling.LANCZOS)

    output = _encode(resized, config)
    logger.debug(
        f"[EmojiTransform] {original_size[0]}x{original_size[1]} -> "
        f"{target_size[0]}x{target_size[1]}, {len(output)} bytes"
    )
    return output


async def transform_async(
    data: bytes,
    classification: Classification,
    config: Optional[TransformConfig] = None,
) -> bytes:
    """Run transform() in a worker thread to keep the event loop free."""
    if classification is Classification.ANIMATED:
        return data
    return await asyncio.to_thread(transform, data, classification, config)
