"""
WebP Format Sniffer

Classifies a WebP container as animated or static by walking its RIFF
chunk list, without decoding any pixels.

Container layout:
    "RIFF" <u32 LE size> "WEBP"
    then chunks: <fourcc> <u32 LE size> <payload> [pad byte if size is odd]
"""

import struct
from enum import Enum

RIFF_HEADER_SIZE = 12
CHUNK_HEADER_SIZE = 8

# VP8X flag bit signalling an animated image
ANIMATION_FLAG = 0x02


class Classification(str, Enum):
    """Result of sniffing a source asset."""
    ANIMATED = "animated"
    STATIC = "static"


def classify(data: bytes) -> Classification:
    """
    Classify raw image bytes.

    Anything that is not a recognisable WebP container is STATIC, so that
    the decode step reports the real error.
    """
    if len(data) < RIFF_HEADER_SIZE:
        return Classification.STATIC
    if data[0:4] != b"RIFF" or data[8:12] != b"WEBP":
        return Classification.STATIC

    pos = RIFF_HEADER_SIZE
    while pos + CHUNK_HEADER_SIZE <= len(data):
        chunk_type = data[pos:pos + 4]
        (chunk_size,) = struct.unpack_from("<I", data, pos + 4)

        if chunk_type == b"VP8X":
            flags_at = pos + CHUNK_HEADER_SIZE
            if flags_at >= len(data):
                return Classification.STATIC
            if data[flags_at] & ANIMATION_FLAG:
                return Classification.ANIMATED
            # Some encoders leave the flag clear but still emit ANIM
        elif chunk_type == b"ANIM":
            return Classification.ANIMATED

        pos += CHUNK_HEADER_SIZE + chunk_size + (chunk_size & 1)

    return Classification.STATIC
