"""
Freshness token helpers: weak ETag derivation and If-None-Match matching.
"""

import hashlib
from typing import Optional


def make_etag(data: bytes) -> str:
    """Weak validator derived from the SHA-1 of the output bytes."""
    return f'W/"{hashlib.sha1(data).hexdigest()}"'


def if_none_match_matches(header_value: Optional[str], etag: str) -> bool:
    """True if any validator in a comma-separated If-None-Match equals etag."""
    if not header_value:
        return False
    return any(token.strip() == etag for token in header_value.split(","))
