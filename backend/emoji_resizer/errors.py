"""
Emoji Resizer Errors

Every failure in the resize pipeline is a ResizerError carrying the
HTTP status it maps to. All of them are terminal for the request.
"""

from typing import Optional


class ResizerError(Exception):
    """Base class for pipeline failures."""
    status_code: int = 500
    detail: str = "internal error"

    def __init__(self, detail: Optional[str] = None):
        if detail is not None:
            self.detail = detail
        super().__init__(self.detail)


class FetchError(ResizerError):
    """Network/transport failure reaching the origin (includes timeouts)."""
    status_code = 502
    detail = "upstream fetch failed"


class NotFoundUpstream(ResizerError):
    """Origin reports the emoji does not exist."""
    status_code = 404
    detail = "emoji not found"


class UpstreamStatusError(ResizerError):
    """Origin answered with a non-success, non-404 status."""
    status_code = 502
    detail = "upstream error"

    def __init__(self, upstream_status: int):
        self.upstream_status = upstream_status
        super().__init__(f"upstream error (status {upstream_status})")


class DecodeError(ResizerError):
    """Source bytes are malformed or in an unsupported format."""
    status_code = 415
    detail = "decode failed"


class EncodeError(ResizerError):
    """Re-encoding the resized image failed."""
    status_code = 500
    detail = "encode failed"
