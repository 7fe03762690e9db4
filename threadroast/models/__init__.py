"""Pydantic models for threadroast."""

from threadroast.models.profile import ThreadsPost, ThreadsProfile, decode_profile
from threadroast.models.roast import RoastRequest, RoastResult, ErrorResponse

__all__ = [
    "ThreadsPost",
    "ThreadsProfile",
    "decode_profile",
    "RoastRequest",
    "RoastResult",
    "ErrorResponse",
]
