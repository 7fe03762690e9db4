"""Scraped Threads profile model and its decoder."""

from typing import Any

from pydantic import BaseModel, StrictStr, ValidationError, field_validator

from threadroast.exceptions import UpstreamShapeError


class ThreadsPost(BaseModel):
    """A single post as returned by the scraper. Only the text is used."""

    text: StrictStr

    model_config = {"extra": "ignore"}


class ThreadsProfile(BaseModel):
    """Bio and recent posts of a Threads account."""

    bio: StrictStr
    posts: list[ThreadsPost]

    model_config = {"extra": "ignore"}

    @field_validator("posts", mode="before")
    @classmethod
    def _posts_must_be_list(cls, value: Any) -> Any:
        # Reject tuples, sets and other iterables pydantic would coerce
        if not isinstance(value, list):
            raise ValueError("posts must be a list")
        return value


def decode_profile(item: Any) -> ThreadsProfile:
    """
    Decode an untrusted dataset item into a ThreadsProfile.

    Args:
        item: First item of the scraper's dataset, any JSON value

    Returns:
        Validated ThreadsProfile

    Raises:
        UpstreamShapeError: If the item does not match the profile shape
    """
    if isinstance(item, ThreadsProfile):
        return item
    if not isinstance(item, dict):
        raise UpstreamShapeError()
    try:
        return ThreadsProfile.model_validate(item)
    except ValidationError as e:
        raise UpstreamShapeError() from e
