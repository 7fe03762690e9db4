"""Request and response models for the roast endpoint."""

from pydantic import BaseModel, Field


class RoastRequest(BaseModel):
    """Incoming roast request body."""

    account_name: str | None = Field(
        default=None,
        alias="accountName",
        description="Threads username to roast",
    )


class RoastResult(BaseModel):
    """Generated roast."""

    roast: str


class ErrorResponse(BaseModel):
    """Error body returned with a non-200 status."""

    message: str
