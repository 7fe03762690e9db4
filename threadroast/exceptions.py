"""Custom exception hierarchy for threadroast."""


class ThreadRoastError(Exception):
    """Base exception for all threadroast errors."""


class ConfigError(ThreadRoastError):
    """Invalid or missing configuration."""


class ScrapeError(ThreadRoastError):
    """Scrape provider call failed."""


class CompletionError(ThreadRoastError):
    """Completion provider call failed or returned nothing usable."""


class RoastError(ThreadRoastError):
    """
    Failure surfaced to the caller of a roast.

    Carries the HTTP status and the public message; internal detail stays
    on the exception chain.
    """

    status_code: int = 500
    message: str = "Failed to generate roast"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InvalidInputError(RoastError):
    """Request is missing the account name."""

    status_code = 400
    message = "Account name is required"


class ProfileNotFoundError(RoastError):
    """Scraper returned no items for the account."""

    status_code = 404
    message = "No data found for this account."


class UpstreamShapeError(RoastError):
    """Scraped item does not match the expected profile shape."""

    status_code = 500
    message = "Invalid data structure returned by the scraper."


class GenerationError(RoastError):
    """Any other failure in the scrape or completion chain."""

    status_code = 500
    message = "Failed to generate roast"
