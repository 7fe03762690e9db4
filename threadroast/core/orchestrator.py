"""Roast orchestrator - coordinates scraping, validation and completion."""

from datetime import datetime

from threadroast.config import RoastConfig
from threadroast.core.completion import RoastWriter
from threadroast.core.prompt import build_prompt
from threadroast.core.scraper import ThreadsScraper
from threadroast.exceptions import (
    GenerationError,
    InvalidInputError,
    ProfileNotFoundError,
    RoastError,
)
from threadroast.logging import configure_logging, get_logger
from threadroast.models.profile import decode_profile
from threadroast.models.roast import RoastResult


class Roaster:
    """
    High-level roast interface.

    Example:
        async with Roaster() as roaster:
            result = await roaster.roast("zuck")
            print(result.roast)
    """

    def __init__(
        self,
        config: RoastConfig | None = None,
        scraper: ThreadsScraper | None = None,
        writer: RoastWriter | None = None,
    ):
        """
        Initialize roaster with optional configuration and providers.

        Providers not given here are built from config on context entry.

        Args:
            config: RoastConfig instance, uses defaults if None
            scraper: Scrape provider to use instead of an Apify-backed one
            writer: Completion provider to use instead of an OpenAI-backed one
        """
        self.config = config or RoastConfig()
        self._scraper = scraper
        self._writer = writer
        self._owns_writer = False
        self._log = get_logger("roaster")

    async def __aenter__(self) -> "Roaster":
        """Async context manager entry - build provider clients."""
        configure_logging(self.config)

        if self._scraper is None:
            self._scraper = ThreadsScraper(
                self.config.apify_api_token,
                actor_id=self.config.actor_id,
            )
        if self._writer is None:
            self._writer = RoastWriter(
                self.config.openai_api_key,
                model=self.config.model,
                max_tokens=self.config.max_tokens,
            )
            self._owns_writer = True

        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit - close clients we created."""
        if self._writer and self._owns_writer:
            await self._writer.close()
            self._writer = None
            self._owns_writer = False

    async def roast(self, account_name: str | None) -> RoastResult:
        """
        Scrape a Threads account and generate a roast for it.

        Args:
            account_name: Threads handle

        Returns:
            RoastResult with the generated text

        Raises:
            InvalidInputError: account_name missing or empty
            ProfileNotFoundError: scraper returned no items
            UpstreamShapeError: first item is not a bio/posts profile
            GenerationError: any other scrape or completion failure
        """
        if not account_name:
            raise InvalidInputError()

        log = self._log.bind(account_name=account_name)
        log.info("roast_start")
        start = datetime.now()

        try:
            items = await self._scraper.fetch_items(account_name)
            log.info("scrape_complete", items_count=len(items) if items else 0)

            if not items:
                raise ProfileNotFoundError()

            profile = decode_profile(items[0])
            prompt = build_prompt(account_name, profile)
            text = await self._writer.complete(prompt)
        except RoastError as e:
            log.warning("roast_failed", error_kind=type(e).__name__)
            raise
        except Exception as e:
            log.exception("roast_failed", error_kind=GenerationError.__name__)
            raise GenerationError() from e

        log.info(
            "roast_complete",
            roast_length=len(text),
            duration_ms=(datetime.now() - start).total_seconds() * 1000,
        )
        return RoastResult(roast=text)
