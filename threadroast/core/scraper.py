"""Apify-backed scraper for Threads profiles."""

from typing import Any

from apify_client import ApifyClientAsync

from threadroast.config import DEFAULT_ACTOR_ID
from threadroast.exceptions import ConfigError, ScrapeError


class ThreadsScraper:
    """Runs the Threads scraper actor and reads its dataset."""

    def __init__(
        self,
        token: str | None = None,
        actor_id: str = DEFAULT_ACTOR_ID,
        client: ApifyClientAsync | None = None,
    ):
        """
        Initialize with either an Apify token or a ready client.

        Args:
            token: Apify API token
            actor_id: Actor to run (e.g., "curious_coder/threads-scraper")
            client: Pre-built ApifyClientAsync, takes precedence over token

        Raises:
            ConfigError: If neither token nor client is given
        """
        if client is None:
            if not token:
                raise ConfigError("APIFY_API_TOKEN is not set")
            client = ApifyClientAsync(token=token)
        self.client = client
        self.actor_id = actor_id

    async def fetch_items(self, username: str) -> list[dict[str, Any]]:
        """
        Scrape a username and return the first page of dataset items.

        Waits for the actor run to finish; there is no timeout of our own.

        Args:
            username: Threads handle

        Returns:
            Dataset items, empty if the run produced none

        Raises:
            ScrapeError: If the actor run returned no run object
        """
        run_input = {"username": [username]}
        run = await self.client.actor(self.actor_id).call(run_input=run_input)
        if run is None:
            raise ScrapeError(f"Actor {self.actor_id} returned no run for {username}")

        page = await self.client.dataset(run["defaultDatasetId"]).list_items()
        return list(page.items or [])
