"""Configuration management using Pydantic Settings."""

from enum import Enum

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class LogFormat(str, Enum):
    """Log output format."""
    JSON = "json"
    CONSOLE = "console"


DEFAULT_ACTOR_ID = "curious_coder/threads-scraper"
DEFAULT_MODEL = "gpt-3.5-turbo"


class RoastConfig(BaseSettings):
    """Configuration for the threadroast service."""

    # Credentials
    apify_api_token: str | None = Field(
        default=None,
        validation_alias=AliasChoices("THREADROAST_APIFY_API_TOKEN", "APIFY_API_TOKEN"),
    )
    openai_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("THREADROAST_OPENAI_API_KEY", "OPENAI_API_KEY"),
    )

    # Scraper
    actor_id: str = DEFAULT_ACTOR_ID

    # Completion
    model: str = DEFAULT_MODEL
    max_tokens: int = 150

    # Logging
    log_level: str = "INFO"
    log_format: LogFormat = LogFormat.CONSOLE

    model_config = {
        "env_prefix": "THREADROAST_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "populate_by_name": True,
        "protected_namespaces": (),
    }
