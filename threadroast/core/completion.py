"""OpenAI chat-completion client for roast text."""

from openai import AsyncOpenAI

from threadroast.config import DEFAULT_MODEL
from threadroast.exceptions import CompletionError, ConfigError


class RoastWriter:
    """Turns a prompt into roast text with a single chat completion."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str = DEFAULT_MODEL,
        max_tokens: int = 150,
        client: AsyncOpenAI | None = None,
    ):
        if client is None:
            if not api_key:
                raise ConfigError("OPENAI_API_KEY is not set")
            client = AsyncOpenAI(api_key=api_key)
        self.client = client
        self.model = model
        self.max_tokens = max_tokens

    async def complete(self, prompt: str) -> str:
        """
        Send the prompt as one user message and return the first choice.

        Raises:
            CompletionError: If no choice or no text content comes back
        """
        response = await self.client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
            max_tokens=self.max_tokens,
        )
        if not response.choices:
            raise CompletionError("Completion returned no choices")

        content = response.choices[0].message.content
        if content is None:
            raise CompletionError("Completion returned no content")
        return content

    async def close(self) -> None:
        """Release the HTTP connection pool."""
        await self.client.close()
