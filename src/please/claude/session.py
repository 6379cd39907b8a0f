"""ClaudeSession - single request to Claude via the Anthropic SDK."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from anthropic import Anthropic, APIError

from please.config import Settings
from please.exceptions import CompletionError

logger = logging.getLogger(__name__)


@dataclass
class ClaudeSession:
    """Sends one prompt to Claude and returns the reply text.

    There is no conversation history; each invocation of please makes
    exactly one request.
    """

    api_key: str = field(repr=False)
    model: str = "claude-sonnet-4-5-20250929"
    max_tokens: int = 256
    timeout: float = 60.0
    _client: Anthropic | None = field(default=None, repr=False)

    @classmethod
    def from_settings(cls, settings: Settings) -> ClaudeSession:
        return cls(
            api_key=settings.api_key,
            model=settings.model,
            max_tokens=settings.max_tokens,
            timeout=settings.timeout,
        )

    @property
    def client(self) -> Anthropic:
        if self._client is None:
            self._client = Anthropic(
                api_key=self.api_key, timeout=self.timeout, max_retries=0
            )
        return self._client

    def complete(self, prompt: str) -> str | None:
        """Send ``prompt`` as a single user message.

        Returns the concatenated text blocks of the reply, or None when the
        reply contains no text content.

        Raises:
            CompletionError: If the API call fails or times out.
        """
        logger.debug("Requesting %s with a %d character prompt", self.model, len(prompt))
        try:
            message = self.client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except APIError as e:
            raise CompletionError(self.model, e) from e

        texts = [block.text for block in message.content if block.type == "text"]
        if not texts:
            logger.debug("Reply from %s had no text content", self.model)
            return None
        return "".join(texts)
