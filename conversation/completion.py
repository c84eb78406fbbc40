"""Completion collaborator — one Claude API call per user turn.

The controller only needs ``complete(turns) -> text``; transport, retries and
token accounting live here.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any, Optional, Protocol, Sequence

import anthropic

from config.settings import Settings
from conversation.context_builder import build_messages, build_system_prompt
from core.token_tracker import TokenTracker

if TYPE_CHECKING:
    from core.turn import Turn

logger = logging.getLogger(__name__)


class CompletionError(RuntimeError):
    """The completion service could not produce a reply."""


class CompletionClient(Protocol):
    async def complete(self, turns: Sequence[Turn]) -> Optional[str]: ...

    async def close(self) -> None: ...


class AnthropicCompletion:
    """Sends the conversation to the Claude Messages API."""

    def __init__(
        self,
        settings: Settings | None = None,
        client: anthropic.AsyncAnthropic | None = None,
    ):
        self.settings = settings or Settings()
        self.client = client or anthropic.AsyncAnthropic(api_key=self.settings.ANTHROPIC_API_KEY)
        self.tokens = TokenTracker()

    async def complete(self, turns: Sequence[Turn]) -> Optional[str]:
        """Return the reply text, or None if the response carried no text.

        Rate limits and timeouts are retried with exponential backoff; any
        other API error stops immediately.

        Raises:
            CompletionError: when no attempt succeeded.
        """
        system_prompt = build_system_prompt()
        messages = build_messages(turns)
        kwargs: dict[str, Any] = {
            "model": self.settings.MODEL_CHAT,
            "max_tokens": self.settings.MAX_TOKENS,
            "system": system_prompt,
            "messages": messages,
        }

        last_error: Exception | None = None
        attempts = max(1, self.settings.MAX_RETRIES)
        made = 0

        for attempt in range(attempts):
            made = attempt + 1
            try:
                logger.debug(
                    "Claude API call (attempt %d): %d messages, system prompt %d chars",
                    attempt + 1,
                    len(messages),
                    len(system_prompt),
                )
                response = await self.client.messages.create(**kwargs)
                self.tokens.record(getattr(response, "usage", None))

                text = self._extract_text(response)
                logger.debug("Claude API response: %d chars", len(text or ""))
                return text

            except anthropic.RateLimitError as e:
                last_error = e
                delay = self.settings.RETRY_BASE_DELAY * (2 ** attempt)
                logger.warning("Rate limited, retrying in %.1fs (attempt %d)", delay, attempt + 1)
                await asyncio.sleep(delay)

            except anthropic.APITimeoutError as e:
                last_error = e
                delay = self.settings.RETRY_BASE_DELAY * (2 ** attempt)
                logger.warning("API timeout, retrying in %.1fs (attempt %d)", delay, attempt + 1)
                await asyncio.sleep(delay)

            except anthropic.APIError as e:
                last_error = e
                logger.error("Claude API error: %s", e)
                break

        noun = "attempt" if made == 1 else "attempts"
        raise CompletionError(f"Claude API call failed after {made} {noun}: {last_error}")

    async def close(self) -> None:
        await self.client.close()

    @staticmethod
    def _extract_text(response) -> Optional[str]:
        """Join the text blocks of a Claude response; None when there are none."""
        content = getattr(response, "content", None) or []
        parts = [
            block.text
            for block in content
            if getattr(block, "type", None) == "text" and getattr(block, "text", None)
        ]
        return "".join(parts) if parts else None
