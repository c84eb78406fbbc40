"""Unit tests for the Anthropic completion client."""
import asyncio
from unittest.mock import AsyncMock, Mock

import anthropic
import httpx
import pytest

from config.settings import Settings
from conversation.completion import AnthropicCompletion, CompletionError
from conversation.context_builder import build_messages
from conversation.prompts import SYSTEM_PROMPT
from core.turn import Speaker, Turn

REQUEST = httpx.Request("POST", "https://api.anthropic.com/v1/messages")


def rate_limit_error():
    return anthropic.RateLimitError(
        "rate limited", response=httpx.Response(429, request=REQUEST), body=None
    )


def bad_request_error():
    return anthropic.BadRequestError(
        "bad request", response=httpx.Response(400, request=REQUEST), body=None
    )


def text_response(*texts, input_tokens=120, output_tokens=30):
    response = Mock()
    response.content = [Mock(type="text", text=t) for t in texts]
    response.usage = Mock(input_tokens=input_tokens, output_tokens=output_tokens)
    return response


@pytest.fixture
def settings():
    return Settings(
        ANTHROPIC_API_KEY="test_key",
        MODEL_CHAT="claude-test",
        MAX_TOKENS=1000,
        MAX_RETRIES=3,
        RETRY_BASE_DELAY=0.0,
    )


@pytest.fixture
def turns():
    return [
        Turn(speaker=Speaker.USER, text="RRSP or TFSA?"),
        Turn(speaker=Speaker.ASSISTANT, text="Which province?\n1. Ontario\n2. BC"),
        Turn(speaker=Speaker.USER, text="Ontario"),
    ]


def make_client(create):
    client = Mock()
    client.messages.create = create
    client.close = AsyncMock()
    return client


class TestAnthropicCompletion:
    """Test suite for AnthropicCompletion."""

    def test_complete_success(self, settings, turns):
        """The full history and preamble go out; the text comes back."""
        create = AsyncMock(return_value=text_response("TFSA first. ⚠️ The final call is yours."))
        completion = AnthropicCompletion(settings, client=make_client(create))

        reply = asyncio.run(completion.complete(turns))

        assert reply == "TFSA first. ⚠️ The final call is yours."
        create.assert_awaited_once_with(
            model="claude-test",
            max_tokens=1000,
            system=SYSTEM_PROMPT,
            messages=[
                {"role": "user", "content": "RRSP or TFSA?"},
                {"role": "assistant", "content": "Which province?\n1. Ontario\n2. BC"},
                {"role": "user", "content": "Ontario"},
            ],
        )

    def test_token_usage_recorded(self, settings, turns):
        create = AsyncMock(return_value=text_response("ok", input_tokens=1500, output_tokens=40))
        completion = AnthropicCompletion(settings, client=make_client(create))

        asyncio.run(completion.complete(turns))

        assert completion.tokens.api_calls == 1
        assert completion.tokens.total_tokens == 1540
        assert "In: 1.5K" in completion.tokens.summary()

    def test_multiple_text_blocks_joined(self, settings, turns):
        create = AsyncMock(return_value=text_response("Part one. ", "Part two."))
        completion = AnthropicCompletion(settings, client=make_client(create))

        assert asyncio.run(completion.complete(turns)) == "Part one. Part two."

    def test_no_text_blocks_returns_none(self, settings, turns):
        response = text_response()
        response.content = [Mock(type="tool_use", text=None)]
        completion = AnthropicCompletion(settings, client=make_client(AsyncMock(return_value=response)))

        assert asyncio.run(completion.complete(turns)) is None

    def test_rate_limit_retried(self, settings, turns):
        create = AsyncMock(side_effect=[rate_limit_error(), text_response("Recovered")])
        completion = AnthropicCompletion(settings, client=make_client(create))

        assert asyncio.run(completion.complete(turns)) == "Recovered"
        assert create.await_count == 2

    def test_timeout_retried_until_exhausted(self, settings, turns):
        create = AsyncMock(side_effect=anthropic.APITimeoutError(request=REQUEST))
        completion = AnthropicCompletion(settings, client=make_client(create))

        with pytest.raises(CompletionError, match="after 3 attempts"):
            asyncio.run(completion.complete(turns))
        assert create.await_count == 3

    def test_other_api_errors_not_retried(self, settings, turns):
        create = AsyncMock(side_effect=bad_request_error())
        completion = AnthropicCompletion(settings, client=make_client(create))

        with pytest.raises(CompletionError, match="after 1 attempt:"):
            asyncio.run(completion.complete(turns))
        assert create.await_count == 1

    def test_close(self, settings):
        client = make_client(AsyncMock())
        completion = AnthropicCompletion(settings, client=client)

        asyncio.run(completion.close())

        client.close.assert_awaited_once()


class TestBuildMessages:
    """Tests for the turn → message mapping."""

    def test_empty(self):
        assert build_messages([]) == []

    def test_roles_follow_speakers(self, turns):
        messages = build_messages(turns)

        assert [m["role"] for m in messages] == ["user", "assistant", "user"]
        assert messages[2]["content"] == "Ontario"
