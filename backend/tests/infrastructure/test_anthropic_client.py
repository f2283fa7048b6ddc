"""Anthropic Text Client tests — request shape, text extraction, error mapping.

Tests cover:
    - complete() sends one user message with model, max_tokens, temperature
    - First text block returned; None when there is no text block
    - Every SDK failure mapped to ModelProviderError with a classified type
    - SDK retries disabled
"""

from unittest.mock import AsyncMock

import httpx
import pytest
from anthropic import (
    APIConnectionError,
    APITimeoutError,
    AuthenticationError,
    InternalServerError,
    RateLimitError,
)

from firmbox.core.errors import ErrorContext, ModelProviderError
from firmbox.infrastructure.anthropic_client import AnthropicTextClient, extract_text

from tests.services.mock_anthropic import (
    _Block,
    _Message,
    empty_message,
    text_message,
    tool_only_message,
)

_REQUEST = httpx.Request("POST", "https://api.anthropic.com/v1/messages")


def _response(status_code: int) -> httpx.Response:
    return httpx.Response(status_code, request=_REQUEST)


def _client_returning(result) -> AnthropicTextClient:
    client = AnthropicTextClient(api_key="sk-ant-test-fake-key")
    client.client.messages.create = AsyncMock(side_effect=[result])
    return client


async def _complete(client: AnthropicTextClient):
    return await client.complete(
        model="claude-test", prompt="Hello", max_tokens=30, temperature=0.9,
        context=ErrorContext(endpoint="generateCompanyName"),
    )


# --- extract_text -------------------------------------------------------------


def test_extract_text_first_text_block():
    message = _Message([
        _Block(type="tool_use", id="t", name="n", input={}),
        _Block(type="text", text="first"),
        _Block(type="text", text="second"),
    ])
    assert extract_text(message) == "first"


def test_extract_text_none_without_blocks():
    assert extract_text(empty_message()) is None
    assert extract_text(tool_only_message()) is None


# --- complete -----------------------------------------------------------------


def test_sdk_retries_disabled():
    client = AnthropicTextClient(api_key="sk-ant-test-fake-key", timeout_seconds=5)
    assert client.client.max_retries == 0


async def test_complete_sends_single_user_message():
    client = _client_returning(text_message("Brew Co"))
    result = await _complete(client)
    assert result == "Brew Co"
    client.client.messages.create.assert_awaited_once_with(
        model="claude-test",
        max_tokens=30,
        temperature=0.9,
        messages=[{"role": "user", "content": "Hello"}],
    )


async def test_complete_returns_none_for_empty_content():
    client = _client_returning(empty_message())
    assert await _complete(client) is None


@pytest.mark.parametrize(
    "error, expected_type",
    [
        (RateLimitError("slow down", response=_response(429), body=None), "rate_limit"),
        (APITimeoutError(request=_REQUEST), "timeout"),
        (APIConnectionError(request=_REQUEST), "connection_error"),
        (InternalServerError("boom", response=_response(500), body=None), "server_error"),
        (AuthenticationError("bad key", response=_response(401), body=None), "client_error"),
    ],
)
async def test_complete_maps_sdk_errors(error, expected_type):
    client = _client_returning(error)
    with pytest.raises(ModelProviderError) as exc_info:
        await _complete(client)
    assert exc_info.value.api_error_type == expected_type
    assert exc_info.value.context.endpoint == "generateCompanyName"


async def test_complete_logs_usage(caplog):
    client = _client_returning(text_message("ok", tokens=(12, 3)))
    with caplog.at_level("INFO", logger="firmbox.infrastructure.anthropic_client"):
        await _complete(client)
    record = next(r for r in caplog.records if r.message == "Anthropic API success")
    assert record.input_tokens == 12
    assert record.output_tokens == 3
    assert record.endpoint == "generateCompanyName"
