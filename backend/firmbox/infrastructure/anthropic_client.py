"""Anthropic Text Client — wraps AsyncAnthropic with error mapping and usage logging.

Invariants:
    - One user message per call, no system prompt, no tools
    - No retries: the SDK's own retry is disabled (max_retries=0)
    - All SDK failures mapped to ModelProviderError (core/errors.py) with a classified type
    - complete() returns the first text block, or None when the response has none

Design Decisions:
    - Wrapper over raw client: isolates SDK types from the generation service
    - Created once per process (application lifespan) and shared read-only
"""

import logging

import anthropic
from anthropic import (
    APIConnectionError,
    APIError,
    APIStatusError,
    APITimeoutError,
    InternalServerError,
    RateLimitError,
)

from firmbox.core.errors import ErrorContext, ModelProviderError

logger = logging.getLogger(__name__)


class AnthropicTextClient:
    """Single-shot text completion over the Anthropic Messages API."""

    def __init__(self, api_key: str, timeout_seconds: int = 60):
        self.client = anthropic.AsyncAnthropic(
            api_key=api_key,
            timeout=timeout_seconds,
            max_retries=0,
        )

    async def complete(
        self,
        *,
        model: str,
        prompt: str,
        max_tokens: int,
        temperature: float,
        context: ErrorContext | None = None,
    ) -> str | None:
        """Send prompt as a single user message and return the completion text."""
        try:
            response = await self.client.messages.create(
                model=model,
                max_tokens=max_tokens,
                temperature=temperature,
                messages=[{"role": "user", "content": prompt}],
            )
        except RateLimitError as e:
            raise ModelProviderError(str(e), "rate_limit", context=context)
        except APITimeoutError:
            raise ModelProviderError("API timeout", "timeout", context=context)
        except APIConnectionError as e:
            raise ModelProviderError(str(e), "connection_error", context=context)
        except InternalServerError as e:
            raise ModelProviderError(str(e), "server_error", context=context)
        except APIStatusError as e:
            raise ModelProviderError(
                f"HTTP {e.status_code}: {e}", "client_error", context=context,
            )
        except APIError as e:
            raise ModelProviderError(str(e), "unknown", context=context)

        self._log_success(response, model, context)
        return extract_text(response)

    async def close(self) -> None:
        await self.client.close()

    def _log_success(
        self, response, model: str, context: ErrorContext | None,
    ) -> None:
        """Log successful API call with token usage."""
        usage = getattr(response, "usage", None)
        logger.info(
            "Anthropic API success",
            extra={
                "endpoint": context.endpoint if context else None,
                "model": model,
                "input_tokens": getattr(usage, "input_tokens", None),
                "output_tokens": getattr(usage, "output_tokens", None),
            },
        )


def extract_text(response) -> str | None:
    """Return the text of the first text block, or None if there is none."""
    for block in getattr(response, "content", None) or []:
        if getattr(block, "type", None) == "text":
            return getattr(block, "text", None)
    return None
