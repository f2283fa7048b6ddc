"""Generation Service — validate, build prompt, call the model, return one field.

Invariants:
    - Required fields are checked before the provider is called
    - Exactly one provider call per successful validation
    - Missing completion text yields "" (never an error)
    - Output returned verbatim, except where the endpoint strips it (company name)
    - No state survives a call: the service holds only read-only collaborators

Design Decisions:
    - One generic handler driven by EndpointSpec over five copy-pasted handlers
    - Client injected (constructed once in the lifespan) so tests pass a mock
"""

from collections.abc import Mapping

from firmbox.core.domain_types import FunctionName, Locale
from firmbox.core.endpoints import get_endpoint
from firmbox.core.errors import ErrorContext
from firmbox.core.language_strings import get_message
from firmbox.core.prompts import render_prompt
from firmbox.core.validation import require_fields
from firmbox.infrastructure.anthropic_client import AnthropicTextClient
from firmbox.services.error_translation import translate_failures


class GenerationService:
    """Runs any generation endpoint against the shared text client."""

    def __init__(
        self, client: AnthropicTextClient, model: str, locale: Locale = Locale.PL,
    ):
        self.client = client
        self.model = model
        self.locale = locale

    async def generate(
        self, function: FunctionName, fields: Mapping[str, object],
    ) -> dict[str, str]:
        endpoint = get_endpoint(function)
        context = ErrorContext(endpoint=function.value)
        failure_message = get_message(endpoint.failure_message, self.locale)

        with translate_failures(failure_message, context):
            require_fields(
                fields, endpoint.required,
                get_message(endpoint.missing_message, self.locale), context,
            )
            prompt = render_prompt(function, self.locale, fields)
            text = await self.client.complete(
                model=self.model,
                prompt=prompt,
                max_tokens=endpoint.max_tokens,
                temperature=endpoint.temperature,
                context=context,
            )

        text = text or ""
        if endpoint.strip_output:
            text = text.strip()
        return {endpoint.output_field: text}
