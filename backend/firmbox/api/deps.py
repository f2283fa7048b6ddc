"""Route Dependencies — hand the process-wide client and settings to handlers.

Invariants:
    - The text client is created once in the lifespan and read from app.state
    - Services are built per request from read-only collaborators (no shared mutable state)
"""

from fastapi import Depends, Request

from firmbox.config import Settings, get_settings
from firmbox.infrastructure.anthropic_client import AnthropicTextClient
from firmbox.services.document_link import DocumentLinkService
from firmbox.services.generation import GenerationService


def get_text_client(request: Request) -> AnthropicTextClient:
    client = getattr(request.app.state, "text_client", None)
    if client is None:
        raise RuntimeError("Text client not initialised (lifespan did not run)")
    return client


def get_generation_service(
    client: AnthropicTextClient = Depends(get_text_client),
    settings: Settings = Depends(get_settings),
) -> GenerationService:
    return GenerationService(
        client, settings.generation_model, settings.prompt_locale,
    )


def get_document_link_service(
    settings: Settings = Depends(get_settings),
) -> DocumentLinkService:
    return DocumentLinkService(settings.pdf_base_url, settings.prompt_locale)
