"""API test fixtures — fake text client + FastAPI test client.

Invariants:
    - get_text_client dependency overridden with a MockTextClient per test
    - The real GenerationService / DocumentLinkService run behind the routes
    - dependency_overrides cleared after every test

Design Decisions:
    - Override at the client boundary, not the service: routes, services, prompts and
      error translation all run for real
    - ASGITransport without lifespan: no real AsyncAnthropic is constructed
"""

import pytest
from httpx import ASGITransport, AsyncClient

from firmbox.api.deps import get_text_client
from firmbox.main import app

from tests.services.mock_anthropic import MockTextClient


@pytest.fixture
def text_client():
    """MockTextClient with no results configured; tests call .queue()."""
    return MockTextClient([])


@pytest.fixture
async def client(text_client):
    """FastAPI test client with the text client overridden."""
    app.dependency_overrides[get_text_client] = lambda: text_client

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
