"""API test fixtures — FastAPI app over ASGITransport with a scripted upstream.

Invariants:
    - get_wp_client dependency overridden with FakeWordPressClient per test
    - Lifespan never runs: no real httpx client, no network
"""

import pytest
from httpx import ASGITransport, AsyncClient

from wp_frontend.infrastructure.wordpress_client import get_wp_client
from wp_frontend.main import app

from tests.mock_wordpress import FakeWordPressClient


@pytest.fixture
def wp():
    return FakeWordPressClient()


@pytest.fixture
async def client(wp):
    app.dependency_overrides[get_wp_client] = lambda: wp
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
