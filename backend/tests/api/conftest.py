"""API test fixtures — FastAPI test client with settings overridden.

Invariants:
    - get_settings dependency overridden per test (small limits, no .env)
    - Overrides cleared after every test
"""

import pytest
from httpx import ASGITransport, AsyncClient

from bazinga.config import Settings, get_settings
from bazinga.main import app


@pytest.fixture
def test_settings():
    return Settings(_env_file=None, max_word_length=20, max_batch_size=3)


@pytest.fixture
async def client(test_settings):
    """FastAPI test client with settings dependency overridden."""
    app.dependency_overrides[get_settings] = lambda: test_settings

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
