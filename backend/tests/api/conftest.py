"""API test fixtures — FastAPI app behind an in-process httpx client.

Invariants:
    - No network: requests go through ASGITransport
    - Settings cache cleared around each test so env overrides apply
"""

import pytest
from httpx import ASGITransport, AsyncClient

from leapyear.config import get_settings
from leapyear.main import app


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
async def client():
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
