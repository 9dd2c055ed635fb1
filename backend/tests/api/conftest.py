"""API test fixtures — FastAPI app driven through httpx.

Invariants:
    - No network: ASGITransport calls the app in-process
    - dependency_overrides cleared after every test
"""

import pytest
from httpx import ASGITransport, AsyncClient

from fuelmix.main import app


@pytest.fixture
async def client():
    """FastAPI test client."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
