"""Root conftest — shared test configuration and FastAPI test client.

Invariants:
    - Every test gets its own app built from explicit Settings
    - Requests go through httpx ASGITransport (no network, no lifespan)
"""

import os

# Plain-text logs keep pytest's captured output readable
os.environ.setdefault("LOG_FORMAT", "text")

import pytest
from httpx import ASGITransport, AsyncClient

from users_api.config import Settings
from users_api.main import create_app


@pytest.fixture
def settings() -> Settings:
    return Settings(problem_details_enabled=True, log_format="text")


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
async def client(app):
    """Async client. Exceptions re-raised after the 500 response are not propagated."""
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
