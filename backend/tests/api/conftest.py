"""API test fixtures — FastAPI test client over the in-memory test DB.

Invariants:
    - get_db dependency overridden to use the test session factory
    - Tokens are signed with the test secret (SECRET_KEY from root conftest)
"""

import pytest
from httpx import ASGITransport, AsyncClient

from jobly.infrastructure.database import get_db
from jobly.main import app

from tests.api.auth_tokens import bearer


@pytest.fixture
def admin_headers():
    return bearer("admin", is_admin=True)


@pytest.fixture
def user_headers():
    return bearer("u1")


@pytest.fixture
async def client(test_session_factory, seeded):
    """FastAPI test client with DB dependency overridden and seed data loaded."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
