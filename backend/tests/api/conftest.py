"""Controller test fixtures — stubbed services behind an overridden auth guard.

Invariants:
    - `authenticate` replaced by a guard that attaches roles=["user"] and allows
    - Services are stubbed per test module through app.dependency_overrides
    - Overrides are cleared after every test

Design Decisions:
    - No database: controllers are verified against the service contract only
"""

import pytest
from fastapi import Request
from httpx import ASGITransport, AsyncClient

from app.api.guards import authenticate
from app.core.domain_types import AuthUser
from app.main import app


async def fake_authenticate(request: Request) -> AuthUser:
    user = AuthUser(username="test", roles=("user",))
    request.state.user = user
    return user


@pytest.fixture
def stub_app():
    """The app with authentication overridden; tests add service overrides."""
    app.dependency_overrides[authenticate] = fake_authenticate
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def api_client(stub_app):
    async with AsyncClient(
        transport=ASGITransport(app=stub_app), base_url="http://test",
    ) as c:
        yield c
