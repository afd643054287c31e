"""Service test fixtures — async in-memory SQLite database + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test session factory
    - authenticate overridden so route tests exercise persistence, not credentials

Design Decisions:
    - SQLite in-memory with StaticPool: one shared connection, so every session
      sees the same database; PostgreSQL-specific features are not exercised here
"""

import pytest
from fastapi import Request
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from app.api.guards import authenticate
from app.core.domain_types import AuthUser
from app.db.base import Base
from app.db.session import create_session_factory
from app.infrastructure.database import get_db
from app.main import app
from app.models.address import Address
from app.models.customer import Customer


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return create_session_factory(engine=test_engine)


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_session_factory):
    """FastAPI test client with DB dependency and authentication overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    async def override_authenticate(request: Request) -> AuthUser:
        user = AuthUser(username="test", roles=("user",))
        request.state.user = user
        return user

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[authenticate] = override_authenticate

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def seed_address(test_db):
    address = Address(address_1="742 Evergreen Terrace", city="Springfield", zip=49007)
    test_db.add(address)
    await test_db.commit()
    await test_db.refresh(address)
    return address


@pytest.fixture
async def seed_customers(test_db, seed_address):
    """Three customers; Ada and Grace live at seed_address."""
    customers = [
        Customer(first_name="Ada", last_name="Lovelace", email="ada@example.com",
                 address_id=seed_address.id),
        Customer(first_name="Grace", last_name="Hopper", email="grace@example.com",
                 address_id=seed_address.id),
        Customer(first_name="Alan", last_name="Turing", email="alan@example.com"),
    ]
    test_db.add_all(customers)
    await test_db.commit()
    for customer in customers:
        await test_db.refresh(customer)
    return customers
