"""Shared fixtures: in-memory database, API client and a mocked WhatsApp webhook."""

import os

os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ.setdefault("ALLOWED_ORIGINS", "http://testserver")
os.environ.setdefault("SEED_DEMO_DATA", "false")

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import innflow.models  # noqa: F401
from innflow.core.database import Base, get_db
from innflow.core.security import AuthenticatedUser
from innflow.main import app
from innflow.models.enums import UserRole
from innflow.services.notifications import WhatsAppDispatcher, get_whatsapp_dispatcher


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


class Webhook:
    """Captures outbound webhook calls and answers with a configurable status."""

    def __init__(self):
        self.status_code = 200
        self.raise_error = False
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.raise_error:
            raise httpx.ConnectError("connection refused", request=request)
        return httpx.Response(self.status_code, json={"messages": [{"id": "wamid.test"}]})


@pytest.fixture
def webhook():
    return Webhook()


@pytest.fixture
def dispatcher(webhook):
    return WhatsAppDispatcher(
        timeout=1.0,
        api_token="test-token",
        transport=httpx.MockTransport(webhook.handler),
    )


@pytest_asyncio.fixture
async def client(session_factory, dispatcher):
    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_whatsapp_dispatcher] = lambda: dispatcher

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
        yield ac

    app.dependency_overrides.clear()


async def login(client: AsyncClient, role: UserRole, **identity) -> dict:
    response = await client.post("/v1/auth/login", json={"role": role.value, **identity})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest_asyncio.fixture
async def admin_headers(client):
    return await login(client, UserRole.BUSINESS_ADMIN)


@pytest_asyncio.fixture
async def staff_headers(client):
    return await login(client, UserRole.STAFF)


@pytest_asyncio.fixture
async def guest_headers(client):
    return await login(client, UserRole.GUEST)


@pytest_asyncio.fixture
async def developer_headers(client):
    return await login(client, UserRole.DEVELOPER)


@pytest_asyncio.fixture
async def room(client, admin_headers):
    """An active R100/night room."""
    response = await client.post(
        "/v1/rooms",
        json={"room_number": "101", "room_type": "Deluxe Suite", "capacity": 2, "price_per_night": "100.00"},
        headers=admin_headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
def actor():
    """A signed-in user for service-level tests."""
    return AuthenticatedUser(
        user_id=None,
        email="admin@innflow.com",
        name="Business admin",
        role=UserRole.BUSINESS_ADMIN,
    )

