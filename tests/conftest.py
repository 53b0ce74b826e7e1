"""
Test fixtures — an in-memory database per test and an HTTP client bound to
the real app.

Settings are read at import time, so the environment is prepared before
any application module is imported.
"""

import os

os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from database.models import Base  # noqa: E402
from database.session import get_db_session  # noqa: E402
from main import app  # noqa: E402


@pytest_asyncio.fixture()
async def session_factory():
    """Fresh in-memory schema; StaticPool keeps the single connection alive."""
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    try:
        yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    finally:
        await engine.dispose()


@pytest_asyncio.fixture()
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture()
async def client(session_factory):
    """HTTP client with the app's database swapped for the test database."""

    async def override_get_db_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


async def register(client, email: str, password: str = "pw", full_name: str = "Test User") -> str:
    """Create an account and return its access token."""
    resp = await client.post(
        "/create-account",
        json={"fullName": full_name, "email": email, "password": password},
    )
    assert resp.status_code == 201, resp.text
    return resp.json()["accessToken"]


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}
