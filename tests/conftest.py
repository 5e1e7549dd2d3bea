"""Root conftest — test infrastructure for all backend tests.

Provides:
- In-memory SQLite engine with the products table created (real SQL, nothing persists)
- db_session fixture bound to that engine
- Seed product fixture
- API client with the database dependency overridden
- API client that keeps the real get_db session scope
"""

from __future__ import annotations

from unittest.mock import patch

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

from product_api.models.product import Product, ProductCreate

# ─────────────────────────────────────────────────────────────────────────────
# Engine / Session
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
async def test_engine():
    """A fresh in-memory database per test.

    StaticPool keeps the single connection alive, otherwise every checkout
    would see a new, empty :memory: database.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all, tables=[Product.__table__])
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
async def db_session(test_engine):
    """Database session on the in-memory engine."""
    async with AsyncSession(test_engine, expire_on_commit=False) as session:
        yield session


@pytest.fixture
async def test_product(db_session: AsyncSession):
    """A product inserted through the domain layer."""
    from product_api.domain.product_operations import product_ops

    product = await product_ops.create_product(
        db_session,
        ProductCreate(pname="Widget", pdesc="A widget", mrp=100, stBidPrice=50),
    )
    await db_session.flush()
    return product


# ─────────────────────────────────────────────────────────────────────────────
# API Client
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
async def api_client(db_session: AsyncSession):
    """HTTP client that routes every request through the test session.

    Overrides: get_db
    """
    from product_api.core.database import get_db
    from product_api.main import app

    async def override_db():
        yield db_session

    app.dependency_overrides[get_db] = override_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
async def committing_api_client(test_engine):
    """HTTP client that keeps the real get_db, bound to the in-memory engine.

    Each request gets its own session and goes through the production
    commit/rollback scope.
    """
    from sqlalchemy.orm import sessionmaker

    from product_api.main import app

    session_maker = sessionmaker(  # type: ignore[call-overload]
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )

    with patch("product_api.core.database.async_session_maker", session_maker):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
