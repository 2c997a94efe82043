"""
Shared pytest fixtures for the payroll API tests.

Uses SQLite in-memory with StaticPool so all sessions share one connection,
meaning data written in one session is visible to others (important for HTTP client tests).
"""
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import StaticPool

import payroll_api.models  # noqa – registers all SQLAlchemy models with Base.metadata
from payroll_api.core.database import Base, get_db
from payroll_api.main import app
from payroll_api.models.employee import Employee

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


def _make_engine():
    return create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,          # single shared connection → all sessions see same data
    )


def _override_db(engine):
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    return override_get_db


# ── Shared engine (function-scoped: fresh DB per test) ───────────────────────

@pytest_asyncio.fixture
async def engine():
    """Creates a fresh in-memory SQLite engine per test with a shared connection pool."""
    eng = _make_engine()
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng

    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine) -> AsyncSession:
    """Async DB session for direct data inspection inside tests."""
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session


# ── HTTP client fixtures ──────────────────────────────────────────────────────

@pytest_asyncio.fixture
async def client(engine) -> AsyncClient:
    """
    FastAPI test client with get_db overridden to use the test engine.
    Each request gets its own session but shares the same underlying
    connection via StaticPool.
    """
    app.dependency_overrides[get_db] = _override_db(engine)

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def broken_client() -> AsyncClient:
    """Client whose database has no tables, so every query fails in the driver."""
    eng = _make_engine()
    app.dependency_overrides[get_db] = _override_db(eng)

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    await eng.dispose()


# ── Data fixtures ─────────────────────────────────────────────────────────────

@pytest_asyncio.fixture
async def employee(db) -> Employee:
    e = Employee(
        name="Ben",
        position="Accountant",
        department="Finance",
        monthly_salary=1200.0,
    )
    db.add(e)
    await db.commit()
    await db.refresh(e)
    return e
