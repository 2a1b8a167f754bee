"""Shared pytest fixtures for the StockSeed test suite.

The module-level environment setup runs at collection time, before any
``stockseed.*`` module is imported, so pydantic-settings never picks up a
real ``DATABASE_URL`` from the developer's ``.env``.

Fixture scopes
--------------
* ``engine``        — function: in-memory SQLite engine with all tables created.
  Foreign keys are enforced on every SQLite connection the suite opens.
* ``session``       — function: ``AsyncSession`` bound to ``engine``.
* ``sqlite_url``    — function: file-backed SQLite URL with all tables created,
  for code that builds its own engine.
* ``csv_transport`` — function: factory for ``httpx.MockTransport`` serving a body.
"""

import os
from collections.abc import AsyncGenerator, Callable
from pathlib import Path

import httpx
import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

# ---------------------------------------------------------------------------
# Environment bootstrap — must run before any ``stockseed.*`` import
# ---------------------------------------------------------------------------

os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["SEED_CSV_URL"] = "https://example.test/products.csv"

CSV_URL = "https://example.test/products.csv"

SAMPLE_CSV = (
    "product_id,product_name,category,units_sold\n"
    "A,Widget,X,10\n"
    "A,Other,Y,20\n"
    "B,Gadget,Z,30\n"
)


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    """SQLite ignores foreign keys unless this pragma is set per connection.

    Registered on the ``Engine`` class so it also reaches the engines the
    runner builds for itself from ``sqlite_url``.  Every engine the suite
    connects is SQLite.
    """
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


async def _create_tables(engine: AsyncEngine) -> None:
    from stockseed.models.base import Base

    # Register every mapped table on Base.metadata
    import stockseed.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


# ---------------------------------------------------------------------------
# Database
# ---------------------------------------------------------------------------


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine]:
    """In-memory SQLite shared across connections via ``StaticPool``."""
    eng = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await _create_tables(eng)
    yield eng
    await eng.dispose()


@pytest.fixture
async def session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as sess:
        yield sess


@pytest.fixture
def sqlite_url(tmp_path: Path) -> str:
    """File-backed SQLite database with the schema created.

    The schema is created through a synchronous engine so the fixture works
    for async pipeline tests and for tests that call the blocking ``main()``.
    """
    from stockseed.models.base import Base

    import stockseed.models  # noqa: F401

    path = tmp_path / "stockseed.db"
    sync_engine = create_engine(f"sqlite:///{path}")
    Base.metadata.create_all(sync_engine)
    sync_engine.dispose()
    return f"sqlite+aiosqlite:///{path}"


# ---------------------------------------------------------------------------
# HTTP
# ---------------------------------------------------------------------------


@pytest.fixture
def csv_transport() -> Callable[..., httpx.MockTransport]:
    """Return a factory building a transport that answers every GET with *body*.

    Requests are recorded on ``transport.requests`` for assertions.
    """

    def _factory(body: str = SAMPLE_CSV, status_code: int = 200) -> httpx.MockTransport:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(
                status_code,
                text=body,
                headers={"content-type": "text/csv; charset=utf-8"},
            )

        transport = httpx.MockTransport(handler)
        transport.requests = requests  # type: ignore[attr-defined]
        return transport

    return _factory


@pytest.fixture
def csv_url() -> str:
    return CSV_URL


@pytest.fixture
def sample_csv() -> str:
    return SAMPLE_CSV
