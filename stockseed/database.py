import ssl as _ssl
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from urllib.parse import parse_qs, urlencode, urlsplit, urlunsplit

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine


def normalize_database_url(url: str) -> str:
    """Ensure Postgres URLs use the asyncpg driver."""
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql+asyncpg://", 1)
    return url


def _asyncpg_url(url: str) -> tuple[str, dict]:
    """Convert a database URL for asyncpg compatibility.

    asyncpg does not accept ``sslmode`` as a query parameter; it expects
    ``ssl`` to be passed via ``connect_args``.  This helper strips
    ``sslmode`` from the URL and returns the cleaned URL plus any extra
    ``connect_args`` needed.
    """
    parts = urlsplit(url)
    qs = parse_qs(parts.query)
    connect_args: dict = {}

    if "sslmode" in qs:
        mode = qs.pop("sslmode")[0]
        if mode in ("require", "verify-ca", "verify-full"):
            connect_args["ssl"] = _ssl.create_default_context()
        new_query = urlencode(qs, doseq=True)
        url = urlunsplit(parts._replace(query=new_query))

    return url, connect_args


def build_engine(database_url: str) -> AsyncEngine:
    url, connect_args = _asyncpg_url(normalize_database_url(database_url))
    return create_async_engine(
        url,
        pool_pre_ping=True,
        connect_args=connect_args,
    )


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@asynccontextmanager
async def database_session(database_url: str) -> AsyncGenerator[async_sessionmaker[AsyncSession]]:
    """Yield a session factory bound to a fresh engine.

    The engine is disposed when the block exits, whether it completes or raises.
    """
    engine = build_engine(database_url)
    try:
        yield build_session_factory(engine)
    finally:
        await engine.dispose()
