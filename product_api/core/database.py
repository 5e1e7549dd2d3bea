import logging
from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel

from product_api.config import settings

logger = logging.getLogger(__name__)

# One engine per process. Each request checks a connection out of this pool
# and returns it when the request ends, so the number of connections held
# against the store is bounded by pool_size + max_overflow.
engine = create_async_engine(
    settings.postgres_url,
    echo=settings.debug,
    future=True,
    pool_size=settings.db_pool_size,
    max_overflow=settings.db_max_overflow,
    pool_pre_ping=True,  # Detects stale connections before use
    pool_recycle=settings.db_pool_recycle,
    pool_timeout=settings.db_pool_timeout,
    connect_args={
        "command_timeout": settings.db_command_timeout,
    },
)

async_session_maker = sessionmaker(  # type: ignore[call-overload]
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency that yields an async database session.

    The session is committed when the request handler returns and rolled
    back when it raises. Either way the connection goes back to the pool.
    """
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def init_db() -> None:
    """Create missing tables (development only - the schema is owned by the DBA)."""
    # Imported for its side effect of registering the table on SQLModel.metadata
    from product_api.models import Product  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("Database tables ensured")


async def close_db() -> None:
    """Dispose of the connection pool."""
    await engine.dispose()
