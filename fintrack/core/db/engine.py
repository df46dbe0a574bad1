import contextlib
import logging
from typing import Any, AsyncGenerator, AsyncIterator

from fastapi import Request
from sqlalchemy.engine import URL
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

logger = logging.getLogger(__name__)


class Database:
    """
    Owns the async engine (connection pool) and the session factory.
    Built once at startup and handed to the app, never created per request.
    """

    def __init__(self, url: str | URL, engine_kwargs: dict[str, Any] | None = None):
        engine_kwargs = dict(engine_kwargs or {})
        # Replace connections that died while idle instead of failing on them
        engine_kwargs.setdefault("pool_pre_ping", True)
        self._engine: AsyncEngine | None = create_async_engine(url, **engine_kwargs)
        self._sessionmaker: async_sessionmaker[AsyncSession] | None = (
            async_sessionmaker(
                self._engine,
                class_=AsyncSession,
                expire_on_commit=False,
                autoflush=False,
            )
        )

    async def close(self) -> None:
        if self._engine is None:
            raise RuntimeError("Database is not initialized")
        await self._engine.dispose()
        self._engine = None
        self._sessionmaker = None
        logger.info("Database engine disposed")

    @contextlib.asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        if self._sessionmaker is None:
            raise RuntimeError("Database is not initialized")

        session = self._sessionmaker()
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Database session - NEW per request, taken from the Database on app.state.
    Automatically commits/rollbacks and closes
    """
    database: Database = request.app.state.database
    async with database.session() as session:
        yield session
