"""Database Session Manager — async engine, per-request sessions, readiness probe.

Invariants:
    - A session that raises is rolled back before the error leaves get_db
    - Stale version writes surface as ConflictError; every other SQLAlchemy
      failure surfaces as DatabaseError naming the failed operation
    - sqlite URLs (tests) get no pool sizing; server databases get pre-ping and recycling

Design Decisions:
    - Module-level db_manager, created by init_db() in the FastAPI lifespan
    - expire_on_commit=False: ORM objects stay readable after commit without lazy loads
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import (
    DBAPIError, IntegrityError, OperationalError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)
from sqlalchemy.orm.exc import StaleDataError

from app.core.errors import ConflictError, DatabaseError

logger = logging.getLogger(__name__)

# Most specific first: IntegrityError and OperationalError are DBAPIError subclasses
_FAILURES: tuple[tuple[type[SQLAlchemyError], str, str], ...] = (
    (IntegrityError, "Integrity constraint violated", "commit"),
    (OperationalError, "Connection or operational error", "execute"),
    (DBAPIError, "Database driver error", "query"),
)


def _describe(exc: SQLAlchemyError) -> tuple[str, str]:
    for exc_type, message, operation in _FAILURES:
        if isinstance(exc, exc_type):
            return message, operation
    return "Database operation failed", "unknown"


class DatabaseSessionManager:
    """Owns the engine and hands out sessions that roll back on failure."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        engine_kwargs = {"pool_pre_ping": True}
        if not database_url.startswith("sqlite"):
            engine_kwargs.update(
                pool_size=pool_size, max_overflow=max_overflow, pool_recycle=3600,
            )
        self.engine = create_async_engine(database_url, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        session = self._session_factory()
        try:
            yield session
        except StaleDataError as e:
            await session.rollback()
            logger.warning(f"Stale write rejected: {e}")
            raise ConflictError("Resource was modified concurrently, retry the request")
        except SQLAlchemyError as e:
            await session.rollback()
            message, operation = _describe(e)
            logger.error(f"{message}: {e}")
            raise DatabaseError(message, operation)
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """True when a trivial query succeeds (readiness probe)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False


db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> None:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency: one session per request."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
