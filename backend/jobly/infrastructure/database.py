"""Database Session Manager — async connection pool plus the statement executor.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - Connection pool uses pool_pre_ping for stale connection detection
    - SQLAlchemy exceptions mapped to DatabaseError (core/errors.py);
      IntegrityError mapped to the specific StoreConstraintError subclass
    - Each executed statement is committed on its own; no multi-statement transactions

Design Decisions:
    - Singleton db_manager initialized on startup: FastAPI lifespan manages lifecycle
    - expire_on_commit=False: prevents lazy-load issues in async context
    - SQLite (tests, local dev) gets foreign keys switched on per connection and
      ILIKE rewritten to LIKE, which SQLite already matches case-insensitively
"""

import logging
import re
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Sequence

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)

from jobly.core.errors import (
    CheckViolationError,
    DatabaseError,
    ForeignKeyViolationError,
    StoreConstraintError,
    UniqueViolationError,
)

logger = logging.getLogger(__name__)

_PLACEHOLDER = re.compile(r"\$(\d+)")
_ILIKE = re.compile(r"\bILIKE\b")

# SQLSTATE class 23 codes (PostgreSQL)
_SQLSTATE_ERRORS: dict[str, type[StoreConstraintError]] = {
    "23505": UniqueViolationError,
    "23503": ForeignKeyViolationError,
    "23514": CheckViolationError,
}

# SQLite has no SQLSTATE; its messages are stable
_SQLITE_MESSAGES: dict[str, type[StoreConstraintError]] = {
    "UNIQUE constraint failed": UniqueViolationError,
    "FOREIGN KEY constraint failed": ForeignKeyViolationError,
    "CHECK constraint failed": CheckViolationError,
}


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """SQLite ignores REFERENCES unless the pragma is set on every connection."""

    @event.listens_for(engine.sync_engine, "connect")
    def _set_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def classify_integrity_error(exc: IntegrityError) -> StoreConstraintError:
    """Map a driver IntegrityError onto the store constraint it violated."""
    orig = exc.orig
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    # asyncpg keeps constraint_name on the driver error the adapter wraps
    constraint = getattr(orig, "constraint_name", None) or getattr(
        orig.__cause__, "constraint_name", None,
    )
    message = str(orig)
    if sqlstate in _SQLSTATE_ERRORS:
        return _SQLSTATE_ERRORS[sqlstate](message, constraint)
    for fragment, error_cls in _SQLITE_MESSAGES.items():
        if fragment in message:
            return error_cls(message, constraint)
    return StoreConstraintError(message, constraint)


def to_named_binds(
    statement: str, values: Sequence[Any],
) -> tuple[str, dict[str, Any]]:
    """'$1', '$2' -> ':p1', ':p2' with a matching params dict."""
    sql = _PLACEHOLDER.sub(lambda m: f":p{m.group(1)}", statement)
    params = {f"p{idx}": value for idx, value in enumerate(values, start=1)}
    return sql, params


class SqlAlchemyStatementExecutor:
    """StatementExecutor over an AsyncSession."""

    def __init__(self, session: AsyncSession):
        self._session = session

    @property
    def dialect_name(self) -> str:
        return self._session.get_bind().dialect.name

    async def execute(
        self, statement: str, values: Sequence[Any] = (),
    ) -> list[dict[str, Any]]:
        sql, params = to_named_binds(statement, values)
        if self.dialect_name == "sqlite":
            sql = _ILIKE.sub("LIKE", sql)
        try:
            result = await self._session.execute(text(sql), params)
            rows = [dict(row) for row in result.mappings().all()] if result.returns_rows else []
            await self._session.commit()
        except IntegrityError as e:
            await self._session.rollback()
            error = classify_integrity_error(e)
            logger.info(
                f"Store rejected statement: {type(error).__name__}",
                extra={"error_code": error.code},
            )
            raise error from e
        return rows


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        self.engine = create_async_engine(
            database_url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_pre_ping=True,
            pool_recycle=3600,
        )
        if self.engine.dialect.name == "sqlite":
            enable_sqlite_foreign_keys(self.engine)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except IntegrityError as e:
            await session.rollback()
            logger.error(f"DB integrity error: {e}")
            raise classify_integrity_error(e)
        except OperationalError as e:
            await session.rollback()
            logger.error(f"DB operational error: {e}")
            raise DatabaseError("Connection or operational error", "execute")
        except DBAPIError as e:
            await session.rollback()
            logger.error(f"DB driver error: {e}")
            raise DatabaseError("Database driver error", "query")
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"SQLAlchemy error: {e}")
            raise DatabaseError("Database operation failed", "unknown")
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False


# Singleton (initialized on startup)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs):
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
