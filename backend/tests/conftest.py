"""Root conftest — shared test configuration and in-memory database fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database with foreign keys on
    - Seed data: companies c1..c3, jobs j1..j4 (all owned by c1)

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for repository
      and route tests (ILIKE is rewritten by the executor)
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("SECRET_KEY", "secret-test")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from jobly.db.base import Base  # noqa: E402
from jobly.infrastructure.database import (  # noqa: E402
    SqlAlchemyStatementExecutor, enable_sqlite_foreign_keys,
)
import jobly.models  # noqa: E402,F401

SEED_COMPANIES = [
    ("c1", "C1", "Desc1", 1, "http://c1.img"),
    ("c2", "C2", "Desc2", 2, "http://c2.img"),
    ("c3", "C3", "Desc3", 3, "http://c3.img"),
]

SEED_JOBS = [
    ("j1", 100, 0.1, "c1"),
    ("j2", 200, 0.2, "c1"),
    ("j3", 300, 0, "c1"),
    ("j4", None, None, "c1"),
]


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def executor(test_db):
    return SqlAlchemyStatementExecutor(test_db)


@pytest.fixture
async def seeded(executor):
    """Insert seed companies and jobs; returns {title: id} for the jobs."""
    for row in SEED_COMPANIES:
        await executor.execute(
            "INSERT INTO companies (handle, name, description, num_employees, logo_url) "
            "VALUES ($1, $2, $3, $4, $5)",
            list(row),
        )
    job_ids = {}
    for row in SEED_JOBS:
        rows = await executor.execute(
            "INSERT INTO jobs (title, salary, equity, company_handle) "
            "VALUES ($1, $2, $3, $4) RETURNING id",
            list(row),
        )
        job_ids[row[0]] = rows[0]["id"]
    return job_ids
