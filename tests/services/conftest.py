"""Service test fixtures - fake audit repository, record factory, async SQLite DB.

Invariants:
    - Every test gets a fresh in-memory SQLite database with foreign keys enforced
    - FakeAuditRepository records every add_many call so tests can assert
      "exactly one write per batch"
    - FakeAuditRepository is all-or-nothing: a failing call stores no rows

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for the
      bulk-insert and rollback behaviour under test
    - db_manager built with __new__: StaticPool engines reject pool sizing kwargs
"""

from dataclasses import dataclass
from uuid import UUID, uuid4

import pytest
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)
from sqlalchemy.pool import StaticPool

import value_audit.models  # noqa: F401
from value_audit.db.base import Base
from value_audit.infrastructure.database import DatabaseSessionManager
from value_audit.services.audit_logger import AuditLogger
from value_audit.services.batch_pipeline import BatchPipeline


@dataclass
class FakeRecord:
    value: object
    id: UUID | None = None
    is_high_value: bool = False


class FakeAuditRepository:
    """In-memory AuditLogRepository. Set fail_with to reject the next writes."""

    def __init__(self):
        self.calls = []
        self.rows = []
        self.fail_with = None

    async def add_many(self, entries):
        self.calls.append(list(entries))
        if self.fail_with is not None:
            raise self.fail_with
        self.rows.extend(entries)


@pytest.fixture
def make_record():
    """Factory: make_record(value, saved=True, is_high_value=False)."""
    def _make(value, saved=True, is_high_value=False):
        return FakeRecord(
            value=value,
            id=uuid4() if saved else None,
            is_high_value=is_high_value,
        )
    return _make


@pytest.fixture
def audit_repo():
    return FakeAuditRepository()


@pytest.fixture
def audit_logger(audit_repo):
    return AuditLogger(audit_repo)


@pytest.fixture
def pipeline(audit_logger):
    return BatchPipeline(audit_logger)


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def db_manager(test_engine):
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )
    return manager
