"""SQL Audit Log Repository - bulk insert of audit entries through SQLAlchemy.

Invariants:
    - add_many issues one add_all + one flush per call (one round-trip per batch)
    - On any SQLAlchemy failure the rows are discarded and PersistenceError raised;
      the enclosing unit of work then rolls back, so no entry is observable
    - Never commits: the host's unit of work owns the transaction

Design Decisions:
    - flush over commit: entries must be durable together with the record
      mutation that produced them, or not at all
    - SQL drivers do not report which row of a multi-row insert failed, so
      rejected_entries is None and the whole call fails
"""

import logging
from typing import Sequence

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from value_audit.core.audit_entries import LogEntryDraft
from value_audit.core.errors import PersistenceError
from value_audit.models.audit_log_entry import AuditLogEntry

logger = logging.getLogger(__name__)


class SqlAuditLogRepository:
    """AuditLogRepository implementation backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def add_many(self, entries: Sequence[LogEntryDraft]) -> None:
        rows = [
            AuditLogEntry(record_id=entry.record_id, action=entry.action)
            for entry in entries
        ]
        self._db.add_all(rows)
        try:
            await self._db.flush()
        except IntegrityError as e:
            logger.error(f"Audit bulk insert rejected: {e.orig}")
            raise PersistenceError(
                "Integrity constraint violated", "bulk_insert",
            ) from e
        except SQLAlchemyError as e:
            logger.error(f"Audit bulk insert failed: {e}")
            raise PersistenceError(
                "Database operation failed", "bulk_insert",
            ) from e
