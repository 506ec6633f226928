"""Record Mutations - reference host that drives the pipeline around SQL writes.

Invariants:
    - Dispatch order: before phase -> flush (identities assigned) -> after phase
    - Prior state is snapshotted from the stored flags BEFORE new values apply
    - Never commits: the caller's unit of work commits or rolls back everything,
      records and audit entries together

Design Decisions:
    - Plain async functions taking the session and pipeline: the host owns the
      transaction, these only sequence the phases inside it
"""

import logging
from dataclasses import dataclass
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from value_audit.config import Settings
from value_audit.core.domain_types import RecordId, RecordValue
from value_audit.core.errors import ContractViolationError, ErrorContext
from value_audit.infrastructure.audit_log_repository import SqlAuditLogRepository
from value_audit.models.business_record import BusinessRecord
from value_audit.services.audit_logger import AuditLogger
from value_audit.services.batch_pipeline import BatchPipeline

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValueChange:
    """New value for an existing record."""
    record_id: RecordId
    value: RecordValue | None


def build_sql_pipeline(db: AsyncSession, settings: Settings) -> BatchPipeline:
    """Wire a pipeline whose audit writes go through the given session."""
    audit_logger = AuditLogger(
        SqlAuditLogRepository(db), settings.audit_action_label,
    )
    return BatchPipeline(audit_logger, settings.high_value_threshold)


async def create_records(
    db: AsyncSession,
    pipeline: BatchPipeline,
    records: Sequence[BusinessRecord],
) -> list[RecordId]:
    """Insert records and audit the high-value ones. Returns audited ids."""
    pipeline.on_before_create(records)
    db.add_all(records)
    await db.flush()
    return await pipeline.on_after_create(records)


async def update_records(
    db: AsyncSession,
    pipeline: BatchPipeline,
    changes: Sequence[ValueChange],
) -> list[RecordId]:
    """Apply value changes and audit records that became high-value."""
    ids = {change.record_id for change in changes}
    result = await db.execute(
        select(BusinessRecord).where(BusinessRecord.id.in_(list(ids))),
    )
    loaded = {record.id: record for record in result.scalars()}

    unknown = [rid for rid in ids if rid not in loaded]
    if unknown:
        raise ContractViolationError(
            f"{len(unknown)} record(s) to update do not exist.",
            record_ids=unknown,
            context=ErrorContext(operation="update", batch_size=len(changes)),
        )

    prior = {rid: record.is_high_value for rid, record in loaded.items()}
    batch = [loaded[change.record_id] for change in changes]
    for change, record in zip(changes, batch):
        record.value = change.value

    pipeline.on_before_update(batch, prior)
    await db.flush()
    logger.debug(
        f"Flushed {len(batch)} updated record(s)",
        extra={"operation": "update", "batch_size": len(batch)},
    )
    return await pipeline.on_after_update(batch, prior)
