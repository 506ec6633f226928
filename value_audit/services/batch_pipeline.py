"""Batch Pipeline - the four lifecycle entry points the host dispatches to.

Invariants:
    - Before phases only (re)compute is_high_value; they never log
    - After phases validate the WHOLE batch, then detect, then write once
    - Every flag is assigned before detection; detection finishes before the write
    - A failure in any step propagates; the host's unit of work rolls back

Design Decisions:
    - Before phases are sync (pure computation), after phases are async because
      they end in the single audit write
    - on_before_update ignores prior state: the flag is always recomputed
      from the current value, never merged with the old flag
    - Duplicate identities in one batch are evaluated per occurrence against
      the same prior snapshot
"""

import logging
from typing import Sequence

from value_audit.core.classify import HIGH_VALUE_THRESHOLD, classify
from value_audit.core.detect_transition import is_newly_high_value
from value_audit.core.domain_types import (
    Operation, Phase, PriorState, RecordId, RecordValue,
)
from value_audit.core.enforce_batch import (
    require_batch, require_identities, require_prior_entries, require_prior_state,
)
from value_audit.core.errors import ErrorContext, ValueAuditError
from value_audit.core.repository_protocols import RecordLike
from value_audit.services.audit_logger import AuditLogger

logger = logging.getLogger(__name__)


class BatchPipeline:
    """Classifies records and audits transitions into high-value, per batch."""

    def __init__(
        self,
        audit_logger: AuditLogger,
        threshold: RecordValue = HIGH_VALUE_THRESHOLD,
    ):
        self._audit_logger = audit_logger
        self._threshold = threshold

    @property
    def threshold(self) -> RecordValue:
        return self._threshold

    # ─── Before phases ──────────────────────────────────────────

    def on_before_create(self, batch: Sequence[RecordLike]) -> None:
        context = _context(Phase.BEFORE, Operation.CREATE, batch)
        require_batch(batch, context)
        self._classify_batch(batch)

    def on_before_update(
        self, batch: Sequence[RecordLike], prior: PriorState | None = None,
    ) -> None:
        context = _context(Phase.BEFORE, Operation.UPDATE, batch)
        require_batch(batch, context)
        self._classify_batch(batch)

    # ─── After phases ───────────────────────────────────────────

    async def on_after_create(self, batch: Sequence[RecordLike]) -> list[RecordId]:
        """Log every created record that is high-value. Returns the logged ids."""
        context = _context(Phase.AFTER, Operation.CREATE, batch)
        require_batch(batch, context)
        require_identities(batch, context)
        events = [
            record.id for record in batch
            if is_newly_high_value(None, record.is_high_value)
        ]
        await self._write(events, context)
        return events

    async def on_after_update(
        self, batch: Sequence[RecordLike], prior: PriorState | None,
    ) -> list[RecordId]:
        """Log every record that moved from not-high-value to high-value."""
        context = _context(Phase.AFTER, Operation.UPDATE, batch)
        require_batch(batch, context)
        require_prior_state(prior, context)
        require_identities(batch, context)
        require_prior_entries(batch, prior, context)
        events = [
            record.id for record in batch
            if is_newly_high_value(prior[record.id], record.is_high_value)
        ]
        await self._write(events, context)
        return events

    # ─── Internals ──────────────────────────────────────────────

    def _classify_batch(self, batch: Sequence[RecordLike]) -> None:
        for record in batch:
            record.is_high_value = classify(record.value, self._threshold)

    async def _write(self, events: list[RecordId], context: ErrorContext) -> None:
        extra = {
            "phase": context.phase,
            "operation": context.operation,
            "batch_size": context.batch_size,
            "event_count": len(events),
        }
        try:
            await self._audit_logger.log_events(events)
        except ValueAuditError as e:
            e.context.phase = e.context.phase or context.phase
            e.context.operation = e.context.operation or context.operation
            e.context.batch_size = e.context.batch_size or context.batch_size
            logger.error(
                f"Audit write failed: {e.message}",
                extra={**extra, "error_code": e.code},
            )
            raise
        logger.info(
            f"Audited {len(events)} high-value transition(s) "
            f"in batch of {context.batch_size}",
            extra=extra,
        )


def _context(
    phase: Phase, operation: Operation, batch: Sequence[RecordLike] | None,
) -> ErrorContext:
    return ErrorContext(
        phase=phase.value,
        operation=operation.value,
        batch_size=len(batch) if batch is not None else None,
    )
