"""Audit Logger - turns detected transitions into one bulk audit write.

Invariants:
    - Empty input performs NO repository call
    - Non-empty input performs exactly ONE add_many call, whatever its size
    - Repository failures propagate unchanged (PersistenceError); no retry here

Design Decisions:
    - Entry construction delegated to core/audit_entries (pure), IO to the
      injected AuditLogRepository
"""

import logging
from typing import Sequence

from value_audit.core.audit_entries import build_log_entries
from value_audit.core.domain_types import DEFAULT_AUDIT_ACTION_LABEL, RecordId
from value_audit.core.repository_protocols import AuditLogRepository

logger = logging.getLogger(__name__)


class AuditLogger:
    """Bulk-safe writer of "entered high-value" audit entries."""

    def __init__(
        self,
        repository: AuditLogRepository,
        action_label: str = DEFAULT_AUDIT_ACTION_LABEL,
    ):
        self._repository = repository
        self._action_label = action_label

    @property
    def action_label(self) -> str:
        return self._action_label

    async def log_events(self, record_ids: Sequence[RecordId]) -> int:
        """Persist one entry per identity. Returns the number of entries written."""
        if not record_ids:
            return 0
        entries = build_log_entries(record_ids, self._action_label)
        await self._repository.add_many(entries)
        logger.debug(
            f"Wrote {len(entries)} audit entr(ies)",
            extra={"event_count": len(entries)},
        )
        return len(entries)
