"""Audit Entry Construction - turns detected transitions into log-entry drafts.

Invariants:
    - One draft per identity, in input order (duplicates kept, one per occurrence)
    - Every draft carries the same action label
    - Drafts are frozen: entries are append-only once built
"""

from dataclasses import dataclass
from typing import Iterable

from value_audit.core.domain_types import DEFAULT_AUDIT_ACTION_LABEL, RecordId


@dataclass(frozen=True)
class LogEntryDraft:
    """A log entry awaiting persistence. created_at is assigned by storage."""
    record_id: RecordId
    action: str = DEFAULT_AUDIT_ACTION_LABEL


def build_log_entries(
    record_ids: Iterable[RecordId], action: str = DEFAULT_AUDIT_ACTION_LABEL,
) -> list[LogEntryDraft]:
    return [LogEntryDraft(record_id=rid, action=action) for rid in record_ids]
