"""Boundary Protocols - contracts between core and shell.

Invariants:
    - Core NEVER imports from shell - dependency arrows point inward only
    - The audit write is reachable only through AuditLogRepository.add_many
    - Implementations provided by the host via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, ORM models and plain test doubles
      both satisfy RecordLike without inheriting from anything
    - Async in Protocol: add_many does IO, but the core functions that decide
      what to write are never async themselves
"""

from typing import Protocol, Sequence
from uuid import UUID

from value_audit.core.audit_entries import LogEntryDraft
from value_audit.core.domain_types import RecordValue


class RecordLike(Protocol):
    """Structural contract for records flowing through the pipeline.

    id is None until the persistence layer assigns it.
    """
    id: UUID | None
    value: RecordValue | None
    is_high_value: bool


class AuditLogRepository(Protocol):
    """Contract for audit log persistence - implemented by the host.

    add_many must be all-or-nothing: on failure it raises PersistenceError
    and no entry from the call is observable.
    """
    async def add_many(self, entries: Sequence[LogEntryDraft]) -> None: ...
