"""AuditLogEntry ORM - append-only trail of records entering the high-value state.

Invariants:
    - Rows are inserted by SqlAuditLogRepository only, never updated or deleted
    - record_id references an existing business record
    - created_at is assigned by the database (server default) at insert time
"""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from value_audit.db.base import Base


class AuditLogEntry(Base):
    """Audit log entry - one row per transition into high-value."""
    __tablename__ = "audit_log_entries"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    record_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("business_records.id"), nullable=False,
    )
    action: Mapped[str] = mapped_column(String(80), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
