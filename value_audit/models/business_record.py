"""BusinessRecord ORM - the record whose value drives high-value classification.

Invariants:
    - id is assigned at flush (None on a freshly constructed instance)
    - is_high_value is written only by the pipeline's before phases
    - value is nullable: an absent value classifies as not high-value

Design Decisions:
    - Numeric(18, 2) for value: exact decimal comparison against the threshold
"""

import uuid
from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import Boolean, DateTime, Numeric, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from value_audit.db.base import Base


class BusinessRecord(Base):
    """Business record carrying a numeric value and its derived flag."""
    __tablename__ = "business_records"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    value: Mapped[Decimal | None] = mapped_column(
        Numeric(18, 2), nullable=True,
    )
    is_high_value: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
