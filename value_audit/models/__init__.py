"""ORM Models - SQLAlchemy declarative models for records and their audit trail.

Invariants:
    - All models inherit from Base (db/base.py)
    - AuditLogEntry rows reference an existing BusinessRecord

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from value_audit.models.business_record import BusinessRecord  # noqa: F401
from value_audit.models.audit_log_entry import AuditLogEntry  # noqa: F401
