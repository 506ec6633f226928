"""Error Hierarchy - typed, categorized exceptions for every pipeline failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Input and contract errors are raised before any record is processed
    - PersistenceError is the only error that can follow IO
    - to_dict() produces the structured shape written to logs

Design Decisions:
    - Single hierarchy with ValueAuditError base: hosts catch one type to abort
      their unit of work
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Sequence


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    CONTRACT = "contract"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    phase: str | None = None
    operation: str | None = None
    record_id: str | None = None
    batch_size: int | None = None
    debug_info: dict[str, Any] | None = None


class ValueAuditError(Exception):
    """Base exception for all pipeline errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_dict(self) -> dict:
        """Convert to the structured shape used in log records."""
        return {
            "code": self.code,
            "message": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "timestamp": self.context.timestamp.isoformat(),
            "context": {
                "phase": self.context.phase,
                "operation": self.context.operation,
                "record_id": self.context.record_id,
                "batch_size": self.context.batch_size,
            },
        }


# ─── Caller Errors ──────────────────────────────────────────────

class InvalidInputError(ValueAuditError):
    """A required batch or prior-state argument was absent."""
    def __init__(self, message: str, argument: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_INPUT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context,
        )
        self.argument = argument


class ContractViolationError(ValueAuditError):
    """Host broke the dispatch contract (missing identity or prior flag)."""
    def __init__(
        self,
        message: str,
        record_ids: Sequence[Any] = (),
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "CONTRACT_VIOLATION", ErrorCategory.CONTRACT,
            ErrorSeverity.CRITICAL, context,
        )
        self.record_ids = list(record_ids)


# ─── Infrastructure Errors ──────────────────────────────────────

class PersistenceError(ValueAuditError):
    """Bulk audit write rejected by the storage layer. Nothing was written."""
    def __init__(
        self,
        message: str,
        operation: str = "bulk_insert",
        rejected_entries: Sequence[Any] | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Persistence {operation} failed: {message}",
            "PERSISTENCE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context,
        )
        self.operation = operation
        self.rejected_entries = (
            list(rejected_entries) if rejected_entries is not None else None
        )
