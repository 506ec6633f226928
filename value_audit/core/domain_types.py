"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - RecordId wraps UUID - never use bare UUID in domain logic
    - PriorState maps every RecordId in an update batch to its pre-mutation flag
    - Lifecycle phases and operations encoded as Enums - no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize into structured log records without custom encoders
"""

from decimal import Decimal
from enum import Enum
from typing import Mapping, NewType, Union
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

RecordId = NewType("RecordId", UUID)


# ─── Value Types ─────────────────────────────────────────────────

RecordValue = Union[int, float, Decimal]
PriorState = Mapping[RecordId, bool]


# ─── Constants ───────────────────────────────────────────────────

DEFAULT_HIGH_VALUE_THRESHOLD: Decimal = Decimal("100000")
DEFAULT_AUDIT_ACTION_LABEL: str = "Marked High Value"


# ─── Enums ───────────────────────────────────────────────────────

class Phase(str, Enum):
    """When the host invokes the pipeline relative to the durable write."""
    BEFORE = "before"
    AFTER = "after"


class Operation(str, Enum):
    """Which record mutation the host is performing."""
    CREATE = "create"
    UPDATE = "update"
