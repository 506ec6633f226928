"""High-Value Classification - pure value -> flag predicate.

Invariants:
    - classify is PURE and total: no IO, no exceptions, same input -> same output
    - The threshold is exclusive: a value equal to it is NOT high-value
    - Absent and NaN values are never high-value
    - HIGH_VALUE_THRESHOLD is the single source of truth for the default cutoff
"""

from decimal import Decimal

from value_audit.core.domain_types import DEFAULT_HIGH_VALUE_THRESHOLD, RecordValue


HIGH_VALUE_THRESHOLD: RecordValue = DEFAULT_HIGH_VALUE_THRESHOLD


def _is_nan(value: RecordValue) -> bool:
    # Decimal NaN (quiet or signaling) raises on ordering comparisons
    if isinstance(value, Decimal):
        return value.is_nan()
    return value != value


def classify(
    value: RecordValue | None, threshold: RecordValue = HIGH_VALUE_THRESHOLD,
) -> bool:
    """True iff value is present, a number, and strictly above the threshold."""
    return value is not None and not _is_nan(value) and value > threshold
