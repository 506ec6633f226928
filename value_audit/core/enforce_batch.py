"""Batch Contract Enforcement - validates pipeline inputs before any processing.

Invariants:
    - Every check runs over the WHOLE batch before the caller does any work,
      so a violation never leaves a batch half-processed
    - Checks are PURE: they raise or return, they never mutate records
    - InvalidInputError for absent arguments, ContractViolationError for
      broken host guarantees
"""

from typing import Sequence

from value_audit.core.domain_types import PriorState
from value_audit.core.errors import (
    ContractViolationError, ErrorContext, InvalidInputError,
)
from value_audit.core.repository_protocols import RecordLike


def require_batch(batch: Sequence[RecordLike] | None, context: ErrorContext) -> None:
    if batch is None:
        raise InvalidInputError(
            "A record batch is required.", "batch", context,
        )


def require_prior_state(prior: PriorState | None, context: ErrorContext) -> None:
    if prior is None:
        raise InvalidInputError(
            "Update dispatch requires a prior-state mapping.", "prior", context,
        )


def require_identities(batch: Sequence[RecordLike], context: ErrorContext) -> None:
    """After-phase records must already carry a persisted identity."""
    missing = [index for index, record in enumerate(batch) if record.id is None]
    if missing:
        context.debug_info = {"batch_positions": missing}
        raise ContractViolationError(
            f"{len(missing)} record(s) reached the after phase without an identity.",
            context=context,
        )


def require_prior_entries(
    batch: Sequence[RecordLike], prior: PriorState, context: ErrorContext,
) -> None:
    """Every identity in an update batch must have a prior flag."""
    missing = [record.id for record in batch if record.id not in prior]
    if missing:
        context.record_id = str(missing[0])
        raise ContractViolationError(
            f"Prior state is missing {len(missing)} record identity(ies).",
            record_ids=missing,
            context=context,
        )
