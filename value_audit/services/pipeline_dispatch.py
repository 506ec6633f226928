"""Pipeline Dispatch - explicit routing from (Phase, Operation) to entry point.

Invariants:
    - Every (phase, operation) -> handler mapping is visible in one dict
    - Unknown phase/operation values raise InvalidInputError before any work
    - Before phases return an empty event list, after phases the logged ids

Design Decisions:
    - Explicit dict over getattr: adding a lifecycle hook requires editing
      the table, never a naming convention
    - Uniform async signature: hosts dispatch every phase the same way
"""

from typing import Awaitable, Callable, Sequence

from value_audit.core.domain_types import Operation, Phase, PriorState, RecordId
from value_audit.core.errors import InvalidInputError
from value_audit.core.repository_protocols import RecordLike
from value_audit.services.batch_pipeline import BatchPipeline

Handler = Callable[
    [Sequence[RecordLike], PriorState | None], Awaitable[list[RecordId]],
]


class PipelineDispatch:
    """Routes (phase, operation) -> BatchPipeline entry point."""

    def __init__(self, pipeline: BatchPipeline):
        self._pipeline = pipeline
        self._handlers: dict[tuple[Phase, Operation], Handler] = {
            (Phase.BEFORE, Operation.CREATE): self._before_create,
            (Phase.BEFORE, Operation.UPDATE): self._before_update,
            (Phase.AFTER, Operation.CREATE): self._after_create,
            (Phase.AFTER, Operation.UPDATE): self._after_update,
        }

    async def dispatch(
        self,
        phase: Phase | str,
        operation: Operation | str,
        batch: Sequence[RecordLike],
        prior: PriorState | None = None,
    ) -> list[RecordId]:
        try:
            key = (Phase(phase), Operation(operation))
        except ValueError as e:
            raise InvalidInputError(
                f"No pipeline handler for {phase!r}/{operation!r}", "phase",
            ) from e
        return await self._handlers[key](batch, prior)

    async def _before_create(self, batch, prior) -> list[RecordId]:
        self._pipeline.on_before_create(batch)
        return []

    async def _before_update(self, batch, prior) -> list[RecordId]:
        self._pipeline.on_before_update(batch, prior)
        return []

    async def _after_create(self, batch, prior) -> list[RecordId]:
        return await self._pipeline.on_after_create(batch)

    async def _after_update(self, batch, prior) -> list[RecordId]:
        return await self._pipeline.on_after_update(batch, prior)
