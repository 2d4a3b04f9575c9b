"""Dispatch reconciliation operations concurrently and collect every outcome."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from .operations import CreateOperation, DeleteOperation, UpdateOperation, describe_operation

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from inventory_sync.domain.model import Relationship
    from inventory_sync.domain.ports import CollectionClient, JsonObject, StorageResponse

    from .operations import Operation

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class OperationOutcome[T: Relationship]:
    """Result of one dispatched operation.

    Exactly one of ``response`` and ``error`` is set. A response with a
    non-2xx status is a failure just like a transport error.
    """

    operation: Operation[T]
    response: StorageResponse | None = None
    error: Exception | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None and self.response is not None and self.response.is_success

    def describe(self) -> str:
        action = describe_operation(self.operation)
        if self.error is not None:
            return f"{action}: {type(self.error).__name__}: {self.error}"
        if self.response is None:
            return f"{action}: no response"
        return f"{action}: {self.response.status_code} {self.response.body}".rstrip()


@dataclass(frozen=True, slots=True)
class BatchResult[T: Relationship]:
    """Outcomes of one batch, in the order the operations were given."""

    outcomes: tuple[OperationOutcome[T], ...] = ()

    @property
    def succeeded(self) -> bool:
        return all(outcome.succeeded for outcome in self.outcomes)

    @property
    def failures(self) -> tuple[OperationOutcome[T], ...]:
        return tuple(outcome for outcome in self.outcomes if not outcome.succeeded)

    @property
    def first_failure(self) -> OperationOutcome[T] | None:
        return next((outcome for outcome in self.outcomes if not outcome.succeeded), None)


async def execute_operations[T: Relationship](
    client: CollectionClient,
    operations: Sequence[Operation[T]],
    *,
    to_payload: Callable[[T], JsonObject],
) -> BatchResult[T]:
    """Issue every operation at once and wait for all of them to settle.

    A failing operation does not cancel its siblings; every outcome is kept
    and failures only show up in the returned ``BatchResult``.
    """

    if not operations:
        return BatchResult()

    settled = await asyncio.gather(
        *(_dispatch(client, operation, to_payload) for operation in operations),
        return_exceptions=True,
    )

    outcomes: list[OperationOutcome[T]] = []
    for operation, result in zip(operations, settled, strict=True):
        if isinstance(result, Exception):
            outcome = OperationOutcome(operation, error=result)
        elif isinstance(result, BaseException):
            raise result
        else:
            outcome = OperationOutcome(operation, response=result)
        if not outcome.succeeded:
            log.warning("Storage write failed: %s", outcome.describe())
        outcomes.append(outcome)
    return BatchResult(tuple(outcomes))


async def _dispatch[T: Relationship](
    client: CollectionClient,
    operation: Operation[T],
    to_payload: Callable[[T], JsonObject],
) -> StorageResponse:
    match operation:
        case CreateOperation(entity=entity):
            return await client.post(to_payload(entity))
        case UpdateOperation(id=target, entity=entity):
            return await client.put(target, to_payload(entity))
        case DeleteOperation(id=target):
            return await client.delete(target)
