"""Sequence reconciliation passes for one instance update.

Phases run strictly one after another: the next phase does not load its
existing set until the previous batch has settled. A batch with failed writes
does not stop later phases; a failed load does, because nothing after it can
be reconciled safely.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Any

from .batch import execute_operations
from .errors import RelatedRecordsFetchError
from .existing import DEFAULT_FETCH_LIMIT, load_existing
from .operations import OperationKind, count_operations
from .reconcile import reconcile

if TYPE_CHECKING:
    from collections.abc import Sequence

    from inventory_sync.domain.model import Instance, Relationship
    from inventory_sync.domain.ports import CollectionClient

    from .batch import BatchResult, OperationOutcome
    from .families import RelationshipFamily
    from .operations import Operation

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PhaseResult[T: Relationship]:
    family: str
    operations: tuple[Operation[T], ...]
    batch: BatchResult[T]

    @property
    def succeeded(self) -> bool:
        return self.batch.succeeded


@dataclass(frozen=True, slots=True)
class SyncResult:
    """Combined outcome of all phases for one instance."""

    instance_id: str
    phases: tuple[PhaseResult[Any], ...] = ()

    @property
    def succeeded(self) -> bool:
        return all(phase.succeeded for phase in self.phases)

    @property
    def outcomes(self) -> tuple[OperationOutcome[Any], ...]:
        return tuple(outcome for phase in self.phases for outcome in phase.batch.outcomes)

    @property
    def first_failure(self) -> OperationOutcome[Any] | None:
        for phase in self.phases:
            failure = phase.batch.first_failure
            if failure is not None:
                return failure
        return None


@dataclass(frozen=True, slots=True)
class SyncPhase[T: Relationship]:
    """One reconciliation pass: load, reconcile, write."""

    family: RelationshipFamily[T]
    client: CollectionClient

    async def run(
        self,
        instance: Instance,
        *,
        fetch_limit: int = DEFAULT_FETCH_LIMIT,
    ) -> PhaseResult[T]:
        existing = await load_existing(self.client, self.family, instance.id, limit=fetch_limit)
        desired = self.family.desired(instance, reserved=existing.keys())
        operations = reconcile(existing, desired)

        counts = count_operations(operations)
        log.info(
            "Reconciling %s for instance %s: %s create, %s update, %s delete",
            self.family.name,
            instance.id,
            counts[OperationKind.CREATE],
            counts[OperationKind.UPDATE],
            counts[OperationKind.DELETE],
        )

        batch = await execute_operations(
            self.client, operations, to_payload=self.family.to_payload
        )
        return PhaseResult(family=self.family.name, operations=tuple(operations), batch=batch)


@dataclass(frozen=True, slots=True)
class RelatedRecordSynchronizer:
    """Run ``phases`` in order for an instance and combine their results."""

    phases: Sequence[SyncPhase[Any]]
    fetch_limit: int = DEFAULT_FETCH_LIMIT

    async def sync_related_records(self, instance: Instance) -> SyncResult:
        completed: list[PhaseResult[Any]] = []
        for phase in self.phases:
            try:
                result = await phase.run(instance, fetch_limit=self.fetch_limit)
            except RelatedRecordsFetchError as exc:
                log.error(
                    "Aborting related-record sync for instance %s: %s", instance.id, exc
                )
                exc.completed_phases = tuple(completed)
                raise
            completed.append(result)

        sync_result = SyncResult(instance_id=instance.id, phases=tuple(completed))
        if sync_result.succeeded:
            log.info("Related records of instance %s are in sync", instance.id)
        else:
            log.warning(
                "Related-record sync for instance %s finished with %s failed write(s)",
                instance.id,
                sum(len(phase.batch.failures) for phase in sync_result.phases),
            )
        return sync_result
