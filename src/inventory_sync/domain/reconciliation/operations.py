"""Write operations emitted by the reconciler."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from collections.abc import Iterable

    from inventory_sync.domain.model import Relationship


class OperationKind(StrEnum):
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


@dataclass(frozen=True, slots=True)
class CreateOperation[T: Relationship]:
    """POST a relationship that storage does not hold yet."""

    kind: ClassVar[OperationKind] = OperationKind.CREATE
    entity: T

    @property
    def target_id(self) -> str:
        return self.entity.id


@dataclass(frozen=True, slots=True)
class UpdateOperation[T: Relationship]:
    """PUT a full replacement of relationship ``id``."""

    kind: ClassVar[OperationKind] = OperationKind.UPDATE
    id: str
    entity: T

    @property
    def target_id(self) -> str:
        return self.id


@dataclass(frozen=True, slots=True)
class DeleteOperation:
    """DELETE relationship ``id``."""

    kind: ClassVar[OperationKind] = OperationKind.DELETE
    id: str

    @property
    def target_id(self) -> str:
        return self.id


type Operation[T: Relationship] = CreateOperation[T] | UpdateOperation[T] | DeleteOperation


def count_operations(operations: Iterable[Operation[Relationship]]) -> Counter[OperationKind]:
    counts: Counter[OperationKind] = Counter({kind: 0 for kind in OperationKind})
    counts.update(operation.kind for operation in operations)
    return counts


def describe_operation(operation: Operation[Relationship]) -> str:
    return f"{operation.kind} {operation.target_id}"
