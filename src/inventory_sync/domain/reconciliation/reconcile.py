"""Compute the writes that bring a stored relationship set to a desired one."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .operations import CreateOperation, DeleteOperation, Operation, UpdateOperation

if TYPE_CHECKING:
    from collections.abc import Mapping

    from inventory_sync.domain.model import Relationship


def reconcile[T: Relationship](
    existing: Mapping[str, T],
    desired: Mapping[str, T],
) -> list[Operation[T]]:
    """Return the create, update and delete operations turning ``existing`` into ``desired``.

    Both maps are keyed by relationship id. A key only in ``desired`` is
    created, a key only in ``existing`` is deleted, and a shared key is
    updated unless the two records are structurally equal (``id`` is not
    compared). Creates and updates come first in ``desired`` order, followed
    by deletes in ``existing`` order; the two groups never share a key.
    """

    operations: list[Operation[T]] = []
    for key, wanted in desired.items():
        if key not in existing:
            operations.append(CreateOperation(wanted))
        elif existing[key] != wanted:
            operations.append(UpdateOperation(key, wanted))

    operations.extend(DeleteOperation(key) for key in existing if key not in desired)
    return operations
