"""Errors raised while synchronising related records."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from inventory_sync.domain.ports import StorageResponse


class RelationshipSyncError(RuntimeError):
    """Base class for related-record synchronisation failures."""


class RelatedRecordsFetchError(RelationshipSyncError):
    """Raised when the existing relationships of an instance cannot be listed.

    ``response`` is set when storage answered with a non-2xx status or an
    unreadable body; transport failures leave it ``None`` and chain the cause.
    ``completed_phases`` is filled in by the synchroniser with the results of
    the phases that finished before the failing load.
    """

    def __init__(
        self,
        message: str,
        *,
        family: str,
        instance_ids: Sequence[str],
        response: StorageResponse | None = None,
    ) -> None:
        super().__init__(message)
        self.family = family
        self.instance_ids = tuple(instance_ids)
        self.response = response
        self.completed_phases: tuple[object, ...] = ()
