"""Reconcile stored relationship sets with the links an instance declares.

Flow per relationship family:
1) load the records storage holds for the instance (``existing``)
2) build the id-keyed set the instance declares (``desired``)
3) ``reconcile`` both maps into create/update/delete operations
4) dispatch all operations concurrently and collect every outcome

``RelatedRecordSynchronizer`` runs one such pass per family, in order.
"""

from __future__ import annotations

from .batch import BatchResult, OperationOutcome, execute_operations
from .desired import (
    desired_instance_relationships,
    desired_preceding_succeeding_titles,
    new_relationship_id,
)
from .errors import RelatedRecordsFetchError, RelationshipSyncError
from .existing import DEFAULT_FETCH_LIMIT, RelatedRecords, load_existing, load_related
from .families import RelationshipFamily
from .operations import (
    CreateOperation,
    DeleteOperation,
    Operation,
    OperationKind,
    UpdateOperation,
    count_operations,
)
from .query import CqlQuery, related_records_query
from .reconcile import reconcile
from .sync import PhaseResult, RelatedRecordSynchronizer, SyncPhase, SyncResult

__all__ = [
    "DEFAULT_FETCH_LIMIT",
    "BatchResult",
    "CqlQuery",
    "CreateOperation",
    "DeleteOperation",
    "Operation",
    "OperationKind",
    "OperationOutcome",
    "PhaseResult",
    "RelatedRecordSynchronizer",
    "RelatedRecords",
    "RelatedRecordsFetchError",
    "RelationshipFamily",
    "RelationshipSyncError",
    "SyncPhase",
    "SyncResult",
    "UpdateOperation",
    "count_operations",
    "desired_instance_relationships",
    "desired_preceding_succeeding_titles",
    "execute_operations",
    "load_existing",
    "load_related",
    "new_relationship_id",
    "reconcile",
    "related_records_query",
]
