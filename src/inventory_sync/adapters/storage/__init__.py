"""Public interface for the storage adapter."""

from __future__ import annotations

from .client import StorageCollectionClient
from .families import INSTANCE_RELATIONSHIPS, PRECEDING_SUCCEEDING_TITLES
from .schema import InstanceRequest
from .translator import (
    instance_from_request,
    instance_relationship_from_payload,
    instance_relationship_to_payload,
    related_records_representation,
    title_from_payload,
    title_to_payload,
)

__all__ = [
    "INSTANCE_RELATIONSHIPS",
    "PRECEDING_SUCCEEDING_TITLES",
    "InstanceRequest",
    "StorageCollectionClient",
    "instance_from_request",
    "instance_relationship_from_payload",
    "instance_relationship_to_payload",
    "related_records_representation",
    "title_from_payload",
    "title_to_payload",
]
