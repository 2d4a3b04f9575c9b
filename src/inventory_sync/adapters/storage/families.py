"""Storage-backed relationship families."""

from __future__ import annotations

from inventory_sync.domain.model import InstanceRelationship, PrecedingSucceedingTitle
from inventory_sync.domain.reconciliation import (
    RelationshipFamily,
    desired_instance_relationships,
    desired_preceding_succeeding_titles,
)

from .translator import (
    instance_relationship_from_payload,
    instance_relationship_to_payload,
    title_from_payload,
    title_to_payload,
)

INSTANCE_RELATIONSHIPS: RelationshipFamily[InstanceRelationship] = RelationshipFamily(
    name="instance-relationships",
    collection_key="instanceRelationships",
    query_fields=("subInstanceId", "superInstanceId"),
    from_payload=instance_relationship_from_payload,
    to_payload=instance_relationship_to_payload,
    desired=desired_instance_relationships,
)

PRECEDING_SUCCEEDING_TITLES: RelationshipFamily[PrecedingSucceedingTitle] = RelationshipFamily(
    name="preceding-succeeding-titles",
    collection_key="precedingSucceedingTitles",
    query_fields=("succeedingInstanceId", "precedingInstanceId"),
    from_payload=title_from_payload,
    to_payload=title_to_payload,
    desired=desired_preceding_succeeding_titles,
)
