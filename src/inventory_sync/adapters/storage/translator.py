"""Translate storage payloads to domain records and back."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from inventory_sync.domain.model import (
    ChildInstanceLink,
    Instance,
    InstanceRelationship,
    ParentInstanceLink,
    PrecedingSucceedingTitle,
    PrecedingTitleLink,
    SucceedingTitleLink,
    TitleIdentifier,
)

from .schema import (
    IdentifierPayload,
    InstanceRelationshipPayload,
    InstanceRequest,
    PrecedingSucceedingTitlePayload,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from inventory_sync.domain.ports import JsonObject
    from inventory_sync.domain.reconciliation import RelatedRecords


def instance_relationship_from_payload(payload: Mapping[str, Any]) -> InstanceRelationship:
    model = InstanceRelationshipPayload.model_validate(payload)
    return InstanceRelationship(
        id=model.id,
        super_instance_id=model.super_instance_id,
        sub_instance_id=model.sub_instance_id,
        instance_relationship_type_id=model.instance_relationship_type_id,
    )


def instance_relationship_to_payload(relationship: InstanceRelationship) -> JsonObject:
    model = InstanceRelationshipPayload(
        id=relationship.id,
        super_instance_id=relationship.super_instance_id,
        sub_instance_id=relationship.sub_instance_id,
        instance_relationship_type_id=relationship.instance_relationship_type_id,
    )
    return model.model_dump(by_alias=True, exclude_none=True)


def title_from_payload(payload: Mapping[str, Any]) -> PrecedingSucceedingTitle:
    model = PrecedingSucceedingTitlePayload.model_validate(payload)
    return PrecedingSucceedingTitle(
        id=model.id,
        preceding_instance_id=model.preceding_instance_id,
        succeeding_instance_id=model.succeeding_instance_id,
        title=model.title,
        hrid=model.hrid,
        identifiers=_identifiers(model.identifiers),
    )


def title_to_payload(title: PrecedingSucceedingTitle) -> JsonObject:
    model = PrecedingSucceedingTitlePayload(
        id=title.id,
        preceding_instance_id=title.preceding_instance_id,
        succeeding_instance_id=title.succeeding_instance_id,
        title=title.title,
        hrid=title.hrid,
        identifiers=[_identifier_payload(identifier) for identifier in title.identifiers],
    )
    return model.model_dump(by_alias=True, exclude_none=True)


def instance_from_request(payload: Mapping[str, Any]) -> Instance:
    """Read the related-record arrays of an inventory instance request."""

    request = InstanceRequest.model_validate(payload)
    return Instance(
        id=request.id,
        parent_instances=None
        if request.parent_instances is None
        else tuple(
            ParentInstanceLink(
                id=parent.id,
                super_instance_id=parent.super_instance_id,
                instance_relationship_type_id=parent.instance_relationship_type_id,
            )
            for parent in request.parent_instances
        ),
        child_instances=None
        if request.child_instances is None
        else tuple(
            ChildInstanceLink(
                id=child.id,
                sub_instance_id=child.sub_instance_id,
                instance_relationship_type_id=child.instance_relationship_type_id,
            )
            for child in request.child_instances
        ),
        preceding_titles=None
        if request.preceding_titles is None
        else tuple(
            PrecedingTitleLink(
                id=preceding.id,
                preceding_instance_id=preceding.preceding_instance_id,
                title=preceding.title,
                hrid=preceding.hrid,
                identifiers=_identifiers(preceding.identifiers),
            )
            for preceding in request.preceding_titles
        ),
        succeeding_titles=None
        if request.succeeding_titles is None
        else tuple(
            SucceedingTitleLink(
                id=succeeding.id,
                succeeding_instance_id=succeeding.succeeding_instance_id,
                title=succeeding.title,
                hrid=succeeding.hrid,
                identifiers=_identifiers(succeeding.identifiers),
            )
            for succeeding in request.succeeding_titles
        ),
    )


def related_records_representation(
    relationships: RelatedRecords[InstanceRelationship],
    titles: RelatedRecords[PrecedingSucceedingTitle],
) -> JsonObject:
    """Render the related-record arrays of one instance representation.

    Parents and preceding titles point at the instance; children and
    succeeding titles start from it. Each entry names the *other* instance.
    """

    return {
        "parentInstances": [
            _without_none(
                {
                    "id": relationship.id,
                    "superInstanceId": relationship.super_instance_id,
                    "instanceRelationshipTypeId": relationship.instance_relationship_type_id,
                }
            )
            for relationship in relationships.incoming
        ],
        "childInstances": [
            _without_none(
                {
                    "id": relationship.id,
                    "subInstanceId": relationship.sub_instance_id,
                    "instanceRelationshipTypeId": relationship.instance_relationship_type_id,
                }
            )
            for relationship in relationships.outgoing
        ],
        "precedingTitles": [title_to_payload(title) for title in titles.incoming],
        "succeedingTitles": [title_to_payload(title) for title in titles.outgoing],
    }


def _identifiers(payloads: Iterable[IdentifierPayload]) -> tuple[TitleIdentifier, ...]:
    return tuple(
        TitleIdentifier(value=payload.value, identifier_type_id=payload.identifier_type_id)
        for payload in payloads
    )


def _identifier_payload(identifier: TitleIdentifier) -> IdentifierPayload:
    return IdentifierPayload(
        value=identifier.value,
        identifier_type_id=identifier.identifier_type_id,
    )


def _without_none(values: dict[str, Any]) -> JsonObject:
    return {key: value for key, value in values.items() if value is not None}
