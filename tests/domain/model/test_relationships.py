from __future__ import annotations

from inventory_sync.domain.model import (
    InstanceRelationship,
    PrecedingSucceedingTitle,
    Relationship,
    TitleIdentifier,
)


def test_instance_relationship_equality_ignores_id() -> None:
    first = InstanceRelationship(id="r1", super_instance_id="A", sub_instance_id="B")
    second = InstanceRelationship(id="r2", super_instance_id="A", sub_instance_id="B")

    assert first == second
    assert hash(first) == hash(second)


def test_instance_relationship_equality_compares_type() -> None:
    typed = InstanceRelationship(
        id="r1", super_instance_id="A", sub_instance_id="B", instance_relationship_type_id="T"
    )
    retyped = InstanceRelationship(
        id="r1", super_instance_id="A", sub_instance_id="B", instance_relationship_type_id="U"
    )

    assert typed != retyped


def test_instance_relationship_direction() -> None:
    relationship = InstanceRelationship(id="r1", super_instance_id="A", sub_instance_id="B")

    assert relationship.from_id == "A"
    assert relationship.to_id == "B"
    assert isinstance(relationship, Relationship)


def test_title_equality_covers_descriptive_fields() -> None:
    base = PrecedingSucceedingTitle(
        id="t1",
        preceding_instance_id="A",
        succeeding_instance_id="B",
        title="Journal of Things",
        identifiers=(TitleIdentifier(value="1234-5678", identifier_type_id="issn"),),
    )
    same = PrecedingSucceedingTitle(
        id="t2",
        preceding_instance_id="A",
        succeeding_instance_id="B",
        title="Journal of Things",
        identifiers=(TitleIdentifier(value="1234-5678", identifier_type_id="issn"),),
    )
    renamed = PrecedingSucceedingTitle(
        id="t1",
        preceding_instance_id="A",
        succeeding_instance_id="B",
        title="Journal of Other Things",
        identifiers=(TitleIdentifier(value="1234-5678", identifier_type_id="issn"),),
    )

    assert base == same
    assert base != renamed
    assert base.from_id == "A"
    assert base.to_id == "B"


def test_unlinked_title_has_no_endpoint() -> None:
    title = PrecedingSucceedingTitle(id="t1", succeeding_instance_id="B", title="Old name")

    assert title.from_id is None
    assert title.to_id == "B"
