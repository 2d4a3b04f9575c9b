from __future__ import annotations

from collections.abc import Callable
from itertools import count

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
from inventory_sync.domain.reconciliation import (
    desired_instance_relationships,
    desired_preceding_succeeding_titles,
)
from tests.support.ids import CHILD_ID, INSTANCE_ID, OTHER_ID, PARENT_ID, RELATIONSHIP_TYPE_ID


def _sequential_ids(*values: str) -> Callable[[], str]:
    pending = iter(values)
    return lambda: next(pending)


def test_parent_and_child_links_point_at_the_instance() -> None:
    instance = Instance(
        id=INSTANCE_ID,
        parent_instances=(
            ParentInstanceLink(
                id="rel-parent",
                super_instance_id=PARENT_ID,
                instance_relationship_type_id=RELATIONSHIP_TYPE_ID,
            ),
        ),
        child_instances=(
            ChildInstanceLink(
                id="rel-child",
                sub_instance_id=CHILD_ID,
                instance_relationship_type_id=RELATIONSHIP_TYPE_ID,
            ),
        ),
    )

    desired = desired_instance_relationships(instance)

    assert list(desired) == ["rel-parent", "rel-child"]
    parent = desired["rel-parent"]
    child = desired["rel-child"]
    assert (parent.id, parent.super_instance_id, parent.sub_instance_id) == (
        "rel-parent",
        PARENT_ID,
        INSTANCE_ID,
    )
    assert (child.id, child.super_instance_id, child.sub_instance_id) == (
        "rel-child",
        INSTANCE_ID,
        CHILD_ID,
    )
    assert parent.instance_relationship_type_id == RELATIONSHIP_TYPE_ID


def test_links_without_id_get_generated_ids() -> None:
    instance = Instance(
        id=INSTANCE_ID,
        parent_instances=(ParentInstanceLink(super_instance_id=PARENT_ID),),
        child_instances=(ChildInstanceLink(sub_instance_id=CHILD_ID),),
    )

    desired = desired_instance_relationships(instance, new_id=_sequential_ids("gen-1", "gen-2"))

    assert list(desired) == ["gen-1", "gen-2"]
    assert all(key == relationship.id for key, relationship in desired.items())


def test_generated_ids_skip_reserved_and_declared_ids() -> None:
    instance = Instance(
        id=INSTANCE_ID,
        parent_instances=(
            ParentInstanceLink(super_instance_id=PARENT_ID),
            ParentInstanceLink(id="declared", super_instance_id=OTHER_ID),
        ),
        child_instances=(ChildInstanceLink(sub_instance_id=CHILD_ID),),
    )

    desired = desired_instance_relationships(
        instance,
        reserved={"stored"},
        new_id=_sequential_ids("stored", "declared", "fresh-1", "fresh-1", "fresh-2"),
    )

    assert sorted(desired) == ["declared", "fresh-1", "fresh-2"]


def test_default_generated_ids_are_unique() -> None:
    instance = Instance(
        id=INSTANCE_ID,
        child_instances=tuple(ChildInstanceLink(sub_instance_id=f"child-{n}") for n in range(50)),
    )

    desired = desired_instance_relationships(instance)

    assert len(desired) == 50
    assert len({relationship.id for relationship in desired.values()}) == 50


def test_absent_and_empty_link_lists_produce_empty_sets() -> None:
    absent = Instance(id=INSTANCE_ID)
    empty = Instance(
        id=INSTANCE_ID,
        parent_instances=(),
        child_instances=(),
        preceding_titles=(),
        succeeding_titles=(),
    )

    assert desired_instance_relationships(absent) == {}
    assert desired_instance_relationships(empty) == {}
    assert desired_preceding_succeeding_titles(absent) == {}
    assert desired_preceding_succeeding_titles(empty) == {}


def test_repeated_declared_id_keeps_last_link() -> None:
    instance = Instance(
        id=INSTANCE_ID,
        parent_instances=(ParentInstanceLink(id="dup", super_instance_id=PARENT_ID),),
        child_instances=(ChildInstanceLink(id="dup", sub_instance_id=CHILD_ID),),
    )

    desired = desired_instance_relationships(instance)

    assert desired == {
        "dup": InstanceRelationship(
            id="dup", super_instance_id=INSTANCE_ID, sub_instance_id=CHILD_ID
        )
    }


def test_title_links_keep_descriptive_fields_and_direction() -> None:
    issn = TitleIdentifier(value="0028-0836", identifier_type_id="issn-type")
    instance = Instance(
        id=INSTANCE_ID,
        preceding_titles=(
            PrecedingTitleLink(
                id="t-prev",
                preceding_instance_id=PARENT_ID,
                title="Earlier Journal",
                hrid="in001",
                identifiers=(issn,),
            ),
        ),
        succeeding_titles=(
            SucceedingTitleLink(title="Later Journal (not catalogued)"),
        ),
    )
    generated = count(1)

    desired = desired_preceding_succeeding_titles(
        instance, new_id=lambda: f"gen-{next(generated)}"
    )

    assert desired == {
        "t-prev": PrecedingSucceedingTitle(
            id="t-prev",
            preceding_instance_id=PARENT_ID,
            succeeding_instance_id=INSTANCE_ID,
            title="Earlier Journal",
            hrid="in001",
            identifiers=(issn,),
        ),
        "gen-1": PrecedingSucceedingTitle(
            id="gen-1",
            preceding_instance_id=INSTANCE_ID,
            succeeding_instance_id=None,
            title="Later Journal (not catalogued)",
        ),
    }
    assert desired["gen-1"].id == "gen-1"
    assert desired["t-prev"].id == "t-prev"
