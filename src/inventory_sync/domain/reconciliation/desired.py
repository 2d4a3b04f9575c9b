"""Build the desired relationship sets declared by an incoming instance.

Each builder returns a fresh id-keyed map. Links without a client-supplied id
get a generated one, which is then both the map key and the record id. An
empty map means "nothing should exist", so every stored record is deleted.
"""

from __future__ import annotations

from collections.abc import Callable, Collection, Iterable
from dataclasses import replace
from uuid import uuid4

from inventory_sync.domain.model import (
    Instance,
    InstanceRelationship,
    PrecedingSucceedingTitle,
    Relationship,
)

type IdFactory = Callable[[], str]

_UNASSIGNED = ""


def new_relationship_id() -> str:
    return str(uuid4())


def desired_instance_relationships(
    instance: Instance,
    *,
    reserved: Collection[str] = (),
    new_id: IdFactory = new_relationship_id,
) -> dict[str, InstanceRelationship]:
    """Parent and child links of ``instance`` keyed by relationship id."""

    declared: list[tuple[str | None, InstanceRelationship]] = [
        (
            parent.id,
            InstanceRelationship(
                id=_UNASSIGNED,
                super_instance_id=parent.super_instance_id,
                sub_instance_id=instance.id,
                instance_relationship_type_id=parent.instance_relationship_type_id,
            ),
        )
        for parent in instance.parent_instances or ()
    ]
    declared.extend(
        (
            child.id,
            InstanceRelationship(
                id=_UNASSIGNED,
                super_instance_id=instance.id,
                sub_instance_id=child.sub_instance_id,
                instance_relationship_type_id=child.instance_relationship_type_id,
            ),
        )
        for child in instance.child_instances or ()
    )
    return _keyed(declared, reserved=reserved, new_id=new_id)


def desired_preceding_succeeding_titles(
    instance: Instance,
    *,
    reserved: Collection[str] = (),
    new_id: IdFactory = new_relationship_id,
) -> dict[str, PrecedingSucceedingTitle]:
    """Preceding and succeeding title links of ``instance`` keyed by id."""

    declared: list[tuple[str | None, PrecedingSucceedingTitle]] = [
        (
            preceding.id,
            PrecedingSucceedingTitle(
                id=_UNASSIGNED,
                preceding_instance_id=preceding.preceding_instance_id,
                succeeding_instance_id=instance.id,
                title=preceding.title,
                hrid=preceding.hrid,
                identifiers=preceding.identifiers,
            ),
        )
        for preceding in instance.preceding_titles or ()
    ]
    declared.extend(
        (
            succeeding.id,
            PrecedingSucceedingTitle(
                id=_UNASSIGNED,
                preceding_instance_id=instance.id,
                succeeding_instance_id=succeeding.succeeding_instance_id,
                title=succeeding.title,
                hrid=succeeding.hrid,
                identifiers=succeeding.identifiers,
            ),
        )
        for succeeding in instance.succeeding_titles or ()
    )
    return _keyed(declared, reserved=reserved, new_id=new_id)


def _keyed[T: Relationship](
    declared: Iterable[tuple[str | None, T]],
    *,
    reserved: Collection[str],
    new_id: IdFactory,
) -> dict[str, T]:
    entries = list(declared)
    # generated ids must not shadow a declared or already stored id
    taken = set(reserved)
    taken.update(declared_id for declared_id, _ in entries if declared_id is not None)

    keyed: dict[str, T] = {}
    for declared_id, relationship in entries:
        key = declared_id
        if key is None:
            key = new_id()
            while key in taken:
                key = new_id()
            taken.add(key)
        # a repeated client-supplied id keeps the last declaration
        keyed[key] = replace(relationship, id=key)
    return keyed
