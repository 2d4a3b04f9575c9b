from __future__ import annotations

import pytest

from inventory_sync.domain.model import InstanceRelationship
from inventory_sync.domain.reconciliation import (
    CreateOperation,
    DeleteOperation,
    OperationKind,
    UpdateOperation,
    count_operations,
    reconcile,
)


def _relationship(
    rel_id: str, source: str, target: str, type_id: str | None = None
) -> InstanceRelationship:
    return InstanceRelationship(
        id=rel_id,
        super_instance_id=source,
        sub_instance_id=target,
        instance_relationship_type_id=type_id,
    )


def test_missing_relationship_is_created() -> None:
    desired = {"r1": _relationship("r1", "A", "B", "T")}

    operations = reconcile({}, desired)

    assert operations == [CreateOperation(desired["r1"])]


def test_undeclared_relationship_is_deleted() -> None:
    existing = {"r1": _relationship("r1", "A", "B", "T")}

    operations = reconcile(existing, {})

    assert operations == [DeleteOperation("r1")]


def test_identical_relationship_emits_nothing() -> None:
    existing = {"r1": _relationship("r1", "A", "B", "T")}
    desired = {"r1": _relationship("r1", "A", "B", "T")}

    assert reconcile(existing, desired) == []


def test_changed_relationship_is_updated() -> None:
    existing = {"r1": _relationship("r1", "A", "B", "T")}
    desired = {"r1": _relationship("r1", "A", "B", "U")}

    operations = reconcile(existing, desired)

    assert operations == [UpdateOperation("r1", desired["r1"])]
    update = operations[0]
    assert isinstance(update, UpdateOperation)
    assert update.entity.instance_relationship_type_id == "U"


def test_replaced_relationship_is_created_and_old_one_deleted() -> None:
    existing = {"r1": _relationship("r1", "A", "B")}
    desired = {"r2": _relationship("r2", "A", "C")}

    operations = reconcile(existing, desired)

    assert operations == [CreateOperation(desired["r2"]), DeleteOperation("r1")]


def test_creates_and_updates_precede_deletes() -> None:
    existing = {
        "gone-1": _relationship("gone-1", "A", "X"),
        "kept": _relationship("kept", "A", "B", "T"),
        "gone-2": _relationship("gone-2", "A", "Y"),
    }
    desired = {
        "kept": _relationship("kept", "A", "B", "U"),
        "new": _relationship("new", "A", "C"),
    }

    operations = reconcile(existing, desired)

    kinds = [operation.kind for operation in operations]
    assert kinds == [
        OperationKind.UPDATE,
        OperationKind.CREATE,
        OperationKind.DELETE,
        OperationKind.DELETE,
    ]
    assert [operation.target_id for operation in operations] == ["kept", "new", "gone-1", "gone-2"]


@pytest.mark.parametrize(
    ("existing_keys", "desired_keys", "changed_keys"),
    [
        ((), (), ()),
        (("a", "b"), ("b", "c"), ()),
        (("a", "b", "c"), ("a", "b", "c"), ("b",)),
        (("a",), ("b", "c", "d"), ()),
        (("a", "b", "c", "d"), (), ()),
        (("a", "b", "c"), ("c", "d"), ("c",)),
    ],
)
def test_operations_touch_each_non_noop_key_exactly_once(
    existing_keys: tuple[str, ...],
    desired_keys: tuple[str, ...],
    changed_keys: tuple[str, ...],
) -> None:
    existing = {key: _relationship(key, "A", key, "T") for key in existing_keys}
    desired = {
        key: _relationship(key, "A", key, "U" if key in changed_keys else "T")
        for key in desired_keys
    }
    noop_keys = {
        key for key in set(existing) & set(desired) if existing[key] == desired[key]
    }

    operations = reconcile(existing, desired)

    touched = [operation.target_id for operation in operations]
    assert len(touched) == len(set(touched))
    assert set(touched) == (set(existing) | set(desired)) - noop_keys

    writes = {op.target_id for op in operations if op.kind is not OperationKind.DELETE}
    deletes = {op.target_id for op in operations if op.kind is OperationKind.DELETE}
    assert writes.isdisjoint(deletes)
    assert deletes == set(existing) - set(desired)


def test_reconciling_against_equal_set_is_idempotent() -> None:
    desired = {
        "r1": _relationship("r1", "A", "B", "T"),
        "r2": _relationship("r2", "C", "A", "T"),
    }
    existing = {
        key: _relationship(key, rel.super_instance_id, rel.sub_instance_id, "T")
        for key, rel in desired.items()
    }

    assert reconcile(existing, desired) == []


def test_count_operations_reports_every_kind() -> None:
    operations = reconcile(
        {"old": _relationship("old", "A", "B")},
        {"new": _relationship("new", "A", "C")},
    )

    counts = count_operations(operations)

    assert counts[OperationKind.CREATE] == 1
    assert counts[OperationKind.UPDATE] == 0
    assert counts[OperationKind.DELETE] == 1
