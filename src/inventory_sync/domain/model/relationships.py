"""Relationship records reconciled against storage.

Both record types compare structurally with ``id`` excluded, so two records
that describe the same link are equal even when one of them carries a freshly
generated id. The reconciler relies on this to skip no-op updates.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable


@runtime_checkable
class Relationship(Protocol):
    """Identity-keyed, structurally comparable link between two instances."""

    @property
    def id(self) -> str: ...

    @property
    def from_id(self) -> str | None: ...

    @property
    def to_id(self) -> str | None: ...


@dataclass(frozen=True, slots=True, kw_only=True)
class InstanceRelationship:
    """Parent/child link: ``super_instance_id`` contains ``sub_instance_id``."""

    id: str = field(compare=False)
    super_instance_id: str
    sub_instance_id: str
    instance_relationship_type_id: str | None = None

    @property
    def from_id(self) -> str:
        return self.super_instance_id

    @property
    def to_id(self) -> str:
        return self.sub_instance_id


@dataclass(frozen=True, slots=True, kw_only=True)
class TitleIdentifier:
    value: str
    identifier_type_id: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class PrecedingSucceedingTitle:
    """Title link: ``preceding_instance_id`` precedes ``succeeding_instance_id``.

    One side may be unlinked (``None``) when the other title only exists as
    descriptive text, so ``title``/``hrid``/``identifiers`` carry the payload.
    """

    id: str = field(compare=False)
    preceding_instance_id: str | None = None
    succeeding_instance_id: str | None = None
    title: str | None = None
    hrid: str | None = None
    identifiers: tuple[TitleIdentifier, ...] = ()

    @property
    def from_id(self) -> str | None:
        return self.preceding_instance_id

    @property
    def to_id(self) -> str | None:
        return self.succeeding_instance_id
