"""Inbound instance record with its declared related-record links."""

from __future__ import annotations

from dataclasses import dataclass

from .relationships import TitleIdentifier  # noqa: TC001


@dataclass(frozen=True, slots=True, kw_only=True)
class ParentInstanceLink:
    super_instance_id: str
    instance_relationship_type_id: str | None = None
    id: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ChildInstanceLink:
    sub_instance_id: str
    instance_relationship_type_id: str | None = None
    id: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class PrecedingTitleLink:
    preceding_instance_id: str | None = None
    title: str | None = None
    hrid: str | None = None
    identifiers: tuple[TitleIdentifier, ...] = ()
    id: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class SucceedingTitleLink:
    succeeding_instance_id: str | None = None
    title: str | None = None
    hrid: str | None = None
    identifiers: tuple[TitleIdentifier, ...] = ()
    id: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class Instance:
    """Catalog record being updated.

    Every link list is optional; ``None`` and an empty tuple both mean the
    instance declares no links of that kind.
    """

    id: str
    parent_instances: tuple[ParentInstanceLink, ...] | None = None
    child_instances: tuple[ChildInstanceLink, ...] | None = None
    preceding_titles: tuple[PrecedingTitleLink, ...] | None = None
    succeeding_titles: tuple[SucceedingTitleLink, ...] | None = None
