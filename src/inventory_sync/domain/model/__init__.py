"""Domain model for related-record synchronisation."""

from __future__ import annotations

from .instance import (
    ChildInstanceLink,
    Instance,
    ParentInstanceLink,
    PrecedingTitleLink,
    SucceedingTitleLink,
)
from .relationships import (
    InstanceRelationship,
    PrecedingSucceedingTitle,
    Relationship,
    TitleIdentifier,
)

__all__ = [
    "ChildInstanceLink",
    "Instance",
    "InstanceRelationship",
    "ParentInstanceLink",
    "PrecedingSucceedingTitle",
    "PrecedingTitleLink",
    "Relationship",
    "SucceedingTitleLink",
    "TitleIdentifier",
]
