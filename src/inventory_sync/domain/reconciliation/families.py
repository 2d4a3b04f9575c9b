"""Relationship families share one reconciliation algorithm.

A family ties a relationship record type to its storage collection: the key
holding records in list responses, the two direction fields used to query
them, wire conversion, and the builder for the desired set.
"""

from __future__ import annotations

from collections.abc import Callable, Collection, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from inventory_sync.domain.model import Instance, Relationship
    from inventory_sync.domain.ports import JsonObject


class DesiredSetBuilder[T: Relationship](Protocol):
    def __call__(
        self, instance: Instance, *, reserved: Collection[str] = ...
    ) -> dict[str, T]: ...


@dataclass(frozen=True, slots=True, kw_only=True)
class RelationshipFamily[T: Relationship]:
    name: str
    collection_key: str
    # (field pointing at the instance as target, field pointing at it as source)
    query_fields: tuple[str, str]
    from_payload: Callable[[Mapping[str, Any]], T]
    to_payload: Callable[[T], JsonObject]
    desired: DesiredSetBuilder[T]
