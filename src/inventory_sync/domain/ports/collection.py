"""Remote collection port.

A collection is a homogeneous set of JSON records addressed by a base path
plus a per-record id. Every call is one request/response round trip; the
port makes no promise about retries, caching or status interpretation.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping

type JsonObject = dict[str, Any]


@dataclass(frozen=True, slots=True)
class StorageResponse:
    """Status and raw body of one collection round trip."""

    status_code: int
    body: str = ""
    url: str | None = None

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> JsonObject:
        if not self.body.strip():
            return {}
        payload = json.loads(self.body)
        if not isinstance(payload, dict):
            raise ValueError(f"Expected a JSON object from {self.url or 'storage'}")
        return payload


@runtime_checkable
class CollectionClient(Protocol):
    """Generic accessor for one remote collection endpoint."""

    async def get(self, id: str) -> StorageResponse: ...  # noqa: A002

    async def get_many(
        self,
        query: str | None = None,
        *,
        limit: int | None = None,
        offset: int | None = None,
    ) -> StorageResponse: ...

    async def post(self, entity: Mapping[str, Any]) -> StorageResponse: ...

    async def put(self, id: str, entity: Mapping[str, Any]) -> StorageResponse: ...  # noqa: A002

    async def delete(self, id: str) -> StorageResponse: ...  # noqa: A002

    async def delete_all(self) -> StorageResponse: ...
