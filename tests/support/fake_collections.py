"""In-memory stand-in for a storage collection endpoint."""

from __future__ import annotations

import asyncio
import json
from typing import TYPE_CHECKING, Any

from inventory_sync.domain.ports import StorageResponse

if TYPE_CHECKING:
    from collections.abc import Mapping


class FakeCollectionClient:
    """Stores records by id and logs every call into ``events``.

    ``fail_ids`` makes writes against those ids answer 500; ``raise_ids``
    makes them raise ``ConnectionError``. ``list_status`` overrides the
    status of ``get_many``, which pages with ``limit`` and ``offset``;
    ``reported_total`` replaces the ``totalRecords`` it answers with (``-1``
    leaves it out). Writes yield to the event loop once so that
    concurrently dispatched operations interleave.
    """

    def __init__(
        self,
        name: str,
        collection_key: str,
        records: list[dict[str, Any]] | None = None,
        *,
        events: list[tuple[str, str, str]] | None = None,
        fail_ids: set[str] | None = None,
        raise_ids: set[str] | None = None,
        list_status: int = 200,
        list_error: Exception | None = None,
        reported_total: int | None = None,
    ) -> None:
        self.name = name
        self.collection_key = collection_key
        self.records: dict[str, dict[str, Any]] = {
            record["id"]: dict(record) for record in records or []
        }
        self.events = events if events is not None else []
        self.fail_ids = fail_ids or set()
        self.raise_ids = raise_ids or set()
        self.list_status = list_status
        self.list_error = list_error
        self.reported_total = reported_total
        self.queries: list[tuple[str | None, int | None, int | None]] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def get(self, id: str) -> StorageResponse:  # noqa: A002
        self.events.append((self.name, "get", id))
        record = self.records.get(id)
        if record is None:
            return StorageResponse(404, "Not found")
        return StorageResponse(200, json.dumps(record))

    async def get_many(
        self,
        query: str | None = None,
        *,
        limit: int | None = None,
        offset: int | None = None,
    ) -> StorageResponse:
        self.events.append((self.name, "list", query or ""))
        self.queries.append((query, limit, offset))
        if self.list_error is not None:
            raise self.list_error
        if self.list_status != 200:
            return StorageResponse(self.list_status, "storage unavailable")
        records = list(self.records.values())
        start = offset or 0
        page = records[start:] if limit is None else records[start : start + limit]
        body: dict[str, Any] = {self.collection_key: page}
        total = len(records) if self.reported_total is None else self.reported_total
        if total >= 0:
            body["totalRecords"] = total
        return StorageResponse(200, json.dumps(body))

    async def post(self, entity: Mapping[str, Any]) -> StorageResponse:
        return await self._write("post", str(entity["id"]), dict(entity))

    async def put(self, id: str, entity: Mapping[str, Any]) -> StorageResponse:  # noqa: A002
        return await self._write("put", id, dict(entity))

    async def delete(self, id: str) -> StorageResponse:  # noqa: A002
        return await self._write("delete", id, None)

    async def delete_all(self) -> StorageResponse:
        self.events.append((self.name, "delete_all", ""))
        self.records.clear()
        return StorageResponse(204)

    async def _write(
        self, action: str, record_id: str, entity: dict[str, Any] | None
    ) -> StorageResponse:
        self.events.append((self.name, action, record_id))
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(0)
            if record_id in self.raise_ids:
                raise ConnectionError(f"connection reset during {action} {record_id}")
            if record_id in self.fail_ids:
                return StorageResponse(500, f"cannot {action} {record_id}")
            if entity is None:
                if self.records.pop(record_id, None) is None:
                    return StorageResponse(404, "Not found")
                return StorageResponse(204)
            self.records[record_id] = entity
            return StorageResponse(201 if action == "post" else 204, json.dumps(entity))
        finally:
            self.in_flight -= 1
            self.events.append((self.name, f"{action}-done", record_id))
