"""HTTP client for one storage collection endpoint."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from inventory_sync.domain.ports import StorageResponse

if TYPE_CHECKING:
    from collections.abc import Mapping

    import httpx

    from inventory_sync.adapters.http_resilience import ResilientClient

log = getLogger(__name__)


class StorageCollectionClient:
    """Create, replace, delete and list the records under ``collection_path``.

    Every call is exactly one request. Non-2xx responses are returned, not
    raised; deciding what a status means is left to the caller. Transport
    errors from ``httpx`` propagate unchanged.
    """

    def __init__(self, http: ResilientClient, collection_path: str) -> None:
        self._http = http
        self._collection_path = "/" + collection_path.strip("/")

    @property
    def collection_path(self) -> str:
        return self._collection_path

    async def get(self, id: str) -> StorageResponse:  # noqa: A002
        return _to_storage_response(await self._http.get(self._record_path(id)))

    async def get_many(
        self,
        query: str | None = None,
        *,
        limit: int | None = None,
        offset: int | None = None,
    ) -> StorageResponse:
        params: dict[str, str] = {}
        if query is not None and query.strip():
            params["query"] = query
        if limit is not None:
            params["limit"] = str(limit)
        if offset is not None:
            params["offset"] = str(offset)

        log.debug("GET %s params=%s", self._collection_path, params)
        response = await self._http.get(self._collection_path, params=params or None)
        return _to_storage_response(response)

    async def post(self, entity: Mapping[str, Any]) -> StorageResponse:
        log.debug("POST %s id=%s", self._collection_path, entity.get("id"))
        response = await self._http.post(self._collection_path, json=dict(entity))
        return _to_storage_response(response)

    async def put(self, id: str, entity: Mapping[str, Any]) -> StorageResponse:  # noqa: A002
        path = self._record_path(id)
        log.debug("PUT %s", path)
        return _to_storage_response(await self._http.put(path, json=dict(entity)))

    async def delete(self, id: str) -> StorageResponse:  # noqa: A002
        path = self._record_path(id)
        log.debug("DELETE %s", path)
        return _to_storage_response(await self._http.delete(path))

    async def delete_all(self) -> StorageResponse:
        log.debug("DELETE %s", self._collection_path)
        return _to_storage_response(await self._http.delete(self._collection_path))

    def _record_path(self, id: str) -> str:  # noqa: A002
        return f"{self._collection_path}/{quote(id, safe='')}"


def _to_storage_response(response: httpx.Response) -> StorageResponse:
    return StorageResponse(
        status_code=response.status_code,
        body=response.text,
        url=str(response.request.url),
    )
