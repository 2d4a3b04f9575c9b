"""Load the relationships storage currently holds for one or more instances."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from .errors import RelatedRecordsFetchError
from .query import related_records_query

if TYPE_CHECKING:
    from collections.abc import Sequence

    from inventory_sync.domain.model import Relationship
    from inventory_sync.domain.ports import CollectionClient, StorageResponse

    from .families import RelationshipFamily

log = getLogger(__name__)

DEFAULT_FETCH_LIMIT = 1000


@dataclass(slots=True)
class RelatedRecords[T: Relationship]:
    """Relationships of a single instance split by direction.

    ``incoming`` holds records whose ``to_id`` is the instance (its parents or
    preceding titles); ``outgoing`` holds records whose ``from_id`` is the
    instance (its children or succeeding titles).
    """

    incoming: list[T] = field(default_factory=list)
    outgoing: list[T] = field(default_factory=list)


async def load_existing[T: Relationship](
    client: CollectionClient,
    family: RelationshipFamily[T],
    instance_id: str,
    *,
    limit: int = DEFAULT_FETCH_LIMIT,
) -> dict[str, T]:
    """Return every stored ``family`` record that references ``instance_id``, keyed by id."""

    records = await _fetch_records(client, family, [instance_id], limit=limit)
    existing = {record.id: record for record in records}
    log.debug(
        "Loaded %s existing %s record(s) for instance %s",
        len(existing),
        family.name,
        instance_id,
    )
    return existing


async def load_related[T: Relationship](
    client: CollectionClient,
    family: RelationshipFamily[T],
    instance_ids: Sequence[str],
    *,
    limit: int = DEFAULT_FETCH_LIMIT,
) -> dict[str, RelatedRecords[T]]:
    """Fetch ``family`` records for many instances with one paged query.

    Every requested id gets an entry, even when storage holds nothing for it.
    A record linking two requested instances appears under both of them.
    """

    related: dict[str, RelatedRecords[T]] = {
        instance_id: RelatedRecords() for instance_id in instance_ids
    }
    if not related:
        return related

    for record in await _fetch_records(client, family, list(related), limit=limit):
        if record.to_id in related:
            related[record.to_id].incoming.append(record)
        if record.from_id in related:
            related[record.from_id].outgoing.append(record)
    return related



async def _fetch_records[T: Relationship](
    client: CollectionClient,
    family: RelationshipFamily[T],
    instance_ids: Sequence[str],
    *,
    limit: int,
) -> list[T]:
    """Page through the query with ``limit``-sized requests until storage is exhausted.

    Paging stops once ``totalRecords`` records were read, or, when storage
    does not report a total, at the first page that is not exactly ``limit``
    long. An empty page before the reported total is reached raises
    ``RelatedRecordsFetchError``; a partial existing set is never returned.
    """

    query = str(related_records_query(family.query_fields, instance_ids))
    records: list[T] = []
    while True:
        response = await _fetch_page(client, family, instance_ids, query, limit, len(records))
        page, total = _parse_page(response, family, instance_ids)
        records.extend(page)
        log.debug(
            "Read %s %s record(s) at offset %s (total %s)",
            len(page),
            family.name,
            len(records) - len(page),
            total,
        )
        if total is None:
            # a page larger than ``limit`` means storage ignored paging
            if len(page) != limit:
                return records
        elif len(records) >= total:
            return records
        elif not page:
            raise RelatedRecordsFetchError(
                f"Storage reported {total} {family.name} record(s) "
                f"but stopped returning them after {len(records)}",
                family=family.name,
                instance_ids=instance_ids,
                response=response,
            )


async def _fetch_page[T: Relationship](
    client: CollectionClient,
    family: RelationshipFamily[T],
    instance_ids: Sequence[str],
    query: str,
    limit: int,
    offset: int,
) -> StorageResponse:
    try:
        response = await client.get_many(query, limit=limit, offset=offset)
    except Exception as exc:
        raise RelatedRecordsFetchError(
            f"Failed to contact storage for {family.name}: {exc}",
            family=family.name,
            instance_ids=instance_ids,
        ) from exc

    if not response.is_success:
        raise RelatedRecordsFetchError(
            f"Storage rejected {family.name} lookup with status {response.status_code}: "
            f"{response.body}",
            family=family.name,
            instance_ids=instance_ids,
            response=response,
        )
    return response


def _parse_page[T: Relationship](
    response: StorageResponse,
    family: RelationshipFamily[T],
    instance_ids: Sequence[str],
) -> tuple[list[T], int | None]:
    try:
        payload = response.json()
        raw_records = payload.get(family.collection_key) or []
        if not isinstance(raw_records, list):
            raise ValueError(f"{family.collection_key} is not a list")
        records = [family.from_payload(raw) for raw in raw_records]
    except ValueError as exc:
        raise RelatedRecordsFetchError(
            f"Unreadable {family.name} response: {exc}",
            family=family.name,
            instance_ids=instance_ids,
            response=response,
        ) from exc

    total = payload.get("totalRecords")
    return records, total if isinstance(total, int) else None
