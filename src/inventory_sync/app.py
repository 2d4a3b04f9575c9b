"""Application orchestration entry points."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from logging import getLogger
from typing import TYPE_CHECKING, Any

from inventory_sync.adapters.http_resilience import ResilientClient
from inventory_sync.adapters.storage import (
    INSTANCE_RELATIONSHIPS,
    PRECEDING_SUCCEEDING_TITLES,
    StorageCollectionClient,
    instance_from_request,
    related_records_representation,
)
from inventory_sync.config import ResilienceConfig, StorageConfig, get_storage_config
from inventory_sync.domain.reconciliation import (
    RelatedRecordSynchronizer,
    SyncPhase,
    SyncResult,
    load_related,
)

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from inventory_sync.domain.model import Instance
    from inventory_sync.domain.ports import JsonObject

ClientFactory = Callable[[ResilienceConfig], ResilientClient]

log = getLogger(__name__)


def build_synchronizer(
    *,
    relationships: StorageCollectionClient,
    titles: StorageCollectionClient,
    fetch_limit: int,
) -> RelatedRecordSynchronizer:
    """Instance relationships first, then preceding/succeeding titles."""

    return RelatedRecordSynchronizer(
        phases=(
            SyncPhase(INSTANCE_RELATIONSHIPS, relationships),
            SyncPhase(PRECEDING_SUCCEEDING_TITLES, titles),
        ),
        fetch_limit=fetch_limit,
    )


def sync_instance_related_records(
    instance: Instance,
    *,
    config: StorageConfig | None = None,
    client_factory: ClientFactory | None = None,
) -> SyncResult:
    """Bring stored relationships and titles in line with ``instance``."""

    effective_config = config or get_storage_config()
    effective_factory = client_factory or ResilientClient
    log.info("Starting related-record sync for instance %s", instance.id)
    return asyncio.run(_sync_async(instance, effective_config, effective_factory))


def sync_instance_request(
    payload: Mapping[str, Any],
    *,
    config: StorageConfig | None = None,
    client_factory: ClientFactory | None = None,
) -> SyncResult:
    """Parse an inventory instance request and sync its related records."""

    return sync_instance_related_records(
        instance_from_request(payload),
        config=config,
        client_factory=client_factory,
    )


def fetch_related_records(
    instance_ids: Sequence[str],
    *,
    config: StorageConfig | None = None,
    client_factory: ClientFactory | None = None,
) -> dict[str, JsonObject]:
    """Return the related-record arrays for each instance in ``instance_ids``."""

    effective_config = config or get_storage_config()
    effective_factory = client_factory or ResilientClient
    return asyncio.run(_fetch_related_async(instance_ids, effective_config, effective_factory))


async def _sync_async(
    instance: Instance,
    config: StorageConfig,
    client_factory: ClientFactory,
) -> SyncResult:
    async with client_factory(config.resilience) as http:
        synchronizer = build_synchronizer(
            relationships=StorageCollectionClient(http, config.instance_relationships_path),
            titles=StorageCollectionClient(http, config.preceding_succeeding_titles_path),
            fetch_limit=config.fetch_limit,
        )
        return await synchronizer.sync_related_records(instance)


async def _fetch_related_async(
    instance_ids: Sequence[str],
    config: StorageConfig,
    client_factory: ClientFactory,
) -> dict[str, JsonObject]:
    async with client_factory(config.resilience) as http:
        relationships_client = StorageCollectionClient(http, config.instance_relationships_path)
        titles_client = StorageCollectionClient(http, config.preceding_succeeding_titles_path)
        relationships, titles = await asyncio.gather(
            load_related(
                relationships_client,
                INSTANCE_RELATIONSHIPS,
                instance_ids,
                limit=config.fetch_limit,
            ),
            load_related(
                titles_client,
                PRECEDING_SUCCEEDING_TITLES,
                instance_ids,
                limit=config.fetch_limit,
            ),
        )
    return {
        instance_id: related_records_representation(relationships[instance_id], titles[instance_id])
        for instance_id in relationships
    }
