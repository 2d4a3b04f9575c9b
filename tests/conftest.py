from __future__ import annotations

import pytest

from inventory_sync.config import StorageConfig


@pytest.fixture
def storage_config() -> StorageConfig:
    return StorageConfig(
        okapi_url="http://okapi.example.com",
        tenant="diku",
        token="secret-token",
    )
