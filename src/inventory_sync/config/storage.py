"""Storage (Okapi) connection settings."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_env_var, positive_int_env_var, require_env_vars
from .http_resilience import ResilienceConfig, RetryPolicy

INSTANCE_RELATIONSHIPS_PATH = "/instance-storage/instance-relationships"
PRECEDING_SUCCEEDING_TITLES_PATH = "/preceding-succeeding-titles"

DEFAULT_FETCH_LIMIT = 1000
DEFAULT_TIMEOUT_SECONDS = 30.0

OKAPI_TENANT_HEADER = "X-Okapi-Tenant"
OKAPI_TOKEN_HEADER = "X-Okapi-Token"
OKAPI_URL_HEADER = "X-Okapi-Url"


@dataclass(frozen=True, slots=True)
class StorageConfig:
    """Where the relationship collections live and how to reach them.

    ``retry`` is ``None`` by default, so every storage call is one round-trip.
    """

    okapi_url: str
    tenant: str
    token: str | None = None
    fetch_limit: int = DEFAULT_FETCH_LIMIT
    instance_relationships_path: str = INSTANCE_RELATIONSHIPS_PATH
    preceding_succeeding_titles_path: str = PRECEDING_SUCCEEDING_TITLES_PATH
    retry: RetryPolicy | None = None
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    @property
    def headers(self) -> dict[str, str]:
        headers = {
            OKAPI_TENANT_HEADER: self.tenant,
            OKAPI_URL_HEADER: self.okapi_url,
            "Accept": "application/json, text/plain",
        }
        if self.token:
            headers[OKAPI_TOKEN_HEADER] = self.token
        return headers

    @property
    def resilience(self) -> ResilienceConfig:
        return ResilienceConfig(
            name="okapi-storage",
            base_url=self.okapi_url.rstrip("/"),
            timeout_seconds=self.timeout_seconds,
            retry=self.retry,
            default_headers=self.headers,
        )


def get_storage_config() -> StorageConfig:
    values = require_env_vars(("OKAPI_URL", "OKAPI_TENANT"))
    return StorageConfig(
        okapi_url=values["OKAPI_URL"],
        tenant=values["OKAPI_TENANT"],
        token=optional_env_var("OKAPI_TOKEN"),
        fetch_limit=positive_int_env_var(
            "INVENTORY_SYNC_FETCH_LIMIT", default=DEFAULT_FETCH_LIMIT
        ),
    )
