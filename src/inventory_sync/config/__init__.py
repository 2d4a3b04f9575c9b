"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var, positive_int_env_var, require_env_vars
from .errors import (
    ConfigurationError,
    InvalidConfigurationError,
    MissingConfigurationError,
)
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy
from .storage import (
    INSTANCE_RELATIONSHIPS_PATH,
    PRECEDING_SUCCEEDING_TITLES_PATH,
    StorageConfig,
    get_storage_config,
)

__all__ = [
    "INSTANCE_RELATIONSHIPS_PATH",
    "PRECEDING_SUCCEEDING_TITLES_PATH",
    "ConfigurationError",
    "InvalidConfigurationError",
    "MissingConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "StorageConfig",
    "get_storage_config",
    "optional_env_var",
    "positive_int_env_var",
    "require_env_vars",
]
