"""Ports the domain depends on."""

from __future__ import annotations

from .collection import CollectionClient, JsonObject, StorageResponse

__all__ = ["CollectionClient", "JsonObject", "StorageResponse"]
