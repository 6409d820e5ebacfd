"""FastAPI dependency injection."""

from __future__ import annotations

from iconfactory.config import settings
from iconfactory.store.collections import CollectionStore, get_collection_store as _get_store


def get_settings():
    return settings


def get_collection_store() -> CollectionStore:
    return _get_store()
