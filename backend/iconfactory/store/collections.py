"""Collection store — keyed persistence for saved icon collections.

Two backends share one interface:
- InMemoryCollectionStore: a process-local ordered dict (default).
- JsonlCollectionStore: appends one JSON line per saved collection and a
  ``{"deleted": id}`` tombstone per removal; the file is replayed on start.

Collections are immutable once saved, so neither backend supports updates.
"""

from __future__ import annotations

import json
import logging
import math
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from iconfactory.errors import CollectionNotFoundError
from iconfactory.models.icon import Icon, IconCollection

logger = logging.getLogger(__name__)


@dataclass
class CollectionPage:
    collections: list[IconCollection]
    total: int
    page: int
    limit: int

    @property
    def pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.limit else 0


class CollectionStore(Protocol):
    def save(self, name: str, icons: list[Icon]) -> IconCollection: ...

    def list(self, page: int = 1, limit: int = 10) -> CollectionPage: ...

    def get(self, collection_id: str) -> IconCollection: ...

    def delete(self, collection_id: str) -> IconCollection: ...


class InMemoryCollectionStore:
    """Insertion-ordered in-process store."""

    def __init__(self) -> None:
        self._collections: dict[str, IconCollection] = {}
        self._lock = threading.Lock()

    def save(self, name: str, icons: list[Icon]) -> IconCollection:
        collection = IconCollection(name=name, icons=list(icons))
        with self._lock:
            self._collections[collection.id] = collection
        logger.info("Saved collection %s (%d icons)", collection.id, collection.icon_count)
        return collection

    def list(self, page: int = 1, limit: int = 10) -> CollectionPage:
        page = max(page, 1)
        limit = max(limit, 1)
        with self._lock:
            items = list(self._collections.values())
        start = (page - 1) * limit
        return CollectionPage(
            collections=items[start:start + limit],
            total=len(items),
            page=page,
            limit=limit,
        )

    def get(self, collection_id: str) -> IconCollection:
        with self._lock:
            collection = self._collections.get(collection_id)
        if collection is None:
            raise CollectionNotFoundError(collection_id)
        return collection

    def delete(self, collection_id: str) -> IconCollection:
        with self._lock:
            collection = self._collections.pop(collection_id, None)
        if collection is None:
            raise CollectionNotFoundError(collection_id)
        logger.info("Deleted collection %s", collection_id)
        return collection


class JsonlCollectionStore(InMemoryCollectionStore):
    """In-memory store mirrored to an append-only JSONL file."""

    def __init__(self, path: Path) -> None:
        super().__init__()
        self.path = path
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._load()

    def save(self, name: str, icons: list[Icon]) -> IconCollection:
        collection = super().save(name, icons)
        self._append(collection.model_dump(mode="json"))
        return collection

    def delete(self, collection_id: str) -> IconCollection:
        collection = super().delete(collection_id)
        self._append({"deleted": collection_id})
        return collection

    def _append(self, record: dict) -> None:
        with self._lock, open(self.path, "a", encoding="utf-8") as f:
            f.write(json.dumps(record, ensure_ascii=False) + "\n")

    def _load(self) -> None:
        if not self.path.exists():
            return
        with open(self.path, encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if not line:
                    continue
                data = json.loads(line)
                if "deleted" in data:
                    self._collections.pop(data["deleted"], None)
                else:
                    collection = IconCollection.model_validate(data)
                    self._collections[collection.id] = collection
        logger.info("Loaded %d collection(s) from %s", len(self._collections), self.path)


# Singleton
_store: CollectionStore | None = None


def get_collection_store() -> CollectionStore:
    """Get or create the global collection store."""
    global _store
    if _store is None:
        from iconfactory.config import settings

        if settings.collections_file:
            _store = JsonlCollectionStore(Path(settings.collections_file))
        else:
            _store = InMemoryCollectionStore()
    return _store


def reset_collection_store(store: CollectionStore | None = None) -> None:
    """Replace the global store (used by tests and app startup)."""
    global _store
    _store = store
