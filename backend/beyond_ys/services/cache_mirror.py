from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Iterable

from pymongo.errors import PyMongoError

from ..collections import CacheDoc
from ..db_mongo import settings
from ..store import CatalogStore
from .batch import WriteBatch, apply_op

logger = logging.getLogger(__name__)


class CacheMirror:
    """In-memory copies of the cache documents.

    Copies older than ``max_age`` seconds are re-read on access, and a polling
    task started by ``subscribe`` keeps them fresh in the background. Local
    writes are folded in through ``apply`` once the store has acknowledged
    them.
    """

    def __init__(
        self,
        names: Iterable[str] = CacheDoc.ALL,
        poll_interval: float | None = None,
        max_age: float | None = None,
    ):
        self.names = tuple(names)
        self.poll_interval = settings.cache_poll_interval if poll_interval is None else poll_interval
        self.max_age = settings.cache_max_age if max_age is None else max_age
        self._docs: dict[str, dict[str, Any]] = {}
        self._loaded_at: dict[str, float] = {}
        self._store: CatalogStore | None = None
        self._task: asyncio.Task | None = None

    def _resolve_store(self, store: CatalogStore | None) -> CatalogStore:
        store = store or self._store
        if store is None:
            raise RuntimeError("Cache mirror has no store; call subscribe() first")
        return store

    async def refresh(self, names: Iterable[str] | None = None, store: CatalogStore | None = None) -> None:
        store = self._resolve_store(store)
        for name in names or self.names:
            self._docs[name] = await store.get_cache(name)
            self._loaded_at[name] = time.monotonic()

    def is_stale(self, name: str) -> bool:
        loaded_at = self._loaded_at.get(name)
        return loaded_at is None or time.monotonic() - loaded_at > self.max_age

    async def get(self, name: str, store: CatalogStore | None = None) -> dict[str, Any]:
        if name not in self.names:
            raise KeyError(name)
        if self.is_stale(name):
            await self.refresh([name], store)
        return self._docs[name]

    async def contains(self, name: str, key: str, store: CatalogStore | None = None) -> bool:
        return key in await self.get(name, store)

    def apply(self, batch: WriteBatch) -> None:
        """Fold the committed cache writes of ``batch`` into the local copies."""
        for op in batch.cache_updates():
            if op.doc_id not in self._docs:
                continue
            updated = apply_op(self._docs[op.doc_id], op)
            if updated is not None:
                self._docs[op.doc_id] = updated

    async def subscribe(self, store: CatalogStore) -> None:
        self._store = store
        await self.refresh()
        if self._task is None:
            self._task = asyncio.create_task(self._poll())
        logger.info("Cache mirror subscribed to %d documents", len(self.names))

    async def unsubscribe(self) -> None:
        task, self._task = self._task, None
        if task is not None:
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                pass
        self._store = None

    async def _poll(self) -> None:
        while True:
            await asyncio.sleep(self.poll_interval)
            try:
                await self.refresh()
            except PyMongoError as exc:
                logger.warning("Cache mirror refresh failed: %s", exc)


cache_mirror = CacheMirror()
