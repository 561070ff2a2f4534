from __future__ import annotations

import copy
from typing import Any

from beyond_ys.collections import CACHE, PRIMARY_COLLECTIONS, USERS, CacheDoc
from beyond_ys.errors import SlugTakenError
from beyond_ys.services.batch import WriteBatch, apply_op
from beyond_ys.store import CatalogStore


class InMemoryStore(CatalogStore):
    """CatalogStore over plain dicts, applying batches the way Mongo does."""

    def __init__(self, data: dict[str, dict[str, dict[str, Any]]] | None = None):
        self.data: dict[str, dict[str, dict[str, Any]]] = {
            collection: {} for collection in (*PRIMARY_COLLECTIONS, USERS)
        }
        self.data[CACHE] = {name: {} for name in CacheDoc.ALL}
        for collection, docs in (data or {}).items():
            self.data.setdefault(collection, {}).update(copy.deepcopy(docs))
        self.commits: list[WriteBatch] = []
        self.fail_with: Exception | None = None
        self.reads = 0

    async def get(self, collection: str, doc_id: str) -> dict[str, Any] | None:
        self.reads += 1
        doc = self.data.get(collection, {}).get(doc_id)
        return copy.deepcopy(doc) if doc is not None else None

    async def get_many(self, collection: str, ids: list[str]) -> dict[str, dict[str, Any]]:
        self.reads += 1
        docs = self.data.get(collection, {})
        return {doc_id: copy.deepcopy(docs[doc_id]) for doc_id in dict.fromkeys(ids) if doc_id in docs}

    async def commit(self, batch: WriteBatch) -> None:
        if self.fail_with is not None:
            exc, self.fail_with = self.fail_with, None
            raise exc
        staged = copy.deepcopy(self.data)
        guarded = [op for op in batch.ops if op.guard_absent is not None]
        rest = [op for op in batch.ops if op.guard_absent is None]
        for op in guarded + rest:
            docs = staged.setdefault(op.collection, {})
            current = docs.get(op.doc_id)
            if op.guard_absent is not None and (current is None or op.guard_absent in current):
                raise SlugTakenError(op.guard_absent)
            updated = apply_op(current, op)
            if updated is not None:
                docs[op.doc_id] = updated
        self.data = staged
        self.commits.append(batch)
