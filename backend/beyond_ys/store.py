from __future__ import annotations

import logging
from itertools import groupby
from typing import Any

from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from .collections import CACHE
from .db_mongo import get_db, settings
from .errors import CommitError, SlugTakenError
from .services.batch import WriteBatch

logger = logging.getLogger(__name__)


class CatalogStore:
    """Typed access to the catalog collections.

    Documents are returned as plain dicts without their ``_id``.
    """

    async def get(self, collection: str, doc_id: str) -> dict[str, Any] | None:
        raise NotImplementedError

    async def get_many(self, collection: str, ids: list[str]) -> dict[str, dict[str, Any]]:
        raise NotImplementedError

    async def get_cache(self, name: str) -> dict[str, Any]:
        return await self.get(CACHE, name) or {}

    async def commit(self, batch: WriteBatch) -> None:
        raise NotImplementedError


def _strip_id(doc: dict[str, Any]) -> dict[str, Any]:
    doc = dict(doc)
    doc.pop("_id", None)
    return doc


class MongoCatalogStore(CatalogStore):
    def __init__(self, db: AsyncIOMotorDatabase, use_transactions: bool = True):
        self.db = db
        self.use_transactions = use_transactions

    async def get(self, collection: str, doc_id: str) -> dict[str, Any] | None:
        doc = await self.db[collection].find_one({"_id": doc_id})
        return _strip_id(doc) if doc else None

    async def get_many(self, collection: str, ids: list[str]) -> dict[str, dict[str, Any]]:
        unique_ids = list(dict.fromkeys(ids))
        if not unique_ids:
            return {}
        cursor = self.db[collection].find({"_id": {"$in": unique_ids}})
        docs = await cursor.to_list(length=len(unique_ids))
        return {str(doc["_id"]): _strip_id(doc) for doc in docs}

    async def commit(self, batch: WriteBatch) -> None:
        if not batch:
            return
        guarded, rest = batch.to_requests()
        try:
            if self.use_transactions:
                async with await self.db.client.start_session() as session:
                    async with session.start_transaction():
                        await self._run(guarded, rest, session)
            else:
                await self._run(guarded, rest, None)
        except PyMongoError as exc:
            logger.error("Batch commit failed (%d ops): %s", len(batch), exc)
            raise CommitError("The store rejected the batch") from exc

    async def _run(self, guarded, rest, session) -> None:
        for collection, request, key in guarded:
            result = await self.db[collection].bulk_write([request], session=session)
            if result.matched_count == 0:
                raise SlugTakenError(key)
        for collection, group in groupby(rest, key=lambda item: item[0]):
            requests = [request for _, request in group]
            await self.db[collection].bulk_write(requests, ordered=True, session=session)


def get_store(db: AsyncIOMotorDatabase = Depends(get_db)) -> CatalogStore:
    return MongoCatalogStore(db, use_transactions=settings.mongodb_transactions)
