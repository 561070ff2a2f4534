from __future__ import annotations

import logging

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError

from ..collections import CACHE, CacheDoc

logger = logging.getLogger(__name__)

SEED_COMMAND = "python -m scripts.seed"


async def ensure_cache_documents(db: AsyncIOMotorDatabase) -> list[str]:
    """Create every missing cache document so guarded updates have a target."""
    existing = {doc["_id"] async for doc in db[CACHE].find({}, {"_id": 1})}
    created: list[str] = []
    for name in CacheDoc.ALL:
        if name in existing:
            continue
        try:
            await db[CACHE].insert_one({"_id": name})
        except DuplicateKeyError:
            # another worker created it first
            continue
        created.append(name)
    if created:
        logger.warning(
            "Created empty cache documents %s; run `%s` to load fixtures",
            ", ".join(created),
            SEED_COMMAND,
        )
    return created
