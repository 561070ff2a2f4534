from __future__ import annotations

from typing import AsyncIterator

from motor.motor_asyncio import AsyncIOMotorDatabase, AsyncIOMotorGridFSBucket, AsyncIOMotorGridOut

CHARACTER_AVATARS = "character-avatars"
STAFF_AVATARS = "staff-avatars"
GAME_COVERS = "game-covers"
GAME_BANNERS = "game-banners"
ALBUM_ARTS = "album-arts"

ASSET_KINDS = (CHARACTER_AVATARS, STAFF_AVATARS, GAME_COVERS, GAME_BANNERS, ALBUM_ARTS)
DEFAULT_CONTENT_TYPE = "image/webp"
BUCKET_NAME = "assets"


def asset_filename(kind: str, entity_id: str) -> str:
    """GridFS filename of an entity image."""
    if kind not in ASSET_KINDS:
        raise ValueError(f"Unknown asset kind '{kind}'")
    return f"{kind}/{entity_id}"


def asset_path(kind: str, entity_id: str, present: bool = True) -> str | None:
    """Public URL of an entity image, or None when the entity has none."""
    if not present:
        return None
    return f"/api/assets/{asset_filename(kind, entity_id)}"


def get_bucket(db: AsyncIOMotorDatabase) -> AsyncIOMotorGridFSBucket:
    return AsyncIOMotorGridFSBucket(db, bucket_name=BUCKET_NAME)


async def open_asset(db: AsyncIOMotorDatabase, kind: str, entity_id: str) -> AsyncIOMotorGridOut:
    """Open the latest upload of an asset. Raises gridfs.errors.NoFile if absent."""
    return await get_bucket(db).open_download_stream_by_name(asset_filename(kind, entity_id))


async def iter_chunks(grid_out: AsyncIOMotorGridOut) -> AsyncIterator[bytes]:
    while True:
        chunk = await grid_out.readchunk()
        if not chunk:
            break
        yield chunk


def content_type_of(grid_out: AsyncIOMotorGridOut) -> str:
    metadata = grid_out.metadata or {}
    return metadata.get("contentType") or DEFAULT_CONTENT_TYPE
