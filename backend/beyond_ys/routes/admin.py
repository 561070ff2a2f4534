from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException
from pymongo.errors import PyMongoError

from ..auth import require_admin
from ..collections import CHARACTERS, GAMES, MUSIC, MUSIC_ALBUMS, STAFF_INFO, CacheDoc
from ..errors import CatalogError, SlugTakenError
from ..schemas import (
    BulkImportRequest,
    CharacterCreate,
    CharacterUpdate,
    GameCreate,
    GameUpdate,
    ImportResultOut,
    MusicAlbumCreate,
    MusicAlbumUpdate,
    MusicImport,
    MusicUpdate,
    SlugStatusOut,
    StaffCreate,
    StaffUpdate,
    WriteResultOut,
)
from ..services.catalog_service import WriteResult, catalog_service
from ..services.page_cache import page_cache
from ..store import CatalogStore, get_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin", tags=["admin"], dependencies=[Depends(require_admin)])

# URL segment -> collection, for entities created from a name
SLUG_ENTITIES = {
    "characters": CHARACTERS,
    "games": GAMES,
    "music-albums": MUSIC_ALBUMS,
    "staff": STAFF_INFO,
}


def http_error(exc: ValueError) -> HTTPException:
    status_code = getattr(exc, "status_code", 400)
    if isinstance(exc, SlugTakenError):
        return HTTPException(status_code=status_code, detail={"field": exc.field, "message": str(exc)})
    return HTTPException(status_code=status_code, detail=str(exc))


async def revalidate_after_write(paths: list[str], store: CatalogStore) -> None:
    """Refresh cached pages; the write stands even if this fails."""
    try:
        await page_cache.revalidate(paths, store)
    except (CatalogError, PyMongoError) as exc:
        logger.error("Revalidation after write failed for %s: %s", paths, exc)


async def _finish(result: WriteResult, store: CatalogStore) -> WriteResultOut:
    await revalidate_after_write(result.paths, store)
    return WriteResultOut(id=result.id, paths=result.paths)


async def _create(store: CatalogStore, collection: str, entity_id: str | None, fields: Dict[str, Any]):
    try:
        result = await catalog_service.create(store, collection, entity_id, fields)
    except ValueError as exc:
        raise http_error(exc) from exc
    return await _finish(result, store)


async def _edit(store: CatalogStore, collection: str, entity_id: str, changes: Dict[str, Any]):
    try:
        result = await catalog_service.edit(store, collection, entity_id, changes)
    except ValueError as exc:
        raise http_error(exc) from exc
    return await _finish(result, store)


# --------------- Form helpers ---------------

@router.get("/caches/{name}")
async def read_cache(name: str, store: CatalogStore = Depends(get_store)):
    if name not in CacheDoc.ALL:
        raise HTTPException(status_code=404, detail=f"Unknown cache '{name}'")
    return await catalog_service.get_cache(store, name)


@router.get("/slug", response_model=SlugStatusOut)
async def check_slug(
    name: str,
    entity: str = "characters",
    store: CatalogStore = Depends(get_store),
):
    collection = SLUG_ENTITIES.get(entity)
    if collection is None:
        raise HTTPException(status_code=400, detail=f"Unsupported entity type '{entity}'")
    return SlugStatusOut(**await catalog_service.slug_status(store, collection, name))


# --------------- Characters ---------------

@router.post("/characters", response_model=WriteResultOut, status_code=201)
async def create_character(payload: CharacterCreate, store: CatalogStore = Depends(get_store)):
    return await _create(store, CHARACTERS, payload.id, payload.to_fields())


@router.patch("/characters/{character_id}", response_model=WriteResultOut)
async def edit_character(
    character_id: str,
    payload: CharacterUpdate,
    store: CatalogStore = Depends(get_store),
):
    return await _edit(store, CHARACTERS, character_id, payload.to_changes())


# --------------- Games ---------------

@router.post("/games", response_model=WriteResultOut, status_code=201)
async def create_game(payload: GameCreate, store: CatalogStore = Depends(get_store)):
    return await _create(store, GAMES, payload.id, payload.to_fields())


@router.patch("/games/{game_id}", response_model=WriteResultOut)
async def edit_game(game_id: str, payload: GameUpdate, store: CatalogStore = Depends(get_store)):
    return await _edit(store, GAMES, game_id, payload.to_changes())


# --------------- Music ---------------

@router.post("/music", response_model=WriteResultOut, status_code=201)
async def create_music(payload: MusicImport, store: CatalogStore = Depends(get_store)):
    return await _create(store, MUSIC, None, payload.to_document())


@router.patch("/music/{music_id}", response_model=WriteResultOut)
async def edit_music(music_id: str, payload: MusicUpdate, store: CatalogStore = Depends(get_store)):
    return await _edit(store, MUSIC, music_id, payload.to_changes())


@router.post("/music/bulk", response_model=ImportResultOut, status_code=201)
async def bulk_import_music(payload: BulkImportRequest, store: CatalogStore = Depends(get_store)):
    try:
        result = await catalog_service.import_music(store, payload.json_text)
    except ValueError as exc:
        raise http_error(exc) from exc
    await revalidate_after_write(result.paths, store)
    return ImportResultOut(
        music_ids=result.music_ids,
        staff_ids=result.staff_ids,
        album_ids=result.album_ids,
        paths=result.paths,
    )


# --------------- Music albums ---------------

@router.post("/music-albums", response_model=WriteResultOut, status_code=201)
async def create_music_album(payload: MusicAlbumCreate, store: CatalogStore = Depends(get_store)):
    return await _create(store, MUSIC_ALBUMS, payload.id, payload.to_fields())


@router.patch("/music-albums/{album_id}", response_model=WriteResultOut)
async def edit_music_album(
    album_id: str,
    payload: MusicAlbumUpdate,
    store: CatalogStore = Depends(get_store),
):
    return await _edit(store, MUSIC_ALBUMS, album_id, payload.to_changes())


# --------------- Staff ---------------

@router.post("/staff", response_model=WriteResultOut, status_code=201)
async def create_staff(payload: StaffCreate, store: CatalogStore = Depends(get_store)):
    return await _create(store, STAFF_INFO, payload.id, payload.to_fields())


@router.patch("/staff/{staff_id}", response_model=WriteResultOut)
async def edit_staff(staff_id: str, payload: StaffUpdate, store: CatalogStore = Depends(get_store)):
    return await _edit(store, STAFF_INFO, staff_id, payload.to_changes())
