from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import StreamingResponse
from gridfs.errors import NoFile
from motor.motor_asyncio import AsyncIOMotorDatabase

from ..assets import ASSET_KINDS, content_type_of, iter_chunks, open_asset
from ..db_mongo import get_db
from ..errors import EntityNotFoundError
from ..schemas import (
    AlbumListPage,
    AlbumPage,
    CharacterListPage,
    CharacterPage,
    ComposerTimelineOut,
    GameListPage,
    GamePage,
    StaffListPage,
    StaffPage,
)
from ..services.loaders import load_composer_timeline
from ..services.page_cache import page_cache
from ..store import CatalogStore, get_store

router = APIRouter(prefix="/api", tags=["catalog"])


async def render_page(path: str, store: CatalogStore):
    try:
        return await page_cache.render(path, store)
    except EntityNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@router.get("/characters", response_model=CharacterListPage)
async def list_characters(store: CatalogStore = Depends(get_store)):
    return await render_page("/characters", store)


@router.get("/characters/{character_id}", response_model=CharacterPage)
async def get_character(character_id: str, store: CatalogStore = Depends(get_store)):
    return await render_page(f"/characters/{character_id}", store)


@router.get("/games", response_model=GameListPage)
async def list_games(store: CatalogStore = Depends(get_store)):
    return await render_page("/games", store)


@router.get("/games/{game_id}", response_model=GamePage)
async def get_game(game_id: str, store: CatalogStore = Depends(get_store)):
    return await render_page(f"/games/{game_id}", store)


@router.get("/music", response_model=AlbumListPage)
async def list_music_albums(store: CatalogStore = Depends(get_store)):
    return await render_page("/music", store)


@router.get("/music/{album_id}", response_model=AlbumPage)
async def get_music_album(album_id: str, store: CatalogStore = Depends(get_store)):
    return await render_page(f"/music/{album_id}", store)


@router.get("/staff", response_model=StaffListPage)
async def list_staff(store: CatalogStore = Depends(get_store)):
    return await render_page("/staff", store)


@router.get("/staff/{staff_id}", response_model=StaffPage)
async def get_staff(staff_id: str, store: CatalogStore = Depends(get_store)):
    return await render_page(f"/staff/{staff_id}", store)


@router.get("/composer-timeline", response_model=ComposerTimelineOut)
async def get_composer_timeline():
    return load_composer_timeline()


@router.get("/assets/{kind}/{entity_id}")
async def get_asset(kind: str, entity_id: str, db: AsyncIOMotorDatabase = Depends(get_db)):
    if kind not in ASSET_KINDS:
        raise HTTPException(status_code=404, detail="Asset not found")
    try:
        grid_out = await open_asset(db, kind, entity_id)
    except NoFile as exc:
        raise HTTPException(status_code=404, detail="Asset not found") from exc
    return StreamingResponse(iter_chunks(grid_out), media_type=content_type_of(grid_out))
