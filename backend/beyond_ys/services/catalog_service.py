from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from bson import ObjectId

from ..collections import GAMES, MUSIC, MUSIC_ALBUMS
from ..errors import EntityNotFoundError, SlugTakenError, ValidationFailed
from ..slugs import derive_slug
from ..store import CatalogStore
from .batch import WriteBatch
from .cache_mirror import CacheMirror, cache_mirror
from .music_import import ImportResult, build_import_batch, parse_music_import
from .projections import (
    EntityConfig,
    collect_ids,
    get_entity_config,
    load_references,
    plan_write,
    utcnow,
)

logger = logging.getLogger(__name__)


@dataclass
class WriteResult:
    id: str
    paths: list[str] = field(default_factory=list)


def _check_game(document: dict[str, Any]) -> None:
    character_ids = set(document.get("characterIds") or [])
    stray = [cid for cid in document.get("characterSpoilerIds") or [] if cid not in character_ids]
    if stray:
        raise ValidationFailed(f"Spoiler characters must also be listed as characters: {', '.join(stray)}")


_DOCUMENT_CHECKS = {GAMES: _check_game}


class CatalogService:
    """Create and edit catalog entities with their denormalized copies."""

    def __init__(self, mirror: CacheMirror | None = None):
        self.mirror = mirror or cache_mirror

    def _normalize(self, config: EntityConfig, fields: dict[str, Any]) -> dict[str, Any]:
        document = config.model.model_validate(fields).to_document()
        check = _DOCUMENT_CHECKS.get(config.collection)
        if check is not None:
            check(document)
        return document

    async def _commit(
        self,
        store: CatalogStore,
        batch: WriteBatch,
        config: EntityConfig,
        entity_id: str,
        action: str,
    ) -> WriteResult:
        await store.commit(batch)
        self.mirror.apply(batch)
        logger.info("%s %s/%s (%d ops)", action, config.collection, entity_id, len(batch))
        return WriteResult(id=entity_id, paths=batch.affected_paths())

    # --------------- Reads for the admin forms ---------------

    async def get_cache(self, store: CatalogStore, name: str) -> dict[str, Any]:
        return await self.mirror.get(name, store)

    async def slug_status(self, store: CatalogStore, collection: str, name: str) -> dict[str, Any]:
        config = get_entity_config(collection)
        slug = derive_slug(name)
        taken = bool(slug) and await self.mirror.contains(config.summary_cache, slug, store)
        return {"slug": slug, "available": bool(slug) and not taken}

    # --------------- Writes ---------------

    async def create(
        self,
        store: CatalogStore,
        collection: str,
        entity_id: str | None,
        fields: dict[str, Any],
        now: datetime | None = None,
    ) -> WriteResult:
        """Create an entity under ``entity_id`` (a slug; music gets a fresh id)."""
        config = get_entity_config(collection)
        if collection == MUSIC:
            entity_id = str(ObjectId())
        elif not entity_id:
            raise ValidationFailed("An id is required")
        elif await self.mirror.contains(config.summary_cache, entity_id, store):
            raise SlugTakenError(entity_id)

        document = self._normalize(config, fields)
        if collection == MUSIC_ALBUMS:
            batch = await self._plan_album_write(store, config, entity_id, None, document, now or utcnow())
        else:
            batch = await plan_write(store, config, entity_id, None, document, now=now)
        return await self._commit(store, batch, config, entity_id, "Created")

    async def edit(
        self,
        store: CatalogStore,
        collection: str,
        entity_id: str,
        changes: dict[str, Any],
        now: datetime | None = None,
    ) -> WriteResult:
        config = get_entity_config(collection)
        before = await store.get(collection, entity_id)
        if before is None:
            raise EntityNotFoundError(collection, entity_id)

        after = self._normalize(config, {**before, **changes})
        if collection == MUSIC_ALBUMS:
            batch = await self._plan_album_write(store, config, entity_id, before, after, now or utcnow())
        else:
            batch = await plan_write(store, config, entity_id, before, after, now=now)
        return await self._commit(store, batch, config, entity_id, "Updated")

    async def _plan_album_write(
        self,
        store: CatalogStore,
        config: EntityConfig,
        album_id: str,
        before: dict[str, Any] | None,
        after: dict[str, Any],
        now: datetime,
    ) -> WriteBatch:
        """Album create or edit that also moves gained and lost tracks between albums."""
        old_ids = collect_ids(before, "musicIds")
        new_ids = collect_ids(after, "musicIds")
        gained = [music_id for music_id in new_ids if music_id not in old_ids]
        lost = [music_id for music_id in old_ids if music_id not in new_ids]

        tracks = (await load_references(store, {MUSIC: gained}))[MUSIC]
        tracks.update(await store.get_many(MUSIC, lost))

        music_config = get_entity_config(MUSIC)
        moves: dict[str, tuple[dict[str, Any], dict[str, Any]]] = {}
        for music_id in gained:
            track = tracks[music_id]
            if track.get("albumId") != album_id:
                moves[music_id] = (track, self._normalize(music_config, {**track, "albumId": album_id}))
        for music_id in lost:
            track = tracks.get(music_id)
            if track is not None and track.get("albumId") == album_id:
                moves[music_id] = (track, self._normalize(music_config, {**track, "albumId": ""}))

        batch = await plan_write(
            store,
            config,
            album_id,
            before,
            after,
            now=now,
            known={MUSIC: {music_id: moved for music_id, (_, moved) in moves.items()}},
        )
        for music_id, (track, moved) in moves.items():
            batch.extend(
                await plan_write(
                    store,
                    music_config,
                    music_id,
                    track,
                    moved,
                    now=now,
                    skip_owners=[(MUSIC_ALBUMS, album_id)],
                )
            )
        return batch

    async def import_music(self, store: CatalogStore, text: str) -> ImportResult:
        records = parse_music_import(text)
        batch, result = await build_import_batch(store, records)
        if batch:
            await store.commit(batch)
            self.mirror.apply(batch)
        logger.info(
            "Imported %d music record(s) into %d album(s) (%d ops)",
            len(result.music_ids),
            len(result.album_ids),
            len(batch),
        )
        return result


catalog_service = CatalogService()
