from __future__ import annotations

import copy
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Iterable

from pydantic.alias_generators import to_camel

from ..collections import CACHE, CHARACTERS, GAMES, MUSIC, MUSIC_ALBUMS, STAFF_INFO, CacheDoc
from ..errors import MissingReferenceError
from ..models import (
    Character,
    CharacterSummary,
    CatalogModel,
    Game,
    GameSummary,
    Music,
    MusicAlbum,
    MusicAlbumSummary,
    MusicSnapshot,
    MusicSummary,
    StaffInfo,
    StaffSummary,
)
from ..store import CatalogStore
from .batch import DELETE_FIELD, ArrayRemove, ArrayUnion, WriteBatch


def fields_of(model: type[CatalogModel]) -> tuple[str, ...]:
    """Stored (camelCase) field names of a projection model."""
    return tuple(to_camel(name) for name in model.model_fields)


CHARACTER_SUMMARY = fields_of(CharacterSummary)
GAME_SUMMARY = fields_of(GameSummary)
MUSIC_SUMMARY = fields_of(MusicSummary)
MUSIC_SNAPSHOT = fields_of(MusicSnapshot)
MUSIC_ALBUM_SUMMARY = fields_of(MusicAlbumSummary)
STAFF_SUMMARY = fields_of(StaffSummary)


@dataclass(frozen=True)
class ReverseRef:
    """Owners that embed a projection of an entity.

    ``id_fields`` name the fields on the entity that hold owner ids; a dotted
    field reads a key out of a list of objects (``otherArtists.staffId``).
    ``detach_lists`` are further owner lists the id is pulled from when the
    owner is detached.
    """

    owner: str
    id_fields: tuple[str, ...]
    embed_path: str | None
    owner_list_field: str | None
    fields: tuple[str, ...] = ()
    detach_lists: tuple[str, ...] = ()


@dataclass(frozen=True)
class ForwardEmbed:
    """A map on the entity holding projections of the documents it lists."""

    ids_field: str
    embed_path: str
    source: str
    fields: tuple[str, ...]


@dataclass(frozen=True)
class EntityConfig:
    collection: str
    model: type[CatalogModel]
    summary_cache: str
    summary_fields: tuple[str, ...]
    value_caches: tuple[tuple[str, str], ...] = ()
    reverse_refs: tuple[ReverseRef, ...] = ()
    embeds: tuple[ForwardEmbed, ...] = ()


_ENTITY_CONFIGS: dict[str, EntityConfig] = {
    CHARACTERS: EntityConfig(
        collection=CHARACTERS,
        model=Character,
        summary_cache=CacheDoc.CHARACTERS,
        summary_fields=CHARACTER_SUMMARY,
        reverse_refs=(
            ReverseRef(
                owner=GAMES,
                id_fields=("gameIds",),
                embed_path="cachedCharacters",
                owner_list_field="characterIds",
                fields=CHARACTER_SUMMARY,
                detach_lists=("characterSpoilerIds",),
            ),
        ),
        embeds=(ForwardEmbed("gameIds", "cachedGameNames", GAMES, GAME_SUMMARY),),
    ),
    GAMES: EntityConfig(
        collection=GAMES,
        model=Game,
        summary_cache=CacheDoc.GAMES,
        summary_fields=GAME_SUMMARY,
        value_caches=((CacheDoc.GAME_NAMES, "name"),),
        reverse_refs=(
            ReverseRef(
                owner=CHARACTERS,
                id_fields=("characterIds",),
                embed_path="cachedGameNames",
                owner_list_field="gameIds",
                fields=GAME_SUMMARY,
            ),
            ReverseRef(
                owner=MUSIC,
                id_fields=("soundtrackIds",),
                embed_path=None,
                owner_list_field="dependentGameIds",
            ),
        ),
        embeds=(
            ForwardEmbed("soundtrackIds", "cachedSoundtracks", MUSIC, MUSIC_SNAPSHOT),
            ForwardEmbed("characterIds", "cachedCharacters", CHARACTERS, CHARACTER_SUMMARY),
        ),
    ),
    MUSIC: EntityConfig(
        collection=MUSIC,
        model=Music,
        summary_cache=CacheDoc.MUSIC,
        summary_fields=MUSIC_SUMMARY,
        reverse_refs=(
            ReverseRef(
                owner=GAMES,
                id_fields=("dependentGameIds",),
                embed_path="cachedSoundtracks",
                owner_list_field=None,
                fields=MUSIC_SNAPSHOT,
            ),
            ReverseRef(
                owner=MUSIC_ALBUMS,
                id_fields=("albumId",),
                embed_path="cachedMusic",
                owner_list_field="musicIds",
                fields=MUSIC_SNAPSHOT,
            ),
            ReverseRef(
                owner=STAFF_INFO,
                id_fields=("composerIds", "arrangerIds", "otherArtists.staffId"),
                embed_path="cachedMusic",
                owner_list_field="musicIds",
                fields=MUSIC_SNAPSHOT,
            ),
        ),
    ),
    MUSIC_ALBUMS: EntityConfig(
        collection=MUSIC_ALBUMS,
        model=MusicAlbum,
        summary_cache=CacheDoc.MUSIC_ALBUMS,
        summary_fields=MUSIC_ALBUM_SUMMARY,
        value_caches=(
            (CacheDoc.ALBUM_NAMES, "name"),
            (CacheDoc.MUSIC_ALBUM_NAMES, "name"),
        ),
        embeds=(ForwardEmbed("musicIds", "cachedMusic", MUSIC, MUSIC_SNAPSHOT),),
    ),
    STAFF_INFO: EntityConfig(
        collection=STAFF_INFO,
        model=StaffInfo,
        summary_cache=CacheDoc.STAFF_INFO,
        summary_fields=STAFF_SUMMARY,
        value_caches=(
            (CacheDoc.STAFF_NAMES, "name"),
            (CacheDoc.STAFF_ROLES, "roles"),
        ),
    ),
}


def get_entity_config(collection: str) -> EntityConfig:
    try:
        return _ENTITY_CONFIGS[collection]
    except KeyError:
        raise ValueError(f"Unsupported entity type '{collection}'") from None


def entity_configs() -> list[EntityConfig]:
    return list(_ENTITY_CONFIGS.values())


# --------------- Projection helpers ---------------

def project(document: dict[str, Any] | None, fields: Iterable[str]) -> dict[str, Any]:
    if not document:
        return {}
    return {field: copy.deepcopy(document[field]) for field in fields if field in document}


def collect_ids(document: dict[str, Any] | None, id_field: str) -> list[str]:
    """Ids named by ``id_field``: a string, a list of strings or ``list.key``."""
    if not document:
        return []
    head, _, key = id_field.partition(".")
    value = document.get(head)
    if key:
        values = [item.get(key) for item in value or [] if isinstance(item, dict)]
    elif isinstance(value, (list, tuple)):
        values = list(value)
    else:
        values = [value]
    return [v for v in dict.fromkeys(values) if isinstance(v, str) and v]


def ref_ids(document: dict[str, Any] | None, ref: ReverseRef) -> list[str]:
    ids: dict[str, None] = {}
    for id_field in ref.id_fields:
        for owner_id in collect_ids(document, id_field):
            ids.setdefault(owner_id, None)
    return list(ids)


def attach_fields(ref: ReverseRef, entity_id: str, embedded: dict[str, Any]) -> dict[str, Any]:
    fields: dict[str, Any] = {}
    if ref.owner_list_field:
        fields[ref.owner_list_field] = ArrayUnion(entity_id)
    if ref.embed_path:
        fields[f"{ref.embed_path}.{entity_id}"] = embedded
    return fields


def detach_fields(ref: ReverseRef, entity_id: str) -> dict[str, Any]:
    fields: dict[str, Any] = {}
    if ref.owner_list_field:
        fields[ref.owner_list_field] = ArrayRemove(entity_id)
    if ref.embed_path:
        fields[f"{ref.embed_path}.{entity_id}"] = DELETE_FIELD
    for list_field in ref.detach_lists:
        fields[list_field] = ArrayRemove(entity_id)
    return fields


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


Known = dict[str, dict[str, dict[str, Any]]]


async def load_references(
    store: CatalogStore,
    needed: dict[str, list[str]],
    known: Known | None = None,
) -> Known:
    """Fetch referenced documents, raising MissingReferenceError for absent ones.

    ``known`` holds documents that are about to be written in the same batch;
    they take precedence over stored copies.
    """
    known = known or {}
    loaded: Known = {}
    for collection, ids in needed.items():
        ids = list(dict.fromkeys(ids))
        local = known.get(collection, {})
        docs = {doc_id: local[doc_id] for doc_id in ids if doc_id in local}
        remote_ids = [doc_id for doc_id in ids if doc_id not in docs]
        if remote_ids:
            docs.update(await store.get_many(collection, remote_ids))
        missing = [doc_id for doc_id in ids if doc_id not in docs]
        if missing:
            raise MissingReferenceError(collection, missing)
        loaded[collection] = docs
    return loaded


async def plan_write(
    store: CatalogStore,
    config: EntityConfig,
    entity_id: str,
    before: dict[str, Any] | None,
    after: dict[str, Any],
    *,
    now: datetime | None = None,
    known: Known | None = None,
    skip_owners: Iterable[tuple[str, str]] = (),
) -> WriteBatch:
    """Build the batch that creates (``before is None``) or edits one entity.

    Every cache entry, owner list and embedded projection that depends on the
    entity is written in the same batch. Documents listed in ``skip_owners``
    are left alone because the caller writes them itself.
    """
    now = now or utcnow()
    creating = before is None
    prior = before or {}
    after = copy.deepcopy(after)
    skipped = set(skip_owners)

    needed: dict[str, list[str]] = {}
    for ref in config.reverse_refs:
        old_ids = set(ref_ids(prior, ref))
        for owner_id in ref_ids(after, ref):
            if owner_id not in old_ids and (ref.owner, owner_id) not in skipped:
                needed.setdefault(ref.owner, []).append(owner_id)
    for embed in config.embeds:
        current = prior.get(embed.embed_path) or {}
        for source_id in collect_ids(after, embed.ids_field):
            if source_id not in current:
                needed.setdefault(embed.source, []).append(source_id)
    loaded = await load_references(store, needed, known)

    for embed in config.embeds:
        current = prior.get(embed.embed_path) or {}
        resolved: dict[str, Any] = {}
        for source_id in collect_ids(after, embed.ids_field):
            if source_id in current:
                resolved[source_id] = current[source_id]
            else:
                resolved[source_id] = project(loaded[embed.source][source_id], embed.fields)
        after[embed.embed_path] = resolved

    batch = WriteBatch()
    if creating:
        batch.set(config.collection, entity_id, {**after, "updatedAt": now})
    else:
        changed = {key: value for key, value in after.items() if key not in prior or prior[key] != value}
        changed.pop("updatedAt", None)
        batch.update(config.collection, entity_id, {**changed, "updatedAt": now})

    summary = project(after, config.summary_fields)
    if creating:
        batch.update(CACHE, config.summary_cache, {entity_id: summary}, guard_absent=entity_id)
    elif summary != project(prior, config.summary_fields):
        batch.update(CACHE, config.summary_cache, {entity_id: summary})

    for cache_name, field in config.value_caches:
        if creating or prior.get(field) != after.get(field):
            batch.update(CACHE, cache_name, {entity_id: copy.deepcopy(after.get(field))})

    for ref in config.reverse_refs:
        old_ids = ref_ids(prior, ref)
        new_ids = ref_ids(after, ref)
        embedded = project(after, ref.fields)
        embed_changed = bool(ref.embed_path) and (creating or project(prior, ref.fields) != embedded)
        for owner_id in old_ids:
            if owner_id not in new_ids and (ref.owner, owner_id) not in skipped:
                batch.update(ref.owner, owner_id, detach_fields(ref, entity_id))
        for owner_id in new_ids:
            if (ref.owner, owner_id) in skipped:
                continue
            if owner_id not in old_ids:
                batch.update(ref.owner, owner_id, attach_fields(ref, entity_id, embedded))
            elif embed_changed:
                batch.update(ref.owner, owner_id, {f"{ref.embed_path}.{entity_id}": embedded})

    return batch
