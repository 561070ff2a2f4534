from __future__ import annotations

import asyncio
from typing import Any, Iterable

from ..assets import ALBUM_ARTS, CHARACTER_AVATARS, GAME_BANNERS, GAME_COVERS, STAFF_AVATARS, asset_path
from ..collections import CHARACTERS, GAMES, MUSIC_ALBUMS, STAFF_INFO, CacheDoc
from ..composer_timeline import COMPOSER_TIMELINE, COMPOSER_TIMELINE_GAMES, COMPOSER_TIMELINE_STAFF_MEMBERS
from ..errors import EntityNotFoundError
from ..formatting import format_release_date, format_release_year, format_seconds
from ..models import DEFAULT_ACCENT_COLOR
from ..schemas import (
    AlbumCard,
    AlbumListPage,
    AlbumPage,
    AlbumTracks,
    CharacterCard,
    CharacterListPage,
    CharacterPage,
    ComposerTimelineOut,
    GameCard,
    GameCategory,
    GameListPage,
    GamePage,
    StaffCard,
    StaffCredit,
    StaffGameOut,
    StaffListPage,
    StaffPage,
    TrackOut,
    VoiceActorOut,
)
from ..store import CatalogStore

UNCATEGORIZED = "Uncategorized"
NO_ALBUM = "No album"

# Categories listed first on the games page, in this order.
FEATURED_CATEGORIES = ("Ys Series", "Trails Series")


def category_sort_key(category: str) -> tuple[int, int, str]:
    if category in FEATURED_CATEGORIES:
        return (0, FEATURED_CATEGORIES.index(category), "")
    if category == UNCATEGORIZED:
        return (2, 0, "")
    return (1, 0, category.casefold())


def first_letter(name: str) -> str:
    return name[:1].upper() or "#"


def sort_by_release_date(items: Iterable[Any], key: str = "release_date") -> list[Any]:
    """Newest first, unknown dates last; ties keep their incoming order."""
    items = list(items)
    dated = [item for item in items if getattr(item, key)]
    undated = [item for item in items if not getattr(item, key)]
    return sorted(dated, key=lambda item: getattr(item, key), reverse=True) + undated


async def _require(store: CatalogStore, collection: str, entity_id: str) -> dict[str, Any]:
    document = await store.get(collection, entity_id)
    if document is None:
        raise EntityNotFoundError(collection, entity_id)
    return document


def _staff_names(staff_info: dict[str, Any]) -> dict[str, str]:
    return {staff_id: summary.get("name", staff_id) for staff_id, summary in staff_info.items()}


def build_track(music_id: str, snapshot: dict[str, Any], staff_names: dict[str, str]) -> TrackOut:
    def credit(staff_id: str, role: str = "") -> StaffCredit:
        return StaffCredit(staff_id=staff_id, name=staff_names.get(staff_id, staff_id), role=role)

    duration = int(snapshot.get("duration") or 0)
    return TrackOut(
        id=music_id,
        title=snapshot.get("title", ""),
        album_id=snapshot.get("albumId") or "",
        duration=duration,
        duration_text=format_seconds(duration),
        youtube_id=snapshot.get("youtubeId") or "",
        composers=[credit(staff_id) for staff_id in snapshot.get("composerIds") or []],
        arrangers=[credit(staff_id) for staff_id in snapshot.get("arrangerIds") or []],
        other_artists=[
            credit(artist.get("staffId", ""), artist.get("role", ""))
            for artist in snapshot.get("otherArtists") or []
        ],
    )


def _ordered_tracks(ids: list[str], snapshots: dict[str, Any], staff_names: dict[str, str]) -> list[TrackOut]:
    return [build_track(music_id, snapshots[music_id], staff_names) for music_id in ids if music_id in snapshots]


def _character_card(character_id: str, summary: dict[str, Any]) -> CharacterCard:
    return CharacterCard(id=character_id, **summary)


def _game_card(game_id: str, summary: dict[str, Any]) -> GameCard:
    release_date = summary.get("releaseDate") or ""
    has_cover = bool(summary.get("hasCoverImage"))
    return GameCard(
        id=game_id,
        name=summary.get("name", game_id),
        category=summary.get("category") or "",
        release_date=release_date,
        release_year=format_release_year(release_date),
        has_cover_image=has_cover,
        cover_path=asset_path(GAME_COVERS, game_id, has_cover),
    )


# --------------- Characters ---------------

async def load_character_list(store: CatalogStore) -> CharacterListPage:
    summaries = await store.get_cache(CacheDoc.CHARACTERS)
    cards = sorted(
        (_character_card(character_id, summary) for character_id, summary in summaries.items()),
        key=lambda card: card.name.casefold(),
    )
    categories: dict[str, dict[str, list[CharacterCard]]] = {}
    for category in sorted({card.category or UNCATEGORIZED for card in cards}, key=category_sort_key):
        categories[category] = {}
    for card in cards:
        letters = categories[card.category or UNCATEGORIZED]
        letters.setdefault(first_letter(card.name), []).append(card)
    return CharacterListPage(categories=categories)


async def load_character(store: CatalogStore, character_id: str) -> CharacterPage:
    character, staff_info = await asyncio.gather(
        _require(store, CHARACTERS, character_id),
        store.get_cache(CacheDoc.STAFF_INFO),
    )
    staff_names = _staff_names(staff_info)
    cached_games = character.get("cachedGameNames") or {}
    return CharacterPage(
        id=character_id,
        name=character["name"],
        category=character.get("category") or "",
        description=character.get("description") or "",
        description_source_name=character.get("descriptionSourceName") or "",
        description_source_url=character.get("descriptionSourceUrl") or "",
        contains_spoilers=bool(character.get("containsSpoilers")),
        accent_color=character.get("accentColor") or DEFAULT_ACCENT_COLOR,
        image_direction=character.get("imageDirection") or "left",
        avatar_path=asset_path(CHARACTER_AVATARS, character_id, bool(character.get("hasAvatar"))),
        extra_images=character.get("extraImages") or [],
        voice_actors=[
            VoiceActorOut(
                staff_id=actor["staffId"],
                name=staff_names.get(actor["staffId"], actor["staffId"]),
                language=actor.get("language", ""),
                description=actor.get("description", ""),
            )
            for actor in character.get("voiceActors") or []
        ],
        games=[
            _game_card(game_id, cached_games[game_id])
            for game_id in character.get("gameIds") or []
            if game_id in cached_games
        ],
    )


# --------------- Games ---------------

async def load_game_list(store: CatalogStore) -> GameListPage:
    summaries = await store.get_cache(CacheDoc.GAMES)
    cards = sorted(
        (_game_card(game_id, summary) for game_id, summary in summaries.items()),
        key=lambda card: card.name.casefold(),
    )
    grouped: dict[str, list[GameCard]] = {}
    for card in sort_by_release_date(cards):
        grouped.setdefault(card.category or UNCATEGORIZED, []).append(card)
    return GameListPage(
        categories=[
            GameCategory(name=name, games=grouped[name])
            for name in sorted(grouped, key=category_sort_key)
        ]
    )


async def load_game(store: CatalogStore, game_id: str) -> GamePage:
    game, staff_info = await asyncio.gather(
        _require(store, GAMES, game_id),
        store.get_cache(CacheDoc.STAFF_INFO),
    )
    cached_characters = game.get("cachedCharacters") or {}
    spoiler_ids = set(game.get("characterSpoilerIds") or [])
    characters: list[CharacterCard] = []
    spoilers: list[CharacterCard] = []
    for character_id in game.get("characterIds") or []:
        if character_id not in cached_characters:
            continue
        card = _character_card(character_id, cached_characters[character_id])
        (spoilers if character_id in spoiler_ids else characters).append(card)

    release_date = game.get("releaseDate") or ""
    return GamePage(
        id=game_id,
        name=game["name"],
        category=game.get("category") or "",
        subcategory=game.get("subcategory") or "",
        platforms=game.get("platforms") or [],
        release_date=release_date,
        release_date_text=format_release_date(release_date),
        description=game.get("description") or "",
        description_source_name=game.get("descriptionSourceName") or "",
        description_source_url=game.get("descriptionSourceUrl") or "",
        cover_path=asset_path(GAME_COVERS, game_id, bool(game.get("hasCoverImage"))),
        banner_path=asset_path(GAME_BANNERS, game_id, bool(game.get("hasBannerImage"))),
        soundtracks=_ordered_tracks(
            game.get("soundtrackIds") or [],
            game.get("cachedSoundtracks") or {},
            _staff_names(staff_info),
        ),
        characters=characters,
        spoiler_characters=spoilers,
    )


# --------------- Music albums ---------------

async def load_album_list(store: CatalogStore) -> AlbumListPage:
    summaries = await store.get_cache(CacheDoc.MUSIC_ALBUMS)
    cards = sorted(
        (
            AlbumCard(
                id=album_id,
                name=summary.get("name", album_id),
                release_date=summary.get("releaseDate") or "",
                release_year=format_release_year(summary.get("releaseDate")),
                has_album_art=bool(summary.get("hasAlbumArt")),
                art_path=asset_path(ALBUM_ARTS, album_id, bool(summary.get("hasAlbumArt"))),
            )
            for album_id, summary in summaries.items()
        ),
        key=lambda card: card.name.casefold(),
    )
    return AlbumListPage(albums=sort_by_release_date(cards))


async def load_album(store: CatalogStore, album_id: str) -> AlbumPage:
    album, staff_info = await asyncio.gather(
        _require(store, MUSIC_ALBUMS, album_id),
        store.get_cache(CacheDoc.STAFF_INFO),
    )
    tracks = _ordered_tracks(album.get("musicIds") or [], album.get("cachedMusic") or {}, _staff_names(staff_info))
    release_date = album.get("releaseDate") or ""
    return AlbumPage(
        id=album_id,
        name=album["name"],
        release_date=release_date,
        release_date_text=format_release_date(release_date),
        art_path=asset_path(ALBUM_ARTS, album_id, bool(album.get("hasAlbumArt"))),
        tracks=tracks,
        total_duration_text=format_seconds(sum(track.duration for track in tracks)),
    )


# --------------- Staff ---------------

async def load_staff_list(store: CatalogStore) -> StaffListPage:
    names, roles = await asyncio.gather(
        store.get_cache(CacheDoc.STAFF_NAMES),
        store.get_cache(CacheDoc.STAFF_ROLES),
    )
    groups: dict[str, list[StaffCard]] = {}
    for staff_id, name in sorted(names.items(), key=lambda item: item[1].casefold()):
        card = StaffCard(id=staff_id, name=name, roles=roles.get(staff_id) or [])
        groups.setdefault(first_letter(name), []).append(card)
    return StaffListPage(groups=groups)


async def load_staff(store: CatalogStore, staff_id: str) -> StaffPage:
    staff, staff_names, game_names, album_names = await asyncio.gather(
        _require(store, STAFF_INFO, staff_id),
        store.get_cache(CacheDoc.STAFF_NAMES),
        store.get_cache(CacheDoc.GAME_NAMES),
        store.get_cache(CacheDoc.ALBUM_NAMES),
    )
    tracks = _ordered_tracks(staff.get("musicIds") or [], staff.get("cachedMusic") or {}, staff_names)

    by_album: dict[str, list[TrackOut]] = {}
    for track in tracks:
        by_album.setdefault(track.album_id, []).append(track)
    albums = sorted(
        (
            AlbumTracks(album_id=album_id, album_name=album_names.get(album_id, album_id), tracks=album_tracks)
            for album_id, album_tracks in by_album.items()
            if album_id
        ),
        key=lambda group: group.album_name.casefold(),
    )
    if "" in by_album:
        albums.append(AlbumTracks(album_id="", album_name=NO_ALBUM, tracks=by_album[""]))

    return StaffPage(
        id=staff_id,
        name=staff["name"],
        description=staff.get("description") or "",
        description_source_name=staff.get("descriptionSourceName") or "",
        description_source_url=staff.get("descriptionSourceUrl") or "",
        aliases=staff.get("aliases") or [],
        roles=staff.get("roles") or [],
        avatar_path=asset_path(STAFF_AVATARS, staff_id, bool(staff.get("hasAvatar"))),
        games=[
            StaffGameOut(
                game_id=entry["gameId"],
                name=game_names.get(entry["gameId"], entry["gameId"]),
                roles=entry.get("roles") or [],
            )
            for entry in staff.get("games") or []
        ],
        music=albums,
    )


# --------------- Composer timeline ---------------

def load_composer_timeline() -> ComposerTimelineOut:
    """The static composer table; games run oldest first."""
    games = dict(sorted(COMPOSER_TIMELINE_GAMES.items(), key=lambda item: item[1]["releaseDate"]))
    return ComposerTimelineOut(
        games=games,
        staff_members=COMPOSER_TIMELINE_STAFF_MEMBERS,
        composer_timeline=COMPOSER_TIMELINE,
    )
