from __future__ import annotations

# Primary collections
GAMES = "games"
CHARACTERS = "characters"
MUSIC = "music"
MUSIC_ALBUMS = "musicAlbums"
STAFF_INFO = "staffInfo"
USERS = "users"

# Single collection holding one document per cache
CACHE = "cache"

PRIMARY_COLLECTIONS = (GAMES, CHARACTERS, MUSIC, MUSIC_ALBUMS, STAFF_INFO)


class CacheDoc:
    """Names of the documents in the ``cache`` collection."""

    CHARACTERS = "characters"
    GAMES = "games"
    MUSIC = "music"
    MUSIC_ALBUMS = "musicAlbums"
    STAFF_INFO = "staffInfo"
    STAFF_NAMES = "staffNames"
    STAFF_ROLES = "staffRoles"
    GAME_NAMES = "gameNames"
    ALBUM_NAMES = "albumNames"
    MUSIC_ALBUM_NAMES = "musicAlbumNames"

    ALL = (
        CHARACTERS,
        GAMES,
        MUSIC,
        MUSIC_ALBUMS,
        STAFF_INFO,
        STAFF_NAMES,
        STAFF_ROLES,
        GAME_NAMES,
        ALBUM_NAMES,
        MUSIC_ALBUM_NAMES,
    )


# Page path of a primary document, by collection.
PAGE_PREFIXES: dict[str, str] = {
    CHARACTERS: "/characters",
    GAMES: "/games",
    MUSIC_ALBUMS: "/music",
    STAFF_INFO: "/staff",
}

# List page rendered from each cache document.
CACHE_LIST_PAGES: dict[str, str] = {
    CacheDoc.CHARACTERS: "/characters",
    CacheDoc.GAMES: "/games",
    CacheDoc.GAME_NAMES: "/games",
    CacheDoc.MUSIC_ALBUMS: "/music",
    CacheDoc.ALBUM_NAMES: "/music",
    CacheDoc.MUSIC_ALBUM_NAMES: "/music",
    CacheDoc.STAFF_INFO: "/staff",
    CacheDoc.STAFF_NAMES: "/staff",
    CacheDoc.STAFF_ROLES: "/staff",
}
