from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import Field, field_validator, model_validator

from .formatting import format_iso, parse_release_date
from .models import (
    DEFAULT_ACCENT_COLOR,
    CatalogModel,
    ExtraImage,
    ImageDirection,
    MusicSnapshot,
    OtherArtist,
    StaffGame,
    VoiceActor,
    check_accent_color,
    check_youtube_id,
    normalize_release_date,
)
from .slugs import resolve_slug

DatePrecision = Literal["year", "month", "day"]

_PAYLOAD_ONLY = {"id", "custom_slug", "release_date_precision"}


class CreatePayload(CatalogModel):
    """Create form with a slug bound to ``name``."""

    id: Optional[str] = None
    custom_slug: bool = False

    @model_validator(mode="after")
    def _resolve_slug(self):
        self.id = resolve_slug(self.name, self.id, self.custom_slug)
        return self

    def to_fields(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude=_PAYLOAD_ONLY)


class UpdatePayload(CatalogModel):
    """Partial edit; only explicitly set fields are applied."""

    def to_changes(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_unset=True, exclude_none=True, exclude=_PAYLOAD_ONLY)


def _truncate_release_date(release_date: Optional[str], precision: Optional[str]) -> Optional[str]:
    if not release_date or not precision:
        return release_date
    parsed = parse_release_date(release_date)
    if parsed is None:
        return release_date
    return format_iso(parsed, precision)


# --------------- Characters ---------------

class CharacterCreate(CreatePayload):
    name: str = Field(..., min_length=1)
    category: str = ""
    description: str = ""
    description_source_name: str = ""
    description_source_url: str = ""
    contains_spoilers: bool = False
    accent_color: str = DEFAULT_ACCENT_COLOR
    image_direction: ImageDirection = "left"
    voice_actors: list[VoiceActor] = Field(default_factory=list)
    extra_images: list[ExtraImage] = Field(default_factory=list)
    has_main_image: bool = False
    has_avatar: bool = False
    game_ids: list[str] = Field(default_factory=list)

    @field_validator("accent_color")
    @classmethod
    def _accent_color(cls, value: str) -> str:
        return check_accent_color(value)


class CharacterUpdate(UpdatePayload):
    name: Optional[str] = Field(default=None, min_length=1)
    category: Optional[str] = None
    description: Optional[str] = None
    description_source_name: Optional[str] = None
    description_source_url: Optional[str] = None
    contains_spoilers: Optional[bool] = None
    accent_color: Optional[str] = None
    image_direction: Optional[ImageDirection] = None
    voice_actors: Optional[list[VoiceActor]] = None
    extra_images: Optional[list[ExtraImage]] = None
    has_main_image: Optional[bool] = None
    has_avatar: Optional[bool] = None
    game_ids: Optional[list[str]] = None

    @field_validator("accent_color")
    @classmethod
    def _accent_color(cls, value: Optional[str]) -> Optional[str]:
        return value if value is None else check_accent_color(value)


# --------------- Games ---------------

class GameCreate(CreatePayload):
    name: str = Field(..., min_length=1)
    category: str = ""
    subcategory: str = ""
    platforms: list[str] = Field(default_factory=list)
    release_date: str = ""
    description: str = ""
    description_source_name: str = ""
    description_source_url: str = ""
    character_ids: list[str] = Field(default_factory=list)
    character_spoiler_ids: list[str] = Field(default_factory=list)
    soundtrack_ids: list[str] = Field(default_factory=list)
    has_cover_image: bool = False
    has_banner_image: bool = False

    @field_validator("release_date", mode="before")
    @classmethod
    def _release_date(cls, value: Any) -> str:
        return normalize_release_date(value)


class GameUpdate(UpdatePayload):
    name: Optional[str] = Field(default=None, min_length=1)
    category: Optional[str] = None
    subcategory: Optional[str] = None
    platforms: Optional[list[str]] = None
    release_date: Optional[str] = None
    description: Optional[str] = None
    description_source_name: Optional[str] = None
    description_source_url: Optional[str] = None
    character_ids: Optional[list[str]] = None
    character_spoiler_ids: Optional[list[str]] = None
    soundtrack_ids: Optional[list[str]] = None
    has_cover_image: Optional[bool] = None
    has_banner_image: Optional[bool] = None

    @field_validator("release_date", mode="before")
    @classmethod
    def _release_date(cls, value: Any) -> Optional[str]:
        return value if value is None else normalize_release_date(value)


# --------------- Music ---------------

class MusicImport(MusicSnapshot):
    """One music record as submitted by the create form or the bulk import."""


class MusicUpdate(UpdatePayload):
    title: Optional[str] = None
    album_id: Optional[str] = None
    composer_ids: Optional[list[str]] = None
    arranger_ids: Optional[list[str]] = None
    other_artists: Optional[list[OtherArtist]] = None
    duration: Optional[int] = Field(default=None, ge=0)
    youtube_id: Optional[str] = None

    @field_validator("youtube_id")
    @classmethod
    def _youtube_id(cls, value: Optional[str]) -> Optional[str]:
        return value if value is None else check_youtube_id(value)


class BulkImportRequest(CatalogModel):
    json_text: str = Field(..., alias="json")


# --------------- Music albums ---------------

class MusicAlbumCreate(CreatePayload):
    name: str = Field(..., min_length=1)
    release_date: str = ""
    release_date_precision: Optional[DatePrecision] = None
    has_album_art: bool = False
    music_ids: list[str] = Field(default_factory=list)

    @field_validator("release_date", mode="before")
    @classmethod
    def _release_date(cls, value: Any) -> str:
        return normalize_release_date(value)

    @model_validator(mode="after")
    def _apply_precision(self):
        self.release_date = _truncate_release_date(self.release_date, self.release_date_precision)
        return self


class MusicAlbumUpdate(UpdatePayload):
    name: Optional[str] = Field(default=None, min_length=1)
    release_date: Optional[str] = None
    release_date_precision: Optional[DatePrecision] = None
    has_album_art: Optional[bool] = None
    music_ids: Optional[list[str]] = None

    @field_validator("release_date", mode="before")
    @classmethod
    def _release_date(cls, value: Any) -> Optional[str]:
        return value if value is None else normalize_release_date(value)

    @model_validator(mode="after")
    def _apply_precision(self):
        if self.release_date_precision and self.release_date is None:
            raise ValueError("releaseDatePrecision needs a releaseDate to truncate")
        self.release_date = _truncate_release_date(self.release_date, self.release_date_precision)
        return self


# --------------- Staff ---------------

class StaffCreate(CreatePayload):
    name: str = Field(..., min_length=1)
    description: str = ""
    description_source_name: str = ""
    description_source_url: str = ""
    aliases: list[str] = Field(default_factory=list)
    roles: list[str] = Field(default_factory=list)
    games: list[StaffGame] = Field(default_factory=list)
    has_avatar: bool = False


class StaffUpdate(UpdatePayload):
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    description_source_name: Optional[str] = None
    description_source_url: Optional[str] = None
    aliases: Optional[list[str]] = None
    roles: Optional[list[str]] = None
    games: Optional[list[StaffGame]] = None
    has_avatar: Optional[bool] = None


# --------------- Write responses ---------------

class WriteResultOut(CatalogModel):
    id: str
    paths: list[str] = Field(default_factory=list)


class ImportResultOut(CatalogModel):
    music_ids: list[str]
    staff_ids: list[str]
    album_ids: list[str]
    paths: list[str]


class SlugStatusOut(CatalogModel):
    slug: str
    available: bool


class MessageOut(CatalogModel):
    message: str


# --------------- Page view models ---------------

class StaffCredit(CatalogModel):
    staff_id: str
    name: str
    role: str = ""


class TrackOut(CatalogModel):
    id: str
    title: str
    album_id: str = ""
    duration: int = 0
    duration_text: str = "0:00"
    youtube_id: str = ""
    composers: list[StaffCredit] = Field(default_factory=list)
    arrangers: list[StaffCredit] = Field(default_factory=list)
    other_artists: list[StaffCredit] = Field(default_factory=list)


class CharacterCard(CatalogModel):
    id: str
    name: str
    category: str = ""
    accent_color: str = DEFAULT_ACCENT_COLOR
    image_direction: ImageDirection = "left"


class CharacterListPage(CatalogModel):
    # {category: {first letter: [cards]}}
    categories: dict[str, dict[str, list[CharacterCard]]]


class GameCard(CatalogModel):
    id: str
    name: str
    category: str = ""
    release_date: str = ""
    release_year: str = ""
    has_cover_image: bool = False
    cover_path: Optional[str] = None


class VoiceActorOut(CatalogModel):
    staff_id: str
    name: str
    language: str
    description: str = ""


class CharacterPage(CatalogModel):
    id: str
    name: str
    category: str = ""
    description: str = ""
    description_source_name: str = ""
    description_source_url: str = ""
    contains_spoilers: bool = False
    accent_color: str = DEFAULT_ACCENT_COLOR
    image_direction: ImageDirection = "left"
    avatar_path: Optional[str] = None
    extra_images: list[ExtraImage] = Field(default_factory=list)
    voice_actors: list[VoiceActorOut] = Field(default_factory=list)
    games: list[GameCard] = Field(default_factory=list)


class GameCategory(CatalogModel):
    name: str
    games: list[GameCard]


class GameListPage(CatalogModel):
    categories: list[GameCategory]


class GamePage(CatalogModel):
    id: str
    name: str
    category: str = ""
    subcategory: str = ""
    platforms: list[str] = Field(default_factory=list)
    release_date: str = ""
    release_date_text: str = ""
    description: str = ""
    description_source_name: str = ""
    description_source_url: str = ""
    cover_path: Optional[str] = None
    banner_path: Optional[str] = None
    soundtracks: list[TrackOut] = Field(default_factory=list)
    characters: list[CharacterCard] = Field(default_factory=list)
    spoiler_characters: list[CharacterCard] = Field(default_factory=list)


class AlbumCard(CatalogModel):
    id: str
    name: str
    release_date: str = ""
    release_year: str = ""
    has_album_art: bool = False
    art_path: Optional[str] = None


class AlbumListPage(CatalogModel):
    albums: list[AlbumCard]


class AlbumPage(CatalogModel):
    id: str
    name: str
    release_date: str = ""
    release_date_text: str = ""
    art_path: Optional[str] = None
    tracks: list[TrackOut] = Field(default_factory=list)
    total_duration_text: str = "0:00"


class StaffCard(CatalogModel):
    id: str
    name: str
    roles: list[str] = Field(default_factory=list)


class StaffListPage(CatalogModel):
    groups: dict[str, list[StaffCard]]


class StaffGameOut(CatalogModel):
    game_id: str
    name: str
    roles: list[str] = Field(default_factory=list)


class AlbumTracks(CatalogModel):
    album_id: str = ""
    album_name: str
    tracks: list[TrackOut]


class StaffPage(CatalogModel):
    id: str
    name: str
    description: str = ""
    description_source_name: str = ""
    description_source_url: str = ""
    aliases: list[str] = Field(default_factory=list)
    roles: list[str] = Field(default_factory=list)
    avatar_path: Optional[str] = None
    games: list[StaffGameOut] = Field(default_factory=list)
    music: list[AlbumTracks] = Field(default_factory=list)


# --------------- Composer timeline ---------------

Involvement = Literal["composer", "arranger", "uncredited", "miscredited", "composerArranger"]


class TimelineGame(CatalogModel):
    name: str
    release_date: str


class TimelineStaffMember(CatalogModel):
    name: str
    staff_type: Literal["jdk", "outsourcing"]
    first_game: str


class ComposerTimelineOut(CatalogModel):
    games: dict[str, TimelineGame]
    staff_members: dict[str, TimelineStaffMember]
    # staff member -> {game: involvement}
    composer_timeline: dict[str, dict[str, Involvement]]
