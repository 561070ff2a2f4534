from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .formatting import format_iso

HEX_COLOR = re.compile(r"^#[0-9A-F]{6}$", re.IGNORECASE)
PARTIAL_DATE = re.compile(r"^\d{4}(-\d{2}(-\d{2})?)?$")
YOUTUBE_ID_LENGTH = 11
DEFAULT_ACCENT_COLOR = "#161a22"

ImageDirection = Literal["left", "right"]
UserRole = Literal["admin", "user"]


class CatalogModel(BaseModel):
    """Base model for catalog documents (stored with camelCase keys)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_document(self, **kwargs: Any) -> dict[str, Any]:
        return self.model_dump(by_alias=True, **kwargs)


def check_accent_color(value: str) -> str:
    if value and not HEX_COLOR.match(value):
        raise ValueError("Accent color must be a valid hex color code")
    return value


def check_youtube_id(value: str) -> str:
    if value and len(value) != YOUTUBE_ID_LENGTH:
        raise ValueError(f"YouTube id must be {YOUTUBE_ID_LENGTH} characters")
    return value


def normalize_release_date(value: Any) -> str:
    """Stored release dates are strings; '' means unknown."""
    if value is None:
        return ""
    if isinstance(value, (date, datetime)):
        return format_iso(value, "day")
    value = str(value).strip()
    if value and not PARTIAL_DATE.match(value):
        raise ValueError("Release date must look like YYYY, YYYY-MM or YYYY-MM-DD")
    return value


# --------------- Projections ---------------

class CharacterSummary(CatalogModel):
    name: str
    category: str = ""
    accent_color: str = DEFAULT_ACCENT_COLOR
    image_direction: ImageDirection = "left"


class GameSummary(CatalogModel):
    name: str
    category: str = ""
    release_date: str = ""
    has_cover_image: bool = False


class MusicSummary(CatalogModel):
    title: str
    album_id: str = ""


class MusicAlbumSummary(CatalogModel):
    name: str
    release_date: str = ""
    has_album_art: bool = False


class StaffSummary(CatalogModel):
    name: str
    roles: list[str] = Field(default_factory=list)
    has_avatar: bool = False


# --------------- Music ---------------

class OtherArtist(CatalogModel):
    staff_id: str = Field(..., min_length=1)
    role: str


class MusicSnapshot(CatalogModel):
    """Copy of a music document embedded in games, albums and staff."""

    title: str
    album_id: str = ""
    composer_ids: list[str] = Field(default_factory=list)
    arranger_ids: list[str] = Field(default_factory=list)
    other_artists: list[OtherArtist] = Field(default_factory=list)
    duration: int = Field(default=0, ge=0)
    youtube_id: str = ""

    @field_validator("album_id", "youtube_id", mode="before")
    @classmethod
    def _none_as_blank(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("youtube_id")
    @classmethod
    def _youtube_id(cls, value: str) -> str:
        return check_youtube_id(value)


class Music(MusicSnapshot):
    # not edited through forms; maintained by game writes
    dependent_game_ids: list[str] = Field(default_factory=list)
    updated_at: Optional[datetime] = None


# --------------- Characters ---------------

class VoiceActor(CatalogModel):
    staff_id: str = Field(..., min_length=1)
    language: str = Field(..., min_length=1)
    description: str = ""


class ExtraImage(CatalogModel):
    path: str = Field(..., min_length=1)
    caption: str = ""


class Character(CatalogModel):
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
    cached_game_names: dict[str, GameSummary] = Field(default_factory=dict)
    updated_at: Optional[datetime] = None

    @field_validator("accent_color")
    @classmethod
    def _accent_color(cls, value: str) -> str:
        return check_accent_color(value)


# --------------- Games ---------------

class Game(CatalogModel):
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
    cached_soundtracks: dict[str, MusicSnapshot] = Field(default_factory=dict)
    cached_characters: dict[str, CharacterSummary] = Field(default_factory=dict)
    has_cover_image: bool = False
    has_banner_image: bool = False
    updated_at: Optional[datetime] = None

    @field_validator("release_date", mode="before")
    @classmethod
    def _release_date(cls, value: Any) -> str:
        return normalize_release_date(value)


# --------------- Music albums ---------------

class MusicAlbum(CatalogModel):
    name: str = Field(..., min_length=1)
    release_date: str = ""
    has_album_art: bool = False
    music_ids: list[str] = Field(default_factory=list)
    cached_music: dict[str, MusicSnapshot] = Field(default_factory=dict)
    updated_at: Optional[datetime] = None

    @field_validator("release_date", mode="before")
    @classmethod
    def _release_date(cls, value: Any) -> str:
        return normalize_release_date(value)


# --------------- Staff ---------------

class StaffGame(CatalogModel):
    game_id: str = Field(..., min_length=1)
    roles: list[str] = Field(default_factory=list)


class StaffInfo(CatalogModel):
    name: str = Field(..., min_length=1)
    description: str = ""
    description_source_name: str = ""
    description_source_url: str = ""
    aliases: list[str] = Field(default_factory=list)
    roles: list[str] = Field(default_factory=list)
    games: list[StaffGame] = Field(default_factory=list)
    has_avatar: bool = False
    music_ids: list[str] = Field(default_factory=list)
    cached_music: dict[str, MusicSnapshot] = Field(default_factory=dict)
    updated_at: Optional[datetime] = None


# --------------- Users ---------------

class User(CatalogModel):
    username: str = Field(..., min_length=1)
    role: UserRole = "user"
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
