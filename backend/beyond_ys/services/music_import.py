from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from bson import ObjectId
from pydantic import ValidationError

from ..collections import MUSIC, MUSIC_ALBUMS, STAFF_INFO
from ..errors import BulkImportError
from ..models import Music
from ..schemas import MusicImport
from ..store import CatalogStore
from .batch import WriteBatch
from .projections import collect_ids, get_entity_config, load_references, plan_write, ref_ids, utcnow

logger = logging.getLogger(__name__)


@dataclass
class ImportResult:
    music_ids: list[str] = field(default_factory=list)
    staff_ids: list[str] = field(default_factory=list)
    album_ids: list[str] = field(default_factory=list)
    paths: list[str] = field(default_factory=list)


def _error_locations(exc: ValidationError) -> str:
    return ", ".join(".".join(str(part) for part in error["loc"]) or "<root>" for error in exc.errors())


def parse_music_import(text: str) -> list[MusicImport]:
    """Parse the pasted JSON array of music records."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        logger.error("Music import is not valid JSON: %s", exc)
        raise BulkImportError("Invalid JSON") from exc

    if not isinstance(data, list):
        logger.error("Music import is %s, expected an array", type(data).__name__)
        raise BulkImportError("Expected a JSON array of music records")

    records: list[MusicImport] = []
    for index, item in enumerate(data):
        try:
            records.append(MusicImport.model_validate(item))
        except ValidationError as exc:
            logger.error("Music import record %d failed validation: %s", index, exc.errors())
            raise BulkImportError(
                f"Record {index} is invalid ({_error_locations(exc)})",
                index=index,
            ) from exc
    return records


async def build_import_batch(
    store: CatalogStore,
    records: list[MusicImport],
    now: datetime | None = None,
) -> tuple[WriteBatch, ImportResult]:
    """One batch creating every record, attached to its album and staff."""
    now = now or utcnow()
    config = get_entity_config(MUSIC)
    album_ref, staff_ref = (ref for ref in config.reverse_refs if ref.owner in (MUSIC_ALBUMS, STAFF_INFO))

    documents: list[dict[str, Any]] = [Music(**record.model_dump()).to_document() for record in records]
    album_ids: dict[str, None] = {}
    staff_ids: dict[str, None] = {}
    for document in documents:
        for album_id in collect_ids(document, "albumId"):
            album_ids.setdefault(album_id, None)
        for staff_id in ref_ids(document, staff_ref):
            staff_ids.setdefault(staff_id, None)

    # validate every reference up front so each record reuses the same reads
    known = await load_references(
        store,
        {album_ref.owner: list(album_ids), staff_ref.owner: list(staff_ids)},
    )

    batch = WriteBatch()
    result = ImportResult(album_ids=list(album_ids), staff_ids=list(staff_ids))
    for document in documents:
        music_id = str(ObjectId())
        batch.extend(await plan_write(store, config, music_id, None, document, now=now, known=known))
        result.music_ids.append(music_id)

    result.paths = [f"/staff/{staff_id}" for staff_id in result.staff_ids] + [
        f"/music/{album_id}" for album_id in result.album_ids
    ]
    return batch, result
