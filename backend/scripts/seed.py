"""
Seed MongoDB (and GridFS) with catalog fixtures.

Fixtures are a JSON object of ``{collection: {docId: document}}``. Image
files are read from ``<assets>/<kind>/<id>.webp``.

Usage:
    cd backend
    python -m scripts.seed --data data/fixtures.json --assets data/assets
"""
from __future__ import annotations

import argparse
import asyncio
import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

# Ensure `beyond_ys.*` imports work whether run from repo root or backend/.
ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from beyond_ys.assets import ASSET_KINDS, DEFAULT_CONTENT_TYPE, asset_filename, get_bucket
from beyond_ys.collections import CACHE, PRIMARY_COLLECTIONS, USERS
from beyond_ys.db_mongo import close_db, get_database, settings
from beyond_ys.services.batch import WriteBatch
from beyond_ys.services.schema_service import ensure_cache_documents
from beyond_ys.store import MongoCatalogStore

# the store's batch limit
MAX_OPS_PER_BATCH = 500
SEED_COLLECTIONS = (CACHE, *PRIMARY_COLLECTIONS, USERS)
TIMESTAMP_FIELDS = ("updatedAt", "createdAt")


def convert_timestamps(value: Any) -> Any:
    """Turn exported timestamps ({"seconds": n} or ISO strings) into datetimes."""
    if isinstance(value, list):
        return [convert_timestamps(item) for item in value]
    if not isinstance(value, dict):
        return value
    converted = {}
    for key, item in value.items():
        if key in TIMESTAMP_FIELDS and isinstance(item, dict) and "seconds" in item:
            converted[key] = datetime.fromtimestamp(item["seconds"], tz=timezone.utc)
        elif key in TIMESTAMP_FIELDS and isinstance(item, str):
            converted[key] = datetime.fromisoformat(item.replace("Z", "+00:00"))
        else:
            converted[key] = convert_timestamps(item)
    return converted


def chunk_fixtures(fixtures: dict[str, dict[str, Any]], limit: int = MAX_OPS_PER_BATCH) -> list[WriteBatch]:
    batches = [WriteBatch()]
    for collection in SEED_COLLECTIONS:
        for doc_id, document in (fixtures.get(collection) or {}).items():
            if len(batches[-1]) == limit:
                batches.append(WriteBatch())
            batches[-1].set(collection, doc_id, convert_timestamps(document))
    return [batch for batch in batches if batch]


async def seed_documents(store: MongoCatalogStore, fixtures: dict[str, dict[str, Any]]) -> int:
    print("Seeding documents...")
    total = 0
    for batch in chunk_fixtures(fixtures):
        await store.commit(batch)
        total += len(batch)
        print(f"  Committed {len(batch)} documents")
    print(f"Document seeding done ({total} docs).")
    return total


async def seed_assets(db, assets_dir: Path) -> int:
    print("Seeding assets...")
    bucket = get_bucket(db)
    uploaded = 0
    for kind in ASSET_KINDS:
        kind_dir = assets_dir / kind
        if not kind_dir.is_dir():
            continue
        for path in sorted(kind_dir.glob("*.webp")):
            with path.open("rb") as source:
                await bucket.upload_from_stream(
                    asset_filename(kind, path.stem),
                    source,
                    metadata={"contentType": DEFAULT_CONTENT_TYPE},
                )
            uploaded += 1
    print(f"Asset seeding done ({uploaded} files).")
    return uploaded


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed the catalog database")
    parser.add_argument("--data", type=str, default=str(ROOT_DIR / "data" / "fixtures.json"))
    parser.add_argument("--assets", type=str, default=None)
    return parser.parse_args()


async def main() -> None:
    args = parse_args()
    data_path = Path(args.data)
    if not data_path.exists():
        raise SystemExit(f"{data_path} not found.")
    fixtures = json.loads(data_path.read_text(encoding="utf-8"))

    db = get_database()
    store = MongoCatalogStore(db, use_transactions=settings.mongodb_transactions)
    try:
        await seed_documents(store, fixtures)
        await ensure_cache_documents(db)
        if args.assets:
            await seed_assets(db, Path(args.assets))
        print("Seeding complete!")
    finally:
        await close_db()


if __name__ == "__main__":
    asyncio.run(main())
