from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .db_mongo import close_db, get_database, settings
from .routes.admin import router as admin_router
from .routes.catalog import router as catalog_router
from .routes.revalidate import router as revalidate_router
from .services.cache_mirror import cache_mirror
from .services.schema_service import ensure_cache_documents
from .store import MongoCatalogStore

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Beyond Ys Catalog")

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        settings.site_url,
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
async def on_startup():
    """Create missing cache documents and start mirroring them."""
    db = get_database()
    await ensure_cache_documents(db)
    await cache_mirror.subscribe(MongoCatalogStore(db, use_transactions=settings.mongodb_transactions))
    logger.info("Connected to %s", settings.mongodb_db_name)


@app.on_event("shutdown")
async def on_shutdown():
    """Stop the cache mirror and close the MongoDB connection."""
    await cache_mirror.unsubscribe()
    await close_db()


app.include_router(catalog_router)
app.include_router(admin_router)
app.include_router(revalidate_router)
