from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Header, HTTPException, Request
from fastapi.responses import JSONResponse

from ..auth import authorize_admin
from ..errors import InvalidPathError
from ..services.page_cache import page_cache
from ..store import CatalogStore, get_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["revalidate"])


def message(status_code: int, text: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": text})


async def read_paths(request: Request) -> Optional[list[str]]:
    """``paths`` from a ``{"paths": [...]}`` body, or None if it is unusable."""
    try:
        body = await request.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    paths = body.get("paths")
    if not isinstance(paths, list) or not paths:
        return None
    if not all(isinstance(path, str) and path for path in paths):
        return None
    return paths


@router.post("/revalidate")
async def revalidate(
    request: Request,
    authorization: Optional[str] = Header(default=None),
    store: CatalogStore = Depends(get_store),
):
    try:
        authorize_admin(authorization)
    except HTTPException as exc:
        return message(exc.status_code, exc.detail)

    paths = await read_paths(request)
    if paths is None:
        return message(400, "No path provided")

    try:
        await page_cache.revalidate(paths, store)
    except InvalidPathError as exc:
        logger.warning("Rejected revalidation: %s", exc)
        return message(400, "Invalid path")
    except Exception:
        logger.exception("Revalidation failed for %s", paths)
        return message(500, "Revalidation failed")
    return message(200, "Revalidation successful")
