from __future__ import annotations

import logging
import re
from typing import Any, Awaitable, Callable, Iterable

from pydantic import BaseModel

from ..errors import EntityNotFoundError, InvalidPathError
from ..store import CatalogStore
from . import loaders

logger = logging.getLogger(__name__)

Loader = Callable[..., Awaitable[BaseModel]]

_PAGES: tuple[tuple[re.Pattern[str], Loader], ...] = (
    (re.compile(r"^/characters$"), loaders.load_character_list),
    (re.compile(r"^/characters/(?P<id>[^/]+)$"), loaders.load_character),
    (re.compile(r"^/games$"), loaders.load_game_list),
    (re.compile(r"^/games/(?P<id>[^/]+)$"), loaders.load_game),
    (re.compile(r"^/music$"), loaders.load_album_list),
    (re.compile(r"^/music/(?P<id>[^/]+)$"), loaders.load_album),
    (re.compile(r"^/staff$"), loaders.load_staff_list),
    (re.compile(r"^/staff/(?P<id>[^/]+)$"), loaders.load_staff),
)


def normalize_path(path: str) -> str:
    path = path.strip()
    if len(path) > 1:
        path = path.rstrip("/")
    return path


def resolve_page(path: str) -> tuple[Loader, tuple[Any, ...]]:
    """Loader and its arguments for a page path."""
    for pattern, loader in _PAGES:
        match = pattern.match(path)
        if match:
            return loader, tuple(match.groupdict().values())
    raise InvalidPathError(path)


class PageCache:
    """Rendered page view models keyed by page path."""

    def __init__(self) -> None:
        self._pages: dict[str, BaseModel] = {}

    def __contains__(self, path: str) -> bool:
        return normalize_path(path) in self._pages

    def clear(self) -> None:
        self._pages.clear()

    async def render(self, path: str, store: CatalogStore) -> BaseModel:
        path = normalize_path(path)
        page = self._pages.get(path)
        if page is None:
            loader, args = resolve_page(path)
            page = await loader(store, *args)
            self._pages[path] = page
        return page

    async def revalidate(self, paths: Iterable[str], store: CatalogStore) -> list[str]:
        """Re-render ``paths``. Returns the paths that were dropped."""
        resolved = [(path, *resolve_page(path)) for path in map(normalize_path, paths)]
        dropped: list[str] = []
        for path, loader, args in resolved:
            try:
                self._pages[path] = await loader(store, *args)
            except EntityNotFoundError:
                self._pages.pop(path, None)
                dropped.append(path)
        logger.info("Revalidated %d page(s), dropped %d", len(resolved) - len(dropped), len(dropped))
        return dropped


page_cache = PageCache()
