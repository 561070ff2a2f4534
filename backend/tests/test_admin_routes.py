import json
import unittest
from unittest import mock

from fastapi import HTTPException

from beyond_ys.collections import CHARACTERS, GAMES, MUSIC_ALBUMS
from beyond_ys.routes import admin
from beyond_ys.schemas import BulkImportRequest, CharacterCreate, GameCreate, GameUpdate
from beyond_ys.services.cache_mirror import CacheMirror
from beyond_ys.services.catalog_service import catalog_service
from beyond_ys.services.page_cache import page_cache

from fakes import InMemoryStore


class AdminRouteTests(unittest.IsolatedAsyncioTestCase):
    async def asyncSetUp(self):
        page_cache.clear()
        patcher = mock.patch.object(catalog_service, "mirror", CacheMirror(poll_interval=3600, max_age=0))
        patcher.start()
        self.addCleanup(patcher.stop)
        self.addCleanup(page_cache.clear)
        self.store = InMemoryStore({MUSIC_ALBUMS: {"ys-i-ost": {"name": "Ys I OST", "musicIds": []}}})

    async def test_create_character_revalidates_pages(self):
        result = await admin.create_character(CharacterCreate(name="Test Hero"), self.store)
        self.assertEqual(result.id, "test-hero")
        self.assertIn("/characters/test-hero", result.paths)
        self.assertIn("/characters/test-hero", page_cache)
        self.assertIn("test-hero", self.store.data[CHARACTERS])

    async def test_duplicate_slug_is_409_on_id_field(self):
        await admin.create_character(CharacterCreate(name="Test Hero"), self.store)
        with self.assertRaises(HTTPException) as ctx:
            await admin.create_character(CharacterCreate(name="Test Hero"), self.store)
        self.assertEqual(ctx.exception.status_code, 409)
        self.assertEqual(ctx.exception.detail["field"], "id")

    async def test_missing_reference_is_400(self):
        with self.assertRaises(HTTPException) as ctx:
            await admin.create_game(GameCreate(name="Ys I", characterIds=["adol"]), self.store)
        self.assertEqual(ctx.exception.status_code, 400)
        self.assertEqual(self.store.data[GAMES], {})

    async def test_edit_unknown_entity_is_404(self):
        with self.assertRaises(HTTPException) as ctx:
            await admin.edit_game("ys-nope", GameUpdate(name="Ys"), self.store)
        self.assertEqual(ctx.exception.status_code, 404)

    async def test_bulk_import(self):
        payload = BulkImportRequest(json=json.dumps([{"title": "Feena", "albumId": "ys-i-ost"}]))
        result = await admin.bulk_import_music(payload, self.store)
        self.assertEqual(len(result.music_ids), 1)
        self.assertEqual(result.album_ids, ["ys-i-ost"])
        self.assertIn("/music/ys-i-ost", page_cache)

    async def test_bulk_import_bad_json_is_400(self):
        with self.assertLogs("beyond_ys.services.music_import", level="ERROR"):
            with self.assertRaises(HTTPException) as ctx:
                await admin.bulk_import_music(BulkImportRequest(json="nope"), self.store)
        self.assertEqual(ctx.exception.status_code, 400)

    async def test_unknown_cache(self):
        with self.assertRaises(HTTPException) as ctx:
            await admin.read_cache("everything", self.store)
        self.assertEqual(ctx.exception.status_code, 404)

    async def test_slug_check(self):
        await admin.create_character(CharacterCreate(name="Test Hero"), self.store)
        taken = await admin.check_slug("Test Hero", "characters", self.store)
        self.assertEqual((taken.slug, taken.available), ("test-hero", False))
        free = await admin.check_slug("Test Hero", "games", self.store)
        self.assertTrue(free.available)
        with self.assertRaises(HTTPException):
            await admin.check_slug("Test Hero", "music", self.store)


if __name__ == "__main__":
    unittest.main()
