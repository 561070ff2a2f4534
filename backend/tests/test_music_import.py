import json
import unittest

from beyond_ys.collections import CACHE, MUSIC, MUSIC_ALBUMS, STAFF_INFO
from beyond_ys.errors import BulkImportError, MissingReferenceError
from beyond_ys.services.cache_mirror import CacheMirror
from beyond_ys.services.catalog_service import CatalogService
from beyond_ys.services.music_import import build_import_batch, parse_music_import

from fakes import InMemoryStore

LOGGER = "beyond_ys.services.music_import"


class ParseMusicImportTests(unittest.TestCase):
    def test_parses_records(self):
        records = parse_music_import(
            json.dumps([{"title": "Feena", "albumId": "ys-i-ost", "duration": 185, "composerIds": ["yuzo-koshiro"]}])
        )
        self.assertEqual(len(records), 1)
        self.assertEqual(records[0].title, "Feena")
        self.assertEqual(records[0].composer_ids, ["yuzo-koshiro"])
        self.assertEqual(records[0].youtube_id, "")

    def test_invalid_json(self):
        with self.assertLogs(LOGGER, level="ERROR"):
            with self.assertRaises(BulkImportError):
                parse_music_import("[{not json")

    def test_not_an_array(self):
        with self.assertLogs(LOGGER, level="ERROR"):
            with self.assertRaises(BulkImportError):
                parse_music_import('{"title": "Feena"}')

    def test_invalid_record_names_index_and_fields(self):
        text = json.dumps([{"title": "Feena"}, {"title": "Tower of the Shadow of Death", "duration": -1}])
        with self.assertLogs(LOGGER, level="ERROR"):
            with self.assertRaises(BulkImportError) as ctx:
                parse_music_import(text)
        self.assertEqual(ctx.exception.index, 1)
        self.assertIn("duration", str(ctx.exception))

    def test_youtube_id_length(self):
        with self.assertLogs(LOGGER, level="ERROR"):
            with self.assertRaises(BulkImportError):
                parse_music_import(json.dumps([{"title": "Feena", "youtubeId": "short"}]))


class ImportMusicTests(unittest.IsolatedAsyncioTestCase):
    async def asyncSetUp(self):
        self.store = InMemoryStore(
            {
                MUSIC_ALBUMS: {
                    "ys-i-ost": {"name": "Ys I OST", "releaseDate": "1987", "musicIds": [], "cachedMusic": {}},
                },
                STAFF_INFO: {
                    "yuzo-koshiro": {"name": "Yuzo Koshiro", "roles": ["Composer"], "musicIds": [], "cachedMusic": {}},
                    "mieko-ishikawa": {"name": "Mieko Ishikawa", "roles": ["Composer"], "musicIds": [], "cachedMusic": {}},
                },
            }
        )
        self.service = CatalogService(mirror=CacheMirror(poll_interval=3600, max_age=0))

    async def test_two_records_into_one_album(self):
        text = json.dumps(
            [
                {
                    "title": "First Step Towards Wars",
                    "albumId": "ys-i-ost",
                    "composerIds": ["yuzo-koshiro"],
                    "arrangerIds": ["yuzo-koshiro"],
                    "duration": 150,
                },
                {
                    "title": "Feena",
                    "albumId": "ys-i-ost",
                    "composerIds": ["mieko-ishikawa"],
                    "otherArtists": [{"staffId": "yuzo-koshiro", "role": "Sound Programming"}],
                    "duration": 185,
                },
            ]
        )
        result = await self.service.import_music(self.store, text)

        self.assertEqual(len(result.music_ids), 2)
        self.assertEqual(len(self.store.commits), 1)
        album = self.store.data[MUSIC_ALBUMS]["ys-i-ost"]
        self.assertEqual(album["musicIds"], result.music_ids)
        self.assertEqual(list(album["cachedMusic"]), result.music_ids)

        first, second = result.music_ids
        self.assertEqual(self.store.data[MUSIC][first]["title"], "First Step Towards Wars")
        self.assertEqual(self.store.data[CACHE]["music"][second], {"title": "Feena", "albumId": "ys-i-ost"})
        self.assertEqual(self.store.data[STAFF_INFO]["yuzo-koshiro"]["musicIds"], [first, second])
        self.assertEqual(self.store.data[STAFF_INFO]["mieko-ishikawa"]["musicIds"], [second])

        self.assertEqual(result.album_ids, ["ys-i-ost"])
        self.assertEqual(result.staff_ids, ["yuzo-koshiro", "mieko-ishikawa"])
        self.assertEqual(
            result.paths,
            ["/staff/yuzo-koshiro", "/staff/mieko-ishikawa", "/music/ys-i-ost"],
        )

    async def test_duplicate_staff_attached_once(self):
        records = parse_music_import(
            json.dumps([{"title": "Feena", "composerIds": ["yuzo-koshiro"], "arrangerIds": ["yuzo-koshiro"]}])
        )
        batch, result = await build_import_batch(self.store, records)
        staff_ops = batch.ops_for(STAFF_INFO, "yuzo-koshiro")
        self.assertEqual(len(staff_ops), 1)
        self.assertEqual(result.album_ids, [])

    async def test_unknown_album_rejects_whole_import(self):
        text = json.dumps([{"title": "Feena", "albumId": "ys-i-ost"}, {"title": "Palace", "albumId": "ys-ii-ost"}])
        with self.assertRaises(MissingReferenceError):
            await self.service.import_music(self.store, text)
        self.assertEqual(self.store.commits, [])
        self.assertEqual(self.store.data[MUSIC], {})

    async def test_resubmitting_creates_new_ids(self):
        text = json.dumps([{"title": "Feena", "albumId": "ys-i-ost"}])
        first = await self.service.import_music(self.store, text)
        second = await self.service.import_music(self.store, text)
        self.assertNotEqual(first.music_ids, second.music_ids)
        self.assertEqual(len(self.store.data[MUSIC_ALBUMS]["ys-i-ost"]["musicIds"]), 2)


if __name__ == "__main__":
    unittest.main()
