import unittest

from beyond_ys.collections import CACHE, GAMES
from beyond_ys.errors import InvalidPathError
from beyond_ys.services import loaders
from beyond_ys.services.page_cache import PageCache, normalize_path, resolve_page

from fakes import InMemoryStore


class ResolvePageTests(unittest.TestCase):
    def test_known_paths(self):
        self.assertEqual(resolve_page("/games"), (loaders.load_game_list, ()))
        self.assertEqual(resolve_page("/staff/yuzo-koshiro"), (loaders.load_staff, ("yuzo-koshiro",)))
        self.assertEqual(resolve_page("/music/ys-i-ost"), (loaders.load_album, ("ys-i-ost",)))

    def test_unknown_paths(self):
        for path in ("/", "/admin", "/games/ys-i/extra", "games", "/music-albums/x"):
            with self.assertRaises(InvalidPathError):
                resolve_page(path)

    def test_normalize(self):
        self.assertEqual(normalize_path(" /games/ "), "/games")
        self.assertEqual(normalize_path("/"), "/")


class PageCacheTests(unittest.IsolatedAsyncioTestCase):
    async def asyncSetUp(self):
        self.store = InMemoryStore(
            {
                GAMES: {"ys-i": {"name": "Ys I", "category": "Ys Series", "releaseDate": "1987"}},
                CACHE: {"games": {"ys-i": {"name": "Ys I", "category": "Ys Series", "releaseDate": "1987"}}},
            }
        )
        self.cache = PageCache()

    async def test_render_is_cached(self):
        first = await self.cache.render("/games/ys-i", self.store)
        reads = self.store.reads
        second = await self.cache.render("/games/ys-i/", self.store)
        self.assertIs(first, second)
        self.assertEqual(self.store.reads, reads)
        self.assertIn("/games/ys-i", self.cache)

    async def test_revalidate_rerenders(self):
        await self.cache.render("/games/ys-i", self.store)
        self.store.data[GAMES]["ys-i"]["name"] = "Ys I Chronicles"

        stale = await self.cache.render("/games/ys-i", self.store)
        self.assertEqual(stale.name, "Ys I")

        dropped = await self.cache.revalidate(["/games/ys-i"], self.store)
        self.assertEqual(dropped, [])
        fresh = await self.cache.render("/games/ys-i", self.store)
        self.assertEqual(fresh.name, "Ys I Chronicles")

    async def test_revalidate_drops_deleted_entities(self):
        await self.cache.render("/games/ys-i", self.store)
        del self.store.data[GAMES]["ys-i"]
        dropped = await self.cache.revalidate(["/games/ys-i", "/games"], self.store)
        self.assertEqual(dropped, ["/games/ys-i"])
        self.assertNotIn("/games/ys-i", self.cache)
        self.assertIn("/games", self.cache)

    async def test_invalid_path_rejects_whole_request(self):
        with self.assertRaises(InvalidPathError):
            await self.cache.revalidate(["/games", "/nowhere"], self.store)
        self.assertNotIn("/games", self.cache)


if __name__ == "__main__":
    unittest.main()
