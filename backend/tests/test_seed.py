import unittest
from datetime import datetime, timezone

from beyond_ys.collections import CACHE, GAMES, USERS
from scripts.seed import chunk_fixtures, convert_timestamps


class ConvertTimestampsTests(unittest.TestCase):
    def test_exported_seconds(self):
        doc = convert_timestamps({"name": "Ys I", "updatedAt": {"seconds": 0, "nanoseconds": 0}})
        self.assertEqual(doc["updatedAt"], datetime(1970, 1, 1, tzinfo=timezone.utc))
        self.assertEqual(doc["name"], "Ys I")

    def test_iso_strings_and_nesting(self):
        doc = convert_timestamps({"cachedMusic": {"m1": {"updatedAt": "2024-01-02T03:04:05Z"}}})
        self.assertEqual(
            doc["cachedMusic"]["m1"]["updatedAt"],
            datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
        )

    def test_other_fields_untouched(self):
        self.assertEqual(convert_timestamps({"releaseDate": "1987"}), {"releaseDate": "1987"})


class ChunkFixturesTests(unittest.TestCase):
    def test_splits_at_limit(self):
        fixtures = {GAMES: {f"game-{i}": {"name": f"Game {i}"} for i in range(1201)}}
        batches = chunk_fixtures(fixtures)
        self.assertEqual([len(batch) for batch in batches], [500, 500, 201])

    def test_cache_documents_first(self):
        fixtures = {
            USERS: {"uid-1": {"username": "admin", "role": "admin"}},
            GAMES: {"ys-i": {"name": "Ys I"}},
            CACHE: {"gameNames": {"ys-i": "Ys I"}},
        }
        (batch,) = chunk_fixtures(fixtures)
        self.assertEqual(batch.touched(), [(CACHE, "gameNames"), (GAMES, "ys-i"), (USERS, "uid-1")])

    def test_empty(self):
        self.assertEqual(chunk_fixtures({}), [])


if __name__ == "__main__":
    unittest.main()
