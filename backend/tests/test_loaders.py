import unittest

from beyond_ys.collections import CACHE, CHARACTERS, GAMES, MUSIC_ALBUMS, STAFF_INFO
from beyond_ys.errors import EntityNotFoundError
from beyond_ys.routes.catalog import get_composer_timeline
from beyond_ys.services import loaders

from fakes import InMemoryStore


def game_summary(name, category="", release_date="", has_cover=False):
    return {"name": name, "category": category, "releaseDate": release_date, "hasCoverImage": has_cover}


def snapshot(title, album_id="", composers=(), duration=0):
    return {
        "title": title,
        "albumId": album_id,
        "composerIds": list(composers),
        "arrangerIds": [],
        "otherArtists": [],
        "duration": duration,
        "youtubeId": "",
    }


class ListLoaderTests(unittest.IsolatedAsyncioTestCase):
    async def test_games_grouped_and_ordered(self):
        store = InMemoryStore(
            {
                CACHE: {
                    "games": {
                        "zwei": game_summary("Zwei!!", "Other Games", "2001-12-20"),
                        "ys-i": game_summary("Ys I", "Ys Series", "1987-06-21"),
                        "ys-x": game_summary("Ys X", "Ys Series", "2023-09-28"),
                        "ys-next": game_summary("Ys Next", "Ys Series", ""),
                        "sky": game_summary("Trails in the Sky", "Trails Series", "2004-06-24"),
                        "gurumin": game_summary("Gurumin", "", "2004-03-25"),
                        "brandish": game_summary("Brandish", "Other Games", "1991-10-25", has_cover=True),
                    }
                }
            }
        )
        page = await loaders.load_game_list(store)

        self.assertEqual(
            [category.name for category in page.categories],
            ["Ys Series", "Trails Series", "Other Games", "Uncategorized"],
        )
        self.assertEqual([game.id for game in page.categories[0].games], ["ys-x", "ys-i", "ys-next"])
        self.assertEqual([game.id for game in page.categories[2].games], ["zwei", "brandish"])
        brandish = page.categories[2].games[1]
        self.assertEqual(brandish.release_year, "1991")
        self.assertEqual(brandish.cover_path, "/api/assets/game-covers/brandish")
        self.assertIsNone(page.categories[0].games[0].cover_path)

    async def test_same_date_keeps_name_order(self):
        store = InMemoryStore(
            {
                CACHE: {
                    "games": {
                        "b": game_summary("Beta", "Other", "2000"),
                        "a": game_summary("Alpha", "Other", "2000"),
                    }
                }
            }
        )
        page = await loaders.load_game_list(store)
        self.assertEqual([game.name for game in page.categories[0].games], ["Alpha", "Beta"])

    async def test_characters_grouped_by_category_and_letter(self):
        summary = {"accentColor": "#161a22", "imageDirection": "left"}
        store = InMemoryStore(
            {
                CACHE: {
                    "characters": {
                        "dogi": {"name": "Dogi", "category": "Ys Series", **summary},
                        "adol": {"name": "Adol Christin", "category": "Ys Series", **summary},
                        "dana": {"name": "Dana", "category": "Ys Series", **summary},
                        "estelle": {"name": "Estelle Bright", "category": "Trails Series", **summary},
                        "nobody": {"name": "nameless", "category": "", **summary},
                    }
                }
            }
        )
        page = await loaders.load_character_list(store)

        self.assertEqual(list(page.categories), ["Ys Series", "Trails Series", "Uncategorized"])
        ys = page.categories["Ys Series"]
        self.assertEqual(list(ys), ["A", "D"])
        self.assertEqual([card.id for card in ys["D"]], ["dana", "dogi"])
        self.assertEqual(list(page.categories["Uncategorized"]), ["N"])

    async def test_albums_newest_first(self):
        store = InMemoryStore(
            {
                CACHE: {
                    "musicAlbums": {
                        "b-unknown": {"name": "B Unknown", "releaseDate": "", "hasAlbumArt": False},
                        "ys-i-ost": {"name": "Ys I OST", "releaseDate": "1987", "hasAlbumArt": True},
                        "ys-x-ost": {"name": "Ys X OST", "releaseDate": "2023-09", "hasAlbumArt": False},
                        "a-unknown": {"name": "A Unknown", "releaseDate": "", "hasAlbumArt": False},
                    }
                }
            }
        )
        page = await loaders.load_album_list(store)
        self.assertEqual([album.id for album in page.albums], ["ys-x-ost", "ys-i-ost", "a-unknown", "b-unknown"])
        self.assertEqual(page.albums[1].art_path, "/api/assets/album-arts/ys-i-ost")
        self.assertEqual(page.albums[2].release_year, "Unknown release year")

    async def test_staff_grouped_by_letter(self):
        store = InMemoryStore(
            {
                CACHE: {
                    "staffNames": {"yuzo": "Yuzo Koshiro", "mieko": "Mieko Ishikawa", "hayato": "Hayato Sonoda"},
                    "staffRoles": {"yuzo": ["Composer"], "mieko": ["Composer", "Arranger"]},
                }
            }
        )
        page = await loaders.load_staff_list(store)
        self.assertEqual(list(page.groups), ["H", "M", "Y"])
        self.assertEqual(page.groups["M"][0].roles, ["Composer", "Arranger"])
        self.assertEqual(page.groups["H"][0].roles, [])


class DetailLoaderTests(unittest.IsolatedAsyncioTestCase):
    async def asyncSetUp(self):
        self.store = InMemoryStore(
            {
                GAMES: {
                    "ys-origin": {
                        "name": "Ys Origin",
                        "category": "Ys Series",
                        "releaseDate": "2006-12-21",
                        "characterIds": ["yunica", "hugo", "toal"],
                        "characterSpoilerIds": ["toal"],
                        "soundtrackIds": ["m2", "m1"],
                        "cachedSoundtracks": {
                            "m1": snapshot("Dreaming", "origin-ost", ["yuzo"], 200),
                            "m2": snapshot("Genesis Beyond the Beginning", "origin-ost", ["hayato"], 3725),
                        },
                        "cachedCharacters": {
                            "yunica": {"name": "Yunica Tovah", "category": "Ys Series"},
                            "hugo": {"name": "Hugo Fact", "category": "Ys Series"},
                            "toal": {"name": "Toal Fact", "category": "Ys Series"},
                        },
                        "hasCoverImage": True,
                        "hasBannerImage": False,
                    }
                },
                CHARACTERS: {
                    "yunica": {
                        "name": "Yunica Tovah",
                        "voiceActors": [{"staffId": "yui", "language": "Japanese"}],
                        "gameIds": ["ys-origin"],
                        "cachedGameNames": {"ys-origin": game_summary("Ys Origin", "Ys Series", "2006-12-21")},
                        "hasAvatar": True,
                    }
                },
                MUSIC_ALBUMS: {
                    "origin-ost": {
                        "name": "Ys Origin OST",
                        "releaseDate": "2007",
                        "musicIds": ["m1", "m2"],
                        "cachedMusic": {
                            "m1": snapshot("Dreaming", "origin-ost", ["yuzo"], 200),
                            "m2": snapshot("Genesis Beyond the Beginning", "origin-ost", ["hayato"], 100),
                        },
                    }
                },
                STAFF_INFO: {
                    "yuzo": {
                        "name": "Yuzo Koshiro",
                        "games": [{"gameId": "ys-origin", "roles": ["Composer"]}],
                        "musicIds": ["m3", "m1", "m4"],
                        "cachedMusic": {
                            "m1": snapshot("Dreaming", "origin-ost", ["yuzo"], 200),
                            "m3": snapshot("Zzz Theme", "b-album", ["yuzo"], 90),
                            "m4": snapshot("Loose Track", "", ["yuzo"], 60),
                        },
                        "hasAvatar": False,
                    }
                },
                CACHE: {
                    "staffInfo": {
                        "yuzo": {"name": "Yuzo Koshiro", "roles": ["Composer"], "hasAvatar": False},
                        "hayato": {"name": "Hayato Sonoda", "roles": ["Composer"], "hasAvatar": False},
                        "yui": {"name": "Yui Horie", "roles": ["Voice Actor"], "hasAvatar": False},
                    },
                    "staffNames": {"yuzo": "Yuzo Koshiro"},
                    "gameNames": {"ys-origin": "Ys Origin"},
                    "albumNames": {"origin-ost": "Ys Origin OST", "b-album": "Another Album"},
                },
            }
        )

    async def test_game_page(self):
        page = await loaders.load_game(self.store, "ys-origin")
        self.assertEqual([track.id for track in page.soundtracks], ["m2", "m1"])
        self.assertEqual(page.soundtracks[0].duration_text, "1:02:05")
        self.assertEqual(page.soundtracks[0].composers[0].name, "Hayato Sonoda")
        self.assertEqual([card.id for card in page.characters], ["yunica", "hugo"])
        self.assertEqual([card.id for card in page.spoiler_characters], ["toal"])
        self.assertEqual(page.cover_path, "/api/assets/game-covers/ys-origin")
        self.assertIsNone(page.banner_path)
        self.assertEqual(page.release_date_text, "2006")

    async def test_character_page(self):
        page = await loaders.load_character(self.store, "yunica")
        self.assertEqual(page.voice_actors[0].name, "Yui Horie")
        self.assertEqual([game.id for game in page.games], ["ys-origin"])
        self.assertEqual(page.avatar_path, "/api/assets/character-avatars/yunica")

    async def test_album_page(self):
        page = await loaders.load_album(self.store, "origin-ost")
        self.assertEqual([track.title for track in page.tracks], ["Dreaming", "Genesis Beyond the Beginning"])
        self.assertEqual(page.total_duration_text, "5:00")
        self.assertEqual(page.release_date_text, "2007")

    async def test_staff_page(self):
        page = await loaders.load_staff(self.store, "yuzo")
        self.assertEqual([group.album_name for group in page.music], ["Another Album", "Ys Origin OST", "No album"])
        self.assertEqual(page.music[1].tracks[0].id, "m1")
        self.assertEqual(page.games[0].name, "Ys Origin")
        self.assertIsNone(page.avatar_path)

    async def test_missing_entity(self):
        with self.assertRaises(EntityNotFoundError):
            await loaders.load_game(self.store, "ys-nope")


class ComposerTimelineTests(unittest.IsolatedAsyncioTestCase):
    async def test_route_serves_the_table(self):
        timeline = await get_composer_timeline()
        body = timeline.model_dump(by_alias=True)

        self.assertEqual(list(body), ["games", "staffMembers", "composerTimeline"])
        self.assertEqual(body["games"]["ys"], {"name": "Ys", "releaseDate": "1987-06"})
        self.assertEqual(body["staffMembers"]["yuzo-koshiro"]["staffType"], "jdk")
        self.assertEqual(body["composerTimeline"]["yuzo-koshiro"]["ys"], "composer")

    def test_games_run_oldest_first(self):
        dates = [game.release_date for game in loaders.load_composer_timeline().games.values()]
        self.assertEqual(dates, sorted(dates))

    def test_every_reference_is_listed(self):
        timeline = loaders.load_composer_timeline()
        self.assertEqual(set(timeline.composer_timeline), set(timeline.staff_members))
        for staff_id, involvement in timeline.composer_timeline.items():
            self.assertLessEqual(set(involvement), set(timeline.games), staff_id)
        first_games = {member.first_game for member in timeline.staff_members.values()} - {""}
        self.assertLessEqual(first_games, set(timeline.games))


if __name__ == "__main__":
    unittest.main()
