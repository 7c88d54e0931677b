from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from squadboard.errors import UpstreamError
from squadboard.players.database import PlayerDatabase
from squadboard.players.enrich import PlayerEnricher
from squadboard.players.positions import normalize_position
from squadboard.players.schema import PlayerInfo
from squadboard.players.sportsdb import search_player


class _FakeSearch:
    def __init__(self, result: PlayerInfo | None = None):
        self.result = result or PlayerInfo()
        self.names: list[str] = []

    def __call__(self, name: str, timeout: float) -> PlayerInfo:
        self.names.append(name)
        return PlayerInfo(
            image_url=self.result.image_url,
            position=self.result.position,
            team=self.result.team,
        )


def _database(*rows: dict) -> PlayerDatabase:
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "players.json"
        path.write_text(json.dumps(list(rows)), encoding="utf-8")
        database = PlayerDatabase.load(path)
    assert database is not None
    return database


class PositionTests(unittest.TestCase):
    def test_common_positions(self) -> None:
        cases = {
            "Goalkeeper": "GK",
            "Centre-Forward": "FWD",
            "Left Winger": "FWD",
            "Attacking Midfield": "MID",
            "Defensive Midfield": "MID",
            "Centre-Back": "DEF",
            "Right-Back": "DEF",
            "Coach": "Unknown",
            None: "Unknown",
            "": "Unknown",
        }
        for raw, expected in cases.items():
            with self.subTest(raw=raw):
                self.assertEqual(expected, normalize_position(raw))


class PlayerDatabaseTests(unittest.TestCase):
    def test_missing_file_returns_none(self) -> None:
        with self.assertLogs("squadboard.players.database", level="WARNING"):
            self.assertIsNone(PlayerDatabase.load("/nonexistent/players.json"))

    def test_lookup_by_id_and_case_insensitive_name(self) -> None:
        database = _database(
            {"id": 7, "name": "Declan Rice", "position": "Defensive Midfield", "team": "Arsenal",
             "imageUrl": "https://img/rice.png"},
            {"name": "No Id"},
        )

        self.assertEqual(1, len(database))
        self.assertEqual("Arsenal", database.by_id(7).team)
        self.assertEqual("https://img/rice.png", database.by_name("declan rice ").image_url)
        self.assertIsNone(database.by_id(8))
        self.assertEqual({"total": 1, "with_images": 1, "without_images": 0}, database.stats())


class PlayerEnricherTests(unittest.TestCase):
    def test_verified_player_beats_database(self) -> None:
        database = _database(
            {"id": 1, "name": "Mohamed Salah", "position": "Forward", "team": "Al Hilal",
             "imageUrl": "https://img/salah.png"},
        )
        search = _FakeSearch()
        player = PlayerEnricher(database, search=search).enrich_one(1, "Mohamed Salah")

        self.assertEqual("verified", player.source)
        self.assertEqual("Liverpool", player.team)
        self.assertEqual("Right Winger", player.original_position)
        self.assertEqual("FWD", player.position)
        self.assertEqual("https://img/salah.png", player.image_url)
        self.assertEqual([], search.names)

    def test_database_hit_skips_live_search(self) -> None:
        database = _database(
            {"id": 5, "name": "Declan Rice", "position": "Defensive Midfield", "team": "Arsenal"},
        )
        search = _FakeSearch(PlayerInfo(image_url="x", position="Goalkeeper", team="Other"))
        player = PlayerEnricher(database, search=search).enrich_one(5, "Declan Rice")

        self.assertEqual("database", player.source)
        self.assertEqual("MID", player.position)
        self.assertEqual([], search.names)

    def test_live_search_used_without_database(self) -> None:
        search = _FakeSearch(PlayerInfo(image_url="https://img/x.png", position="Centre-Back", team="Fulham"))
        player = PlayerEnricher(None, search=search).enrich_one(9, "Some Defender")

        self.assertEqual("live", player.source)
        self.assertEqual("DEF", player.position)
        self.assertEqual("Fulham", player.team)
        self.assertEqual(["Some Defender"], search.names)

    def test_live_search_never_overrides_verified_fields(self) -> None:
        search = _FakeSearch(PlayerInfo(image_url="https://img/kane.png", position="Goalkeeper", team="Spurs"))
        player = PlayerEnricher(None, search=search).enrich_one(3, "Harry Kane")

        self.assertEqual("verified", player.source)
        self.assertEqual("Bayern Munich", player.team)
        self.assertEqual("FWD", player.position)
        self.assertEqual("https://img/kane.png", player.image_url)

    def test_unverified_entry_is_not_trusted(self) -> None:
        search = _FakeSearch(PlayerInfo(position="Attacking Midfield", team="Bayer Leverkusen"))
        player = PlayerEnricher(None, search=search).enrich_one(4, "Florian Wirtz")

        self.assertEqual("live", player.source)
        self.assertEqual("Bayer Leverkusen", player.team)

    def test_team_override_applies_to_database_record(self) -> None:
        database = _database(
            {"id": 11, "name": "Mohamed Amoura", "position": "Forward", "team": "Union SG"},
        )
        player = PlayerEnricher(database, search=_FakeSearch()).enrich_one(11, "Mohamed Amoura")

        self.assertEqual("Wolfsburg", player.team)
        self.assertEqual("Centre-Forward", player.original_position)

    def test_nothing_found_gives_unknown(self) -> None:
        player = PlayerEnricher(None, search=_FakeSearch()).enrich_one(12, "Nobody")

        self.assertEqual("none", player.source)
        self.assertEqual("Unknown", player.position)
        self.assertIsNone(player.team)


class PlayerEnricherAsyncTests(unittest.IsolatedAsyncioTestCase):
    async def test_enrich_preserves_request_order(self) -> None:
        search = _FakeSearch(PlayerInfo(position="Centre-Back", team="Fulham"))
        enricher = PlayerEnricher(None, search=search, max_concurrency=2)

        players = await enricher.enrich([(1, "A"), (2, "B"), (3, "C")])

        self.assertEqual([1, 2, 3], [p.id for p in players])
        self.assertEqual(3, len(search.names))


class _FakeResponse:
    def __init__(self, status_code: int, payload, text: str | None = None):
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else str(payload)

    def json(self):
        return self._payload


class SportsDbSearchTests(unittest.TestCase):
    def test_prefers_cutout_image(self) -> None:
        payload = {"player": [{"strCutout": "cut.png", "strThumb": "thumb.png",
                               "strPosition": "Centre-Back", "strTeam": "Fulham"}]}
        with patch("squadboard.fixtures.http.requests.get", return_value=_FakeResponse(200, payload)):
            info = search_player("Some Defender")

        self.assertEqual(PlayerInfo(image_url="cut.png", position="Centre-Back", team="Fulham"), info)

    def test_retries_without_apostrophes(self) -> None:
        found = {"player": [{"strThumb": "thumb.png", "strPosition": "Midfielder", "strTeam": "X"}]}
        with patch(
            "squadboard.fixtures.http.requests.get",
            side_effect=[_FakeResponse(200, {"player": None}), _FakeResponse(200, found)],
        ) as mock_get:
            info = search_player("N'Golo Kante")

        self.assertEqual("thumb.png", info.image_url)
        self.assertEqual({"p": "NGolo Kante"}, mock_get.call_args.kwargs["params"])

    def test_id_override_uses_lookup_endpoint(self) -> None:
        found = {"player": [{"strThumb": "barnes.png"}]}
        with patch(
            "squadboard.fixtures.http.requests.get",
            return_value=_FakeResponse(200, found),
        ) as mock_get:
            info = search_player("Harvey Barnes")

        self.assertEqual("barnes.png", info.image_url)
        self.assertTrue(mock_get.call_args.args[0].endswith("/lookupplayer.php"))

    def test_upstream_error_returns_empty_info(self) -> None:
        with patch(
            "squadboard.players.sportsdb.get_json",
            side_effect=UpstreamError("Upstream returned 503", status=503),
        ):
            with self.assertLogs("squadboard.players.sportsdb", level="ERROR"):
                info = search_player("Anyone")

        self.assertTrue(info.is_empty)


if __name__ == "__main__":
    unittest.main()
