from __future__ import annotations

import unittest
from datetime import date
from unittest.mock import patch

from squadboard.errors import NoRecognizedTeamsError, UpstreamError
from squadboard.fetch.rate_limiter import RateLimiter
from squadboard.fetch.ttl_cache import TTLCache
from squadboard.fixtures.feed import MatchFeed
from squadboard.fixtures.football_data import FootballDataFeed, match_window
from squadboard.settings import Settings

ARSENAL = 57
LIVERPOOL = 64
CHELSEA = 61
EVERTON = 62


def _settings(**overrides) -> Settings:
    values = dict(
        football_data_api_key="fd-key",
        api_football_key="af-key",
        topstrike_cookies=None,
        database_url="sqlite://",
        player_database_path="missing.json",
        football_data_cache_seconds=120,
        api_football_cache_seconds=300,
        http_timeout_seconds=12.0,
    )
    values.update(overrides)
    return Settings(**values)


class _Clock:
    def __init__(self) -> None:
        self.now = 5_000_000.0

    def __call__(self) -> float:
        return self.now

    async def sleep(self, seconds: float) -> None:
        self.now += seconds * 1000


def _match(match_id, status, utc_date, home_id, away_id, home="Home", away="Away"):
    return {
        "id": match_id,
        "utcDate": utc_date,
        "status": status,
        "homeTeam": {"id": home_id, "shortName": home, "crest": f"https://crests/{home_id}.png"},
        "awayTeam": {"id": away_id, "shortName": away, "crest": f"https://crests/{away_id}.png"},
        "competition": {"name": "Premier League"},
        "score": {"fullTime": {"home": None, "away": None}},
    }


class FootballDataFeedTests(unittest.IsolatedAsyncioTestCase):
    def setUp(self) -> None:
        self.clock = _Clock()
        self.limiter = RateLimiter(10, 60_000, clock=self.clock, sleep=self.clock.sleep)
        self.cache = TTLCache(120_000, clock=self.clock)
        self.settings = _settings()
        self.feed = FootballDataFeed(
            self.limiter,
            self.cache,
            settings_loader=lambda: self.settings,
        )

    async def test_arsenal_and_liverpool_end_to_end(self) -> None:
        payload = {
            "matches": [
                _match(3, "SCHEDULED", "2026-10-25T15:00:00Z", ARSENAL, CHELSEA, "Arsenal", "Chelsea"),
                _match(1, "IN_PLAY", "2026-10-19T14:00:00Z", ARSENAL, EVERTON, "Arsenal", "Everton"),
                _match(2, "SCHEDULED", "2026-10-22T19:45:00Z", EVERTON, LIVERPOOL, "Everton", "Liverpool"),
            ]
        }

        with patch("squadboard.fixtures.football_data.get_json", return_value=payload) as mock_get:
            first = await self.feed.fetch(["Arsenal", "Liverpool"])
            second = await self.feed.fetch(["Arsenal", "Liverpool"])

        self.assertEqual(1, mock_get.call_count)
        self.assertEqual(9, self.limiter.remaining())
        self.assertEqual(["1"], [m.id for m in first.live_matches])
        self.assertEqual(["2", "3"], [m.id for m in first.upcoming_matches])
        self.assertIs(first, second)

        args, kwargs = mock_get.call_args.args, mock_get.call_args.kwargs
        self.assertTrue(args[0].endswith("/matches"))
        self.assertEqual("fd-key", kwargs["headers"]["X-Auth-Token"])
        self.assertEqual({"dateFrom", "dateTo"}, set(kwargs["params"]))

    async def test_cache_key_ignores_team_order(self) -> None:
        with patch(
            "squadboard.fixtures.football_data.get_json",
            return_value={"matches": []},
        ) as mock_get:
            await self.feed.fetch(["Arsenal", "Liverpool"])
            await self.feed.fetch(["Liverpool", "Arsenal"])

        self.assertEqual(1, mock_get.call_count)

    async def test_expired_cache_triggers_new_call(self) -> None:
        with patch(
            "squadboard.fixtures.football_data.get_json",
            return_value={"matches": []},
        ) as mock_get:
            await self.feed.fetch(["Arsenal"])
            self.clock.now += 120_000
            await self.feed.fetch(["Arsenal"])

        self.assertEqual(2, mock_get.call_count)

    async def test_unknown_team_raises_without_network(self) -> None:
        with patch("squadboard.fixtures.football_data.get_json") as mock_get:
            with self.assertRaises(NoRecognizedTeamsError) as ctx:
                await self.feed.fetch(["FC Nonexistent"])

        mock_get.assert_not_called()
        self.assertEqual(10, self.limiter.remaining())
        self.assertEqual(["FC Nonexistent"], ctx.exception.team_names)

    async def test_mutual_fixture_listed_once(self) -> None:
        payload = {
            "matches": [
                _match(7, "TIMED", "2026-10-24T11:30:00Z", ARSENAL, LIVERPOOL),
                _match(8, "TIMED", "2026-10-30T20:00:00Z", LIVERPOOL, CHELSEA),
                _match(7, "TIMED", "2026-10-24T11:30:00Z", ARSENAL, LIVERPOOL),
            ]
        }
        with patch("squadboard.fixtures.football_data.get_json", return_value=payload):
            result = await self.feed.fetch(["Arsenal", "Liverpool"])

        self.assertEqual(["7"], [m.id for m in result.upcoming_matches])

    async def test_finished_and_unrelated_matches_are_dropped(self) -> None:
        payload = {
            "matches": [
                _match(10, "FINISHED", "2026-10-18T15:00:00Z", ARSENAL, CHELSEA),
                _match(11, "SCHEDULED", "2026-10-21T15:00:00Z", CHELSEA, EVERTON),
            ]
        }
        with patch("squadboard.fixtures.football_data.get_json", return_value=payload):
            result = await self.feed.fetch(["Arsenal"])

        self.assertEqual([], result.live_matches)
        self.assertEqual([], result.upcoming_matches)

    async def test_extra_time_match_is_live_not_next_fixture(self) -> None:
        payload = {
            "matches": [
                _match(1, "EXTRA_TIME", "2026-10-19T14:00:00Z", ARSENAL, CHELSEA),
                _match(2, "SCHEDULED", "2026-10-22T19:45:00Z", ARSENAL, EVERTON),
            ]
        }
        with patch("squadboard.fixtures.football_data.get_json", return_value=payload):
            result = await self.feed.fetch(["Arsenal"])

        self.assertEqual(["1"], [m.id for m in result.live_matches])
        self.assertEqual(["2"], [m.id for m in result.upcoming_matches])

    async def test_upstream_failure_degrades_to_empty_result(self) -> None:
        with patch(
            "squadboard.fixtures.football_data.get_json",
            side_effect=UpstreamError("Upstream returned 429", status=429),
        ):
            with self.assertLogs("squadboard.fixtures.football_data", level="ERROR"):
                result = await self.feed.fetch(["Arsenal"])

        self.assertEqual([], result.live_matches)
        self.assertEqual([], result.upcoming_matches)

    async def test_no_auth_header_without_key(self) -> None:
        self.settings = _settings(football_data_api_key=None)
        with patch(
            "squadboard.fixtures.football_data.get_json",
            return_value={"matches": []},
        ) as mock_get:
            await self.feed.fetch(["Arsenal"])

        self.assertNotIn("X-Auth-Token", mock_get.call_args.kwargs["headers"])

    async def test_clear_cache_forces_refetch(self) -> None:
        with patch(
            "squadboard.fixtures.football_data.get_json",
            return_value={"matches": []},
        ) as mock_get:
            await self.feed.fetch(["Arsenal"])
            self.feed.clear_cache()
            await self.feed.fetch(["Arsenal"])

        self.assertEqual(2, mock_get.call_count)


class MatchFeedBaseTests(unittest.TestCase):
    def test_base_feed_cannot_be_instantiated(self) -> None:
        with self.assertRaises(TypeError):
            MatchFeed(RateLimiter(10, 60_000), TTLCache(120_000))


class MatchWindowTests(unittest.TestCase):
    def test_window_spans_ten_days(self) -> None:
        self.assertEqual(
            {"dateFrom": "2026-10-19", "dateTo": "2026-10-29"},
            match_window(date(2026, 10, 19)),
        )


if __name__ == "__main__":
    unittest.main()
