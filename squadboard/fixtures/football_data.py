"""football-data.org feed.

Free tier: 10 requests/minute, current season only. All matches in the
next ten days (the API maximum) come back in one call and are filtered
locally.
"""

from __future__ import annotations

import asyncio
import os
from datetime import date, datetime, timedelta, timezone

from squadboard.errors import UpstreamError
from squadboard.fixtures.feed import MatchFeed
from squadboard.fixtures.http import get_json
from squadboard.fixtures.parsers import parse_football_data_matches
from squadboard.fixtures.schema import MatchRecord
from squadboard.fixtures.teams import FOOTBALL_DATA_TEAM_IDS

FOOTBALL_DATA_BASE_URL = os.getenv(
    "FOOTBALL_DATA_BASE_URL", "https://api.football-data.org/v4"
).rstrip("/")
MATCH_WINDOW_DAYS = 10
REQUESTS_PER_MINUTE = 10


def match_window(today: date) -> dict[str, str]:
    return {
        "dateFrom": today.isoformat(),
        "dateTo": (today + timedelta(days=MATCH_WINDOW_DAYS)).isoformat(),
    }


class FootballDataFeed(MatchFeed):
    name = "football-data"
    team_map = FOOTBALL_DATA_TEAM_IDS

    async def _fetch_upstream(self, team_ids: list[int]) -> list[MatchRecord]:
        settings = self.settings()
        headers = {}
        if settings.football_data_api_key:
            headers["X-Auth-Token"] = settings.football_data_api_key
        params = match_window(datetime.now(timezone.utc).date())

        await self.rate_limiter.admit()
        self.logger.info(
            "Fetching football-data matches from %s to %s",
            params["dateFrom"],
            params["dateTo"],
        )
        try:
            payload = await asyncio.to_thread(
                get_json,
                f"{FOOTBALL_DATA_BASE_URL}/matches",
                params=params,
                headers=headers,
                timeout=settings.http_timeout_seconds,
            )
        except UpstreamError as exc:
            self.logger.error(
                "Failed to fetch football-data matches status=%s error=%s",
                exc.status,
                exc,
            )
            return []

        matches = parse_football_data_matches(payload)
        self.logger.info("football-data returned %s matches", len(matches))
        return matches
