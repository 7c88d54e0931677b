"""API-Football (api-sports.io) feed.

Free tier: 10 requests/minute. One shared live call plus one fixtures
call per team, capped at nine teams so a cold request fits in a single
minute of budget.
"""

from __future__ import annotations

import asyncio
import os
from datetime import date, datetime, timedelta, timezone
from typing import Any

from squadboard.errors import MissingApiKeyError, UpstreamError
from squadboard.fixtures.feed import MatchFeed
from squadboard.fixtures.http import get_json
from squadboard.fixtures.parsers import parse_api_football_fixtures
from squadboard.fixtures.schema import MatchRecord
from squadboard.fixtures.teams import API_FOOTBALL_TEAM_IDS

API_FOOTBALL_BASE_URL = os.getenv(
    "API_FOOTBALL_BASE_URL", "https://v3.football.api-sports.io"
).rstrip("/")
MAX_TEAM_REQUESTS = 9
FIXTURE_WINDOW_DAYS = 60
REQUESTS_PER_MINUTE = 10


def current_season(today: date) -> int:
    """European seasons are keyed by the year they start in (August)."""
    return today.year if today.month >= 8 else today.year - 1


class ApiFootballFeed(MatchFeed):
    name = "api-football"
    team_map = API_FOOTBALL_TEAM_IDS

    async def _fetch_upstream(self, team_ids: list[int]) -> list[MatchRecord]:
        settings = self.settings()
        if not settings.api_football_key:
            raise MissingApiKeyError("API_FOOTBALL_KEY")
        headers = {
            "x-apisports-key": settings.api_football_key,
            "x-rapidapi-key": settings.api_football_key,
        }
        timeout = settings.http_timeout_seconds

        today = datetime.now(timezone.utc).date()
        season = current_season(today)
        window_end = today + timedelta(days=FIXTURE_WINDOW_DAYS)

        teams_to_fetch = team_ids[:MAX_TEAM_REQUESTS]
        if len(team_ids) > MAX_TEAM_REQUESTS:
            self.logger.warning(
                "Limiting api-football fixtures to first %s of %s teams",
                MAX_TEAM_REQUESTS,
                len(team_ids),
            )

        calls = [self._get_fixtures("live", {"live": "all"}, headers, timeout)]
        for team_id in teams_to_fetch:
            params = {
                "team": team_id,
                "season": season,
                "from": today.isoformat(),
                "to": window_end.isoformat(),
            }
            calls.append(self._get_fixtures(f"team {team_id}", params, headers, timeout))

        batches = await asyncio.gather(*calls)
        return [match for batch in batches for match in batch]

    async def _get_fixtures(
        self,
        label: str,
        params: dict[str, Any],
        headers: dict[str, str],
        timeout: float,
    ) -> list[MatchRecord]:
        await self.rate_limiter.admit()
        try:
            payload = await asyncio.to_thread(
                get_json,
                f"{API_FOOTBALL_BASE_URL}/fixtures",
                params=params,
                headers=headers,
                timeout=timeout,
            )
        except UpstreamError as exc:
            self.logger.error(
                "Failed to fetch api-football fixtures for %s status=%s error=%s",
                label,
                exc.status,
                exc,
            )
            return []

        errors = payload.get("errors") if isinstance(payload, dict) else None
        if errors:
            self.logger.warning("api-football reported errors for %s: %s", label, errors)
        fixtures = parse_api_football_fixtures(payload)
        self.logger.info("api-football %s: %s fixtures", label, len(fixtures))
        return fixtures
