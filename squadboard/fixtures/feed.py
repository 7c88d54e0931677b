"""Cached, rate-limited orchestration of a fixture provider."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Callable, Iterable

from squadboard.errors import NoRecognizedTeamsError
from squadboard.fetch.rate_limiter import RateLimiter
from squadboard.fetch.ttl_cache import TTLCache, cache_key
from squadboard.fixtures.classify import (
    dedupe_matches,
    filter_by_teams,
    next_match_per_team,
    split_live_upcoming,
)
from squadboard.fixtures.schema import ClassifiedMatches, MatchRecord
from squadboard.fixtures.teams import resolve_team_ids
from squadboard.settings import Settings, load_settings


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MatchFeed(ABC):
    """Turn team names into live and upcoming matches for one provider.

    Subclasses supply the provider's team map and ``_fetch_upstream``; this
    class owns id resolution, caching, classification and the
    next-match-per-team reduction.
    """

    name = "feed"
    team_map: dict[str, int] = {}

    def __init__(
        self,
        rate_limiter: RateLimiter,
        cache: TTLCache[ClassifiedMatches],
        *,
        settings_loader: Callable[[], Settings] = load_settings,
        logger: logging.Logger | None = None,
    ) -> None:
        self.rate_limiter = rate_limiter
        self.cache = cache
        self._settings_loader = settings_loader
        self.logger = logger or logging.getLogger(type(self).__module__)

    def resolve(self, team_names: Iterable[str]) -> list[int]:
        return resolve_team_ids(team_names, self.team_map, log=self.logger)

    async def fetch(self, team_names: Iterable[str]) -> ClassifiedMatches:
        names = list(team_names)
        team_ids = self.resolve(names)
        return await self.fetch_for_ids(team_ids, team_names=names)

    async def fetch_for_ids(
        self,
        team_ids: list[int],
        *,
        team_names: list[str] | None = None,
    ) -> ClassifiedMatches:
        if not team_ids:
            raise NoRecognizedTeamsError(team_names or [])

        key = cache_key(team_ids)
        cached = self.cache.get(key)
        if cached is not None:
            self.logger.info("Using cached %s data key=%s", self.name, key)
            return cached

        self.logger.info(
            "Fetching fresh %s data for %s teams (rate limit remaining=%s)",
            self.name,
            len(team_ids),
            self.rate_limiter.remaining(),
        )
        matches = await self._fetch_upstream(team_ids)
        result = self.classify(matches, team_ids)
        self.cache.set(key, result)
        self.logger.info(
            "%s: live=%s upcoming=%s",
            self.name,
            len(result.live_matches),
            len(result.upcoming_matches),
        )
        return result

    def classify(self, matches: Iterable[MatchRecord], team_ids: list[int]) -> ClassifiedMatches:
        ours = filter_by_teams(dedupe_matches(matches), team_ids)
        live, upcoming = split_live_upcoming(ours)
        live.sort(key=lambda match: match.kickoff_time)
        picked = next_match_per_team(upcoming, team_ids)

        without_match = [
            team_id
            for team_id in team_ids
            if not any(match.involves({team_id}) for match in upcoming)
        ]
        if without_match:
            self.logger.info("%s: no upcoming match for team ids %s", self.name, without_match)

        return ClassifiedMatches(
            live_matches=live,
            upcoming_matches=picked,
            fetched_at=_utcnow(),
        )

    def clear_cache(self) -> None:
        self.cache.clear()
        self.logger.info("%s cache cleared", self.name)

    def settings(self) -> Settings:
        return self._settings_loader()

    @abstractmethod
    async def _fetch_upstream(self, team_ids: list[int]) -> list[MatchRecord]:
        """Fetch and parse the provider's matches for *team_ids*."""
