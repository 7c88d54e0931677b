"""Composition of the long-lived fetch components."""

from __future__ import annotations

from dataclasses import dataclass

from squadboard.fetch.rate_limiter import RateLimiter
from squadboard.fetch.ttl_cache import TTLCache
from squadboard.fixtures import api_football, football_data
from squadboard.fixtures.api_football import ApiFootballFeed
from squadboard.fixtures.feed import MatchFeed
from squadboard.fixtures.football_data import FootballDataFeed
from squadboard.players.enrich import PlayerEnricher
from squadboard.settings import Settings, load_settings


@dataclass
class Services:
    football_data: FootballDataFeed
    api_football: ApiFootballFeed
    enricher: PlayerEnricher

    def feed(self, provider: str) -> MatchFeed:
        if provider == FootballDataFeed.name:
            return self.football_data
        if provider == ApiFootballFeed.name:
            return self.api_football
        raise ValueError(f"Unsupported provider: {provider}")


def build_services(settings: Settings | None = None) -> Services:
    """Create one rate limiter and cache per provider.

    Each provider has its own quota, so limiters are never shared between
    them.
    """
    settings = settings or load_settings()
    football_data_feed = FootballDataFeed(
        RateLimiter(football_data.REQUESTS_PER_MINUTE, 60_000),
        TTLCache(settings.football_data_cache_seconds * 1000),
    )
    api_football_feed = ApiFootballFeed(
        RateLimiter(api_football.REQUESTS_PER_MINUTE, 60_000),
        TTLCache(settings.api_football_cache_seconds * 1000),
    )
    enricher = PlayerEnricher.from_settings(settings)
    return Services(
        football_data=football_data_feed,
        api_football=api_football_feed,
        enricher=enricher,
    )
