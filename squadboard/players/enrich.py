"""Attach position, club and image to portfolio players.

Priority per player: verified data, then the player database, then a live
TheSportsDB search. Team overrides patch anything that is not verified.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Callable, Iterable

from squadboard.players.curated import team_override, verified_player
from squadboard.players.database import PlayerDatabase
from squadboard.players.positions import PitchLine, normalize_position
from squadboard.players.schema import PlayerInfo
from squadboard.players.sportsdb import search_player
from squadboard.settings import Settings

logger = logging.getLogger(__name__)
DEFAULT_LOOKUP_CONCURRENCY = 4


@dataclass(frozen=True)
class EnrichedPlayer:
    id: int
    name: str
    position: PitchLine
    original_position: str | None
    team: str | None
    image_url: str | None
    source: str


class PlayerEnricher:
    def __init__(
        self,
        database: PlayerDatabase | None,
        *,
        search: Callable[[str, float], PlayerInfo] = search_player,
        timeout: float = 12,
        max_concurrency: int = DEFAULT_LOOKUP_CONCURRENCY,
    ) -> None:
        self.database = database
        self._search = search
        self._timeout = timeout
        self._max_concurrency = max_concurrency

    @classmethod
    def from_settings(cls, settings: Settings) -> PlayerEnricher:
        return cls(
            PlayerDatabase.load(settings.player_database_path),
            timeout=settings.http_timeout_seconds,
        )

    def _from_database(self, player_id: int, name: str) -> PlayerInfo | None:
        if self.database is None:
            return None
        return self.database.by_id(player_id) or self.database.by_name(name)

    def enrich_one(self, player_id: int, name: str) -> EnrichedPlayer:
        info = PlayerInfo()
        source = "none"

        verified = verified_player(name)
        if verified:
            info.position = verified.position
            info.team = verified.team
            source = "verified"
            cached = self._from_database(player_id, name)
            if cached and cached.image_url:
                info.image_url = cached.image_url
        else:
            cached = self._from_database(player_id, name)
            if cached:
                info = cached
                source = "database"

        # Live search only runs when there is no database to consult.
        if self.database is None and not info.image_url:
            live = self._search(name, self._timeout)
            if verified:
                info.image_url = live.image_url
            elif not live.is_empty:
                info = live
                source = "live"

        if not verified:
            override = team_override(name)
            if override:
                logger.info("Team override applied for %s: %s", name, override.team)
                info.team = override.team
                if override.position:
                    info.position = override.position

        return EnrichedPlayer(
            id=player_id,
            name=name,
            position=normalize_position(info.position),
            original_position=info.position,
            team=info.team,
            image_url=info.image_url,
            source=source,
        )

    async def enrich(self, players: Iterable[tuple[int, str]]) -> list[EnrichedPlayer]:
        semaphore = asyncio.Semaphore(self._max_concurrency)

        async def _one(player_id: int, name: str) -> EnrichedPlayer:
            async with semaphore:
                return await asyncio.to_thread(self.enrich_one, player_id, name)

        return list(await asyncio.gather(*(_one(pid, name) for pid, name in players)))
