"""TheSportsDB player search."""

from __future__ import annotations

import logging
import os
import re
from typing import Any

from squadboard.errors import UpstreamError
from squadboard.fixtures.http import get_json
from squadboard.players.curated import player_id_override
from squadboard.players.schema import PlayerInfo

logger = logging.getLogger(__name__)
SPORTSDB_BASE_URL = os.getenv(
    "SPORTSDB_BASE_URL", "https://www.thesportsdb.com/api/v1/json/3"
).rstrip("/")
_APOSTROPHES = re.compile(r"['’`]")


def _first_player(payload: Any) -> dict[str, Any] | None:
    players = payload.get("player") if isinstance(payload, dict) else None
    if isinstance(players, list) and players and isinstance(players[0], dict):
        return players[0]
    return None


def _to_info(player: dict[str, Any]) -> PlayerInfo:
    return PlayerInfo(
        image_url=player.get("strCutout") or player.get("strThumb") or None,
        position=player.get("strPosition") or None,
        team=player.get("strTeam") or None,
    )


def _lookup(endpoint: str, params: dict[str, str], timeout: float) -> dict[str, Any] | None:
    payload = get_json(f"{SPORTSDB_BASE_URL}/{endpoint}", params=params, timeout=timeout)
    return _first_player(payload)


def search_player(name: str, timeout: float = 12) -> PlayerInfo:
    """Look a player up by name.

    An id override is tried first, then a name search, then the name
    without apostrophes. Returns an empty PlayerInfo when nothing matches
    or TheSportsDB is unreachable.
    """
    clean_name = name.strip()
    try:
        override_id = player_id_override(clean_name)
        if override_id:
            player = _lookup("lookupplayer.php", {"id": override_id}, timeout)
            if player:
                logger.info("Found %s via id override %s", clean_name, override_id)
                return _to_info(player)

        player = _lookup("searchplayers.php", {"p": clean_name}, timeout)
        if player is None and _APOSTROPHES.search(clean_name):
            stripped = _APOSTROPHES.sub("", clean_name)
            logger.info("Retrying %r without apostrophes: %r", clean_name, stripped)
            player = _lookup("searchplayers.php", {"p": stripped}, timeout)
    except UpstreamError as exc:
        logger.error("TheSportsDB lookup failed for %s: %s", clean_name, exc)
        return PlayerInfo()

    if player is None:
        logger.info("No TheSportsDB player found for %s", clean_name)
        return PlayerInfo()
    return _to_info(player)
