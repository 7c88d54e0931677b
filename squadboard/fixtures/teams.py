"""Team name to provider team id mappings.

Names are the club names surfaced by player enrichment. The providers use
disjoint id spaces for the same clubs, so each gets its own map.
"""

from __future__ import annotations

import logging
from typing import Iterable

logger = logging.getLogger(__name__)

FOOTBALL_DATA_TEAM_IDS: dict[str, int] = {
    # ── Premier League ───────────────────────────────────────
    "Arsenal": 57,
    "Liverpool": 64,
    "Manchester City": 65,
    "Manchester United": 66,
    "Chelsea": 61,
    "Tottenham": 73,
    "Tottenham Hotspur": 73,
    "Newcastle": 67,
    "Newcastle United": 67,
    "West Ham": 563,
    "West Ham United": 563,
    "Brighton": 397,
    "Aston Villa": 58,
    "Crystal Palace": 354,
    "Fulham": 63,
    "Everton": 62,
    "Brentford": 402,
    "Nottingham Forest": 351,
    "Wolves": 76,
    "Wolverhampton": 76,
    "Bournemouth": 1044,
    "Leicester": 338,
    "Leeds United": 341,
    "Southampton": 340,
    "Ipswich": 349,
    # ── La Liga ──────────────────────────────────────────────
    "Real Madrid": 86,
    "Barcelona": 81,
    "Atletico Madrid": 78,
    "Sevilla": 559,
    "Valencia": 95,
    "Villarreal": 94,
    "Real Sociedad": 92,
    "Athletic Bilbao": 77,
    "Real Betis": 90,
    # ── Serie A ──────────────────────────────────────────────
    "Inter": 108,
    "Inter Milan": 108,
    "AC Milan": 98,
    "Juventus": 109,
    "Napoli": 113,
    "Roma": 100,
    "Lazio": 110,
    "Atalanta": 102,
    "Fiorentina": 99,
    "Bologna": 103,
    "Torino": 586,
    "Como": 5890,
    "Spezia": 488,
    # ── Bundesliga ───────────────────────────────────────────
    "Bayern Munich": 5,
    "Borussia Dortmund": 4,
    "RB Leipzig": 721,
    "Bayer Leverkusen": 3,
    "Eintracht Frankfurt": 19,
    "Wolfsburg": 11,
    "Stuttgart": 10,
    "VfB Stuttgart": 10,
    "Borussia Monchengladbach": 18,
    "Union Berlin": 28,
    "Freiburg": 17,
    "Werder Bremen": 12,
    # ── Ligue 1 ──────────────────────────────────────────────
    "PSG": 524,
    "Paris Saint Germain": 524,
    "Marseille": 516,
    "Monaco": 548,
    "Lyon": 523,
    "Lille": 521,
    "Nice": 522,
    "Lens": 546,
    "Rennes": 529,
    # ── Other ────────────────────────────────────────────────
    "Club Brugge": 510,
}

API_FOOTBALL_TEAM_IDS: dict[str, int] = {
    # ── Premier League ───────────────────────────────────────
    "Manchester City": 50,
    "Liverpool": 40,
    "Arsenal": 42,
    "Chelsea": 49,
    "Manchester United": 33,
    "Tottenham": 47,
    "Tottenham Hotspur": 47,
    "Newcastle": 34,
    "Newcastle United": 34,
    "West Ham": 48,
    "West Ham United": 48,
    "Brighton": 51,
    "Aston Villa": 66,
    "Crystal Palace": 52,
    "Fulham": 36,
    "Everton": 45,
    "Brentford": 55,
    "Nottingham Forest": 65,
    "Wolves": 39,
    "Wolverhampton": 39,
    "Bournemouth": 35,
    "Leicester": 46,
    "Leeds United": 63,
    "Southampton": 41,
    "Ipswich": 57,
    # ── La Liga ──────────────────────────────────────────────
    "Real Madrid": 541,
    "Barcelona": 529,
    "Atletico Madrid": 530,
    "Sevilla": 536,
    "Valencia": 532,
    "Villarreal": 533,
    "Real Sociedad": 548,
    "Athletic Bilbao": 531,
    "Real Betis": 543,
    # ── Serie A ──────────────────────────────────────────────
    "Inter": 505,
    "AC Milan": 489,
    "Juventus": 496,
    "Napoli": 492,
    "Roma": 497,
    "Lazio": 487,
    "Atalanta": 499,
    "Fiorentina": 502,
    "Bologna": 500,
    "Torino": 503,
    "Como": 512,
    "Spezia": 515,
    # ── Bundesliga ───────────────────────────────────────────
    "Bayern Munich": 157,
    "Borussia Dortmund": 165,
    "RB Leipzig": 173,
    "Bayer Leverkusen": 168,
    "Eintracht Frankfurt": 169,
    "Wolfsburg": 178,
    "Stuttgart": 172,
    "VfB Stuttgart": 172,
    "Borussia Monchengladbach": 163,
    "Union Berlin": 28,
    "Freiburg": 160,
    "Werder Bremen": 162,
    # ── Ligue 1 ──────────────────────────────────────────────
    "PSG": 85,
    "Paris Saint Germain": 85,
    "Marseille": 81,
    "Monaco": 91,
    "Lyon": 80,
    "Lille": 79,
    "Nice": 82,
    "Lens": 77,
    "Rennes": 92,
    # ── Other ────────────────────────────────────────────────
    "Club Brugge": 569,
}


def resolve_team_ids(
    team_names: Iterable[str],
    team_map: dict[str, int],
    *,
    log: logging.Logger | None = None,
) -> list[int]:
    """Map team names to provider ids.

    Unknown names are logged and skipped. The result keeps the order in
    which ids were first seen and contains no duplicates.
    """
    log = log or logger
    team_ids: list[int] = []
    seen: set[int] = set()
    for name in team_names:
        team_id = team_map.get(name)
        if team_id is None:
            log.warning("Team id not found for: %s", name)
            continue
        if team_id in seen:
            continue
        seen.add(team_id)
        team_ids.append(team_id)
    return team_ids
