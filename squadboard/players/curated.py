"""Hand-maintained player data that beats anything the providers return."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class VerifiedPlayer:
    position: str
    team: str
    verified: bool = True
    notes: str | None = None


@dataclass(frozen=True)
class TeamOverride:
    team: str
    position: str | None = None


# Checked before the player database and the live search.
_VERIFIED_PLAYERS: dict[str, VerifiedPlayer] = {
    "Mohamed Salah": VerifiedPlayer("Right Winger", "Liverpool"),
    "Bukayo Saka": VerifiedPlayer("Right Winger", "Arsenal"),
    "Erling Haaland": VerifiedPlayer("Centre-Forward", "Manchester City"),
    "Cole Palmer": VerifiedPlayer("Attacking Midfield", "Chelsea"),
    "Harry Kane": VerifiedPlayer("Centre-Forward", "Bayern Munich"),
    "Lamine Yamal": VerifiedPlayer("Right Winger", "Barcelona"),
    "Florian Wirtz": VerifiedPlayer(
        "Attacking Midfield",
        "Liverpool",
        verified=False,
        notes="Transfer pending confirmation",
    ),
}

# Providers still list these players at old clubs.
_TEAM_OVERRIDES: dict[str, TeamOverride] = {
    "Mohamed Amoura": TeamOverride(team="Wolfsburg", position="Centre-Forward"),
    "Micky van de Ven": TeamOverride(team="Tottenham Hotspur", position="Centre-Back"),
}

# TheSportsDB player ids for names its search endpoint cannot find.
_PLAYER_ID_OVERRIDES: dict[str, str] = {
    "Nico O'Reilly": "34244585",
    "Harvey Barnes": "34161470",
    "Christopher Nkunku": "34162097",
    "Matheus Cunha": "34169290",
    "Marcus Thuram": "34169289",
    "Rayan Ait Nouri": "34181914",
    "Matias Soule": "34247113",
}


def verified_player(name: str) -> VerifiedPlayer | None:
    player = _VERIFIED_PLAYERS.get(name)
    if player is None or not player.verified:
        return None
    return player


def team_override(name: str) -> TeamOverride | None:
    return _TEAM_OVERRIDES.get(name)


def player_id_override(name: str) -> str | None:
    return _PLAYER_ID_OVERRIDES.get(name)
