"""Parsers turning provider payloads into MatchRecord lists."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from pydantic import ValidationError

from squadboard.fixtures.schema import MatchRecord

logger = logging.getLogger(__name__)

_API_FOOTBALL_STATUS: dict[str, str] = {
    "TBD": "SCHEDULED",
    "NS": "TIMED",
    "1H": "IN_PLAY",
    "2H": "IN_PLAY",
    "ET": "IN_PLAY",
    "P": "IN_PLAY",
    "LIVE": "IN_PLAY",
    "HT": "PAUSED",
    "BT": "PAUSED",
    "INT": "PAUSED",
    "FT": "FINISHED",
    "AET": "FINISHED",
    "PEN": "FINISHED",
    "PST": "POSTPONED",
    "SUSP": "SUSPENDED",
    "CANC": "CANCELLED",
    "ABD": "CANCELLED",
    "AWD": "CANCELLED",
    "WO": "CANCELLED",
}

_FOOTBALL_DATA_STATUS: dict[str, str] = {
    "SCHEDULED": "SCHEDULED",
    "TIMED": "TIMED",
    "IN_PLAY": "IN_PLAY",
    "LIVE": "IN_PLAY",
    "EXTRA_TIME": "IN_PLAY",
    "PENALTY_SHOOTOUT": "IN_PLAY",
    "PAUSED": "PAUSED",
    "FINISHED": "FINISHED",
    "AWARDED": "FINISHED",
    "POSTPONED": "POSTPONED",
    "SUSPENDED": "SUSPENDED",
    "CANCELLED": "CANCELLED",
}


def _safe_int(value: Any) -> int | None:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _parse_datetime(value: Any) -> datetime | None:
    if not isinstance(value, str) or not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _status(raw: Any, status_map: dict[str, str], match_id: Any) -> str | None:
    status = status_map.get(str(raw).upper())
    if status is None:
        logger.warning("Skipping match id=%s with unrecognised status %r", match_id, raw)
    return status


def _build(fields: dict[str, Any]) -> MatchRecord | None:
    try:
        return MatchRecord(**fields)
    except ValidationError as exc:
        logger.warning("Skipping malformed match id=%s: %s", fields.get("id"), exc.errors()[:1])
        return None


def parse_football_data_matches(payload: Any) -> list[MatchRecord]:
    """Parse a football-data.org ``/v4/matches`` response."""

    matches = _dict(payload).get("matches")
    if not isinstance(matches, list):
        return []

    records: list[MatchRecord] = []
    for match in matches:
        if not isinstance(match, dict):
            continue
        kickoff = _parse_datetime(match.get("utcDate"))
        home = _dict(match.get("homeTeam"))
        away = _dict(match.get("awayTeam"))
        home_id = _safe_int(home.get("id"))
        away_id = _safe_int(away.get("id"))
        if match.get("id") is None or kickoff is None or home_id is None or away_id is None:
            continue
        status = _status(match.get("status"), _FOOTBALL_DATA_STATUS, match.get("id"))
        if status is None:
            continue
        full_time = _dict(_dict(match.get("score")).get("fullTime"))
        record = _build(
            {
                "id": str(match["id"]),
                "provider": "football-data",
                "kickoff_time": kickoff,
                "status": status,
                "home_team_id": home_id,
                "away_team_id": away_id,
                "home_team_name": str(home.get("shortName") or home.get("name") or "TBD"),
                "away_team_name": str(away.get("shortName") or away.get("name") or "TBD"),
                "home_team_crest": home.get("crest"),
                "away_team_crest": away.get("crest"),
                "competition_name": _dict(match.get("competition")).get("name"),
                "score": {
                    "home": _safe_int(full_time.get("home")),
                    "away": _safe_int(full_time.get("away")),
                },
            }
        )
        if record is not None:
            records.append(record)
    return records


def parse_api_football_fixtures(payload: Any) -> list[MatchRecord]:
    """Parse an API-Football ``/fixtures`` response."""

    fixtures = _dict(payload).get("response")
    if not isinstance(fixtures, list):
        return []

    records: list[MatchRecord] = []
    for item in fixtures:
        if not isinstance(item, dict):
            continue
        fixture = _dict(item.get("fixture"))
        status = _dict(fixture.get("status"))
        teams = _dict(item.get("teams"))
        home = _dict(teams.get("home"))
        away = _dict(teams.get("away"))
        goals = _dict(item.get("goals"))
        kickoff = _parse_datetime(fixture.get("date"))
        home_id = _safe_int(home.get("id"))
        away_id = _safe_int(away.get("id"))
        if fixture.get("id") is None or kickoff is None or home_id is None or away_id is None:
            continue
        match_status = _status(status.get("short"), _API_FOOTBALL_STATUS, fixture.get("id"))
        if match_status is None:
            continue
        record = _build(
            {
                "id": str(fixture["id"]),
                "provider": "api-football",
                "kickoff_time": kickoff,
                "status": match_status,
                "home_team_id": home_id,
                "away_team_id": away_id,
                "home_team_name": str(home.get("name") or "TBD"),
                "away_team_name": str(away.get("name") or "TBD"),
                "home_team_crest": home.get("logo"),
                "away_team_crest": away.get("logo"),
                "competition_name": _dict(item.get("league")).get("name"),
                "score": {
                    "home": _safe_int(goals.get("home")),
                    "away": _safe_int(goals.get("away")),
                },
                "elapsed": _safe_int(status.get("elapsed")),
            }
        )
        if record is not None:
            records.append(record)
    return records
