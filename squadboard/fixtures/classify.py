"""Filtering and reduction rules applied to provider match lists."""

from __future__ import annotations

from typing import Iterable

from squadboard.fixtures.schema import LIVE_STATUSES, UPCOMING_STATUSES, MatchRecord

MAX_UPCOMING_FIXTURES = 10


def dedupe_matches(matches: Iterable[MatchRecord]) -> list[MatchRecord]:
    """Drop repeated match ids, keeping the first copy."""
    seen: set[str] = set()
    unique: list[MatchRecord] = []
    for match in matches:
        if match.id in seen:
            continue
        seen.add(match.id)
        unique.append(match)
    return unique


def filter_by_teams(matches: Iterable[MatchRecord], team_ids: Iterable[int]) -> list[MatchRecord]:
    wanted = set(team_ids)
    return [match for match in matches if match.involves(wanted)]


def split_live_upcoming(
    matches: Iterable[MatchRecord],
) -> tuple[list[MatchRecord], list[MatchRecord]]:
    live: list[MatchRecord] = []
    upcoming: list[MatchRecord] = []
    for match in matches:
        if match.status in LIVE_STATUSES:
            live.append(match)
        elif match.status in UPCOMING_STATUSES:
            upcoming.append(match)
    return live, upcoming


def next_match_per_team(
    upcoming: Iterable[MatchRecord],
    team_ids: Iterable[int],
    *,
    limit: int = MAX_UPCOMING_FIXTURES,
) -> list[MatchRecord]:
    """Keep each team's earliest upcoming match.

    Two requested teams meeting each other share one record. The merged
    list is sorted by kickoff and capped at *limit*.
    """
    ordered = sorted(upcoming, key=lambda match: match.kickoff_time)
    picked: dict[str, MatchRecord] = {}
    for team_id in team_ids:
        for match in ordered:
            if match.home_team_id == team_id or match.away_team_id == team_id:
                picked.setdefault(match.id, match)
                break
    merged = sorted(picked.values(), key=lambda match: match.kickoff_time)
    return merged[:limit]
