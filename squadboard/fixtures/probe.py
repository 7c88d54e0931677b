"""Quick probe of a fixture provider for a list of teams."""

from __future__ import annotations

import argparse
import asyncio
import logging

from squadboard.errors import MissingApiKeyError, NoRecognizedTeamsError
from squadboard.services import build_services


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Fetch live and upcoming matches for teams and print counts.",
    )
    parser.add_argument(
        "--provider",
        choices=["football-data", "api-football"],
        default="football-data",
        help="Fixture provider to query (default: football-data).",
    )
    parser.add_argument(
        "--teams",
        type=str,
        required=True,
        help="Comma-separated team names (e.g., Arsenal,Liverpool).",
    )
    return parser.parse_args()


def _parse_teams(raw: str) -> list[str]:
    teams = [team.strip() for team in raw.split(",") if team.strip()]
    if not teams:
        raise SystemExit("No teams provided. Use --teams Arsenal,Liverpool,...")
    return teams


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    args = _parse_args()
    teams = _parse_teams(args.teams)

    services = build_services()
    feed = services.feed(args.provider)
    try:
        result = asyncio.run(feed.fetch(teams))
    except (NoRecognizedTeamsError, MissingApiKeyError) as exc:
        logging.error("%s error: %s", args.provider, exc)
        raise SystemExit(1)

    for match in result.live_matches:
        logging.info("LIVE: %s vs %s", match.home_team_name, match.away_team_name)
    for match in result.upcoming_matches:
        logging.info(
            "UPCOMING: %s vs %s (%s)",
            match.home_team_name,
            match.away_team_name,
            match.kickoff_time.isoformat(),
        )
    logging.info(
        "Done: provider=%s live=%s upcoming=%s",
        args.provider,
        len(result.live_matches),
        len(result.upcoming_matches),
    )


if __name__ == "__main__":
    main()
