from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from urllib.parse import unquote

from fastapi import Depends, FastAPI, Query, Request
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from squadboard.db import Base, engine, get_db
from squadboard.errors import MissingApiKeyError, NoRecognizedTeamsError, UpstreamError
from squadboard.fixtures.api_football import ApiFootballFeed
from squadboard.fixtures.feed import MatchFeed
from squadboard.fixtures.football_data import FootballDataFeed
from squadboard.fixtures.topstrike import PROXY_CACHE_CONTROL, fetch_topstrike_fixtures
from squadboard.log_buffer import get_buffer_handler, install_buffer_handler
from squadboard.players.enrich import PlayerEnricher
from squadboard.schemas import (
    EnrichedPlayerOut,
    EnrichResponse,
    FormationOut,
    LeaderboardEntryOut,
    LeaderboardResponse,
    SlotOut,
    SquadIn,
    SquadOut,
    WalletLinkOut,
)
from squadboard.services import Services, build_services
from squadboard.squads import links, saved
from squadboard.squads.formations import FORMATIONS
from squadboard.squads.leaderboard import build_leaderboard

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    install_buffer_handler()
    logger.info("App starting up: creating tables and fetch services")
    Base.metadata.create_all(bind=engine)
    app.state.services = build_services()
    yield
    logger.info("App shutting down")


app = FastAPI(title="TopStrike Squad Builder", lifespan=lifespan)


def get_services(request: Request) -> Services:
    return request.app.state.services


def get_football_data_feed(services: Services = Depends(get_services)) -> FootballDataFeed:
    return services.football_data


def get_api_football_feed(services: Services = Depends(get_services)) -> ApiFootballFeed:
    return services.api_football


def get_enricher(services: Services = Depends(get_services)) -> PlayerEnricher:
    return services.enricher


def _error(status_code: int, error: str, **extra) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": error, **extra})


def _parse_team_names(raw: str) -> list[str]:
    names = (unquote(name).strip() for name in raw.split(","))
    return [name for name in names if name]


async def _fixtures_response(
    feed: MatchFeed,
    team_names_param: str | None,
    clear_cache: str | None,
) -> JSONResponse:
    if clear_cache == "true":
        feed.clear_cache()
        return JSONResponse({"success": True, "message": f"{feed.name} cache cleared"})

    if not team_names_param:
        return _error(400, "teamNames parameter required")
    team_names = _parse_team_names(team_names_param)
    if not team_names:
        return _error(400, "No valid team names provided")

    logger.info("Fetching %s data for teams: %s", feed.name, team_names)
    team_ids = feed.resolve(team_names)
    try:
        result = await feed.fetch_for_ids(team_ids, team_names=team_names)
    except NoRecognizedTeamsError:
        return _error(400, f"No teams found in {feed.name} mapping")
    except MissingApiKeyError as exc:
        logger.error("%s misconfigured: %s", feed.name, exc)
        return _error(500, str(exc), liveGames=[], upcomingFixtures=[])
    except Exception:
        logger.exception("Unexpected %s failure", feed.name)
        return _error(500, f"Failed to fetch {feed.name} data", liveGames=[], upcomingFixtures=[])

    return JSONResponse(
        {
            "success": True,
            "teamNames": team_names,
            "teamIds": team_ids,
            "liveGames": [m.model_dump(mode="json", by_alias=True) for m in result.live_matches],
            "upcomingFixtures": [
                m.model_dump(mode="json", by_alias=True) for m in result.upcoming_matches
            ],
            "cachedAt": result.fetched_at.isoformat(),
        }
    )


@app.get("/api/football-data")
async def api_football_data(
    team_names: str | None = Query(default=None, alias="teamNames"),
    clear_cache: str | None = Query(default=None, alias="clearCache"),
    feed: FootballDataFeed = Depends(get_football_data_feed),
):
    return await _fixtures_response(feed, team_names, clear_cache)


@app.get("/api/api-football")
async def api_api_football(
    team_names: str | None = Query(default=None, alias="teamNames"),
    clear_cache: str | None = Query(default=None, alias="clearCache"),
    feed: ApiFootballFeed = Depends(get_api_football_feed),
):
    return await _fixtures_response(feed, team_names, clear_cache)


@app.get("/api/fixtures")
async def api_fixtures():
    try:
        data = await asyncio.to_thread(fetch_topstrike_fixtures)
    except UpstreamError as exc:
        logger.error("Fixtures proxy failed status=%s error=%s", exc.status, exc)
        return _error(500, "Failed to fetch fixtures", message=str(exc), status=exc.status)
    return JSONResponse(data, headers={"Cache-Control": PROXY_CACHE_CONTROL})


@app.get("/api/wallet-link", response_model=WalletLinkOut)
def get_wallet_link(
    twitter_id: str | None = Query(default=None, alias="twitterId"),
    db: Session = Depends(get_db),
):
    if not twitter_id:
        return _error(400, "Twitter ID required")
    link = links.get_link(db, twitter_id)
    wallet_address = link.wallet_address if link else None
    return WalletLinkOut(wallet_address=wallet_address, is_linked=wallet_address is not None)


@app.post("/api/wallet-link")
def post_wallet_link(payload: dict, db: Session = Depends(get_db)):
    twitter_id = str(payload.get("twitterId") or "").strip()
    wallet_address = str(payload.get("walletAddress") or "").strip()
    if not twitter_id or not wallet_address:
        return _error(400, "Twitter ID and wallet address required")
    if not links.is_wallet_address(wallet_address):
        return _error(400, "Invalid wallet address format")

    link = links.save_link(
        db,
        twitter_id=twitter_id,
        wallet_address=wallet_address,
        twitter_username=str(payload.get("twitterUsername") or ""),
        topstrike_username=payload.get("topStrikeUsername") or None,
    )
    db.commit()
    return {"success": True, "walletAddress": link.wallet_address}


@app.delete("/api/wallet-link")
def delete_wallet_link(
    twitter_id: str | None = Query(default=None, alias="twitterId"),
    db: Session = Depends(get_db),
):
    if not twitter_id:
        return _error(400, "Twitter ID required")
    links.remove_link(db, twitter_id)
    db.commit()
    return {"success": True}


@app.get("/api/leaderboard", response_model=LeaderboardResponse)
def api_leaderboard(db: Session = Depends(get_db)):
    entries = build_leaderboard(links.all_links(db))
    return LeaderboardResponse(
        entries=[
            LeaderboardEntryOut(
                rank=entry.rank,
                twitter_username=entry.twitter_username,
                top_strike_username=entry.topstrike_username,
                wallet_address=entry.wallet_address,
                points=entry.points,
            )
            for entry in entries
        ],
        count=len(entries),
    )


@app.get("/api/formations", response_model=list[FormationOut])
def api_formations():
    return [
        FormationOut(
            name=formation.name,
            label=formation.label,
            positions=[SlotOut(id=s.id, label=s.label, x=s.x, y=s.y) for s in formation.slots],
        )
        for formation in FORMATIONS.values()
    ]


def _invalid_wallet(wallet_address: str) -> JSONResponse | None:
    if links.is_wallet_address(wallet_address):
        return None
    return _error(400, "Invalid wallet address format")


def _squad_out(squad) -> SquadOut:
    return SquadOut(
        wallet_address=squad.wallet_address,
        formation=squad.formation,
        assigned_players=saved.assigned_players(squad),
        saved_at=squad.saved_at,
    )


@app.get("/api/squads/{wallet_address}", response_model=SquadOut)
def get_squad(wallet_address: str, db: Session = Depends(get_db)):
    invalid = _invalid_wallet(wallet_address)
    if invalid is not None:
        return invalid
    squad = saved.load_squad(db, wallet_address)
    if squad is None:
        return _error(404, "No saved squad for wallet")
    return _squad_out(squad)


@app.put("/api/squads/{wallet_address}", response_model=SquadOut)
def put_squad(wallet_address: str, payload: SquadIn, db: Session = Depends(get_db)):
    invalid = _invalid_wallet(wallet_address)
    if invalid is not None:
        return invalid
    assigned = {
        slot_id: player.model_dump(by_alias=True)
        for slot_id, player in payload.assigned_players.items()
    }
    try:
        squad = saved.save_squad(db, wallet_address, payload.formation, assigned)
    except saved.InvalidSquadError as exc:
        return _error(400, str(exc))
    db.commit()
    return _squad_out(squad)


@app.delete("/api/squads/{wallet_address}")
def delete_squad(wallet_address: str, db: Session = Depends(get_db)):
    invalid = _invalid_wallet(wallet_address)
    if invalid is not None:
        return invalid
    removed = saved.clear_squad(db, wallet_address)
    db.commit()
    return {"success": True, "removed": removed}


@app.post("/api/players/enrich", response_model=EnrichResponse)
async def api_enrich_players(payload: dict, enricher: PlayerEnricher = Depends(get_enricher)):
    players = payload.get("players")
    if not isinstance(players, list):
        return _error(400, "'players' is required")

    requested: list[tuple[int, str]] = []
    for player in players:
        if not isinstance(player, dict):
            return _error(400, "Each player needs an integer 'id' and a 'name'")
        try:
            player_id = int(player.get("id"))
        except (TypeError, ValueError):
            return _error(400, "Each player needs an integer 'id' and a 'name'")
        name = str(player.get("name") or "").strip()
        if not name:
            return _error(400, "Each player needs an integer 'id' and a 'name'")
        requested.append((player_id, name))

    enriched = await enricher.enrich(requested)
    return EnrichResponse(
        players=[
            EnrichedPlayerOut(
                id=p.id,
                name=p.name,
                position=p.position,
                original_position=p.original_position,
                team=p.team,
                image_url=p.image_url,
                source=p.source,
            )
            for p in enriched
        ]
    )


@app.get("/api/logs")
def api_logs(limit: int = 100, level: str | None = None):
    handler = get_buffer_handler()
    return {
        "entries": handler.entries(limit=limit, min_level=level),
        "generatedAt": datetime.now(timezone.utc).isoformat(),
    }
