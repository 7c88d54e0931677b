"""Saved squad arrangements, one per wallet."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

from sqlalchemy.orm import Session

from squadboard.models import SavedSquad
from squadboard.squads.formations import get_formation

logger = logging.getLogger(__name__)


class InvalidSquadError(ValueError):
    pass


def _normalize_wallet(wallet_address: str) -> str:
    return wallet_address.strip().lower()


def validate_assignment(formation_name: str, assigned_players: dict[str, Any]) -> None:
    formation = get_formation(formation_name)
    if formation is None:
        raise InvalidSquadError(f"Unknown formation: {formation_name}")
    unknown_slots = sorted(set(assigned_players) - formation.slot_ids)
    if unknown_slots:
        raise InvalidSquadError(
            f"Slots not in formation {formation_name}: {', '.join(unknown_slots)}"
        )
    player_ids = [player.get("id") for player in assigned_players.values()]
    if len(player_ids) != len(set(player_ids)):
        raise InvalidSquadError("A player can only fill one slot")


def load_squad(db: Session, wallet_address: str) -> SavedSquad | None:
    return (
        db.query(SavedSquad)
        .filter(SavedSquad.wallet_address == _normalize_wallet(wallet_address))
        .one_or_none()
    )


def save_squad(
    db: Session,
    wallet_address: str,
    formation_name: str,
    assigned_players: dict[str, dict[str, Any]],
) -> SavedSquad:
    """Validate and store the squad, replacing any previous one. Caller commits."""
    validate_assignment(formation_name, assigned_players)

    squad = load_squad(db, wallet_address)
    if squad is None:
        squad = SavedSquad(wallet_address=_normalize_wallet(wallet_address))
        db.add(squad)
    squad.formation = formation_name
    squad.assigned_players_json = json.dumps(assigned_players, ensure_ascii=False)
    squad.saved_at = datetime.now(timezone.utc)
    logger.info(
        "Saved squad wallet=%s formation=%s players=%s",
        squad.wallet_address,
        formation_name,
        len(assigned_players),
    )
    return squad


def clear_squad(db: Session, wallet_address: str) -> bool:
    squad = load_squad(db, wallet_address)
    if squad is None:
        return False
    db.delete(squad)
    logger.info("Cleared saved squad wallet=%s", squad.wallet_address)
    return True


def assigned_players(squad: SavedSquad) -> dict[str, dict[str, Any]]:
    try:
        value = json.loads(squad.assigned_players_json or "{}")
    except json.JSONDecodeError:
        logger.error("Corrupt saved squad for wallet=%s", squad.wallet_address)
        return {}
    return value if isinstance(value, dict) else {}
