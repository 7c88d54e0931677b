"""Pre-built player database (JSON) used instead of live lookups."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from squadboard.players.schema import PlayerInfo

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlayerRecord:
    id: int
    name: str
    image_url: str | None
    position: str | None
    team: str | None
    sportsdb_id: str | None


def _record_from_json(raw: dict) -> PlayerRecord | None:
    try:
        player_id = int(raw["id"])
    except (KeyError, TypeError, ValueError):
        return None
    name = raw.get("name")
    if not isinstance(name, str) or not name:
        return None
    return PlayerRecord(
        id=player_id,
        name=name,
        image_url=raw.get("imageUrl"),
        position=raw.get("position"),
        team=raw.get("team"),
        sportsdb_id=raw.get("sportsDbId"),
    )


class PlayerDatabase:
    def __init__(self, records: list[PlayerRecord]) -> None:
        self._by_id = {record.id: record for record in records}
        self._by_name = {record.name.lower(): record for record in records}
        self._records = records

    @classmethod
    def load(cls, path: str | Path) -> PlayerDatabase | None:
        """Load the database file, or return None when it is unavailable.

        A missing file is expected before the database has been built; the
        enricher then falls back to live lookups.
        """
        path = Path(path)
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            logger.warning("Player database not found at %s. Using live TheSportsDB lookups.", path)
            return None
        except (OSError, json.JSONDecodeError):
            logger.exception("Failed to read player database at %s", path)
            return None
        if not isinstance(raw, list):
            logger.error("Player database at %s is not a JSON list", path)
            return None

        records = [record for record in (_record_from_json(item) for item in raw if isinstance(item, dict)) if record]
        database = cls(records)
        stats = database.stats()
        logger.info(
            "Loaded player database: %s players, %s with images",
            stats["total"],
            stats["with_images"],
        )
        return database

    def __len__(self) -> int:
        return len(self._records)

    def by_id(self, player_id: int) -> PlayerInfo | None:
        record = self._by_id.get(player_id)
        return self._info(record)

    def by_name(self, name: str) -> PlayerInfo | None:
        record = self._by_name.get(name.strip().lower())
        return self._info(record)

    def stats(self) -> dict[str, int]:
        with_images = sum(1 for record in self._records if record.image_url)
        return {
            "total": len(self._records),
            "with_images": with_images,
            "without_images": len(self._records) - with_images,
        }

    @staticmethod
    def _info(record: PlayerRecord | None) -> PlayerInfo | None:
        if record is None:
            return None
        return PlayerInfo(image_url=record.image_url, position=record.position, team=record.team)
