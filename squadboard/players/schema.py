from __future__ import annotations

from dataclasses import dataclass


@dataclass
class PlayerInfo:
    image_url: str | None = None
    position: str | None = None
    team: str | None = None

    @property
    def is_empty(self) -> bool:
        return not (self.image_url or self.position or self.team)
