from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class WalletLinkOut(CamelModel):
    wallet_address: Optional[str]
    is_linked: bool


class LeaderboardEntryOut(CamelModel):
    rank: int
    twitter_username: str
    top_strike_username: Optional[str]
    wallet_address: str
    points: int


class LeaderboardResponse(CamelModel):
    entries: list[LeaderboardEntryOut]
    count: int


class SlotOut(CamelModel):
    id: str
    label: str
    x: int
    y: int


class FormationOut(CamelModel):
    name: str
    label: str
    positions: list[SlotOut]


class AssignedPlayer(CamelModel):
    id: int
    name: str
    position: str
    team: Optional[str] = None


class SquadIn(CamelModel):
    formation: str
    assigned_players: dict[str, AssignedPlayer] = Field(default_factory=dict)


class SquadOut(CamelModel):
    wallet_address: str
    formation: str
    assigned_players: dict[str, AssignedPlayer]
    saved_at: datetime


class EnrichedPlayerOut(CamelModel):
    id: int
    name: str
    position: str
    original_position: Optional[str]
    team: Optional[str]
    image_url: Optional[str]
    source: str


class EnrichResponse(CamelModel):
    players: list[EnrichedPlayerOut]
