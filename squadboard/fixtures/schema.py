"""Internal match contract shared by every fixture provider."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

MatchStatus = Literal[
    "SCHEDULED",
    "TIMED",
    "IN_PLAY",
    "PAUSED",
    "FINISHED",
    "POSTPONED",
    "SUSPENDED",
    "CANCELLED",
]

LIVE_STATUSES = frozenset({"IN_PLAY", "PAUSED"})
UPCOMING_STATUSES = frozenset({"TIMED", "SCHEDULED"})


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class Score(_CamelModel):
    home: Optional[int] = None
    away: Optional[int] = None


class MatchRecord(_CamelModel):
    """
    A single fixture as returned by an upstream provider, normalized.
    """

    # Required fields
    id: str
    provider: Literal["football-data", "api-football"]
    kickoff_time: datetime
    status: MatchStatus
    home_team_id: int
    away_team_id: int
    home_team_name: str
    away_team_name: str

    # Optional fields
    home_team_crest: Optional[str] = None
    away_team_crest: Optional[str] = None
    competition_name: Optional[str] = None
    score: Score = Field(default_factory=Score)
    elapsed: Optional[int] = None

    def involves(self, team_ids) -> bool:
        return self.home_team_id in team_ids or self.away_team_id in team_ids


class ClassifiedMatches(_CamelModel):
    live_matches: list[MatchRecord]
    upcoming_matches: list[MatchRecord]
    fetched_at: datetime
