"""Exceptions shared by the fixture feeds and the HTTP layer."""

from __future__ import annotations

MAX_ERROR_SNIPPET = 300


def _truncate(value: str, limit: int = MAX_ERROR_SNIPPET) -> str:
    if len(value) <= limit:
        return value
    return value[:limit] + "...<truncated>"


class SquadboardError(RuntimeError):
    pass


class NoRecognizedTeamsError(SquadboardError):
    def __init__(self, team_names: list[str], message: str = "No teams found in mapping"):
        super().__init__(message)
        self.team_names = team_names


class MissingApiKeyError(SquadboardError):
    def __init__(self, env_var: str):
        super().__init__(f"{env_var} not configured")
        self.env_var = env_var


class UpstreamError(SquadboardError):
    def __init__(self, message: str, status: int | None = None, body: str | None = None):
        super().__init__(message)
        self.status = status
        self.body = _truncate(body) if body else None
