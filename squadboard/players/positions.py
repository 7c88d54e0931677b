"""Collapse free-text provider positions into pitch lines."""

from __future__ import annotations

from typing import Literal

PitchLine = Literal["GK", "FWD", "MID", "DEF", "Unknown"]

_FORWARD_KEYWORDS = ("forward", "striker", "winger", "wing", "attacker")
_MIDFIELD_KEYWORDS = ("midfield", "playmaker")
_DEFENDER_KEYWORDS = ("defender", "defence", "back", "sweeper")


def normalize_position(raw: str | None) -> PitchLine:
    """Map e.g. "Centre-Forward" to FWD and "Left-Back" to DEF.

    Keywords are tested goalkeeper first, then forward, midfield and
    defence, so "Wing-Back" lands on FWD and "Defensive Midfield" on MID.
    """
    if not raw:
        return "Unknown"
    position = raw.lower()
    if "goalkeeper" in position or "goalie" in position:
        return "GK"
    if any(keyword in position for keyword in _FORWARD_KEYWORDS):
        return "FWD"
    if any(keyword in position for keyword in _MIDFIELD_KEYWORDS):
        return "MID"
    if any(keyword in position for keyword in _DEFENDER_KEYWORDS):
        return "DEF"
    return "Unknown"
