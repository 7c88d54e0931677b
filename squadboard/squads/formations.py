"""Pitch layouts for the squad builder.

Slot coordinates are percentages of pitch width (x, from the left) and
height (y, from the top).
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Slot:
    id: str
    label: str
    x: int
    y: int


@dataclass(frozen=True)
class Formation:
    name: str
    label: str
    slots: tuple[Slot, ...]

    @property
    def slot_ids(self) -> frozenset[str]:
        return frozenset(slot.id for slot in self.slots)


_GK = Slot("gk", "GK", 50, 90)
_BACK_FOUR = (
    Slot("lb", "LB", 20, 70),
    Slot("cb1", "CB", 38, 70),
    Slot("cb2", "CB", 62, 70),
    Slot("rb", "RB", 80, 70),
)
_BACK_THREE = (
    Slot("cb1", "CB", 30, 70),
    Slot("cb2", "CB", 50, 70),
    Slot("cb3", "CB", 70, 70),
)
_BACK_FIVE = (
    Slot("cb1", "CB", 20, 70),
    Slot("cb2", "CB", 35, 70),
    Slot("cb3", "CB", 50, 70),
    Slot("cb4", "CB", 65, 70),
    Slot("cb5", "CB", 80, 70),
)
_FRONT_THREE = (
    Slot("lw", "LW", 20, 20),
    Slot("st", "ST", 50, 15),
    Slot("rw", "RW", 80, 20),
)
_STRIKE_PAIR = (
    Slot("st1", "ST", 38, 20),
    Slot("st2", "ST", 62, 20),
)
_MIDFIELD_THREE = (
    Slot("cm1", "CM", 30, 45),
    Slot("cm2", "CM", 50, 45),
    Slot("cm3", "CM", 70, 45),
)
_MIDFIELD_FOUR = (
    Slot("cm1", "CM", 25, 45),
    Slot("cm2", "CM", 42, 45),
    Slot("cm3", "CM", 58, 45),
    Slot("cm4", "CM", 75, 45),
)

FORMATIONS: dict[str, Formation] = {
    "4-3-3": Formation("4-3-3", "4-3-3 (Attack)", (_GK, *_BACK_FOUR, *_MIDFIELD_THREE, *_FRONT_THREE)),
    "4-4-2": Formation(
        "4-4-2",
        "4-4-2 (Balanced)",
        (
            _GK,
            *_BACK_FOUR,
            Slot("lm", "LM", 20, 45),
            Slot("cm1", "CM", 38, 45),
            Slot("cm2", "CM", 62, 45),
            Slot("rm", "RM", 80, 45),
            *_STRIKE_PAIR,
        ),
    ),
    "3-5-2": Formation(
        "3-5-2",
        "3-5-2 (Wing Play)",
        (
            _GK,
            *_BACK_THREE,
            Slot("lwb", "LWB", 15, 50),
            Slot("cm1", "CM", 35, 45),
            Slot("cm2", "CM", 50, 45),
            Slot("cm3", "CM", 65, 45),
            Slot("rwb", "RWB", 85, 50),
            *_STRIKE_PAIR,
        ),
    ),
    "4-2-3-1": Formation(
        "4-2-3-1",
        "4-2-3-1 (Modern)",
        (
            _GK,
            *_BACK_FOUR,
            Slot("cdm1", "CDM", 38, 55),
            Slot("cdm2", "CDM", 62, 55),
            Slot("lm", "LM", 20, 35),
            Slot("cam", "CAM", 50, 35),
            Slot("rm", "RM", 80, 35),
            Slot("st", "ST", 50, 15),
        ),
    ),
    "3-4-3": Formation("3-4-3", "3-4-3 (Attack)", (_GK, *_BACK_THREE, *_MIDFIELD_FOUR, *_FRONT_THREE)),
    "5-3-2": Formation("5-3-2", "5-3-2 (Defensive)", (_GK, *_BACK_FIVE, *_MIDFIELD_THREE, *_STRIKE_PAIR)),
    "5-4-1": Formation(
        "5-4-1",
        "5-4-1 (Ultra Defensive)",
        (_GK, *_BACK_FIVE, *_MIDFIELD_FOUR, Slot("st", "ST", 50, 15)),
    ),
}


def get_formation(name: str) -> Formation | None:
    return FORMATIONS.get(name)
