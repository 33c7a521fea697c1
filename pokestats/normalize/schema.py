"""
Record types for parsed table rows.

`StatBlock` holds the six base stats of one row and `Entry` pairs it
with the National Pokédex number and the canonical display name.  Both
are frozen dataclasses: rows are created once by the parser and never
modified afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from ..settings import PLACEHOLDER_NAME

STAT_FIELDS = ("hp", "atk", "def_", "spa", "spd", "spe")


@dataclass(frozen=True)
class StatBlock:
    """Base stats, each in the range 0..255."""

    hp: int = 0
    atk: int = 0
    def_: int = 0
    spa: int = 0
    spd: int = 0
    spe: int = 0

    def __post_init__(self) -> None:
        for name in STAT_FIELDS:
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"{name} out of byte range: {value}")

    def as_tuple(self) -> Tuple[int, int, int, int, int, int]:
        return (self.hp, self.atk, self.def_, self.spa, self.spd, self.spe)


@dataclass(frozen=True)
class Entry:
    id: int
    name: str
    stats: StatBlock = field(default_factory=StatBlock)

    @property
    def is_placeholder(self) -> bool:
        return self.id == 0


PLACEHOLDER = Entry(id=0, name=PLACEHOLDER_NAME, stats=StatBlock())
