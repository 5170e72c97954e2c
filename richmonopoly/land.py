"""Squares of the board."""

from __future__ import annotations

import enum
from dataclasses import dataclass

MAX_LEVEL = 4
NO_OWNER = -1


class LandType(enum.IntEnum):
    NORMAL = 0
    EVENT = 1
    STORE = 2
    HOSPITAL = 3
    START = 4


@dataclass(eq=False)
class Land:
    """One square: its kind, position, owner, building level and roadblock."""

    kind: LandType = LandType.NORMAL
    pos: int = 0
    name: str = ""
    value: int = 0
    translation: str = ""
    owner: int = NO_OWNER
    level: int = 0
    blocked: bool = False

    def __post_init__(self) -> None:
        self.kind = LandType(self.kind)

    @property
    def is_owned(self) -> bool:
        return self.owner != NO_OWNER

    def sell_value(self) -> int:
        """Money returned when the owner sells this land."""
        value = int(self.value * 0.8)
        return value // 2 + self.level * value // 2

    def toll_fee(self) -> int:
        """Fee a visitor pays to the owner."""
        return int(self.level * (self.value // 5) + self.value * 0.8)