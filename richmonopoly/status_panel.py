"""The panel showing the current player's portrait, name and money."""

from __future__ import annotations

from dataclasses import dataclass

from richmonopoly.player import Player

_PORTRAITS = (
    "qrc:/images/Chang.png",
    "qrc:/images/Wu.png",
    "qrc:/images/Tuan.png",
)
_LAST_PORTRAIT = "qrc:/images/Chiang.png"


def portrait_for_turn(turn: int) -> str:
    """Image shown for player ``turn``."""
    if 0 <= turn < len(_PORTRAITS):
        return _PORTRAITS[turn]
    return _LAST_PORTRAIT


@dataclass
class StatusPanel:
    """State shown for the player whose turn it is, and land prices on offer."""

    image_source: str = ""
    name: str = ""
    money: int = 0
    land_value1: int = 0
    land_value2: int = 0

    def refresh(self, turn: int, player: Player) -> None:
        """Show ``player``, who plays as number ``turn``."""
        self.image_source = portrait_for_turn(turn)
        self.name = player.name
        self.money = player.money