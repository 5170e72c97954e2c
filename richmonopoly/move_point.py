"""The marker that walks a player's token across the board."""

from __future__ import annotations

from dataclasses import dataclass

_TURN_COLORS = ("#ff1700", "#009aff", "#0fff00")
_LAST_TURN_COLOR = "#ffcb00"


def color_for_turn(turn: int) -> str:
    """Colour of the moving marker for player ``turn``."""
    if 0 <= turn < len(_TURN_COLORS):
        return _TURN_COLORS[turn]
    return _LAST_TURN_COLOR


@dataclass
class MovePoint:
    """Position, colour and visibility of the moving marker."""

    visible: bool = False
    x: float = 0.0
    y: float = 0.0
    color: str = "transparent"

    def initialize(self, x: float, y: float, turn: int) -> None:
        """Place the marker at ``(x, y)`` in the colour of player ``turn``."""
        self.x = x
        self.y = y
        self.color = color_for_turn(turn)

    def move_to(self, x: float, y: float) -> None:
        self.x = x
        self.y = y

    def hide(self) -> None:
        self.visible = False