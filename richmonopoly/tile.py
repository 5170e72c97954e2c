"""Display state of one cell of the board grid."""

from __future__ import annotations

from dataclasses import dataclass, field

from richmonopoly.land import NO_OWNER, LandType

PLAYER_COUNT = 4
BUILDING_SLOTS = 4

_OWNER_COLORS = {
    NO_OWNER: "#454545",
    0: "#990000",
    1: "#005999",
    2: "#007f00",
}
_LAST_OWNER_COLOR = "#996600"
_EVENT_COLOR = "#6a1b9a"
_STORE_COLOR = "#e65100"
_OTHER_COLOR = "#00838f"


def tile_color(land_type: int, owner: int) -> str:
    """Colour of a square given its kind and, for normal land, its owner."""
    if land_type == LandType.NORMAL:
        return _OWNER_COLORS.get(owner, _LAST_OWNER_COLOR)
    if land_type == LandType.EVENT:
        return _EVENT_COLOR
    if land_type == LandType.STORE:
        return _STORE_COLOR
    return _OTHER_COLOR


def building_visibility(level: int) -> tuple[bool, ...]:
    """Which of the four building slots show at ``level``.

    Levels 0 to 3 show that many houses; any other level shows the motel alone.
    """
    if 0 <= level < BUILDING_SLOTS:
        return tuple(slot < level for slot in range(BUILDING_SLOTS))
    return tuple(slot == BUILDING_SLOTS - 1 for slot in range(BUILDING_SLOTS))


@dataclass
class Tile:
    """What one grid cell shows: a square of the board, or nothing."""

    is_display: bool = False
    order: str = ""
    name: str = ""
    translation: str = ""
    show_translation: bool = False
    color: str = ""
    player_stay: list[bool] = field(default_factory=lambda: [False] * PLAYER_COUNT)
    buildings: list[bool] = field(default_factory=lambda: [False] * BUILDING_SLOTS)
    is_roadblock: bool = False

    def set_players_from_positions(self, positions: list[int], order: int) -> None:
        """Mark the players whose position is the square ``order``."""
        self.player_stay = [pos == order for pos in positions]

    def set_buildings_from_level(self, level: int) -> None:
        self.buildings = list(building_visibility(level))

    def set_color_from_type(self, land_type: int, owner: int) -> None:
        self.color = tile_color(land_type, owner)