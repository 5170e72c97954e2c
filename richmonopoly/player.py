"""Players taking part in a game."""

from __future__ import annotations

from dataclasses import dataclass, field

BOARD_SIZE = 64
STARTING_MONEY = 200000


@dataclass(eq=False)
class Player:
    """A player's money, position, holdings and status.

    Players compare by identity; ordering follows ``player_id``.
    """

    money: int = STARTING_MONEY
    player_id: int = 0
    name: str = ""
    last_name: str = ""
    cards: list[int] = field(default_factory=list)
    pos: int = 0
    in_hospital: bool = False
    stay_in_hospital_turn: int = 0
    next_roll_dice_point: int = 0
    properties: list[int] = field(default_factory=list)
    alive: bool = True

    def __lt__(self, other: Player) -> bool:
        return self.player_id < other.player_id

    def add_money(self, amount: int) -> None:
        self.money += amount

    def sub_money(self, amount: int) -> None:
        self.money -= amount

    def add_pos(self, delta: int) -> None:
        """Move forward ``delta`` squares, wrapping around the board."""
        self.pos = (self.pos + delta) % BOARD_SIZE

    def sub_pos(self, delta: int) -> None:
        """Move back ``delta`` squares, wrapping around the board."""
        self.pos = (self.pos + BOARD_SIZE - delta) % BOARD_SIZE

    def add_property(self, pos: int) -> None:
        self.properties.append(pos)

    def remove_property(self, pos: int) -> None:
        """Drop the first holding at ``pos``; unknown positions are ignored."""
        if pos in self.properties:
            self.properties.remove(pos)

    def add_card(self, card: int) -> None:
        self.cards.append(card)

    def discard_card(self, card: int) -> None:
        """Drop one copy of ``card``; a card not held is ignored."""
        if card in self.cards:
            self.cards.remove(card)

    def rename(self, name: str) -> None:
        """Set the name; the last name becomes its first word."""
        if name == self.name:
            return
        self.name = name
        words = name.split()
        if words:
            self.last_name = words[0]