"""Choices offered when a player uses an item card."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field

from richmonopoly.land import Land, LandType
from richmonopoly.player import Player

CARD_KINDS = 5
PLAYER_COUNT = 4


@dataclass
class CardPanel:
    """Cards held by the current player and the targets they may pick."""

    target_players: list[bool] = field(default_factory=lambda: [False] * PLAYER_COUNT)
    target_lands: list[str] = field(default_factory=list)
    all_lands: list[str] = field(default_factory=list)
    card_counts: list[int] = field(default_factory=lambda: [0] * CARD_KINDS)
    card_available: list[bool] = field(default_factory=lambda: [False] * CARD_KINDS)

    def refresh(self, turn: int, lands: Sequence[Land], players: Sequence[Player]) -> None:
        """Recompute everything for the player whose turn it is."""
        self.target_players = [
            index != turn and not player.in_hospital and player.alive
            for index, player in enumerate(players)
        ]
        self.target_lands = [
            land.name
            for land in lands
            if land.owner != turn and land.kind == LandType.NORMAL and land.level != 0
        ]
        self.all_lands = [
            f"{index}. {land.name}" for index, land in enumerate(lands) if not land.blocked
        ]
        counts = Counter(players[turn].cards)
        self.card_counts = [counts[card] for card in range(CARD_KINDS)]
        self.card_available = [count > 0 for count in self.card_counts]