"""Hospital stays of players."""

from __future__ import annotations

from richmonopoly.player import Player

MEDICAL_EXPENSES = 50
HOSPITAL_POS = 32


class Hospital:
    """Tracks how many days each player still has to spend in hospital."""

    def __init__(self) -> None:
        self._days: dict[Player, int] = {}

    def is_in_hospital(self, player: Player) -> bool:
        return self._days.get(player, 0) != 0

    def admit(self, player: Player, days: int) -> None:
        """Send ``player`` to hospital for ``days`` days, charging for the stay."""
        player.in_hospital = True
        player.pos = HOSPITAL_POS
        player.sub_money(MEDICAL_EXPENSES * days)
        self._days[player] = days

    def discharge(self, player: Player) -> None:
        self._days[player] = 0
        player.in_hospital = False

    def days_remaining(self, player: Player) -> int:
        return self._days.get(player, 0)

    def update(self, player: Player) -> None:
        """Count one day off the stay, releasing the player when it is over."""
        days = self._days.get(player, 0)
        if days > 0:
            days -= 1
        self._days[player] = days
        if days <= 0:
            player.in_hospital = False