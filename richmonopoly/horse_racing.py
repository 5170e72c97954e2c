"""Betting on a four-horse race."""

from __future__ import annotations

import random
import time

from richmonopoly.player import Player

HORSES = 4
FINISH_LINE = 100
_MIN_STRIDE = 8
_MAX_STRIDE = 12


class HorseRacing:
    """Runs a race round by round and pays out on the bet horse."""

    def __init__(self, rng: random.Random | None = None, step_delay: float = 0.0) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.step_delay = step_delay
        self.player: Player | None = None
        self.progress: list[int] = []
        self.winner = -1

    def reset(self, player: Player | None) -> None:
        self.player = player
        self.progress = []
        self.winner = -1

    def race(self, stake: int, bet_horse: int) -> int:
        """Run a whole race, settle the bet and return the winning horse."""
        if self.player is None:
            raise RuntimeError("no player set")
        self.progress = [0] * HORSES
        winner = -1
        while True:
            slowest = FINISH_LINE
            for horse in range(HORSES):
                self.progress[horse] += self._rng.randint(_MIN_STRIDE, _MAX_STRIDE)
                leader, best = 0, 0
                for index, distance in enumerate(self.progress):
                    if distance > best:
                        leader, best = index, distance
                    slowest = min(slowest, distance)
                if best >= FINISH_LINE:
                    if winner == -1:
                        winner = leader
                    self.progress = [min(d, FINISH_LINE) for d in self.progress]
            if slowest >= FINISH_LINE:
                break
            if self.step_delay:
                time.sleep(self.step_delay)

        if winner == bet_horse:
            self.player.add_money(stake)
        else:
            self.player.sub_money(stake)
        self.winner = winner
        return winner