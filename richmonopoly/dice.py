"""A die that avoids repeating its recent faces."""

from __future__ import annotations

import random

# Seven pip positions per face, indexed by point (face - 1).
_FACE_PIPS = (
    (0, 0, 0, 1, 0, 0, 0),
    (0, 0, 1, 0, 1, 0, 0),
    (0, 0, 1, 1, 1, 0, 0),
    (1, 0, 1, 0, 1, 0, 1),
    (1, 0, 1, 1, 1, 0, 1),
    (1, 1, 1, 0, 1, 1, 1),
)

_HISTORY = 3


class Dice:
    """A six-sided die; once warmed up it never lands on its last three values."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.point = 0
        self._history: list[int] = []
        self._index = 0

    @property
    def face(self) -> int:
        return self.point + 1

    @property
    def color(self) -> str:
        return "red" if self.point in (0, 3) else "black"

    def roll(self) -> int:
        """Roll the die and return the face shown."""
        if len(self._history) < _HISTORY:
            self._history.append(self.point)
            self.point = self._rng.randrange(6)
            self._index += 1
        else:
            while self.point in self._history:
                self.point = self._rng.randrange(6)
            self._history[self._index % _HISTORY] = self.point
            self._index = (self._index + 1) % _HISTORY
        return self.face

    def pips(self) -> tuple[bool, ...]:
        """Which of the seven pip positions are shown."""
        return tuple(bool(pip) for pip in _FACE_PIPS[self.point])