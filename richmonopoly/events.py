"""Random events: choosing one and reading its actions."""

from __future__ import annotations

import random
from dataclasses import dataclass

EVENT_DRAW_RANGE = 250
LAST_EVENT = 199

_AMOUNT_ACTIONS = ("sub", "add", "hospital")


@dataclass(frozen=True)
class EventAction:
    """One action of an event.

    ``sub``, ``add`` and ``hospital`` carry an ``amount``; ``level`` carries
    the new level as ``amount`` and the affected squares as ``areas``;
    ``fly`` carries its destination as the single area; ``run`` carries nothing.
    """

    name: str
    amount: int | None = None
    areas: tuple[str, ...] = ()


def pick_event_number(rng: random.Random) -> int:
    """Draw an event number; the last event takes all high draws."""
    return min(rng.randrange(EVENT_DRAW_RANGE), LAST_EVENT)


def _read_int(words, action: str) -> int:
    word = next(words, None)
    if word is None:
        raise ValueError(f"event action {action!r} needs a number")
    try:
        return int(word)
    except ValueError:
        raise ValueError(f"event action {action!r} needs a number, got {word!r}") from None


def parse_actions(function: str) -> list[EventAction]:
    """Read the actions of an event's function text; unknown words are skipped."""
    words = iter(function.split())
    actions: list[EventAction] = []
    for word in words:
        if word in _AMOUNT_ACTIONS:
            actions.append(EventAction(word, _read_int(words, word)))
        elif word == "level":
            level = _read_int(words, word)
            areas = []
            for area in words:
                if area == "end":
                    break
                areas.append(area)
            actions.append(EventAction(word, level, tuple(areas)))
        elif word == "fly":
            area = next(words, None)
            if area is None:
                raise ValueError("event action 'fly' needs a destination")
            actions.append(EventAction(word, areas=(area,)))
        elif word == "run":
            actions.append(EventAction(word))
    return actions