"""Loading the board, the players and the game texts from JSON files."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from richmonopoly.land import Land, LandType
from richmonopoly.player import BOARD_SIZE, Player

PLAYER_COUNT = 4

COUNTRY_FILE = "country.json"
CONFIG_FILE = "config.json"
COMMAND_FILE = "command.json"
CARD_FILE = "card.json"
EVENT_FILE = "event.json"


@dataclass
class GameData:
    """Everything a game starts from: fresh squares, fresh players and texts."""

    lands: list[Land]
    players: list[Player]
    end_money: int
    land_positions: dict[str, int] = field(default_factory=dict)
    commands: dict[str, Any] = field(default_factory=dict)
    cards: dict[str, Any] = field(default_factory=dict)
    events: dict[str, Any] = field(default_factory=dict)


def _read_json(path: Path, required: bool) -> dict[str, Any]:
    try:
        with path.open(encoding="utf-8") as stream:
            data = json.load(stream)
    except FileNotFoundError:
        if required:
            raise
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{path.name}: expected a JSON object at the top level")
    return data


def _entry(data: dict[str, Any], key: str, source: str) -> Any:
    try:
        return data[key]
    except (KeyError, TypeError):
        raise ValueError(f"{source}: missing entry {key!r}") from None


def _make_land(pos: int, spec: dict[str, Any]) -> Land:
    source = f"{COUNTRY_FILE} square {pos}"
    return Land(
        kind=LandType(int(_entry(spec, "type", source))),
        pos=pos,
        name=str(_entry(spec, "name", source)),
        value=int(_entry(spec, "value", source)),
        translation=str(_entry(spec, "translation", source)),
        level=0,
    )


def _make_player(index: int, spec: dict[str, Any]) -> Player:
    source = f"{CONFIG_FILE} player {index}"
    cards = [int(word) for word in str(_entry(spec, "ownCard", source)).split()]
    return Player(
        money=int(_entry(spec, "money", source)),
        player_id=int(_entry(spec, "playerID", source)),
        name=str(_entry(spec, "playerName", source)),
        last_name=str(_entry(spec, "playerLastName", source)),
        cards=cards,
        pos=int(_entry(spec, "pos", source)),
        in_hospital=int(_entry(spec, "state", source)) == 1,
        stay_in_hospital_turn=int(_entry(spec, "stayInHospitalTurn", source)),
        next_roll_dice_point=int(_entry(spec, "nextRollDicePoint", source)),
    )


def load_game_data(directory: str | os.PathLike[str] = "json") -> GameData:
    """Read the game files in ``directory``.

    The board and player files must exist; the command, card and event
    files are optional and come back empty when absent.
    """
    base = Path(directory)
    country = _read_json(base / COUNTRY_FILE, required=True)
    config = _read_json(base / CONFIG_FILE, required=True)

    lands = [
        _make_land(pos, _entry(country, str(pos), COUNTRY_FILE))
        for pos in range(BOARD_SIZE)
    ]
    land_positions = {land.name: land.pos for land in lands}

    end_money = int(_entry(_entry(config, "End", CONFIG_FILE), "money", CONFIG_FILE))
    players = [
        _make_player(index, _entry(config, str(index), CONFIG_FILE))
        for index in range(PLAYER_COUNT)
    ]

    return GameData(
        lands=lands,
        players=players,
        end_money=end_money,
        land_positions=land_positions,
        commands=_read_json(base / COMMAND_FILE, required=False),
        cards=_read_json(base / CARD_FILE, required=False),
        events=_read_json(base / EVENT_FILE, required=False),
    )