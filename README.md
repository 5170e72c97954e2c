# richmonopoly

Building blocks for a four-player property trading board game played on a
64-square board: players and their holdings, squares of land with buildings
up to level four, a hospital, a die, a card shop, random events, a
horse-racing mini-game, and the state a display of the board needs.

## Installation

```
pip install .
```

With the test suite:

```
pip install ".[test]"
pytest
```

## Game data

`richmonopoly.data.load_game_data(directory="json")` reads the game files in
a directory and returns a `GameData` value holding 64 fresh `Land` squares,
four fresh `Player`s, the money that ends the game (`end_money`), a map from
square name to position (`land_positions`), and the raw contents of the
optional files.

- `country.json` (required): one entry per square, keyed `"0"` to `"63"`,
  each with `type`, `name`, `value` and `translation`.
- `config.json` (required): `End.money`, and one entry per player keyed
  `"0"` to `"3"` with `money`, `playerID`, `playerName`, `playerLastName`,
  `ownCard` (space-separated card numbers), `pos`, `state`,
  `stayInHospitalTurn` and `nextRollDicePoint`.
- `command.json`, `card.json`, `event.json` (optional): loaded into
  `commands`, `cards` and `events`; empty when the file is absent.

A missing entry raises `ValueError`; a missing required file raises
`FileNotFoundError`.

## Modules

- `richmonopoly.player.Player`: money, position, cards, owned squares,
  hospital status and whether the player is alive. `add_pos` and `sub_pos`
  wrap around the board; `rename` also sets `last_name` to the first word of
  the new name.
- `richmonopoly.land`: `LandType` (`NORMAL`, `EVENT`, `STORE`, `HOSPITAL`,
  `START`) and `Land`, with `sell_value()` (what the owner gets back when
  selling) and `toll_fee()` (what a visitor pays the owner).
- `richmonopoly.hospital.Hospital`: `admit(player, days)` moves the player to
  square 32 and charges 50 per day; `update` counts a day off and releases
  the player when the stay is over; `discharge`, `days_remaining`,
  `is_in_hospital`.
- `richmonopoly.dice.Dice`: `roll()` returns a face from 1 to 6; after its
  first three rolls it never repeats one of its last three values. `pips()`
  gives the seven pip positions shown, `color` is red for faces 1 and 4.
- `richmonopoly.shop.buy_item(player, price, item_index)`: gives the player
  the card and charges the price, or returns `False` if the player cannot
  afford it.
- `richmonopoly.events`: `pick_event_number(rng)` draws an event number from
  0 to 199, and `parse_actions(text)` turns an event's function text
  (`sub N`, `add N`, `hospital N`, `level N area ... end`, `fly area`,
  `run`) into a list of `EventAction`s.
- `richmonopoly.horse_racing.HorseRacing`: `reset(player)`, then
  `race(stake, bet_horse)` runs a four-horse race to 100, pays or takes the
  stake and returns the winning horse. `step_delay` slows each round down.
- `richmonopoly.popups`: `PopupLog.show(kind, message)` records a pop-up of a
  `PopupKind`; `PopupLog.last(kind)` returns the latest message of that kind.
- Display state: `richmonopoly.tile.Tile` (with `tile_color` and
  `building_visibility`), `richmonopoly.card_panel.CardPanel` (cards held and
  the players and squares a card may target),
  `richmonopoly.status_panel.StatusPanel` (with `portrait_for_turn`) and
  `richmonopoly.move_point.MovePoint` (with `color_for_turn`).

## What the package does not do

There is no object that runs a whole game: taking turns, moving a player
and resolving the square landed on, tolls, buying and upgrading land,
bankruptcy and the end of the game are left to the caller, built from the
pieces above. There is no command-line program, no cheat-command
interpreter, no Dragon Gate mini-game, no helpers for using roadblock or
rocket cards, and no mapping of the board onto a display grid. Nothing is
drawn on screen.