import random

import pytest

from richmonopoly.events import EventAction, parse_actions, pick_event_number


class _FixedRng:
    def __init__(self, value):
        self.value = value

    def randrange(self, stop):
        return self.value


def test_pick_event_clamps_high_draws():
    assert pick_event_number(_FixedRng(249)) == 199


def test_pick_event_keeps_low_draws():
    assert pick_event_number(_FixedRng(42)) == 42


def test_pick_event_stays_in_range():
    rng = random.Random(7)
    numbers = {pick_event_number(rng) for _ in range(2000)}
    assert min(numbers) >= 0
    assert max(numbers) <= 199


def test_parse_sub_and_add():
    assert parse_actions("sub 500 add 30") == [
        EventAction("sub", 500),
        EventAction("add", 30),
    ]


def test_parse_hospital():
    assert parse_actions("hospital 3") == [EventAction("hospital", 3)]


def test_parse_level_with_end():
    actions = parse_actions("level 2 Taipei Tainan end add 5")
    assert actions == [
        EventAction("level", 2, ("Taipei", "Tainan")),
        EventAction("add", 5),
    ]


def test_parse_level_without_end_takes_rest():
    assert parse_actions("level 0 A B") == [EventAction("level", 0, ("A", "B"))]


def test_parse_fly_and_run():
    assert parse_actions("fly Kaohsiung run") == [
        EventAction("fly", areas=("Kaohsiung",)),
        EventAction("run"),
    ]


def test_unknown_words_are_skipped():
    assert parse_actions("nothing here add 1") == [EventAction("add", 1)]


def test_empty_function():
    assert parse_actions("") == []


def test_missing_amount_raises():
    with pytest.raises(ValueError):
        parse_actions("sub")


def test_non_numeric_amount_raises():
    with pytest.raises(ValueError):
        parse_actions("add lots")


def test_fly_without_destination_raises():
    with pytest.raises(ValueError):
        parse_actions("fly")