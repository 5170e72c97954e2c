import pytest

from richmonopoly.card_panel import CardPanel
from richmonopoly.land import Land, LandType
from richmonopoly.player import Player


@pytest.fixture
def lands():
    return [Land(kind=LandType.NORMAL, pos=i, name=f"L{i}", value=1000) for i in range(64)]


@pytest.fixture
def players():
    return [Player(player_id=i, name=f"P{i}") for i in range(4)]


def test_new_panel_has_no_cards():
    panel = CardPanel()
    assert panel.card_counts == [0] * 5
    assert panel.card_available == [False] * 5
    assert panel.target_lands == []


def test_target_players_exclude_self_hospital_and_dead(lands, players):
    players[2].in_hospital = True
    players[3].alive = False
    panel = CardPanel()
    panel.refresh(0, lands, players)
    assert panel.target_players == [False, True, False, False]


def test_target_lands_are_built_lands_of_others(lands, players):
    lands[5].owner, lands[5].level = 1, 2
    lands[6].owner, lands[6].level = 0, 3
    lands[7].owner, lands[7].level = 2, 0
    lands[8].kind, lands[8].owner, lands[8].level = LandType.EVENT, 1, 1
    panel = CardPanel()
    panel.refresh(0, lands, players)
    assert panel.target_lands == ["L5"]


def test_all_lands_skip_blocked(lands, players):
    lands[1].blocked = True
    panel = CardPanel()
    panel.refresh(0, lands, players)
    assert len(panel.all_lands) == 63
    assert panel.all_lands[0] == "0. L0"
    assert "1. L1" not in panel.all_lands
    assert panel.all_lands[1] == "2. L2"


def test_card_counts_and_availability(lands, players):
    players[1].cards = [0, 0, 3]
    panel = CardPanel()
    panel.refresh(1, lands, players)
    assert panel.card_counts == [2, 0, 0, 1, 0]
    assert panel.card_available == [count > 0 for count in panel.card_counts]
    assert sum(panel.card_counts) == len(players[1].cards)


def test_refresh_replaces_previous_lists(lands, players):
    lands[5].owner, lands[5].level = 1, 1
    panel = CardPanel()
    panel.refresh(0, lands, players)
    panel.refresh(0, lands, players)
    assert panel.target_lands == ["L5"]
    assert len(panel.all_lands) == 64