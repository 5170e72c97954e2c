"""Buying item cards."""

from __future__ import annotations

from richmonopoly.player import Player


def buy_item(player: Player, price: int, item_index: int) -> bool:
    """Sell card ``item_index`` to ``player`` for ``price``.

    Returns False, changing nothing, when the player cannot afford it.
    """
    if player.money < price:
        return False
    player.sub_money(price)
    player.add_card(item_index)
    return True