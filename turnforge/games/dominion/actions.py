"""
Dominion Actions - Card play, purchase and follow-on decisions.

PlayCard and BuyCard are the phase actions. DiscardCard, TrashCard and
GainCard are offered by extended actions (Cellar, Chapel, Remodel, ...)
as follow-on decisions; the extended action observing them decides what
they mean for the card being resolved.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ...engine_core.action import Action
from .cards import CardType, get_card
from .state import ACTIONS, BUYS, SPENT

if TYPE_CHECKING:
    from .state import DominionGameState


@dataclass(frozen=True)
class PlayCard(Action):
    """
    Play an action card from hand.

    free=True plays it without spending an Action (Throne Room).
    """
    card_type: CardType
    free: bool = False

    def execute(self, state: DominionGameState) -> None:
        from .frames import resolve_card

        card = state.hands[self.player_id].first_of(self.card_type)
        state.hands[self.player_id].remove(card)
        state.tables[self.player_id].append(card)
        if not self.free:
            state.turn_order.spend(self.player_id, ACTIONS)
        resolve_card(state, self.player_id, self.card_type)

    def describe(self) -> str:
        return f"player {self.player_id} plays {get_card(self.card_type).name}"


@dataclass(frozen=True)
class BuyCard(Action):
    """Buy a card from the supply into the discard pile."""
    card_type: CardType

    def execute(self, state: DominionGameState) -> None:
        state.gain(self.player_id, self.card_type)
        state.turn_order.spend(self.player_id, BUYS)
        state.turn_order.grant(self.player_id, SPENT, get_card(self.card_type).cost)

    def describe(self) -> str:
        return f"player {self.player_id} buys {get_card(self.card_type).name}"


@dataclass(frozen=True)
class DiscardCard(Action):
    card_type: CardType

    def execute(self, state: DominionGameState) -> None:
        state.discard_from_hand(self.player_id, self.card_type)

    def describe(self) -> str:
        return f"player {self.player_id} discards {get_card(self.card_type).name}"


@dataclass(frozen=True)
class TrashCard(Action):
    card_type: CardType

    def execute(self, state: DominionGameState) -> None:
        state.trash_from_hand(self.player_id, self.card_type)

    def describe(self) -> str:
        return f"player {self.player_id} trashes {get_card(self.card_type).name}"


@dataclass(frozen=True)
class GainCard(Action):
    """Gain a card from the supply without paying for it."""
    card_type: CardType
    to_hand: bool = False

    def execute(self, state: DominionGameState) -> None:
        state.gain(self.player_id, self.card_type, to_hand=self.to_hand)

    def describe(self) -> str:
        where = "hand" if self.to_hand else "discard"
        return f"player {self.player_id} gains {get_card(self.card_type).name} to {where}"
