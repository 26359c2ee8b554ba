"""
Dominion Effects - On-play effects and deferred effects.

On-play effects run immediately when a card resolves and need no
decisions (every other player draws, every other player gains a Curse).
Deferred effects wait in the trigger registry for a later event.

Both are looked up by card type; new cards register with the
@on_play decorator.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from ...engine_core.triggers import DeferredEffect, TriggerKind
from .cards import CardType
from .state import COINS

if TYPE_CHECKING:
    from .state import DominionGameState

logger = logging.getLogger(__name__)

OnPlay = Callable[["DominionGameState", int], None]

ON_PLAY: dict[CardType, OnPlay] = {}


def on_play(card_type: CardType) -> Callable[[OnPlay], OnPlay]:
    """Register an on-play effect for a card type."""
    def register(fn: OnPlay) -> OnPlay:
        ON_PLAY[card_type] = fn
        return fn
    return register


@dataclass
class MerchantBonus(DeferredEffect):
    """+1 Coin when the Buy phase starts, if a Silver is in hand."""
    player_id: int

    @property
    def trigger_kind(self) -> TriggerKind:
        return TriggerKind.PHASE_ENTERED_BUY

    def execute(self, state: DominionGameState) -> None:
        if state.hands[self.player_id].contains(CardType.SILVER):
            state.turn_order.grant(self.player_id, COINS, 1)
            logger.debug("Merchant bonus: player %d +1 coin", self.player_id)


@on_play(CardType.MERCHANT)
def _merchant(state: DominionGameState, player: int) -> None:
    state.triggers.register(MerchantBonus(player_id=player))


@on_play(CardType.COUNCIL_ROOM)
def _council_room(state: DominionGameState, player: int) -> None:
    for other in state.other_players(player):
        state.draw_cards(other, 1)


@on_play(CardType.WITCH)
def _witch(state: DominionGameState, player: int) -> None:
    for other in state.other_players(player):
        if state.is_protected(other):
            continue
        state.gain(other, CardType.CURSE)
