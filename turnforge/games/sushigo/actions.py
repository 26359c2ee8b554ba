"""
Sushi Go Actions - Picking a card, optionally onto wasabi, and chopsticks.

A pick only marks the card; it moves to the field at the reveal. The
points it is worth are worked out now from what the player already has
and added to the score at the reveal.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ...engine_core.action import Action
from .cards import SushiCard, is_nigiri
from .state import EXTRA_TURNS

if TYPE_CHECKING:
    from .state import SushiGoGameState

# One extra turn for the chopsticks decision, one for the second pick
CHOPSTICKS_EXTRA_TURNS = 2


def pick_points(state: SushiGoGameState, player: int, card_type: SushiCard) -> int:
    """Points a pick is worth immediately, counting the pick itself."""
    params = state.params
    if card_type == SushiCard.TEMPURA:
        return params.tempura_pair if state.collected(player, card_type) % 2 == 0 else 0
    if card_type == SushiCard.SASHIMI:
        return params.sashimi_set if state.collected(player, card_type) % 3 == 0 else 0
    if card_type == SushiCard.DUMPLING:
        table = params.dumpling_points
        n = state.collected(player, card_type)
        before = table[min(n - 1, len(table)) - 1] if n > 1 else 0
        after = table[min(n, len(table)) - 1]
        return after - before
    if is_nigiri(card_type):
        return params.nigiri_value(card_type)
    return 0


@dataclass(frozen=True)
class PickCard(Action):
    """Pick a card from hand to keep this slot."""
    card_type: SushiCard

    def execute(self, state: SushiGoGameState) -> None:
        state.pick(self.player_id, self.card_type)
        if self.card_type == SushiCard.WASABI:
            state.wasabi_available[self.player_id] += 1
        state.score_to_add[self.player_id] += pick_points(state, self.player_id, self.card_type)

    def describe(self) -> str:
        return f"player {self.player_id} picks {self.card_type.value}"


@dataclass(frozen=True)
class PickNigiriOnWasabi(Action):
    """Pick a nigiri and dip it in an unused wasabi."""
    card_type: SushiCard

    def execute(self, state: SushiGoGameState) -> None:
        state.pick(self.player_id, self.card_type)
        state.wasabi_available[self.player_id] -= 1
        points = state.params.nigiri_value(self.card_type) * state.params.wasabi_multiplier
        state.score_to_add[self.player_id] += points

    def describe(self) -> str:
        return f"player {self.player_id} picks {self.card_type.value} on wasabi"


@dataclass(frozen=True)
class UseChopsticks(Action):
    """Use chopsticks from the field to pick two cards this slot."""

    def execute(self, state: SushiGoGameState) -> None:
        state.chopsticks_activated[self.player_id] = True
        state.turn_order.grant(self.player_id, EXTRA_TURNS, CHOPSTICKS_EXTRA_TURNS)

    def describe(self) -> str:
        return f"player {self.player_id} uses chopsticks"
