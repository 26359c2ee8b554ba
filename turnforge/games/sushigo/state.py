"""
Sushi Go State - Game-specific state model.

Picks stay in the hand (hidden) until the reveal at the end of the turn
slot; the points they are worth are already known and wait in
score_to_add until then.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum

from ...engine_core.forward_model import EXTRA_TURNS
from ...engine_core.state import Card, GameState, VisibilityMode, Zone
from .cards import MAKI_ICONS, SushiCard

TURN_RESOURCES = {EXTRA_TURNS: 0}


class SushiGoPhase(Enum):
    DRAW = "draw"


@dataclass
class SushiGoGameState(GameState):
    """
    Sushi Go-specific game state.

    Adds:
    - Shared draw and discard piles
    - Per-player hand (passed on each slot) and field (kept)
    - Per-player pending picks, pending points, wasabi and chopsticks markers
    """
    draw_pile: Zone = field(
        default_factory=lambda: Zone(name="draw_pile", visibility=VisibilityMode.HIDDEN_TO_ALL)
    )
    discard_pile: Zone = field(default_factory=lambda: Zone(name="discard_pile"))
    hands: list[Zone] = field(default_factory=list)
    fields: list[Zone] = field(default_factory=list)

    picks: list[list[Card]] = field(default_factory=list)
    score_to_add: list[int] = field(default_factory=list)
    wasabi_available: list[int] = field(default_factory=list)
    chopsticks_activated: list[bool] = field(default_factory=list)

    def unpicked(self, player: int) -> list[Card]:
        """Cards in hand not already picked this slot."""
        picked = {c.instance_id for c in self.picks[player]}
        return [c for c in self.hands[player] if c.instance_id not in picked]

    def unpicked_types(self, player: int) -> list[SushiCard]:
        """Distinct card types available to pick, in hand order."""
        seen: list[SushiCard] = []
        for card in self.unpicked(player):
            if card.card_type not in seen:
                seen.append(card.card_type)
        return seen

    def pick(self, player: int, card_type: SushiCard) -> Card:
        for card in self.unpicked(player):
            if card.card_type == card_type:
                self.picks[player].append(card)
                return card
        raise ValueError(f"Player {player} has no {card_type.value} to pick")

    def collected(self, player: int, card_type: SushiCard) -> int:
        """Cards of a type on the field plus those picked this slot."""
        picked = sum(1 for c in self.picks[player] if c.card_type == card_type)
        return self.fields[player].count_of(card_type) + picked

    def can_use_chopsticks(self, player: int) -> bool:
        return (
            self.fields[player].contains(SushiCard.CHOPSTICKS)
            and not self.chopsticks_activated[player]
            and not self.picks[player]
            and len(self.hands[player]) >= 2
        )

    def maki_count(self, player: int) -> int:
        return sum(MAKI_ICONS.get(c.card_type, 0) for c in self.fields[player])

    def pudding_count(self, player: int) -> int:
        return self.fields[player].count_of(SushiCard.PUDDING)

    def hands_empty(self) -> bool:
        return all(hand.is_empty for hand in self.hands)
