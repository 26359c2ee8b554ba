"""
Dominion State - Game-specific state model.

Extends the generic GameState with per-player deck zones, the supply
and the trash, plus the computations the rules need (spendable coins,
victory points, end condition).
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator

from ...engine_core.state import Card, GameState, Zone
from .cards import CardType, get_card

# Resource counters held by the TurnOrder
ACTIONS = "actions"
BUYS = "buys"
COINS = "coins"  # coins from played action cards
SPENT = "spent"  # coins spent on purchases this turn

TURN_RESOURCES = {ACTIONS: 1, BUYS: 1, COINS: 0, SPENT: 0}


class DominionPhase(Enum):
    PLAY = "play"
    BUY = "buy"


@dataclass
class DominionGameState(GameState):
    """
    Dominion-specific game state.

    Adds:
    - Per-player hand, draw pile, discard pile and play area
    - Supply piles and trash
    - Deck-derived victory points
    """
    hands: list[Zone] = field(default_factory=list)
    draw_piles: list[Zone] = field(default_factory=list)
    discard_piles: list[Zone] = field(default_factory=list)
    tables: list[Zone] = field(default_factory=list)

    supply: dict[CardType, Zone] = field(default_factory=dict)
    trash: Zone = field(default_factory=lambda: Zone(name="trash"))

    turns_taken: list[int] = field(default_factory=list)

    # =========================================================================
    # Deck handling
    # =========================================================================

    def draw_cards(self, player: int, n: int) -> int:
        """
        Draw n cards into the player's hand.

        Shuffles the discard pile into the draw pile when it runs out.
        Returns the number of cards actually drawn.
        """
        drawn = 0
        for _ in range(n):
            draw_pile = self.draw_piles[player]
            if draw_pile.is_empty:
                discard = self.discard_piles[player]
                if discard.is_empty:
                    break
                draw_pile.extend(discard.clear())
                draw_pile.shuffle(self.rng)
            self.hands[player].append(draw_pile.draw())
            drawn += 1
        return drawn

    def gain(self, player: int, card_type: CardType, to_hand: bool = False) -> Card | None:
        """Move a card from its supply pile to the player's discard (or hand)."""
        pile = self.supply.get(card_type)
        if pile is None or pile.is_empty:
            return None
        card = pile.draw()
        if to_hand:
            self.hands[player].append(card)
        else:
            self.discard_piles[player].append(card)
        return card

    def discard_from_hand(self, player: int, card_type: CardType) -> Card:
        card = self._take_from_hand(player, card_type)
        self.discard_piles[player].append(card)
        return card

    def trash_from_hand(self, player: int, card_type: CardType) -> Card:
        card = self._take_from_hand(player, card_type)
        self.trash.append(card)
        return card

    def _take_from_hand(self, player: int, card_type: CardType) -> Card:
        card = self.hands[player].first_of(card_type)
        if card is None:
            raise ValueError(f"No {card_type.value} in player {player}'s hand")
        self.hands[player].remove(card)
        return card

    def cleanup(self, player: int) -> None:
        """Move hand and played cards to the discard pile."""
        self.discard_piles[player].extend(self.hands[player].clear())
        self.discard_piles[player].extend(self.tables[player].clear())

    # =========================================================================
    # Queries
    # =========================================================================

    def hand_types(self, player: int) -> list[CardType]:
        """Distinct card types in hand, in catalog order."""
        present = {c.card_type for c in self.hands[player]}
        return [t for t in CardType if t in present]

    def cards_owned(self, player: int) -> Iterator[Card]:
        for zone in (self.hands[player], self.draw_piles[player],
                     self.discard_piles[player], self.tables[player]):
            yield from zone

    def cards_owned_count(self, player: int) -> int:
        return sum(1 for _ in self.cards_owned(player))

    def treasure_in_hand(self, player: int) -> int:
        return sum(get_card(c.card_type).treasure for c in self.hands[player])

    def available_spend(self, player: int) -> int:
        order = self.turn_order
        return self.treasure_in_hand(player) + order.resource(player, COINS) - order.resource(player, SPENT)

    def actions_left(self, player: int) -> int:
        return self.turn_order.resource(player, ACTIONS)

    def buys_left(self, player: int) -> int:
        return self.turn_order.resource(player, BUYS)

    def is_protected(self, player: int) -> bool:
        """A Moat in hand makes the player unaffected by attacks."""
        return self.hands[player].contains(CardType.MOAT)

    def other_players(self, player: int) -> list[int]:
        """Opponents in turn order, starting to the player's left."""
        return [(player + i) % self.player_count for i in range(1, self.player_count)]

    def cards_to_buy(self) -> list[CardType]:
        """Supply piles that still have cards."""
        return [t for t, pile in self.supply.items() if not pile.is_empty]

    def empty_piles(self) -> int:
        return sum(1 for pile in self.supply.values() if pile.is_empty)

    def game_over(self) -> bool:
        province = self.supply.get(CardType.PROVINCE)
        if province is not None and province.is_empty:
            return True
        return self.empty_piles() >= self.params.empty_piles_to_end

    def game_score(self, player: int) -> int:
        """Victory points across every card the player owns."""
        return sum(get_card(c.card_type).victory_points(self, player) for c in self.cards_owned(player))
