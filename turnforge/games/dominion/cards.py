"""
Dominion Cards - Static card definitions.

Each card has:
- Cost in coins
- Categories (Action, Treasure, Victory, Curse, Attack, Reaction)
- Flat bonuses applied when played (+Cards, +Actions, +Buys, +Coins)
- Coin value (treasures) and victory points

Cards whose play needs further decisions (Cellar, Militia, ...) get an
extended action from the frame table in frames.py; cards with other
on-play effects are handled in effects.py.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from .state import DominionGameState


class CardType(Enum):
    # Basic supply
    COPPER = "copper"
    SILVER = "silver"
    GOLD = "gold"
    ESTATE = "estate"
    DUCHY = "duchy"
    PROVINCE = "province"
    CURSE = "curse"

    # Kingdom cards
    CELLAR = "cellar"
    CHAPEL = "chapel"
    MOAT = "moat"
    MERCHANT = "merchant"
    VILLAGE = "village"
    WORKSHOP = "workshop"
    MILITIA = "militia"
    MONEYLENDER = "moneylender"
    REMODEL = "remodel"
    SMITHY = "smithy"
    THRONE_ROOM = "throne_room"
    GARDENS = "gardens"
    COUNCIL_ROOM = "council_room"
    FESTIVAL = "festival"
    LABORATORY = "laboratory"
    MARKET = "market"
    MINE = "mine"
    WITCH = "witch"


class Category(Enum):
    ACTION = "action"
    TREASURE = "treasure"
    VICTORY = "victory"
    CURSE = "curse"
    ATTACK = "attack"
    REACTION = "reaction"


@dataclass(frozen=True)
class DominionCard:
    """Static definition of a Dominion card."""
    card_type: CardType
    name: str
    cost: int
    categories: frozenset[Category]
    treasure: int = 0
    victory: int = 0
    plus_cards: int = 0
    plus_actions: int = 0
    plus_buys: int = 0
    plus_coins: int = 0

    # Victory points that depend on the owner's deck (Gardens)
    victory_fn: Callable[[DominionGameState, int], int] | None = None

    @property
    def is_action(self) -> bool:
        return Category.ACTION in self.categories

    @property
    def is_treasure(self) -> bool:
        return Category.TREASURE in self.categories

    @property
    def is_victory(self) -> bool:
        return Category.VICTORY in self.categories

    def victory_points(self, state: DominionGameState, player: int) -> int:
        if self.victory_fn is not None:
            return self.victory_fn(state, player)
        return self.victory


def _gardens_points(state: DominionGameState, player: int) -> int:
    """1 VP per 10 cards owned, rounded down."""
    return state.cards_owned_count(player) // 10


def _card(card_type: CardType, cost: int, *categories: Category, **kwargs) -> DominionCard:
    name = card_type.value.replace("_", " ").title()
    return DominionCard(card_type=card_type, name=name, cost=cost, categories=frozenset(categories), **kwargs)


A, T, V = Category.ACTION, Category.TREASURE, Category.VICTORY

CARDS: dict[CardType, DominionCard] = {
    c.card_type: c for c in [
        _card(CardType.COPPER, 0, T, treasure=1),
        _card(CardType.SILVER, 3, T, treasure=2),
        _card(CardType.GOLD, 6, T, treasure=3),
        _card(CardType.ESTATE, 2, V, victory=1),
        _card(CardType.DUCHY, 5, V, victory=3),
        _card(CardType.PROVINCE, 8, V, victory=6),
        _card(CardType.CURSE, 0, Category.CURSE, victory=-1),

        _card(CardType.CELLAR, 2, A, plus_actions=1),
        _card(CardType.CHAPEL, 2, A),
        _card(CardType.MOAT, 2, A, Category.REACTION, plus_cards=2),
        _card(CardType.MERCHANT, 3, A, plus_cards=1, plus_actions=1),
        _card(CardType.VILLAGE, 3, A, plus_cards=1, plus_actions=2),
        _card(CardType.WORKSHOP, 3, A),
        _card(CardType.MILITIA, 4, A, Category.ATTACK, plus_coins=2),
        _card(CardType.MONEYLENDER, 4, A),
        _card(CardType.REMODEL, 4, A),
        _card(CardType.SMITHY, 4, A, plus_cards=3),
        _card(CardType.THRONE_ROOM, 4, A),
        _card(CardType.GARDENS, 4, V, victory_fn=_gardens_points),
        _card(CardType.COUNCIL_ROOM, 5, A, plus_cards=4, plus_buys=1),
        _card(CardType.FESTIVAL, 5, A, plus_actions=2, plus_buys=1, plus_coins=2),
        _card(CardType.LABORATORY, 5, A, plus_cards=2, plus_actions=1),
        _card(CardType.MARKET, 5, A, plus_cards=1, plus_actions=1, plus_buys=1, plus_coins=1),
        _card(CardType.MINE, 5, A),
        _card(CardType.WITCH, 5, A, Category.ATTACK, plus_cards=2),
    ]
}

BASIC_CARDS = (
    CardType.COPPER,
    CardType.SILVER,
    CardType.GOLD,
    CardType.ESTATE,
    CardType.DUCHY,
    CardType.PROVINCE,
    CardType.CURSE,
)

KINGDOM_CARDS = tuple(t for t in CardType if t not in BASIC_CARDS)


def get_card(card_type: CardType) -> DominionCard:
    """Look up a card definition."""
    return CARDS[card_type]
