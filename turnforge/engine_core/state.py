"""
Game State - Generic state container that can be specialized per game.

Design principles:
- Mutable in place: next() applies an action to the state it is given
- Cloneable: clone() gives an independent copy for speculative callers
- Game-agnostic: Dominion and Sushi Go states inherit from this

Phase, current player, counters and per-player resources live in the
TurnOrder, which is the only component allowed to change them.
"""

from __future__ import annotations
import random
from copy import deepcopy
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator

from .action_stack import ActionStack
from .triggers import TriggerRegistry
from .turn_order import TurnOrder


class GameResult(Enum):
    """Per-player outcome."""
    ONGOING = "ongoing"
    WIN = "win"
    LOSE = "lose"
    DRAW = "draw"


class VisibilityMode(Enum):
    """Who may look at the cards in a zone."""
    VISIBLE_TO_OWNER = "visible_to_owner"
    VISIBLE_TO_ALL = "visible_to_all"
    HIDDEN_TO_ALL = "hidden_to_all"


@dataclass(frozen=True, eq=False)
class Card:
    """
    A card instance in the game.

    Note: This is a runtime instance, not the definition.
    The definition lives in the game's card catalog, keyed by card_type.
    """
    card_type: Enum
    instance_id: int

    def __hash__(self):
        return hash(self.instance_id)

    def __eq__(self, other):
        if not isinstance(other, Card):
            return False
        return self.instance_id == other.instance_id


@dataclass
class Zone:
    """
    An ordered collection of cards.

    Can represent: hand, draw pile, discard pile, play area, supply pile.
    Index 0 is the top of the zone.
    """
    name: str
    owner: int | None = None
    visibility: VisibilityMode = VisibilityMode.VISIBLE_TO_ALL
    cards: list[Card] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    @property
    def count(self) -> int:
        return len(self.cards)

    @property
    def is_empty(self) -> bool:
        return len(self.cards) == 0

    def size(self) -> int:
        return len(self.cards)

    def get(self, index: int) -> Card:
        return self.cards[index]

    def append(self, card: Card) -> None:
        self.cards.append(card)

    def extend(self, cards: list[Card]) -> None:
        self.cards.extend(cards)

    def remove(self, card: Card) -> None:
        """Remove this exact card instance. Raises ValueError if absent."""
        for i, c in enumerate(self.cards):
            if c.instance_id == card.instance_id:
                del self.cards[i]
                return
        raise ValueError(f"Card {card.instance_id} not in zone {self.name}")

    def draw(self) -> Card | None:
        """Remove and return the top card, or None if empty."""
        if not self.cards:
            return None
        return self.cards.pop(0)

    def clear(self) -> list[Card]:
        """Remove and return all cards."""
        removed, self.cards = self.cards, []
        return removed

    def shuffle(self, rng: random.Random) -> None:
        rng.shuffle(self.cards)

    def copy(self) -> Zone:
        """Independent copy: changing the copy never changes this zone."""
        return Zone(name=self.name, owner=self.owner, visibility=self.visibility, cards=list(self.cards))

    def count_of(self, card_type: Enum) -> int:
        return sum(1 for c in self.cards if c.card_type == card_type)

    def contains(self, card_type: Enum) -> bool:
        """Check if zone contains a card of the given type."""
        return any(c.card_type == card_type for c in self.cards)

    def first_of(self, card_type: Enum) -> Card | None:
        for c in self.cards:
            if c.card_type == card_type:
                return c
        return None


@dataclass
class GameState:
    """
    Complete state of one match.

    This is the canonical state that the forward model operates on.
    """
    game_id: str
    player_count: int
    params: Any  # GameParameters subclass
    turn_order: TurnOrder

    random_seed: int = 0
    rng: random.Random = field(default_factory=random.Random)

    scores: list[int] = field(default_factory=list)
    results: list[GameResult] = field(default_factory=list)

    # Extended action and deferred effect resolution
    action_stack: ActionStack = field(default_factory=ActionStack)
    triggers: TriggerRegistry = field(default_factory=TriggerRegistry)

    # History (for replay, logging)
    action_history: list[Any] = field(default_factory=list)

    # Used to mint unique Card.instance_id values
    next_instance_id: int = 0

    def __post_init__(self):
        if not self.scores:
            self.scores = [0] * self.player_count
        if not self.results:
            self.results = [GameResult.ONGOING] * self.player_count

    @property
    def phase(self) -> Enum:
        return self.turn_order.phase

    @property
    def current_player(self) -> int:
        return self.turn_order.current_player

    @property
    def round_counter(self) -> int:
        return self.turn_order.round_counter

    @property
    def turn_counter(self) -> int:
        return self.turn_order.turn_counter

    @property
    def is_terminal(self) -> bool:
        return any(r != GameResult.ONGOING for r in self.results)

    def game_score(self, player: int) -> int:
        """Current score of a player. Games with derived scores override this."""
        return self.scores[player]

    def add_score(self, player: int, amount: int) -> None:
        self.scores[player] += amount

    def new_card(self, card_type: Enum) -> Card:
        """Create a card instance with a fresh instance_id."""
        card = Card(card_type=card_type, instance_id=self.next_instance_id)
        self.next_instance_id += 1
        return card

    def clone(self) -> GameState:
        """Deep copy the state."""
        return deepcopy(self)
