"""
Dominion Parameters - Supply sizes, starting deck and kingdom selection.
"""

from __future__ import annotations

from pydantic import field_validator

from ...engine_core.config import GameParameters
from .cards import CardType, KINGDOM_CARDS

FIRST_GAME = (
    CardType.CELLAR,
    CardType.MARKET,
    CardType.MERCHANT,
    CardType.MILITIA,
    CardType.MINE,
    CardType.MOAT,
    CardType.REMODEL,
    CardType.SMITHY,
    CardType.VILLAGE,
    CardType.WORKSHOP,
)

# Size Distortion, with second-edition replacements for removed cards
SIZE_DISTORTION = (
    CardType.CELLAR,
    CardType.CHAPEL,
    CardType.GARDENS,
    CardType.LABORATORY,
    CardType.VILLAGE,
    CardType.WITCH,
    CardType.WORKSHOP,
    CardType.FESTIVAL,
    CardType.MONEYLENDER,
    CardType.THRONE_ROOM,
)


class DominionParameters(GameParameters):
    """Numeric parameters for a Dominion match."""

    min_players: int = 2
    max_players: int = 4

    kingdom: tuple[CardType, ...] = FIRST_GAME

    hand_size: int = 5
    starting_coppers: int = 7
    starting_estates: int = 3

    kingdom_pile_size: int = 10
    victory_pile_two_players: int = 8
    victory_pile_more_players: int = 12
    curses_per_opponent: int = 10
    copper_supply: int = 60  # starting decks are taken from this
    silver_supply: int = 40
    gold_supply: int = 30

    empty_piles_to_end: int = 3

    @field_validator("kingdom")
    @classmethod
    def check_kingdom(cls, kingdom: tuple[CardType, ...]) -> tuple[CardType, ...]:
        if len(set(kingdom)) != len(kingdom):
            raise ValueError("kingdom cards must be distinct")
        for card_type in kingdom:
            if card_type not in KINGDOM_CARDS:
                raise ValueError(f"{card_type.value} is not a kingdom card")
        return kingdom

    @field_validator(
        "hand_size",
        "kingdom_pile_size",
        "victory_pile_two_players",
        "victory_pile_more_players",
        "empty_piles_to_end",
    )
    @classmethod
    def check_positive(cls, value: int) -> int:
        if value < 1:
            raise ValueError("must be >= 1")
        return value

    def victory_pile_size(self, player_count: int) -> int:
        if player_count <= 2:
            return self.victory_pile_two_players
        return self.victory_pile_more_players

    @classmethod
    def first_game(cls) -> DominionParameters:
        return cls(kingdom=FIRST_GAME)

    @classmethod
    def size_distortion(cls) -> DominionParameters:
        return cls(kingdom=SIZE_DISTORTION)
