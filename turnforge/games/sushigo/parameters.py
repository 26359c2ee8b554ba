"""
Sushi Go Parameters - Deck composition, hand sizes and point values.
"""

from __future__ import annotations

from pydantic import field_validator, model_validator

from ...engine_core.config import GameParameters
from ...engine_core.errors import ConfigurationError
from .cards import SushiCard


class SushiGoParameters(GameParameters):
    """Numeric parameters for a Sushi Go match."""

    min_players: int = 2
    max_players: int = 5

    # Deck composition
    maki_3_cards: int = 8
    maki_2_cards: int = 12
    maki_1_cards: int = 6
    chopsticks_cards: int = 4
    tempura_cards: int = 14
    sashimi_cards: int = 14
    dumpling_cards: int = 14
    squid_nigiri_cards: int = 5
    salmon_nigiri_cards: int = 10
    egg_nigiri_cards: int = 5
    wasabi_cards: int = 6
    pudding_cards: int = 10

    # Cards dealt per round, keyed by player count
    hand_sizes: dict[int, int] = {2: 10, 3: 9, 4: 8, 5: 7}

    # Scoring
    maki_most: int = 6
    maki_second: int = 3
    tempura_pair: int = 5
    sashimi_set: int = 10
    dumpling_points: tuple[int, ...] = (1, 3, 6, 10, 15)
    squid_nigiri: int = 3
    salmon_nigiri: int = 2
    egg_nigiri: int = 1
    wasabi_multiplier: int = 3
    pudding_most: int = 6
    pudding_least: int = -6

    rounds: int = 3

    @field_validator("dumpling_points")
    @classmethod
    def check_dumplings(cls, points: tuple[int, ...]) -> tuple[int, ...]:
        if not points:
            raise ValueError("dumpling_points needs at least one entry")
        if any(b < a for a, b in zip(points, points[1:])):
            raise ValueError("dumpling_points must be non-decreasing")
        return points

    @field_validator("rounds")
    @classmethod
    def check_rounds(cls, value: int) -> int:
        if value < 1:
            raise ValueError("must be >= 1")
        return value

    @model_validator(mode="after")
    def check_hand_sizes(self) -> SushiGoParameters:
        for n in range(self.min_players, self.max_players + 1):
            if self.hand_sizes.get(n, 0) < 1:
                raise ValueError(f"hand_sizes has no entry for {n} players")
        return self

    def deck_composition(self) -> dict[SushiCard, int]:
        return {
            SushiCard.MAKI_3: self.maki_3_cards,
            SushiCard.MAKI_2: self.maki_2_cards,
            SushiCard.MAKI_1: self.maki_1_cards,
            SushiCard.CHOPSTICKS: self.chopsticks_cards,
            SushiCard.TEMPURA: self.tempura_cards,
            SushiCard.SASHIMI: self.sashimi_cards,
            SushiCard.DUMPLING: self.dumpling_cards,
            SushiCard.SQUID_NIGIRI: self.squid_nigiri_cards,
            SushiCard.SALMON_NIGIRI: self.salmon_nigiri_cards,
            SushiCard.EGG_NIGIRI: self.egg_nigiri_cards,
            SushiCard.WASABI: self.wasabi_cards,
            SushiCard.PUDDING: self.pudding_cards,
        }

    def nigiri_value(self, card_type: SushiCard) -> int:
        return {
            SushiCard.SQUID_NIGIRI: self.squid_nigiri,
            SushiCard.SALMON_NIGIRI: self.salmon_nigiri,
            SushiCard.EGG_NIGIRI: self.egg_nigiri,
        }[card_type]

    def hand_size(self, player_count: int) -> int:
        return self.hand_sizes[player_count]

    def validate_player_count(self, player_count: int) -> None:
        """Also checks the deck can deal every round for this many players."""
        super().validate_player_count(player_count)
        needed = self.hand_size(player_count) * player_count * self.rounds
        available = sum(self.deck_composition().values())
        if needed > available:
            raise ConfigurationError([
                f"deck has {available} cards, {player_count} players over "
                f"{self.rounds} rounds need {needed}"
            ])
