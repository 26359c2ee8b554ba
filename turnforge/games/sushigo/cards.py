"""
Sushi Go Cards - Card types and their scoring groups.

Point values are not stored here: they come from SushiGoParameters so a
match can be played with a different scoring table.
"""

from __future__ import annotations
from enum import Enum


class SushiCard(Enum):
    MAKI_1 = "maki_1"
    MAKI_2 = "maki_2"
    MAKI_3 = "maki_3"
    TEMPURA = "tempura"
    SASHIMI = "sashimi"
    DUMPLING = "dumpling"
    SQUID_NIGIRI = "squid_nigiri"
    SALMON_NIGIRI = "salmon_nigiri"
    EGG_NIGIRI = "egg_nigiri"
    WASABI = "wasabi"
    CHOPSTICKS = "chopsticks"
    PUDDING = "pudding"


# Maki rolls shown on each maki card
MAKI_ICONS = {
    SushiCard.MAKI_1: 1,
    SushiCard.MAKI_2: 2,
    SushiCard.MAKI_3: 3,
}

NIGIRI = frozenset({SushiCard.SQUID_NIGIRI, SushiCard.SALMON_NIGIRI, SushiCard.EGG_NIGIRI})


def is_nigiri(card_type: SushiCard) -> bool:
    return card_type in NIGIRI
