"""
Session Module - Runs matches between automated players.

A match is one play-through of a game:
- Set up from parameters and a seed
- Driven action by action through the forward model
- Summarised in a MatchRecord when it ends
"""

from .match import MatchRecord, play_match, DEFAULT_MAX_STEPS

__all__ = [
    "MatchRecord",
    "play_match",
    "DEFAULT_MAX_STEPS",
]
