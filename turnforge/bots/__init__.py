"""
Bots module - Automated players.

Provides:
- BotPolicy: Interface for bot decision-making
- RandomPolicy, FirstLegalPolicy: Baseline policies
"""

from .policy import BotPolicy, BotDecision, RandomPolicy, FirstLegalPolicy

__all__ = [
    "BotPolicy",
    "BotDecision",
    "RandomPolicy",
    "FirstLegalPolicy",
]
