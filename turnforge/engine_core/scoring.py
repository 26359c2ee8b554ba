"""
Scoring - Round/game bonuses and winner resolution.

Majority/minority bonuses award a fixed point pool to the players tied
for the highest (or lowest) value of some counted attribute, split
evenly among the tie. Winner resolution breaks ties on total score with
a secondary metric and falls back to a draw between the remaining
players.

All functions are pure: they take per-player metrics and return
per-player values. The forward model applies them to the state.
"""

from __future__ import annotations
from typing import Sequence

from .state import GameResult


def split_evenly(pool: int, ways: int) -> int:
    """
    Each player's share of a pool split `ways` ways.

    Integer division truncated toward zero, so -6 split four ways is -1
    per player, mirroring 6 split four ways. The remainder is lost.
    """
    if ways <= 0:
        return 0
    share = abs(pool) // ways
    return share if pool >= 0 else -share


def tied_for(metrics: Sequence[int], value: int) -> list[int]:
    """Indices of players whose metric equals value."""
    return [i for i, m in enumerate(metrics) if m == value]


def majority_bonus(metrics: Sequence[int], most_value: int, second_value: int) -> list[int]:
    """
    Bonus for the most and second-most of a metric.

    The runner-up value is the highest value strictly below the maximum.
    A category whose metric value is zero awards nothing.
    """
    bonus = [0] * len(metrics)
    if not metrics:
        return bonus

    best = max(metrics)
    if best != 0:
        most_players = tied_for(metrics, best)
        share = split_evenly(most_value, len(most_players))
        for p in most_players:
            bonus[p] += share

    lower = [m for m in metrics if m < best]
    if lower:
        second = max(lower)
        if second != 0:
            second_players = tied_for(metrics, second)
            share = split_evenly(second_value, len(second_players))
            for p in second_players:
                bonus[p] += share

    return bonus


def minority_bonus(metrics: Sequence[int], most_value: int, least_value: int) -> list[int]:
    """
    Bonus for the most of a metric, penalty (or bonus) for the least.

    The least category is only awarded when best and worst differ: if
    everyone holds the same amount there is no minority.
    """
    bonus = [0] * len(metrics)
    if not metrics:
        return bonus

    best = max(metrics)
    worst = min(metrics)

    if best != 0:
        most_players = tied_for(metrics, best)
        share = split_evenly(most_value, len(most_players))
        for p in most_players:
            bonus[p] += share

    if best > worst:
        least_players = tied_for(metrics, worst)
        share = split_evenly(least_value, len(least_players))
        for p in least_players:
            bonus[p] += share

    return bonus


def resolve_winner(scores: Sequence[int], tie_break: Sequence[int]) -> list[GameResult]:
    """
    Assign WIN/LOSE/DRAW from final scores.

    1. A unique highest score wins; everyone else loses.
    2. Otherwise the tied players are compared on `tie_break`
       (higher is better). A unique best wins, everyone else loses.
    3. If that is still tied, those players draw and everyone else loses.
    """
    if len(scores) != len(tie_break):
        raise ValueError("scores and tie_break must have one entry per player")
    if not scores:
        return []

    leaders = tied_for(scores, max(scores))
    if len(leaders) > 1:
        best_tb = max(tie_break[p] for p in leaders)
        leaders = [p for p in leaders if tie_break[p] == best_tb]

    results = [GameResult.LOSE] * len(scores)
    outcome = GameResult.WIN if len(leaders) == 1 else GameResult.DRAW
    for p in leaders:
        results[p] = outcome
    return results
