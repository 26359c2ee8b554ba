"""
Turnforge CLI - Command-line interface for the engine.

Usage:
    turnforge simulate dominion --players 3 --games 10
    turnforge simulate sushigo --seed 7 --json
    turnforge games                 List available games
"""

import argparse
import json
import logging
import sys

from .bots import RandomPolicy
from .engine_core.errors import TurnforgeError
from .games import GAMES
from .session import play_match


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Turnforge - Turn-based card game engine",
        prog="turnforge",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Simulate command
    simulate_parser = subparsers.add_parser("simulate", help="Play matches between random bots")
    simulate_parser.add_argument("game", choices=sorted(GAMES), help="Game to play")
    simulate_parser.add_argument("--players", type=int, default=2, help="Number of players")
    simulate_parser.add_argument("--seed", type=int, default=0, help="Seed of the first match")
    simulate_parser.add_argument("--games", type=int, default=1, help="Number of matches")
    simulate_parser.add_argument("--json", action="store_true", help="One JSON record per line")
    simulate_parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    subparsers.add_parser("games", help="List available games")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if getattr(args, "verbose", False) else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    if args.command == "simulate":
        return cmd_simulate(args)
    elif args.command == "games":
        return cmd_games(args)
    else:
        parser.print_help()
        return 1


def cmd_simulate(args):
    """Play --games matches with consecutive seeds."""
    model = GAMES[args.game]()
    wins = [0] * args.players

    for i in range(args.games):
        seed = args.seed + i
        policies = [RandomPolicy(seed=seed * 100 + p) for p in range(args.players)]
        try:
            record = play_match(model, policies, seed=seed)
        except TurnforgeError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

        for p in record.winners:
            wins[p] += 1

        if args.json:
            print(json.dumps(record.model_dump(mode="json")))
        else:
            results = ", ".join(r.value for r in record.results)
            print(f"seed {seed}: scores {record.scores} ({results}) in {record.steps} steps")

    if not args.json and args.games > 1:
        print(f"\nWins per seat: {wins}")
    return 0


def cmd_games(args):
    """List available games."""
    for name, model_cls in sorted(GAMES.items()):
        params = model_cls.parameters_type()
        print(f"{name}: {params.min_players}-{params.max_players} players")
    return 0


if __name__ == "__main__":
    sys.exit(main())
