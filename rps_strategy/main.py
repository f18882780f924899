"""CLI entry point for the Rock-Paper-Scissors strategy simulator."""

import argparse
import logging

from .engine import run_game, DEFAULT_ROUNDS, judge
from .hand import Hand
from .player import PlayerConfig
from .strategy import STRATEGY_CLASSES
from .tournament import default_entrants, head_to_head, round_robin
from .stats import (
    compute_standings,
    print_game_summary,
    print_hand_comparisons,
    print_player,
    print_standings,
)
from .export import export_json, export_csv

DEMO_PLAYERS = (
    PlayerConfig(name="Taro", strategy="Winning", seed=314, hand=Hand.ROCK),
    PlayerConfig(name="Hana", strategy="Probe", seed=15, hand=Hand.ROCK),
)


def list_strategies():
    """Print all available strategy names."""
    print("\nAvailable Strategies:")
    print("-" * 40)
    for i, cls in enumerate(STRATEGY_CLASSES, 1):
        print(f"  {i:>2d}. {cls.name}")
    print()


def cmd_demo(args):
    """Play the fixed demo game and print both players and the comparisons."""
    config_a, config_b = DEMO_PLAYERS
    player_a = config_a.build()
    player_b = config_b.build()
    print(f"\n🎲 Demo: {player_a.name} vs {player_b.name}  |  {args.rounds} rounds")
    run_game(player_a, player_b, rounds=args.rounds, record_rounds=False)
    print_player(player_a)
    print_player(player_b)
    print()
    print_hand_comparisons()
    print()


def cmd_game(args):
    """Play one or more games between two configured players."""
    config_a = PlayerConfig(name=args.name_a, strategy=args.strategy_a,
                            seed=args.seed_a, hand=Hand.parse(args.hand_a))
    config_b = PlayerConfig(name=args.name_b, strategy=args.strategy_b,
                            seed=args.seed_b, hand=Hand.parse(args.hand_b))
    print(f"\n⚔️  Game: {config_a.name} ({config_a.strategy}) vs "
          f"{config_b.name} ({config_b.strategy})  |  {args.rounds} rounds"
          + (f"  |  {args.games} games" if args.games > 1 else ""))

    results = head_to_head(config_a, config_b, rounds=args.rounds, games=args.games)
    for result in results:
        print_game_summary(result)

    if args.export and args.output:
        _export(args, results)


def cmd_tournament(args):
    """Run a round-robin over one entrant per strategy and starting hand."""
    entrants = default_entrants(seed=args.seed)
    total_games = len(entrants) * (len(entrants) - 1) // 2
    print(f"\n🏆 Round-Robin Tournament")
    print(f"  {len(entrants)} players  |  {total_games} games  |  {args.rounds} rounds each")
    print(f"  Running...", end="", flush=True)

    results = round_robin(entrants, rounds=args.rounds, parallel=not args.sequential)
    print(f" done! ({len(results)} games played)")

    print_standings(compute_standings(results))

    if args.export and args.output:
        _export(args, results)


def cmd_compare(args):
    """Judge two hands."""
    print(judge(Hand.parse(args.hand_a), Hand.parse(args.hand_b)))


def _export(args, results):
    """Handle export based on CLI args."""
    if args.export == "json":
        export_json(results, args.output)
    else:
        export_csv(results, args.output)


def _add_export_args(sub):
    sub.add_argument("--export", choices=["json", "csv"], help="Export format")
    sub.add_argument("--output", help="Export file path")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rps_strategy",
        description="🎮 Rock-Paper-Scissors Strategy Simulator",
    )
    parser.add_argument("--list", action="store_true", help="List all available strategies")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command")

    # demo
    demo = subparsers.add_parser("demo", help="Winning vs Probe demo game")
    demo.add_argument("--rounds", type=int, default=DEFAULT_ROUNDS,
                      help=f"Number of rounds (default: {DEFAULT_ROUNDS})")

    # game
    game = subparsers.add_parser("game", help="Player A vs Player B")
    game.add_argument("--name-a", default="Player A", help="Name of player A")
    game.add_argument("--name-b", default="Player B", help="Name of player B")
    game.add_argument("--strategy-a", default="Winning", help="Strategy of player A")
    game.add_argument("--strategy-b", default="Probe", help="Strategy of player B")
    game.add_argument("--seed-a", type=int, default=1, help="Strategy seed of player A")
    game.add_argument("--seed-b", type=int, default=2, help="Strategy seed of player B")
    game.add_argument("--hand-a", default="rock", help="Starting hand of player A")
    game.add_argument("--hand-b", default="rock", help="Starting hand of player B")
    game.add_argument("--rounds", type=int, default=DEFAULT_ROUNDS,
                      help=f"Number of rounds (default: {DEFAULT_ROUNDS})")
    game.add_argument("--games", type=int, default=1, help="Number of independent games")
    _add_export_args(game)

    # tournament
    trn = subparsers.add_parser("tournament", help="Round-robin over all strategies and hands")
    trn.add_argument("--rounds", type=int, default=DEFAULT_ROUNDS,
                     help=f"Number of rounds per game (default: {DEFAULT_ROUNDS})")
    trn.add_argument("--seed", type=int, default=0, help="Base seed for the entrants")
    trn.add_argument("--sequential", action="store_true", help="Do not use worker processes")
    _add_export_args(trn)

    # compare
    cmp_ = subparsers.add_parser("compare", help="Judge two hands")
    cmp_.add_argument("hand_a", help="First hand")
    cmp_.add_argument("hand_b", help="Second hand")

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )

    if args.list:
        list_strategies()
        return

    commands = {
        "demo": cmd_demo,
        "game": cmd_game,
        "tournament": cmd_tournament,
        "compare": cmd_compare,
    }
    command = commands.get(args.command)
    if command is None:
        parser.print_help()
        return

    try:
        command(args)
    except ValueError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()
