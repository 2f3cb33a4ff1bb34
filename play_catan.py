#!/usr/bin/env python3
"""
Minimal CLI for simulating Catan games.

Runs one game between four random agents, printing every build and pass
as it happens and writing the full event stream to a JSONL file.
"""

import argparse
import logging

from catan.config import PLAYERS_PER_GAME
from catan.event_log import EventType, GameEvent
from catan.game import create_game
from catan.player import Player
from catan.settings import SimulationSettings, load_settings
from catan.simulation import Simulation, SimulationResult
from game_logger import GameLogger

PLAYER_NAMES = ["Alice", "Bob", "Charlie", "Diana"]


def format_action(event: GameEvent) -> str:
    """Format an action event as `[round] / [Player id]: message`."""
    return f"[{event.round_number}] / [Player {event.player_id}]: {event.message}"


def print_round_summary(game):
    """Print every player's score and hand."""
    print(f"--- Round {game.current_round} summary ---")
    for player_id in game.player_order:
        player = game.players[player_id]
        print(f"  Player {player_id} ({player.name}): {player.victory_points} VP | {player.hand}")


def print_game_summary(game, result: SimulationResult):
    """Print final game summary."""
    print("\n" + "=" * 60)
    print("GAME OVER")
    print("=" * 60)

    if result.winner is not None:
        winner = game.players[result.winner]
        print(f"\nWinner: Player {winner.player_id} ({winner.name}) with {winner.victory_points} VP")
    else:
        print("\nNo winner: round limit reached")

    print("\nFinal Standings:")
    for rank, player in enumerate(result.standings, start=1):
        print(f"  {rank}. Player {player.player_id} ({player.name}): {player.victory_points} VP")

    print(f"\nTotal Rounds: {result.rounds_played}")


def simulate_game(
    turns: int = None,
    seed: int = None,
    config_file: str = None,
    log_file: str = None,
    verbose: bool = True,
    settings: SimulationSettings = None,
) -> SimulationResult:
    """
    Simulate a complete game of Catan.

    Args:
        turns: Turn budget; overrides the config file when given
        seed: Random seed for reproducibility
        config_file: Plain-text config file with a `turns:` line
        log_file: Path to JSONL log file (None = auto-generate)
        verbose: Whether to print actions and round summaries
        settings: Already loaded settings; the other options are ignored when given
    """
    if settings is None:
        settings = load_settings(config_file=config_file, turns=turns, seed=seed, log_file=log_file)

    players = [Player(i + 1, PLAYER_NAMES[i]) for i in range(PLAYERS_PER_GAME)]
    game = create_game(settings.to_game_config(), players)
    simulation = Simulation(game)

    logger = GameLogger(settings.log_file)
    logger.flush_engine_events(game)

    def on_event(event: GameEvent):
        if verbose and event.is_action:
            print(format_action(event))
        if event.event_type == EventType.ROUND_SUMMARY:
            if verbose:
                print_round_summary(game)
            logger.flush_engine_events(game)
            logger.log_round_snapshot(game)

    game.event_log.subscribe(on_event)

    if verbose:
        print(f"Starting game: {settings.turns} turns ({settings.max_rounds} rounds)")
        print(f"Seed: {settings.seed}")
        print(f"Logging to: {logger.log_file}")

    result = simulation.start_simulation()
    logger.flush_engine_events(game)

    if verbose:
        print_game_summary(game, result)
        print(f"\nGame logged to: {logger.log_file}")

    return result


def main():
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(description="Simulate a Catan game between four random agents")
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Config file with a 'turns: N' line (default: config.txt)",
    )
    parser.add_argument(
        "--turns",
        type=int,
        default=None,
        help="Turn budget, clamped to 1-8192; overrides the config file",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--quiet", action="store_true", help="Reduce output verbosity")
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Path to JSONL log file (default: auto-generated timestamp)",
    )

    args = parser.parse_args()

    settings = load_settings(config_file=args.config, turns=args.turns, seed=args.seed, log_file=args.log_file)
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    simulate_game(settings=settings, verbose=not args.quiet)


if __name__ == "__main__":
    main()
