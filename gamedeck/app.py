"""Application entry point: terminal menu that launches the three games."""

from __future__ import annotations

import argparse
import logging
import random
from pathlib import Path
from typing import List, Optional

from gamedeck.cli import ask_player_name, play_word_game, run_menu
from gamedeck.core.config import GameConfig, load_config
from gamedeck.core.number_game import NumberGame
from gamedeck.core.player import Player
from gamedeck.core.player_store import PlayerStore
from gamedeck.core.signs import load_signs
from gamedeck.core.statistics import SessionStatistics
from gamedeck.core.world import load_world
from gamedeck.ui.ladder_window import LadderWindow
from gamedeck.ui.number_window import NumberGameWindow
from gamedeck.ui.runner import ensure_application, run_until_closed

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool = False) -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def launch_word_game(config: GameConfig) -> None:
    world = load_world()
    play_word_game(world, config.scores_file, config.questions_per_game)


def launch_number_game(config: GameConfig, statistics: SessionStatistics) -> None:
    ensure_application()
    game = NumberGame(config.board_size, config.min_value, config.max_value, random.Random(), statistics)
    run_until_closed(NumberGameWindow(game))
    print(statistics.summary_message())


def launch_ladder(config: GameConfig, store: PlayerStore) -> None:
    name = ask_player_name()
    player = store.load(name)
    if player is None:
        if store.exists(name):
            print(f"Could not read the saved data for {name}; starting a new profile.")
        player = Player(name)
        store.save(player)
        print(f"Welcome, {player.name}! Letters {', '.join(player.unlocked_letters())} are unlocked.")
    else:
        print(f"Welcome back, {player.name}. {player.statistics()}")

    ensure_application()
    run_until_closed(LadderWindow(player, store, load_signs(), config))

    ranking = store.ranked()
    if ranking:
        print("Leaderboard:")
        for position, ranked in enumerate(ranking, start=1):
            print(f"  {position}. {ranked.name} - {ranked.total_mastery_percent():.1f}%")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Word game, number game and ASL Learning Ladder")
    parser.add_argument("--settings", type=Path, default=None, help="Path to a settings YAML file")
    parser.add_argument("--verbose", action="store_true", help="Log debug output to stderr")
    return parser.parse_args(argv)


def run(argv: Optional[List[str]] = None) -> None:
    """Load settings and run the menu until the user quits."""
    args = parse_args(argv)
    configure_logging(args.verbose)
    config = load_config(args.settings)
    logger.info("Storage directory: %s", config.storage_dir)

    statistics = SessionStatistics()
    store = PlayerStore(config.players_dir)
    run_menu(
        {
            "w": lambda: launch_word_game(config),
            "n": lambda: launch_number_game(config, statistics),
            "m": lambda: launch_ladder(config, store),
        }
    )


if __name__ == "__main__":
    run()
