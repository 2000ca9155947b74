"""
Headless tick driver for the grid snake engine.

Usage:
    python -m gridsnake
    python -m gridsnake --player random --level 3 --max-ticks 200 --seed 7
    python -m gridsnake --realtime --show-board
"""

import argparse
import json
import logging
import random
import time
from typing import Any, Dict, Optional

from gridsnake.config import load_settings
from gridsnake.domain.constants import GRID_SIZE
from gridsnake.engine.game_engine import initialize_game, queue_direction, update_game_state
from gridsnake.engine.level_catalog import LevelCatalog
from gridsnake.players import AVAILABLE_PLAYERS, get_player_class
from gridsnake.players.base import Player

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def run_simulation(
    player: Optional[Player] = None,
    level: int = 1,
    max_ticks: int = 500,
    realtime: bool = False,
    rng=None,
    show_board: bool = False,
    levels: Optional[LevelCatalog] = None,
    sleep=time.sleep,
) -> Dict[str, Any]:
    """
    Play one game until game over or `max_ticks` ticks.

    Each tick the player's direction is queued, then the engine advances.
    With `realtime` the driver sleeps `state.speed` milliseconds between
    ticks, so speed and slow food change the pace.

    Returns:
        A summary dict (score, level, ticks, length, is_game_over, speed).
    """
    if levels is None:
        levels = LevelCatalog(rng=rng)
    if player is None:
        player = get_player_class()(levels=levels, rng=rng)

    state = initialize_game(level, levels=levels)
    logger.info(f"Starting level {level} with {player.name} player")

    ticks = 0
    while not state.is_game_over and ticks < max_ticks:
        state = queue_direction(state, player.get_move(state))
        state = update_game_state(state, rng=rng, levels=levels)
        ticks += 1
        logger.debug(f"Tick {ticks}: {state!r}")

        if show_board:
            print("\n" + state.print_board(GRID_SIZE) + "\n")
        if realtime:
            sleep(state.speed / 1000)

    if state.is_game_over:
        logger.info(f"Game over after {ticks} ticks. Score: {state.score}, level: {state.level}")
    else:
        logger.info(f"Stopped after reaching max ticks ({max_ticks}). Score: {state.score}")

    return {
        "score": state.score,
        "level": state.level,
        "ticks": ticks,
        "length": len(state.snake),
        "is_game_over": state.is_game_over,
        "speed": state.speed,
    }


def main(argv=None):
    settings = load_settings()

    parser = argparse.ArgumentParser(
        description="Run a headless snake game driven by an auto-play policy.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--player", type=str, choices=AVAILABLE_PLAYERS, default=settings.player,
                        help="Direction policy to drive the snake")
    parser.add_argument("--level", type=int, default=settings.start_level,
                        help="Level to start on (1-based)")
    parser.add_argument("--max-ticks", type=int, default=settings.max_ticks,
                        help="Stop after this many ticks")
    parser.add_argument("--realtime", action="store_true", default=settings.realtime,
                        help="Sleep the current tick interval between ticks")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food and level generation")
    parser.add_argument("--show-board", action="store_true",
                        help="Print the board after every tick")
    parser.add_argument("--log-level", type=str, default=settings.log_level,
                        help="Logging level (DEBUG, INFO, WARNING, ...)")

    args = parser.parse_args(argv)

    if args.level < 1:
        parser.error("--level must be >= 1")

    # Defaults from SNAKE_* settings bypass argparse choices
    try:
        player_cls = get_player_class(args.player)
    except ValueError as e:
        parser.error(str(e))
    if args.log_level.upper() not in LOG_LEVELS:
        parser.error(f"Unknown log level '{args.log_level}'. Choose from: {', '.join(LOG_LEVELS)}")

    logging.basicConfig(
        level=args.log_level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    rng = random.Random(args.seed) if args.seed is not None else None
    levels = LevelCatalog(rng=rng)
    player = player_cls(levels=levels, rng=rng)

    result = run_simulation(
        player=player,
        level=args.level,
        max_ticks=args.max_ticks,
        realtime=args.realtime,
        rng=rng,
        show_board=args.show_board,
        levels=levels,
    )

    print("\nSimulation Result Summary:")
    print(json.dumps(result, indent=2))
    return result


if __name__ == "__main__":
    main()
