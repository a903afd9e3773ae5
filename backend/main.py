"""
Headless driver for the grid snake engine.

An autopilot player stands in for the keyboard; the board can be printed
after every tick. With --realtime the game is paced by the tick timer,
otherwise ticks run back-to-back.
"""

import argparse
import json
import logging
import os
import random
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from config import GameConfig, load_config
from domain.constants import PLACEMENT_FALLBACKS
from domain.game_state import GameState
from game_engine import GameEngine, new_game, submit_direction, tick
from players import AVAILABLE_PLAYERS, Player, get_player_class
from services.game_session import GameSession


logger = logging.getLogger(__name__)

DEFAULT_MAX_TICKS = 5000


def summarize(engine: GameEngine) -> Dict[str, Any]:
    state = engine.state
    return {
        "score": state.score,
        "level": state.level,
        "length": state.length,
        "ticks": state.tick_count,
        "tick_interval_ms": state.tick_interval_ms,
        "game_over": state.game_over,
        "death_reason": state.death_reason,
    }


def _print_state(state: GameState) -> None:
    print(f"\nTick {state.tick_count} | score {state.score} | level {state.level} "
          f"| {state.tick_interval_ms}ms")
    print(state.print_board())


def run_simulation(
    engine: GameEngine,
    player: Player,
    max_ticks: int = DEFAULT_MAX_TICKS,
    show_board: bool = False,
) -> Dict[str, Any]:
    """
    Play one game back-to-back (no timer) until game over or `max_ticks`.

    Returns:
        A summary dict (score, level, ticks, death reason)
    """
    state = engine.state
    while not state.game_over and state.tick_count < max_ticks:
        submit_direction(engine, player.get_move(state))
        state = tick(engine)
        if show_board:
            _print_state(state)

    if not state.game_over:
        logger.info("Stopped after %s ticks without a game over", state.tick_count)
    return summarize(engine)


def run_realtime(
    engine: GameEngine,
    player: Player,
    max_ticks: int = DEFAULT_MAX_TICKS,
    show_board: bool = False,
) -> Dict[str, Any]:
    """Play one game paced by the tick timer."""
    session = GameSession(engine)

    def on_state(state: GameState) -> None:
        if show_board:
            _print_state(state)
        if not state.game_over:
            session.submit(player.get_move(state))

    session.subscribe(on_state)
    session.run(should_continue=lambda: engine.state.tick_count < max_ticks)
    session.stop()
    return summarize(engine)


def build_config(args: argparse.Namespace) -> GameConfig:
    return load_config().with_overrides(
        grid_width=args.width,
        grid_height=args.height,
        placement_fallback=args.placement_fallback,
    )


def parse_args(argv: Optional[list] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Run a headless grid snake game driven by an autopilot player."
    )
    parser.add_argument("--width", type=int, default=None,
                        help="Grid width in cells (default: SNAKE_GRID_WIDTH or 30)")
    parser.add_argument("--height", type=int, default=None,
                        help="Grid height in cells (default: SNAKE_GRID_HEIGHT or 30)")
    parser.add_argument("--player", choices=AVAILABLE_PLAYERS, default="greedy",
                        help="Autopilot that supplies direction inputs")
    parser.add_argument("--max-ticks", type=int, default=DEFAULT_MAX_TICKS,
                        help="Stop after this many ticks even if the snake is alive")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food placement and the player")
    parser.add_argument("--placement-fallback", choices=sorted(PLACEMENT_FALLBACKS), default=None,
                        help="What to do when random food placement runs out of attempts")
    parser.add_argument("--realtime", action="store_true",
                        help="Pace ticks with the tick timer instead of running back-to-back")
    parser.add_argument("--show-board", action="store_true",
                        help="Print the board after every tick")
    parser.add_argument("--log-level", default=os.getenv("SNAKE_LOG_LEVEL", "INFO"),
                        help="Logging level (default: SNAKE_LOG_LEVEL or INFO)")
    return parser.parse_args(argv)


def play(args: argparse.Namespace) -> Dict[str, Any]:
    """Run one game from parsed arguments and return its summary."""
    config = build_config(args)
    rng = random.Random(args.seed)
    engine = new_game(config.grid_width, config.grid_height, config=config, rng=rng)
    player = get_player_class(args.player)(rng=random.Random(args.seed))

    if args.realtime:
        return run_realtime(engine, player, args.max_ticks, args.show_board)
    return run_simulation(engine, player, args.max_ticks, args.show_board)


def main(argv: Optional[list] = None) -> None:
    load_dotenv()
    args = parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    result = play(args)

    print("\nGame Summary:")
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
