"""
Single-player grid snake engine.

GameEngine owns the authoritative state and advances it once per tick:
  1) apply a deferred food re-roll left over from the previous placement
  2) consume the buffered direction, if any
  3) compute the candidate head and whether it lands on food
  4) classify it against walls and the body (tail excluded unless eating)
  5) on a collision, end the game without applying the move
  6) otherwise move (or grow and relocate the food)
  7) recompute level and tick interval when the score changes the level

The engine knows nothing about timers or rendering; see
services.game_session for the driver.
"""

import logging
import random
from typing import Optional

from config import GameConfig
from domain.constants import INITIAL_DIRECTION, INITIAL_LENGTH
from domain.game_state import GameState
from domain.grid import Grid, step
from domain.snake import Snake
from mechanics import (
    Collision,
    CollisionDetector,
    DifficultyCurve,
    DirectionArbiter,
    RandomPlacer,
    body_to_check,
    validate_direction,
)


logger = logging.getLogger(__name__)

RUNNING = "RUNNING"
OVER = "OVER"


class GameEngine:
    """
    Manages:
      - Board (width, height)
      - Snake
      - Food
      - Committed and pending direction
      - Level and tick interval
    """

    def __init__(
        self,
        width: Optional[int] = None,
        height: Optional[int] = None,
        config: Optional[GameConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        self.config = config or GameConfig()
        self.grid = Grid(
            width if width is not None else self.config.grid_width,
            height if height is not None else self.config.grid_height,
        )
        self.rng = rng or random.Random()
        self.collisions = CollisionDetector()
        self._start()

    def _start(self):
        # Every field is rebuilt; nothing survives from a previous game.
        self.curve = DifficultyCurve(self.config)
        self.placer = RandomPlacer(
            max_attempts=self.config.max_placement_attempts,
            fallback=self.config.placement_fallback,
            rng=self.rng,
        )
        self.arbiter = DirectionArbiter()
        self.snake = Snake([self.grid.center])
        self.direction = INITIAL_DIRECTION
        self.food = self.placer.place(self.snake.positions, self.grid)
        self.level = 1
        self.tick_interval_ms = self.curve.interval_for(self.level)
        self.game_over = False
        self.death_reason: Optional[str] = None
        self.tick_count = 0
        self.state = self._snapshot()

        logger.info(
            "New game on %sx%s grid: head at %s, food at %s, interval %sms",
            self.grid.width, self.grid.height, self.snake.head, self.food, self.tick_interval_ms,
        )

    @property
    def status(self) -> str:
        return OVER if self.game_over else RUNNING

    @property
    def score(self) -> int:
        return len(self.snake) - INITIAL_LENGTH

    def _snapshot(self) -> GameState:
        return GameState(
            width=self.grid.width,
            height=self.grid.height,
            snake=tuple(self.snake.positions),
            food=self.food,
            direction=self.direction,
            pending_direction=self.arbiter.pending,
            score=self.score,
            level=self.level,
            tick_interval_ms=self.tick_interval_ms,
            game_over=self.game_over,
            tick_count=self.tick_count,
            death_reason=self.death_reason,
        )

    def submit_direction(self, direction: str) -> bool:
        """
        Buffer a direction change for the next tick.

        Returns:
            True if buffered, False if dropped (reversal or game over)
        """
        validate_direction(direction)
        if self.game_over:
            logger.debug("Ignoring direction %s: game is over", direction)
            return False
        accepted = self.arbiter.submit(direction, self.direction)
        if accepted:
            self.state = self._snapshot()
        return accepted

    def flush_deferred_placement(self) -> GameState:
        """Apply a deferred food re-roll now instead of on the next tick."""
        cell = self.placer.take_deferred(self.grid)
        if cell is not None:
            self.food = cell
            self.state = self._snapshot()
        return self.state

    def tick(self) -> GameState:
        """Advance the game by one cell. A no-op once the game is over."""
        if self.game_over:
            logger.debug("tick() ignored: game is over")
            return self.state

        deferred = self.placer.take_deferred(self.grid)
        if deferred is not None:
            self.food = deferred

        pending = self.arbiter.consume_pending()
        if pending is not None:
            self.direction = pending

        candidate = step(self.snake.head, self.direction)
        will_eat_food = candidate == self.food
        body = body_to_check(self.snake.positions, will_eat_food)

        collision = self.collisions.classify(candidate, body, self.grid)
        if collision is not Collision.FREE:
            self.game_over = True
            self.death_reason = collision.value
            logger.info(
                "Game over: %s collision moving %s into %s (score %s, level %s)",
                collision.value, self.direction, candidate, self.score, self.level,
            )
            self.state = self._snapshot()
            return self.state

        self.snake.advance(candidate, grow=will_eat_food)
        self.tick_count += 1

        if will_eat_food:
            self.food = self.placer.place(self.snake.positions, self.grid)
            new_level = self.curve.level_for(self.score)
            if new_level != self.level:
                self.level = new_level
                self.tick_interval_ms = self.curve.interval_for(new_level)
                logger.info(
                    "Reached level %s at score %s; tick interval now %sms",
                    self.level, self.score, self.tick_interval_ms,
                )

        self.state = self._snapshot()
        return self.state

    def reset(self, config: Optional[GameConfig] = None) -> GameState:
        """Start over with a brand new state, optionally with a new config."""
        if config is not None:
            self.config = config
        self._start()
        return self.state


# -------------------------------
# Module-level API
# -------------------------------

def new_game(
    grid_width: int,
    grid_height: int,
    config: Optional[GameConfig] = None,
    rng: Optional[random.Random] = None,
) -> GameEngine:
    """Create a running game; the initial snapshot is `engine.state`."""
    return GameEngine(grid_width, grid_height, config=config, rng=rng)


def submit_direction(engine: GameEngine, direction: str) -> None:
    engine.submit_direction(direction)


def tick(engine: GameEngine) -> GameState:
    return engine.tick()


def reset(engine: GameEngine, config: Optional[GameConfig] = None) -> GameState:
    return engine.reset(config)
