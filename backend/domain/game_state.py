"""
GameState entity - a snapshot of the game at a point in time.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .grid import Cell


@dataclass(frozen=True)
class GameState:
    """
    An immutable snapshot of the game after a tick.

    Attributes:
        width, height: board dimensions
        snake: cells from head (index 0) to tail
        food: the food cell, or (-1, -1) while a placement is deferred
        direction: the committed direction
        pending_direction: buffered direction awaiting the next tick, if any
        score: snake length minus its initial length
        level: current difficulty level (1-based)
        tick_interval_ms: period of the tick timer for this level
        game_over: True once the snake hit a wall or itself
        tick_count: number of ticks that moved the snake
        death_reason: 'wall' or 'self' once the game is over
    """

    width: int
    height: int
    snake: Tuple[Cell, ...]
    food: Cell
    direction: str
    pending_direction: Optional[str]
    score: int
    level: int
    tick_interval_ms: int
    game_over: bool
    tick_count: int = 0
    death_reason: Optional[str] = None

    @property
    def head(self) -> Cell:
        return self.snake[0]

    @property
    def length(self) -> int:
        return len(self.snake)

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        H = snake head
        S = snake body
        Row 0 is printed first, x-axis labels at the bottom.
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        fx, fy = self.food
        if 0 <= fx < self.width and 0 <= fy < self.height:
            board[fy][fx] = 'F'

        for pos_idx, (x, y) in enumerate(self.snake):
            board[y][x] = 'H' if pos_idx == 0 else 'S'

        result = []
        for y in range(self.height):
            result.append(f"{y:2d} {' '.join(board[y])}")

        result.append("   " + " ".join(str(i % 10) for i in range(self.width)))

        return "\n".join(result)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly representation for renderers and logs."""
        return {
            "width": self.width,
            "height": self.height,
            "snake": [list(cell) for cell in self.snake],
            "food": list(self.food),
            "direction": self.direction,
            "pending_direction": self.pending_direction,
            "score": self.score,
            "level": self.level,
            "tick_interval_ms": self.tick_interval_ms,
            "game_over": self.game_over,
            "tick_count": self.tick_count,
            "death_reason": self.death_reason,
        }

    def __repr__(self):
        return (
            f"<GameState tick={self.tick_count}, head={self.head}, food={self.food}, "
            f"score={self.score}, level={self.level}, game_over={self.game_over}>"
        )
