"""
Classification of a candidate head position.
"""

from enum import Enum
from typing import Iterable, List, Sequence

from domain.grid import Cell, Grid


class Collision(str, Enum):
    WALL = "wall"
    SELF = "self"
    FREE = "free"


def body_to_check(body: Sequence[Cell], will_eat_food: bool) -> List[Cell]:
    """
    Cells the new head must not land on.

    The tail leaves its cell this tick unless the snake is eating, so it is
    only included when the snake grows.
    """
    cells = list(body)
    return cells if will_eat_food else cells[:-1]


class CollisionDetector:
    """Stateless wall/self collision checks."""

    @staticmethod
    def classify(head: Cell, body: Iterable[Cell], grid: Grid) -> Collision:
        if not grid.contains(head):
            return Collision.WALL
        if head in set(body):
            return Collision.SELF
        return Collision.FREE
