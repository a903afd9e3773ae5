"""
Snake entity for the game engine.
"""

from collections import deque
from typing import List, Tuple


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
    """

    def __init__(self, positions: List[Tuple[int, int]]):
        if not positions:
            raise ValueError("A snake needs at least one cell.")
        self.positions = deque(positions)

    @property
    def head(self) -> Tuple[int, int]:
        """Return the head position (first element)."""
        return self.positions[0]

    def __len__(self) -> int:
        return len(self.positions)

    def advance(self, new_head: Tuple[int, int], grow: bool) -> None:
        """Move the head to `new_head`; keep the tail only when growing."""
        self.positions.appendleft(new_head)
        if not grow:
            self.positions.pop()
