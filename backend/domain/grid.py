"""
Grid bounds and cell addressing.
"""

from dataclasses import dataclass
from typing import Iterator, Tuple

from .constants import DIRECTION_DELTAS

Cell = Tuple[int, int]

# Placeholder used when food could not be placed on the board.
OFF_GRID: Cell = (-1, -1)


@dataclass(frozen=True)
class Grid:
    """Fixed board dimensions in cells."""

    width: int
    height: int

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Grid dimensions must be positive, got {self.width}x{self.height}."
            )

    @property
    def cell_count(self) -> int:
        return self.width * self.height

    @property
    def center(self) -> Cell:
        return (self.width // 2, self.height // 2)

    def contains(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def cells(self) -> Iterator[Cell]:
        """Yield every cell row by row."""
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)


def step(cell: Cell, direction: str) -> Cell:
    """Return the cell one unit away from `cell` in `direction`."""
    dx, dy = DIRECTION_DELTAS[direction]
    return (cell[0] + dx, cell[1] + dy)
