"""
Random food placement with a bounded retry budget.
"""

import logging
import random
from typing import Collection, Optional

from domain.constants import FALLBACK_DEFERRED, FALLBACK_SCAN, MAX_FOOD_ATTEMPTS
from domain.grid import Cell, Grid, OFF_GRID


logger = logging.getLogger(__name__)


class RandomPlacer:
    """
    Draws random free cells for food.

    Once `max_attempts` draws all land on occupied cells, the fallback mode
    decides what happens:
      - 'scan': choose uniformly among the free cells found by a full scan
      - 'deferred': return OFF_GRID and re-roll (without an occupancy check)
        on the next call to take_deferred()
    """

    def __init__(
        self,
        max_attempts: int = MAX_FOOD_ATTEMPTS,
        fallback: str = FALLBACK_SCAN,
        rng: Optional[random.Random] = None,
    ):
        self.max_attempts = max_attempts
        self.fallback = fallback
        self.rng = rng or random.Random()
        self.deferred_pending = False

    def _draw(self, grid: Grid) -> Cell:
        return (
            self.rng.randint(0, grid.width - 1),
            self.rng.randint(0, grid.height - 1),
        )

    def place(self, occupied: Collection[Cell], grid: Grid) -> Cell:
        """Return a cell within `grid` not in `occupied` (best effort)."""
        occupied = set(occupied)
        self.deferred_pending = False

        for attempt in range(self.max_attempts):
            cell = self._draw(grid)
            if cell not in occupied:
                logger.debug("Placed food at %s after %s draw(s)", cell, attempt + 1)
                return cell

        logger.warning(
            "Food placement exhausted %s attempts (%s of %s cells occupied); using %s fallback.",
            self.max_attempts, len(occupied), grid.cell_count, self.fallback,
        )

        if self.fallback == FALLBACK_DEFERRED:
            self.deferred_pending = True
            return OFF_GRID

        free_cells = [cell for cell in grid.cells() if cell not in occupied]
        if not free_cells:
            logger.warning("Board is full; no cell left for food.")
            return OFF_GRID
        return self.rng.choice(free_cells)

    def take_deferred(self, grid: Grid) -> Optional[Cell]:
        """
        Apply a pending deferred re-roll.

        Returns:
            The re-rolled cell, or None if no re-roll was pending
        """
        if not self.deferred_pending:
            return None
        self.deferred_pending = False
        cell = self._draw(grid)
        logger.info("Deferred food re-roll placed food at %s", cell)
        return cell
