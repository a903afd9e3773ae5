"""
Direction input buffering between ticks.
"""

import logging
from typing import Optional

from domain.constants import OPPOSITE_DIRECTIONS, VALID_MOVES


logger = logging.getLogger(__name__)


def validate_direction(direction: str) -> str:
    if direction not in VALID_MOVES:
        available = ", ".join(sorted(VALID_MOVES))
        raise ValueError(f"Unknown direction '{direction}'. Valid moves: {available}")
    return direction


class DirectionArbiter:
    """
    Holds at most one pending direction change for the next tick.

    Reversals are checked against the committed direction, not against a
    turn that is queued but not yet applied.
    """

    def __init__(self):
        self._pending: Optional[str] = None

    @property
    def pending(self) -> Optional[str]:
        return self._pending

    def submit(self, requested: str, committed: str) -> bool:
        """
        Buffer `requested` unless it reverses `committed`.

        Returns:
            True if the direction was buffered, False if it was dropped
        """
        validate_direction(requested)
        if OPPOSITE_DIRECTIONS[committed] == requested:
            logger.debug("Dropped reversal %s while moving %s", requested, committed)
            return False
        self._pending = requested
        return True

    def consume_pending(self) -> Optional[str]:
        """Return the buffered direction and clear the slot."""
        pending, self._pending = self._pending, None
        return pending

    def clear(self) -> None:
        self._pending = None
