"""
Domain entities for the grid snake engine.

This module contains the core game entities that are independent of
timers, input devices and rendering.
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES,
    DIRECTION_DELTAS, OPPOSITE_DIRECTIONS, INITIAL_DIRECTION,
)
from .grid import Cell, Grid, OFF_GRID, step
from .snake import Snake
from .game_state import GameState

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES',
    'DIRECTION_DELTAS', 'OPPOSITE_DIRECTIONS', 'INITIAL_DIRECTION',
    'Cell', 'Grid', 'OFF_GRID', 'step',
    'Snake',
    'GameState',
]
