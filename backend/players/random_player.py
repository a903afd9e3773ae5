"""
Random player implementation - picks random safe moves.
"""

import random
from typing import Dict, List, Optional

from domain.constants import DIRECTION_DELTAS, OPPOSITE_DIRECTIONS, VALID_MOVES
from domain.game_state import GameState
from domain.grid import Cell
from .base import Player


def candidate_moves(game_state: GameState) -> Dict[str, Cell]:
    """Next head cell for every move except reversing into the neck."""
    head_x, head_y = game_state.head
    return {
        move: (head_x + dx, head_y + dy)
        for move, (dx, dy) in DIRECTION_DELTAS.items()
        if move != OPPOSITE_DIRECTIONS[game_state.direction]
    }


def is_safe(game_state: GameState, cell: Cell) -> bool:
    x, y = cell
    if x < 0 or x >= game_state.width or y < 0 or y >= game_state.height:
        return False
    # The tail moves away this tick unless the snake is eating.
    body = game_state.snake if cell == game_state.food else game_state.snake[:-1]
    return cell not in body


class RandomPlayer(Player):
    """
    A random AI that picks a valid direction that avoids walls and self-collisions.
    """

    name = "random"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def get_move(self, game_state: GameState) -> str:
        valid_moves: List[str] = [
            move for move, cell in candidate_moves(game_state).items()
            if is_safe(game_state, cell)
        ]

        # If no valid moves, just return a random move (we'll die anyway)
        if not valid_moves:
            return self.rng.choice(sorted(VALID_MOVES))

        return self.rng.choice(sorted(valid_moves))
