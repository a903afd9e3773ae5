"""
Greedy player - heads for the food along the shortest Manhattan distance.
"""

import random
from typing import Optional

from domain.game_state import GameState
from domain.grid import Cell
from .base import Player
from .random_player import candidate_moves, is_safe


def manhattan(a: Cell, b: Cell) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


class GreedyPlayer(Player):
    """Chooses the safe move closest to the food; ties are broken randomly."""

    name = "greedy"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def get_move(self, game_state: GameState) -> str:
        fx, fy = game_state.food
        if 0 <= fx < game_state.width and 0 <= fy < game_state.height:
            target = game_state.food
        else:
            # Food is off the board while a re-roll is pending.
            target = (game_state.width // 2, game_state.height // 2)

        scored = [
            (manhattan(cell, target), move)
            for move, cell in candidate_moves(game_state).items()
            if is_safe(game_state, cell)
        ]

        if not scored:
            # No safe moves, keep moving; the next tick ends the game
            return game_state.direction

        best_distance = min(distance for distance, _ in scored)
        best = sorted(move for distance, move in scored if distance == best_distance)
        return self.rng.choice(best)
