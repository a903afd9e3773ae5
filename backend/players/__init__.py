"""
Autopilot players.

Players feed directions into a session in place of a keyboard, which is
how the headless driver and the tests exercise the engine.
"""

from .base import Player
from .random_player import RandomPlayer
from .greedy_player import GreedyPlayer
from .registry import get_player_class, AVAILABLE_PLAYERS

__all__ = [
    'Player',
    'RandomPlayer',
    'GreedyPlayer',
    'get_player_class',
    'AVAILABLE_PLAYERS',
]
