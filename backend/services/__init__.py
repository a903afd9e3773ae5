"""
Runtime services around the engine: the tick timer and the game session.
"""

from .tick_scheduler import TickScheduler
from .game_session import GameSession

__all__ = [
    'TickScheduler',
    'GameSession',
]
