"""
Registry of autopilot players.

Maps player keys (e.g. 'random', 'greedy') to player classes. To add a
player, create it in this package and add an entry to PLAYER_CLASSES.
"""

from typing import Dict, Optional, Type

from .base import Player
from .greedy_player import GreedyPlayer
from .random_player import RandomPlayer


PLAYER_CLASSES: Dict[str, Type[Player]] = {
    "random": RandomPlayer,
    "greedy": GreedyPlayer,
}

AVAILABLE_PLAYERS = list(PLAYER_CLASSES.keys())


def get_player_class(player_key: Optional[str] = None) -> Type[Player]:
    """
    Get the player class for a given key.

    Args:
        player_key: One of AVAILABLE_PLAYERS. If None or empty, returns 'greedy'.

    Raises:
        ValueError: If player_key is not recognized.
    """
    if not player_key or player_key.strip() == "":
        player_key = "greedy"

    player_key = player_key.strip().lower()

    if player_key not in PLAYER_CLASSES:
        available = ", ".join(AVAILABLE_PLAYERS)
        raise ValueError(
            f"Unknown player '{player_key}'. Available players: {available}"
        )

    return PLAYER_CLASSES[player_key]

