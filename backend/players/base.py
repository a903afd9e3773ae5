"""
Base player interface: an automatic source of direction inputs.
"""

from domain.game_state import GameState


class Player:
    """
    Base class/interface for autopilot logic.

    A player stands in for the keyboard: it looks at the latest snapshot
    and returns the direction to submit before the next tick.
    """

    name = "player"

    def get_move(self, game_state: GameState) -> str:
        """
        Return a move direction given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of: "UP", "DOWN", "LEFT", "RIGHT"
        """
        raise NotImplementedError
