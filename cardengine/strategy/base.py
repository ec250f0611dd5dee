"""Base strategy class.

Defines the interface that all move choosers must implement.
"""

from abc import ABC, abstractmethod

from cardengine.game.moves import Move
from cardengine.models.game_state import GameState


class Strategy(ABC):
    """Abstract base class for move selection strategies."""

    name: str = "strategy"

    @abstractmethod
    def select_move(self, state: GameState) -> Move:
        """Choose a move for the player whose turn it is.

        Args:
            state: Current game state. Must not be modified.

        Returns:
            Move to apply
        """
        pass

    def notify_error(self, move: Move, error: Exception) -> None:
        """Called when the chosen move was rejected by the rules."""
        pass
