"""Rule set interface and the reference draw-or-discard rules.

A rule set decides what a move does to a game state, when a round or
the whole game is over, and how the turn passes to the next player.
"""

import logging
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from cardengine.errors import DeckEmpty, InvalidMove
from cardengine.models.game_state import GameState, GameStatus

from .moves import Discard, Draw, Move

logger = logging.getLogger(__name__)

MoveT = TypeVar("MoveT")


class RuleSet(ABC, Generic[MoveT]):
    """Abstract base class for game rules.

    ``is_game_over`` and ``is_round_over`` must not modify the state;
    they may be called any number of times between moves.
    """

    @abstractmethod
    def handle_move(self, move: MoveT, state: GameState) -> GameStatus:
        """Apply a move to the state.

        Args:
            move: Move made by the current player
            state: Game state to mutate

        Returns:
            Status of the game after the move

        Raises:
            CardGameError: If the move cannot be applied. The state is
                left as it was before the call.
        """

    @abstractmethod
    def is_game_over(self, state: GameState) -> bool:
        """Check whether the game has ended."""

    @abstractmethod
    def is_round_over(self, state: GameState) -> bool:
        """Check whether the current round has ended."""

    def end_turn(self, state: GameState) -> None:
        """Pass the turn on. Override to skip players or reverse direction."""
        state.advance_turn()

    def status(self, state: GameState) -> GameStatus:
        """Get the status of the state, game over taking precedence."""
        if self.is_game_over(state):
            return GameStatus.GAME_OVER
        if self.is_round_over(state):
            return GameStatus.ROUND_OVER
        return GameStatus.ACTIVE


class DefaultRules(RuleSet[Move]):
    """Each turn the player draws a card or discards one.

    The round, and with it the game, ends as soon as any player has
    an empty hand.
    """

    def handle_move(self, move: Move, state: GameState) -> GameStatus:
        player = state.current_player

        if isinstance(move, Draw):
            card = state.draw_pile.draw_card()
            if card is None:
                raise DeckEmpty()
            player.add_card(card)
            logger.debug(f"{player.name} drew {card}")
        elif isinstance(move, Discard):
            card = player.play_card(move.index)
            state.discard_pile.discard_card(card)
            logger.debug(f"{player.name} discarded {card}")
        else:
            raise InvalidMove(f"Unknown move: {move!r}")

        return self.status(state)

    def is_game_over(self, state: GameState) -> bool:
        return self._any_hand_empty(state)

    def is_round_over(self, state: GameState) -> bool:
        return self._any_hand_empty(state)

    @staticmethod
    def _any_hand_empty(state: GameState) -> bool:
        return any(not p.hand for p in state.players)
