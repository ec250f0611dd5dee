"""Game orchestrator."""

import logging
from typing import Generic

from pydantic import ValidationError

from cardengine.errors import BuilderFailure, CardGameError, GameNotStarted
from cardengine.models.game_state import GameState, GameStatus

from .builder import GameBuilder
from .rules import MoveT, RuleSet

logger = logging.getLogger(__name__)


class Game(Generic[MoveT]):
    """Binds one builder and one rule set, and runs moves against the
    state the builder produced.

    Once the rule set reports the round or game as over, the state is
    frozen: further moves return the terminal status without touching it.
    """

    def __init__(self, builder: GameBuilder, rules: RuleSet[MoveT]):
        """Initialize game.

        Args:
            builder: Builder for the initial state
            rules: Rules applied to every move
        """
        self._builder = builder
        self._rules = rules
        self._state: GameState | None = None

    @property
    def builder(self) -> GameBuilder:
        return self._builder

    @property
    def rules(self) -> RuleSet[MoveT]:
        return self._rules

    @property
    def state(self) -> GameState:
        """Current game state.

        Raises:
            GameNotStarted: If new_game() has not been called.
        """
        if self._state is None:
            raise GameNotStarted()
        return self._state

    @property
    def started(self) -> bool:
        return self._state is not None

    def new_game(self) -> GameState:
        """Build a fresh state, replacing the current one.

        Raises:
            BuilderFailure: If the builder fails. The previous state,
                if any, is kept.
        """
        try:
            state = self._builder.initialize_game()
        except BuilderFailure:
            logger.error("Game setup failed", exc_info=True)
            raise
        except (CardGameError, ValidationError) as e:
            logger.error(f"Game setup failed: {e}")
            raise BuilderFailure(str(e)) from e

        self._state = state
        logger.info(
            f"New game: {len(state.players)} players, "
            f"{len(state.draw_pile)} cards in the draw pile"
        )
        return state

    def status(self) -> GameStatus:
        """Get the current status of the game."""
        return self._rules.status(self.state)

    def apply_move(self, move: MoveT) -> GameStatus:
        """Apply a move for the current player.

        Args:
            move: Move to apply

        Returns:
            Status after the move, or the terminal status unchanged if the
            round or game was already over.

        Raises:
            CardGameError: If the rule set rejects the move.
        """
        state = self.state

        if self._rules.is_game_over(state):
            logger.debug(f"Game over, ignoring {move}")
            return GameStatus.GAME_OVER
        if self._rules.is_round_over(state):
            logger.debug(f"Round over, ignoring {move}")
            return GameStatus.ROUND_OVER

        status = self._rules.handle_move(move, state)
        logger.debug(f"{state.current_player.name}: {move} -> {status.value}")
        if status.is_terminal:
            logger.info(f"{status.value} after {state.current_player.name} played {move}")
        return status

    def end_turn(self) -> int:
        """End the current player's turn.

        Returns:
            Index of the player whose turn it is now
        """
        state = self.state
        self._rules.end_turn(state)
        logger.debug(f"Turn passes to {state.current_player.name}")
        return state.turn
