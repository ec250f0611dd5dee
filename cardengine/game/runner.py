"""Game runner: plays a game to the end by asking strategies for moves."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from cardengine.errors import DeckEmpty, IndexOutOfRange, InvalidMove
from cardengine.models.game_state import GameState, GameStatus

from .engine import Game
from .moves import Move

if TYPE_CHECKING:
    from cardengine.logging import GameLogger
    from cardengine.strategy.base import Strategy

logger = logging.getLogger(__name__)

# Rejected moves tolerated from one player in a single turn
MAX_RETRIES = 10

RECOVERABLE_ERRORS = (DeckEmpty, IndexOutOfRange, InvalidMove)


class GameRunner:
    """Drives a Game: one move per turn, then the turn passes on."""

    def __init__(
        self,
        game: Game[Move],
        strategies: list[Strategy],
        game_logger: GameLogger | None = None,
    ):
        """Initialize runner.

        Args:
            game: Game to drive
            strategies: One strategy per seat
            game_logger: GameLogger instance for detailed logging
        """
        self.game = game
        self.strategies = strategies
        self.game_logger = game_logger
        self.turn_number = 0

        self._on_game_start: Callable[[GameState], None] | None = None
        self._on_move: Callable[[int, int, Move, GameStatus], None] | None = None
        self._on_game_end: Callable[[GameStatus, GameState], None] | None = None

    def set_callbacks(
        self,
        on_game_start: Callable[[GameState], None] | None = None,
        on_move: Callable[[int, int, Move, GameStatus], None] | None = None,
        on_game_end: Callable[[GameStatus, GameState], None] | None = None,
    ) -> None:
        """Set event callbacks.

        Args:
            on_game_start: Called once the cards are dealt (state)
            on_move: Called after each applied move
                (turn_number, player_index, move, status)
            on_game_end: Called when the game stops (status, state)
        """
        self._on_game_start = on_game_start
        self._on_move = on_move
        self._on_game_end = on_game_end

    def run(self, max_turns: int = 1000) -> GameStatus:
        """Play a new game.

        Args:
            max_turns: Stop after this many turns even if nobody has won

        Returns:
            Final status (ACTIVE if the turn limit was hit)
        """
        state = self.game.new_game()
        if len(self.strategies) != len(state.players):
            raise ValueError(
                f"Need {len(state.players)} strategies, got {len(self.strategies)}"
            )
        self.turn_number = 0

        if self.game_logger:
            self.game_logger.log_game_start(state)
        if self._on_game_start:
            self._on_game_start(state)

        status = self.game.status()
        while not status.is_terminal and self.turn_number < max_turns:
            self.turn_number += 1
            status = self._play_turn(state)
            if status.is_terminal:
                break

            next_player = self.game.end_turn()
            if self.game_logger:
                self.game_logger.log_turn_end(self.turn_number, next_player)

        if not status.is_terminal:
            logger.warning(f"Stopped after {self.turn_number} turns without a winner")
        else:
            logger.info(f"Game finished after {self.turn_number} turns: {status.value}")

        if self.game_logger:
            self.game_logger.log_game_end(self.turn_number, status, state)
        if self._on_game_end:
            self._on_game_end(status, state)

        return status

    def _play_turn(self, state: GameState) -> GameStatus:
        """Ask the current player for moves until one is accepted."""
        player_index = state.turn
        strategy = self.strategies[player_index]

        for _ in range(MAX_RETRIES):
            move = strategy.select_move(state)
            try:
                status = self.game.apply_move(move)
            except RECOVERABLE_ERRORS as e:
                logger.info(f"{state.current_player.name} cannot {move}: {e}")
                if self.game_logger:
                    self.game_logger.log_error(self.turn_number, player_index, move, e)
                strategy.notify_error(move, e)
                continue

            if self.game_logger:
                self.game_logger.log_move(
                    self.turn_number, player_index, move, status, state
                )
            if self._on_move:
                self._on_move(self.turn_number, player_index, move, status)
            return status

        raise RuntimeError(
            f"{state.current_player.name} made {MAX_RETRIES} rejected moves in a row"
        )
