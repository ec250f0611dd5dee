"""Random strategy - picks uniformly among the legal moves."""

import random

from cardengine.game.moves import Discard, Draw, Move
from cardengine.models.game_state import GameState

from .base import Strategy


class RandomStrategy(Strategy):
    """Draws or discards at random.

    Never draws from an empty draw pile and never discards from an
    empty hand.
    """

    name = "random"

    def __init__(self, rng: random.Random | None = None, seed: int | None = None):
        self.rng = rng or random.Random(seed)

    def legal_moves(self, state: GameState) -> list[Move]:
        """All moves the draw-or-discard rules accept for the current player."""
        moves: list[Move] = []
        if not state.draw_pile.is_empty():
            moves.append(Draw())
        moves.extend(Discard(i) for i in range(state.current_player.hand_count()))
        return moves

    def select_move(self, state: GameState) -> Move:
        moves = self.legal_moves(state)
        if not moves:
            raise ValueError(f"{state.current_player.name} has no legal move")
        return self.rng.choice(moves)
