"""Console strategy - asks a human for each move."""

from typing import Callable

from cardengine.game.moves import Discard, Draw, Move
from cardengine.models.game_state import GameState

from .base import Strategy


def parse_move(text: str) -> Move | None:
    """Parse a typed move.

    Accepts "draw" / "d" and "discard N" / "x N".

    Returns:
        Parsed move, or None if the text is not a move.
    """
    parts = text.strip().lower().split()
    if not parts:
        return None

    command = parts[0]
    if command in ("draw", "d") and len(parts) == 1:
        return Draw()
    if command in ("discard", "x") and len(parts) == 2:
        try:
            return Discard(int(parts[1]))
        except ValueError:
            return None
    return None


class HumanStrategy(Strategy):
    """Reads moves from the console."""

    name = "human"

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ):
        self.input_fn = input_fn
        self.output_fn = output_fn

    def select_move(self, state: GameState) -> Move:
        player = state.current_player
        self.output_fn(f"\n{player.name}, your hand:")
        for i, card in enumerate(player.hand):
            self.output_fn(f"  [{i}] {card}")
        self.output_fn(
            f"Draw pile: {len(state.draw_pile)} | Discard top: {state.discard_top() or '-'}"
        )

        while True:
            move = parse_move(self.input_fn("Move (draw | discard N): "))
            if move is not None:
                return move
            self.output_fn("Unrecognized move, try 'draw' or 'discard 0'")

    def notify_error(self, move: Move, error: Exception) -> None:
        self.output_fn(f"Cannot {move}: {error}")
