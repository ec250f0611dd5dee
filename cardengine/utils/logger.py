"""Logging utilities and game state display."""

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cardengine.game.moves import Move
    from cardengine.models.game_state import GameState, GameStatus


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


class GameDisplay:
    """Display game progress to stdout."""

    def __init__(self, show_hands: bool = False):
        """Initialize display.

        Args:
            show_hands: Whether to show player hands
        """
        self.show_hands = show_hands

    def print_separator(self) -> None:
        """Print a separator line."""
        print("=" * 60)

    def print_game_start(self, state: "GameState") -> None:
        """Print players and the opening table."""
        self.print_separator()
        print(f"NEW GAME: {len(state.players)} players")
        for team in state.teams:
            a, b = state.team_members(team)
            print(f"  {team.name}: {a.name} & {b.name}")
        print(f"Draw pile: {len(state.draw_pile)} | Discard top: {state.discard_top() or '-'}")
        self.print_separator()
        self.print_hands(state)

    def print_move(
        self,
        turn_number: int,
        state: "GameState",
        player_index: int,
        move: "Move",
    ) -> None:
        """Print a player's move."""
        player = state.players[player_index]
        print(f"Turn {turn_number}: {player.name} -> {move} ({player.hand_count()} cards left)")

    def print_hands(self, state: "GameState") -> None:
        """Print hands for all players (if show_hands is enabled)."""
        if not self.show_hands:
            return

        print("Hands:")
        for player in state.players:
            cards = " ".join(str(c) for c in player.hand)
            print(f"  {player.name}: [{cards}]")

    def print_game_end(self, status: "GameStatus", state: "GameState") -> None:
        """Print game end results."""
        self.print_separator()
        if not status.is_terminal:
            print("Game stopped at the turn limit")
        else:
            winners = [p.name for p in state.players if not p.hand]
            print(f"Game finished ({status.value}), winner: {', '.join(winners) or '-'}")
        for player in state.players:
            print(f"  {player.name}: {player.hand_count()} cards")
        self.print_separator()
