"""Game logger for detailed game replay."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, TextIO

from cardengine.config import GameLogConfig
from cardengine.models.game_state import GameState, GameStatus

from .formatters import format_card, format_cards, format_hands


class GameLogger:
    """Logger for game events in JSONL format.

    Each line in the output file is a JSON object representing one event.
    This allows step-by-step replay of the game.
    """

    def __init__(self, config: GameLogConfig | None = None):
        """Initialize game logger.

        Args:
            config: Logging configuration. If None, logging is disabled.
        """
        self.config = config or GameLogConfig()
        self._file: TextIO | None = None

    def __enter__(self) -> "GameLogger":
        """Context manager entry."""
        if self.config.enabled and self.config.output_path:
            path = Path(self.config.output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(path, "a", encoding="utf-8")
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the log file."""
        if self._file:
            self._file.close()
            self._file = None

    def _write(self, event: dict[str, Any]) -> None:
        if self._file:
            self._file.write(json.dumps(event, ensure_ascii=False) + "\n")
            self._file.flush()

    @staticmethod
    def _piles(state: GameState) -> dict[str, Any]:
        top = state.discard_top()
        return {
            "draw_pile": len(state.draw_pile),
            "discard_pile": len(state.discard_pile.discards),
            "discard_top": format_card(top) if top else None,
        }

    def log_game_start(self, state: GameState) -> None:
        """Log game start with players, teams and initial hands."""
        self._write({
            "type": "game_start",
            "timestamp": datetime.now().isoformat(),
            "players": [p.name for p in state.players],
            "teams": {t.name: list(t.members) for t in state.teams},
            "hands": format_hands(state.players),
            "first_player": state.turn,
            **self._piles(state),
        })

    def log_move(
        self,
        turn_num: int,
        player_index: int,
        move: object,
        status: GameStatus,
        state: GameState,
    ) -> None:
        """Log an applied move.

        Args:
            turn_num: Turn number within the game.
            player_index: Seat index of the player who moved.
            move: The move applied.
            status: Status returned for the move.
            state: Game state after the move.
        """
        self._write({
            "type": "move",
            "turn": turn_num,
            "player": player_index,
            "move": str(move),
            "status": status.value,
            "hand": format_cards(state.players[player_index].hand),
            **self._piles(state),
        })

    def log_error(
        self,
        turn_num: int,
        player_index: int,
        move: object,
        error: Exception,
    ) -> None:
        """Log a move the rules rejected."""
        self._write({
            "type": "error",
            "turn": turn_num,
            "player": player_index,
            "move": str(move),
            "error": type(error).__name__,
            "message": str(error),
        })

    def log_turn_end(self, turn_num: int, next_player: int) -> None:
        """Log the turn passing to the next player."""
        self._write({
            "type": "turn_end",
            "turn": turn_num,
            "next_player": next_player,
        })

    def log_game_end(self, turn_num: int, status: GameStatus, state: GameState) -> None:
        """Log game end with final hands."""
        self._write({
            "type": "game_end",
            "turn": turn_num,
            "status": status.value,
            "hands": format_hands(state.players),
            **self._piles(state),
        })
