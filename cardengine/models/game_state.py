"""Game state models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .card import Card
from .deck import Deck, DeckType
from .player import Player
from .team import Team


class GameStatus(str, Enum):
    """Externally observable phase of a game."""

    ACTIVE = "active"
    ROUND_OVER = "round_over"
    GAME_OVER = "game_over"

    @property
    def is_terminal(self) -> bool:
        return self != GameStatus.ACTIVE


def _empty_deck() -> Deck:
    return Deck(DeckType.EMPTY)


class GameState(BaseModel):
    """Overall game state.

    Owns the draw pile, the discard pile and the players. The player
    list is fixed once the state is built.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    draw_pile: Deck
    discard_pile: Deck = Field(default_factory=_empty_deck)
    players: list[Player]
    teams: list[Team] = Field(default_factory=list)
    turn: int = 0  # Index of the player whose turn it is

    @model_validator(mode="after")
    def check_invariants(self) -> "GameState":
        if not self.players:
            raise ValueError("A game needs at least one player")
        if not 0 <= self.turn < len(self.players):
            raise ValueError(
                f"Turn {self.turn} out of range for {len(self.players)} players"
            )
        seated: set[int] = set()
        for team in self.teams:
            for index in team.members:
                if index >= len(self.players):
                    raise ValueError(
                        f"Team {team.name} references missing player {index}"
                    )
                if index in seated:
                    raise ValueError(f"Player {index} is in more than one team")
                seated.add(index)
        return self

    @property
    def current_player(self) -> Player:
        """Player whose turn it is."""
        return self.players[self.turn]

    def advance_turn(self) -> None:
        """Pass the turn to the next player.

        Raises:
            RuntimeError: If the state has no players.
        """
        if not self.players:
            raise RuntimeError("Cannot advance turn without players")
        self.turn = (self.turn + 1) % len(self.players)

    def discard_top(self) -> Card | None:
        """Most recently discarded card, or None."""
        return self.discard_pile.peek_discard()

    def team_members(self, team: Team) -> tuple[Player, Player]:
        """Resolve a team to its two players."""
        a, b = team.members
        return self.players[a], self.players[b]

    def team_of(self, player_index: int) -> Team | None:
        """Get the team a player belongs to, if any."""
        for team in self.teams:
            if player_index in team:
                return team
        return None

    def card_count(self) -> int:
        """Total number of cards across all piles and hands."""
        piles = (self.draw_pile, self.discard_pile)
        return (
            sum(len(p) + len(p.discards) for p in piles)
            + sum(p.hand_count() for p in self.players)
        )

    def __str__(self) -> str:
        return (
            f"Turn: {self.current_player.name} | "
            f"Draw: {len(self.draw_pile)} | "
            f"Discard top: {self.discard_top() or '-'}"
        )
