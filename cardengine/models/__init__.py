"""Game models."""

from .card import Card, Rank, Suit, standard_cards
from .deck import Deck, DeckType, ShuffleMethod
from .game_state import GameState, GameStatus
from .player import Player
from .team import Team

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "standard_cards",
    "Deck",
    "DeckType",
    "ShuffleMethod",
    "Player",
    "Team",
    "GameState",
    "GameStatus",
]
