"""Generic engine for turn-based card games."""

from cardengine.errors import (
    BuilderFailure,
    CardGameError,
    DeckEmpty,
    GameNotStarted,
    IndexOutOfRange,
    InvalidDrawCount,
    InvalidMove,
)
from cardengine.game import (
    DefaultBuilder,
    DefaultRules,
    Discard,
    Draw,
    Game,
    GameBuilder,
    RuleSet,
)
from cardengine.models import Card, Deck, DeckType, GameState, GameStatus, Player, Rank, Suit

__all__ = [
    "BuilderFailure",
    "Card",
    "CardGameError",
    "Deck",
    "DeckEmpty",
    "DeckType",
    "DefaultBuilder",
    "DefaultRules",
    "Discard",
    "Draw",
    "Game",
    "GameBuilder",
    "GameNotStarted",
    "GameState",
    "GameStatus",
    "IndexOutOfRange",
    "InvalidDrawCount",
    "InvalidMove",
    "Player",
    "Rank",
    "RuleSet",
    "Suit",
]
