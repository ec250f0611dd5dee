"""Game logic."""

from .builder import DefaultBuilder, GameBuilder
from .engine import Game
from .moves import Discard, Draw, Move
from .rules import DefaultRules, RuleSet
from .runner import GameRunner

__all__ = [
    "DefaultBuilder",
    "DefaultRules",
    "Discard",
    "Draw",
    "Game",
    "GameBuilder",
    "GameRunner",
    "Move",
    "RuleSet",
]
