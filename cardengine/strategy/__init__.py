"""Move selection strategies."""

from cardengine.strategy.base import Strategy
from cardengine.strategy.human import HumanStrategy, parse_move
from cardengine.strategy.random_strategy import RandomStrategy

__all__ = ["Strategy", "HumanStrategy", "RandomStrategy", "parse_move"]
