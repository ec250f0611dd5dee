"""Move types for the draw-or-discard game."""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class Draw:
    """Draw the top card of the draw pile."""

    def __str__(self) -> str:
        return "Draw"


@dataclass(frozen=True, slots=True)
class Discard:
    """Discard the card at a hand position."""

    index: int

    def __str__(self) -> str:
        return f"Discard #{self.index}"


Move = Union[Draw, Discard]
