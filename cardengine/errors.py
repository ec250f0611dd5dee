"""Exceptions raised by the card game engine."""


class CardGameError(Exception):
    """Base class for all engine errors."""


class InvalidDrawCount(CardGameError):
    """More cards were requested than the draw pile holds."""

    def __init__(self, requested: int, available: int):
        self.requested = requested
        self.available = available
        super().__init__(
            f"Cannot draw {requested} cards, {available} remaining"
        )


class DeckEmpty(CardGameError):
    """A draw was attempted on an empty draw pile."""

    def __init__(self, message: str = "Draw pile is empty"):
        super().__init__(message)


class IndexOutOfRange(CardGameError, IndexError):
    """A move referenced a hand position that does not exist."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Hand index {index} out of range (hand size {size})")


class BuilderFailure(CardGameError):
    """Initial game setup failed."""


class InvalidMove(CardGameError):
    """The rule set does not understand the submitted move."""


class GameNotStarted(CardGameError):
    """The orchestrator was used before a game was created."""

    def __init__(self, message: str = "No game in progress, call new_game() first"):
        super().__init__(message)
