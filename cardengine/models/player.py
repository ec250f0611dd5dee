"""Player model."""

from pydantic import BaseModel, Field, field_validator

from cardengine.errors import IndexOutOfRange

from .card import Card


class Player(BaseModel):
    """A named player holding a sorted hand."""

    name: str = "Player"
    hand: list[Card] = Field(default_factory=list)

    @field_validator("hand")
    @classmethod
    def sort_hand(cls, hand: list[Card]) -> list[Card]:
        return sorted(hand)

    def hand_count(self) -> int:
        """Get number of cards in hand."""
        return len(self.hand)

    def add_card(self, card: Card) -> None:
        """Add a card to the hand and re-sort it."""
        self.hand.append(card)
        self.hand.sort()

    def play_card(self, index: int) -> Card:
        """Remove and return the card at ``index``.

        Raises:
            IndexOutOfRange: If there is no card at that position.
        """
        if index < 0 or index >= len(self.hand):
            raise IndexOutOfRange(index, len(self.hand))
        return self.hand.pop(index)

    def take_hand(self) -> list[Card]:
        """Take the whole hand, leaving it empty."""
        hand, self.hand = self.hand, []
        return hand

    def __str__(self) -> str:
        return f"{self.name} ({len(self.hand)} cards)"
