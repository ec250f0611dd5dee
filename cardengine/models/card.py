"""Card, Suit, and Rank models."""

from enum import IntEnum
from functools import total_ordering

from pydantic import BaseModel, model_validator


class Rank(IntEnum):
    """Card rank (Ace=1 through King=13, Joker=14)."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    JOKER = 14


class Suit(IntEnum):
    """Card suit. BLACK and RED are only used by jokers."""

    SPADES = 1
    CLUBS = 2
    HEARTS = 3
    DIAMONDS = 4
    BLACK = 5
    RED = 6


# Generator sets for a standard deck
STANDARD_RANKS: tuple[Rank, ...] = tuple(r for r in Rank if r != Rank.JOKER)
STANDARD_SUITS: tuple[Suit, ...] = (
    Suit.SPADES,
    Suit.CLUBS,
    Suit.HEARTS,
    Suit.DIAMONDS,
)
JOKER_SUITS: tuple[Suit, ...] = (Suit.BLACK, Suit.RED)

RANK_NAMES = {
    Rank.ACE: "A",
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.JOKER: "Joker",
}

SUIT_SYMBOLS = {
    Suit.SPADES: "♠",
    Suit.CLUBS: "♣",
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.BLACK: "Black",
    Suit.RED: "Red",
}


@total_ordering
class Card(BaseModel, frozen=True):
    """Single playing card.

    Cards are immutable and hashable. Ordering is by rank first,
    then by suit, which is the order hands are kept in.
    """

    rank: Rank
    suit: Suit

    @model_validator(mode="after")
    def check_joker_suit(self) -> "Card":
        if (self.rank == Rank.JOKER) != (self.suit in JOKER_SUITS):
            raise ValueError(
                f"{self.rank.name} cannot have suit {self.suit.name}"
            )
        return self

    @property
    def is_joker(self) -> bool:
        """Check if this card is a joker."""
        return self.rank == Rank.JOKER

    @property
    def sort_key(self) -> tuple[int, int]:
        return (self.rank, self.suit)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __str__(self) -> str:
        if self.is_joker:
            return f"Joker({SUIT_SYMBOLS[self.suit]})"
        return f"{RANK_NAMES[self.rank]}{SUIT_SYMBOLS[self.suit]}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"


def standard_cards(jokers: bool = False) -> list[Card]:
    """Create the cards of one physical deck, in suit-major order.

    Args:
        jokers: Whether to append the two jokers.

    Returns:
        52 cards, or 54 with jokers.
    """
    cards = [
        Card(rank=rank, suit=suit)
        for suit in STANDARD_SUITS
        for rank in STANDARD_RANKS
    ]
    if jokers:
        cards.extend(Card(rank=Rank.JOKER, suit=suit) for suit in JOKER_SUITS)
    return cards
