"""Deck model: a draw pile with its discard pile."""

import random
from enum import Enum
from typing import Iterable

from cardengine.errors import InvalidDrawCount

from .card import Card, standard_cards

# Number of pairwise swaps made by a swap shuffle
DEFAULT_SHUFFLE_SWAPS = 1000


class DeckType(Enum):
    """Composition of a new deck."""

    NORMAL = "normal"  # 52 cards
    WITH_JOKERS = "with_jokers"  # 52 cards + 2 jokers
    EMPTY = "empty"


class ShuffleMethod(str, Enum):
    """How a deck is shuffled."""

    SWAP = "swap"  # Repeated random pairwise swaps
    FISHER_YATES = "fisher_yates"  # Unbiased, via random.shuffle


class Deck:
    """Ordered draw pile plus a discard pile.

    The top of the draw pile is the end of the list. The top of the
    discard pile is the most recently discarded card. Cards taken out
    of either pile are removed from it.
    """

    def __init__(
        self,
        deck_type: DeckType = DeckType.NORMAL,
        rng: random.Random | None = None,
    ):
        """Initialize deck.

        Args:
            deck_type: Which cards the draw pile starts with.
            rng: Random source for shuffling (fresh instance if not provided).
        """
        self._rng = rng or random.Random()
        if deck_type == DeckType.EMPTY:
            self._cards: list[Card] = []
        else:
            self._cards = standard_cards(jokers=deck_type == DeckType.WITH_JOKERS)
        self._discards: list[Card] = []

    @classmethod
    def from_cards(
        cls,
        cards: Iterable[Card],
        rng: random.Random | None = None,
    ) -> "Deck":
        """Create a deck whose draw pile holds ``cards`` (last card on top)."""
        deck = cls(DeckType.EMPTY, rng=rng)
        deck._cards = list(cards)
        return deck

    @property
    def cards(self) -> tuple[Card, ...]:
        """Draw pile contents, bottom first."""
        return tuple(self._cards)

    @property
    def discards(self) -> tuple[Card, ...]:
        """Discard pile contents, oldest first."""
        return tuple(self._discards)

    def is_empty(self) -> bool:
        """Check if the draw pile is empty."""
        return not self._cards

    def extend(self, other: "Deck") -> None:
        """Move another deck's draw pile onto the top of this one.

        Raises:
            ValueError: If ``other`` is this deck.
        """
        if other is self:
            raise ValueError("Cannot extend a deck with itself")
        self._cards.extend(other._cards)
        other._cards = []

    def shuffle(
        self,
        method: ShuffleMethod = ShuffleMethod.SWAP,
        swaps: int = DEFAULT_SHUFFLE_SWAPS,
    ) -> None:
        """Shuffle the draw pile in place.

        The swap method picks two positions uniformly at random and
        swaps them, ``swaps`` times. It mixes the deck well enough for
        play but does not give a uniform permutation distribution; use
        ``ShuffleMethod.FISHER_YATES`` when that matters.

        Args:
            method: Shuffle procedure.
            swaps: Number of swaps for the swap method.
        """
        size = len(self._cards)
        if size < 2:
            return

        if method == ShuffleMethod.FISHER_YATES:
            self._rng.shuffle(self._cards)
            return

        for _ in range(swaps):
            a = self._rng.randrange(size)
            b = self._rng.randrange(size)
            self._cards[a], self._cards[b] = self._cards[b], self._cards[a]

    def draw_card(self) -> Card | None:
        """Draw the top card, or None if the draw pile is empty."""
        if not self._cards:
            return None
        return self._cards.pop()

    def draw_cards(self, amount: int) -> list[Card]:
        """Draw the top ``amount`` cards.

        Args:
            amount: Number of cards to draw.

        Returns:
            The drawn cards, in draw pile order.

        Raises:
            InvalidDrawCount: If amount is negative or larger than the
                draw pile. The deck is left unchanged.
        """
        if amount < 0 or amount > len(self._cards):
            raise InvalidDrawCount(amount, len(self._cards))
        if amount == 0:
            return []
        drawn = self._cards[-amount:]
        del self._cards[-amount:]
        return drawn

    def discard_card(self, card: Card) -> None:
        """Put a card on top of the discard pile."""
        self._discards.append(card)

    def peek_discard(self) -> Card | None:
        """Top card of the discard pile without removing it."""
        if not self._discards:
            return None
        return self._discards[-1]

    def pop_discard(self) -> Card | None:
        """Remove and return the top card of the discard pile."""
        if not self._discards:
            return None
        return self._discards.pop()

    def take_discard_pile(self) -> list[Card]:
        """Take the whole discard pile, leaving it empty."""
        taken, self._discards = self._discards, []
        return taken

    def __len__(self) -> int:
        return len(self._cards)

    def __str__(self) -> str:
        top = self.peek_discard()
        return f"Deck({len(self._cards)} cards, discard top: {top if top else '-'})"

    def __repr__(self) -> str:
        return f"Deck(cards={len(self._cards)}, discards={len(self._discards)})"
