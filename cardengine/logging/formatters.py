"""Formatters for game log output."""

from typing import Iterable

from cardengine.models.card import RANK_NAMES, Card, Suit
from cardengine.models.player import Player

# Suit codes for log output
SUIT_CODES: dict[Suit, str] = {
    Suit.SPADES: "S",
    Suit.CLUBS: "C",
    Suit.HEARTS: "H",
    Suit.DIAMONDS: "D",
    Suit.BLACK: "B",
    Suit.RED: "R",
}


def format_card(card: Card) -> str:
    """Format a single card to string.

    Args:
        card: Card to format.

    Returns:
        Formatted string (e.g., "S3" for the three of spades, "JoR" for
        the red joker).
    """
    if card.is_joker:
        return f"Jo{SUIT_CODES[card.suit]}"
    return f"{SUIT_CODES[card.suit]}{RANK_NAMES[card.rank]}"


def format_cards(cards: Iterable[Card]) -> str:
    """Format cards to a comma-separated string.

    Returns:
        Comma-separated card strings in the given order (e.g., "S8,H8").
        Empty string if no cards.
    """
    return ",".join(format_card(c) for c in cards)


def format_hands(players: list[Player]) -> dict[str, str]:
    """Format all players' hands to dict keyed by seat index (as string)."""
    return {str(i): format_cards(p.hand) for i, p in enumerate(players)}
