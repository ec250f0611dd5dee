"""Shared fixtures."""

import random

import pytest

from cardengine.models.card import Card, Rank, Suit
from cardengine.models.deck import Deck
from cardengine.models.game_state import GameState
from cardengine.models.player import Player


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def ace_spades():
    return Card(rank=Rank.ACE, suit=Suit.SPADES)


@pytest.fixture
def king_hearts():
    return Card(rank=Rank.KING, suit=Suit.HEARTS)


@pytest.fixture
def make_state():
    """Factory for states with fixed hands and draw pile (top = last card)."""

    def _make(
        hands: list[list[Card]],
        draw: list[Card] | None = None,
        turn: int = 0,
    ) -> GameState:
        players = [Player(name=f"P{i}", hand=hand) for i, hand in enumerate(hands)]
        return GameState(
            draw_pile=Deck.from_cards(draw or []),
            players=players,
            turn=turn,
        )

    return _make
