"""Tests for the deck model."""

import random
from collections import Counter

import pytest

from cardengine.errors import InvalidDrawCount
from cardengine.models.card import Card, Rank, Suit, standard_cards
from cardengine.models.deck import Deck, DeckType, ShuffleMethod


class TestDeckCreation:
    """Tests for deck composition."""

    def test_normal_deck(self):
        """Test that a normal deck holds 52 cards and no discards."""
        deck = Deck(DeckType.NORMAL)
        assert len(deck) == 52
        assert deck.discards == ()
        assert deck.peek_discard() is None

    def test_joker_deck(self):
        """Test that a joker deck holds 54 cards."""
        deck = Deck(DeckType.WITH_JOKERS)
        assert len(deck) == 54
        assert sum(c.is_joker for c in deck.cards) == 2

    def test_empty_deck(self):
        """Test that an empty deck is valid."""
        deck = Deck(DeckType.EMPTY)
        assert len(deck) == 0
        assert deck.is_empty()
        assert deck.draw_card() is None

    def test_from_cards(self, ace_spades, king_hearts):
        """Test building a deck from given cards, last card on top."""
        deck = Deck.from_cards([ace_spades, king_hearts])
        assert deck.cards == (ace_spades, king_hearts)
        assert deck.draw_card() == king_hearts


class TestDraw:
    """Tests for drawing cards."""

    def test_draw_card_takes_top(self):
        """Test that draw_card removes the top card."""
        deck = Deck(DeckType.NORMAL)
        top = deck.cards[-1]

        assert deck.draw_card() == top
        assert len(deck) == 51
        assert top not in deck.cards

    def test_draw_cards(self):
        """Test drawing several cards from the top."""
        deck = Deck(DeckType.NORMAL)
        expected = list(deck.cards[-5:])

        drawn = deck.draw_cards(5)

        assert drawn == expected
        assert len(deck) == 47
        assert not set(drawn) & set(deck.cards)

    def test_draw_zero_cards(self):
        """Test that drawing zero cards is a no-op."""
        deck = Deck(DeckType.NORMAL)
        assert deck.draw_cards(0) == []
        assert len(deck) == 52

    def test_draw_whole_deck(self):
        """Test drawing exactly the remaining cards."""
        deck = Deck(DeckType.WITH_JOKERS)
        assert len(deck.draw_cards(54)) == 54
        assert deck.is_empty()

    def test_draw_too_many_leaves_deck_unchanged(self):
        """Test that an oversized draw fails without touching the deck."""
        deck = Deck(DeckType.NORMAL)
        deck.draw_cards(50)
        before = deck.cards

        with pytest.raises(InvalidDrawCount) as exc_info:
            deck.draw_cards(3)

        assert exc_info.value.requested == 3
        assert exc_info.value.available == 2
        assert deck.cards == before

    def test_draw_negative_count(self):
        """Test that a negative draw is rejected."""
        deck = Deck(DeckType.NORMAL)
        with pytest.raises(InvalidDrawCount):
            deck.draw_cards(-1)
        assert len(deck) == 52


class TestDiscard:
    """Tests for the discard pile."""

    def test_discard_and_peek(self, ace_spades, king_hearts):
        """Test that peek returns the most recent discard."""
        deck = Deck(DeckType.EMPTY)
        deck.discard_card(ace_spades)
        deck.discard_card(king_hearts)

        assert deck.peek_discard() == king_hearts
        assert deck.discards == (ace_spades, king_hearts)

    def test_peek_does_not_remove(self, ace_spades):
        """Test that peeking leaves the pile alone."""
        deck = Deck(DeckType.EMPTY)
        deck.discard_card(ace_spades)

        deck.peek_discard()
        deck.peek_discard()

        assert len(deck.discards) == 1

    def test_pop_discard(self, ace_spades, king_hearts):
        """Test removing the top discard."""
        deck = Deck(DeckType.EMPTY)
        deck.discard_card(ace_spades)
        deck.discard_card(king_hearts)

        assert deck.pop_discard() == king_hearts
        assert deck.peek_discard() == ace_spades
        assert deck.pop_discard() == ace_spades
        assert deck.pop_discard() is None

    def test_take_discard_pile(self, ace_spades, king_hearts):
        """Test taking the whole pile leaves it empty."""
        deck = Deck(DeckType.EMPTY)
        deck.discard_card(ace_spades)
        deck.discard_card(king_hearts)

        taken = deck.take_discard_pile()

        assert taken == [ace_spades, king_hearts]
        assert deck.discards == ()
        deck.discard_card(ace_spades)
        assert taken == [ace_spades, king_hearts]


class TestExtend:
    """Tests for merging decks."""

    def test_extend_doubles_deck(self):
        """Test merging two joker decks."""
        deck = Deck(DeckType.WITH_JOKERS)
        other = Deck(DeckType.WITH_JOKERS)

        deck.extend(other)

        assert len(deck) == 108
        assert all(n == 2 for n in Counter(deck.cards).values())

    def test_extend_moves_cards(self):
        """Test that the merged deck gives up its cards."""
        deck = Deck(DeckType.EMPTY)
        other = Deck(DeckType.NORMAL)

        deck.extend(other)

        assert len(deck) == 52
        assert other.is_empty()

    def test_extend_with_itself(self):
        """Test that a deck cannot be merged into itself."""
        deck = Deck(DeckType.NORMAL)

        with pytest.raises(ValueError):
            deck.extend(deck)

        assert len(deck) == 52


class TestShuffle:
    """Tests for shuffling."""

    @pytest.mark.parametrize("method", list(ShuffleMethod))
    def test_shuffle_keeps_cards(self, method):
        """Test that shuffling only reorders cards."""
        deck = Deck(DeckType.WITH_JOKERS, rng=random.Random(7))
        deck.shuffle(method)

        assert sorted(deck.cards) == sorted(standard_cards(jokers=True))

    @pytest.mark.parametrize("method", list(ShuffleMethod))
    def test_shuffle_changes_order(self, method):
        """Test that a shuffled deck is not in factory order."""
        deck = Deck(DeckType.NORMAL, rng=random.Random(7))
        deck.shuffle(method)

        assert list(deck.cards) != standard_cards()

    def test_shuffle_is_reproducible(self):
        """Test that the same seed gives the same order."""
        deck1 = Deck(DeckType.NORMAL, rng=random.Random(42))
        deck2 = Deck(DeckType.NORMAL, rng=random.Random(42))

        deck1.shuffle()
        deck2.shuffle()

        assert deck1.cards == deck2.cards

    def test_zero_swaps(self):
        """Test that zero swaps leaves the order alone."""
        deck = Deck(DeckType.NORMAL)
        deck.shuffle(swaps=0)
        assert list(deck.cards) == standard_cards()

    def test_shuffle_tiny_decks(self):
        """Test shuffling empty and single-card decks."""
        empty = Deck(DeckType.EMPTY)
        empty.shuffle()
        assert empty.is_empty()

        single = Deck.from_cards([Card(rank=Rank.ACE, suit=Suit.SPADES)])
        single.shuffle()
        assert len(single) == 1


class TestConservation:
    """No card is created or lost by draws and discards."""

    def test_random_draws_and_discards(self):
        """Test card count across a random sequence of operations."""
        rng = random.Random(3)
        deck = Deck(DeckType.WITH_JOKERS, rng=rng)
        deck.shuffle()
        hand: list[Card] = []

        for _ in range(300):
            action = rng.choice(["draw", "draw_n", "discard", "pop"])
            if action == "draw":
                card = deck.draw_card()
                if card is not None:
                    hand.append(card)
            elif action == "draw_n":
                try:
                    hand.extend(deck.draw_cards(rng.randint(0, 4)))
                except InvalidDrawCount:
                    pass
            elif action == "discard" and hand:
                deck.discard_card(hand.pop(rng.randrange(len(hand))))
            elif action == "pop":
                card = deck.pop_discard()
                if card is not None:
                    hand.append(card)

            assert len(deck) + len(deck.discards) + len(hand) == 54

        assert sorted(list(deck.cards) + list(deck.discards) + hand) == sorted(
            standard_cards(jokers=True)
        )
