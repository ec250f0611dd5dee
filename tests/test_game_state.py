"""Tests for game state and team models."""

import pytest
from pydantic import ValidationError

from cardengine.models.card import Card, Rank, Suit
from cardengine.models.deck import Deck, DeckType
from cardengine.models.game_state import GameState, GameStatus
from cardengine.models.player import Player
from cardengine.models.team import Team


def players(n: int) -> list[Player]:
    return [Player(name=f"P{i}") for i in range(n)]


class TestGameState:
    """Tests for GameState class."""

    def test_defaults(self):
        """Test a new state starts at seat 0 with an empty discard pile."""
        state = GameState(draw_pile=Deck(DeckType.NORMAL), players=players(2))

        assert state.turn == 0
        assert state.discard_top() is None
        assert state.current_player is state.players[0]
        assert state.teams == []

    def test_players_kept_by_reference(self):
        """Test that the state holds the given player objects."""
        seats = players(2)
        state = GameState(draw_pile=Deck(DeckType.EMPTY), players=seats)

        assert state.players[0] is seats[0]

    def test_requires_players(self):
        """Test that a state without players is rejected."""
        with pytest.raises(ValidationError):
            GameState(draw_pile=Deck(DeckType.EMPTY), players=[])

    def test_turn_in_range(self):
        """Test that the turn must point at a player."""
        with pytest.raises(ValidationError):
            GameState(draw_pile=Deck(DeckType.EMPTY), players=players(2), turn=2)
        with pytest.raises(ValidationError):
            GameState(draw_pile=Deck(DeckType.EMPTY), players=players(2), turn=-1)

    @pytest.mark.parametrize("n", [1, 2, 3, 4])
    def test_advance_turn_rotation(self, n):
        """Test that n advances bring the turn back around."""
        state = GameState(draw_pile=Deck(DeckType.EMPTY), players=players(n))

        for _ in range(n):
            state.advance_turn()
            assert 0 <= state.turn < n

        assert state.turn == 0

    def test_advance_turn_wraps(self):
        """Test wrapping from the last seat."""
        state = GameState(draw_pile=Deck(DeckType.EMPTY), players=players(3), turn=2)
        state.advance_turn()
        assert state.turn == 0

    def test_advance_turn_without_players(self):
        """Test that advancing with no players is a programming error."""
        state = GameState.model_construct(
            draw_pile=Deck(DeckType.EMPTY), players=[], turn=0
        )
        with pytest.raises(RuntimeError):
            state.advance_turn()

    def test_card_count(self):
        """Test counting cards across piles and hands."""
        deck = Deck(DeckType.WITH_JOKERS)
        hand = deck.draw_cards(5)
        discard = Deck(DeckType.EMPTY)
        discard.discard_card(deck.draw_card())

        state = GameState(
            draw_pile=deck,
            discard_pile=discard,
            players=[Player(name="P0", hand=hand), Player(name="P1")],
        )

        assert state.card_count() == 54

    def test_discard_top(self):
        """Test that discard_top reads the discard pile."""
        card = Card(rank=Rank.FIVE, suit=Suit.CLUBS)
        state = GameState(draw_pile=Deck(DeckType.EMPTY), players=players(2))
        state.discard_pile.discard_card(card)

        assert state.discard_top() == card


class TestTeams:
    """Tests for Team and team resolution."""

    def test_team_members_resolve_to_players(self):
        """Test resolving a team through the player list."""
        seats = players(4)
        team = Team(name="North-South", members=(0, 2))
        state = GameState(draw_pile=Deck(DeckType.EMPTY), players=seats, teams=[team])

        a, b = state.team_members(team)

        assert a is seats[0]
        assert b is seats[2]
        assert state.team_of(2) == team
        assert state.team_of(1) is None

    def test_partner_of(self):
        """Test looking up a partner."""
        team = Team(name="T", members=(1, 3))
        assert team.partner_of(1) == 3
        assert team.partner_of(3) == 1
        with pytest.raises(ValueError):
            team.partner_of(0)

    def test_team_needs_two_players(self):
        """Test that a team cannot pair a player with themself."""
        with pytest.raises(ValidationError):
            Team(name="T", members=(1, 1))

    def test_team_indices_checked(self):
        """Test that teams must reference existing seats."""
        with pytest.raises(ValidationError):
            GameState(
                draw_pile=Deck(DeckType.EMPTY),
                players=players(2),
                teams=[Team(name="T", members=(0, 2))],
            )

    def test_player_in_one_team_only(self):
        """Test that a seat cannot belong to two teams."""
        with pytest.raises(ValidationError):
            GameState(
                draw_pile=Deck(DeckType.EMPTY),
                players=players(4),
                teams=[
                    Team(name="A", members=(0, 1)),
                    Team(name="B", members=(0, 2)),
                ],
            )


class TestGameStatus:
    """Tests for GameStatus."""

    def test_terminal(self):
        """Test which statuses are terminal."""
        assert not GameStatus.ACTIVE.is_terminal
        assert GameStatus.ROUND_OVER.is_terminal
        assert GameStatus.GAME_OVER.is_terminal
