"""Game builders: produce the initial state of a game."""

import logging
import random
from abc import ABC, abstractmethod

from pydantic import ValidationError

from cardengine.config import DeckConfig, GameConfig
from cardengine.errors import BuilderFailure, CardGameError
from cardengine.models.deck import Deck, DeckType
from cardengine.models.game_state import GameState
from cardengine.models.player import Player
from cardengine.models.team import Team

logger = logging.getLogger(__name__)


class GameBuilder(ABC):
    """Abstract base class for game builders."""

    @abstractmethod
    def initialize_game(self) -> GameState:
        """Build a fresh, consistent game state.

        Raises:
            BuilderFailure: If the state cannot be built. No partially
                built state is returned.
        """


class DefaultBuilder(GameBuilder):
    """Shuffles the deck(s), deals a hand to each player and flips the
    top card of the stock onto the discard pile.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        deck_config: DeckConfig | None = None,
        rng: random.Random | None = None,
    ):
        """Initialize builder.

        Args:
            config: Game configuration (uses defaults if not provided)
            deck_config: Deck configuration (uses defaults if not provided)
            rng: Random source (seeded from config.seed if not provided)
        """
        self.config = config or GameConfig()
        self.deck_config = deck_config or DeckConfig()
        self.rng = rng or random.Random(self.config.seed)

    def initialize_game(self) -> GameState:
        try:
            return self._build()
        except BuilderFailure:
            raise
        except (CardGameError, ValidationError) as e:
            raise BuilderFailure(f"Game setup failed: {e}") from e

    def _build(self) -> GameState:
        deck = self._build_deck()

        players = [
            Player(name=f"Player {i + 1}", hand=deck.draw_cards(self.config.hand_size))
            for i in range(self.config.num_players)
        ]

        discard_pile = Deck(DeckType.EMPTY, rng=self.rng)
        if self.config.flip_discard:
            top_card = deck.draw_card()
            if top_card is not None:
                discard_pile.discard_card(top_card)

        state = GameState(
            draw_pile=deck,
            discard_pile=discard_pile,
            players=players,
            teams=self._build_teams(len(players)),
        )
        logger.debug(
            f"Dealt {self.config.hand_size} cards to {len(players)} players, "
            f"{len(deck)} left in the draw pile"
        )
        return state

    def _build_deck(self) -> Deck:
        deck_type = DeckType.WITH_JOKERS if self.deck_config.jokers else DeckType.NORMAL
        deck = Deck(deck_type, rng=self.rng)
        for _ in range(self.deck_config.num_decks - 1):
            deck.extend(Deck(deck_type))
        deck.shuffle(self.deck_config.shuffle, self.deck_config.shuffle_swaps)
        return deck

    def _build_teams(self, num_players: int) -> list[Team]:
        if not self.config.partners:
            return []
        if num_players % 2:
            raise BuilderFailure(
                f"Partners need an even number of players, got {num_players}"
            )
        half = num_players // 2
        return [
            Team(name=f"Team {i + 1}", members=(i, i + half))
            for i in range(half)
        ]
