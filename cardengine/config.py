"""Configuration management."""

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field

from cardengine.models.deck import DEFAULT_SHUFFLE_SWAPS, ShuffleMethod


class DeckConfig(BaseModel):
    """Deck configuration."""

    jokers: bool = True
    num_decks: int = Field(default=1, ge=1)
    shuffle: ShuffleMethod = ShuffleMethod.SWAP
    shuffle_swaps: int = Field(default=DEFAULT_SHUFFLE_SWAPS, ge=0)


class GameConfig(BaseModel):
    """Game configuration."""

    num_players: int = Field(default=4, ge=2, le=4)
    hand_size: int = Field(default=10, ge=0)
    flip_discard: bool = True  # Turn the first card of the stock onto the discard pile
    partners: bool = False  # Pair seat i with seat i + n/2
    max_turns: int = Field(default=1000, ge=1)
    seed: int | None = None


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    show_hands: bool = False


class GameLogConfig(BaseModel):
    """Configuration for the JSONL game event log."""

    enabled: bool = False
    output_path: str = "game_log.jsonl"


class Config(BaseModel):
    """Root configuration."""

    deck: DeckConfig = DeckConfig()
    game: GameConfig = GameConfig()
    logging: LoggingConfig = LoggingConfig()
    game_log: GameLogConfig = GameLogConfig()


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses default config.

    Returns:
        Config object.
    """
    if path is None:
        return Config()

    config_path = Path(path)
    if not config_path.exists():
        return Config()

    with open(config_path) as f:
        data = yaml.safe_load(f)

    return Config(**data) if data else Config()
