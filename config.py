"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field


def _parse_seed() -> int | None:
    """Parse BLACKJACK_SEED environment variable."""
    seed = os.getenv("BLACKJACK_SEED", "").strip()
    return int(seed) if seed else None


@dataclass(frozen=True)
class GameConfig:
    """House rules for a single game."""

    min_hands: int = 1
    max_hands: int = 7
    initial_cards: int = 2
    dealer_stands_on: int = 17

    def __post_init__(self) -> None:
        """Validate rule combinations."""
        if self.min_hands < 1:
            raise ValueError("min_hands must be at least 1")
        if self.max_hands < self.min_hands:
            raise ValueError("max_hands must be at least min_hands")
        if self.initial_cards < 2:
            raise ValueError("initial_cards must be at least 2")
        if not 2 <= self.dealer_stands_on <= 21:
            raise ValueError("dealer_stands_on must be between 2 and 21")


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(
        default_factory=lambda: os.getenv("BLACKJACK_DEBUG", "false").lower() == "true"
    )
    log_level: str = field(
        default_factory=lambda: os.getenv("BLACKJACK_LOG_LEVEL", "WARNING").upper()
    )
    seed: int | None = field(default_factory=_parse_seed)

    game: GameConfig = field(default_factory=GameConfig)


# Global configuration instance
config = AppConfig()
