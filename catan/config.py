"""
Game configuration settings.
"""

from dataclasses import dataclass
from typing import Optional

MAX_TURNS = 8192
MAX_ROUNDS = 8192
PLAYERS_PER_GAME = 4


def clamp_turns(turns: int) -> int:
    """Clamp a configured turn count to [1, MAX_TURNS]."""
    return max(1, min(turns, MAX_TURNS))


@dataclass
class GameConfig:
    """Configuration for a Catan simulation run."""

    max_rounds: int = 25
    victory_points_to_win: int = 10

    # Players holding more cards than this must try to build
    card_limit: int = 7
    # Chance of a voluntary pass when not obliged to build
    pass_probability: float = 0.3

    # Second settlement falls back to any legal vertex after this many draws
    setup_fallback_attempts: int = 200
    setup_max_attempts: int = 10_000

    seed: Optional[int] = None

    def __post_init__(self) -> None:
        self.max_rounds = max(0, min(self.max_rounds, MAX_ROUNDS))

    @classmethod
    def from_turns(cls, turns: int, **kwargs) -> "GameConfig":
        """Build a config from a turn budget: one round is one turn per player."""
        return cls(max_rounds=clamp_turns(turns) // PLAYERS_PER_GAME, **kwargs)
