"""Base class for all Catan agents."""

from abc import ABC, abstractmethod
from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from catan.game import GameState
    from catan.actions import Action


class Agent(ABC):
    """
    Abstract base class for Catan agents.

    All agents must implement the `choose_action` method to select
    an action from the candidate builds offered for the turn.

    Attributes:
        player_id: The player's id in the game.
        name: The player's display name.
    """

    def __init__(self, player_id: int, name: str):
        """
        Initialize the agent.

        Args:
            player_id: The player's id in the game.
            name: The player's display name.
        """
        self.player_id = player_id
        self.name = name

    @abstractmethod
    def choose_action(
        self, game: "GameState", legal_actions: List["Action"], must_build: bool = False
    ) -> "Action":
        """
        Choose an action for this decision.

        Args:
            game: The current game state.
            legal_actions: Highest-priority tier of legal, affordable builds.
                May be empty, in which case the agent must pass.
            must_build: True while the player holds more cards than the
                limit and may not pass voluntarily.

        Returns:
            The chosen action to execute.
        """
        pass
