"""Random agent that builds whatever its priority tier allows."""

import random
from typing import List, Optional

from catan.actions import Action
from catan.game import GameState

from agents.base import Agent


class RandomAgent(Agent):
    """
    Simple AI that picks uniformly among the legal builds of its best tier.

    When not obliged to build, it sometimes passes to save resources for a
    bigger building.
    """

    def __init__(
        self,
        player_id: int,
        name: str,
        rng: Optional[random.Random] = None,
        pass_probability: Optional[float] = None,
    ):
        """
        Initialize the random agent.

        Args:
            player_id: The player's id in the game.
            name: The player's display name.
            rng: Random source for decisions. Inject a seeded one for
                reproducible runs.
            pass_probability: Chance of a voluntary pass. Defaults to the
                game's configured value.
        """
        super().__init__(player_id, name)
        self.rng = rng if rng is not None else random.Random()
        self.pass_probability = pass_probability

    def choose_action(
        self, game: GameState, legal_actions: List[Action], must_build: bool = False
    ) -> Action:
        """
        Choose a random build, or pass.

        Args:
            game: The current game state.
            legal_actions: Highest-priority tier of legal, affordable builds.
            must_build: Whether a voluntary pass is forbidden.

        Returns:
            The chosen action to execute.
        """
        if not legal_actions:
            return Action.pass_turn(self.player_id)

        if not must_build:
            threshold = self.pass_probability
            if threshold is None:
                threshold = game.config.pass_probability
            if self.rng.random() < threshold:
                return Action.pass_turn(self.player_id)

        return self.rng.choice(legal_actions)
