"""
Round orchestration: dice, production, agent turns and termination.
"""

import logging
import random
from dataclasses import dataclass
from typing import Dict, List, Optional

from agents import Agent, RandomAgent
from catan.actions import apply_action, get_legal_actions
from catan.event_log import EventType, GameEvent
from catan.exceptions import ConfigurationError
from catan.game import GamePhase, GameState
from catan.player import PlayerState

logger = logging.getLogger(__name__)

END_VICTORY = "victory"
END_ROUND_LIMIT = "round_limit"


@dataclass
class SimulationResult:
    """Outcome of a finished run."""

    winner: Optional[int]
    rounds_played: int
    end_reason: str
    standings: List[PlayerState]


class Simulation:
    """
    Drives a single GameState from setup to the end of the game.

    Victory is checked only once a round is complete, so every player gets
    the same number of turns.
    """

    def __init__(self, game: GameState, agents: Optional[List[Agent]] = None):
        self.game = game

        if agents is None:
            agents = [
                RandomAgent(pid, game.players[pid].name, rng=self._agent_rng(pid))
                for pid in game.player_order
            ]
        self.agents: Dict[int, Agent] = {agent.player_id: agent for agent in agents}

        missing = [pid for pid in game.player_order if pid not in self.agents]
        if missing:
            raise ConfigurationError(f"No agent for players {missing}")

    def _agent_rng(self, player_id: int) -> random.Random:
        seed = self.game.config.seed
        return random.Random(seed + player_id) if seed is not None else random.Random()

    def take_turn(self, player_id: int) -> List[GameEvent]:
        """
        Let a player act once dice and production are done.

        While the player holds more cards than the limit it must keep
        building; if no build is legal it passes and the turn ends. A player
        under the limit makes a single, voluntary decision.

        Returns:
            The action events logged during the turn
        """
        player = self.game.players[player_id]
        agent = self.agents[player_id]
        events: List[GameEvent] = []
        built = False

        while player.total_cards() > self.game.config.card_limit:
            legal_actions = get_legal_actions(self.game, player_id)
            action = agent.choose_action(self.game, legal_actions, must_build=True)
            if not action.is_build:
                # Only log the pass if the turn produced nothing else
                if not built:
                    events.append(apply_action(self.game, action))
                return events
            events.append(apply_action(self.game, action))
            built = True

        if not built:
            legal_actions = get_legal_actions(self.game, player_id)
            action = agent.choose_action(self.game, legal_actions, must_build=False)
            events.append(apply_action(self.game, action))

        return events

    def run_turn(self, player_id: int) -> List[GameEvent]:
        """Roll, produce unless a 7 came up, then let the player act."""
        roll = self.game.roll_dice(player_id)
        if roll != 7:
            self.game.produce_resources(roll)
        return self.take_turn(player_id)

    def run_round(self) -> List[Dict[str, object]]:
        """
        Run one full rotation of turns and log the round summary.

        Returns:
            Score and resource breakdown per player after the round
        """
        self.game.current_round += 1
        self.game.event_log.log(EventType.ROUND_START, self.game.current_round)

        for player_id in self.game.player_order:
            self.run_turn(player_id)

        summary = self.game.round_summary()
        self.game.event_log.log(EventType.ROUND_SUMMARY, self.game.current_round, players=summary)
        return summary

    def start_simulation(self) -> SimulationResult:
        """
        Run the game to completion.

        Setup runs first if it has not happened yet. Rounds then repeat until a
        player reaches the victory threshold after a full round, or until the
        round limit is exhausted.
        """
        game = self.game
        if game.phase == GamePhase.SETUP:
            game.run_setup()

        if game.phase == GamePhase.PLAYING:
            logger.info(f"Starting simulation: max {game.config.max_rounds} rounds")
            while game.current_round < game.config.max_rounds:
                self.run_round()
                winner = game.check_victory()
                if winner is not None:
                    game.finish(winner, END_VICTORY)
                    break
            else:
                game.finish(None, END_ROUND_LIMIT)

        return self.result()

    def result(self) -> SimulationResult:
        game_end = self.game.event_log.events_of_type(EventType.GAME_END)
        reason = game_end[-1].details["reason"] if game_end else ""
        return SimulationResult(
            winner=self.game.winner,
            rounds_played=self.game.current_round,
            end_reason=reason,
            standings=self.game.get_standings(),
        )
