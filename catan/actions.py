"""
Player actions: legal move detection and execution.

This module provides the public interface agents and the orchestrator use
to enumerate candidate moves and to apply the chosen one.
"""

import logging
from enum import Enum
from typing import TYPE_CHECKING, Any, List

from catan.event_log import EventType, GameEvent
from catan.exceptions import InvalidActionError
from catan.rules import can_build_city, can_build_road, can_build_settlement, check_city, check_road, check_settlement
from catan.structures import COSTS, StructureType

if TYPE_CHECKING:
    from catan.game import GameState

logger = logging.getLogger(__name__)


class ActionType(Enum):
    """Types of actions a player can take."""

    BUILD_ROAD = "build_road"
    BUILD_SETTLEMENT = "build_settlement"
    BUILD_CITY = "build_city"
    PASS = "pass"


ACTION_STRUCTURES = {
    ActionType.BUILD_ROAD: StructureType.ROAD,
    ActionType.BUILD_SETTLEMENT: StructureType.SETTLEMENT,
    ActionType.BUILD_CITY: StructureType.CITY,
}

ACTION_EVENTS = {
    ActionType.BUILD_ROAD: EventType.BUILD_ROAD,
    ActionType.BUILD_SETTLEMENT: EventType.BUILD_SETTLEMENT,
    ActionType.BUILD_CITY: EventType.BUILD_CITY,
    ActionType.PASS: EventType.PASS,
}


class Action:
    """Represents a game action that can be taken."""

    def __init__(self, action_type: ActionType, player_id: int, **params: Any):
        self.action_type = action_type
        self.player_id = player_id
        self.params = params

    @classmethod
    def build_road(cls, player_id: int, v1: int, v2: int) -> "Action":
        return cls(ActionType.BUILD_ROAD, player_id, v1=v1, v2=v2)

    @classmethod
    def build_settlement(cls, player_id: int, vertex: int) -> "Action":
        return cls(ActionType.BUILD_SETTLEMENT, player_id, vertex=vertex)

    @classmethod
    def build_city(cls, player_id: int, vertex: int) -> "Action":
        return cls(ActionType.BUILD_CITY, player_id, vertex=vertex)

    @classmethod
    def pass_turn(cls, player_id: int) -> "Action":
        return cls(ActionType.PASS, player_id)

    @property
    def is_build(self) -> bool:
        return self.action_type != ActionType.PASS

    def describe(self) -> str:
        """Human-readable description used in the action log."""
        if self.action_type == ActionType.BUILD_ROAD:
            return f"Built road between vertices {self.params['v1']} and {self.params['v2']}"
        if self.action_type == ActionType.BUILD_SETTLEMENT:
            return f"Built settlement at vertex {self.params['vertex']}"
        if self.action_type == ActionType.BUILD_CITY:
            return f"Upgraded settlement to city at vertex {self.params['vertex']}"
        return "Passed turn"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Action):
            return NotImplemented
        return (self.action_type, self.player_id, self.params) == (
            other.action_type,
            other.player_id,
            other.params,
        )

    def __repr__(self) -> str:
        return f"Action({self.action_type.value}, player={self.player_id}, {self.params})"


def get_legal_actions(game_state: "GameState", player_id: int) -> List[Action]:
    """
    Get the highest-priority tier of legal, affordable builds for a player.

    Tiers are checked in order and only the first non-empty one is returned:
    1. City upgrades of the player's own settlements
    2. Settlements on any legal vertex
    3. Roads on any legal edge

    Args:
        game_state: Current game state
        player_id: Player to get actions for

    Returns:
        List of build actions; empty when nothing is legal or affordable
    """
    player = game_state.players[player_id]

    if player.can_afford(COSTS[StructureType.CITY]):
        cities = [
            Action.build_city(player_id, s.vertex_id)
            for s in player.settlements
            if can_build_city(game_state, player_id, s.vertex_id)
        ]
        if cities:
            return cities

    if player.can_afford(COSTS[StructureType.SETTLEMENT]):
        settlements = [
            Action.build_settlement(player_id, v.vertex_id)
            for v in game_state.board.vertices
            if can_build_settlement(game_state, player_id, v.vertex_id)
        ]
        if settlements:
            return settlements

    if player.can_afford(COSTS[StructureType.ROAD]):
        return [
            Action.build_road(player_id, v1, v2)
            for v1, v2 in game_state.board.edges()
            if can_build_road(game_state, player_id, v1, v2)
        ]

    return []


def apply_action(game_state: "GameState", action: Action) -> GameEvent:
    """
    Apply an action to the game state.

    Build actions run in a fixed order: debit the cost, place the structure,
    award points, then log. Pass only logs.

    Returns:
        The logged event

    Raises:
        InvalidActionError: the action breaks a placement rule or is unaffordable
    """
    player = game_state.players[action.player_id]

    if action.is_build:
        ok, reason = _check(game_state, action)
        if not ok:
            raise InvalidActionError(reason)

        cost = COSTS[ACTION_STRUCTURES[action.action_type]]
        if not player.hand.spend(cost):
            raise InvalidActionError(
                f"Player {action.player_id} cannot afford {action.action_type.value}: has {player.hand}"
            )

        if action.action_type == ActionType.BUILD_ROAD:
            game_state.place_road(action.player_id, action.params["v1"], action.params["v2"])
        elif action.action_type == ActionType.BUILD_SETTLEMENT:
            game_state.place_settlement(action.player_id, action.params["vertex"])
        else:
            game_state.upgrade_to_city(action.player_id, action.params["vertex"])

    event = game_state.event_log.log(
        ACTION_EVENTS[action.action_type],
        game_state.current_round,
        player_id=action.player_id,
        message=action.describe(),
        victory_points=player.victory_points,
        cards=player.total_cards(),
        **action.params,
    )
    logger.debug(f"Round {game_state.current_round}: player {action.player_id} {action.describe()}")
    return event


def _check(game_state: "GameState", action: Action):
    if action.action_type == ActionType.BUILD_ROAD:
        return check_road(game_state, action.player_id, action.params["v1"], action.params["v2"])
    if action.action_type == ActionType.BUILD_SETTLEMENT:
        return check_settlement(game_state, action.player_id, action.params["vertex"])
    return check_city(game_state, action.player_id, action.params["vertex"])
