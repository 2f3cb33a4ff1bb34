"""
Main game engine and state management.
"""

import logging
import random
from enum import Enum
from typing import Dict, List, Optional, Set, Tuple

from catan.board import Board
from catan.config import PLAYERS_PER_GAME, GameConfig
from catan.event_log import EventLog, EventType
from catan.exceptions import ConfigurationError, SetupError
from catan.player import Player, PlayerState
from catan.resources import ResourceType
from catan.rules import can_build_road, respects_distance_rule
from catan.structures import PRODUCTION_YIELD, Structure, StructureType

logger = logging.getLogger(__name__)

# A second settlement should reach all three of these between both placements
SETUP_TARGET_RESOURCES = frozenset({ResourceType.WOOD, ResourceType.BRICK, ResourceType.WHEAT})


class GamePhase(Enum):
    """Lifecycle of a simulation run."""

    SETUP = "setup"
    PLAYING = "playing"
    FINISHED = "finished"


class Dice:
    """Two six-sided dice drawn from an injectable random source."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def roll(self) -> Tuple[int, int]:
        return self.rng.randint(1, 6), self.rng.randint(1, 6)


class GameState:
    """
    Represents the complete state of a Catan simulation.
    This is the main interface for the game engine.
    """

    def __init__(
        self,
        config: GameConfig,
        players: List[Player],
        dice: Optional[Dice] = None,
        rng: Optional[random.Random] = None,
    ):
        self.config = config
        self.board = Board()
        self.event_log = EventLog()

        # Setup sampling draws from here; dice default to the same stream
        self.rng = rng if rng is not None else random.Random(config.seed)
        self.dice = dice if dice is not None else Dice(self.rng)

        self.players: Dict[int, PlayerState] = {}
        for player in players:
            self.players[player.player_id] = PlayerState(player.player_id, player.name)
        self.player_order: List[int] = [p.player_id for p in players]

        self.phase = GamePhase.SETUP
        self.current_round = 0
        self.winner: Optional[int] = None
        self.last_dice_roll: Optional[Tuple[int, int]] = None

        self.event_log.log(
            EventType.GAME_START,
            self.current_round,
            players=[p.name for p in players],
            max_rounds=config.max_rounds,
            seed=config.seed,
        )

    @property
    def roads(self) -> List[Structure]:
        """All placed roads."""
        return self.board.roads

    @property
    def game_over(self) -> bool:
        return self.phase == GamePhase.FINISHED

    # === PLACEMENT ===

    def place_road(self, player_id: int, v1: int, v2: int) -> Structure:
        """Register a road on the board and with its owner. No cost, no checks."""
        road = Structure.road(player_id, v1, v2)
        self.board.place_road(road)
        self.players[player_id].roads.append(road)
        return road

    def place_settlement(self, player_id: int, vertex_id: int) -> Structure:
        """Put a settlement on a vertex and award its point. No cost, no checks."""
        player = self.players[player_id]
        settlement = Structure.settlement(player_id, vertex_id)
        self.board.get_vertex(vertex_id).building = settlement
        player.buildings.append(settlement)
        player.victory_points += settlement.points
        return settlement

    def upgrade_to_city(self, player_id: int, vertex_id: int) -> Structure:
        """
        Replace a settlement with a city at the same vertex.
        Awards only the point the city adds over the settlement.
        """
        player = self.players[player_id]
        vertex = self.board.get_vertex(vertex_id)
        settlement = vertex.building

        city = Structure.city(player_id, vertex_id)
        vertex.building = city
        player.buildings.remove(settlement)
        player.buildings.append(city)
        player.victory_points += city.points - settlement.points
        return city

    # === SETUP ===

    def run_setup(self) -> None:
        """
        Place two settlements and two roads for every player, in rotation.

        The second settlement credits one card for every productive tile
        around it.

        Raises:
            SetupError: no legal vertex was found within the attempt cap
        """
        if self.phase != GamePhase.SETUP:
            return

        for player_id in self.player_order:
            for placement in (1, 2):
                vertex_id = self._sample_setup_vertex(player_id, second=placement == 2)
                self.place_settlement(player_id, vertex_id)
                self.event_log.log(
                    EventType.SETUP_PLACEMENT,
                    self.current_round,
                    player_id=player_id,
                    message=f"Placed settlement at vertex {vertex_id}",
                    structure=StructureType.SETTLEMENT.value,
                    vertex=vertex_id,
                )

                end = self._choose_setup_road(player_id, vertex_id)
                self.place_road(player_id, vertex_id, end)
                self.event_log.log(
                    EventType.SETUP_PLACEMENT,
                    self.current_round,
                    player_id=player_id,
                    message=f"Placed road between vertices {vertex_id} and {end}",
                    structure=StructureType.ROAD.value,
                    v1=vertex_id,
                    v2=end,
                )

                if placement == 2:
                    self._credit_starting_resources(player_id, vertex_id)

        self.event_log.log(EventType.SETUP_COMPLETE, self.current_round)
        self.begin_play()

    def begin_play(self) -> None:
        """Move from SETUP to PLAYING."""
        if self.phase == GamePhase.SETUP:
            self.phase = GamePhase.PLAYING
            logger.info("Setup complete, starting play")

    def _sample_setup_vertex(self, player_id: int, second: bool) -> int:
        vertex_count = self.board.vertex_count()
        reachable: Set[ResourceType] = set()
        if second:
            for building in self.players[player_id].buildings:
                reachable |= self._resources_around(building.vertex_id)

        for attempt in range(1, self.config.setup_max_attempts + 1):
            vertex_id = self.rng.randint(0, vertex_count - 1)
            vertex = self.board.get_vertex(vertex_id)

            if len(vertex.neighbors) < 2 or vertex.is_occupied():
                continue
            if not respects_distance_rule(self.board, vertex_id):
                continue
            if second and attempt <= self.config.setup_fallback_attempts:
                if not SETUP_TARGET_RESOURCES <= reachable | self._resources_around(vertex_id):
                    continue

            logger.debug(f"Setup: player {player_id} takes vertex {vertex_id} after {attempt} draws")
            return vertex_id

        raise SetupError(
            f"No setup vertex for player {player_id} after {self.config.setup_max_attempts} attempts"
        )

    def _choose_setup_road(self, player_id: int, vertex_id: int) -> int:
        candidates = [
            n for n in self.board.adjacent_vertices(vertex_id)
            if can_build_road(self, player_id, vertex_id, n)
        ]
        if not candidates:
            raise SetupError(f"No road can leave vertex {vertex_id} for player {player_id}")
        return self.rng.choice(candidates)

    def _resources_around(self, vertex_id: int) -> Set[ResourceType]:
        return {t.resource for t in self.board.tiles_covering_vertex(vertex_id) if t.resource.is_productive}

    def _credit_starting_resources(self, player_id: int, vertex_id: int) -> None:
        player = self.players[player_id]
        for tile in self.board.tiles_covering_vertex(vertex_id):
            if tile.resource.is_productive:
                player.collect(tile.resource, 1)

    # === PLAY ===

    def roll_dice(self, player_id: Optional[int] = None) -> int:
        """
        Roll two dice and return the sum.
        Updates game state with the roll.
        """
        die1, die2 = self.dice.roll()
        self.last_dice_roll = (die1, die2)
        self.event_log.log(
            EventType.DICE_ROLL,
            self.current_round,
            player_id=player_id,
            die1=die1,
            die2=die2,
            total=die1 + die2,
        )
        return die1 + die2

    def produce_resources(self, roll: int) -> Dict[int, Dict[str, int]]:
        """
        Credit every building on a tile triggered by `roll`.

        Settlements collect 1 card and cities 2 per triggered tile. A 7 never
        produces.

        Returns:
            Cards credited, by player id then resource name
        """
        gains: Dict[int, Dict[str, int]] = {}
        if roll == 7:
            return gains

        for tile in self.board.tiles:
            if not tile.produces_on(roll):
                continue
            for vertex_id in tile.vertices:
                building = self.board.get_vertex(vertex_id).building
                if building is None:
                    continue
                amount = PRODUCTION_YIELD[building.structure_type]
                self.players[building.owner_id].collect(tile.resource, amount)
                player_gains = gains.setdefault(building.owner_id, {})
                player_gains[tile.resource.value] = player_gains.get(tile.resource.value, 0) + amount

        for player_id, resources in sorted(gains.items()):
            self.event_log.log(
                EventType.PRODUCTION,
                self.current_round,
                player_id=player_id,
                roll=roll,
                resources=resources,
            )
        return gains

    def check_victory(self) -> Optional[int]:
        """Return the first player in rotation order at the victory threshold, or None."""
        for player_id in self.player_order:
            if self.players[player_id].victory_points >= self.config.victory_points_to_win:
                return player_id
        return None

    def get_standings(self) -> List[PlayerState]:
        """Players by score, highest first; ties keep rotation order."""
        ordered = [self.players[pid] for pid in self.player_order]
        return sorted(ordered, key=lambda p: p.victory_points, reverse=True)

    def round_summary(self) -> List[Dict[str, object]]:
        """Score and full resource breakdown of every player."""
        return [
            {
                "player_id": pid,
                "name": self.players[pid].name,
                "victory_points": self.players[pid].victory_points,
                "hand": self.players[pid].hand.as_dict(),
                "total_cards": self.players[pid].total_cards(),
            }
            for pid in self.player_order
        ]

    def finish(self, winner: Optional[int], reason: str) -> None:
        """End the game and log the outcome."""
        self.phase = GamePhase.FINISHED
        self.winner = winner
        standings = [
            {"player_id": p.player_id, "name": p.name, "victory_points": p.victory_points}
            for p in self.get_standings()
        ]
        self.event_log.log(
            EventType.GAME_END,
            self.current_round,
            player_id=winner,
            reason=reason,
            rounds_played=self.current_round,
            standings=standings,
        )
        logger.info(f"Game over after {self.current_round} rounds ({reason}), winner: {winner}")


def create_game(
    config: GameConfig,
    players: List[Player],
    dice: Optional[Dice] = None,
    rng: Optional[random.Random] = None,
) -> GameState:
    """
    Create a new game with the given configuration and players.

    Raises:
        ConfigurationError: not exactly four players, or duplicate ids
    """
    if len(players) != PLAYERS_PER_GAME:
        raise ConfigurationError(f"A game needs exactly {PLAYERS_PER_GAME} players, got {len(players)}")
    if len({p.player_id for p in players}) != len(players):
        raise ConfigurationError("Player ids must be unique")
    return GameState(config, players, dice=dice, rng=rng)
