"""
Placement rules.

Enforces the game invariants:
- Roads must connect to the player's existing roads or buildings
- Cities must replace the player's own settlement
- Settlements and cities must be at least two edges apart (distance rule)

Each `check_*` function returns a `(legal, reason)` tuple so callers can log
why a placement was rejected; the `can_build_*` wrappers return only the
boolean. A rejection is never an error, it just removes the candidate.
"""

from typing import TYPE_CHECKING, Tuple

from catan.board import Board
from catan.structures import StructureType

if TYPE_CHECKING:
    from catan.game import GameState

RuleCheck = Tuple[bool, str]

OK: RuleCheck = (True, "")


def respects_distance_rule(board: Board, vertex_id: int) -> bool:
    """Check that no vertex adjacent to `vertex_id` holds a building."""
    return not any(board.get_vertex(n).is_occupied() for n in board.adjacent_vertices(vertex_id))


def check_road(game: "GameState", player_id: int, v1: int, v2: int) -> RuleCheck:
    """
    Check if a player can build a road between two vertices.

    Rules:
    1. Vertices must be adjacent
    2. No road may already join them
    3. The road must touch a building or road of the player, unless the
       player has placed nothing yet

    Returns:
        (legal, reason) tuple
    """
    board = game.board
    player = game.players[player_id]

    if v1 == v2 or not board.are_adjacent(v1, v2):
        return False, f"Vertices {v1} and {v2} are not adjacent"

    if board.find_road(v1, v2) is not None:
        return False, f"A road already joins {v1} and {v2}"

    if not player.has_built_anything():
        return OK

    for vertex_id in (v1, v2):
        if board.get_vertex(vertex_id).owner_id == player_id:
            return OK
        if player.has_road_touching(vertex_id):
            return OK

    return False, f"Road {v1}-{v2} is not connected to player {player_id}'s network"


def check_settlement(game: "GameState", player_id: int, vertex_id: int) -> RuleCheck:
    """
    Check if a player can build a settlement at a vertex.

    Rules:
    1. Vertex must be unoccupied
    2. Adjacent vertices must be empty (distance rule)
    3. Vertex must be the end of one of the player's roads, unless this is
       the player's first placement

    Returns:
        (legal, reason) tuple
    """
    board = game.board
    player = game.players[player_id]

    if board.get_vertex(vertex_id).is_occupied():
        return False, f"Vertex {vertex_id} is occupied"

    if not respects_distance_rule(board, vertex_id):
        return False, f"Vertex {vertex_id} is next to an existing building"

    if player.has_built_anything() and not player.has_road_touching(vertex_id):
        return False, f"Vertex {vertex_id} is not on player {player_id}'s roads"

    return OK


def check_city(game: "GameState", player_id: int, vertex_id: int) -> RuleCheck:
    """
    Check if a player can upgrade a settlement at a vertex to a city.

    Returns:
        (legal, reason) tuple
    """
    building = game.board.get_vertex(vertex_id).building

    if building is None or building.structure_type != StructureType.SETTLEMENT:
        return False, f"No settlement at vertex {vertex_id}"

    if building.owner_id != player_id:
        return False, f"Settlement at vertex {vertex_id} belongs to player {building.owner_id}"

    return OK


def can_build_road(game: "GameState", player_id: int, v1: int, v2: int) -> bool:
    return check_road(game, player_id, v1, v2)[0]


def can_build_settlement(game: "GameState", player_id: int, vertex_id: int) -> bool:
    return check_settlement(game, player_id, vertex_id)[0]


def can_build_city(game: "GameState", player_id: int, vertex_id: int) -> bool:
    return check_city(game, player_id, vertex_id)[0]
