"""
Public snapshot serialization of GameState.

Produces a stable, JSON-friendly view of the board and every player.
"""

from __future__ import annotations

from typing import Any, Dict, List

from catan.game import GameState


def serialize_snapshot(game: GameState) -> Dict[str, Any]:
    """Serialize a GameState into a public, stable JSON dict.

    The snapshot includes:
    - round_number, phase and winner
    - players with score, hand and buildings
    - occupied vertices and all roads
    - the last dice roll
    """
    players: List[Dict[str, Any]] = []
    for pid in game.player_order:
        pstate = game.players[pid]
        players.append(
            {
                "player_id": pid,
                "name": pstate.name,
                "victory_points": pstate.victory_points,
                "hand": pstate.hand.as_dict(),
                "total_cards": pstate.total_cards(),
                "settlements": sorted(s.vertex_id for s in pstate.settlements),
                "cities": sorted(c.vertex_id for c in pstate.cities),
                "roads": [list(r.vertices) for r in pstate.roads],
            }
        )

    buildings: List[Dict[str, Any]] = []
    for vertex in game.board.occupied_vertices():
        building = vertex.building
        buildings.append(
            {
                "vertex": vertex.vertex_id,
                "type": building.structure_type.value,
                "owner_id": building.owner_id,
            }
        )

    roads = [
        {"v1": road.vertices[0], "v2": road.vertices[1], "owner_id": road.owner_id}
        for road in game.roads
    ]

    dice = None
    if game.last_dice_roll is not None:
        die1, die2 = game.last_dice_roll
        dice = {"die1": die1, "die2": die2, "total": die1 + die2}

    snapshot: Dict[str, Any] = {
        "round_number": game.current_round,
        "phase": game.phase.value,
        "winner_id": game.winner,
        "players": players,
        "board": {
            "buildings": buildings,
            "roads": roads,
        },
        "last_dice_roll": dice,
    }

    return snapshot
