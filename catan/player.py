"""
Player state and management.
"""

from typing import List

from catan.resources import Cost, ResourceHand, ResourceType
from catan.structures import Structure, StructureType


class PlayerState:
    """Represents the complete state of a player in the game."""

    def __init__(self, player_id: int, name: str):
        self.player_id = player_id
        self.name = name
        self.hand = ResourceHand()
        self.victory_points = 0
        self.roads: List[Structure] = []
        self.buildings: List[Structure] = []

    def collect(self, resource: ResourceType, amount: int) -> None:
        """Credit produced resources to the hand."""
        self.hand.add(resource, amount)

    def can_afford(self, cost: Cost) -> bool:
        return self.hand.has_enough(cost)

    def total_cards(self) -> int:
        return self.hand.total_cards()

    def has_built_anything(self) -> bool:
        """False only before the player's very first placement."""
        return bool(self.roads or self.buildings)

    @property
    def settlements(self) -> List[Structure]:
        return [b for b in self.buildings if b.structure_type == StructureType.SETTLEMENT]

    @property
    def cities(self) -> List[Structure]:
        return [b for b in self.buildings if b.structure_type == StructureType.CITY]

    def has_road_touching(self, vertex_id: int) -> bool:
        return any(road.touches(vertex_id) for road in self.roads)

    def __repr__(self) -> str:
        return (
            f"PlayerState(id={self.player_id}, name='{self.name}', "
            f"vp={self.victory_points}, cards={self.total_cards()})"
        )


class Player:
    """
    Convenience wrapper for player information.
    This is primarily for the external API.
    """

    def __init__(self, player_id: int, name: str):
        self.player_id = player_id
        self.name = name

    def __repr__(self) -> str:
        return f"Player(id={self.player_id}, name='{self.name}')"
