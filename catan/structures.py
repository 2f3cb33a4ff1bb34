"""
Buildable pieces: roads, settlements and cities.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from catan.resources import Cost


class StructureType(Enum):
    """Types of structures a player can build."""

    ROAD = "road"
    SETTLEMENT = "settlement"
    CITY = "city"


VICTORY_POINTS = {
    StructureType.ROAD: 0,
    StructureType.SETTLEMENT: 1,
    StructureType.CITY: 2,
}

# Resources a vertex building yields per triggered tile.
PRODUCTION_YIELD = {
    StructureType.SETTLEMENT: 1,
    StructureType.CITY: 2,
}

COSTS = {
    StructureType.ROAD: Cost.road(),
    StructureType.SETTLEMENT: Cost.settlement(),
    StructureType.CITY: Cost.city(),
}


@dataclass(frozen=True)
class Structure:
    """
    A placed piece.

    Roads reference two vertex ids, settlements and cities one. Owners and
    vertices are referenced by id so a vertex never points back at a
    player object.
    """

    structure_type: StructureType
    owner_id: int
    vertices: Tuple[int, ...]

    def __post_init__(self) -> None:
        expected = 2 if self.structure_type == StructureType.ROAD else 1
        if len(self.vertices) != expected:
            raise ValueError(
                f"{self.structure_type.value} needs {expected} vertices, got {self.vertices}"
            )
        if expected == 2 and self.vertices[0] == self.vertices[1]:
            raise ValueError(f"Road endpoints must differ: {self.vertices}")

    @classmethod
    def road(cls, owner_id: int, start: int, end: int) -> "Structure":
        return cls(StructureType.ROAD, owner_id, (start, end))

    @classmethod
    def settlement(cls, owner_id: int, vertex_id: int) -> "Structure":
        return cls(StructureType.SETTLEMENT, owner_id, (vertex_id,))

    @classmethod
    def city(cls, owner_id: int, vertex_id: int) -> "Structure":
        return cls(StructureType.CITY, owner_id, (vertex_id,))

    @property
    def is_road(self) -> bool:
        return self.structure_type == StructureType.ROAD

    @property
    def vertex_id(self) -> int:
        """Location of a settlement or city."""
        if self.is_road:
            raise AttributeError("A road has two vertices, use `vertices`")
        return self.vertices[0]

    @property
    def points(self) -> int:
        return VICTORY_POINTS[self.structure_type]

    def touches(self, vertex_id: int) -> bool:
        return vertex_id in self.vertices

    def connects(self, v1: int, v2: int) -> bool:
        """Check if this road joins the two vertices, in either direction."""
        return self.is_road and set(self.vertices) == {v1, v2}
