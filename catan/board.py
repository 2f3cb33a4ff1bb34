"""
The fixed game map: 19 tiles over a 54-vertex graph.

Identification scheme:
- Tiles: 0 (center), 1-6 (inner ring), 7-18 (outer ring)
- Vertices: 0-5 (inner ring), 6-23 (middle ring), 24-53 (outer ring)

Every inner vertex has a spoke to the middle ring, and every middle vertex
has exactly one spoke (6 inward, 12 outward), which gives 72 edges.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from catan.exceptions import BoardTopologyError
from catan.resources import ResourceType
from catan.structures import Structure

logger = logging.getLogger(__name__)

INNER_RING = 6
MIDDLE_RING = 18
OUTER_RING = 30
VERTEX_COUNT = INNER_RING + MIDDLE_RING + OUTER_RING

MIDDLE_START = INNER_RING
OUTER_START = INNER_RING + MIDDLE_RING


@dataclass
class Tile:
    """A board cell producing one resource kind on a trigger number."""

    tile_id: int
    resource: ResourceType
    number: int
    vertices: Tuple[int, ...] = ()

    def produces_on(self, roll: int) -> bool:
        """Desert tiles never produce, whatever their number."""
        return self.resource.is_productive and self.number == roll

    def __repr__(self) -> str:
        return f"Tile[{self.tile_id}:{self.resource.value}({self.number})]"


@dataclass
class Vertex:
    """A placement point holding at most one settlement or city."""

    vertex_id: int
    neighbors: Tuple[int, ...] = ()
    tiles: Tuple[int, ...] = ()
    building: Optional[Structure] = field(default=None, repr=False)

    def is_occupied(self) -> bool:
        return self.building is not None

    @property
    def owner_id(self) -> Optional[int]:
        """Owner of the building placed here, or None."""
        return self.building.owner_id if self.building is not None else None


# Tile resources and number tokens. The desert carries the 7, which never
# triggers production.
TILE_LAYOUT: List[Tuple[ResourceType, int]] = [
    (ResourceType.WHEAT, 6),  # center
    # Inner ring (1-6)
    (ResourceType.ORE, 5),
    (ResourceType.SHEEP, 10),
    (ResourceType.BRICK, 8),
    (ResourceType.WOOD, 3),
    (ResourceType.WHEAT, 4),
    (ResourceType.SHEEP, 9),
    # Outer ring (7-18)
    (ResourceType.WOOD, 11),
    (ResourceType.BRICK, 4),
    (ResourceType.SHEEP, 9),
    (ResourceType.WHEAT, 12),
    (ResourceType.ORE, 6),
    (ResourceType.DESERT, 7),
    (ResourceType.WOOD, 5),
    (ResourceType.BRICK, 10),
    (ResourceType.ORE, 3),
    (ResourceType.SHEEP, 8),
    (ResourceType.WHEAT, 11),
    (ResourceType.WOOD, 2),
]

# Corner tiles of the outer ring (odd ids) border one inner tile, edge
# tiles (even ids) border two.
TILE_VERTICES: List[Tuple[int, ...]] = [
    (0, 1, 2, 3, 4, 5),
    # Inner ring
    (0, 1, 6, 7, 8, 9),
    (1, 2, 9, 10, 11, 12),
    (2, 3, 12, 13, 14, 15),
    (3, 4, 15, 16, 17, 18),
    (4, 5, 18, 19, 20, 21),
    (5, 0, 21, 22, 23, 6),
    # Outer ring
    (7, 8, 24, 25, 26, 27),
    (8, 9, 10, 27, 28, 29),
    (10, 11, 29, 30, 31, 32),
    (11, 12, 13, 32, 33, 34),
    (13, 14, 34, 35, 36, 37),
    (14, 15, 16, 37, 38, 39),
    (16, 17, 39, 40, 41, 42),
    (17, 18, 19, 42, 43, 44),
    (19, 20, 44, 45, 46, 47),
    (20, 21, 22, 47, 48, 49),
    (22, 23, 49, 50, 51, 52),
    (23, 6, 7, 52, 53, 24),
]


class Board:
    """The game map with tiles, vertices and placed roads."""

    def __init__(self):
        self._adjacency: Dict[int, set] = {v: set() for v in range(VERTEX_COUNT)}
        self._setup_vertex_adjacencies()

        self.tiles: List[Tile] = self._create_standard_tiles()
        self.vertices: List[Vertex] = self._create_vertices()
        self.roads: List[Structure] = []

        self.validate()

    def _setup_vertex_adjacencies(self) -> None:
        """Wire the three rings and the spokes between them."""
        for i in range(INNER_RING):
            self._connect(i, (i + 1) % INNER_RING)
            self._connect(i, MIDDLE_START + 3 * i)

        for i in range(MIDDLE_RING):
            self._connect(MIDDLE_START + i, MIDDLE_START + (i + 1) % MIDDLE_RING)

        # Two outward spokes per sixth of the middle ring
        for i in range(INNER_RING):
            self._connect(MIDDLE_START + 3 * i + 1, OUTER_START + 5 * i)
            self._connect(MIDDLE_START + 3 * i + 2, OUTER_START + 5 * i + 3)

        for i in range(OUTER_RING):
            self._connect(OUTER_START + i, OUTER_START + (i + 1) % OUTER_RING)

    def _connect(self, v1: int, v2: int) -> None:
        self._adjacency[v1].add(v2)
        self._adjacency[v2].add(v1)

    def _create_standard_tiles(self) -> List[Tile]:
        return [
            Tile(tile_id, resource, number, TILE_VERTICES[tile_id])
            for tile_id, (resource, number) in enumerate(TILE_LAYOUT)
        ]

    def _create_vertices(self) -> List[Vertex]:
        covering: Dict[int, List[int]] = {v: [] for v in range(VERTEX_COUNT)}
        for tile in self.tiles:
            for vertex_id in tile.vertices:
                covering[vertex_id].append(tile.tile_id)

        return [
            Vertex(
                vertex_id=v,
                neighbors=tuple(sorted(self._adjacency[v])),
                tiles=tuple(covering[v]),
            )
            for v in range(VERTEX_COUNT)
        ]

    def validate(self) -> None:
        """
        Check the topology invariants placement logic relies on.

        Raises:
            BoardTopologyError: a vertex has fewer than two neighbours,
                adjacency is not symmetric, or a tile does not touch six
                distinct vertices.
        """
        for vertex in self.vertices:
            if len(vertex.neighbors) < 2:
                raise BoardTopologyError(
                    f"Vertex {vertex.vertex_id} has {len(vertex.neighbors)} neighbours (dead zone)"
                )
            for other in vertex.neighbors:
                if vertex.vertex_id not in self.vertices[other].neighbors:
                    raise BoardTopologyError(
                        f"Adjacency {vertex.vertex_id}->{other} is not symmetric"
                    )
            if not vertex.tiles:
                raise BoardTopologyError(f"Vertex {vertex.vertex_id} touches no tile")

        for tile in self.tiles:
            if len(set(tile.vertices)) != 6:
                raise BoardTopologyError(f"Tile {tile.tile_id} touches {len(set(tile.vertices))} vertices")
            if tile.resource.is_productive and not 2 <= tile.number <= 12:
                raise BoardTopologyError(f"Tile {tile.tile_id} has number {tile.number}")

        logger.debug(f"Board validated: {self.vertex_count()} vertices, {self.tile_count()} tiles")

    def vertex_count(self) -> int:
        return len(self.vertices)

    def tile_count(self) -> int:
        return len(self.tiles)

    def get_vertex(self, vertex_id: int) -> Vertex:
        """Get a vertex by id."""
        if not 0 <= vertex_id < len(self.vertices):
            raise IndexError(f"No vertex {vertex_id}")
        return self.vertices[vertex_id]

    def get_tile(self, tile_id: int) -> Tile:
        """Get a tile by id."""
        if not 0 <= tile_id < len(self.tiles):
            raise IndexError(f"No tile {tile_id}")
        return self.tiles[tile_id]

    def adjacent_vertices(self, vertex_id: int) -> Tuple[int, ...]:
        return self.get_vertex(vertex_id).neighbors

    def are_adjacent(self, v1: int, v2: int) -> bool:
        return v2 in self.get_vertex(v1).neighbors

    def tiles_covering_vertex(self, vertex_id: int) -> List[Tile]:
        return [self.tiles[t] for t in self.get_vertex(vertex_id).tiles]

    def vertices_of_tile(self, tile_id: int) -> Tuple[int, ...]:
        return self.get_tile(tile_id).vertices

    def edges(self) -> List[Tuple[int, int]]:
        """All undirected edges, each listed once as (low, high)."""
        return [
            (vertex.vertex_id, other)
            for vertex in self.vertices
            for other in vertex.neighbors
            if vertex.vertex_id < other
        ]

    def find_road(self, v1: int, v2: int) -> Optional[Structure]:
        """Get the road joining two vertices, or None."""
        for road in self.roads:
            if road.connects(v1, v2):
                return road
        return None

    def place_road(self, road: Structure) -> None:
        self.roads.append(road)

    def occupied_vertices(self) -> List[Vertex]:
        return [v for v in self.vertices if v.is_occupied()]
