"""
Resource types, build costs and per-player resource accounting.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict


class ResourceType(Enum):
    """Resource kinds produced by tiles."""

    WOOD = "wood"
    BRICK = "brick"
    WHEAT = "wheat"
    SHEEP = "sheep"
    ORE = "ore"
    DESERT = "desert"

    @property
    def is_productive(self) -> bool:
        return self is not ResourceType.DESERT


PRODUCTIVE_RESOURCES = tuple(r for r in ResourceType if r.is_productive)


@dataclass(frozen=True)
class Cost:
    """Resource cost of a structure."""

    wood: int = 0
    brick: int = 0
    wheat: int = 0
    sheep: int = 0
    ore: int = 0

    def as_dict(self) -> Dict[ResourceType, int]:
        """Return the cost keyed by resource type, including zero entries."""
        return {
            ResourceType.WOOD: self.wood,
            ResourceType.BRICK: self.brick,
            ResourceType.WHEAT: self.wheat,
            ResourceType.SHEEP: self.sheep,
            ResourceType.ORE: self.ore,
        }

    def total(self) -> int:
        return self.wood + self.brick + self.wheat + self.sheep + self.ore

    @classmethod
    def road(cls) -> "Cost":
        return cls(wood=1, brick=1)

    @classmethod
    def settlement(cls) -> "Cost":
        return cls(wood=1, brick=1, wheat=1, sheep=1)

    @classmethod
    def city(cls) -> "Cost":
        return cls(wheat=2, ore=3)


class ResourceHand:
    """
    Tracks the resource cards held by a single player.

    Counts never go negative: `spend` refuses a cost the hand cannot cover
    and leaves the hand untouched.
    """

    def __init__(self, **counts: int):
        self._counts: Dict[ResourceType, int] = {r: 0 for r in PRODUCTIVE_RESOURCES}
        for name, amount in counts.items():
            self.add(ResourceType(name), amount)

    def add(self, resource: ResourceType, amount: int = 1) -> None:
        """Add cards of a resource. Desert yields nothing."""
        if amount < 0:
            raise ValueError(f"Cannot add a negative amount: {amount}")
        if not resource.is_productive:
            return
        self._counts[resource] += amount

    def get(self, resource: ResourceType) -> int:
        return self._counts.get(resource, 0)

    def total_cards(self) -> int:
        """Total number of resource cards in the hand."""
        return sum(self._counts.values())

    def has_enough(self, cost: Cost) -> bool:
        """Check if the hand covers every component of a cost."""
        return all(self.get(r) >= n for r, n in cost.as_dict().items())

    def spend(self, cost: Cost) -> bool:
        """
        Debit a cost from the hand.
        Returns True if successful, False (and leaves the hand untouched) if unaffordable.
        """
        if not self.has_enough(cost):
            return False
        for resource, amount in cost.as_dict().items():
            self._counts[resource] -= amount
        return True

    def as_dict(self) -> Dict[str, int]:
        """Resource counts keyed by resource name."""
        return {r.value: n for r, n in self._counts.items()}

    def copy(self) -> "ResourceHand":
        return ResourceHand(**self.as_dict())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResourceHand):
            return NotImplemented
        return self._counts == other._counts

    def __repr__(self) -> str:
        parts = " ".join(f"{r.value.capitalize()}:{n}" for r, n in self._counts.items())
        return f"{parts} (Total:{self.total_cards()})"
