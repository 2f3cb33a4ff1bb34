"""
Tests for resource accounting and build costs.
"""

import pytest

from catan.resources import Cost, ResourceHand, ResourceType
from catan.structures import COSTS, Structure, StructureType


def test_cost_table():
    assert COSTS[StructureType.ROAD] == Cost(wood=1, brick=1)
    assert COSTS[StructureType.SETTLEMENT] == Cost(wood=1, brick=1, wheat=1, sheep=1)
    assert COSTS[StructureType.CITY] == Cost(wheat=2, ore=3)
    assert COSTS[StructureType.CITY].total() == 5


def test_spend_debits_exact_cost():
    hand = ResourceHand(wood=2, brick=1, wheat=1, sheep=1, ore=0)
    assert hand.spend(Cost.settlement())
    assert hand == ResourceHand(wood=1)
    assert hand.total_cards() == 1


def test_spend_refuses_unaffordable_cost():
    hand = ResourceHand(wheat=2, ore=2)
    assert not hand.has_enough(Cost.city())
    assert not hand.spend(Cost.city())
    # Untouched
    assert hand.get(ResourceType.WHEAT) == 2
    assert hand.get(ResourceType.ORE) == 2


def test_spend_never_goes_negative():
    hand = ResourceHand(wood=1, brick=1)
    assert hand.spend(Cost.road())
    assert not hand.spend(Cost.road())
    assert all(n == 0 for n in hand.as_dict().values())


def test_desert_yields_nothing():
    hand = ResourceHand()
    hand.add(ResourceType.DESERT, 3)
    assert hand.total_cards() == 0


def test_negative_add_rejected():
    with pytest.raises(ValueError):
        ResourceHand().add(ResourceType.WOOD, -1)


def test_hand_repr_lists_every_resource():
    hand = ResourceHand(wood=1, ore=2)
    assert repr(hand) == "Wood:1 Brick:0 Wheat:0 Sheep:0 Ore:2 (Total:3)"


def test_structure_points():
    assert Structure.road(1, 0, 1).points == 0
    assert Structure.settlement(1, 0).points == 1
    assert Structure.city(1, 0).points == 2


def test_road_needs_distinct_endpoints():
    with pytest.raises(ValueError):
        Structure.road(1, 4, 4)


def test_road_connects_either_direction():
    road = Structure.road(1, 3, 15)
    assert road.connects(15, 3)
    assert road.touches(3)
    assert not road.touches(4)
    with pytest.raises(AttributeError):
        road.vertex_id
