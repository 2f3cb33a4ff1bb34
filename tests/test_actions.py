"""
Tests for candidate enumeration and action execution.
"""

import pytest

from catan.actions import Action, ActionType, apply_action, get_legal_actions
from catan.event_log import EventType
from catan.exceptions import InvalidActionError
from catan.resources import ResourceHand, ResourceType
from catan.structures import StructureType


def _settle_with_road_chain(game, player_id=1):
    """Settlement at 0 with roads 0-6 and 6-7, leaving vertex 7 open."""
    game.place_settlement(player_id, 0)
    game.place_road(player_id, 0, 6)
    game.place_road(player_id, 6, 7)


def test_no_actions_without_resources(playing_game):
    _settle_with_road_chain(playing_game)
    assert get_legal_actions(playing_game, 1) == []


def test_city_tier_wins_over_cheaper_builds(playing_game):
    _settle_with_road_chain(playing_game)
    playing_game.players[1].hand = ResourceHand(wood=1, brick=1, wheat=3, sheep=1, ore=3)

    actions = get_legal_actions(playing_game, 1)

    assert actions == [Action.build_city(1, 0)]


def test_settlement_tier_before_roads(playing_game):
    _settle_with_road_chain(playing_game)
    playing_game.players[1].hand = ResourceHand(wood=1, brick=1, wheat=1, sheep=1)

    actions = get_legal_actions(playing_game, 1)

    assert actions == [Action.build_settlement(1, 7)]


def test_road_tier_lists_each_connected_edge(playing_game):
    _settle_with_road_chain(playing_game)
    playing_game.players[1].hand = ResourceHand(wood=1, brick=1)

    actions = get_legal_actions(playing_game, 1)

    assert all(a.action_type == ActionType.BUILD_ROAD for a in actions)
    edges = {(a.params["v1"], a.params["v2"]) for a in actions}
    assert edges == {(0, 1), (0, 5), (6, 23), (7, 8), (7, 24)}


def test_road_debits_cost(playing_game):
    _settle_with_road_chain(playing_game)
    player = playing_game.players[1]
    player.hand = ResourceHand(wood=2, brick=3, sheep=1)
    before = player.hand.copy()

    apply_action(playing_game, Action.build_road(1, 7, 8))

    assert player.hand.get(ResourceType.WOOD) == before.get(ResourceType.WOOD) - 1
    assert player.hand.get(ResourceType.BRICK) == before.get(ResourceType.BRICK) - 1
    assert player.hand.get(ResourceType.SHEEP) == 1
    assert playing_game.board.find_road(8, 7).owner_id == 1
    assert player.victory_points == 1


def test_settlement_awards_point(playing_game):
    _settle_with_road_chain(playing_game)
    player = playing_game.players[1]
    player.hand = ResourceHand(wood=1, brick=1, wheat=1, sheep=1)
    points = player.victory_points

    event = apply_action(playing_game, Action.build_settlement(1, 7))

    assert player.victory_points == points + 1
    assert player.total_cards() == 0
    assert playing_game.board.get_vertex(7).owner_id == 1
    assert event.event_type == EventType.BUILD_SETTLEMENT
    assert event.message == "Built settlement at vertex 7"


def test_city_adds_exactly_one_point(playing_game):
    _settle_with_road_chain(playing_game)
    player = playing_game.players[1]
    player.hand = ResourceHand(wheat=2, ore=4)
    points = player.victory_points

    apply_action(playing_game, Action.build_city(1, 0))

    assert player.victory_points == points + 1
    assert player.hand == ResourceHand(ore=1)
    assert [b.structure_type for b in player.buildings] == [StructureType.CITY]
    assert player.settlements == []
    assert playing_game.board.get_vertex(0).building.structure_type == StructureType.CITY


def test_pass_only_logs(playing_game):
    player = playing_game.players[2]
    player.hand = ResourceHand(wood=3)

    event = apply_action(playing_game, Action.pass_turn(2))

    assert event.event_type == EventType.PASS
    assert event.message == "Passed turn"
    assert player.hand == ResourceHand(wood=3)
    assert playing_game.event_log.action_entries() == [(0, 2, "Passed turn")]


def test_illegal_build_raises(playing_game):
    playing_game.place_settlement(2, 0)
    playing_game.players[1].hand = ResourceHand(wheat=2, ore=3)

    with pytest.raises(InvalidActionError):
        apply_action(playing_game, Action.build_city(1, 0))

    # Nothing was debited
    assert playing_game.players[1].total_cards() == 5


def test_unaffordable_build_raises(playing_game):
    with pytest.raises(InvalidActionError):
        apply_action(playing_game, Action.build_road(1, 0, 1))
    assert playing_game.board.roads == []


def test_action_messages():
    assert Action.build_road(1, 3, 4).describe() == "Built road between vertices 3 and 4"
    assert Action.build_city(1, 9).describe() == "Upgraded settlement to city at vertex 9"
    assert not Action.pass_turn(1).is_build
