"""
Tests for turn and round orchestration.
"""

import random

from agents import RandomAgent
from catan import GameConfig, GamePhase, create_game
from catan.event_log import EventType
from catan.resources import ResourceHand
from catan.rules import respects_distance_rule
from catan.simulation import END_ROUND_LIMIT, END_VICTORY, Simulation

from conftest import FixedDice


def _never_passing_agents(game):
    return [
        RandomAgent(pid, game.players[pid].name, rng=random.Random(pid), pass_probability=0.0)
        for pid in game.player_order
    ]


def test_always_seven_means_no_production(four_players):
    """Empty hands and no production: every turn of ten rounds is a pass."""
    game = create_game(GameConfig(seed=3, max_rounds=10), four_players, dice=FixedDice((3, 4)))
    game.begin_play()

    result = Simulation(game).start_simulation()

    assert result.rounds_played == 10
    assert result.end_reason == END_ROUND_LIMIT
    assert game.phase == GamePhase.FINISHED
    assert game.event_log.events_of_type(EventType.PRODUCTION) == []
    assert all(e.details["total"] == 7 for e in game.event_log.events_of_type(EventType.DICE_ROLL))

    entries = game.event_log.action_entries()
    assert len(entries) == 40
    assert all(message == "Passed turn" for _, _, message in entries)
    assert all(p.total_cards() == 0 for p in game.players.values())


def test_obligation_forces_builds(playing_game):
    """Eight wood+brick pairs: build roads until the hand is back under the limit."""
    player = playing_game.players[1]
    player.hand = ResourceHand(wood=8, brick=8)
    simulation = Simulation(playing_game)

    events = simulation.take_turn(1)

    assert events
    assert all(e.event_type == EventType.BUILD_ROAD for e in events)
    # 16 -> 14 -> 12 -> 10 -> 8 -> 6 cards
    assert len(events) == 5
    assert player.total_cards() == 6
    assert len(player.roads) == 5


def test_obligation_ends_when_nothing_is_legal(playing_game):
    """Cards the player cannot spend: a single logged pass ends the turn."""
    player = playing_game.players[2]
    player.hand = ResourceHand(sheep=9)

    events = Simulation(playing_game).take_turn(2)

    assert [e.event_type for e in events] == [EventType.PASS]
    assert player.total_cards() == 9


def test_obligation_pass_not_logged_after_builds(playing_game):
    """Forced builds that leave the player stuck over the limit log no pass."""
    player = playing_game.players[1]
    player.hand = ResourceHand(wood=1, brick=1, sheep=8)

    events = Simulation(playing_game).take_turn(1)

    assert [e.event_type for e in events] == [EventType.BUILD_ROAD]
    assert player.total_cards() == 8


def test_single_decision_under_the_limit(playing_game):
    player = playing_game.players[3]
    player.hand = ResourceHand(wood=2, brick=2)
    simulation = Simulation(playing_game, agents=_never_passing_agents(playing_game))

    events = simulation.take_turn(3)

    assert [e.event_type for e in events] == [EventType.BUILD_ROAD]
    assert player.total_cards() == 2


def test_empty_hand_passes(playing_game):
    events = Simulation(playing_game).take_turn(4)
    assert [e.message for e in events] == ["Passed turn"]


def test_victory_ends_after_first_round(four_players):
    game = create_game(GameConfig(seed=11, max_rounds=1), four_players)
    game.begin_play()
    game.players[3].victory_points = 10

    result = Simulation(game).start_simulation()

    assert game.phase == GamePhase.FINISHED
    assert result.winner == 3
    assert result.end_reason == END_VICTORY
    assert result.rounds_played == 1


def test_victory_stops_before_round_two(four_players):
    game = create_game(GameConfig(seed=11, max_rounds=5), four_players)
    game.begin_play()
    game.players[2].victory_points = 10

    result = Simulation(game).start_simulation()

    assert result.winner == 2
    assert result.rounds_played == 1
    assert len(game.event_log.events_of_type(EventType.ROUND_START)) == 1
    # Every player still took a turn in the winning round
    assert len(game.event_log.events_of_type(EventType.DICE_ROLL)) == 4


def test_round_summary_is_logged(playing_game):
    summary = Simulation(playing_game).run_round()

    assert [s["player_id"] for s in summary] == [1, 2, 3, 4]
    assert set(summary[0]["hand"]) == {"wood", "brick", "wheat", "sheep", "ore"}
    logged = playing_game.event_log.events_of_type(EventType.ROUND_SUMMARY)
    assert logged[-1].details["players"] == summary
    assert logged[-1].round_number == 1


def test_full_run_keeps_distance_rule(four_players):
    game = create_game(GameConfig(seed=2024, max_rounds=60), four_players)
    violations = []

    def check(event):
        if event.event_type in (EventType.BUILD_SETTLEMENT, EventType.SETUP_PLACEMENT):
            for vertex in game.board.occupied_vertices():
                if not respects_distance_rule(game.board, vertex.vertex_id):
                    violations.append(vertex.vertex_id)

    game.event_log.subscribe(check)
    result = Simulation(game).start_simulation()

    assert violations == []
    assert game.phase == GamePhase.FINISHED
    assert result.rounds_played <= 60
    for player in game.players.values():
        points = sum(b.points for b in player.buildings)
        assert player.victory_points == points
        assert all(n >= 0 for n in player.hand.as_dict().values())


def test_actions_logged_in_round_order(four_players):
    game = create_game(GameConfig(seed=8, max_rounds=20), four_players)
    Simulation(game).start_simulation()

    rounds = [r for r, _, _ in game.event_log.action_entries()]
    assert rounds == sorted(rounds)
    assert rounds[0] == 1


def test_same_seed_same_game(four_players):
    logs = []
    for _ in range(2):
        game = create_game(GameConfig(seed=77, max_rounds=15), four_players)
        Simulation(game).start_simulation()
        logs.append(game.event_log.action_entries())
    assert logs[0] == logs[1]
