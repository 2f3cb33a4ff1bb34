"""Shared test fixtures for Catan simulation tests."""

import pytest

from catan import GameConfig, Player, create_game


class FixedDice:
    """Dice stub that cycles through preset rolls."""

    def __init__(self, *rolls):
        self.rolls = list(rolls) or [(3, 4)]
        self.count = 0

    def roll(self):
        result = self.rolls[self.count % len(self.rolls)]
        self.count += 1
        return result


@pytest.fixture
def game_config():
    """Default game configuration with fixed seed for reproducibility."""
    return GameConfig(seed=42)


@pytest.fixture
def four_players():
    """Four test players."""
    return [
        Player(1, "Alice"),
        Player(2, "Bob"),
        Player(3, "Charlie"),
        Player(4, "Diana"),
    ]


@pytest.fixture
def game(game_config, four_players):
    """Fresh game still in setup, with an empty board."""
    return create_game(game_config, four_players)


@pytest.fixture
def playing_game(game):
    """Game moved straight to play without setup placements."""
    game.begin_play()
    return game


@pytest.fixture
def setup_game(game):
    """Game after the seeded setup phase."""
    game.run_setup()
    return game
