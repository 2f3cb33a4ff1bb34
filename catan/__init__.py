"""
Catan Simulation Engine

A deterministic (given a seed) simulation of four random agents building
roads, settlements and cities on a fixed 19-tile map.
"""

from .game import Dice, GamePhase, GameState, create_game
from .player import Player, PlayerState
from .board import Board
from .config import GameConfig

__all__ = [
    "Dice",
    "GamePhase",
    "GameState",
    "create_game",
    "Player",
    "PlayerState",
    "Board",
    "GameConfig",
]
