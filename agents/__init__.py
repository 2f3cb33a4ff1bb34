from agents.base import Agent
from agents.random import RandomAgent

__all__ = [
    "Agent",
    "RandomAgent",
]
