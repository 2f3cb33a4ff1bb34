"""
Custom exception hierarchy for the Catan simulation engine.

Illegal moves are never raised: they are filtered out of an agent's
candidate list. These errors signal broken invariants or bad wiring.
"""


class CatanError(Exception):
    """Base exception for all simulation errors."""


class BoardTopologyError(CatanError):
    """Board construction produced an invalid graph."""


class SetupError(CatanError):
    """Initial placement could not find a legal vertex."""


class InvalidActionError(CatanError):
    """Action is not legal in the current state."""


class ConfigurationError(CatanError):
    """Programmatic configuration is invalid."""
