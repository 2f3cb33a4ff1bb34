"""
Simulation settings using pydantic-settings.

Values come from (highest priority first) explicit overrides, environment
variables (prefix: CATAN_), a `.env` file, and the `turns: <int>` line of
the plain-text config file. Bad input never aborts a run: it falls back to
the default and logs a warning.

Example config.txt:
    # Catan Simulator Configuration
    turns: 100
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from catan.config import PLAYERS_PER_GAME, GameConfig, clamp_turns

logger = logging.getLogger(__name__)

DEFAULT_TURNS = 100
DEFAULT_CONFIG_FILE = "config.txt"


def read_turns_from_file(path: Union[str, Path], default: int = DEFAULT_TURNS) -> int:
    """
    Read the `turns:` value from a plain-text config file.

    Blank lines and lines starting with `#` are ignored. The value is
    clamped to [1, 8192].

    Args:
        path: Config file location.
        default: Value used when the file is unreadable or has no valid `turns:` line.

    Returns:
        The clamped turn count
    """
    turns = default
    try:
        lines = Path(path).read_text(encoding="utf-8").splitlines()
    except OSError as e:
        logger.warning(f"Could not read config file {path} ({e}), using default turns: {default}")
        return default

    for raw in lines:
        line = raw.strip()
        if not line or line.startswith("#") or not line.startswith("turns:"):
            continue
        value = line.split(":", 1)[1].strip()
        try:
            turns = clamp_turns(int(value))
        except ValueError:
            logger.warning(f"Invalid turns value {value!r} in {path}, keeping turns: {turns}")

    return turns


class SimulationSettings(BaseSettings):
    """
    Configuration for a simulation run.

    Environment variables (prefix: CATAN_):
        CATAN_TURNS       - Turn budget, clamped to [1, 8192] (default: 100)
        CATAN_SEED        - Seed for dice, setup and agents (default: unseeded)
        CATAN_CONFIG_FILE - Plain-text config file (default: config.txt)
        CATAN_LOG_FILE    - JSONL event log path (default: auto-generated)
        CATAN_LOG_LEVEL   - Python logging level (default: WARNING)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_prefix="CATAN_",
    )

    turns: int = Field(default=DEFAULT_TURNS, description="Turn budget; one round is four turns.")
    seed: Optional[int] = Field(default=None, description="Seed for reproducible runs.")
    config_file: str = Field(default=DEFAULT_CONFIG_FILE, description="Plain-text config file.")
    log_file: Optional[str] = Field(default=None, description="JSONL event log path.")
    log_level: str = Field(default="WARNING", description="Python logging level.")
    victory_points_to_win: int = Field(default=10, gt=0)

    @field_validator("turns", mode="before")
    @classmethod
    def clamp_turn_budget(cls, value: Any) -> int:
        """
        Clamp to [1, 8192]; a value that is not an integer falls back to the default.
        """
        try:
            return clamp_turns(int(value))
        except (TypeError, ValueError):
            logger.warning(f"Invalid turns value {value!r}, using default: {DEFAULT_TURNS}")
            return DEFAULT_TURNS

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: Any) -> str:
        level = str(value or "WARNING").upper()
        if not isinstance(logging.getLevelName(level), int):
            logger.warning(f"Unknown log level {value!r}, using WARNING")
            return "WARNING"
        return level

    @property
    def max_rounds(self) -> int:
        """Rounds the orchestrator may run: one round is one turn per player."""
        return self.turns // PLAYERS_PER_GAME

    def to_game_config(self) -> GameConfig:
        return GameConfig(
            max_rounds=self.max_rounds,
            victory_points_to_win=self.victory_points_to_win,
            seed=self.seed,
        )


def load_settings(config_file: Optional[str] = None, **overrides: Any) -> SimulationSettings:
    """
    Build settings from the environment, then apply the config file's turns.

    The config file only supplies `turns` when neither an override nor the
    CATAN_TURNS environment variable does.

    Args:
        config_file: Plain-text config file; defaults to the configured one.
        **overrides: Explicit field values (e.g. from CLI flags). None values
            are ignored.

    Returns:
        Validated settings
    """
    overrides = {k: v for k, v in overrides.items() if v is not None}
    settings = SimulationSettings(**overrides)

    if "turns" not in settings.model_fields_set:
        path = config_file or settings.config_file
        if Path(path).exists():
            settings = settings.model_copy(update={"turns": read_turns_from_file(path)})
        else:
            logger.info(f"No config file at {path}, using turns: {settings.turns}")

    return settings

