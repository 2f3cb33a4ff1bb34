"""
Game event logging.

Every event carries the round it happened in and, for player events, the
acting player id. Action events (builds and passes) also carry a
human-readable message; together these form the `(round, player_id,
message)` entries consumed by the console and JSONL sinks.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple


class EventType(Enum):
    """Types of game events."""

    GAME_START = "game_start"
    SETUP_PLACEMENT = "setup_placement"
    SETUP_COMPLETE = "setup_complete"
    ROUND_START = "round_start"
    DICE_ROLL = "dice_roll"
    PRODUCTION = "production"

    BUILD_ROAD = "build_road"
    BUILD_SETTLEMENT = "build_settlement"
    BUILD_CITY = "build_city"
    PASS = "pass"

    ROUND_SUMMARY = "round_summary"
    GAME_END = "game_end"


ACTION_EVENTS = frozenset(
    {EventType.BUILD_ROAD, EventType.BUILD_SETTLEMENT, EventType.BUILD_CITY, EventType.PASS}
)


@dataclass
class GameEvent:
    """A logged event in the game."""

    event_type: EventType
    round_number: int
    player_id: Optional[int] = None
    message: str = ""
    details: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_action(self) -> bool:
        return self.event_type in ACTION_EVENTS

    def __repr__(self) -> str:
        player_str = f"P{self.player_id}" if self.player_id is not None else "System"
        return f"[{self.round_number}] [{player_str}] {self.event_type.value}: {self.message or self.details}"


EventListener = Callable[[GameEvent], None]


class EventLog:
    """Manages the game event log and notifies subscribed sinks."""

    def __init__(self):
        self.events: List[GameEvent] = []
        self._listeners: List[EventListener] = []

    def subscribe(self, listener: EventListener) -> None:
        """Register a callback invoked synchronously for every new event."""
        self._listeners.append(listener)

    def log(
        self,
        event_type: EventType,
        round_number: int,
        player_id: Optional[int] = None,
        message: str = "",
        **details: Any,
    ) -> GameEvent:
        """Log a game event."""
        event = GameEvent(event_type, round_number, player_id, message, details)
        self.events.append(event)
        for listener in self._listeners:
            listener(event)
        return event

    def events_of_type(self, event_type: EventType) -> List[GameEvent]:
        return [e for e in self.events if e.event_type == event_type]

    def action_entries(self) -> List[Tuple[int, int, str]]:
        """Build and pass events as (round, player_id, message), in order."""
        return [(e.round_number, e.player_id, e.message) for e in self.events if e.is_action]
