"""
JSONL logger for Catan simulation events.

Logs all important game events to a JSONL file, one JSON object per line.
"""

import json
import logging
from datetime import datetime
from typing import Dict, List

from events.mapper import map_events

logger = logging.getLogger(__name__)


class GameLogger:
    """Logger that writes game events to a JSONL file."""

    def __init__(self, log_file: str = None):
        """
        Initialize game logger.

        Args:
            log_file: Path to log file. If None, generates timestamped filename.
        """
        if log_file is None:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            log_file = f"catan_game_{timestamp}.jsonl"

        self.log_file = log_file
        self.event_count = 0
        self._engine_last_idx = 0  # last flushed index from engine's internal EventLog

        # Create/clear log file
        with open(self.log_file, 'w'):
            pass

    def log_event(self, event_type: str, **kwargs):
        """
        Log a game event to JSONL file.

        Args:
            event_type: Type of event (e.g., "game_start", "dice_roll", "build_road")
            **kwargs: Additional event data
        """
        event = {
            "event_id": self.event_count,
            "timestamp": datetime.now().isoformat(),
            "event_type": event_type,
            **kwargs
        }

        with open(self.log_file, 'a') as f:
            f.write(json.dumps(event) + '\n')

        self.event_count += 1

    def flush_engine_events(self, game) -> int:
        """Flush new internal engine events to JSONL using the event mapper.

        Returns the number of events written.
        """
        events = game.event_log.events
        if self._engine_last_idx >= len(events):
            return 0

        new_events = events[self._engine_last_idx:]
        wrote = 0
        for m in map_events(new_events, start=self._engine_last_idx):
            # Enrich with names
            if "player_id" in m:
                m["player_name"] = game.players[m["player_id"]].name
            if m.get("event_type") == "game_end":
                wid = m.get("winner_id")
                m["winner_name"] = game.players[wid].name if wid is not None else None

            etype = m.pop("event_type")
            self.log_event(etype, **m)
            wrote += 1

        self._engine_last_idx = len(events)
        logger.debug(f"Flushed {wrote} engine events to {self.log_file}")
        return wrote

    def log_round_snapshot(self, game) -> None:
        """Log detailed state snapshots for all players at the end of a round."""
        for player_id in game.player_order:
            player = game.players[player_id]
            self.log_player_state_detailed(
                round_number=game.current_round,
                player_id=player_id,
                player_name=player.name,
                victory_points=player.victory_points,
                hand=player.hand.as_dict(),
                settlements=sorted(s.vertex_id for s in player.settlements),
                cities=sorted(c.vertex_id for c in player.cities),
                roads=[list(r.vertices) for r in player.roads],
            )

    def log_player_state_detailed(self, round_number: int, player_id: int, player_name: str,
                                  victory_points: int, hand: Dict[str, int],
                                  settlements: List[int], cities: List[int], roads: List[list]):
        """
        Log detailed player state snapshot.

        Args:
            round_number: Current round number
            player_id: Player ID
            player_name: Player name
            victory_points: Current score
            hand: Card counts by resource name
            settlements: Vertex ids holding the player's settlements
            cities: Vertex ids holding the player's cities
            roads: Road endpoints as [v1, v2] pairs
        """
        self.log_event(
            "player_state_detailed",
            round_number=round_number,
            player_id=player_id,
            player_name=player_name,
            victory_points=victory_points,
            hand=hand,
            total_cards=sum(hand.values()),
            settlements=settlements,
            cities=cities,
            roads=roads,
            roads_count=len(roads),
        )
