"""
Mapping from internal EventLog objects to canonical public JSON events.

The internal engine emits GameEvent objects where:
- event_type is event_log.EventType
- round_number is always set (0 during setup)
- player_id is optional
- details are the keyword arguments passed to EventLog.log

This module produces stable, JSONL-friendly dicts with consistent
event_type strings and payload keys.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List

from catan.event_log import EventType, GameEvent


def map_event(event: GameEvent) -> Dict[str, Any]:
    """
    Map a single GameEvent to a canonical JSON dict.

    Args:
        event: internal event object

    Returns:
        dict with keys: event_type (str), round_number, player_id (optional),
        and event-specific fields
    """
    d = event.details
    base: Dict[str, Any] = {"event_type": event.event_type.value, "round_number": event.round_number}
    if event.player_id is not None:
        base["player_id"] = event.player_id

    # Actions carry the human-readable log line
    if event.is_action:
        base.update(
            message=event.message,
            victory_points=d.get("victory_points"),
            cards=d.get("cards"),
        )
        if event.event_type == EventType.BUILD_ROAD:
            base.update(v1=d.get("v1"), v2=d.get("v2"))
        elif event.event_type != EventType.PASS:
            base.update(vertex=d.get("vertex"))
        return base

    if event.event_type == EventType.SETUP_PLACEMENT:
        base.update(message=event.message, structure=d.get("structure"))
        if d.get("structure") == "road":
            base.update(v1=d.get("v1"), v2=d.get("v2"))
        else:
            base.update(vertex=d.get("vertex"))
        return base

    if event.event_type == EventType.DICE_ROLL:
        base.update(die1=d.get("die1"), die2=d.get("die2"), total=d.get("total"))
        return base

    if event.event_type == EventType.PRODUCTION:
        resources = d.get("resources") or {}
        base.update(roll=d.get("roll"), resources=dict(resources), cards_gained=sum(resources.values()))
        return base

    if event.event_type == EventType.ROUND_SUMMARY:
        base.update(players=d.get("players", []))
        return base

    if event.event_type == EventType.GAME_START:
        players = d.get("players") or []
        base.update(
            player_names=players,
            num_players=len(players),
            max_rounds=d.get("max_rounds"),
            seed=d.get("seed"),
        )
        return base

    if event.event_type == EventType.GAME_END:
        base.pop("player_id", None)
        base.update(
            reason=d.get("reason"),
            winner_id=event.player_id,
            rounds_played=d.get("rounds_played"),
            final_standings=d.get("standings", []),
        )
        return base

    # Default: echo raw fields
    base.update(d)
    return base


def map_events(events: Iterable[GameEvent], start: int = 0) -> List[Dict[str, Any]]:
    """Map a sequence of GameEvent objects, numbering them with `seq`.

    Args:
        events: iterable of GameEvent
        start: `seq` of the first event, i.e. its index in the engine log
    """
    mapped: List[Dict[str, Any]] = []
    for idx, ev in enumerate(events, start=start):
        mev = map_event(ev)
        mev["seq"] = idx
        mapped.append(mev)
    return mapped
