"""Canonical public event mapping."""

from events.mapper import map_event, map_events

__all__ = ["map_event", "map_events"]
