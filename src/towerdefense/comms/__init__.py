"""Notification plumbing between the simulation and its observers."""
from .event_bus import EventBus, drain

__all__ = ["EventBus", "drain"]
