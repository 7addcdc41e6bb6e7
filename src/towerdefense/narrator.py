"""Narrator -- turns EventBus messages into readable log lines.

The simulation never writes output itself.  The narrator subscribes to
the level's EventBus and, on each ``flush()``, logs every pending event
through loguru.  The CLI flushes after every turn so narration stays in
step with play.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from loguru import logger

from towerdefense.comms.event_bus import EventBus, drain

_Formatter = Callable[[dict[str, Any]], str]

_FORMATS: dict[str, tuple[str, _Formatter]] = {
    "turn_started": (
        "DEBUG",
        lambda d: f"--- Turn {d['turn']} ({d['active']} invaders active) ---",
    ),
    "shot_missed": (
        "INFO",
        lambda d: f"{d['tower']} shot at and MISSED {d['target']}.",
    ),
    "invader_hit": (
        "INFO",
        lambda d: f"{d['tower']} shot at and hit {d['target']}!",
    ),
    "shot_blocked": (
        "INFO",
        lambda d: f"{d['tower']} shot at {d['target']} but its shield absorbed the damage.",
    ),
    "invader_resurrected": (
        "INFO",
        lambda d: f"{d['target']} went down at {d['location']}... and rose again!",
    ),
    "invader_neutralized": (
        "INFO",
        lambda d: f"Neutralized {d['target']} at {d['location']}!",
    ),
    "invader_scored": (
        "INFO",
        lambda d: f"{d['target']} reached the end of the path!",
    ),
}


def describe(message: dict[str, Any]) -> Optional[tuple[str, str]]:
    """Return ``(level, text)`` for a bus message, or None if it is not narrated."""
    fmt = _FORMATS.get(message.get("type", ""))
    if fmt is None:
        return None
    level, render = fmt
    return level, render(message.get("data", {}))


class Narrator:
    """Logs simulation events as they happen."""

    def __init__(self, event_bus: EventBus) -> None:
        self._event_bus = event_bus
        self._queue = event_bus.subscribe()

    def flush(self) -> int:
        """Log every pending event; returns how many lines were logged."""
        count = 0
        for message in drain(self._queue):
            described = describe(message)
            if described is None:
                continue
            level, text = described
            logger.log(level, text)
            count += 1
        return count

    def close(self) -> None:
        self._event_bus.unsubscribe(self._queue)
