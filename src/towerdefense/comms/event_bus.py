"""EventBus -- pub/sub for simulation notifications.

The combat system and the level publish what happened (hits, misses,
blocked shots, neutralizations, turn boundaries).  Nothing in the
simulation reads these events back; they exist for observers such as
the console narrator and tests.

Each subscriber gets its own queue.  Queues are unbounded by default;
with a ``maxsize`` the oldest message is dropped to make room.
"""

from __future__ import annotations

import queue
from typing import Any, Optional


class EventBus:
    """Simple pub/sub for pushing events to subscribers."""

    def __init__(self, maxsize: int = 0) -> None:
        self._maxsize = maxsize
        self._subscribers: list[queue.Queue] = []

    def subscribe(self) -> queue.Queue:
        """Subscribe to events. Returns a Queue that receives all events."""
        q: queue.Queue = queue.Queue(maxsize=self._maxsize)
        self._subscribers.append(q)
        return q

    def unsubscribe(self, q: queue.Queue) -> None:
        try:
            self._subscribers.remove(q)
        except ValueError:
            pass

    def publish(self, event_type: str, data: Optional[dict[str, Any]] = None) -> None:
        msg: dict[str, Any] = {"type": event_type}
        if data is not None:
            msg["data"] = data
        for q in self._subscribers:
            try:
                q.put_nowait(msg)
            except queue.Full:
                # Drop oldest message to make room
                try:
                    q.get_nowait()
                except queue.Empty:
                    pass
                q.put_nowait(msg)


def drain(q: queue.Queue) -> list[dict[str, Any]]:
    """Pop every message currently waiting in *q*, oldest first."""
    messages: list[dict[str, Any]] = []
    while True:
        try:
            messages.append(q.get_nowait())
        except queue.Empty:
            return messages
