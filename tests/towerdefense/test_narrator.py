"""Tests for narration of simulation events."""

from __future__ import annotations

import pytest
from loguru import logger

from towerdefense.comms.event_bus import EventBus
from towerdefense.narrator import Narrator, describe


pytestmark = pytest.mark.unit


@pytest.fixture
def log_lines():
    lines: list[str] = []
    handler_id = logger.add(lambda msg: lines.append(msg.record["message"]), level="DEBUG")
    yield lines
    logger.remove(handler_id)


class TestDescribe:
    def test_hit(self):
        level, text = describe({"type": "invader_hit",
                                "data": {"tower": "T", "target": "I"}})
        assert level == "INFO"
        assert text == "T shot at and hit I!"

    def test_miss(self):
        _, text = describe({"type": "shot_missed", "data": {"tower": "T", "target": "I"}})
        assert "MISSED" in text

    def test_blocked(self):
        _, text = describe({"type": "shot_blocked", "data": {"tower": "T", "target": "I"}})
        assert "shield" in text

    def test_neutralized_includes_location(self):
        _, text = describe({"type": "invader_neutralized",
                            "data": {"tower": "T", "target": "I", "location": "3 , 2"}})
        assert text == "Neutralized I at 3 , 2!"

    def test_turn_is_debug(self):
        level, _ = describe({"type": "turn_started", "data": {"turn": 1, "active": 5}})
        assert level == "DEBUG"

    def test_unknown_event_is_silent(self):
        assert describe({"type": "level_finished", "data": {}}) is None
        assert describe({"type": "whatever"}) is None


class TestNarrator:
    def test_flush_logs_pending_events(self, log_lines):
        bus = EventBus()
        narrator = Narrator(bus)
        bus.publish("invader_hit", {"tower": "T", "target": "I"})
        bus.publish("level_finished", {"verdict": "win", "turns": 1})
        assert narrator.flush() == 1
        assert log_lines == ["T shot at and hit I!"]
        assert narrator.flush() == 0

    def test_close_stops_listening(self, log_lines):
        bus = EventBus()
        narrator = Narrator(bus)
        narrator.close()
        bus.publish("invader_hit", {"tower": "T", "target": "I"})
        assert narrator.flush() == 0
        assert log_lines == []
