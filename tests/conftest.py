"""Shared fixtures for tower defense tests."""

from __future__ import annotations

import pytest

from towerdefense.comms.event_bus import EventBus
from towerdefense.simulation.path import Path
from towerdefense.tactical.grid import GameMap


@pytest.fixture
def game_map() -> GameMap:
    return GameMap(8, 5)


@pytest.fixture
def make_path(game_map):
    """Factory for a straight path along row 2 of *length* cells."""

    def _make(length: int = 8) -> Path:
        return Path.from_coordinates(game_map, [(x, 2) for x in range(length)])

    return _make


@pytest.fixture
def path(make_path) -> Path:
    return make_path(8)


@pytest.fixture
def event_bus() -> EventBus:
    return EventBus()


@pytest.fixture
def events(event_bus):
    """Queue subscribed to *event_bus* before anything is published."""
    return event_bus.subscribe()
