"""Exception types raised by the simulation."""

from __future__ import annotations


class TowerDefenseError(Exception):
    """Base class for every error the simulation raises."""


class InvalidPositionError(TowerDefenseError):
    """A map location was requested outside the map boundaries."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        super().__init__(f"{x},{y} is outside the boundaries of the map.")


class LevelFinishedError(TowerDefenseError):
    """A turn was requested on a level that already has a verdict."""
