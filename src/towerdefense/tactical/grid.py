"""Grid geometry for the battlefield.

Coordinate convention:
    (0, 0) is the top-left cell.  +X runs along the width, +Y along the
    height.  A location is valid when ``0 <= x < width`` and
    ``0 <= y < height``.

Distances are Euclidean, truncated toward zero to an integer.  Tower
ranges are integers, so the truncation decides which cells a tower can
reach: a diagonal neighbour at sqrt(2) counts as distance 1.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from towerdefense.errors import InvalidPositionError


@dataclass(frozen=True)
class GameMap:
    """Rectangular grid that every location must fall inside."""

    width: int
    height: int

    def on_map(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def location(self, x: int, y: int) -> MapLocation:
        """Return a validated location on this map.

        Raises:
            InvalidPositionError: If (x, y) is off the grid.
        """
        return MapLocation(x, y, self)


@dataclass(frozen=True)
class MapLocation:
    """Immutable grid cell, validated against its map on creation."""

    x: int
    y: int
    game_map: GameMap = field(repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.game_map.on_map(self.x, self.y):
            raise InvalidPositionError(
                self.x, self.y, self.game_map.width, self.game_map.height
            )

    def distance_to(self, other: MapLocation) -> int:
        return distance(self, other)

    def in_range_of(self, other: MapLocation, weapon_range: int) -> bool:
        return in_range(self, other, weapon_range)

    def __str__(self) -> str:
        return f"{self.x} , {self.y}"


def distance(a: MapLocation, b: MapLocation) -> int:
    """Euclidean distance between two cells, truncated toward zero."""
    return int(math.hypot(a.x - b.x, a.y - b.y))


def in_range(a: MapLocation, b: MapLocation, weapon_range: int) -> bool:
    return distance(a, b) <= weapon_range
