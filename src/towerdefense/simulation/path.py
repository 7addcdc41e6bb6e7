"""Path -- the fixed route every invader walks, indexed by step.

Invaders never hold a location of their own; they hold a step counter
and ask the path where that step lies.  Any step at or beyond the end
of the path has no location (``None``) and means the invader got
through.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from towerdefense.tactical.grid import GameMap, MapLocation


class Path:
    """Immutable ordered sequence of map locations."""

    def __init__(self, locations: Iterable[MapLocation]) -> None:
        self._locations: tuple[MapLocation, ...] = tuple(locations)

    @classmethod
    def from_coordinates(
        cls, game_map: GameMap, coordinates: Iterable[tuple[int, int]]
    ) -> Path:
        """Build a path from raw (x, y) pairs, validating each one.

        Raises:
            InvalidPositionError: On the first pair outside the map.
        """
        return cls(game_map.location(x, y) for x, y in coordinates)

    @property
    def length(self) -> int:
        return len(self._locations)

    def location_at(self, step: int) -> Optional[MapLocation]:
        """Return the location at *step*, or None once past the end."""
        if 0 <= step < len(self._locations):
            return self._locations[step]
        return None

    def __len__(self) -> int:
        return len(self._locations)

    def __iter__(self) -> Iterator[MapLocation]:
        return iter(self._locations)

    def __repr__(self) -> str:
        return f"<Path length={self.length}>"
