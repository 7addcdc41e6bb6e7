"""Map geometry -- grid bounds, locations, and range checks."""
from .grid import GameMap, MapLocation, distance, in_range

__all__ = [
    "GameMap",
    "MapLocation",
    "distance",
    "in_range",
]
