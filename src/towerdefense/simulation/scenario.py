"""LevelSetup -- the fixed roster a level is built from.

The game ships one hardcoded level, ``DEFAULT_SETUP``: an 8x5 map with a
straight path along row 2, five invaders (one of each type) and four
towers placed on row 3 beside the path.

Usage:
    level = build_level(DEFAULT_SETUP, rng=SeededRandomSource(7))
    verdict = level.play()

Building validates every coordinate; the first one off the map raises
InvalidPositionError and nothing is built.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from towerdefense.tactical.grid import GameMap
from towerdefense.units import get_type
from towerdefense.units.base import Invader, TowerType
from towerdefense.units.invaders import ShieldedInvader

from .level import Level
from .path import Path
from .random_source import RandomSource, SeededRandomSource

if TYPE_CHECKING:
    from towerdefense.comms.event_bus import EventBus


@dataclass(frozen=True)
class TowerPlacement:
    """A tower type fixed to one map cell."""

    type_id: str
    position: tuple[int, int]


@dataclass(frozen=True)
class LevelSetup:
    """Complete level definition."""

    width: int
    height: int
    path: tuple[tuple[int, int], ...]
    invaders: tuple[str, ...]
    towers: tuple[TowerPlacement, ...] = field(default_factory=tuple)


DEFAULT_SETUP = LevelSetup(
    width=8,
    height=5,
    path=tuple((x, 2) for x in range(8)),
    invaders=(
        "basic_invader",
        "shielded_invader",
        "fast_invader",
        "tough_invader",
        "resurrecting_invader",
    ),
    towers=(
        TowerPlacement("standard_tower", (7, 3)),
        TowerPlacement("standard_tower", (1, 3)),
        TowerPlacement("sniper_tower", (3, 3)),
        TowerPlacement("powerful_tower", (5, 3)),
    ),
)


def _unit_class(type_id: str, base: type):
    cls = get_type(type_id)
    if cls is None or not issubclass(cls, base):
        raise ValueError(f"unknown {base.__name__} type: {type_id!r}")
    return cls


def build_invader(type_id: str, path: Path, rng: RandomSource,
                  name: Optional[str] = None) -> Invader:
    """Instantiate one invader bound to *path*."""
    cls = _unit_class(type_id, Invader)
    if issubclass(cls, ShieldedInvader):
        return cls(path, rng, name=name)
    return cls(path, name=name)


def build_tower(placement: TowerPlacement, game_map: GameMap,
                name: Optional[str] = None) -> TowerType:
    """Instantiate one tower at its validated map location."""
    cls = _unit_class(placement.type_id, TowerType)
    x, y = placement.position
    return cls(game_map.location(x, y), name=name)


def build_level(
    setup: LevelSetup = DEFAULT_SETUP,
    rng: Optional[RandomSource] = None,
    event_bus: Optional[EventBus] = None,
) -> Level:
    """Build a ready-to-play Level from *setup*.

    Raises:
        InvalidPositionError: If a path cell or tower sits off the map.
        ValueError: If the setup names an unknown unit type.
    """
    if rng is None:
        rng = SeededRandomSource()

    game_map = GameMap(setup.width, setup.height)
    path = Path.from_coordinates(game_map, setup.path)

    invaders = []
    for i, type_id in enumerate(setup.invaders, start=1):
        cls = _unit_class(type_id, Invader)
        invaders.append(build_invader(type_id, path, rng,
                                      name=f"{cls.display_name} #{i}"))

    towers = []
    for i, placement in enumerate(setup.towers, start=1):
        cls = _unit_class(placement.type_id, TowerType)
        towers.append(build_tower(placement, game_map,
                                  name=f"{cls.display_name} #{i}"))

    return Level(invaders, towers, rng=rng, event_bus=event_bus)
