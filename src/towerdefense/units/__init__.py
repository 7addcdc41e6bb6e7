"""Unit type registry.

Import this package to access the full registry::

    from towerdefense.units import get_type, invader_type_ids

    sniper_cls = get_type("sniper_tower")   # -> SniperTower class
    print(sniper_cls.stats.accuracy)        # 1.0
    print(len(all_types()))                 # 8

The set of unit types is closed: every invader and tower variant is
registered explicitly below.
"""

from __future__ import annotations

from typing import Optional, Union

from towerdefense.units.base import (
    DamageOutcome,
    DamageResult,
    Invader,
    InvaderProfile,
    PathInvader,
    TowerStats,
    TowerType,
    UnitType,
)
from towerdefense.units.invaders import (
    BasicInvader,
    FastInvader,
    ResurrectingInvader,
    ShieldedInvader,
    ToughInvader,
)
from towerdefense.units.towers import PowerfulTower, SniperTower, StandardTower

__all__ = [
    "BasicInvader",
    "DamageOutcome",
    "DamageResult",
    "FastInvader",
    "Invader",
    "InvaderProfile",
    "PathInvader",
    "PowerfulTower",
    "ResurrectingInvader",
    "ShieldedInvader",
    "SniperTower",
    "StandardTower",
    "ToughInvader",
    "TowerStats",
    "TowerType",
    "UnitType",
    "all_types",
    "get_type",
    "invader_type_ids",
    "tower_type_ids",
]

_INVADER_TYPES: tuple[type[Invader], ...] = (
    BasicInvader,
    ToughInvader,
    FastInvader,
    ShieldedInvader,
    ResurrectingInvader,
)

_TOWER_TYPES: tuple[type[TowerType], ...] = (
    StandardTower,
    SniperTower,
    PowerfulTower,
)

_registry: dict[str, type[UnitType]] = {
    cls.type_id: cls for cls in (*_INVADER_TYPES, *_TOWER_TYPES)
}


def get_type(type_id: str) -> Optional[type[Union[Invader, TowerType]]]:
    """Return the unit class for *type_id*, or ``None``."""
    return _registry.get(type_id)


def all_types() -> list[type[UnitType]]:
    """Return every registered unit class (stable order by type_id)."""
    return [_registry[k] for k in sorted(_registry)]


def invader_type_ids() -> set[str]:
    return {cls.type_id for cls in _INVADER_TYPES}


def tower_type_ids() -> set[str]:
    return {cls.type_id for cls in _TOWER_TYPES}
