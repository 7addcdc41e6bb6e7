"""ResurrectingInvader -- one logical invader with a hidden second life.

The invader is an ordered pair of basic incarnations that walk the same
path in lockstep.  Damage goes to the first incarnation until it is
neutralized, then to the second for good.  The switch is recorded once
in ``_current`` rather than re-derived on every call.

Presentation rules:
    location / health -- the current incarnation's values
    has_scored        -- either incarnation got through
    is_neutralized    -- both incarnations are down
"""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Optional

from towerdefense.units.base import DamageResult, Invader
from towerdefense.units.invaders.basic import BasicInvader

if TYPE_CHECKING:
    from towerdefense.simulation.path import Path
    from towerdefense.tactical.grid import MapLocation


class ResurrectingInvader(Invader):
    type_id = "resurrecting_invader"
    display_name = "Resurrecting Invader"

    def __init__(self, path: Path, name: Optional[str] = None) -> None:
        super().__init__(name)
        self._incarnations = (
            BasicInvader(path, name=f"{self.name} (1)"),
            BasicInvader(path, name=f"{self.name} (2)"),
        )
        self._current = 0

    @property
    def incarnations(self) -> tuple[BasicInvader, BasicInvader]:
        return self._incarnations

    @property
    def incarnation(self) -> int:
        """1 while the first life stands, 2 after it has fallen."""
        return self._current + 1

    @property
    def _presented(self) -> BasicInvader:
        return self._incarnations[self._current]

    @property
    def step(self) -> int:
        return self._presented.step

    @property
    def location(self) -> Optional[MapLocation]:
        return self._presented.location

    @property
    def health(self) -> int:
        return self._presented.health

    @property
    def has_scored(self) -> bool:
        return any(inc.has_scored for inc in self._incarnations)

    @property
    def is_neutralized(self) -> bool:
        return all(inc.is_neutralized for inc in self._incarnations)

    def move(self) -> None:
        for inc in self._incarnations:
            inc.move()

    def decrease_health(self, amount: int) -> DamageResult:
        result = self._presented.decrease_health(amount)
        resurrected = False
        if self._current == 0 and self._incarnations[0].is_neutralized:
            self._current = 1
            resurrected = True
        return dataclasses.replace(
            result, neutralized=self.is_neutralized, resurrected=resurrected
        )
