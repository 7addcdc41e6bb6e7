"""Base classes for the unit type system.

InvaderProfile -- frozen dataclass for invader health/stride
TowerStats     -- frozen dataclass for tower range/power/accuracy
DamageOutcome  -- enum for what a landed shot did
DamageResult   -- frozen record returned by every health mutation
UnitType       -- identity fields every concrete type sets
Invader        -- abstract contract every invader honours
PathInvader    -- single-body invader that walks the path step by step
TowerType      -- base for every tower type
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, ClassVar, Iterable, Optional

if TYPE_CHECKING:
    from towerdefense.simulation.path import Path
    from towerdefense.simulation.random_source import RandomSource
    from towerdefense.tactical.grid import MapLocation


class DamageOutcome(Enum):
    """What happened to an invader that a tower hit."""
    HIT = "hit"
    BLOCKED = "blocked"


@dataclass(frozen=True)
class DamageResult:
    """State transition produced by ``Invader.decrease_health``."""
    outcome: DamageOutcome
    amount: int
    health_before: int
    health_after: int
    neutralized: bool
    resurrected: bool = False  # first life lost, second life took over

    @property
    def applied(self) -> int:
        return self.health_before - self.health_after


@dataclass(frozen=True)
class InvaderProfile:
    """Immutable movement/health profile for an invader type."""
    health: int
    stride: int = 1


@dataclass(frozen=True)
class TowerStats:
    """Immutable weapon profile for a tower type."""
    weapon_range: int = 1
    power: int = 1
    accuracy: float = 0.75


class UnitType:
    """Identity shared by invaders and towers.

    Subclasses MUST set all ClassVar fields.  ``name`` is the per-level
    label used in narration and defaults to the display name.
    """

    type_id: ClassVar[str]
    display_name: ClassVar[str]

    def __init__(self, name: Optional[str] = None) -> None:
        self.name = name or self.display_name

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"


class Invader(UnitType, ABC):
    """Contract every invader type implements."""

    @property
    @abstractmethod
    def location(self) -> Optional[MapLocation]:
        """Current map location, or None once past the end of the path."""

    @property
    @abstractmethod
    def health(self) -> int:
        ...

    @property
    @abstractmethod
    def has_scored(self) -> bool:
        ...

    @property
    @abstractmethod
    def is_neutralized(self) -> bool:
        ...

    @property
    def is_active(self) -> bool:
        return not (self.is_neutralized or self.has_scored)

    @abstractmethod
    def move(self) -> None:
        """Advance along the path.

        Not guarded: on an inactive invader the step keeps growing.  The
        level only moves active invaders.
        """

    @abstractmethod
    def decrease_health(self, amount: int) -> DamageResult:
        ...


class PathInvader(Invader):
    """Invader with one body: a health pool and a step counter on a path."""

    profile: ClassVar[InvaderProfile] = InvaderProfile(health=2, stride=1)

    def __init__(self, path: Path, name: Optional[str] = None) -> None:
        super().__init__(name)
        self._path = path
        self._step = 0
        self._health = self.profile.health

    @property
    def path(self) -> Path:
        return self._path

    @property
    def step(self) -> int:
        return self._step

    @property
    def stride(self) -> int:
        return self.profile.stride

    @property
    def location(self) -> Optional[MapLocation]:
        return self._path.location_at(self._step)

    @property
    def health(self) -> int:
        return self._health

    @property
    def has_scored(self) -> bool:
        return self._step >= self._path.length

    @property
    def is_neutralized(self) -> bool:
        return self._health <= 0

    def move(self) -> None:
        self._step += self.profile.stride

    def decrease_health(self, amount: int) -> DamageResult:
        return self._take_hit(amount)

    def _take_hit(self, amount: int) -> DamageResult:
        """Subtract *amount* unconditionally; health may go negative."""
        before = self._health
        self._health -= amount
        return DamageResult(
            outcome=DamageOutcome.HIT,
            amount=amount,
            health_before=before,
            health_after=self._health,
            neutralized=self.is_neutralized,
        )


class TowerType(UnitType):
    """Stationary tower fixed to one map location for the whole level."""

    stats: ClassVar[TowerStats] = TowerStats()

    def __init__(self, location: MapLocation, name: Optional[str] = None) -> None:
        super().__init__(name)
        self._location = location

    @property
    def location(self) -> MapLocation:
        return self._location

    @property
    def weapon_range(self) -> int:
        return self.stats.weapon_range

    @property
    def power(self) -> int:
        return self.stats.power

    @property
    def accuracy(self) -> float:
        return self.stats.accuracy

    def can_target(self, invader: Invader) -> bool:
        """True if *invader* is active and within this tower's range."""
        if not invader.is_active:
            return False
        location = invader.location
        return location is not None and self._location.in_range_of(
            location, self.stats.weapon_range
        )

    def select_target(self, invaders: Iterable[Invader]) -> Optional[Invader]:
        """First eligible invader in the given order, or None."""
        for invader in invaders:
            if self.can_target(invader):
                return invader
        return None

    def is_successful_shot(self, rng: RandomSource) -> bool:
        return rng.next_uniform() < self.stats.accuracy
