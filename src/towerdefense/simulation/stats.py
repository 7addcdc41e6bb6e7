"""LevelStats -- after-action statistics for one playthrough.

Per-tower stats (TowerStatsRecord):
  Shots fired, hits landed, hits absorbed by shields, misses, damage
  dealt, and neutralizations credited to the tower.  Computed property:
  accuracy (landed / fired).

Level totals (LevelStats):
  Turns played plus the sums of the per-tower counters.  Fed by the
  combat system after every resolved shot and by the level after every
  turn; nothing in the simulation reads it back.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from towerdefense.units.base import DamageOutcome

if TYPE_CHECKING:
    from towerdefense.units.base import TowerType
    from .combat import ShotReport


@dataclass
class TowerStatsRecord:
    """Per-tower combat statistics."""

    name: str
    type_id: str

    shots_fired: int = 0
    hits: int = 0
    blocked: int = 0
    misses: int = 0
    damage_dealt: int = 0
    neutralized: int = 0

    @property
    def accuracy(self) -> float:
        """Landed shots (hit or blocked) / shots fired.  0 if none fired."""
        if self.shots_fired == 0:
            return 0.0
        return (self.hits + self.blocked) / self.shots_fired

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "type_id": self.type_id,
            "shots_fired": self.shots_fired,
            "hits": self.hits,
            "blocked": self.blocked,
            "misses": self.misses,
            "damage_dealt": self.damage_dealt,
            "neutralized": self.neutralized,
            "accuracy": round(self.accuracy, 4),
        }


@dataclass
class LevelStats:
    """Aggregate statistics for a whole level."""

    turns_played: int = 0
    towers: dict[int, TowerStatsRecord] = field(default_factory=dict)  # keyed by id(tower)

    def record_shot(self, report: ShotReport) -> None:
        tower = report.tower
        record = self.towers.get(id(tower))
        if record is None:
            record = TowerStatsRecord(name=tower.name, type_id=tower.type_id)
            self.towers[id(tower)] = record

        record.shots_fired += 1
        damage = report.damage
        if damage is None:
            record.misses += 1
            return
        if damage.outcome is DamageOutcome.BLOCKED:
            record.blocked += 1
        else:
            record.hits += 1
            record.damage_dealt += damage.applied
        if report.neutralized:
            record.neutralized += 1

    def for_tower(self, tower: TowerType) -> Optional[TowerStatsRecord]:
        return self.towers.get(id(tower))

    def record_turn(self) -> None:
        self.turns_played += 1

    @property
    def shots_fired(self) -> int:
        return sum(r.shots_fired for r in self.towers.values())

    @property
    def hits(self) -> int:
        return sum(r.hits for r in self.towers.values())

    @property
    def blocked(self) -> int:
        return sum(r.blocked for r in self.towers.values())

    @property
    def misses(self) -> int:
        return sum(r.misses for r in self.towers.values())

    @property
    def damage_dealt(self) -> int:
        return sum(r.damage_dealt for r in self.towers.values())

    @property
    def neutralized(self) -> int:
        return sum(r.neutralized for r in self.towers.values())

    def to_dict(self) -> dict:
        return {
            "turns_played": self.turns_played,
            "shots_fired": self.shots_fired,
            "hits": self.hits,
            "blocked": self.blocked,
            "misses": self.misses,
            "damage_dealt": self.damage_dealt,
            "neutralized": self.neutralized,
            "towers": [r.to_dict() for r in self.towers.values()],
        }
