"""CombatSystem -- target selection, accuracy rolls, and damage resolution.

Architecture
------------
Resolution is split in two layers:

  1. ``fire_on()`` is the pure rule.  The tower scans invaders in their
     fixed creation order and locks onto the *first* one that is active
     and within range; it never considers another invader that turn,
     even if several are in range.  With a target it draws one uniform
     value: below the tower's accuracy the shot lands and
     ``decrease_health(power)`` is applied, otherwise it is a miss.
     Without a target nothing happens and no random value is drawn.

  2. ``CombatSystem.fire()`` runs the rule with the level's shared random
     source, records the shot in LevelStats, and publishes what happened
     on the EventBus.  The invaders themselves never print or publish.

A shielded target rolls its own shield *after* the tower's accuracy roll,
so a landed shot on a shielded invader costs two draws.

Events are published on the EventBus for the narrator:
  - ``shot_missed``: accuracy roll failed
  - ``invader_hit``: damage applied
  - ``shot_blocked``: shield absorbed a landed shot
  - ``invader_resurrected``: first life lost, second life takes over
  - ``invader_neutralized``: the invader is out (after ``invader_hit``)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional, Sequence

from towerdefense.units.base import DamageOutcome

if TYPE_CHECKING:
    from towerdefense.comms.event_bus import EventBus
    from towerdefense.tactical.grid import MapLocation
    from towerdefense.units.base import DamageResult, Invader, TowerType
    from .random_source import RandomSource
    from .stats import LevelStats


class ShotOutcome(Enum):
    """Result of one tower's turn against its target."""
    MISSED = "missed"
    HIT = "hit"
    BLOCKED = "blocked"


@dataclass(frozen=True)
class ShotReport:
    """Everything that happened when one tower fired."""

    tower: TowerType
    target: Invader
    outcome: ShotOutcome
    damage: Optional[DamageResult] = None  # None on a miss
    location: Optional[MapLocation] = None  # target location after the shot

    @property
    def neutralized(self) -> bool:
        return self.damage is not None and self.damage.neutralized

    @property
    def resurrected(self) -> bool:
        return self.damage is not None and self.damage.resurrected


def fire_on(
    tower: TowerType, invaders: Sequence[Invader], rng: RandomSource
) -> Optional[ShotReport]:
    """Let *tower* take its one shot of the turn.

    Returns None when no active invader is in range.
    """
    target = tower.select_target(invaders)
    if target is None:
        return None

    if not tower.is_successful_shot(rng):
        return ShotReport(
            tower=tower, target=target, outcome=ShotOutcome.MISSED,
            location=target.location,
        )

    damage = target.decrease_health(tower.power)
    outcome = (ShotOutcome.BLOCKED if damage.outcome is DamageOutcome.BLOCKED
               else ShotOutcome.HIT)
    return ShotReport(
        tower=tower, target=target, outcome=outcome, damage=damage,
        location=target.location,
    )


class CombatSystem:
    """Resolves tower fire and publishes the outcome."""

    def __init__(self, event_bus: EventBus, rng: RandomSource,
                 stats: Optional[LevelStats] = None) -> None:
        self._event_bus = event_bus
        self._rng = rng
        self._stats = stats

    def fire(self, tower: TowerType,
             invaders: Sequence[Invader]) -> Optional[ShotReport]:
        """Fire *tower* at *invaders*; returns the ShotReport or None."""
        report = fire_on(tower, invaders, self._rng)
        if report is None:
            return None
        if self._stats is not None:
            self._stats.record_shot(report)
        self._publish(report)
        return report

    def _publish(self, report: ShotReport) -> None:
        base = {
            "tower": report.tower.name,
            "target": report.target.name,
            "target_type": report.target.type_id,
        }

        if report.outcome is ShotOutcome.MISSED:
            self._event_bus.publish("shot_missed", base)
            return

        if report.outcome is ShotOutcome.BLOCKED:
            self._event_bus.publish("shot_blocked", base)
            return

        damage = report.damage
        location = str(report.location) if report.location is not None else None
        self._event_bus.publish("invader_hit", {
            **base,
            "damage": damage.applied,
            "remaining_health": damage.health_after,
        })
        if report.resurrected and not report.neutralized:
            self._event_bus.publish("invader_resurrected", {
                **base,
                "location": location,
            })
        if report.neutralized:
            self._event_bus.publish("invader_neutralized", {
                **base,
                "location": location,
            })
