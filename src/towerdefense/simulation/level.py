"""Level -- the turn loop that drives towers and invaders to a verdict.

Architecture
------------
A Level owns a fixed roster of invaders and towers for one playthrough.
Nothing is added or removed during play; invaders that are neutralized
or get through simply stop being active.

Each turn has two phases:

  1. Fire phase -- every tower, in roster order, takes one shot through
     the CombatSystem.  Damage lands immediately, so a later tower in the
     same phase already sees the earlier towers' results.

  2. Move phase -- every active invader, in roster order, moves once.
     The first invader to reach the end of the path ends the level as a
     LOSS on the spot; invaders after it in the roster do not move.

After the move phase the active invaders are recounted.  None left means
a WIN.  There is no turn limit: every active invader's step grows each
turn and the path is finite, so each one is eventually neutralized or
gets through.

Events published on the EventBus:
  - ``turn_started``: a new turn begins
  - ``invader_scored``: an invader reached the end of the path
  - ``level_finished``: verdict reached
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Iterable, Optional

from loguru import logger

from towerdefense.comms.event_bus import EventBus
from towerdefense.errors import LevelFinishedError

from .combat import CombatSystem, ShotReport
from .random_source import SeededRandomSource
from .stats import LevelStats

if TYPE_CHECKING:
    from towerdefense.units.base import Invader, TowerType
    from .random_source import RandomSource


class Verdict(Enum):
    """Terminal outcome of a playthrough."""
    WIN = "win"
    LOSS = "loss"


@dataclass
class TurnReport:
    """What happened during one turn."""

    turn: int
    shots: list[ShotReport] = field(default_factory=list)
    moved: list[Invader] = field(default_factory=list)
    active_count: int = 0
    scored: Optional[Invader] = None
    verdict: Optional[Verdict] = None


class Level:
    """One playthrough: fixed invaders, fixed towers, one shared random source."""

    def __init__(
        self,
        invaders: Iterable[Invader],
        towers: Iterable[TowerType] = (),
        rng: Optional[RandomSource] = None,
        event_bus: Optional[EventBus] = None,
    ) -> None:
        self._invaders: tuple[Invader, ...] = tuple(invaders)
        self._towers: tuple[TowerType, ...] = tuple(towers)
        self._rng = rng if rng is not None else SeededRandomSource()
        self._event_bus = event_bus if event_bus is not None else EventBus()
        self.stats = LevelStats()
        self._combat = CombatSystem(self._event_bus, self._rng, self.stats)
        self._active_count = len(self._invaders)
        self._turn = 0
        self._verdict: Optional[Verdict] = None

    @property
    def invaders(self) -> tuple[Invader, ...]:
        return self._invaders

    @property
    def towers(self) -> tuple[TowerType, ...]:
        return self._towers

    @property
    def event_bus(self) -> EventBus:
        return self._event_bus

    @property
    def active_count(self) -> int:
        return self._active_count

    @property
    def turn(self) -> int:
        """Number of turns played so far."""
        return self._turn

    @property
    def verdict(self) -> Optional[Verdict]:
        return self._verdict

    @property
    def is_finished(self) -> bool:
        return self._verdict is not None

    def play(self) -> Verdict:
        """Run turns until the level is won or lost; return the verdict."""
        if self._verdict is None and self._active_count == 0:
            self._finish(Verdict.WIN)
        while self._verdict is None:
            self.play_turn()
        return self._verdict

    def play_turn(self) -> TurnReport:
        """Play exactly one fire phase and one move phase.

        Raises:
            LevelFinishedError: If the level already has a verdict.
        """
        if self._verdict is not None:
            raise LevelFinishedError(
                f"level already finished with a {self._verdict.value}"
            )

        self._turn += 1
        report = TurnReport(turn=self._turn)
        logger.debug(f"Turn {self._turn}: {self._active_count} invaders active")
        self._event_bus.publish("turn_started", {
            "turn": self._turn,
            "active": self._active_count,
        })

        for tower in self._towers:
            shot = self._combat.fire(tower, self._invaders)
            if shot is not None:
                report.shots.append(shot)

        remaining = 0
        for invader in self._invaders:
            if not invader.is_active:
                continue
            invader.move()
            report.moved.append(invader)
            if invader.has_scored:
                self._active_count = remaining
                self.stats.record_turn()
                self._event_bus.publish("invader_scored", {
                    "turn": self._turn,
                    "target": invader.name,
                    "target_type": invader.type_id,
                })
                report.active_count = remaining
                report.scored = invader
                report.verdict = self._finish(Verdict.LOSS)
                return report
            remaining += 1

        self._active_count = remaining
        self.stats.record_turn()
        report.active_count = remaining
        if remaining == 0:
            report.verdict = self._finish(Verdict.WIN)
        return report

    def _finish(self, verdict: Verdict) -> Verdict:
        self._verdict = verdict
        logger.debug(f"Level finished after {self._turn} turns: {verdict.value}")
        self._event_bus.publish("level_finished", {
            "verdict": verdict.value,
            "turns": self._turn,
        })
        return verdict
