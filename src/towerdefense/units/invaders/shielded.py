"""ShieldedInvader -- a basic invader whose shield absorbs half the hits.

Every landed shot costs one draw from the injected random source.  A draw
below ``SHIELD_BLOCK_THRESHOLD`` lets the hit through; a draw at or above
it means the shield holds and no damage is taken.  The roll is separate
from (and after) the tower's own accuracy roll.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from towerdefense.units.base import (
    DamageOutcome,
    DamageResult,
    InvaderProfile,
    PathInvader,
)

if TYPE_CHECKING:
    from towerdefense.simulation.path import Path
    from towerdefense.simulation.random_source import RandomSource

SHIELD_BLOCK_THRESHOLD = 0.5


class ShieldedInvader(PathInvader):
    type_id = "shielded_invader"
    display_name = "Shielded Invader"
    profile = InvaderProfile(health=2, stride=1)

    def __init__(self, path: Path, rng: RandomSource,
                 name: Optional[str] = None) -> None:
        super().__init__(path, name)
        self._rng = rng

    def decrease_health(self, amount: int) -> DamageResult:
        if self._rng.next_uniform() < SHIELD_BLOCK_THRESHOLD:
            return self._take_hit(amount)
        return DamageResult(
            outcome=DamageOutcome.BLOCKED,
            amount=amount,
            health_before=self.health,
            health_after=self.health,
            neutralized=self.is_neutralized,
        )
