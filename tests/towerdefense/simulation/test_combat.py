"""Unit tests for fire_on and CombatSystem event publishing."""

from __future__ import annotations

import pytest

from towerdefense.comms.event_bus import drain
from towerdefense.simulation.combat import CombatSystem, ShotOutcome, fire_on
from towerdefense.simulation.random_source import FixedRandomSource
from towerdefense.simulation.stats import LevelStats
from towerdefense.units.invaders import (
    BasicInvader,
    ResurrectingInvader,
    ShieldedInvader,
    ToughInvader,
)
from towerdefense.units.towers import PowerfulTower, SniperTower, StandardTower


pytestmark = pytest.mark.unit


ALWAYS = FixedRandomSource([0.0])
NEVER = FixedRandomSource([0.99])


# --------------------------------------------------------------------------
# fire_on
# --------------------------------------------------------------------------

class TestFireOn:
    def test_no_target_draws_nothing(self, path, game_map):
        rng = FixedRandomSource([0.0])
        tower = StandardTower(game_map.location(7, 3))
        assert fire_on(tower, [BasicInvader(path)], rng) is None
        assert rng.draws == 0

    def test_hit(self, path, game_map):
        tower = StandardTower(game_map.location(0, 3))
        inv = BasicInvader(path)
        report = fire_on(tower, [inv], ALWAYS)
        assert report.outcome is ShotOutcome.HIT
        assert report.target is inv
        assert report.damage.applied == 1
        assert inv.health == 1
        assert not report.neutralized

    def test_miss(self, path, game_map):
        tower = StandardTower(game_map.location(0, 3))
        inv = BasicInvader(path)
        report = fire_on(tower, [inv], NEVER)
        assert report.outcome is ShotOutcome.MISSED
        assert report.damage is None
        assert inv.health == 2

    def test_only_one_target_per_shot(self, path, game_map):
        tower = PowerfulTower(game_map.location(0, 3))
        a, b = BasicInvader(path), BasicInvader(path)
        fire_on(tower, [a, b], ALWAYS)
        assert a.is_neutralized
        assert b.health == 2

    def test_powerful_neutralizes_basic_in_one_hit(self, path, game_map):
        tower = PowerfulTower(game_map.location(0, 3))
        report = fire_on(tower, [BasicInvader(path)], ALWAYS)
        assert report.neutralized
        assert report.location == game_map.location(0, 2)

    def test_sniper_always_hits_in_range(self, path, game_map):
        tower = SniperTower(game_map.location(1, 3))
        for roll in (0.0, 0.5, 0.99):
            inv = ToughInvader(path)
            report = fire_on(tower, [inv], FixedRandomSource([roll]))
            assert report.outcome is ShotOutcome.HIT

    def test_accuracy_then_shield_draw_order(self, path, game_map):
        # accuracy roll 0.0 hits, shield roll 0.7 blocks
        rng = FixedRandomSource([0.0, 0.7])
        tower = StandardTower(game_map.location(0, 3))
        inv = ShieldedInvader(path, rng)
        report = fire_on(tower, [inv], rng)
        assert report.outcome is ShotOutcome.BLOCKED
        assert rng.draws == 2
        assert inv.health == 2

    def test_missed_shot_skips_shield_roll(self, path, game_map):
        rng = FixedRandomSource([0.9])
        tower = StandardTower(game_map.location(0, 3))
        inv = ShieldedInvader(path, rng)
        report = fire_on(tower, [inv], rng)
        assert report.outcome is ShotOutcome.MISSED
        assert rng.draws == 1

    def test_shield_fails_when_both_gates_pass(self, path, game_map):
        rng = FixedRandomSource([0.0, 0.4])
        tower = StandardTower(game_map.location(0, 3))
        inv = ShieldedInvader(path, rng)
        assert fire_on(tower, [inv], rng).outcome is ShotOutcome.HIT
        assert inv.health == 1


# --------------------------------------------------------------------------
# CombatSystem
# --------------------------------------------------------------------------

class TestCombatSystem:
    def test_no_target_publishes_nothing(self, path, game_map, event_bus, events):
        combat = CombatSystem(event_bus, ALWAYS)
        tower = StandardTower(game_map.location(7, 3))
        assert combat.fire(tower, [BasicInvader(path)]) is None
        assert drain(events) == []

    def test_hit_event(self, path, game_map, event_bus, events):
        combat = CombatSystem(event_bus, ALWAYS)
        tower = StandardTower(game_map.location(0, 3), name="T1")
        combat.fire(tower, [BasicInvader(path, name="I1")])
        msgs = drain(events)
        assert [m["type"] for m in msgs] == ["invader_hit"]
        assert msgs[0]["data"]["tower"] == "T1"
        assert msgs[0]["data"]["target"] == "I1"
        assert msgs[0]["data"]["remaining_health"] == 1

    def test_neutralized_follows_hit(self, path, game_map, event_bus, events):
        combat = CombatSystem(event_bus, ALWAYS)
        tower = PowerfulTower(game_map.location(0, 3))
        combat.fire(tower, [BasicInvader(path)])
        msgs = drain(events)
        assert [m["type"] for m in msgs] == ["invader_hit", "invader_neutralized"]
        assert msgs[1]["data"]["location"] == "0 , 2"

    def test_miss_event(self, path, game_map, event_bus, events):
        combat = CombatSystem(event_bus, NEVER)
        combat.fire(StandardTower(game_map.location(0, 3)), [BasicInvader(path)])
        assert [m["type"] for m in drain(events)] == ["shot_missed"]

    def test_blocked_event(self, path, game_map, event_bus, events):
        rng = FixedRandomSource([0.0, 0.6])
        combat = CombatSystem(event_bus, rng)
        combat.fire(StandardTower(game_map.location(0, 3)),
                    [ShieldedInvader(path, rng)])
        assert [m["type"] for m in drain(events)] == ["shot_blocked"]

    def test_resurrection_events(self, path, game_map, event_bus, events):
        combat = CombatSystem(event_bus, ALWAYS)
        tower = PowerfulTower(game_map.location(0, 3))
        inv = ResurrectingInvader(path)
        combat.fire(tower, [inv])
        assert [m["type"] for m in drain(events)] == ["invader_hit", "invader_resurrected"]
        combat.fire(tower, [inv])
        assert [m["type"] for m in drain(events)] == ["invader_hit", "invader_neutralized"]

    def test_records_stats(self, path, game_map, event_bus):
        stats = LevelStats()
        rng = FixedRandomSource([0.0, 0.99])
        combat = CombatSystem(event_bus, rng, stats)
        tower = StandardTower(game_map.location(0, 3), name="T1")
        inv = BasicInvader(path)
        combat.fire(tower, [inv])
        combat.fire(tower, [inv])
        record = stats.for_tower(tower)
        assert record.shots_fired == 2
        assert record.hits == 1
        assert record.misses == 1
        assert record.damage_dealt == 1
        assert record.accuracy == 0.5
